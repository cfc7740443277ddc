'''
Expression tree.

Four node kinds, all immutable, all sharing the same two read-only
properties:

- value: the node evaluated to a float.
- description: the node rendered back to canonical text.

Nodes own their children; nothing is shared between trees, so trees may be
handed across threads freely once built.
'''

import numbers

from .operators import Operator, PrefixOperator


class Expression:
    '''
    Base of all expression tree nodes.
    '''
    __slots__ = ()

    @property
    def value(self):
        raise NotImplementedError

    @property
    def description(self):
        raise NotImplementedError

    def _key(self):
        raise NotImplementedError

    def __setattr__(self, name, value):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    def __delattr__(self, name):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    def _init(self, **fields):
        '''
        Set slots once, at construction, bypassing immutability.
        '''
        for name, value in fields.items():
            object.__setattr__(self, '_' + name, value)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self), self._key()))

    def __str__(self):
        return self.description

    def __repr__(self):
        return '{}({})'.format(type(self).__name__,
                               ', '.join(map(repr, self._key())))


class Number(Expression):
    __slots__ = '_value',

    def __init__(self, value):
        # Strings go through the lexer, not float()
        if not isinstance(value, numbers.Real) or isinstance(value, bool):
            raise TypeError('Not a number: {!r}'.format(value))
        self._init(value=float(value))

    @property
    def value(self):
        return self._value

    @property
    def description(self):
        return repr(self._value)

    def _key(self):
        return self._value,


class PrefixOperation(Expression):
    '''
    Unary plus or minus applied to an operand: -x, +x.
    '''
    __slots__ = '_operator', '_operand'

    def __init__(self, operator, operand):
        if not isinstance(operator, PrefixOperator):
            raise TypeError('Not a prefix operator: {!r}'.format(operator))
        self._init(operator=operator, operand=operand)

    @property
    def operator(self):
        return self._operator

    @property
    def operand(self):
        return self._operand

    @property
    def value(self):
        return self._operator.apply(self._operand.value)

    @property
    def description(self):
        return self._operator.symbol + self._operand.description

    def _key(self):
        return self._operator, self._operand


class BinaryOperation(Expression):
    '''
    Arithmetic on two operands: left + right, left / right, etc.
    '''
    __slots__ = '_operator', '_left', '_right'

    def __init__(self, operator, left, right):
        if not isinstance(operator, Operator):
            raise TypeError('Not a binary operator: {!r}'.format(operator))
        self._init(operator=operator, left=left, right=right)

    @property
    def operator(self):
        return self._operator

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    @property
    def value(self):
        return self._operator.apply(self._left.value, self._right.value)

    @property
    def description(self):
        return '{} {} {}'.format(self._left.description,
                                 self._operator.symbol,
                                 self._right.description)

    def _key(self):
        return self._operator, self._left, self._right


class Grouping(Expression):
    '''
    Parenthesized expression.

    Only there to keep the parentheses when rendering; evaluation order is
    already fixed by the shape of the tree.
    '''
    __slots__ = '_expression',

    def __init__(self, expression):
        self._init(expression=expression)

    @property
    def expression(self):
        return self._expression

    @property
    def value(self):
        return self._expression.value

    @property
    def description(self):
        return '(' + self._expression.description + ')'

    def _key(self):
        return self._expression,
