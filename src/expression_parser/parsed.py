import logging

from .expression import Expression, Number
from .parser import Parser


logger = logging.getLogger(__name__)


class ParsedExpression(Expression):
    '''
    Expression parsed from text, or wrapping a plain number.

    Behaves like its root expression: same value, same description.
    '''
    __slots__ = '_expression',

    def __init__(self, expression):
        '''
        Wrap an already built expression tree.

        Prefer parse() or from_number().
        '''
        if not isinstance(expression, Expression):
            raise TypeError('Not an expression: {!r}'.format(expression))
        self._init(expression=expression)

    @classmethod
    def parse(cls, string):
        '''
        Parse string into an expression.

        :raises ParseError: If string isn't exactly one expression.
        '''
        logger.debug('Parsing %r', string)
        expression = Parser.from_string(string).parse()
        logger.debug('Parsed %r as %s', string, expression)
        return cls(expression)

    @classmethod
    def from_number(cls, value):
        '''
        Wrap value as a number expression, without parsing anything.
        '''
        return cls(Number(value))

    @property
    def expression(self):
        '''
        Root of the expression tree.
        '''
        return self._expression

    @property
    def is_number(self):
        '''
        Whether the whole expression is a single number.
        '''
        return isinstance(self._expression, Number)

    @property
    def value(self):
        return self._expression.value

    @property
    def description(self):
        return self._expression.description

    def _key(self):
        return self._expression,

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.description)


def parse(string):
    '''
    Parse string into a ParsedExpression.

    :raises ParseError: If string isn't exactly one expression.
    '''
    return ParsedExpression.parse(string)


def from_number(value):
    '''
    Wrap a number as a ParsedExpression.

    :raises TypeError: If value isn't a real number; parse strings instead.
    '''
    return ParsedExpression.from_number(value)
