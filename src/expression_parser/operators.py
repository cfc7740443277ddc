from enum import Enum
import operator
import math


class Operator(Enum):
    '''
    Binary arithmetic operator, valued by its one character symbol.
    '''
    ADDITION = '+'
    SUBTRACTION = '-'
    MULTIPLICATION = '*'
    DIVISION = '/'

    @property
    def symbol(self):
        return self.value

    def apply(self, left, right):
        '''
        Apply operator to both operands, IEEE semantics.

        Division by zero gives an infinity or NaN rather than raising
        ZeroDivisionError like Python's float division does.
        '''
        if self is Operator.DIVISION:
            return _divide(left, right)
        return _BINARY[self](left, right)

    def as_prefix(self):
        '''
        Return the prefix form of an additive operator.
        '''
        assert self in (Operator.ADDITION, Operator.SUBTRACTION), \
            '{} has no prefix form'.format(self.symbol)
        return PrefixOperator(self.value)

    def __str__(self):
        return self.value


class PrefixOperator(Enum):
    '''
    Unary operator written before its operand.

    Only the additive operators have a prefix form, so only they are here.
    '''
    PLUS = '+'
    MINUS = '-'

    @property
    def symbol(self):
        return self.value

    def apply(self, operand):
        return _UNARY[self](operand)

    def __str__(self):
        return self.value


def _divide(left, right):
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0.0 or math.isnan(left):
            return math.nan
        # Signed zeroes count: 1/-0.0 is -inf.
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


_BINARY = {
    Operator.ADDITION: operator.__add__,
    Operator.SUBTRACTION: operator.__sub__,
    Operator.MULTIPLICATION: operator.__mul__,
}

_UNARY = {
    PrefixOperator.PLUS: operator.__pos__,
    PrefixOperator.MINUS: operator.__neg__,
}
