'''
Arithmetic expression parser.

Parses plain arithmetic (numbers, + - * /, prefix + and -, parentheses) into
an immutable expression tree, which can be evaluated to a float and
rendered back to canonical text:

    >>> expression = parse('5+6*(2+3)')
    >>> expression.value
    35.0
    >>> expression.description
    '5.0 + 6.0 * (2.0 + 3.0)'

Bad input raises ParseError, naming what went wrong and where.

Numbers are floats, with IEEE semantics: 1/0 is inf, not an error. No
variables, no functions.
'''

from .cli import CLI
from .errors import (ExpressionError, LexicalError, LexicalErrorKind,
                     ParseError, ParseErrorKind, DecodeError)
from .expression import (Expression, Number, PrefixOperation,
                         BinaryOperation, Grouping)
from .lexer import Lexer, Token, TokenType
from .operators import Operator, PrefixOperator
from .parsed import ParsedExpression, parse, from_number
from .parser import Parser


__all__ = (
    'parse', 'from_number', 'ParsedExpression',
    'Expression', 'Number', 'PrefixOperation', 'BinaryOperation', 'Grouping',
    'Operator', 'PrefixOperator',
    'Lexer', 'Token', 'TokenType', 'Parser',
    'ExpressionError', 'LexicalError', 'LexicalErrorKind', 'ParseError',
    'ParseErrorKind', 'DecodeError',
    'CLI',
)
