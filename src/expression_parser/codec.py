'''
JSON boundary for expressions.

Plain numbers serialize as JSON numbers, so simple configs stay terse;
anything else serializes as its description string. Deserializing tries a
number first, then parses a string.
'''

import json
import math
import numbers

from .errors import DecodeError
from .parsed import ParsedExpression


def encode(expression):
    '''
    Return JSON-ready value for expression: a float or a string.
    '''
    if expression.is_number:
        return expression.value
    return expression.description


def decode(data):
    '''
    Return ParsedExpression from a JSON-decoded value.

    :raises DecodeError: If data is neither a number nor a string.
    :raises ParseError: If data is a string but not an expression.
    '''
    # bool is an int, but true isn't 1.0
    if isinstance(data, numbers.Real) and not isinstance(data, bool):
        try:
            return ParsedExpression.from_number(data)
        except OverflowError:
            # Integers past the float range go infinite, like 1e400 does
            return ParsedExpression.from_number(
                math.inf if data > 0 else -math.inf)
    elif isinstance(data, str):
        return ParsedExpression.parse(data)
    raise DecodeError('Cannot decode {!r} as an expression'.format(data))


class ExpressionEncoder(json.JSONEncoder):
    '''
    JSON encoder that handles ParsedExpressions anywhere in a document.
    '''

    def default(self, obj):
        if isinstance(obj, ParsedExpression):
            return encode(obj)
        return super().default(obj)


def dumps(obj, **kwargs):
    '''
    Serialize obj, which may be or contain ParsedExpressions, to JSON.
    '''
    return json.dumps(obj, cls=ExpressionEncoder, **kwargs)


def loads(string, **kwargs):
    '''
    Deserialize a single JSON number or string into a ParsedExpression.
    '''
    return decode(json.loads(string, **kwargs))
