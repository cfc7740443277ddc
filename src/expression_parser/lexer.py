from collections import namedtuple
from enum import Enum
from functools import reduce
import operator

import regex

from .errors import LexicalError, LexicalErrorKind
from .operators import Operator


class TokenType(Enum):
    LEFT_PAREN = 'left-paren'
    RIGHT_PAREN = 'right-paren'
    OPERATOR = 'operator'
    NUMBER = 'number'
    ERROR = 'error'
    END = 'end'


class Token(namedtuple('Token', 'type position value')):
    '''
    Token and where it started in the input.

    value is the Operator for operators, the float for numbers, and the
    LexicalError for errors. None otherwise.
    '''
    __slots__ = ()

    DESCRIPTIONS = {
        TokenType.LEFT_PAREN: 'a left parenthesis',
        TokenType.RIGHT_PAREN: 'a right parenthesis',
        TokenType.OPERATOR: "an operator '{value}'",
        TokenType.NUMBER: 'a number ({value!r})',
        TokenType.ERROR: 'an error',
        TokenType.END: 'the end of the string',
    }

    @property
    def description(self):
        '''
        How to name this token in an error message.
        '''
        return type(self).DESCRIPTIONS[self.type].format(value=self.value)


class _State(Enum):
    '''
    Where the number scanner is within a number.
    '''
    INTEGER = 'integer'
    BEGIN_DECIMAL = 'begin-decimal'
    DECIMAL = 'decimal'
    BEGIN_EXPONENT = 'begin-exponent'
    BEGIN_SIGNED_EXPONENT = 'begin-signed-exponent'
    DECIMAL_WITH_EXPONENT = 'decimal-with-exponent'


class Lexer:
    '''
    Lexer for arithmetic expressions.

    Pulls one token at a time out of the input on request, remembering where
    it left off. Can't be rewound: make another Lexer for that.
    '''
    # Default regex flags for matching characters
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    # Decimal digits, but only the ASCII ones; ٣ and friends are invalid.
    DIGIT = regex.compile(r'[\p{Nd}&&[\x00-\x7F]]', flags=FLAGS)
    # Skipped between tokens. Not newlines!
    BLANK = regex.compile(r'[\ \t]', flags=FLAGS)

    PUNCTUATION = {
        '(': TokenType.LEFT_PAREN,
        ')': TokenType.RIGHT_PAREN,
    }
    OPERATORS = {op.symbol: op for op in Operator}

    # Character classes within a number, besides digits.
    POINT = '.'
    EXPONENT = 'eE'
    SIGN = '+-'

    # (state, character class) -> next state. Anything missing ends the
    # number.
    TRANSITIONS = {
        (_State.INTEGER, 'digit'): _State.INTEGER,
        (_State.INTEGER, 'point'): _State.BEGIN_DECIMAL,
        (_State.INTEGER, 'exponent'): _State.BEGIN_EXPONENT,
        (_State.BEGIN_DECIMAL, 'digit'): _State.DECIMAL,
        (_State.DECIMAL, 'digit'): _State.DECIMAL,
        (_State.DECIMAL, 'exponent'): _State.BEGIN_EXPONENT,
        (_State.BEGIN_EXPONENT, 'sign'): _State.BEGIN_SIGNED_EXPONENT,
        (_State.BEGIN_EXPONENT, 'digit'): _State.DECIMAL_WITH_EXPONENT,
        (_State.BEGIN_SIGNED_EXPONENT, 'digit'): _State.DECIMAL_WITH_EXPONENT,
        (_State.DECIMAL_WITH_EXPONENT, 'digit'): _State.DECIMAL_WITH_EXPONENT,
    }
    # States a number can't end in, and what's wrong if it does.
    INCOMPLETE = {
        _State.BEGIN_DECIMAL: LexicalErrorKind.NO_DIGIT_AFTER_DECIMAL_POINT,
        _State.BEGIN_EXPONENT: LexicalErrorKind.NO_DIGIT_AFTER_E,
        _State.BEGIN_SIGNED_EXPONENT: LexicalErrorKind.NO_DIGIT_AFTER_E,
    }

    def __init__(self, string):
        '''
        Create lexer at the start of string.
        '''
        self.string = string
        # Start of the token being lexed
        self.start = 0
        # Next character to be read
        self.position = 0

    def __iter__(self):
        '''
        Yield all remaining tokens, the end token included.
        '''
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.END:
                return

    @property
    def at_end(self):
        return self.position >= len(self.string)

    def isdigit(self, character):
        return self.DIGIT.fullmatch(character) is not None

    def isblank(self, character):
        return self.BLANK.fullmatch(character) is not None

    def next_token(self):
        '''
        Lex and return the next token.

        Once the input is exhausted, returns an end token, however many times
        it's asked.
        '''
        while not self.at_end:
            self.start = self.position
            character = self._advance()
            if self.isblank(character):
                continue
            elif character in self.PUNCTUATION:
                return self._token(self.PUNCTUATION[character])
            elif character in self.OPERATORS:
                return self._token(TokenType.OPERATOR,
                                   self.OPERATORS[character])
            elif self.isdigit(character):
                return self._number()
            else:
                return self._error(LexicalErrorKind.INVALID_CHARACTER,
                                   self.start,
                                   character=character)
        return Token(TokenType.END, len(self.string), None)

    def _advance(self):
        character = self.string[self.position]
        self.position += 1
        return character

    def _token(self, type_, value=None):
        return Token(type_, self.start, value)

    def _error(self, kind, position, character=None):
        return Token(TokenType.ERROR, position,
                     LexicalError(kind, position, character=character))

    def _classify(self, character):
        '''
        Return character class of character within a number, if any.
        '''
        if self.isdigit(character):
            return 'digit'
        elif character == self.POINT:
            return 'point'
        elif character in self.EXPONENT:
            return 'exponent'
        elif character in self.SIGN:
            return 'sign'
        return None

    def _number(self):
        '''
        Scan the rest of a number whose first digit was just read.
        '''
        state = _State.INTEGER
        current = self.position
        while current < len(self.string):
            key = state, self._classify(self.string[current])
            if key not in self.TRANSITIONS:
                break
            state = self.TRANSITIONS[key]
            current += 1

        # Consume what was scanned either way, so the lexer never stalls.
        self.position = current
        if state in self.INCOMPLETE:
            # Point at where the missing digit should've been
            return self._error(self.INCOMPLETE[state], current)
        # Can't fail: the states above only accept float literals.
        return self._token(TokenType.NUMBER,
                           float(self.string[self.start:current]))
