from enum import Enum


class ExpressionError(Exception):
    '''
    Base of everything this package raises on bad user input.
    '''
    pass


class LexicalErrorKind(Enum):
    INVALID_CHARACTER = 'invalid-character'
    NO_DIGIT_AFTER_DECIMAL_POINT = 'no-digit-after-decimal-point'
    NO_DIGIT_AFTER_E = 'no-digit-after-e'


class ParseErrorKind(Enum):
    LEXICAL_ERROR = 'lexical-error'
    EXPECTED_EXPRESSION = 'expected-expression'
    EXPECTED_RIGHT_PAREN = 'expected-right-paren'
    EXPECTED_EXPRESSION_END = 'expected-expression-end'


class LexicalError(ExpressionError):
    '''
    Input that can't be cut into tokens.

    :param kind: LexicalErrorKind.
    :param position: Zero-based character offset where lexing failed.
    :param character: The offending character, for invalid characters.
    '''
    MESSAGES = {
        LexicalErrorKind.INVALID_CHARACTER:
            'Use of invalid character {character!r} at index {position}.',
        LexicalErrorKind.NO_DIGIT_AFTER_DECIMAL_POINT:
            'Expected a digit after the decimal point at index {position}.',
        LexicalErrorKind.NO_DIGIT_AFTER_E:
            'Expected a digit in the floating point exponent at index '
            '{position}.',
    }

    def __init__(self, kind, position, character=None):
        self.kind = kind
        self.position = position
        self.character = character
        super().__init__(type(self).MESSAGES[kind].format(
            position=position,
            character=character,
        ))


class ParseError(ExpressionError):
    '''
    Input that lexes but doesn't fit the grammar, or doesn't lex at all.

    :param kind: ParseErrorKind.
    :param token: Token the parser was looking at when it gave up.
    :param lexical_error: Underlying LexicalError, for LEXICAL_ERROR.
    '''
    MESSAGES = {
        ParseErrorKind.EXPECTED_EXPRESSION:
            'Expected an expression at index {position}, '
            'but got {token} instead.',
        ParseErrorKind.EXPECTED_RIGHT_PAREN:
            'Expected a right parenthesis at index {position}, '
            'but got {token} instead.',
        ParseErrorKind.EXPECTED_EXPRESSION_END:
            'Expected the end of the expression at index {position}, '
            'but got {token} instead.',
    }

    def __init__(self, kind, token, lexical_error=None):
        assert (kind is ParseErrorKind.LEXICAL_ERROR) == \
            (lexical_error is not None)
        self.kind = kind
        self.token = token
        self.lexical_error = lexical_error
        if lexical_error is not None:
            message = str(lexical_error)
        else:
            message = type(self).MESSAGES[kind].format(
                position=token.position,
                token=token.description,
            )
        super().__init__(message)

    @property
    def position(self):
        return self.token.position


class DecodeError(ExpressionError):
    '''
    Serialized value that is neither a number nor an expression string.
    '''
    pass
