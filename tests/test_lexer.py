'''
Expression lexer tests
'''

from expression_parser.errors import LexicalError, LexicalErrorKind
from expression_parser.lexer import Lexer, Token, TokenType
from expression_parser.operators import Operator

from pytest import mark


def types(string):
    return [token.type for token in Lexer(string)]


def test_punctuation_and_operators():
    tokens = list(Lexer('(+-*/)'))
    assert [t.type for t in tokens] == [TokenType.LEFT_PAREN,
                                        TokenType.OPERATOR,
                                        TokenType.OPERATOR,
                                        TokenType.OPERATOR,
                                        TokenType.OPERATOR,
                                        TokenType.RIGHT_PAREN,
                                        TokenType.END]
    assert [t.value for t in tokens[1:5]] == list(Operator)
    assert [t.position for t in tokens] == [0, 1, 2, 3, 4, 5, 6]


def test_blanks_skipped():
    tokens = list(Lexer(' \t 1 +\t2  '))
    assert tokens == [Token(TokenType.NUMBER, 3, 1.0),
                      Token(TokenType.OPERATOR, 5, Operator.ADDITION),
                      Token(TokenType.NUMBER, 7, 2.0),
                      Token(TokenType.END, 10, None)]


def test_empty():
    assert list(Lexer('')) == [Token(TokenType.END, 0, None)]


def test_end_repeats():
    lexer = Lexer('1')
    assert lexer.next_token().type is TokenType.NUMBER
    for _ in range(3):
        assert lexer.next_token() == Token(TokenType.END, 1, None)


@mark.parametrize('string, value', [
    ('0', 0.0),
    ('42', 42.0),
    ('2.5', 2.5),
    ('2.50', 2.5),
    ('1e3', 1000.0),
    ('1E3', 1000.0),
    ('2.5e-1', 0.25),
    ('2.5E+2', 250.0),
    ('007', 7.0),
])
def test_number(string, value):
    tokens = list(Lexer(string))
    assert tokens == [Token(TokenType.NUMBER, 0, value),
                      Token(TokenType.END, len(string), None)]


def test_number_stops_at_operator():
    # The sign only belongs to the number straight after an e
    assert types('1-2') == [TokenType.NUMBER, TokenType.OPERATOR,
                            TokenType.NUMBER, TokenType.END]
    assert [t.value for t in Lexer('1e-2-3')][:3] == [0.01,
                                                      Operator.SUBTRACTION,
                                                      3.0]


@mark.parametrize('string, kind, position', [
    ('3.', LexicalErrorKind.NO_DIGIT_AFTER_DECIMAL_POINT, 2),
    ('3.+1', LexicalErrorKind.NO_DIGIT_AFTER_DECIMAL_POINT, 2),
    ('1 + 3.e5', LexicalErrorKind.NO_DIGIT_AFTER_DECIMAL_POINT, 6),
    ('1e', LexicalErrorKind.NO_DIGIT_AFTER_E, 2),
    ('1e+', LexicalErrorKind.NO_DIGIT_AFTER_E, 3),
    ('1.5E-x', LexicalErrorKind.NO_DIGIT_AFTER_E, 5),
    ('f', LexicalErrorKind.INVALID_CHARACTER, 0),
    ('  x', LexicalErrorKind.INVALID_CHARACTER, 2),
    ('.5', LexicalErrorKind.INVALID_CHARACTER, 0),
    ('1\n', LexicalErrorKind.INVALID_CHARACTER, 1),
])
def test_errors(string, kind, position):
    token = next(token
                 for token in Lexer(string)
                 if token.type is TokenType.ERROR)
    assert token.position == position
    assert isinstance(token.value, LexicalError)
    assert token.value.kind is kind
    assert token.value.position == position


def test_non_ascii_digit_invalid():
    token = Lexer('\N{ARABIC-INDIC DIGIT THREE}').next_token()
    assert token.type is TokenType.ERROR
    assert token.value.kind is LexicalErrorKind.INVALID_CHARACTER
    assert token.value.character == '\N{ARABIC-INDIC DIGIT THREE}'


def test_positions_are_characters_not_bytes():
    tokens = list(Lexer('\N{GREEK SMALL LETTER PI}'))
    assert tokens[0].type is TokenType.ERROR
    assert tokens[-1] == Token(TokenType.END, 1, None)

    lexer = Lexer('1 \N{EM SPACE}')
    lexer.next_token()
    assert lexer.next_token().position == 2


def test_errors_not_skipped():
    assert types('1 $ 2') == [TokenType.NUMBER, TokenType.ERROR,
                              TokenType.NUMBER, TokenType.END]


@mark.parametrize('token, description', [
    (Token(TokenType.LEFT_PAREN, 0, None), 'a left parenthesis'),
    (Token(TokenType.RIGHT_PAREN, 0, None), 'a right parenthesis'),
    (Token(TokenType.OPERATOR, 0, Operator.ADDITION), "an operator '+'"),
    (Token(TokenType.NUMBER, 0, 5.0), 'a number (5.0)'),
    (Token(TokenType.END, 0, None), 'the end of the string'),
])
def test_description(token, description):
    assert token.description == description
