'''
Recursive descent parser for arithmetic expressions.

One token of lookahead, pulled from the lexer as it goes. Each grammar rule
is one method; see Parser.GRAMMAR.

Parentheses and prefix operators recurse once per level, so absurdly deep
nesting runs into Python's recursion limit (RecursionError). That is the
only bound on input.
'''

import logging

from .errors import ParseError, ParseErrorKind
from .expression import BinaryOperation, Grouping, Number, PrefixOperation
from .lexer import Lexer, TokenType
from .operators import Operator


logger = logging.getLogger(__name__)


class Parser:
    '''
    Parser for a single expression.

    Holds exactly one current token at a time. Single use: parse() consumes
    the lexer.
    '''
    GRAMMAR = '''\
expression           := addition-level EOF
addition-level       := multiplication-level
                        ( ('+'|'-') multiplication-level )*
multiplication-level := prefix-level ( ('*'|'/') prefix-level )*
prefix-level         := ('+'|'-') prefix-level | primary
primary              := NUMBER | '(' addition-level ')'\
'''

    ADDITIVE = {Operator.ADDITION, Operator.SUBTRACTION}
    MULTIPLICATIVE = {Operator.MULTIPLICATION, Operator.DIVISION}

    def __init__(self, lexer):
        '''
        Create parser reading from lexer, and read the first token.

        :raises ParseError: If the very first token doesn't lex.
        '''
        self.lexer = lexer
        self.current = None
        self._pull()

    @classmethod
    def from_string(cls, string):
        return cls(Lexer(string))

    @property
    def at_end(self):
        return self.current.type is TokenType.END

    def parse(self):
        '''
        Parse the whole input into an expression tree.

        :raises ParseError: On anything but exactly one expression.
        '''
        expression = self._addition()
        if not self.at_end:
            raise ParseError(ParseErrorKind.EXPECTED_EXPRESSION_END,
                             self.current)
        return expression

    def _addition(self):
        '''
        multiplication-level ( ('+'|'-') multiplication-level )*
        '''
        expression = self._multiplication()
        while True:
            token = self._match_operator(self.ADDITIVE)
            if token is None:
                return expression
            right = self._multiplication()
            expression = BinaryOperation(token.value, expression, right)

    def _multiplication(self):
        '''
        prefix-level ( ('*'|'/') prefix-level )*
        '''
        expression = self._prefix()
        while True:
            token = self._match_operator(self.MULTIPLICATIVE)
            if token is None:
                return expression
            right = self._prefix()
            expression = BinaryOperation(token.value, expression, right)

    def _prefix(self):
        '''
        ('+'|'-') prefix-level | primary
        '''
        token = self._match_operator(self.ADDITIVE)
        if token is None:
            return self._primary()
        return PrefixOperation(token.value.as_prefix(), self._prefix())

    def _primary(self):
        '''
        NUMBER | '(' addition-level ')'
        '''
        token = self._match(TokenType.NUMBER)
        if token is not None:
            return Number(token.value)
        if self._match(TokenType.LEFT_PAREN) is None:
            raise ParseError(ParseErrorKind.EXPECTED_EXPRESSION,
                             self.current)
        expression = self._addition()
        if self._match(TokenType.RIGHT_PAREN) is None:
            raise ParseError(ParseErrorKind.EXPECTED_RIGHT_PAREN,
                             self.current)
        return Grouping(expression)

    def _match(self, type_):
        '''
        Consume and return current token if of type_, else None.
        '''
        if self.at_end or self.current.type is not type_:
            return None
        return self._advance()

    def _match_operator(self, operators):
        '''
        Consume and return current token if one of these operators.
        '''
        if self.at_end or self.current.type is not TokenType.OPERATOR or \
           self.current.value not in operators:
            return None
        return self._advance()

    def _advance(self):
        '''
        Return current token, moving on to the next one.
        '''
        assert not self.at_end, 'Advanced past the end of the expression'
        token = self.current
        self._pull()
        return token

    def _pull(self):
        self.current = self.lexer.next_token()
        if self.current.type is TokenType.ERROR:
            error = self.current.value
            logger.debug('Lexical error: %s', error)
            raise ParseError(ParseErrorKind.LEXICAL_ERROR,
                             self.current,
                             lexical_error=error) from error
