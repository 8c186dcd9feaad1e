"""
Call-text parser implementation.

The Parser converts a stream of tokens from the Lexer into a
CallExpression tree. Grammar:

    call  := IDENTIFIER [ '(' [ arg { ',' arg } ] ')' ] EOF
    arg   := NUMBER | HEX_NUMBER | STRING_LITERAL | TRUE | FALSE
           | IDENTIFIER | array
    array := '[' [ arg { ',' arg } ] ']'
"""

from typing import List

from ..errors import CallSyntaxError
from ..lexer import Token, TokenType
from .ast_nodes import (
    Argument,
    ArrayLiteral,
    CallExpression,
    LiteralKind,
    ScalarLiteral,
)

# Token types that start a scalar literal, and the literal kind they produce.
# Bare identifiers are treated as boolean spellings; the coercer rejects
# anything that is not true/false.
LITERAL_TOKENS = {
    TokenType.NUMBER: LiteralKind.INT,
    TokenType.HEX_NUMBER: LiteralKind.HEX,
    TokenType.STRING_LITERAL: LiteralKind.STRING,
    TokenType.TRUE: LiteralKind.BOOL,
    TokenType.FALSE: LiteralKind.BOOL,
    TokenType.IDENTIFIER: LiteralKind.BOOL,
}


class Parser:
    """
    Recursive descent parser for contract-call text.

    Parses a stream of tokens into a CallExpression.
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self, offset: int = 0) -> Token:
        """Look ahead in the token stream without consuming."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def current(self) -> Token:
        return self.peek()

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current()
        self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current().type in types

    def expect(self, token_type: TokenType, message: str = '') -> Token:
        """Consume the current token if it matches, otherwise raise an error."""
        if self.current().type != token_type:
            token = self.current()
            found = token.value or token.type.name
            detail = f': {message}' if message else ''
            raise CallSyntaxError(
                f'expected {token_type.name} but got {found}{detail}',
                token.line, token.column,
            )
        return self.advance()

    # =========================================================================
    # TOP-LEVEL PARSING
    # =========================================================================

    def parse(self) -> CallExpression:
        """Parse the whole call text into a CallExpression."""
        name_token = self.current()
        if not self.match(TokenType.IDENTIFIER, TokenType.TRUE, TokenType.FALSE):
            self.expect(TokenType.IDENTIFIER, 'method name')
        self.advance()
        call = CallExpression(function_name=name_token.value)

        # A bare method name is a call with no arguments
        if self.match(TokenType.LPAREN):
            self.advance()
            call.arguments = self.parse_argument_list(TokenType.RPAREN)
            self.expect(TokenType.RPAREN)

        self.expect(TokenType.EOF, 'trailing text after call')
        return call

    def parse_argument_list(self, closing: TokenType) -> List[Argument]:
        """Parse comma-separated arguments up to (not including) the closing token."""
        args: List[Argument] = []
        if self.match(closing):
            return args
        args.append(self.parse_argument())
        while self.match(TokenType.COMMA):
            self.advance()
            args.append(self.parse_argument())
        return args

    # =========================================================================
    # ARGUMENT PARSING
    # =========================================================================

    def parse_argument(self) -> Argument:
        token = self.current()
        if self.match(TokenType.LBRACKET):
            return Argument(value=self.parse_array())
        if token.type in LITERAL_TOKENS:
            self.advance()
            literal = ScalarLiteral(
                kind=LITERAL_TOKENS[token.type],
                text=token.value,
                line=token.line,
                column=token.column,
            )
            return Argument(value=literal)
        found = token.value or token.type.name
        raise CallSyntaxError(f'expected an argument but got {found}', token.line, token.column)

    def parse_array(self) -> ArrayLiteral:
        start = self.expect(TokenType.LBRACKET)
        elements = self.parse_argument_list(TokenType.RBRACKET)
        self.expect(TokenType.RBRACKET)
        return ArrayLiteral(elements=elements, line=start.line, column=start.column)
