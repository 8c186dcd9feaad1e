"""
Lexer implementation for contract-call text.

The Lexer tokenizes text such as ``transfer(0x5FfC...,100)`` into a
stream of tokens that can be consumed by the parser.
"""

from typing import List, Tuple

from ..errors import CallSyntaxError
from .tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_OPS


class Lexer:
    """
    Lexer for contract-call text.

    Converts source text into a list of tokens for parsing.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> str:
        """Look ahead in the source without consuming."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ''
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def skip_whitespace(self) -> None:
        """Skip over whitespace characters."""
        ch = self.peek()
        while ch and ch in ' \t\r\n':
            self.advance()
            ch = self.peek()

    def read_string(self) -> str:
        """Read a string literal including its quotes."""
        start_line, start_col = self.line, self.column
        quote = self.advance()
        result = quote
        while self.peek() and self.peek() != quote:
            if self.peek() == '\\':
                result += self.advance()
            result += self.advance()
        if self.peek() != quote:
            raise CallSyntaxError('unterminated string literal', start_line, start_col)
        result += self.advance()
        return result

    def read_word_tail(self, separators: bool = True) -> str:
        """Read trailing alphanumerics so malformed literals stay one token.

        Underscores are dropped as digit separators when ``separators`` is
        set and kept verbatim otherwise.
        """
        result = ''
        while self.peek() and (self.peek().isalnum() or self.peek() == '_'):
            if self.peek() != '_' or not separators:
                result += self.advance()
            else:
                self.advance()  # skip digit separator
        return result

    def read_number(self) -> Tuple[str, TokenType]:
        """Read a numeric literal (decimal or hex)."""
        result = ''
        token_type = TokenType.NUMBER

        if self.peek() == '-':
            result += self.advance()

        if self.peek() == '0' and self.peek(1) in ('x', 'X'):
            # Hexadecimal number
            result += self.advance()  # 0
            result += self.advance()  # x
            token_type = TokenType.HEX_NUMBER
            result += self.read_word_tail(separators=False)
        else:
            result += self.read_word_tail()
            # Keep fractional parts so the coercer can reject them
            if self.peek() == '.' and self.peek(1).isdigit():
                result += self.advance()
                result += self.read_word_tail()

        return result, token_type

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        result = ''
        while self.peek() and (self.peek().isalnum() or self.peek() == '_'):
            result += self.advance()
        return result

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return a list of tokens.

        Returns:
            List of Token objects, ending with an EOF token.
        """
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            start_line = self.line
            start_col = self.column
            ch = self.peek()

            # String literals
            if ch in '"\'':
                value = self.read_string()
                self.tokens.append(Token(TokenType.STRING_LITERAL, value, start_line, start_col))
                continue

            # Numbers, including negative decimals
            if ch.isdigit() or (ch == '-' and self.peek(1).isdigit()):
                value, token_type = self.read_number()
                self.tokens.append(Token(token_type, value, start_line, start_col))
                continue

            # Identifiers and keywords
            if ch.isalpha() or ch == '_':
                value = self.read_identifier()
                token_type = KEYWORDS.get(value.lower(), TokenType.IDENTIFIER)
                self.tokens.append(Token(token_type, value, start_line, start_col))
                continue

            # Delimiters
            if ch in SINGLE_CHAR_OPS:
                self.advance()
                self.tokens.append(Token(SINGLE_CHAR_OPS[ch], ch, start_line, start_col))
                continue

            raise CallSyntaxError(f'unexpected character {ch!r}', start_line, start_col)

        self.tokens.append(Token(TokenType.EOF, '', self.line, self.column))
        return self.tokens
