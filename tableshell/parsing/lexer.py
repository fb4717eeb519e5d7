# ==============================================
# Lexer
# ==============================================
#
# PURPOSE:
#   Turn one statement line into a flat token list for the
#   recursive-descent parser.
#
# TOKENS:
# -------
# - WORD    → maximal run of characters that are not whitespace
#             or punctuation. Keywords are WORDs too; the parser
#             compares them case-insensitively.
# - STRING  → 'single' or "double" quoted text, quote doubled to
#             escape. Only a quote at the start of a token opens one.
# - COMMA, LPAREN, RPAREN, SEMI
# - EOF
#
# Every token keeps its start/end offsets so the parser can
# slice multi-word names and values straight out of the source.
#
# ==============================================

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..errors import StatementSyntaxError


class TokenType(Enum):
    WORD = "word"
    STRING = "string"
    COMMA = ","
    LPAREN = "("
    RPAREN = ")"
    SEMI = ";"
    EOF = "eof"


@dataclass
class Token:
    type: TokenType
    value: str
    start: int
    end: int

    def is_keyword(self, keyword: str) -> bool:
        """True for a bare WORD spelling `keyword` in any case."""
        return self.type is TokenType.WORD and self.value.lower() == keyword.lower()


PUNCTUATION = {
    ",": TokenType.COMMA,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMI,
}

QUOTES = ("'", '"')


class Lexer:
    """Single-pass lexer over one input line."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        while True:
            token = self._next()
            tokens.append(token)
            if token.type is TokenType.EOF:
                return tokens

    def _peek(self) -> Optional[str]:
        return self.source[self.pos] if self.pos < len(self.source) else None

    def _next(self) -> Token:
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self.pos += 1

        start = self.pos
        ch = self._peek()
        if ch is None:
            return Token(TokenType.EOF, "", start, start)

        if ch in PUNCTUATION:
            self.pos += 1
            return Token(PUNCTUATION[ch], ch, start, self.pos)

        if ch in QUOTES:
            return self._lex_string(ch)

        return self._lex_word()

    def _lex_string(self, quote: str) -> Token:
        start = self.pos
        self.pos += 1  # opening quote
        chars: List[str] = []
        while True:
            ch = self._peek()
            if ch is None:
                raise StatementSyntaxError(f"unterminated string starting at column {start + 1}")
            self.pos += 1
            if ch == quote:
                # doubled quote is an escaped quote
                if self._peek() == quote:
                    self.pos += 1
                    chars.append(quote)
                    continue
                break
            chars.append(ch)
        return Token(TokenType.STRING, "".join(chars), start, self.pos)

    def _lex_word(self) -> Token:
        start = self.pos
        while True:
            ch = self._peek()
            # a quote inside a word is plain text (O'Brien, Bob's)
            if ch is None or ch.isspace() or ch in PUNCTUATION:
                break
            self.pos += 1
        return Token(TokenType.WORD, self.source[start:self.pos], start, self.pos)


def tokenize(source: str) -> List[Token]:
    return Lexer(source).tokenize()
