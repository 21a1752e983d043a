"""Splitting a command line into words and shell operators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_BLANKS = frozenset(" \t")
_OPERATOR_CHARS = frozenset("<>|")
_QUOTES = frozenset("\"'")


class TokenType(Enum):
    """Kinds of token produced by :func:`tokenize`."""

    WORD = 0
    PIPE = 1
    REDIR_IN = 2
    REDIR_OUT = 3
    APPEND = 4
    HEREDOC = 5


@dataclass(frozen=True)
class Token:
    """One lexical unit of a command line."""

    content: str
    kind: TokenType


# Two-character operators come first so that "<<" wins over "<".
_OPERATORS = (
    ("<<", TokenType.HEREDOC),
    (">>", TokenType.APPEND),
    ("|", TokenType.PIPE),
    ("<", TokenType.REDIR_IN),
    (">", TokenType.REDIR_OUT),
)


def is_blank(char: str) -> bool:
    """Return True for the characters that separate words: space and tab."""
    return char in _BLANKS and len(char) == 1


def is_operator(char: str) -> bool:
    """Return True for characters that start an operator: '<', '>' and '|'."""
    return char in _OPERATOR_CHARS and len(char) == 1


def _read_operator(line: str, pos: int) -> tuple[Token, int]:
    for text, kind in _OPERATORS:
        if line.startswith(text, pos):
            return Token(text, kind), pos + len(text)
    raise ValueError(f"no operator at position {pos} of {line!r}")


def _read_word(line: str, start: int) -> tuple[Token, int]:
    """Read a word beginning at ``start``; return it and the position after it.

    A leading quote is dropped, and when a quote was seen the last character
    of the scanned span is dropped too. A quote character always opens a
    span that runs to the next occurrence of the same character.
    """
    end = start
    quote = ""
    size = len(line)
    while end < size and not is_operator(line[end]) and not is_blank(line[end]):
        if line[end] in _QUOTES:
            if end == start:
                start += 1
            quote = line[end]
            closing = line.find(quote, end + 1)
            end = size if closing < 0 else closing
        else:
            end += 1
    length = end - start - (1 if quote else 0)
    word = line[start:] if length < 0 else line[start:start + length]
    return Token(word, TokenType.WORD), end


def tokenize(line: str) -> list[Token]:
    """Split ``line`` into a list of tokens; blanks only separate them."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(line):
        char = line[pos]
        if is_blank(char):
            pos += 1
            continue
        if is_operator(char):
            token, pos = _read_operator(line, pos)
        else:
            token, pos = _read_word(line, pos)
        tokens.append(token)
    return tokens