# File: robots_scout/parser/lexer.py
"""robots_scout.parser.lexer: Tokenizer for robots.txt content.

The tokenizer is deliberately generous: every line that carries one of the
four known fields is turned into a :class:`Token`, every other line is
dropped. This holds even when the document is not a robots file at all
(an HTML error page, binary junk and so on).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterator, Mapping

from robots_scout.logger import logger

__all__ = ("TokenKind", "Token", "FIELDS", "lex", "tokenize")


class TokenKind(Enum):
    ERROR = "error"
    USER_AGENT = "user-agent"
    DISALLOW = "disallow"
    ALLOW = "allow"
    SITEMAP = "sitemap"


@dataclass(frozen=True, slots=True)
class Token:
    """One directive occurrence: field kind, raw value and 1-based line number."""

    kind: TokenKind
    value: str
    line: int = 0


FIELDS: Final[Mapping[str, TokenKind]] = {
    "user-agent": TokenKind.USER_AGENT,
    "disallow": TokenKind.DISALLOW,
    "allow": TokenKind.ALLOW,
    "sitemap": TokenKind.SITEMAP,
}

_HSPACE: Final[str] = " \t"
# Value runs until a control character (RFC 1945 CTL) or a comment.
_VALUE_RE: Final[re.Pattern[str]] = re.compile(r"[^\x00-\x1f\x7f#]*")
_NEWLINE_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def _match_field(line: str) -> tuple[TokenKind, int] | None:
    head = line[: max(map(len, FIELDS))].lower()
    for name, kind in FIELDS.items():
        if head.startswith(name):
            return kind, len(name)
    return None


def _lex_line(line: str, lineno: int) -> Iterator[Token]:
    """Lex a single physical line (without its newline)."""
    line = line.lstrip()
    if not line or line.startswith("#"):
        return

    found = _match_field(line)
    if found is None:
        yield Token(TokenKind.ERROR, f"unexpected field type: {line[:40]!r}", lineno)
        return
    kind, pos = found

    rest = line[pos:].lstrip(_HSPACE)
    if not rest.startswith(":"):
        yield Token(TokenKind.ERROR, "expected separator between field and value", lineno)
        return
    rest = rest[1:].lstrip(_HSPACE)

    value = _VALUE_RE.match(rest).group()
    yield Token(kind, value.rstrip(), lineno)

    tail = rest[len(value):].lstrip()
    if tail and not tail.startswith("#"):
        yield Token(TokenKind.ERROR, "expected end of line", lineno)


def lex(text: str) -> Iterator[Token]:
    """Yield all tokens of *text*, ``ERROR`` markers included.

    ``\\r\\n``, ``\\n`` and a bare ``\\r`` all end a line.
    """
    for lineno, line in enumerate(_NEWLINE_RE.split(text), start=1):
        yield from _lex_line(line, lineno)


def tokenize(text: str) -> Iterator[Token]:
    """Yield the real tokens of *text*; discarded lines are only logged."""
    for token in lex(text):
        if token.kind is TokenKind.ERROR:
            logger.debug("robots.txt line %d discarded: %s", token.line, token.value)
            continue
        yield token
