"""
Wildcard matchers for robots.txt path and user-agent specifiers.

Path specifiers understand ``*`` (any sequence of characters) and a trailing
``$`` (end of path). Agent specifiers are plain prefixes; the lone ``*``
matches every agent.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field

__all__ = ("PathMatcher", "AgentMatcher", "compile_path", "compile_agent")

_ESCAPED_STAR = re.escape("*")


@dataclass(frozen=True, slots=True)
class PathMatcher:
    """Compiled path specifier. Matching is case-sensitive."""

    raw: str
    regex: re.Pattern[str] = field(repr=False, compare=False)

    def matches(self, path: str) -> bool:
        return self.regex.match(path) is not None


@dataclass(frozen=True, slots=True)
class AgentMatcher:
    """Compiled user-agent specifier. Matching is case-insensitive."""

    raw: str
    regex: re.Pattern[str] = field(repr=False, compare=False)

    def matches(self, agent: str) -> bool:
        return self.regex.match(agent.lower()) is not None


def compile_path(specifier: str) -> PathMatcher:
    """Compile a path specifier such as ``/fish*.php`` or ``/*.php$``.

    ``$`` is an anchor only as the last character; anywhere else it is literal.
    The result is anchored at the start of the path only, so ``/fish`` also
    matches ``/fishheads``.
    """
    anchored = specifier.endswith("$")
    body = specifier[:-1] if anchored else specifier
    pattern = re.escape(body).replace(_ESCAPED_STAR, ".*")
    if anchored:
        pattern += r"\Z"
    # re.error here means the escaping above is broken, let it surface.
    return PathMatcher(raw=specifier, regex=re.compile(pattern, re.DOTALL))


def compile_agent(specifier: str) -> AgentMatcher:
    """Compile a user-agent specifier into a case-insensitive prefix matcher."""
    folded = specifier.lower()
    pattern = ".*" if folded == "*" else re.escape(folded)
    return AgentMatcher(raw=specifier, regex=re.compile(pattern, re.DOTALL))
