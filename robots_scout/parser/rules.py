# File: robots_scout/parser/rules.py
"""robots_scout.parser.rules: Grouping of robots.txt tokens into a Robots rule set."""

from __future__ import annotations

from bisect import insort
from typing import IO, AnyStr, Iterable, List

from robots_scout.logger import logger
from robots_scout.models import Agent, Group, Rule
from robots_scout.parser.lexer import Token, TokenKind, tokenize
from robots_scout.robots import Robots

__all__ = ("RuleParser", "parse", "from_reader")


class RuleParser:
    """Single-use builder turning a token stream into :class:`Robots`.

    Consecutive ``user-agent`` lines form one batch sharing the rules that
    follow them. A ``user-agent`` line after at least one rule line closes the
    batch and opens a new one.
    """

    def __init__(self) -> None:
        self._agents: List[Agent] = []
        self._sitemaps: List[str] = []
        self._batch: List[str] = []
        self._group = Group()
        self._within_group = False

    def parse(self, tokens: Iterable[Token]) -> Robots:
        for token in tokens:
            self._feed(token)
        self._flush()
        logger.debug(
            "Parsed robots.txt: %d agent(s), %d sitemap(s)", len(self._agents), len(self._sitemaps)
        )
        return Robots(self._agents, self._sitemaps)

    def _feed(self, token: Token) -> None:
        if token.kind is TokenKind.USER_AGENT:
            self._user_agent(token.value)
        elif token.kind is TokenKind.DISALLOW:
            self._rule(False, token.value)
        elif token.kind is TokenKind.ALLOW:
            self._rule(True, token.value)
        elif token.kind is TokenKind.SITEMAP:
            self._sitemaps.append(token.value)

    def _user_agent(self, name: str) -> None:
        if self._within_group:
            self._flush()
            self._within_group = False
        self._batch.append(name)

    def _rule(self, allow: bool, path: str) -> None:
        self._within_group = True
        if not self._batch:
            # no user-agent seen yet: nobody to attach the rule to
            return
        if not path:
            # "disallow:" with no path restricts nothing
            return
        self._group.add(Rule.build(allow, path))

    def _flush(self) -> None:
        """Commit the pending batch of agents, making them queryable."""
        if not self._batch:
            return
        self._group.agents.extend(self._batch)
        for name in self._batch:
            insort(self._agents, Agent.build(name, self._group), key=lambda a: -len(a.name))
        self._batch = []
        self._group = Group()


def parse(text: str) -> Robots:
    """Parse robots.txt *text*. Malformed lines are skipped, never raised.

    A leading byte order mark is ignored.
    """
    return RuleParser().parse(tokenize(text.removeprefix("\ufeff")))


def from_reader(stream: IO[AnyStr]) -> Robots:
    """Read *stream* to the end and parse it.

    Only a failing ``read()`` raises; the rule set is built from complete
    input or not at all. Bytes are decoded as UTF-8, undecodable sequences
    are replaced.
    """
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode("utf-8-sig", errors="replace")
    return parse(data)
