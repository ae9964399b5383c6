"""
Query side of a parsed robots.txt file.

Both for user agents and for paths the longest match wins, and crawling is
allowed whenever nothing matches.
"""
from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple
from urllib.parse import urlsplit

from robots_scout.logger import logger
from robots_scout.models import Agent

__all__ = ("Robots", "robots_path")


def robots_path(raw: str) -> Optional[str]:
    """Return the part of *raw* that robots rules are matched against.

    Scheme, host and fragment are dropped, path and query are kept; an empty
    path becomes ``/``. Returns None when *raw* cannot be parsed.
    """
    try:
        parts = urlsplit(raw)
    except ValueError:
        return None
    path = parts.path or "/"
    if parts.query:
        path = f"{path}?{parts.query}"
    return path


def _allow_all(_: str) -> bool:
    return True


class Robots:
    """Result of parsing one robots.txt file.

    Instances are built by :class:`robots_scout.parser.rules.RuleParser` and
    never change afterwards, so one instance can serve many threads.
    """

    __slots__ = ("_agents", "_sitemaps")

    def __init__(self, agents: Iterable[Agent] = (), sitemaps: Iterable[str] = ()) -> None:
        # agents come in descending order of name length
        self._agents: Tuple[Agent, ...] = tuple(agents)
        self._sitemaps: Tuple[str, ...] = tuple(sitemaps)

    def __repr__(self) -> str:
        names = [agent.name for agent in self._agents]
        return f"Robots(agents={names!r}, sitemaps={len(self._sitemaps)})"

    @property
    def sitemaps(self) -> List[str]:
        """Sitemap URLs in file order, duplicates included."""
        return list(self._sitemaps)

    @property
    def agents(self) -> Tuple[Agent, ...]:
        return self._agents

    def best_agent(self, name: str) -> Optional[Agent]:
        """Return the longest agent specifier matching *name*, if any."""
        for agent in self._agents:
            if agent.matches(name):
                return agent
        return None

    def tester(self, agent: str) -> Callable[[str], bool]:
        """Resolve *agent* once and return a predicate over paths or URLs.

        Only the path and query of the argument are used, so absolute and
        relative URLs are both fine. Checking that the URL actually belongs
        to this robots file is up to the caller (see :func:`robots_scout.locate`).
        """
        best = self.best_agent(agent)
        if best is None:
            logger.debug("No robots group for agent %r, everything allowed", agent)
            return _allow_all
        group = best.group

        def allowed(raw: str) -> bool:
            path = robots_path(raw)
            if path is None:
                return True
            rule = group.first_match(path)
            return True if rule is None else rule.allow

        return allowed

    def test(self, agent: str, path: str) -> bool:
        """Return True if *agent* may crawl *path* (a path or a full URL)."""
        return self.tester(agent)(path)
