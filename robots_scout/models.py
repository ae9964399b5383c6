"""
Data models for parsed robots.txt rule groups.
"""
from __future__ import annotations

from bisect import insort
from dataclasses import dataclass, field
from typing import List

from robots_scout.matcher import AgentMatcher, PathMatcher, compile_agent, compile_path

__all__ = ("Rule", "Group", "Agent")


@dataclass(frozen=True, slots=True)
class Rule:
    """A single allow/disallow record with its path matcher already compiled."""

    allow: bool
    path: str
    matcher: PathMatcher = field(repr=False, compare=False)

    @classmethod
    def build(cls, allow: bool, path: str) -> Rule:
        return cls(allow=allow, path=path, matcher=compile_path(path))

    def matches(self, path: str) -> bool:
        return self.matcher.matches(path)


@dataclass(slots=True)
class Group:
    """Rules shared by one batch of user-agent lines.

    ``rules`` is always ordered by descending length of the raw path, equal
    lengths keep their insertion order, so the first match is the longest.
    """

    agents: List[str] = field(default_factory=list)
    rules: List[Rule] = field(default_factory=list)

    def add(self, rule: Rule) -> None:
        insort(self.rules, rule, key=lambda r: -len(r.path))

    def first_match(self, path: str) -> Rule | None:
        for rule in self.rules:
            if rule.matches(path):
                return rule
        return None


@dataclass(frozen=True, slots=True)
class Agent:
    """A user-agent specifier bound to the group of rules it selects."""

    name: str
    group: Group = field(compare=False)
    matcher: AgentMatcher = field(repr=False, compare=False)

    @classmethod
    def build(cls, name: str, group: Group) -> Agent:
        return cls(name=name, group=group, matcher=compile_agent(name))

    def matches(self, agent: str) -> bool:
        return self.matcher.matches(agent)
