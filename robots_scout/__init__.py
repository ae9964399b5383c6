"""
RobotsScout package initializer.
Defines package version and exposes the parsing API.
"""
__version__ = "0.1.0"

from robots_scout.locate import LocateError, locate, same_scope
from robots_scout.parser.rules import from_reader, parse
from robots_scout.robots import Robots, robots_path

__all__ = [
    "__version__",
    "Robots",
    "parse",
    "from_reader",
    "robots_path",
    "locate",
    "same_scope",
    "LocateError",
]
