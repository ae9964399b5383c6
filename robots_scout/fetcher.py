# robots_scout/fetcher.py
"""
Fetcher module: downloads the robots.txt governing a URL and parses it.

One request per call, no retries and no caching: both are left to the caller.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout

from robots_scout.config import RobotsConfig
from robots_scout.locate import locate
from robots_scout.logger import logger
from robots_scout.parser.rules import parse
from robots_scout.robots import Robots

__all__ = ("RobotsFetchError", "RobotsFetcher", "fetch_robots")


class RobotsFetchError(OSError):
    """The robots.txt body could not be obtained."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        super().__init__(f"cannot fetch {url}: {reason}")
        self.url = url
        self.reason = reason
        self.status = status


async def _read_limited(resp: ClientResponse, limit: int) -> bytes:
    """Read at most *limit* bytes of the body; the rest is dropped."""
    body = bytearray()
    async for chunk in resp.content.iter_chunked(8192):
        body.extend(chunk)
        if len(body) >= limit:
            break
    return bytes(body[:limit])


def _decode(body: bytes, charset: Optional[str]) -> str:
    """Decode with the declared charset, UTF-8 when missing or unknown."""
    try:
        return body.decode(charset or "utf-8", errors="replace")
    except LookupError:
        logger.debug("Unknown charset %r, falling back to utf-8", charset)
        return body.decode("utf-8", errors="replace")


class RobotsFetcher:
    """Fetches robots.txt files over an existing aiohttp session."""

    def __init__(self, session: ClientSession, config: RobotsConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> Robots:
        """
        Fetch and parse the robots.txt responsible for *url*.

        2xx responses are parsed, 4xx mean "no restrictions" when
        ``allow_on_missing`` is set. Everything else raises RobotsFetchError.
        LocateError propagates for URLs without a scope.
        """
        robots_url = locate(url)
        timeout = ClientTimeout(total=self.config.timeout)
        headers = {"User-Agent": self.config.user_agent}
        try:
            async with self.session.get(
                robots_url, headers=headers, timeout=timeout, raise_for_status=False
            ) as resp:
                if 200 <= resp.status < 300:
                    body = await _read_limited(resp, self.config.max_bytes)
                    logger.debug("Fetched %s (%d bytes)", robots_url, len(body))
                    return parse(_decode(body, resp.charset))
                if 400 <= resp.status < 500 and self.config.allow_on_missing:
                    logger.debug("%s answered %d, treating as allow-all", robots_url, resp.status)
                    return Robots()
                raise RobotsFetchError(robots_url, f"HTTP {resp.status}", resp.status)
        except asyncio.TimeoutError as exc:
            raise RobotsFetchError(robots_url, "timed out") from exc
        except ClientError as exc:
            raise RobotsFetchError(robots_url, str(exc) or type(exc).__name__) from exc


async def fetch_robots(url: str, config: Optional[RobotsConfig] = None) -> Robots:
    """One-off helper: open a session, fetch, close."""
    config = config or RobotsConfig()
    async with ClientSession() as session:
        return await RobotsFetcher(session, config).fetch(url)
