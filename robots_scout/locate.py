# File: robots_scout/locate.py
"""robots_scout.locate: Определение robots.txt, который управляет заданным URL.

Область действия robots.txt задаётся схемой, хостом и портом. Схема и хост
сравниваются без учёта регистра, порт по умолчанию (http:80, https:443,
ftp:21) эквивалентен его отсутствию, punycode-хосты эквивалентны
Unicode-записи.
"""

from __future__ import annotations

from typing import Dict, Final
from urllib.parse import urlsplit

from robots_scout.logger import logger

__all__ = ("LocateError", "locate", "same_scope")

DEFAULT_PORTS: Final[Dict[str, int]] = {"http": 80, "https": 443, "ftp": 21}


class LocateError(ValueError):
    """URL не является абсолютным или не разбирается."""


def _unicode_host(host: str) -> str:
    """Переводит punycode-метки хоста в Unicode; невалидные хосты не трогает."""
    try:
        return host.encode("idna").decode("idna")
    except UnicodeError as exc:
        logger.debug("Host %r left as is, IDNA conversion failed: %s", host, exc)
        return host


def locate(url: str) -> str:
    """Возвращает абсолютный URL robots.txt для *url*.

    Raises:
        LocateError: если URL относительный или содержит некорректный порт.
    """
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError as exc:
        raise LocateError(f"invalid URL {url!r}: {exc}") from exc

    scheme = parts.scheme.lower()
    host = parts.hostname
    if not scheme or not host:
        raise LocateError(f"expected absolute URL, got: {url!r}")

    host = _unicode_host(host).lower()
    if ":" in host:
        host = f"[{host}]"
    if port is not None and DEFAULT_PORTS.get(scheme) != port:
        host = f"{host}:{port}"
    return f"{scheme}://{host}/robots.txt"


def same_scope(robots_url: str, url: str) -> bool:
    """Проверяет, что *url* подчиняется robots.txt по адресу *robots_url*."""
    try:
        return locate(url) == locate(robots_url)
    except LocateError:
        return False
