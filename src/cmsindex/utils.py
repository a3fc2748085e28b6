"""Utility functions for cmsindex"""

import logging
import re
from pathlib import Path
from typing import Any, Dict

from .consts import KEY_PATH_DELIMITER

logger = logging.getLogger(__name__)

_NUMERIC_KEY = re.compile(r"^\d+$")


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def is_numeric_key(key: str) -> bool:
    """Whether a key path segment is a list index (ASCII digits only)."""
    return bool(_NUMERIC_KEY.match(key))


def flatten(obj: Any, delimiter: str = KEY_PATH_DELIMITER) -> Dict[str, Any]:
    """Flatten nested content into a key path to value mapping.

    Args:
        obj: Nested dicts and lists
        delimiter: Separator placed between path segments

    Returns:
        Mapping of key paths to leaf values, in document order

    Notes:
        - List items are addressed by their index, e.g. ``authors.0.name``
        - Empty dicts and lists are kept as leaf values
        - A non-container ``obj`` flattens to an empty mapping

    Examples:
        >>> flatten({"title": "Hi", "authors": [{"name": "Ann"}]})
        {'title': 'Hi', 'authors.0.name': 'Ann'}
        >>> flatten({"tags": [], "meta": {}})
        {'tags': [], 'meta': {}}
    """
    result: Dict[str, Any] = {}

    def walk(value: Any, prefix: str) -> None:
        if isinstance(value, dict):
            items = [(str(k), v) for k, v in value.items()]
        elif isinstance(value, (list, tuple)):
            items = [(str(i), v) for i, v in enumerate(value)]
        else:
            result[prefix] = value
            return

        if not items and prefix:
            result[prefix] = value
            return

        for key, child in items:
            walk(child, f"{prefix}{delimiter}{key}" if prefix else key)

    if isinstance(obj, (dict, list, tuple)):
        walk(obj, "")

    return result


def strip_site_url(url: str, site_url: str | None) -> str:
    """Turn an absolute asset URL into a site-relative path.

    Examples:
        >>> strip_site_url("https://example.com/img/a.png", "https://example.com")
        '/img/a.png'
        >>> strip_site_url("https://example.com/img/a.png", "https://example.com/")
        '/img/a.png'
        >>> strip_site_url("/img/a.png", "")
        '/img/a.png'
    """
    if not site_url:
        return url

    base = site_url.rstrip("/")
    if base and url.startswith(base):
        return url[len(base):]
    return url
