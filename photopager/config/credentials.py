"""Startup loading of the feed API consumer key.

The key is kept out of settings and the environment: it sits alone in a
small text file (``config/API.key`` by default, ignored by git).  It is read
once and passed explicitly into the feed client's constructor.
"""

from __future__ import annotations

from pathlib import Path

from photopager.utils.logging import get_logger

logger = get_logger(__name__)


def load_consumer_key(path: str | Path) -> str | None:
    """Read the consumer key from *path*.

    Line breaks are stripped.  A missing, unreadable or blank file yields
    ``None`` and a warning; the feed client then refuses to fetch.
    """
    key_path = Path(path)
    try:
        raw = key_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("consumer_key_missing", path=str(key_path))
        return None
    except OSError as exc:
        logger.warning("consumer_key_unreadable", path=str(key_path), error=str(exc))
        return None

    key = raw.replace("\r", "").replace("\n", "").strip()
    if not key:
        logger.warning("consumer_key_blank", path=str(key_path))
        return None

    logger.debug("consumer_key_loaded", path=str(key_path))
    return key
