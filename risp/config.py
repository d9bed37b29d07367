from __future__ import annotations
import os
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> str:
    raw = os.environ.get("RISP_LOG_LEVEL", "").strip()
    return raw.upper() if raw else DEFAULT_LOG_LEVEL


def get_http_timeout() -> Optional[float]:
    """Seconds allowed for one httpget round trip; None means wait forever."""
    raw = os.environ.get("RISP_HTTP_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"RISP_HTTP_TIMEOUT must be a number of seconds, got {raw!r}") from None


def get_follow_redirects() -> bool:
    raw = os.environ.get("RISP_HTTP_FOLLOW_REDIRECTS")
    if raw is None or not raw.strip():
        return True
    return raw.strip().lower() in _TRUTHY
