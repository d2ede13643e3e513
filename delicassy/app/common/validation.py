from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit


def parse_quantity(raw: Any) -> int:
    """Form quantities: anything that is not a positive integer becomes 1."""
    try:
        qty = int(str(raw).strip())
    except (TypeError, ValueError):
        return 1
    return qty if qty >= 1 else 1


def parse_flag(raw: Any) -> bool:
    return str(raw or "").strip().lower() in ("1", "true", "on", "yes")


def safe_next(target: str | None, default: str = "/") -> str:
    """Only follow redirects that stay on this site."""
    if not target:
        return default
    parts = urlsplit(target)
    if parts.scheme or parts.netloc or not target.startswith("/") or target.startswith("//"):
        return default
    return target
