from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class BackendError(Exception):
    """Raised by the API client when the backend answers with a non-2xx status."""

    status_code: int
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.status_code} {self.code}: {self.message}"

    @classmethod
    def from_payload(cls, status_code: int, payload: Any, reason: str | None = None) -> "BackendError":
        """Build from the backend's `{"error": {...}}` envelope when it sent one."""
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            return cls(
                status_code=status_code,
                code=str(err.get("code") or f"http_{status_code}"),
                message=str(err.get("message") or reason or "Backend request failed"),
                details=err.get("details") or None,
            )
        return cls(
            status_code=status_code,
            code=f"http_{status_code}",
            message=reason or "Backend request failed",
        )
