from __future__ import annotations

from typing import Any, Optional


class OrbError(Exception):
    """Base class for every failure raised by the Orb client."""


class TransportError(OrbError):
    """Raised when the HTTP round trip cannot complete (connect, timeout, read)."""


class DecodeError(OrbError):
    """Raised when a response body does not parse into the expected model."""


class ApiError(OrbError):
    """Raised when Orb answers a request with a non-success status.

    Orb error bodies look like ``{"type": ..., "status": ..., "title": ...,
    "detail": ...}``. Whatever subset of that the service sends is kept on
    the instance; ``body`` holds the raw decoded payload (or text when the
    body was not JSON).
    """

    def __init__(
        self,
        status_code: int,
        *,
        title: Optional[str] = None,
        detail: Optional[str] = None,
        error_type: Optional[str] = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.error_type = error_type
        self.body = body
        message = title or f"Orb API request failed with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @classmethod
    def from_body(cls, status_code: int, body: Any) -> "ApiError":
        if not isinstance(body, dict):
            return cls(status_code, body=body)
        return cls(
            status_code,
            title=_optional_str(body.get("title")),
            detail=_optional_str(body.get("detail")),
            error_type=_optional_str(body.get("type")),
            body=body,
        )


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)
