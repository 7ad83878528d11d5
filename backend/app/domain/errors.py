"""Failure types shared by the hosting adapters and the upload services."""

from __future__ import annotations

from typing import Any


class UpstreamError(Exception):
    """A failed call to the hosting API.

    ``message`` is the API's own error message when the response body carried
    one; ``detail`` is the transport-level description used as a fallback.
    """

    def __init__(self, *, status_code: int | None, message: str | None, detail: str):
        self.status_code = status_code
        self.message = message
        self.detail = detail
        super().__init__(self.describe())

    def describe(self) -> str:
        return self.message or self.detail

    @classmethod
    def from_status(cls, status_code: int, body: Any) -> "UpstreamError":
        message = None
        if isinstance(body, dict):
            value = body.get("message")
            if isinstance(value, str) and value.strip():
                message = value
        error_cls = UpstreamNotFound if status_code == 404 else cls
        return error_cls(
            status_code=status_code,
            message=message,
            detail=f"Request failed with status code {status_code}",
        )

    @classmethod
    def from_transport(cls, exc: Exception) -> "UpstreamError":
        return cls(status_code=None, message=None, detail=str(exc) or exc.__class__.__name__)


class UpstreamNotFound(UpstreamError):
    pass


class UploadError(Exception):
    pass
