from __future__ import annotations

from typing import Any


class TlmError(Exception):
    """Base error for digicert-tlm."""


class ConfigurationError(TlmError):
    pass


class TransportError(TlmError):
    pass


class ResponseDecodeError(TlmError):
    pass


class HttpError(TlmError):
    """Non-2xx response whose body could not be decoded as an error object."""

    def __init__(self, status_code: int, message: str = "") -> None:
        super().__init__(status_code, message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"digicert: HTTP {self.status_code}: {self.message}"


class APIError(HttpError):
    """Non-2xx response carrying a JSON error body."""

    def __init__(
        self,
        status_code: int,
        message: str = "",
        *,
        code: str | None = None,
        details: list[str] | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(status_code, message)
        self.code = code
        self.details = details or []
        self.request_id = request_id

    @classmethod
    def from_payload(cls, status_code: int, payload: dict[str, Any]) -> APIError:
        raw_details = payload.get("details")
        details: list[str] = []
        if isinstance(raw_details, list):
            details = [str(item) for item in raw_details]
        elif raw_details:
            details = [str(raw_details)]
        code = payload.get("code")
        request_id = payload.get("request_id")
        return cls(
            status_code,
            str(payload.get("message") or ""),
            code=str(code) if code else None,
            details=details,
            request_id=str(request_id) if request_id else None,
        )

    def __str__(self) -> str:
        if self.code:
            return f"digicert: {self.message} (code: {self.code}, status: {self.status_code})"
        return f"digicert: {self.message} (status: {self.status_code})"


def _has_status(err: BaseException | None, status_code: int) -> bool:
    return isinstance(err, HttpError) and err.status_code == status_code


def is_not_found(err: BaseException | None) -> bool:
    return _has_status(err, 404)


def is_unauthorized(err: BaseException | None) -> bool:
    return _has_status(err, 401)


def is_forbidden(err: BaseException | None) -> bool:
    return _has_status(err, 403)


__all__ = [
    "APIError",
    "ConfigurationError",
    "HttpError",
    "ResponseDecodeError",
    "TlmError",
    "TransportError",
    "is_forbidden",
    "is_not_found",
    "is_unauthorized",
]
