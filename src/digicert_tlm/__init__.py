"""Typed client for the DigiCert Trust Lifecycle Manager REST API."""

from __future__ import annotations

__version__ = "0.1.0"

from .client import TrustLifecycleClient  # noqa: E402
from .errors import (  # noqa: E402
    APIError,
    ConfigurationError,
    HttpError,
    ResponseDecodeError,
    TlmError,
    TransportError,
    is_forbidden,
    is_not_found,
    is_unauthorized,
)
from .http_client import DEFAULT_BASE_URL, HttpClient  # noqa: E402

__all__ = [
    "APIError",
    "ConfigurationError",
    "DEFAULT_BASE_URL",
    "HttpClient",
    "HttpError",
    "ResponseDecodeError",
    "TlmError",
    "TransportError",
    "TrustLifecycleClient",
    "__version__",
    "is_forbidden",
    "is_not_found",
    "is_unauthorized",
]
