"""Top-level entry point that wires every service onto one transport."""

from __future__ import annotations

import logging
import os
from types import TracebackType

import httpx

from .clients import (
    BusinessUnitsClient,
    CertificateOwnersClient,
    CertificatesClient,
    EnrollmentsClient,
    ProfilesClient,
)
from .http_client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, HttpClient

logger = logging.getLogger(__name__)

API_KEY_ENV = "DIGICERT_API_KEY"
BASE_URL_ENV = "DIGICERT_BASE_URL"


class TrustLifecycleClient:
    """Client for the DigiCert Trust Lifecycle Manager API.

    Example:
        >>> with TrustLifecycleClient("my-api-key") as tlm:
        ...     page = tlm.certificates.search({"status": "issued", "limit": 10, "offset": 1})

    All services share a single :class:`HttpClient`; closing this object closes
    the transport unless an ``httpx.Client`` was injected.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.http = HttpClient(
            api_key,
            base_url,
            user_agent=user_agent,
            timeout=timeout,
            http_client=http_client,
        )
        self.certificates = CertificatesClient(self.http)
        self.business_units = BusinessUnitsClient(self.http)
        self.certificate_owners = CertificateOwnersClient(self.http)
        self.enrollments = EnrollmentsClient(self.http)
        self.profiles = ProfilesClient(self.http)

    @property
    def base_url(self) -> str:
        return self.http.base_url

    @classmethod
    def from_env(cls, **kwargs: object) -> TrustLifecycleClient:
        """Build a client from ``DIGICERT_API_KEY`` and ``DIGICERT_BASE_URL``.

        An explicit ``base_url`` keyword takes precedence over the environment.
        """

        api_key = os.getenv(API_KEY_ENV, "")
        base_url = kwargs.pop("base_url", None) or os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL
        logger.debug("Building client from environment for %s", base_url)
        return cls(api_key, base_url=base_url, **kwargs)  # type: ignore[arg-type]

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> TrustLifecycleClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
