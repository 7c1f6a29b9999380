"""Certificate issuance, lookup and lifecycle endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..http_client import decode_model
from ..models.certificates import (
    AdditionalFormatsResponse,
    Certificate,
    CertificateRequest,
    CertificateResponse,
    CertificateSearchOptions,
    CertificateSearchResponse,
    RenewRequest,
    RevokeRequest,
)
from ._base import ServiceClient, coerce, segment


class CertificatesClient(ServiceClient):
    """Wrapper over ``certificate*`` routes."""

    def issue(self, request: Mapping[str, Any] | CertificateRequest) -> CertificateResponse:
        """Request a new certificate from a profile."""

        body = coerce(request, CertificateRequest)
        resp = self.http.post("certificate", json=body)
        return decode_model(resp, CertificateResponse)

    def get(self, serial_number: str) -> Certificate:
        """Fetch a certificate by its serial number."""

        resp = self.http.get(f"certificate/{segment(serial_number)}")
        return decode_model(resp, Certificate)

    def get_by_id(self, certificate_id: str) -> Certificate:
        resp = self.http.get(f"certificate-by-id/{segment(certificate_id)}")
        return decode_model(resp, Certificate)

    def search(
        self, options: Mapping[str, Any] | CertificateSearchOptions | None = None
    ) -> CertificateSearchResponse:
        """Search the certificate inventory.

        Filters are sent as query parameters; ``tags`` repeats the key once per
        value and pagination is only applied when both offset and limit are
        positive.
        """

        params = self._params(options, CertificateSearchOptions)
        resp = self.http.get("certificate-search", params=params)
        return decode_model(resp, CertificateSearchResponse)

    def revoke(self, serial_number: str, request: Mapping[str, Any] | RevokeRequest) -> None:
        body = coerce(request, RevokeRequest)
        self.http.put(f"certificate/{segment(serial_number)}/revoke", json=body)

    def unrevoke(self, serial_number: str) -> None:
        """Lift a revocation that is still on hold."""

        self.http.delete(f"certificate/{segment(serial_number)}/revoke")

    def renew(
        self, serial_number: str, request: Mapping[str, Any] | RenewRequest
    ) -> CertificateResponse:
        body = coerce(request, RenewRequest)
        resp = self.http.post(f"certificate/{segment(serial_number)}/renew", json=body)
        return decode_model(resp, CertificateResponse)

    def get_additional_formats(self, serial_number: str) -> AdditionalFormatsResponse:
        resp = self.http.get(f"certificate/{segment(serial_number)}/additional-formats")
        return decode_model(resp, AdditionalFormatsResponse)

    def pickup(self, request_id: str) -> CertificateResponse:
        """Collect a certificate whose issuance completed asynchronously."""

        resp = self.http.post(f"certificate-pickup/{segment(request_id)}")
        return decode_model(resp, CertificateResponse)
