"""Certificate owner directory and certificate assignment endpoints."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..http_client import decode_model
from ..models.certificate_owners import (
    CertificateOwner,
    CertificateOwnerListOptions,
    CertificateOwnerListResponse,
    CertificateOwnerRequest,
    OwnerAssignment,
)
from ._base import ServiceClient, coerce, segment


class CertificateOwnersClient(ServiceClient):
    """Wrapper over the ``certificate-owners`` routes."""

    def create(self, request: Mapping[str, Any] | CertificateOwnerRequest) -> CertificateOwner:
        body = coerce(request, CertificateOwnerRequest)
        resp = self.http.post("certificate-owners", json=body)
        return decode_model(resp, CertificateOwner)

    def get(self, owner_id: str) -> CertificateOwner:
        resp = self.http.get(f"certificate-owners/{segment(owner_id)}")
        return decode_model(resp, CertificateOwner)

    def update(
        self, owner_id: str, request: Mapping[str, Any] | CertificateOwnerRequest
    ) -> CertificateOwner:
        body = coerce(request, CertificateOwnerRequest)
        resp = self.http.put(f"certificate-owners/{segment(owner_id)}", json=body)
        return decode_model(resp, CertificateOwner)

    def delete(self, owner_id: str) -> None:
        self.http.delete(f"certificate-owners/{segment(owner_id)}")

    def list(
        self, options: Mapping[str, Any] | CertificateOwnerListOptions | None = None
    ) -> CertificateOwnerListResponse:
        params = self._params(options, CertificateOwnerListOptions)
        resp = self.http.get("certificate-owners", params=params)
        return decode_model(resp, CertificateOwnerListResponse)

    def assign_to_certificate(self, certificate_id: str, owner_ids: Sequence[str]) -> None:
        """Replace the owners attached to ``certificate_id``."""

        body = OwnerAssignment(owner_ids=list(owner_ids))
        self.http.put(f"certificate-owners/certificate/{segment(certificate_id)}", json=body)

    def remove_from_certificate(self, certificate_id: str) -> None:
        self.http.delete(f"certificate-owners/certificate/{segment(certificate_id)}")
