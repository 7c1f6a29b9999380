"""Enrollment lifecycle endpoints.

An enrollment is created by an administrator, handed to the requester as an
enrollment code, and redeemed with a CSR to obtain the certificate. Manual
enrollments skip the code and wait for approval instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..http_client import decode_model
from ..models.certificates import CertificateResponse
from ..models.enrollments import (
    Enrollment,
    EnrollmentDetailsOptions,
    EnrollmentDetailsResponse,
    EnrollmentRequest,
    EnrollmentResponse,
    EnrollmentStatusResponse,
    ManualEnrollmentRequest,
    RedeemEnrollmentRequest,
)
from ._base import ServiceClient, coerce, segment


class EnrollmentsClient(ServiceClient):
    def create(self, request: Mapping[str, Any] | EnrollmentRequest) -> EnrollmentResponse:
        body = coerce(request, EnrollmentRequest)
        resp = self.http.post("enrollment", json=body)
        return decode_model(resp, EnrollmentResponse)

    def get(self, enrollment_code: str) -> Enrollment:
        resp = self.http.get(f"enrollment/{segment(enrollment_code)}")
        return decode_model(resp, Enrollment)

    def get_status(self, enrollment_id: str) -> EnrollmentStatusResponse:
        resp = self.http.get(f"enrollment/{segment(enrollment_id)}/status")
        return decode_model(resp, EnrollmentStatusResponse)

    def redeem(self, request: Mapping[str, Any] | RedeemEnrollmentRequest) -> CertificateResponse:
        """Exchange an enrollment code and CSR for a certificate."""

        body = coerce(request, RedeemEnrollmentRequest)
        resp = self.http.post("enrollment/redeem", json=body)
        return decode_model(resp, CertificateResponse)

    def create_manual(
        self, request: Mapping[str, Any] | ManualEnrollmentRequest
    ) -> EnrollmentResponse:
        body = coerce(request, ManualEnrollmentRequest)
        resp = self.http.post("manual-enrollment", json=body)
        return decode_model(resp, EnrollmentResponse)

    def renew_manual(
        self, certificate_id: str, request: Mapping[str, Any] | ManualEnrollmentRequest
    ) -> EnrollmentResponse:
        body = coerce(request, ManualEnrollmentRequest)
        resp = self.http.post(f"manual-enrollment/renew/{segment(certificate_id)}", json=body)
        return decode_model(resp, EnrollmentResponse)

    def list_details(
        self, options: Mapping[str, Any] | EnrollmentDetailsOptions | None = None
    ) -> EnrollmentDetailsResponse:
        params = self._params(options, EnrollmentDetailsOptions)
        resp = self.http.get("enrollment-details", params=params)
        return decode_model(resp, EnrollmentDetailsResponse)

    def get_details(self, enrollment_id: str) -> Enrollment:
        resp = self.http.get(f"enrollment-details/{segment(enrollment_id)}")
        return decode_model(resp, Enrollment)

    def get_by_certificate(self, certificate_id: str) -> Enrollment:
        """Return the enrollment that produced ``certificate_id``."""

        resp = self.http.get(f"enrollment/certificate/{segment(certificate_id)}")
        return decode_model(resp, Enrollment)
