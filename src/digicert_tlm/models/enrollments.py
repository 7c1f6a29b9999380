from __future__ import annotations

from datetime import datetime
from typing import Any

from ..query import QueryBuilder
from .common import (
    ApiModel,
    CertificateAttributes,
    CustomAttribute,
    DeliveryFormat,
    ListResponse,
    PaginationParams,
    ProfileReference,
    SeatReference,
    Validity,
)


class Enrollment(ApiModel):
    id: str | None = None
    enrollment_code: str | None = None
    status: str | None = None
    profile_id: str | None = None
    profile_name: str | None = None
    seat_id: str | None = None
    certificate_id: str | None = None
    common_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    expiration_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tags: list[str] | None = None
    custom_attributes: dict[str, Any] | None = None


class EnrollmentAttributes(CertificateAttributes):
    """Subject attributes captured at enrollment time."""


class EnrollmentRequest(ApiModel):
    """Payload for creating an enrollment that a requester later redeems."""

    profile: ProfileReference
    seat: SeatReference | None = None
    validity: Validity | None = None
    email: str | None = None
    phone_number: str | None = None
    common_name: str | None = None
    attributes: EnrollmentAttributes | None = None
    tags: list[str] | None = None
    custom_attributes: list[CustomAttribute] | None = None
    notification_emails: list[str] | None = None


class EnrollmentResponse(ApiModel):
    enrollment_id: str | None = None
    enrollment_code: str | None = None
    status: str | None = None
    message: str | None = None


class EnrollmentStatusResponse(ApiModel):
    status: str | None = None
    certificate_id: str | None = None
    message: str | None = None
    last_updated: datetime | None = None


class RedeemEnrollmentRequest(ApiModel):
    enrollment_code: str
    csr: str


class ManualEnrollmentRequest(ApiModel):
    """Enrollment that is held for approval before issuance."""

    profile: ProfileReference
    csr: str
    seat: SeatReference | None = None
    validity: Validity | None = None
    delivery_format: DeliveryFormat | None = None
    include_ca_chain: bool | None = None
    attributes: CertificateAttributes | None = None
    tags: list[str] | None = None
    cert_owner_ids: list[str] | None = None
    custom_attributes: list[CustomAttribute] | None = None
    approver_email: str | None = None
    comments: str | None = None


class EnrollmentDetailsOptions(PaginationParams):
    status: str | None = None
    profile_id: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None

    def to_params(self) -> list[tuple[str, str]]:
        return (
            QueryBuilder()
            .add("status", self.status)
            .add("profile_id", self.profile_id)
            .add_pagination(self.offset, self.limit)
            .add("sort_by", self.sort_by)
            .add("sort_order", self.sort_order)
            .build()
        )


class EnrollmentDetailsResponse(ListResponse):
    enrollments: list[Enrollment] | None = None
