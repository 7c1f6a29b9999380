from __future__ import annotations

from typing import Any

from pydantic import Field

from ..query import QueryBuilder
from .business_units import BusinessUnit
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


class Seat(ApiModel):
    seat_id: str | None = None


class SeatType(ApiModel):
    id: str | None = None
    name: str | None = None


class Account(ApiModel):
    id: str | None = None


class ICA(ApiModel):
    id: str | None = None


class Subject(ApiModel):
    common_name: str | None = None
    organization_name: str | None = None
    organization_units: list[str] | None = None
    locality: str | None = None
    country: str | None = None


class Certificate(ApiModel):
    """Certificate inventory record as returned by TLM."""

    id: str | None = None
    profile: ProfileReference | None = None
    seat: Seat | None = None
    seat_type: SeatType | None = None
    business_unit: BusinessUnit | None = None
    account: Account | None = None
    certificate: str | None = None
    ica: ICA | None = None
    common_name: str | None = None
    status: str | None = None
    serial_number: str | None = None
    thumbprint: str | None = None
    valid_from: str | None = None
    valid_to: str | None = None
    issuing_ca_name: str | None = None
    key_size: str | None = None
    signature_algorithm: str | None = None
    subject: Subject | None = None
    ca_vendor: str | None = None
    connector: str | None = None
    source: str | None = None
    expires_in_days: int | None = None
    pqc_vulnerable: bool | None = None
    extended_key_usage: str | None = None
    escrow: bool | None = None
    attributes: str | None = None
    custom_attributes: dict[str, Any] | None = None


class CAAttributesWrapper(ApiModel):
    schema_: dict[str, Any] = Field(default_factory=dict, alias="schema")


class CertificateRequest(ApiModel):
    """Payload for issuing a certificate against a profile."""

    profile: ProfileReference
    seat: SeatReference | None = None
    csr: str | None = None
    validity: Validity | None = None
    delivery_format: DeliveryFormat | None = None
    include_ca_chain: bool | None = None
    attributes: CertificateAttributes | None = None
    tags: list[str] | None = None
    cert_owner_ids: list[str] | None = None
    ca_attributes: CAAttributesWrapper | None = None
    custom_attributes: list[CustomAttribute] | None = None


class CertificateResponse(ApiModel):
    certificate: Certificate | None = None
    request_id: str | None = None
    chain: list[str] | None = None
    private_key: str | None = None


class CertificateSearchOptions(PaginationParams):
    common_name: str | None = None
    serial_number: str | None = None
    status: str | None = None
    profile_id: str | None = None
    tags: list[str] | None = None
    sort_by: str | None = None
    sort_order: str | None = None

    def to_params(self) -> list[tuple[str, str]]:
        return (
            QueryBuilder()
            .add("common_name", self.common_name)
            .add("serial_number", self.serial_number)
            .add("status", self.status)
            .add("profile_id", self.profile_id)
            .add_all("tags", self.tags)
            .add_pagination(self.offset, self.limit)
            .add("sort_by", self.sort_by)
            .add("sort_order", self.sort_order)
            .build()
        )


class CertificateSearchResponse(ListResponse):
    items: list[Certificate] | None = None


class RevokeRequest(ApiModel):
    reason: str
    comment: str | None = None


class RenewRequest(ApiModel):
    csr: str | None = None
    validity: Validity | None = None
    delivery_format: DeliveryFormat | None = None
    include_ca_chain: bool | None = None
    attributes: CertificateAttributes | None = None
    tags: list[str] | None = None
    custom_attributes: list[CustomAttribute] | None = None


class AdditionalFormatsResponse(ApiModel):
    formats: dict[str, str] = Field(default_factory=dict)
