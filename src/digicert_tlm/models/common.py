from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class ApiModel(BaseModel):
    """Base for every TLM record shape; unknown vendor keys are kept.

    An explicit JSON ``null`` on a field with a non-``None`` default decodes
    to that default, so ``{"total": null}`` reads as ``total == 0``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        for name, info in cls.model_fields.items():
            if info.is_required():
                continue
            if info.default is None and info.default_factory is None:
                continue
            for key in {name, info.alias or name}:
                if key in cleaned and cleaned[key] is None:
                    del cleaned[key]
        return cleaned

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ProfileReference(ApiModel):
    id: str | None = None


class SeatReference(ApiModel):
    seat_id: str


class Validity(ApiModel):
    years: int | None = None
    months: int | None = None
    days: int | None = None
    end_date: str | None = None


class DeliveryFormat(ApiModel):
    format: str | None = None


class SubjectAltNames(ApiModel):
    dns_names: list[str] | None = None
    ip_addresses: list[str] | None = None
    emails: list[str] | None = None
    uris: list[str] | None = None
    other_names: list[str] | None = None


class CertificateAttributes(ApiModel):
    """Subject attributes supplied alongside an issuance or renewal request."""

    common_name: str | None = None
    organization: str | None = None
    organizational_unit: list[str] | None = None
    country: str | None = None
    state: str | None = None
    locality: str | None = None
    email: str | None = None
    sans: SubjectAltNames | None = None


class CustomAttribute(ApiModel):
    id: str
    value: str


class PaginationParams(ApiModel):
    """Offset/limit pair shared by every list endpoint.

    Both values must be positive for either to be sent.
    """

    offset: int | None = None
    limit: int | None = None


class ListResponse(ApiModel):
    """Envelope fields returned with every paged listing."""

    total: int = 0
    offset: int = 0
    limit: int = 0
