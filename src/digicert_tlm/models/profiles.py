from __future__ import annotations

from datetime import datetime

from ..query import QueryBuilder
from .common import ApiModel, ListResponse, PaginationParams


class ProfileValidity(ApiModel):
    type: str | None = None
    years: int | None = None
    months: int | None = None
    days: int | None = None
    min_days: int | None = None
    max_days: int | None = None


class DNField(ApiModel):
    name: str | None = None
    required: bool = False
    source: str | None = None
    value: str | None = None


class SANField(ApiModel):
    type: str | None = None
    required: bool = False
    source: str | None = None
    values: list[str] | None = None


class Extension(ApiModel):
    oid: str | None = None
    critical: bool = False
    value: str | None = None


class CustomFieldDef(ApiModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    required: bool = False
    options: list[str] | None = None


class Profile(ApiModel):
    """Certificate-issuance policy template configured in TLM."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    type: str | None = None
    status: str | None = None
    enrollment_method: str | None = None
    authentication_method: str | None = None
    key_algorithm: str | None = None
    key_size: int | None = None
    signature_algorithm: str | None = None
    validity: ProfileValidity | None = None
    subject_dn_fields: list[DNField] | None = None
    san_fields: list[SANField] | None = None
    extensions: list[Extension] | None = None
    custom_fields: list[CustomFieldDef] | None = None
    require_approval: bool | None = None
    auto_renew: bool | None = None
    allow_duplicate_cn: bool | None = None
    tags: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProfileListOptions(PaginationParams):
    name: str | None = None
    type: str | None = None
    status: str | None = None
    enrollment_method: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None

    def to_params(self) -> list[tuple[str, str]]:
        return (
            QueryBuilder()
            .add("name", self.name)
            .add("type", self.type)
            .add("status", self.status)
            .add("enrollment_method", self.enrollment_method)
            .add_pagination(self.offset, self.limit)
            .add("sort_by", self.sort_by)
            .add("sort_order", self.sort_order)
            .build()
        )


class ProfileListResponse(ListResponse):
    profiles: list[Profile] | None = None


class ProfileTemplate(ApiModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    type: str | None = None
    provider: str | None = None


class ProfileTemplateListResponse(ApiModel):
    templates: list[ProfileTemplate] | None = None
