from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ..query import QueryBuilder
from .common import ApiModel, ListResponse, PaginationParams


class CertificateOwner(ApiModel):
    id: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    job_title: str | None = None
    company: str | None = None
    department: str | None = None
    is_active: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CertificateOwnerRequest(ApiModel):
    email: str
    first_name: str
    last_name: str
    phone_number: str | None = None
    job_title: str | None = None
    company: str | None = None
    department: str | None = None


class CertificateOwnerListOptions(PaginationParams):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_active: bool | None = None
    sort_by: str | None = None
    sort_order: str | None = None

    def to_params(self) -> list[tuple[str, str]]:
        return (
            QueryBuilder()
            .add("email", self.email)
            .add("first_name", self.first_name)
            .add("last_name", self.last_name)
            .add_bool("is_active", self.is_active)
            .add_pagination(self.offset, self.limit)
            .add("sort_by", self.sort_by)
            .add("sort_order", self.sort_order)
            .build()
        )


class CertificateOwnerListResponse(ListResponse):
    owners: list[CertificateOwner] | None = Field(default=None, alias="certificate_owners")


class OwnerAssignment(ApiModel):
    """Body for replacing the owners attached to a certificate."""

    owner_ids: list[str]
