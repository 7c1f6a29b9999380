from __future__ import annotations

from datetime import datetime
from typing import Any

from ..query import QueryBuilder
from .common import ApiModel, ListResponse, PaginationParams


class BusinessUnit(ApiModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    parent_id: str | None = None
    account_id: str | None = None
    is_active: bool | None = None
    licensed_seats: int | None = None
    used_seats: int | None = None
    available_seats: int | None = None
    tags: list[str] | None = None
    custom_attributes: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BusinessUnitRequest(ApiModel):
    """Payload for creating or replacing a business unit."""

    name: str
    description: str | None = None
    parent_id: str | None = None
    tags: list[str] | None = None
    custom_attributes: dict[str, Any] | None = None


class BusinessUnitAdmin(ApiModel):
    id: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None
    is_active: bool | None = None
    created_at: datetime | None = None


class BusinessUnitAdminRequest(ApiModel):
    email: str
    first_name: str
    last_name: str
    role: str
    permissions: list[str] | None = None


class SeatTypeAllocation(ApiModel):
    type: str | None = None
    total: int = 0
    used: int = 0
    available: int = 0


class LicensedSeats(ApiModel):
    """Seat allocation summary for a business unit."""

    total_seats: int = 0
    used_seats: int = 0
    available_seats: int = 0
    seat_types: list[SeatTypeAllocation] | None = None


class BusinessUnitListOptions(PaginationParams):
    name: str | None = None
    parent_id: str | None = None
    is_active: bool | None = None
    sort_by: str | None = None
    sort_order: str | None = None

    def to_params(self) -> list[tuple[str, str]]:
        return (
            QueryBuilder()
            .add("name", self.name)
            .add("parent_id", self.parent_id)
            .add_bool("is_active", self.is_active)
            .add_pagination(self.offset, self.limit)
            .add("sort_by", self.sort_by)
            .add("sort_order", self.sort_order)
            .build()
        )


class BusinessUnitListResponse(ListResponse):
    business_units: list[BusinessUnit] | None = None
