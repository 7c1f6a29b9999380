"""Business unit and seat allocation endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..http_client import decode_model, decode_model_list
from ..models.business_units import (
    BusinessUnit,
    BusinessUnitAdmin,
    BusinessUnitAdminRequest,
    BusinessUnitListOptions,
    BusinessUnitListResponse,
    BusinessUnitRequest,
    LicensedSeats,
)
from ._base import ServiceClient, coerce, segment


class BusinessUnitsClient(ServiceClient):
    """Wrapper over the ``business-unit`` routes."""

    def create(self, request: Mapping[str, Any] | BusinessUnitRequest) -> BusinessUnit:
        body = coerce(request, BusinessUnitRequest)
        resp = self.http.post("business-unit", json=body)
        return decode_model(resp, BusinessUnit)

    def get(self, business_unit_id: str) -> BusinessUnit:
        resp = self.http.get(f"business-unit/{segment(business_unit_id)}")
        return decode_model(resp, BusinessUnit)

    def update(
        self, business_unit_id: str, request: Mapping[str, Any] | BusinessUnitRequest
    ) -> BusinessUnit:
        """Replace the mutable attributes of a business unit."""

        body = coerce(request, BusinessUnitRequest)
        resp = self.http.put(f"business-unit/{segment(business_unit_id)}", json=body)
        return decode_model(resp, BusinessUnit)

    def delete(self, business_unit_id: str) -> None:
        self.http.delete(f"business-unit/{segment(business_unit_id)}")

    def list(
        self, options: Mapping[str, Any] | BusinessUnitListOptions | None = None
    ) -> BusinessUnitListResponse:
        params = self._params(options, BusinessUnitListOptions)
        resp = self.http.get("business-unit", params=params)
        return decode_model(resp, BusinessUnitListResponse)

    def get_licensed_seats(self, business_unit_id: str) -> LicensedSeats:
        """Return seat totals for the unit, broken down by seat type."""

        resp = self.http.get(f"business-unit/{segment(business_unit_id)}/licensed-seats")
        return decode_model(resp, LicensedSeats)

    def add_admin(
        self, business_unit_id: str, request: Mapping[str, Any] | BusinessUnitAdminRequest
    ) -> BusinessUnitAdmin:
        body = coerce(request, BusinessUnitAdminRequest)
        resp = self.http.post(f"business-unit/{segment(business_unit_id)}/admin", json=body)
        return decode_model(resp, BusinessUnitAdmin)

    def remove_admin(self, business_unit_id: str, admin_id: str) -> None:
        self.http.delete(
            f"business-unit/{segment(business_unit_id)}/admin/{segment(admin_id)}"
        )

    def list_admins(self, business_unit_id: str) -> list[BusinessUnitAdmin]:
        resp = self.http.get(f"business-unit/{segment(business_unit_id)}/admin")
        return decode_model_list(resp, BusinessUnitAdmin)
