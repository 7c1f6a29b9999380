"""Read-only access to certificate profiles and profile templates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..http_client import decode_model
from ..models.profiles import (
    Profile,
    ProfileListOptions,
    ProfileListResponse,
    ProfileTemplateListResponse,
)
from ._base import ServiceClient, segment


class ProfilesClient(ServiceClient):
    def list(
        self, options: Mapping[str, Any] | ProfileListOptions | None = None
    ) -> ProfileListResponse:
        params = self._params(options, ProfileListOptions)
        resp = self.http.get("profiles", params=params)
        return decode_model(resp, ProfileListResponse)

    def get(self, profile_id: str) -> Profile:
        resp = self.http.get(f"profiles/{segment(profile_id)}")
        return decode_model(resp, Profile)

    def list_public(self) -> ProfileListResponse:
        """Profiles that accept enrollments without administrator approval."""

        resp = self.http.get("profiles/public")
        return decode_model(resp, ProfileListResponse)

    def list_templates(self) -> ProfileTemplateListResponse:
        resp = self.http.get("profiles/templates")
        return decode_model(resp, ProfileTemplateListResponse)
