"""Plumbing shared by the per-resource service clients."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from ..http_client import HttpClient

PayloadModel = TypeVar("PayloadModel", bound=BaseModel)


def segment(value: str) -> str:
    """Percent-encode a caller supplied path segment, slashes included."""

    return quote(str(value), safe="")


def coerce(payload: Mapping[str, Any] | PayloadModel | None, model: type[PayloadModel]) -> PayloadModel | None:
    if payload is None or isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        return model.model_validate(payload.model_dump(by_alias=True))
    return model.model_validate(dict(payload))


class ServiceClient:
    """Base for the resource groupings that share one :class:`HttpClient`."""

    def __init__(self, http: HttpClient) -> None:
        self.http = http

    def _params(self, options: Any, model: type[BaseModel]) -> list[tuple[str, str]] | None:
        opts = coerce(options, model)
        if opts is None:
            return None
        return opts.to_params() or None  # type: ignore[attr-defined]
