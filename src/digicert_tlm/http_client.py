from __future__ import annotations

import json as jsonlib
import logging
from collections.abc import Mapping, Sequence
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from . import __version__
from .errors import APIError, ConfigurationError, HttpError, ResponseDecodeError, TransportError
from .models.common import ApiModel

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://one.digicert.com"
API_VERSION = "v1"
API_PREFIX = f"mpki/api/{API_VERSION}"
DEFAULT_USER_AGENT = f"digicert-tlm-python/{__version__}"
DEFAULT_TIMEOUT = 30.0

ModelT = TypeVar("ModelT", bound=BaseModel)
QueryParams = Sequence[tuple[str, str]] | Mapping[str, Any]


def _validate_base_url(base_url: str) -> str:
    try:
        parsed = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigurationError(f"invalid base URL: {exc}") from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigurationError(f"invalid base URL: {base_url!r}")
    return base_url.rstrip("/")


def _encode_body(body: Any) -> bytes:
    if isinstance(body, ApiModel):
        body = body.to_payload()
    return jsonlib.dumps(body, ensure_ascii=False).encode("utf-8")


def _raise_for_status(resp: httpx.Response) -> None:
    if 200 <= resp.status_code < 300:
        return
    payload: Any = None
    if resp.content:
        try:
            payload = resp.json()
        except ValueError:
            payload = None
    if isinstance(payload, dict):
        raise APIError.from_payload(resp.status_code, payload)
    raise HttpError(resp.status_code, resp.text)


def decode_model(resp: httpx.Response, model: type[ModelT]) -> ModelT:
    """Validate ``resp`` into ``model``; an empty body yields ``model()``."""

    if not resp.content.strip():
        return model()
    try:
        return model.model_validate(resp.json())
    except (ValueError, ValidationError) as exc:
        raise ResponseDecodeError(f"failed to decode response: {exc}") from exc


def decode_model_list(resp: httpx.Response, model: type[ModelT]) -> list[ModelT]:
    """Validate a top-level JSON array of ``model`` records."""

    if not resp.content.strip():
        return []
    adapter = TypeAdapter(list[model])  # type: ignore[valid-type]
    try:
        return adapter.validate_python(resp.json())
    except (ValueError, ValidationError) as exc:
        raise ResponseDecodeError(f"failed to decode response: {exc}") from exc


class HttpClient:
    """Thin httpx wrapper that injects the API key header and maps errors."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
        default_headers: dict[str, str] | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("API key is required")
        if http_client is not None and not isinstance(http_client, httpx.Client):
            raise ConfigurationError("HTTP client must be an httpx.Client instance")
        self.base_url = _validate_base_url(base_url)
        self.user_agent = user_agent
        self._api_key = api_key
        self._default_headers = default_headers or {}
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout, follow_redirects=True)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{API_PREFIX}/{path.lstrip('/')}"

    def _headers(self, extra: dict[str, str] | None, has_body: bool) -> dict[str, str]:
        headers = {**self._default_headers, "Accept": "application/json"}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        if has_body:
            headers["Content-Type"] = "application/json"
        headers.update(extra or {})
        headers["X-API-Key"] = self._api_key
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        url = self.url_for(path)
        request_kwargs: dict[str, Any] = {
            "headers": self._headers(headers, json is not None),
        }
        if params:
            request_kwargs["params"] = params
        if json is not None:
            request_kwargs["content"] = _encode_body(json)

        logger.debug("%s %s", method, url)
        try:
            resp = self._client.request(method, url, **request_kwargs)
        except httpx.TimeoutException as exc:
            raise TransportError(f"timeout calling {method} {url}: {exc}") from exc
        except httpx.TransportError as exc:
            raise TransportError(f"transport error calling {method} {url}: {exc}") from exc
        logger.debug("%s %s -> %s", method, url, resp.status_code)

        _raise_for_status(resp)
        return resp

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        """Close the underlying :class:`httpx.Client` when this wrapper created it."""

        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
