from __future__ import annotations

import json

import httpx
import pytest

from digicert_tlm.errors import (
    APIError,
    ConfigurationError,
    HttpError,
    ResponseDecodeError,
    TransportError,
)
from digicert_tlm.http_client import (
    DEFAULT_USER_AGENT,
    HttpClient,
    decode_model,
    decode_model_list,
)
from digicert_tlm.models.business_units import BusinessUnitAdmin
from digicert_tlm.models.certificates import CertificateRequest, CertificateSearchResponse
from digicert_tlm.models.common import ProfileReference


def make_response(status: int, *, json_body: object | None = None, text: str = "") -> httpx.Response:
    request = httpx.Request("GET", "https://one.digicert.com/mpki/api/v1/test")
    if json_body is not None:
        return httpx.Response(status, json=json_body, request=request)
    return httpx.Response(status, text=text, request=request)


def test_requests_resolve_below_api_prefix(respx_mock, api_root) -> None:
    route = respx_mock.get(f"{api_root}/certificate-search").mock(
        return_value=httpx.Response(200, json={})
    )
    client = HttpClient("k")

    client.get("certificate-search")
    client.get("/certificate-search")

    assert route.call_count == 2
    assert str(route.calls.last.request.url) == f"{api_root}/certificate-search"


@pytest.mark.parametrize(
    "base_url, expected",
    [
        ("https://tlm.example.test/", "https://tlm.example.test/mpki/api/v1/profiles"),
        ("https://tlm.example.test/custom", "https://tlm.example.test/custom/mpki/api/v1/profiles"),
        ("http://localhost:8080", "http://localhost:8080/mpki/api/v1/profiles"),
    ],
)
def test_url_for_handles_custom_base_urls(base_url: str, expected: str) -> None:
    client = HttpClient("k", base_url)

    assert client.url_for("profiles") == expected


def test_default_headers_are_sent(respx_mock, api_root) -> None:
    route = respx_mock.get(f"{api_root}/profiles").mock(return_value=httpx.Response(200, json={}))
    client = HttpClient("secret-key", default_headers={"X-Trace": "abc"})

    client.get("profiles", headers={"X-Extra": "1"})

    headers = route.calls.last.request.headers
    assert headers["X-API-Key"] == "secret-key"
    assert headers["Accept"] == "application/json"
    assert headers["User-Agent"] == DEFAULT_USER_AGENT
    assert headers["X-Trace"] == "abc"
    assert headers["X-Extra"] == "1"
    assert "Content-Type" not in headers


def test_api_key_header_cannot_be_overridden(respx_mock, api_root) -> None:
    route = respx_mock.get(f"{api_root}/profiles").mock(return_value=httpx.Response(200, json={}))
    client = HttpClient("real-key")

    client.get("profiles", headers={"X-API-Key": "spoofed"})

    assert route.calls.last.request.headers["X-API-Key"] == "real-key"


def test_custom_and_empty_user_agent(respx_mock, api_root) -> None:
    route = respx_mock.get(f"{api_root}/profiles").mock(return_value=httpx.Response(200, json={}))

    HttpClient("k", user_agent="my-app/2.0").get("profiles")
    assert route.calls.last.request.headers["User-Agent"] == "my-app/2.0"

    HttpClient("k", user_agent="").get("profiles")
    assert route.calls.last.request.headers.get("User-Agent", "").startswith("python-httpx")


def test_json_body_sets_content_type_and_omits_unset_fields(respx_mock, api_root) -> None:
    route = respx_mock.post(f"{api_root}/certificate").mock(
        return_value=httpx.Response(201, json={})
    )
    client = HttpClient("k")
    body = CertificateRequest(profile=ProfileReference(id="p-1"), csr="CSR", tags=["ünïcode"])

    client.post("certificate", json=body)

    request = route.calls.last.request
    assert request.headers["Content-Type"] == "application/json"
    payload = json.loads(request.content)
    assert payload == {"profile": {"id": "p-1"}, "csr": "CSR", "tags": ["ünïcode"]}
    assert "ünïcode".encode("utf-8") in request.content


def test_query_pairs_preserve_repeated_keys(respx_mock, api_root) -> None:
    route = respx_mock.get(f"{api_root}/certificate-search").mock(
        return_value=httpx.Response(200, json={})
    )
    client = HttpClient("k")

    client.get(
        "certificate-search",
        params=[("tags", "a"), ("tags", "b"), ("common_name", "test & co/ü")],
    )

    params = route.calls.last.request.url.params
    assert params.get_list("tags") == ["a", "b"]
    assert params["common_name"] == "test & co/ü"


def test_json_error_body_raises_api_error(respx_mock, api_root) -> None:
    respx_mock.get(f"{api_root}/certificate/missing").mock(
        return_value=httpx.Response(
            404,
            json={
                "code": "not_found",
                "message": "Certificate not found",
                "details": ["serial missing"],
                "request_id": "req-1",
            },
        )
    )

    with pytest.raises(APIError) as exc_info:
        HttpClient("k").get("certificate/missing")

    err = exc_info.value
    assert err.status_code == 404
    assert err.code == "not_found"
    assert err.details == ["serial missing"]
    assert err.request_id == "req-1"
    assert str(err) == "digicert: Certificate not found (code: not_found, status: 404)"


@pytest.mark.parametrize("body", ["Internal Server Error", "", "[1, 2]"])
def test_non_object_error_body_raises_http_error(respx_mock, api_root, body: str) -> None:
    respx_mock.get(f"{api_root}/profiles").mock(return_value=httpx.Response(500, text=body))

    with pytest.raises(HttpError) as exc_info:
        HttpClient("k").get("profiles")

    err = exc_info.value
    assert not isinstance(err, APIError)
    assert err.status_code == 500
    assert err.message == body


def test_timeout_is_reported_as_transport_error(respx_mock, api_root) -> None:
    respx_mock.get(f"{api_root}/certificate-search").mock(
        side_effect=httpx.ReadTimeout("timed out")
    )

    with pytest.raises(TransportError) as exc_info:
        HttpClient("k").get("certificate-search")

    assert "timeout" in str(exc_info.value)


def test_connection_failure_is_reported_as_transport_error(respx_mock, api_root) -> None:
    respx_mock.get(f"{api_root}/profiles").mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(TransportError) as exc_info:
        HttpClient("k").get("profiles")

    assert "refused" in str(exc_info.value)


def test_constructor_validation() -> None:
    with pytest.raises(ConfigurationError, match="API key is required"):
        HttpClient("")
    with pytest.raises(ConfigurationError, match="invalid base URL"):
        HttpClient("k", "not a url")
    with pytest.raises(ConfigurationError, match="invalid base URL"):
        HttpClient("k", "ftp://files.example.test")
    with pytest.raises(ConfigurationError, match="httpx.Client"):
        HttpClient("k", http_client=object())  # type: ignore[arg-type]


def test_injected_client_is_not_closed() -> None:
    transport = httpx.Client()
    with HttpClient("k", http_client=transport):
        pass

    assert transport.is_closed is False
    transport.close()


def test_owned_client_is_closed() -> None:
    client = HttpClient("k")
    client.close()

    assert client._client.is_closed is True


def test_decode_empty_body_yields_defaults() -> None:
    result = decode_model(make_response(200), CertificateSearchResponse)

    assert result.total == 0
    assert result.items is None


def test_decode_malformed_json() -> None:
    with pytest.raises(ResponseDecodeError, match="failed to decode response"):
        decode_model(make_response(200, text='{"invalid": json}'), CertificateSearchResponse)


def test_decode_shape_mismatch() -> None:
    with pytest.raises(ResponseDecodeError):
        decode_model(make_response(200, json_body={"total": "many"}), CertificateSearchResponse)


def test_decode_model_list() -> None:
    resp = make_response(200, json_body=[{"id": "a1", "email": "a@example.com"}])

    admins = decode_model_list(resp, BusinessUnitAdmin)

    assert [a.id for a in admins] == ["a1"]
    assert decode_model_list(make_response(200), BusinessUnitAdmin) == []


def test_body_serialisation_matches_to_payload(respx_mock, api_root) -> None:
    route = respx_mock.post(f"{api_root}/certificate").mock(
        return_value=httpx.Response(201, json={})
    )
    body = CertificateRequest.model_validate(
        {"profile": {"id": "p"}, "ca_attributes": {"schema": {"ou": "x"}}, "vendor_flag": 1}
    )

    HttpClient("k").post("certificate", json=body)

    assert json.loads(route.calls.last.request.content) == body.to_payload()
    assert "schema" in json.loads(route.calls.last.request.content)["ca_attributes"]
