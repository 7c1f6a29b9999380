from __future__ import annotations

import httpx
import pytest
import typer

from digicert_tlm.cli import app
from digicert_tlm.cli.common import handle_cli_errors
from digicert_tlm.config import EncryptedConfigError

API_ROOT = "https://one.digicert.com/mpki/api/v1"


def test_api_error_is_rendered(cli_runner, respx_mock) -> None:
    respx_mock.get(f"{API_ROOT}/certificate/nope").mock(
        return_value=httpx.Response(
            404,
            json={
                "code": "not_found",
                "message": "missing",
                "details": ["no such serial"],
                "request_id": "req-77",
            },
        )
    )

    result = cli_runner.invoke(app, ["certificates", "get", "nope"])

    assert result.exit_code == 1
    assert "digicert: missing (code: not_found, status: 404)" in result.stdout
    assert "no such serial" in result.stdout
    assert "req-77" in result.stdout


def test_plain_http_error_is_rendered(cli_runner, respx_mock) -> None:
    respx_mock.get(f"{API_ROOT}/profiles/templates").mock(
        return_value=httpx.Response(503, text="Service Unavailable")
    )

    result = cli_runner.invoke(app, ["profiles", "templates"])

    assert result.exit_code == 1
    assert "HTTP 503" in result.stdout


def test_transport_error_is_rendered(cli_runner, respx_mock) -> None:
    respx_mock.get(f"{API_ROOT}/profiles/public").mock(side_effect=httpx.ConnectError("refused"))

    result = cli_runner.invoke(app, ["profiles", "public"])

    assert result.exit_code == 1
    assert "transport error" in result.stdout


def test_invalid_base_url(cli_runner) -> None:
    result = cli_runner.invoke(app, ["--base-url", "ftp://nope", "profiles", "public"])

    assert result.exit_code == 1
    assert "invalid base URL" in result.stdout


def test_encrypted_config_hint(capsys: pytest.CaptureFixture[str]) -> None:
    @handle_cli_errors
    def broken() -> None:
        raise EncryptedConfigError("cannot decrypt")

    with pytest.raises(typer.Exit) as exc_info:
        broken()

    assert exc_info.value.exit_code == 1
    assert "TLM_CONFIG_ENCRYPTION_KEY" in capsys.readouterr().out


def test_unexpected_error_respects_debug_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    @handle_cli_errors
    def boom() -> None:
        raise RuntimeError("kaboom")

    with pytest.raises(typer.Exit):
        boom()

    monkeypatch.setenv("TLM_DEBUG", "1")
    with pytest.raises(RuntimeError, match="kaboom"):
        boom()
