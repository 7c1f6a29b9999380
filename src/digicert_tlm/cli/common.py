from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterable, Sequence
from functools import wraps
from pathlib import Path
from typing import Any, ParamSpec, TypeVar, cast

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from ..client import API_KEY_ENV, BASE_URL_ENV, TrustLifecycleClient
from ..config import ENCRYPTION_KEY_ENV, ConfigData, ConfigStore, EncryptedConfigError, Profile
from ..errors import APIError, HttpError, TlmError
from ..http_client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..secrets import SecretSpec, get_secret

console = Console()

DEBUG_ENV = "TLM_DEBUG"


def _render_http_error(exc: HttpError) -> None:
    console.print(f"[red]Error:[/red] {exc}")
    if isinstance(exc, APIError):
        if exc.request_id:
            console.print(f"Request ID: {exc.request_id}")
        for detail in exc.details:
            console.print(f"  - {detail}")


CommandParams = ParamSpec("CommandParams")
CommandReturn = TypeVar("CommandReturn")


def handle_cli_errors(
    func: Callable[CommandParams, CommandReturn],
) -> Callable[CommandParams, CommandReturn]:
    @wraps(func)
    def wrapper(*args: CommandParams.args, **kwargs: CommandParams.kwargs) -> CommandReturn:
        try:
            return func(*args, **kwargs)
        except typer.BadParameter:
            raise
        except typer.Exit:
            raise
        except HttpError as exc:
            _render_http_error(exc)
            raise typer.Exit(1) from None
        except EncryptedConfigError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            console.print(
                f"Export {ENCRYPTION_KEY_ENV} with the original key before rerunning the command."
            )
            raise typer.Exit(1) from None
        except TlmError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None
        except Exception as exc:
            if os.getenv(DEBUG_ENV):
                raise
            console.print(f"[red]Error:[/red] Unexpected failure: {exc}")
            console.print(f"Set {DEBUG_ENV}=1 for a stack trace.")
            raise typer.Exit(1) from exc

    return wrapper


def get_config_from_context(ctx: typer.Context, *, store: ConfigStore | None = None) -> ConfigData:
    """Return a cached :class:`ConfigData` instance stored on ``ctx``."""

    ctx.ensure_object(dict)
    existing = ctx.obj.get("config")
    if isinstance(existing, ConfigData):
        return existing

    cfg = (store or ConfigStore()).load()
    ctx.obj["config"] = cfg
    return cfg


def select_profile(ctx: typer.Context) -> Profile | None:
    """Return the profile named by ``--profile`` or the stored default."""

    ctx_obj = cast(dict[str, Any], ctx.ensure_object(dict))
    requested = ctx_obj.get("profile")
    cfg = get_config_from_context(ctx)
    if requested:
        profile = cfg.profiles.get(requested)
        if profile is None:
            raise typer.BadParameter(f"Profile '{requested}' not found")
        return profile
    if cfg.default_profile:
        return cfg.profiles.get(cfg.default_profile)
    return None


def resolve_api_key(profile: Profile | None) -> str:
    """Resolve the API key used to authenticate CLI requests.

    Resolution order is:

    1. ``DIGICERT_API_KEY`` in the environment.
    2. The variable named by the profile's ``api_key_env``.
    3. The profile's secret backend (``secret_backend``/``secret_ref``).
    4. The key stored in the (optionally encrypted) config file.
    """

    key = (os.getenv(API_KEY_ENV) or "").strip()
    if key:
        return key

    if profile is not None:
        if profile.api_key_env:
            key = (os.getenv(profile.api_key_env) or "").strip()
            if key:
                return key
        if profile.secret_backend and profile.secret_ref:
            secret = get_secret(SecretSpec(backend=profile.secret_backend, ref=profile.secret_ref))
            if secret:
                return secret
        if profile.api_key:
            return profile.api_key

    raise typer.BadParameter(
        f"No API key configured. Export {API_KEY_ENV} or run "
        "`tlm config create NAME --api-key-env VAR` to store a profile."
    )


def resolve_base_url(ctx: typer.Context, profile: Profile | None) -> str:
    ctx_obj = cast(dict[str, Any], ctx.ensure_object(dict))
    override = ctx_obj.get("base_url")
    if override:
        return cast(str, override)
    env_url = os.getenv(BASE_URL_ENV)
    if env_url:
        return env_url
    if profile is not None and profile.base_url:
        return profile.base_url
    return DEFAULT_BASE_URL


def build_client(ctx: typer.Context) -> TrustLifecycleClient:
    """Construct a client from global options, environment and the active profile."""

    profile = select_profile(ctx)
    api_key = resolve_api_key(profile)
    user_agent = DEFAULT_USER_AGENT
    timeout = DEFAULT_TIMEOUT
    if profile is not None:
        user_agent = profile.user_agent or user_agent
        timeout = profile.timeout or timeout
    return TrustLifecycleClient(
        api_key,
        base_url=resolve_base_url(ctx, profile),
        user_agent=user_agent,
        timeout=timeout,
    )


def load_payload(raw: str | None, path: Path | None = None) -> dict[str, Any]:
    """Parse a JSON object given inline or through ``--payload-file``."""

    if path is not None:
        raw = path.read_text(encoding="utf-8")
    if raw in (None, ""):
        raise typer.BadParameter("A JSON payload is required (--payload or --payload-file)")
    try:
        payload = json.loads(cast(str, raw))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON payload: {exc}") from exc
    if not isinstance(payload, dict):
        raise typer.BadParameter("Payload must be a JSON object")
    return cast(dict[str, Any], payload)


def print_model(model: BaseModel) -> None:
    console.print_json(data=model.model_dump(mode="json", by_alias=True, exclude_none=True))


def print_models(models: Iterable[BaseModel]) -> None:
    console.print_json(
        data=[m.model_dump(mode="json", by_alias=True, exclude_none=True) for m in models]
    )


def print_table(title: str, columns: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*["" if value is None else str(value) for value in row])
    console.print(table)


def print_page_footer(total: int, offset: int, limit: int) -> None:
    console.print(f"total={total} offset={offset} limit={limit}")


__all__ = [
    "build_client",
    "console",
    "get_config_from_context",
    "handle_cli_errors",
    "load_payload",
    "print_model",
    "print_models",
    "print_page_footer",
    "print_table",
    "resolve_api_key",
    "resolve_base_url",
    "select_profile",
]
