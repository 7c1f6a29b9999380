"""Commands for inspecting and mutating stored connection profiles."""

from __future__ import annotations

from typing import Any

import typer
from rich import print

from ..config import ConfigStore, Profile
from ..secrets import (
    SUPPORTED_BACKENDS,
    build_api_key_keyring_ref,
    delete_keyring_secret,
    store_keyring_secret,
)
from .common import handle_cli_errors

app = typer.Typer(help="Connection profiles & configuration")

MASK_PLACEHOLDER = "<hidden>"
SENSITIVE_KEYS = frozenset({"api_key"})


@app.command("list")
@handle_cli_errors
def config_list() -> None:
    """Show all saved profiles, highlighting the default profile."""

    cfg = ConfigStore().load()
    for name in sorted(cfg.profiles):
        star = "*" if cfg.default_profile == name else " "
        print(f"{star} {name}")


@app.command("show")
@handle_cli_errors
def config_show(name: str = typer.Argument(..., help="Profile name")) -> None:
    """Display the stored configuration for a profile."""

    profile = ConfigStore().get_profile(name)
    if not profile:
        raise typer.BadParameter(f"Profile '{name}' not found")
    print(_mask_sensitive_fields(dict(vars(profile))))


@app.command("create")
@handle_cli_errors
def config_create(
    name: str = typer.Argument(..., help="Profile name"),
    base_url: str | None = typer.Option(None, help="TLM base URL (defaults to one.digicert.com)"),
    api_key_env: str | None = typer.Option(
        None, help="Environment variable that holds the API key"
    ),
    api_key: str | None = typer.Option(
        None,
        help="API key to store; encrypted when TLM_CONFIG_ENCRYPTION_KEY is set",
    ),
    store_in_keyring: bool = typer.Option(
        False,
        "--keyring",
        help="Store --api-key in the system keyring instead of the config file",
    ),
    secret_backend: str | None = typer.Option(None, help="Secret backend: env or keyring"),
    secret_ref: str | None = typer.Option(
        None, help="Secret reference (env: VAR, keyring: SERVICE:USERNAME)"
    ),
    user_agent: str | None = typer.Option(None, help="Override the User-Agent header"),
    timeout: float | None = typer.Option(None, help="Request timeout in seconds"),
    set_default: bool = typer.Option(False, "--set-default", help="Make this the default"),
) -> None:
    """Create or replace a connection profile."""

    if secret_backend and secret_backend.lower() not in SUPPORTED_BACKENDS:
        raise typer.BadParameter(
            f"Unsupported secret backend '{secret_backend}'; choose from "
            + ", ".join(SUPPORTED_BACKENDS)
        )
    if bool(secret_backend) != bool(secret_ref):
        raise typer.BadParameter("--secret-backend and --secret-ref must be given together")

    stored_key = api_key
    if store_in_keyring:
        if not api_key:
            raise typer.BadParameter("--keyring requires --api-key")
        secret_backend = "keyring"
        secret_ref = build_api_key_keyring_ref(name)
        ok, reason = store_keyring_secret(secret_ref, api_key)
        if not ok:
            raise typer.BadParameter(f"Unable to store API key in keyring ({reason})")
        stored_key = None

    profile = Profile(
        name=name,
        base_url=base_url,
        api_key=stored_key,
        api_key_env=api_key_env,
        secret_backend=secret_backend,
        secret_ref=secret_ref,
        user_agent=user_agent,
        timeout=timeout,
    )
    cfg = ConfigStore().add_or_update_profile(profile, set_default=set_default)
    suffix = " (default)" if cfg.default_profile == name else ""
    print(f"[green]Saved profile {name}{suffix}[/green]")


@app.command("use")
@handle_cli_errors
def config_use(name: str = typer.Argument(..., help="Profile name")) -> None:
    """Make ``name`` the default profile."""

    try:
        ConfigStore().set_default_profile(name)
    except KeyError as exc:
        raise typer.BadParameter(f"Profile '{name}' not found") from exc
    print(f"Default profile set to {name}")


@app.command("delete")
@handle_cli_errors
def config_delete(name: str = typer.Argument(..., help="Profile name")) -> None:
    """Remove a profile and any keyring secret created for it."""

    store = ConfigStore()
    profile = store.get_profile(name)
    if profile is None:
        raise typer.BadParameter(f"Profile '{name}' not found")
    if profile.secret_backend == "keyring" and profile.secret_ref == build_api_key_keyring_ref(name):
        ok, reason = delete_keyring_secret(profile.secret_ref)
        if not ok:
            print(f"[yellow]Keyring entry not removed ({reason})[/yellow]")
    store.delete_profile(name)
    print(f"Deleted profile {name}")


def _mask_sensitive_fields(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``data`` with sensitive keys masked."""

    masked = dict(data)
    for key in masked:
        if key in SENSITIVE_KEYS and masked[key] not in (None, ""):
            masked[key] = MASK_PLACEHOLDER
    return masked


__all__ = [
    "app",
    "config_create",
    "config_delete",
    "config_list",
    "config_show",
    "config_use",
]
