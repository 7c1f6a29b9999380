from __future__ import annotations

import logging

import typer

from . import business_units, certificates, config, enrollments, owners, profiles

app = typer.Typer(help="DigiCert Trust Lifecycle Manager CLI")


def _register_sub_app(name: str, sub_app: typer.Typer) -> None:
    app.add_typer(sub_app, name=name)


_register_sub_app("config", config.app)
_register_sub_app("certificates", certificates.app)
_register_sub_app("business-units", business_units.app)
_register_sub_app("owners", owners.app)
_register_sub_app("enrollments", enrollments.app)
_register_sub_app("profiles", profiles.app)


@app.callback()
def main(
    ctx: typer.Context,
    profile: str | None = typer.Option(None, "--profile", help="Stored profile to use"),
    base_url: str | None = typer.Option(None, "--base-url", help="Override the TLM base URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Initialize shared Typer context state."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["profile"] = profile
    ctx.obj["base_url"] = base_url


__all__ = [
    "app",
    "business_units",
    "certificates",
    "config",
    "enrollments",
    "owners",
    "profiles",
]
