from __future__ import annotations

import typer

from ..models.profiles import Profile
from .common import build_client, handle_cli_errors, print_model, print_page_footer, print_table

app = typer.Typer(help="Certificate profiles (issuance policies)")


def _profile_rows(profiles: list[Profile] | None) -> list[tuple[str | None, ...]]:
    return [(p.id, p.name, p.status, p.enrollment_method) for p in profiles or []]


@app.command("list")
@handle_cli_errors
def list_profiles(
    ctx: typer.Context,
    name: str | None = typer.Option(None),
    profile_type: str | None = typer.Option(None, "--type", help="Filter by profile type"),
    status: str | None = typer.Option(None),
    enrollment_method: str | None = typer.Option(None),
    offset: int = typer.Option(0, help="Page offset"),
    limit: int = typer.Option(0, help="Page size"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response"),
) -> None:
    """List certificate profiles."""

    with build_client(ctx) as client:
        page = client.profiles.list(
            {
                "name": name,
                "type": profile_type,
                "status": status,
                "enrollment_method": enrollment_method,
                "offset": offset,
                "limit": limit,
            }
        )
    if as_json:
        print_model(page)
        return
    print_table("Profiles", ["ID", "Name", "Status", "Enrollment"], _profile_rows(page.profiles))
    print_page_footer(page.total, page.offset, page.limit)


@app.command("get")
@handle_cli_errors
def get(ctx: typer.Context, profile_id: str = typer.Argument(...)) -> None:
    with build_client(ctx) as client:
        print_model(client.profiles.get(profile_id))


@app.command("public")
@handle_cli_errors
def public(ctx: typer.Context) -> None:
    """List profiles open to public enrollment."""

    with build_client(ctx) as client:
        page = client.profiles.list_public()
    print_table("Public profiles", ["ID", "Name", "Status", "Enrollment"], _profile_rows(page.profiles))


@app.command("templates")
@handle_cli_errors
def templates(ctx: typer.Context) -> None:
    with build_client(ctx) as client:
        result = client.profiles.list_templates()
    print_table(
        "Profile templates",
        ["ID", "Name", "Type"],
        [(t.id, t.name, t.type) for t in result.templates or []],
    )
