from __future__ import annotations

import typer

from .common import (
    build_client,
    console,
    handle_cli_errors,
    print_model,
    print_models,
    print_page_footer,
    print_table,
)

app = typer.Typer(help="Business units, seats and administrators")


@app.command("list")
@handle_cli_errors
def list_units(
    ctx: typer.Context,
    name: str | None = typer.Option(None, help="Filter by name"),
    parent_id: str | None = typer.Option(None, help="Filter by parent unit"),
    active: bool | None = typer.Option(None, "--active/--inactive", help="Filter by state"),
    offset: int = typer.Option(0, help="Page offset"),
    limit: int = typer.Option(0, help="Page size"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response"),
) -> None:
    """List business units."""

    with build_client(ctx) as client:
        page = client.business_units.list(
            {
                "name": name,
                "parent_id": parent_id,
                "is_active": active,
                "offset": offset,
                "limit": limit,
            }
        )
    if as_json:
        print_model(page)
        return
    print_table(
        "Business units",
        ["ID", "Name", "Active", "Seats used"],
        [(u.id, u.name, u.is_active, u.used_seats) for u in page.business_units or []],
    )
    print_page_footer(page.total, page.offset, page.limit)


@app.command("get")
@handle_cli_errors
def get(ctx: typer.Context, business_unit_id: str = typer.Argument(...)) -> None:
    with build_client(ctx) as client:
        print_model(client.business_units.get(business_unit_id))


@app.command("create")
@handle_cli_errors
def create(
    ctx: typer.Context,
    name: str = typer.Option(..., help="Business unit name"),
    description: str | None = typer.Option(None),
    parent_id: str | None = typer.Option(None, help="Parent business unit ID"),
    tag: list[str] | None = typer.Option(None, "--tag", help="Tag; repeatable"),
) -> None:
    """Create a business unit."""

    with build_client(ctx) as client:
        unit = client.business_units.create(
            {"name": name, "description": description, "parent_id": parent_id, "tags": tag}
        )
    print_model(unit)


@app.command("delete")
@handle_cli_errors
def delete(ctx: typer.Context, business_unit_id: str = typer.Argument(...)) -> None:
    with build_client(ctx) as client:
        client.business_units.delete(business_unit_id)
    console.print(f"[green]Deleted[/green] {business_unit_id}")


@app.command("seats")
@handle_cli_errors
def seats(ctx: typer.Context, business_unit_id: str = typer.Argument(...)) -> None:
    """Show licensed seat usage for a business unit."""

    with build_client(ctx) as client:
        result = client.business_units.get_licensed_seats(business_unit_id)
    print_table(
        "Licensed seats",
        ["Type", "Total", "Used", "Available"],
        [("all", result.total_seats, result.used_seats, result.available_seats)]
        + [(s.type, s.total, s.used, s.available) for s in result.seat_types or []],
    )


@app.command("admins")
@handle_cli_errors
def admins(ctx: typer.Context, business_unit_id: str = typer.Argument(...)) -> None:
    with build_client(ctx) as client:
        print_models(client.business_units.list_admins(business_unit_id))
