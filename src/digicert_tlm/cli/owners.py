from __future__ import annotations

import typer

from .common import (
    build_client,
    console,
    handle_cli_errors,
    print_model,
    print_page_footer,
    print_table,
)

app = typer.Typer(help="Certificate owners")


@app.command("list")
@handle_cli_errors
def list_owners(
    ctx: typer.Context,
    email: str | None = typer.Option(None, help="Filter by email"),
    first_name: str | None = typer.Option(None),
    last_name: str | None = typer.Option(None),
    active: bool | None = typer.Option(None, "--active/--inactive"),
    offset: int = typer.Option(0, help="Page offset"),
    limit: int = typer.Option(0, help="Page size"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response"),
) -> None:
    """List certificate owners."""

    with build_client(ctx) as client:
        page = client.certificate_owners.list(
            {
                "email": email,
                "first_name": first_name,
                "last_name": last_name,
                "is_active": active,
                "offset": offset,
                "limit": limit,
            }
        )
    if as_json:
        print_model(page)
        return
    print_table(
        "Certificate owners",
        ["ID", "Email", "Name"],
        [
            (o.id, o.email, " ".join(p for p in (o.first_name, o.last_name) if p))
            for o in page.owners or []
        ],
    )
    print_page_footer(page.total, page.offset, page.limit)


@app.command("get")
@handle_cli_errors
def get(ctx: typer.Context, owner_id: str = typer.Argument(...)) -> None:
    with build_client(ctx) as client:
        print_model(client.certificate_owners.get(owner_id))


@app.command("delete")
@handle_cli_errors
def delete(ctx: typer.Context, owner_id: str = typer.Argument(...)) -> None:
    with build_client(ctx) as client:
        client.certificate_owners.delete(owner_id)
    console.print(f"[green]Deleted[/green] {owner_id}")


@app.command("assign")
@handle_cli_errors
def assign(
    ctx: typer.Context,
    certificate_id: str = typer.Argument(..., help="Certificate ID"),
    owner_id: list[str] = typer.Option(..., "--owner-id", help="Owner ID; repeatable"),
) -> None:
    """Replace the owners attached to a certificate."""

    with build_client(ctx) as client:
        client.certificate_owners.assign_to_certificate(certificate_id, owner_id)
    console.print(f"[green]Assigned[/green] {len(owner_id)} owner(s) to {certificate_id}")


@app.command("unassign")
@handle_cli_errors
def unassign(ctx: typer.Context, certificate_id: str = typer.Argument(...)) -> None:
    """Detach every owner from a certificate."""

    with build_client(ctx) as client:
        client.certificate_owners.remove_from_certificate(certificate_id)
    console.print(f"[green]Removed owners[/green] from {certificate_id}")
