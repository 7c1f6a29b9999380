from __future__ import annotations

from pathlib import Path

import typer

from .common import (
    build_client,
    console,
    handle_cli_errors,
    load_payload,
    print_model,
    print_page_footer,
    print_table,
)

app = typer.Typer(help="Certificate inventory and lifecycle")

PAYLOAD_OPTION = typer.Option(None, "--payload", help="Request body as a JSON object")
PAYLOAD_FILE_OPTION = typer.Option(
    None, "--payload-file", exists=True, dir_okay=False, help="Path to a JSON request body"
)


@app.command("search")
@handle_cli_errors
def search(
    ctx: typer.Context,
    common_name: str | None = typer.Option(None, help="Filter by common name"),
    serial_number: str | None = typer.Option(None, help="Filter by serial number"),
    status: str | None = typer.Option(None, help="Filter by status (issued, revoked, ...)"),
    profile_id: str | None = typer.Option(None, help="Filter by issuing profile"),
    tag: list[str] | None = typer.Option(None, "--tag", help="Filter by tag; repeatable"),
    offset: int = typer.Option(0, help="Page offset (sent only with --limit)"),
    limit: int = typer.Option(0, help="Page size (sent only with --offset)"),
    sort_by: str | None = typer.Option(None, help="Sort field"),
    sort_order: str | None = typer.Option(None, help="asc or desc"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response"),
) -> None:
    """Search the certificate inventory."""

    with build_client(ctx) as client:
        page = client.certificates.search(
            {
                "common_name": common_name,
                "serial_number": serial_number,
                "status": status,
                "profile_id": profile_id,
                "tags": tag,
                "offset": offset,
                "limit": limit,
                "sort_by": sort_by,
                "sort_order": sort_order,
            }
        )
    if as_json:
        print_model(page)
        return
    print_table(
        "Certificates",
        ["Serial", "Common name", "Status", "Valid to"],
        [(c.serial_number, c.common_name, c.status, c.valid_to) for c in page.items or []],
    )
    print_page_footer(page.total, page.offset, page.limit)


@app.command("get")
@handle_cli_errors
def get(ctx: typer.Context, serial_number: str = typer.Argument(..., help="Serial number")) -> None:
    """Show a certificate by serial number."""

    with build_client(ctx) as client:
        print_model(client.certificates.get(serial_number))


@app.command("get-by-id")
@handle_cli_errors
def get_by_id(ctx: typer.Context, certificate_id: str = typer.Argument(...)) -> None:
    with build_client(ctx) as client:
        print_model(client.certificates.get_by_id(certificate_id))


@app.command("revoke")
@handle_cli_errors
def revoke(
    ctx: typer.Context,
    serial_number: str = typer.Argument(..., help="Serial number"),
    reason: str = typer.Option(..., help="Revocation reason, e.g. key_compromise"),
    comment: str | None = typer.Option(None, help="Free-form comment"),
) -> None:
    """Revoke a certificate."""

    with build_client(ctx) as client:
        client.certificates.revoke(serial_number, {"reason": reason, "comment": comment})
    console.print(f"[green]Revoked[/green] {serial_number}")


@app.command("unrevoke")
@handle_cli_errors
def unrevoke(ctx: typer.Context, serial_number: str = typer.Argument(...)) -> None:
    """Lift an on-hold revocation."""

    with build_client(ctx) as client:
        client.certificates.unrevoke(serial_number)
    console.print(f"[green]Unrevoked[/green] {serial_number}")


@app.command("formats")
@handle_cli_errors
def formats(ctx: typer.Context, serial_number: str = typer.Argument(...)) -> None:
    """List the additional download formats for a certificate."""

    with build_client(ctx) as client:
        result = client.certificates.get_additional_formats(serial_number)
    print_table("Formats", ["Format", "Value"], sorted(result.formats.items()))


@app.command("pickup")
@handle_cli_errors
def pickup(ctx: typer.Context, request_id: str = typer.Argument(...)) -> None:
    with build_client(ctx) as client:
        print_model(client.certificates.pickup(request_id))


@app.command("issue")
@handle_cli_errors
def issue(
    ctx: typer.Context,
    payload: str | None = PAYLOAD_OPTION,
    payload_file: Path | None = PAYLOAD_FILE_OPTION,
) -> None:
    """Issue a certificate from a JSON request body."""

    body = load_payload(payload, payload_file)
    with build_client(ctx) as client:
        print_model(client.certificates.issue(body))


@app.command("renew")
@handle_cli_errors
def renew(
    ctx: typer.Context,
    serial_number: str = typer.Argument(...),
    payload: str | None = typer.Option("{}", "--payload", help="Renewal body as JSON"),
    payload_file: Path | None = PAYLOAD_FILE_OPTION,
) -> None:
    with build_client(ctx) as client:
        print_model(client.certificates.renew(serial_number, load_payload(payload, payload_file)))
