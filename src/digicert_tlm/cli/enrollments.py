from __future__ import annotations

from pathlib import Path

import typer

from .common import (
    build_client,
    handle_cli_errors,
    load_payload,
    print_model,
    print_page_footer,
    print_table,
)

app = typer.Typer(help="Enrollment codes, redemption and approval queue")


@app.command("list")
@handle_cli_errors
def list_details(
    ctx: typer.Context,
    status: str | None = typer.Option(None, help="Filter by enrollment status"),
    profile_id: str | None = typer.Option(None, help="Filter by profile"),
    offset: int = typer.Option(0, help="Page offset"),
    limit: int = typer.Option(0, help="Page size"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response"),
) -> None:
    """List enrollment details."""

    with build_client(ctx) as client:
        page = client.enrollments.list_details(
            {"status": status, "profile_id": profile_id, "offset": offset, "limit": limit}
        )
    if as_json:
        print_model(page)
        return
    print_table(
        "Enrollments",
        ["ID", "Status", "Common name", "Profile"],
        [(e.id, e.status, e.common_name, e.profile_id) for e in page.enrollments or []],
    )
    print_page_footer(page.total, page.offset, page.limit)


@app.command("get")
@handle_cli_errors
def get(ctx: typer.Context, enrollment_code: str = typer.Argument(..., help="Enrollment code")) -> None:
    with build_client(ctx) as client:
        print_model(client.enrollments.get(enrollment_code))


@app.command("status")
@handle_cli_errors
def status(ctx: typer.Context, enrollment_id: str = typer.Argument(...)) -> None:
    with build_client(ctx) as client:
        print_model(client.enrollments.get_status(enrollment_id))


@app.command("details")
@handle_cli_errors
def details(ctx: typer.Context, enrollment_id: str = typer.Argument(...)) -> None:
    with build_client(ctx) as client:
        print_model(client.enrollments.get_details(enrollment_id))


@app.command("create")
@handle_cli_errors
def create(
    ctx: typer.Context,
    payload: str | None = typer.Option(None, "--payload", help="Enrollment body as JSON"),
    payload_file: Path | None = typer.Option(None, "--payload-file", exists=True, dir_okay=False),
    manual: bool = typer.Option(False, "--manual", help="Queue for approval with a CSR"),
) -> None:
    """Create an enrollment, or a manual enrollment with ``--manual``."""

    body = load_payload(payload, payload_file)
    with build_client(ctx) as client:
        if manual:
            result = client.enrollments.create_manual(body)
        else:
            result = client.enrollments.create(body)
    print_model(result)


@app.command("redeem")
@handle_cli_errors
def redeem(
    ctx: typer.Context,
    enrollment_code: str = typer.Option(..., "--code", help="Enrollment code"),
    csr_file: Path = typer.Option(..., "--csr-file", exists=True, dir_okay=False),
) -> None:
    """Redeem an enrollment code with a PEM CSR."""

    csr = csr_file.read_text(encoding="utf-8")
    with build_client(ctx) as client:
        print_model(client.enrollments.redeem({"enrollment_code": enrollment_code, "csr": csr}))
