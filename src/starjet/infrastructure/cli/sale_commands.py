"""CLI commands for the Sale aggregate."""

from __future__ import annotations

import click

from starjet.application.add_sale import AddSaleHandler
from starjet.application.delete_sale import DeleteSaleHandler
from starjet.application.dto import SaleDTO
from starjet.application.edit_sale import EditSaleHandler
from starjet.application.list_sales import ListSalesHandler
from starjet.application.mark_sale_done import MarkSaleDoneHandler
from starjet.application.rollback_sale import RollbackSaleHandler
from starjet.application.sales_summary import SalesSummaryHandler
from starjet.application.show_sale import ShowSaleHandler
from starjet.domain.exceptions import DomainException
from starjet.domain.model.role import Role
from starjet.domain.model.sale import SaleStatus
from starjet.domain.service.submission_guard import RowInput
from starjet.infrastructure.bootstrap import sale_repository, submission_guard

ROW_HELP = (
    "Row as 'Item:Width:Length:Qty:Price' or 'Item:Qty:Price'. "
    "Leave width and length empty for flat-priced rows. Any row with five "
    "or more ':'-separated parts is read as an area row, so write "
    "'Item:::Qty:Price' when the item name itself contains colons. Repeatable."
)


def parse_row(raw: str) -> RowInput:
    """Parse 'Banner:2:3:1:15' or 'Banner:5:20' into a RowInput.

    The last four fields are split off first, so 'A:B:C:5:20' is an area
    row for item 'A', not a flat row for item 'A:B:C'.
    """
    parts = raw.rsplit(":", 4)
    if len(parts) == 5:
        item, width, length, quantity, price = parts
        return RowInput(item, width, length, quantity, price)

    parts = raw.rsplit(":", 2)
    if len(parts) == 3:
        item, quantity, price = parts
        return RowInput(item_name=item, quantity=quantity, unit_price=price)

    raise click.BadParameter(
        f"Invalid row format '{raw}'. Expected 'Item:Width:Length:Qty:Price' "
        f"or 'Item:Qty:Price'."
    )


def _parse_rows(ctx, param, values: tuple[str, ...]) -> list[RowInput]:
    return [parse_row(v) for v in values]


def _display_sale(dto: SaleDTO) -> None:
    """Shared formatting for displaying a sale."""
    click.echo(f"Sale {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}  {dto.customer_phone}".rstrip())
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(
        f"  {'Item':<20} {'Width':>7} {'Length':>7} {'Qty':>6} {'Price':>12} {'Total':>14}"
    )
    click.echo(f"  {'-'*71}")
    for item in dto.items:
        click.echo(
            f"  {item.item_name:<20} {item.width:>7} {item.length:>7} "
            f"{item.quantity:>6} {item.unit_price:>12} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*71}")
    click.echo(f"  {'Subtotal':<42} {dto.subtotal:>29}")
    click.echo(f"  {'Discount %':<42} {dto.discount_percent:>29}")
    click.echo(f"  {'Total':<42} {dto.total:>29}")


@click.command("add")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--phone", default="", help="Customer phone.")
@click.option("--discount", default="0", help="Discount percentage (0-100).")
@click.option("--row", "rows", multiple=True, required=True, callback=_parse_rows, help=ROW_HELP)
def sale_add(customer: str, phone: str, discount: str, rows: list[RowInput]) -> None:
    """Record a new sale (status Pending)."""
    handler = AddSaleHandler(sale_repo=sale_repository(), guard=submission_guard())

    try:
        dto = handler.handle(
            customer_name=customer,
            customer_phone=phone,
            rows=rows,
            discount_percent=discount,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Sale created.")
    _display_sale(dto)


@click.command("edit")
@click.option("--id", "sale_id", required=True, help="Sale ID to edit.")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--phone", default="", help="Customer phone.")
@click.option("--discount", default="0", help="Discount percentage (0-100).")
@click.option("--row", "rows", multiple=True, required=True, callback=_parse_rows, help=ROW_HELP)
def sale_edit(sale_id: str, customer: str, phone: str, discount: str, rows: list[RowInput]) -> None:
    """Replace the customer details and rows of an existing sale."""
    handler = EditSaleHandler(sale_repo=sale_repository())

    try:
        dto = handler.handle(
            sale_id,
            customer_name=customer,
            customer_phone=phone,
            rows=rows,
            discount_percent=discount,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Sale updated.")
    _display_sale(dto)


@click.command("show")
@click.option("--id", "sale_id", required=True, help="Sale ID to display.")
def sale_show(sale_id: str) -> None:
    """Show details of an existing sale."""
    handler = ShowSaleHandler(sale_repo=sale_repository())

    try:
        dto = handler.handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("list")
@click.option(
    "--status",
    type=click.Choice(["Pending", "Completed", "all"], case_sensitive=False),
    default="all",
    show_default=True,
    help="Only show sales with this status.",
)
@click.option("--search", default=None, help="Filter by customer name.")
def sale_list(status: str, search: str | None) -> None:
    """List sales, newest first."""
    handler = ListSalesHandler(sale_repo=sale_repository())
    wanted = None if status.lower() == "all" else SaleStatus(status.capitalize())
    dtos = handler.handle(status=wanted, customer_search=search)

    if not dtos:
        click.echo("No sales found.")
        return

    click.echo(f"  {'ID':<32} {'Date':<20} {'Customer':<20} {'Status':<10} {'Total':>14}")
    click.echo(f"  {'-'*100}")
    for dto in dtos:
        click.echo(
            f"  {dto.id:<32} {dto.created_at:<20} {dto.customer_name:<20} "
            f"{dto.status:<10} {dto.total:>14}"
        )


@click.command("done")
@click.option("--id", "sale_id", required=True, help="Sale ID to mark as done.")
def sale_done(sale_id: str) -> None:
    """Mark a pending sale as completed."""
    handler = MarkSaleDoneHandler(sale_repo=sale_repository())

    try:
        handler.handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale {sale_id} marked as done.")


@click.command("rollback")
@click.option("--id", "sale_id", required=True, help="Sale ID to roll back.")
@click.confirmation_option(prompt="Are you sure you want to roll back this sale to pending?")
def sale_rollback(sale_id: str) -> None:
    """Move a completed sale back to pending."""
    handler = RollbackSaleHandler(sale_repo=sale_repository())

    try:
        handler.handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale {sale_id} rolled back to pending.")


@click.command("delete")
@click.option("--id", "sale_id", required=True, help="Sale ID to delete.")
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role]),
    envvar="STARJET_ROLE",
    default=Role.SALESMAN.value,
    show_default=True,
    help="Role of the current user.",
)
@click.confirmation_option(prompt="Are you sure you want to delete this sale? This cannot be undone.")
def sale_delete(sale_id: str, role: str) -> None:
    """Delete a sale (admin only)."""
    handler = DeleteSaleHandler(sale_repo=sale_repository())

    try:
        handler.handle(sale_id, role=Role(role))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale {sale_id} deleted.")


@click.command("summary")
def sale_summary() -> None:
    """Show pending count and completed sales totals."""
    dto = SalesSummaryHandler(sale_repo=sale_repository()).handle()

    click.echo(f"Pending sales:          {dto.pending_count}")
    click.echo(f"Completed (all time):   {dto.completed_total}")
    click.echo(f"Completed this month:   {dto.monthly_completed}")
    click.echo(f"Completed today:        {dto.daily_completed}")
