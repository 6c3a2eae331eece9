"""CLI commands for quick price calculations without recording a sale."""

from __future__ import annotations

import click

from starjet.domain.model.value_objects import RowKind
from starjet.domain.service.row_calculator import calculate_row_total


@click.command("row")
@click.option("--width", default="", help="Width (leave empty for flat pricing).")
@click.option("--length", default="", help="Length (leave empty for flat pricing).")
@click.option("--qty", "quantity", required=True, help="Quantity.")
@click.option("--price", "unit_price", required=True, help="Unit price.")
def calc_row(width: str, length: str, quantity: str, unit_price: str) -> None:
    """Compute the total of one row."""
    result = calculate_row_total(width, length, quantity, unit_price)

    if result.kind is RowKind.OVERFLOW:
        raise click.ClickException("Row total is too large to calculate.")
    if not result.valid:
        raise click.ClickException(
            "Invalid row: give both width and length or neither, "
            "and a quantity and unit price greater than zero."
        )

    click.echo(f"{result}  ({result.kind.value} priced)")
