import logging

import click

from starjet.infrastructure.cli.calc_commands import calc_row
from starjet.infrastructure.cli.sale_commands import (
    sale_add,
    sale_delete,
    sale_done,
    sale_edit,
    sale_list,
    sale_rollback,
    sale_show,
    sale_summary,
)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="STARJET_LOG_LEVEL",
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Star Jet — sales entry and tracking"""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def sale() -> None:
    """Manage sales."""


@cli.group()
def calc() -> None:
    """Price calculations."""


# Register subcommands
sale.add_command(sale_add)
sale.add_command(sale_delete)
sale.add_command(sale_done)
sale.add_command(sale_edit)
sale.add_command(sale_list)
sale.add_command(sale_rollback)
sale.add_command(sale_show)
sale.add_command(sale_summary)
calc.add_command(calc_row)
