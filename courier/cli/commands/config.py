"""Config command - show the effective configuration.

Environment variables are applied first, then ``courier.toml`` on top.
"""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...constants import EnvVars
from ..helpers import config_option, load_config

console = Console()


@click.command()
@config_option
def config_command(config_file: Path | None) -> None:
    config = load_config(config_file)
    table = Table(title="Effective Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Env var", style="dim")
    table.add_row(
        "supported_formats", ", ".join(config.supported_formats), EnvVars.FORMATS
    )
    table.add_row(
        "max_age_months", str(config.max_age_months), EnvVars.MAX_AGE_MONTHS
    )
    table.add_row("verbosity", str(config.verbosity), EnvVars.VERBOSITY)
    console.print(table)
