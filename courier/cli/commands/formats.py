from pathlib import Path

import click
from rich.console import Console

from ..helpers import config_option, load_config

console = Console()


@click.command()
@config_option
def formats_command(config_file: Path | None) -> None:
    config = load_config(config_file)
    console.print("[bold]Accepted document formats[/bold]")
    for version in config.supported_formats:
        console.print(f"  - {version}")
    plural = "" if config.max_age_months == 1 else "s"
    console.print(
        f"Documents must be younger than {config.max_age_months} month{plural}."
    )
