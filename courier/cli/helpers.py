from pathlib import Path

import click

from ..config import ConfigLoader, CourierConfig

config_option = click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a courier.toml config file (default: ./courier.toml)",
)


def load_config(config_file: Path | None) -> CourierConfig:
    try:
        return ConfigLoader.load(config_file)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
