import click

from .commands.config import config_command
from .commands.formats import formats_command


@click.group()
def app() -> None:
    pass


app.add_command(config_command, name="config")
app.add_command(formats_command, name="formats")
__all__ = ["app"]
