import click

from .commands.build import build_command
from .commands.validate import validate_command


@click.group()
def app() -> None:
    pass


app.add_command(build_command, name="build")
app.add_command(validate_command, name="validate")
__all__ = ["app"]
