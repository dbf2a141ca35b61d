import json

import typer
from typing_extensions import Annotated

from milight.bridge.commands import COLORS, COMMANDS, OPERATION_COMMANDS

from .._utils import open_client_util, parse_byte_util

app = typer.Typer(
    name="command", help="List and send raw bridge commands.", no_args_is_help=True
)


@app.command("list", help="Show the command table.")
def list_commands(
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON.")
    ] = False,
    colors: Annotated[
        bool, typer.Option("--colors", help="Only show color codes.")
    ] = False,
    operations: Annotated[
        bool, typer.Option("--operations", help="Only show operation codes.")
    ] = False,
):
    if colors and operations:
        typer.echo("Error: --colors and --operations are mutually exclusive.", err=True)
        raise typer.Exit(code=1)

    if colors:
        table = COLORS
    elif operations:
        table = OPERATION_COMMANDS
    else:
        table = COMMANDS

    if json_output:
        typer.echo(json.dumps(dict(table), indent=2))
        return

    width = max(len(name) for name in table)

    for name, value in table.items():
        typer.echo(f"{name.ljust(width)}  0x{value:02X}")


@app.command("send", help="Send a single command to the bridge.")
def send_command(
    command: Annotated[
        str, typer.Argument(help="Command name, or a byte such as 66 or 0x42.")
    ],
    value: Annotated[
        str,
        typer.Argument(help="Value byte, or a color name. Defaults to 0x00."),
    ] = "0",
):
    command_byte = parse_byte_util(command)
    value_byte = parse_byte_util(value)

    with open_client_util() as client:
        sent = client.send(command_byte, value_byte)

    if not sent:
        typer.echo(f"Error: Failed to send {command} to {client.address}.", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Sent 0x{command_byte:02X} 0x{value_byte:02X} to {client.address}:{client.port}"
    )
