import typer

from milight.bridge.client import BridgeClient
from milight.bridge.command_builder import check_byte
from milight.bridge.commands import COMMANDS
from milight.common.app_config import settings as app_settings
from milight.exceptions import SocketCreationError


def parse_byte_util(text: str) -> int:
    """Accepts a command or color name, a decimal number or a 0x prefixed hex number."""
    text = text.strip()

    if text.lower() in COMMANDS:
        return COMMANDS[text.lower()]

    try:
        value = int(text, 0)
    except ValueError:
        raise typer.BadParameter(
            f"'{text}' is not a known command, color or byte value."
        ) from None

    try:
        return check_byte(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None


def open_client_util() -> BridgeClient:
    host = app_settings.host

    if not host:
        typer.echo(
            "Error: No bridge address. Use --host, or --interface to broadcast on an interface.",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        return BridgeClient(
            host, port=app_settings.port, interface_ip=app_settings.interface_ip
        )
    except SocketCreationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
