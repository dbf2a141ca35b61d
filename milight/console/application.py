import logging
import os
import shlex
from typing import Optional

import typer
from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.history import FileHistory
from typing_extensions import Annotated

from milight import version as milight_version
from milight.bridge.const import DEFAULT_PORT
from milight.common.app_config import (
    get_available_interfaces,
)
from milight.common.app_config import settings as app_settings

try:
    from signal import SIG_DFL, SIGPIPE, signal

    signal(SIGPIPE, SIG_DFL)
except ImportError:
    pass

app = typer.Typer(
    name="milight",
    help="Control MiLight WiFi lighting bridges.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool):
    if value:
        print(f"Milight version {milight_version.version}")
        raise typer.Exit()


def interface_callback(value: str):
    if value == "list":
        interfaces = get_available_interfaces()

        for name, ip, prefix, broadcast in interfaces:
            print(f"{name}: {ip}/{prefix} broadcast {broadcast}")

        raise typer.Exit()
    return value


@app.callback()
def global_options(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show application version and exit.",
        ),
    ] = False,
    host: Annotated[
        Optional[str],
        typer.Option(
            "--host",
            "-H",
            help="IP address or host name of the bridge, e.g. 192.168.0.255 to broadcast.",
            show_default=False,
        ),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option(
            "--port",
            "-p",
            help=f"UDP port of the bridge. Default: {DEFAULT_PORT}.",
            show_default=False,
        ),
    ] = None,
    interface: Annotated[
        Optional[str],
        typer.Option(
            "--interface",
            "-i",
            callback=interface_callback,
            help="Send from this network interface, and broadcast on it when no --host is given. Use 'list' to show available interfaces.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every datagram sent to the bridge.",
            show_default=True,
        ),
    ] = False,
):
    """
    Milight: WiFi lighting bridge control utility.
    """
    if host is not None:
        app_settings.host = host

    if port is not None:
        app_settings.port = port

    if interface is not None:
        app_settings.interface = interface

    app_settings.verbose = verbose

    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        level=logging.DEBUG if verbose else logging.WARNING,
    )
    logging.getLogger("milight").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


from .commands.bridge import app as command_app

app.add_typer(command_app, name="command")

from .commands.zone import app as zone_app

app.add_typer(zone_app, name="zone")


@app.command(name="repl", help="Start an interactive Milight shell.")
def start_repl():
    """
    Starts an interactive shell (REPL) for Milight commands.
    Type commands directly, e.g., 'zone on 1'.
    Type 'exit' or 'quit' to leave the REPL.
    An empty prompt will show main help. 'help command' will show command help.
    """
    history_file = os.path.expanduser("~/.milight_repl_history")
    session = PromptSession(
        history=FileHistory(history_file),
        auto_suggest=AutoSuggestFromHistory(),
    )

    while True:
        try:
            command_string = session.prompt("milight> ")
            if command_string.strip().lower() in ["exit", "quit"]:
                break

            args = repl_args(command_string)

            try:
                app(args, prog_name="milight", standalone_mode=False)
            except typer.Exit as e:
                if e.exit_code != 0:
                    typer.echo(f"Command exited with code {e.exit_code}.", err=True)
            except SystemExit as e:
                if e.code != 0:
                    typer.echo(
                        f"Command resulted in SystemExit with code {e.code}.", err=True
                    )
            except Exception as e:
                typer.echo(f"Error executing command: {e}", err=True)

        except KeyboardInterrupt:
            typer.echo("")
            continue
        except EOFError:
            break


def repl_args(command_string: str) -> list:
    """Turns a REPL line into CLI arguments; 'help X' becomes 'X --help'."""
    if not command_string.strip():
        return ["--help"]

    raw_args = shlex.split(command_string)

    if raw_args[0].lower() == "help":
        if len(raw_args) == 1:
            return ["--help"]

        return raw_args[1:] + ["--help"]

    return raw_args


def main():
    app()


if __name__ == "__main__":
    main()
