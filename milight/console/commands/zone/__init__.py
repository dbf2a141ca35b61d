import typer
from typing_extensions import Annotated

from milight.bridge.const import MAX_BRIGHTNESS, MIN_BRIGHTNESS
from milight.bridge.zones import BridgeZones

from .._utils import open_client_util, parse_byte_util

app = typer.Typer(
    name="zone", help="Control zones of lights on the bridge.", no_args_is_help=True
)

ZoneArgument = Annotated[
    int,
    typer.Argument(min=0, max=4, help="Zone number 1-4, or 0 for all zones."),
]


def _zone_label(zone: int) -> str:
    return "all zones" if zone == 0 else f"zone {zone}"


def _run(action, description: str):
    with open_client_util() as client:
        result = action(BridgeZones(client))

    if result is False or result == -1:
        typer.echo(f"Error: Failed to {description}.", err=True)
        raise typer.Exit(code=1)

    typer.secho(f"{description[0].upper()}{description[1:]}.", fg=typer.colors.GREEN)

    return result


@app.command("on", help="Switch a zone on.")
def zone_on(zone: ZoneArgument):
    _run(lambda zones: zones.zone_on(zone), f"switch {_zone_label(zone)} on")


@app.command("off", help="Switch a zone off.")
def zone_off(zone: ZoneArgument):
    _run(lambda zones: zones.zone_off(zone), f"switch {_zone_label(zone)} off")


@app.command("white", help="Switch a zone to white mode.")
def zone_white(zone: ZoneArgument):
    _run(lambda zones: zones.zone_white(zone), f"set {_zone_label(zone)} to white")


@app.command("color", help="Set the color of a zone.")
def zone_color(
    zone: ZoneArgument,
    color: Annotated[
        str, typer.Argument(help="Color name, or a color wheel byte such as 0xB0.")
    ],
):
    value = parse_byte_util(color)

    _run(
        lambda zones: zones.zone_color(zone, value),
        f"set {_zone_label(zone)} color to 0x{value:02X}",
    )


@app.command("brightness", help="Set the brightness of a zone.")
def zone_brightness(
    zone: ZoneArgument,
    level: Annotated[
        int,
        typer.Argument(
            min=MIN_BRIGHTNESS,
            max=MAX_BRIGHTNESS,
            help=f"Brightness level {MIN_BRIGHTNESS}-{MAX_BRIGHTNESS}.",
        ),
    ],
):
    _run(
        lambda zones: zones.zone_brightness(zone, level),
        f"set {_zone_label(zone)} brightness to {level}",
    )


@app.command("disco", help="Cycle the disco mode of a zone.")
def zone_disco(
    zone: ZoneArgument,
    faster: Annotated[
        bool, typer.Option("--faster", help="Speed up the current disco mode.")
    ] = False,
    slower: Annotated[
        bool, typer.Option("--slower", help="Slow down the current disco mode.")
    ] = False,
):
    if faster and slower:
        typer.echo("Error: --faster and --slower are mutually exclusive.", err=True)
        raise typer.Exit(code=1)

    if faster:
        _run(lambda zones: zones.disco_faster(), "speed up disco mode")
    elif slower:
        _run(lambda zones: zones.disco_slower(), "slow down disco mode")
    else:
        _run(
            lambda zones: zones.disco_cycle(zone),
            f"cycle disco mode on {_zone_label(zone)}",
        )
