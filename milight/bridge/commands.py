"""
Command table for the bridge.

Operation codes go in the first byte of a datagram. Color codes are positions
on the bridge's color wheel and go in the value byte of an ``rgbw`` command.
"""

from types import MappingProxyType
from typing import Mapping

from milight.exceptions import UnknownCommandError

OPERATION_COMMANDS: Mapping[str, int] = MappingProxyType(
    {
        "rgbw": 0x40,
        "all_off": 0x41,
        "all_on": 0x42,
        "disco_slower": 0x43,
        "disco_faster": 0x44,
        "zone1_on": 0x45,
        "zone1_off": 0x46,
        "zone2_on": 0x47,
        "zone2_off": 0x48,
        "zone3_on": 0x49,
        "zone3_off": 0x4A,
        "zone4_on": 0x4B,
        "zone4_off": 0x4C,
        "disco": 0x4D,
        "brightness": 0x4E,
        "all_white": 0xC2,
        "zone1_white": 0xC5,
        "zone2_white": 0xC7,
        "zone3_white": 0xC9,
        "zone4_white": 0xCB,
    }
)

COLORS: Mapping[str, int] = MappingProxyType(
    {
        "violet": 0x00,
        "royalblue": 0x10,
        "babyblue": 0x20,
        "aqua": 0x30,
        "mint": 0x40,
        "seafoam": 0x50,
        "green": 0x60,
        "lime": 0x70,
        "yellow": 0x80,
        "yelloworange": 0x90,
        "orange": 0xA0,
        "red": 0xB0,
        "pink": 0xC0,
        "fuscia": 0xD0,
        "lilac": 0xE0,
        "lavendar": 0xF0,
    }
)

# "rgbw" and "mint" share 0x40 but are separate entries.
COMMANDS: Mapping[str, int] = MappingProxyType({**OPERATION_COMMANDS, **COLORS})


def get_commands() -> Mapping[str, int]:
    return COMMANDS


def command_value(name: str) -> int:
    """
    Looks up the byte for a command or color name.

    Raises:
        UnknownCommandError: if the name is not in the table.
    """
    try:
        return COMMANDS[name]
    except KeyError:
        raise UnknownCommandError(name) from None
