import sys

from .bridge.client import BridgeClient
from .bridge.commands import COLORS, COMMANDS, OPERATION_COMMANDS, command_value, get_commands
from .bridge.zones import BridgeZones
from .exceptions import (
    ClientClosedError,
    MilightError,
    SocketCreationError,
    TransmissionError,
    UnknownCommandError,
)

from .console.application import main

__version__ = "0.1.0"

if sys.version_info <= (3, 9):
    raise ImportError("Python version > 3.9 required.")
