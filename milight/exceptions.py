class MilightError(Exception):
    """Base class for errors raised by this package."""


class SocketCreationError(MilightError, OSError):
    """The UDP socket for a bridge could not be created or configured."""


class TransmissionError(MilightError):
    """A datagram was not handed to the transport in full.

    Only raised internally; ``BridgeClient.send`` reports it as ``False``.
    """


class UnknownCommandError(MilightError, LookupError):
    def __init__(self, name):
        super().__init__(f"Unknown command: {name!r}")
        self.name = name


class ClientClosedError(MilightError, RuntimeError):
    """The client was used after ``close()``."""
