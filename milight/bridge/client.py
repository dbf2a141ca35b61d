import asyncio
import logging
import time

from milight.bridge.command_builder import BridgeCommandBuilder
from milight.bridge.const import COMMAND_LENGTH, DEFAULT_PORT, PACING_DELAY
from milight.bridge.socket_manager import BridgeSocketManager
from milight.exceptions import ClientClosedError, TransmissionError

logger = logging.getLogger("milight")


class BridgeClient:
    """
    Fire-and-forget UDP client for a single bridge.

    The client owns one socket for its whole lifetime. Use it as a context
    manager, or call ``close()`` when done::

        with BridgeClient("192.168.1.255") as bridge:
            bridge.send(command_value("all_on"))

    The address is not resolved until the first send, so an unresolvable
    host only shows up as a failed ``send``. An empty address is rejected
    here with ValueError since there is nothing to send to.
    """

    def __init__(self, address, port=DEFAULT_PORT, interface_ip=None):
        if not address:
            raise ValueError("A bridge address is required")

        if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= 65535:
            raise ValueError(f"Port must be between 0 and 65535, got {port!r}")

        self._address = address
        self._port = port
        self._last_sent = None
        self._sockets = BridgeSocketManager(address, interface_ip)
        self.command_builder = BridgeCommandBuilder()

        self._sockets.create_socket()

    @property
    def address(self):
        return self._address

    @property
    def port(self):
        return self._port

    @property
    def broadcast(self):
        return self._sockets.broadcast

    @property
    def closed(self):
        return self._sockets.socket is None

    def close(self):
        if self.closed:
            return

        logger.debug(f"Closing socket for {self._address}:{self._port}")
        self._sockets.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __del__(self):
        sockets = getattr(self, "_sockets", None)

        if sockets is not None:
            sockets.close()

    def send(self, command, value=0x00):
        """
        Sends one command to the bridge and waits out the pacing delay.

        Returns True if all three bytes were handed to the transport, False if
        the transport reported an error. Transport errors are logged, never raised.
        """
        payload = self._prepare(command, value)

        remaining = self._pacing_remaining()
        if remaining > 0:
            time.sleep(remaining)

        try:
            self._transmit(payload)
        except TransmissionError as e:
            logger.error(str(e))
            return False

        time.sleep(PACING_DELAY)

        return True

    async def send_async(self, command, value=0x00):
        """Same as ``send`` but the pacing delay is awaited and can be cancelled."""
        payload = self._prepare(command, value)

        remaining = self._pacing_remaining()
        if remaining > 0:
            await asyncio.sleep(remaining)

        try:
            self._transmit(payload)
        except TransmissionError as e:
            logger.error(str(e))
            return False

        await asyncio.sleep(PACING_DELAY)

        return True

    def _prepare(self, command, value):
        if self.closed:
            raise ClientClosedError(
                f"Client for {self._address}:{self._port} is closed"
            )

        return self.command_builder.command_bytes(command, value)

    def _pacing_remaining(self):
        if self._last_sent is None:
            return 0

        return self._last_sent + PACING_DELAY - time.monotonic()

    def _transmit(self, payload):
        sock = self._sockets.socket

        logger.debug(f"Sending {payload.hex(' ')} to {self._address}:{self._port}")

        try:
            sent = sock.sendto(payload, (self._address, self._port))
        except OSError as e:
            raise TransmissionError(f"Error sending command: {e}") from e

        if sent != COMMAND_LENGTH:
            raise TransmissionError(
                f"Error, incorrect amount of data written ({sent} bytes)"
            )

        self._last_sent = time.monotonic()
