import logging
import socket

from milight.bridge.const import BROADCAST_SUFFIX
from milight.exceptions import SocketCreationError

logger = logging.getLogger("milight")


def wants_broadcast(address: str) -> bool:
    # Textual check only; a masked or otherwise spelled broadcast address does not match.
    return len(address) > len(BROADCAST_SUFFIX) and address.endswith(BROADCAST_SUFFIX)


class BridgeSocketManager:
    def __init__(self, address, interface_ip=None):
        self.address = address
        self.interface_ip = interface_ip
        self._socket = None

    def create_socket(self):
        sock = None

        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

            if wants_broadcast(self.address):
                logger.debug(f"Enabling broadcast for {self.address}")
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)

            sock.bind((self.interface_ip or "", 0))
        except OSError as e:
            if sock is not None:
                sock.close()

            raise SocketCreationError(
                f"Could not open a UDP socket for {self.address}: {e}"
            ) from e

        self._socket = sock

        return sock

    def close(self):
        sock, self._socket = self._socket, None

        if sock is not None:
            sock.close()

    @property
    def broadcast(self):
        if self._socket is None:
            return False

        return bool(self._socket.getsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST))

    @property
    def socket(self):
        return self._socket
