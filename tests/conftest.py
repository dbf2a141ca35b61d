import socket

import pytest

import milight.bridge.client as client_module


class FakeSocket:
    """
    Stands in for a UDP socket. Each sendto consumes the next result: an int is
    returned as the byte count, an exception is raised.
    """

    def __init__(self, results=None):
        self.results = list(results or [])
        self.sent = []
        self.closed = False

    def sendto(self, data, address):
        self.sent.append((data, address))

        result = self.results.pop(0) if self.results else len(data)

        if isinstance(result, BaseException):
            raise result

        return result

    def getsockopt(self, level, option):
        return 0

    def close(self):
        self.closed = True


@pytest.fixture
def udp_receiver():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2)

    yield sock

    sock.close()


@pytest.fixture
def sleeps(monkeypatch):
    """Records the pacing delays instead of sleeping."""
    recorded = []
    monkeypatch.setattr(client_module.time, "sleep", recorded.append)

    return recorded


@pytest.fixture
def fake_socket_factory(monkeypatch):
    def _install(client, results=None):
        client._sockets.socket.close()
        fake = FakeSocket(results)
        monkeypatch.setattr(client._sockets, "_socket", fake)

        return fake

    return _install
