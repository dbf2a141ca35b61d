"""
Application runtime configuration.
"""

import ipaddress
import sys

import ifaddr

from milight.bridge.const import DEFAULT_PORT

DEFAULT_HOST = None
DEFAULT_INTERFACE = None


def broadcast_address(ip: str, prefix: int) -> str:
    network = ipaddress.ip_network(f"{ip}/{prefix}", strict=False)

    return str(network.broadcast_address)


def get_available_interfaces():
    """
    Returns a list of available network interfaces with their IPv4 addresses.
    Each entry is a tuple of (interface_name, ip_address, network_prefix, broadcast_address)
    """
    interfaces = []
    adapters = ifaddr.get_adapters()

    for adapter in adapters:
        for ip in adapter.ips:
            # IPv6 addresses are tuples
            if isinstance(ip.ip, str):
                interfaces.append(
                    (
                        adapter.nice_name,
                        ip.ip,
                        ip.network_prefix,
                        broadcast_address(ip.ip, ip.network_prefix),
                    )
                )

    return sorted(interfaces)


class AppSettings:
    def __init__(self):
        self._host: str = DEFAULT_HOST
        self._port: int = DEFAULT_PORT
        self._interface: str = DEFAULT_INTERFACE
        self._interface_address: tuple = None
        self._interface_resolved: bool = False
        self.verbose: bool = False

    @property
    def port(self) -> int:
        return self._port

    @port.setter
    def port(self, value: int) -> None:
        if 0 <= value <= 65535:
            self._port = value
        else:
            print(
                f"Warning: Port must be between 0 and 65535. Received {value}. Using default {DEFAULT_PORT} instead.",
                file=sys.stderr,
            )

            self._port = DEFAULT_PORT

    @property
    def interface(self) -> str:
        return self._interface

    @interface.setter
    def interface(self, value: str) -> None:
        self._interface = value
        self._interface_address = None
        self._interface_resolved = False

    @property
    def host(self) -> str:
        """
        Returns the bridge address.
        Without an explicit host, the broadcast address of the configured interface is used.
        """
        if self._host:
            return self._host

        address = self._resolve_interface()

        return address[1] if address else None

    @host.setter
    def host(self, value: str) -> None:
        self._host = value

    @property
    def interface_ip(self) -> str:
        """
        Returns the IP address for the configured interface.
        If no interface is explicitly set, returns None which means use the default.
        """
        address = self._resolve_interface()

        return address[0] if address else None

    def _resolve_interface(self):
        if not self._interface:
            return None

        if self._interface_resolved:
            return self._interface_address

        interfaces = get_available_interfaces()
        self._interface_resolved = True

        for name, ip, prefix, broadcast in interfaces:
            if name == self._interface:
                self._interface_address = (ip, broadcast)

                print(
                    f"Using IPv4 address {ip} (broadcast {broadcast}) for interface {self._interface}",
                    file=sys.stderr,
                )

                return self._interface_address

        print(
            f"Warning: Could not find an IPv4 address for interface '{self._interface}'. Using default interface.",
            file=sys.stderr,
        )

        return None


settings = AppSettings()
