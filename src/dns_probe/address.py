"""DNS server endpoint parsing."""

from __future__ import annotations

import ipaddress
import socket
from dataclasses import dataclass

DNS_PORT = 53


def _parse_port(text: str, server_text: str) -> int:
    """Parse and range-check a port number.

    Args:
        text (str): Port text.
        server_text (str): Full server text for error messages.

    Returns:
        int: Port number.

    Raises:
        ValueError: If the port is not an integer in 1-65535.
    """
    try:
        port = int(text)
    except ValueError as err:
        raise ValueError(f"Invalid port in DNS server '{server_text}'") from err
    if not 0 < port < 65536:
        raise ValueError(f"Invalid port in DNS server '{server_text}'")
    return port


@dataclass(frozen=True)
class ServerAddress:
    """An IP address and port of a DNS server.

    Attributes:
        host (str): Normalized IPv4 or IPv6 address.
        port (int): UDP port, 53 unless given explicitly.
    """

    host: str
    port: int = DNS_PORT

    @classmethod
    def parse(cls, text: str, default_port: int = DNS_PORT) -> "ServerAddress":
        """Parse ``1.2.3.4``, ``1.2.3.4:5300``, ``::1`` or ``[::1]:5300``.

        Args:
            text (str): Server address text.
            default_port (int): Port used when the text does not carry one.

        Returns:
            ServerAddress: Parsed endpoint.

        Raises:
            ValueError: If the text is not an IP address with an optional port.
        """
        trimmed = str(text).strip()
        if not trimmed:
            raise ValueError("DNS server entries cannot be empty")
        host = trimmed
        port = default_port
        if trimmed.startswith("["):
            closing = trimmed.find("]")
            if closing == -1:
                raise ValueError(f"Invalid DNS server '{trimmed}'")
            host = trimmed[1:closing]
            rest = trimmed[closing + 1 :]
            if rest:
                if not rest.startswith(":"):
                    raise ValueError(f"Invalid DNS server '{trimmed}'")
                port = _parse_port(rest[1:], trimmed)
        elif trimmed.count(":") == 1:
            host, port_text = trimmed.split(":")
            port = _parse_port(port_text, trimmed)
        try:
            address = ipaddress.ip_address(host)
        except ValueError as err:
            raise ValueError(f"DNS server '{trimmed}' is not an IP address") from err
        return cls(address.compressed, port)

    @property
    def family(self) -> int:
        """Socket address family for this server."""
        if ipaddress.ip_address(self.host).version == 6:
            return socket.AF_INET6
        return socket.AF_INET

    def __str__(self) -> str:
        """Render as host:port, bracketing IPv6 hosts."""
        if self.family == socket.AF_INET6:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"
