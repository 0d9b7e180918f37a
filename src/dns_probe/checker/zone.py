"""Cross-server SOA consistency check."""

from __future__ import annotations

from typing import Iterable, List, Optional

import dns.rdatatype

from ..address import ServerAddress
from ..config.models import ZoneConsistencyConfig
from ..records import make_name
from ..result import CheckResult
from ..transport import UdpTransport
from .base import LOGGER, Checker, format_set


def _unique_servers(servers: Iterable[str]) -> tuple[ServerAddress, ...]:
    """Parse servers, dropping repeats while keeping the configured order.

    Args:
        servers (Iterable[str]): Server address strings.

    Returns:
        tuple[ServerAddress, ...]: Parsed unique servers.
    """
    unique: List[ServerAddress] = []
    for server in servers:
        address = ServerAddress.parse(server)
        if address in unique:
            continue
        unique.append(address)
    return tuple(unique)


class ZoneConsistencyChecker(Checker):
    """Verify that all servers for a zone serve the same SOA record.

    Attributes:
        domain (dns.name.Name): Zone apex to query.
        servers (tuple[ServerAddress, ...]): Servers in query order.
    """

    kind = "dnssoa"
    default_timeout = 0.5

    def __init__(
        self,
        domain: str,
        servers: Iterable[str],
        *,
        label: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[UdpTransport] = None,
    ) -> None:
        """Initialize a zone consistency check.

        Args:
            domain (str): Zone apex to query.
            servers (Iterable[str]): Servers to compare, queried in this order.
            label (Optional[str]): Label override.
            timeout (Optional[float]): Per-server reply timeout override in seconds.
            transport (Optional[UdpTransport]): Transport used for exchanges.

        Raises:
            ValueError: If the domain or a server is invalid, or no servers are given.
        """
        self.domain = make_name(domain)
        self.servers = _unique_servers(servers)
        if not self.servers:
            raise ValueError("At least one DNS server must be provided")
        super().__init__(label=label, timeout=timeout, transport=transport)

    @classmethod
    def from_config(
        cls, config: ZoneConsistencyConfig, transport: Optional[UdpTransport] = None
    ) -> "ZoneConsistencyChecker":
        """Build a checker from its config dataclass."""
        return cls(
            config.domain,
            config.servers,
            label=config.label,
            timeout=config.timeout,
            transport=transport,
        )

    def describe(self) -> str:
        """Return the default label for this check."""
        return f"dnssoa {self.domain}"

    def perform(self) -> CheckResult:
        """Ask every server for the SOA and compare the answers.

        Servers are asked one after another; the first failing server ends
        the check without asking the rest.

        Returns:
            CheckResult: Healthy when every server returned the same SOA text.
        """
        harvest: set[str] = set()
        for server in self.servers:
            reply = self._exchange.ask(
                self.label,
                server,
                self.domain,
                dns.rdatatype.SOA,
                recursion_desired=False,
                dnssec_ok=False,
                timeout=self.timeout,
            )
            if isinstance(reply, CheckResult):
                return reply

            found = [record.to_text() for record in reply.answers(dns.rdatatype.SOA, self.domain)]
            if not found:
                return CheckResult.fail(
                    self.label,
                    f"DNS server {server} did not return a SOA for {self.domain}",
                    {"server": str(server), "domain": str(self.domain)},
                )
            LOGGER.debug("%s: %s returned %s", self.label, server, found)
            harvest.update(found)

        if len(harvest) != 1:
            return CheckResult.fail(
                self.label,
                f"Had different SOA records for {self.domain}: {format_set(harvest)}",
                {"domain": str(self.domain), "found": sorted(harvest)},
            )
        return CheckResult.pass_(
            self.label,
            {"soa": next(iter(harvest)), "servers": [str(server) for server in self.servers]},
        )
