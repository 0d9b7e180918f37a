"""UDP transport for single DNS query/reply exchanges.

The transport is intentionally thin so it can be replaced in tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import dns.exception
import dns.message
import dns.query

from .address import ServerAddress

LOGGER = logging.getLogger(__name__)


class OutcomeKind(Enum):
    """How a single exchange ended."""

    REPLY = "reply"
    TIMEOUT = "timeout"
    ERROR = "error"


@dataclass(frozen=True)
class ExchangeOutcome:
    """Result of sending one query and waiting for its reply.

    Attributes:
        kind (OutcomeKind): Whether a reply arrived, the wait timed out, or it failed.
        reply (Optional[dns.message.Message]): Parsed reply for REPLY outcomes.
        error (Optional[Exception]): Underlying error for ERROR outcomes.
    """

    kind: OutcomeKind
    reply: Optional[dns.message.Message] = None
    error: Optional[Exception] = None

    @classmethod
    def received(cls, reply: dns.message.Message) -> "ExchangeOutcome":
        """Build a REPLY outcome."""
        return cls(OutcomeKind.REPLY, reply=reply)

    @classmethod
    def timed_out(cls) -> "ExchangeOutcome":
        """Build a TIMEOUT outcome."""
        return cls(OutcomeKind.TIMEOUT)

    @classmethod
    def failed(cls, error: Exception) -> "ExchangeOutcome":
        """Build an ERROR outcome."""
        return cls(OutcomeKind.ERROR, error=error)


class UdpTransport:
    """Send a DNS query over UDP and wait a bounded time for the reply."""

    def exchange(
        self,
        query: dns.message.Message,
        server: ServerAddress,
        timeout: float,
    ) -> ExchangeOutcome:
        """Run one query/reply exchange against a single server.

        dnspython opens and closes its own socket, drops datagrams from other
        sources and raises ``BadResponse`` for replies that do not match the
        query ID and question, which is reported as an error.

        Args:
            query (dns.message.Message): Query to send.
            server (ServerAddress): Server to ask.
            timeout (float): Seconds to wait for the reply.

        Returns:
            ExchangeOutcome: Reply, timeout, or error outcome.
        """
        try:
            reply = dns.query.udp(
                query,
                server.host,
                timeout=timeout,
                port=server.port,
                ignore_unexpected=True,
            )
        except dns.exception.Timeout:
            return ExchangeOutcome.timed_out()
        except (OSError, dns.exception.DNSException) as err:
            LOGGER.warning("DNS exchange with %s failed: %s", server, err)
            return ExchangeOutcome.failed(err)
        return ExchangeOutcome.received(reply)
