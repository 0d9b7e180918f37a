"""RRSIG freshness check."""

from __future__ import annotations

import time
from typing import Callable, Optional

import dns.rdatatype

from ..address import ServerAddress
from ..config.models import DEFAULT_MIN_DAYS, SignatureFreshnessConfig
from ..records import make_name
from ..result import CheckResult
from ..transport import UdpTransport
from .base import LOGGER, Checker

SECONDS_PER_DAY = 86400


class SignatureFreshnessChecker(Checker):
    """Verify a name carries a currently valid RRSIG that is not about to expire.

    Signatures are inspected in reply order. The first one expiring within
    ``min_days`` fails the check even if a later one would be valid.
    Signatures that are not yet active are logged and skipped, since they
    are expected around key rollovers.

    Attributes:
        server (ServerAddress): Server to ask.
        qname (dns.name.Name): Signed name.
        min_days (float): Required remaining validity in days.
    """

    kind = "rrsig"
    default_timeout = 1.0

    def __init__(
        self,
        server: str,
        qname: str,
        min_days: float = DEFAULT_MIN_DAYS,
        *,
        label: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[UdpTransport] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize a signature freshness check.

        Args:
            server (str): Server address, optionally with a port.
            qname (str): Signed name to query.
            min_days (float): Required remaining validity in days.
            label (Optional[str]): Label override.
            timeout (Optional[float]): Reply timeout override in seconds.
            transport (Optional[UdpTransport]): Transport used for exchanges.
            clock (Callable[[], float]): Source of the current UNIX time.

        Raises:
            ValueError: If the server or name is invalid, or min_days is negative.
        """
        if min_days < 0:
            raise ValueError("minDays must not be negative")
        self.server = ServerAddress.parse(server)
        self.qname = make_name(qname)
        self.min_days = min_days
        self._clock = clock
        super().__init__(label=label, timeout=timeout, transport=transport)

    @classmethod
    def from_config(
        cls, config: SignatureFreshnessConfig, transport: Optional[UdpTransport] = None
    ) -> "SignatureFreshnessChecker":
        """Build a checker from its config dataclass."""
        return cls(
            config.server,
            config.name,
            config.min_days,
            label=config.label,
            timeout=config.timeout,
            transport=transport,
        )

    def describe(self) -> str:
        """Return the default label for this check."""
        return f"rrsig {self.qname} @ {self.server}"

    def perform(self) -> CheckResult:
        """Ask for the SOA with DNSSEC OK and classify the returned RRSIGs.

        Returns:
            CheckResult: Healthy when at least one RRSIG is active and none of
                those inspected before it expire within the margin.
        """
        reply = self._exchange.ask(
            self.label,
            self.server,
            self.qname,
            dns.rdatatype.SOA,
            recursion_desired=False,
            dnssec_ok=True,
            timeout=self.timeout,
        )
        if isinstance(reply, CheckResult):
            return reply

        valid = False
        for record in reply.answers(dns.rdatatype.RRSIG, self.qname):
            window = record.as_rrsig()
            LOGGER.info(
                "%s: got RRSIG for %s from %s to %s UTC",
                self.label,
                self.qname,
                window.start_text,
                window.end_text,
            )
            now = self._clock()
            if now + self.min_days * SECONDS_PER_DAY > window.expiration:
                days = (window.expiration - now) / SECONDS_PER_DAY
                return CheckResult.fail(
                    self.label,
                    f"Got RRSIG that expires in {days:.0f} days for {self.qname} from "
                    f"{self.server}, valid from {window.start_text} to {window.end_text} UTC",
                    {
                        "server": str(self.server),
                        "name": str(self.qname),
                        "inception": window.inception,
                        "expiration": window.expiration,
                        "min_days": self.min_days,
                    },
                )
            if now < window.inception:
                LOGGER.info(
                    "%s: RRSIG for %s from %s is not yet active, valid from %s to %s UTC",
                    self.label,
                    self.qname,
                    self.server,
                    window.start_text,
                    window.end_text,
                )
                continue
            valid = True

        if not valid:
            return CheckResult.fail(
                self.label,
                f"Did not find an active RRSIG for {self.qname} at {self.server}",
                {"server": str(self.server), "name": str(self.qname)},
            )
        return CheckResult.pass_(self.label)
