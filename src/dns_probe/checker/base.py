"""Base class for DNS health checks."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..exchange import QueryExchange
from ..result import CheckResult
from ..transport import UdpTransport

LOGGER = logging.getLogger("dns_probe.checker")


def format_set(values: Iterable[str]) -> str:
    """Render strings as a sorted, quoted set for diagnostics.

    Args:
        values (Iterable[str]): Values to render.

    Returns:
        str: Text such as ``{"a", "b"}``.
    """
    return "{" + ", ".join(f'"{value}"' for value in sorted(values)) + "}"


class Checker:
    """A single DNS health check.

    Subclasses hold only immutable configuration; ``perform`` may be called
    any number of times, from any thread, with independent outcomes.

    Attributes:
        kind (str): Check kind identifier.
        label (str): Human-readable label used in results and logs.
        timeout (float): Seconds to wait for each reply.
    """

    kind = "dns"
    default_timeout = 0.5

    def __init__(
        self,
        *,
        label: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[UdpTransport] = None,
    ) -> None:
        """Initialize shared checker state.

        Args:
            label (Optional[str]): Label override; derived from the target when omitted.
            timeout (Optional[float]): Reply timeout override in seconds.
            transport (Optional[UdpTransport]): Transport used for exchanges.

        Raises:
            ValueError: If the timeout is not positive.
        """
        if timeout is not None and timeout <= 0:
            raise ValueError("DNS timeout must be a positive number")
        self.timeout = float(timeout) if timeout is not None else self.default_timeout
        self._exchange = QueryExchange(transport)
        self.label = label or self.describe()

    def describe(self) -> str:
        """Return the default label for this check."""
        raise NotImplementedError

    def perform(self) -> CheckResult:
        """Run the check once.

        Returns:
            CheckResult: Healthy result, or the first failure detected.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"{type(self).__name__}({self.label!r})"
