"""Answer-set matching check."""

from __future__ import annotations

from typing import Iterable, Optional

import dns.rdatatype

from ..address import ServerAddress
from ..config.models import AnswerMatchConfig
from ..records import ResourceRecord, make_name, make_type, type_text
from ..result import CheckResult
from ..transport import UdpTransport
from .base import LOGGER, Checker, format_set


class AnswerMatchChecker(Checker):
    """Verify every answer for a name/type is in an allow-list.

    For NS queries the acceptable entries are compared as DNS names, so case
    and trailing dots do not matter. For every other type the record's text
    rendering must appear verbatim in the acceptable set.

    Attributes:
        server (ServerAddress): Server to ask.
        qname (dns.name.Name): Query name.
        qtype (dns.rdatatype.RdataType): Query type.
        acceptable (frozenset[str]): Tolerated renderings or NS targets.
    """

    kind = "dns"
    default_timeout = 0.5

    def __init__(
        self,
        server: str,
        qname: str,
        qtype: str,
        acceptable: Iterable[str],
        *,
        label: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[UdpTransport] = None,
    ) -> None:
        """Initialize an answer-match check.

        Args:
            server (str): Server address, optionally with a port.
            qname (str): Name to query.
            qtype (str): Record type mnemonic to query.
            acceptable (Iterable[str]): Tolerated answers.
            label (Optional[str]): Label override.
            timeout (Optional[float]): Reply timeout override in seconds.
            transport (Optional[UdpTransport]): Transport used for exchanges.

        Raises:
            ValueError: If the server, name or type is invalid.
        """
        self.server = ServerAddress.parse(server)
        self.qname = make_name(qname)
        self.qtype = make_type(qtype)
        self.acceptable = frozenset(str(value) for value in acceptable)
        self._acceptable_names = frozenset()
        if self.qtype == dns.rdatatype.NS:
            self._acceptable_names = frozenset(make_name(value) for value in self.acceptable)
        super().__init__(label=label, timeout=timeout, transport=transport)

    @classmethod
    def from_config(
        cls, config: AnswerMatchConfig, transport: Optional[UdpTransport] = None
    ) -> "AnswerMatchChecker":
        """Build a checker from its config dataclass."""
        return cls(
            config.server,
            config.name,
            config.type,
            config.acceptable,
            label=config.label,
            timeout=config.timeout,
            transport=transport,
        )

    def describe(self) -> str:
        """Return the default label for this check."""
        return f"dns {self.qname}|{type_text(self.qtype)} @ {self.server}"

    def _is_acceptable(self, record: ResourceRecord) -> bool:
        """Return whether one answer record is in the acceptable set."""
        if self.qtype == dns.rdatatype.NS:
            return record.as_ns() in self._acceptable_names
        return record.to_text() in self.acceptable

    def perform(self) -> CheckResult:
        """Ask the server and compare every answer with the acceptable set.

        The scan stops at the first unacceptable record.

        Returns:
            CheckResult: Healthy when at least one answer matched and none were
                unacceptable.
        """
        reply = self._exchange.ask(
            self.label,
            self.server,
            self.qname,
            self.qtype,
            recursion_desired=True,
            dnssec_ok=False,
            timeout=self.timeout,
        )
        if isinstance(reply, CheckResult):
            return reply

        question = f"{self.qname}|{type_text(self.qtype)}"
        matches = 0
        for record in reply.answers(self.qtype):
            if not self._is_acceptable(record):
                return CheckResult.fail(
                    self.label,
                    f"Unacceptable DNS answer {record.to_text()} for question {self.qname} "
                    f"from {self.server}. Acceptable: {format_set(self.acceptable)}",
                    {
                        "server": str(self.server),
                        "question": question,
                        "found": record.to_text(),
                        "acceptable": sorted(self.acceptable),
                    },
                )
            LOGGER.debug("%s: acceptable answer %s", self.label, record.to_text())
            matches += 1

        if matches:
            return CheckResult.pass_(self.label, {"matches": matches})
        return CheckResult.fail(
            self.label,
            f"No matching answer to question {question} to {self.server} was received",
            {"server": str(self.server), "question": question},
        )
