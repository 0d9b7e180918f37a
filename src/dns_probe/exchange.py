"""Query/reply skeleton shared by all DNS checks."""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Union

import dns.flags
import dns.message
import dns.name
import dns.rcode
import dns.rdatatype

from .address import ServerAddress
from .records import ResourceRecord, Section, type_text
from .result import CheckResult
from .transport import OutcomeKind, UdpTransport

LOGGER = logging.getLogger(__name__)

EDNS_PAYLOAD = 4000


def build_query(
    name: dns.name.Name,
    rdtype: dns.rdatatype.RdataType,
    *,
    recursion_desired: bool,
    dnssec_ok: bool,
    payload: int = EDNS_PAYLOAD,
) -> dns.message.Message:
    """Build a query with a random ID and an EDNS0 OPT record.

    Args:
        name (dns.name.Name): Query name.
        rdtype (dns.rdatatype.RdataType): Query type.
        recursion_desired (bool): Whether to set the RD bit.
        dnssec_ok (bool): Whether to set the DO bit.
        payload (int): Advertised EDNS UDP buffer size.

    Returns:
        dns.message.Message: Query message.
    """
    query = dns.message.make_query(
        name,
        rdtype,
        use_edns=0,
        want_dnssec=dnssec_ok,
        payload=payload,
    )
    if recursion_desired:
        query.flags |= dns.flags.RD
    else:
        query.flags &= ~dns.flags.RD
    return query


_SECTIONS = (
    (Section.ANSWER, "answer"),
    (Section.AUTHORITY, "authority"),
    (Section.ADDITIONAL, "additional"),
)


class Reply:
    """Parsed reply with sequential record access.

    Attributes:
        message (dns.message.Message): Underlying dnspython message.
    """

    def __init__(self, message: dns.message.Message) -> None:
        """Wrap a parsed reply message."""
        self.message = message

    @property
    def rcode(self) -> dns.rcode.Rcode:
        """Response code including any extended EDNS bits."""
        return self.message.rcode()

    @property
    def question(self) -> Optional[tuple[dns.name.Name, dns.rdatatype.RdataType]]:
        """Echoed question as (name, type), or None when the reply has none."""
        if not self.message.question:
            return None
        rrset = self.message.question[0]
        return rrset.name, rrset.rdtype

    def records(self) -> Iterator[ResourceRecord]:
        """Yield every record in answer, authority, then additional order.

        Yields:
            ResourceRecord: One record per rdata.
        """
        for section, attribute in _SECTIONS:
            for rrset in getattr(self.message, attribute):
                for rdata in rrset:
                    yield ResourceRecord(section, rrset.name, rrset.rdtype, rrset.ttl, rdata)

    def answers(
        self,
        rdtype: Optional[dns.rdatatype.RdataType] = None,
        name: Optional[dns.name.Name] = None,
    ) -> Iterator[ResourceRecord]:
        """Yield answer-section records, optionally filtered by type and owner.

        Args:
            rdtype (Optional[dns.rdatatype.RdataType]): Required record type.
            name (Optional[dns.name.Name]): Required owner name.

        Yields:
            ResourceRecord: Matching answer records in reply order.
        """
        for record in self.records():
            if record.section is not Section.ANSWER:
                continue
            if rdtype is not None and record.rdtype != rdtype:
                continue
            if name is not None and record.name != name:
                continue
            yield record


class QueryExchange:
    """Ask one server one question and turn transport failures into results."""

    def __init__(self, transport: Optional[UdpTransport] = None) -> None:
        """Initialize the exchange with a transport, UDP by default."""
        self.transport = transport or UdpTransport()

    def ask(
        self,
        check: str,
        server: ServerAddress,
        name: dns.name.Name,
        rdtype: dns.rdatatype.RdataType,
        *,
        recursion_desired: bool,
        dnssec_ok: bool,
        timeout: float,
    ) -> Union[Reply, CheckResult]:
        """Send a query and return the reply or a failing result.

        Args:
            check (str): Check label used in failing results.
            server (ServerAddress): Server to ask.
            name (dns.name.Name): Query name.
            rdtype (dns.rdatatype.RdataType): Query type.
            recursion_desired (bool): Whether to set the RD bit.
            dnssec_ok (bool): Whether to set the DO bit.
            timeout (float): Seconds to wait for the reply.

        Returns:
            Union[Reply, CheckResult]: NOERROR reply, or the failing result for a
                timeout, transport error, or error response code.
        """
        question = f"{name}|{type_text(rdtype)}"
        query = build_query(
            name, rdtype, recursion_desired=recursion_desired, dnssec_ok=dnssec_ok
        )
        LOGGER.debug("Asking %s for %s (id=%s)", server, question, query.id)
        outcome = self.transport.exchange(query, server, timeout)

        if outcome.kind is OutcomeKind.TIMEOUT:
            return CheckResult.fail(
                check,
                f"Timeout asking DNS question for {question} to {server}",
                {"server": str(server), "question": question, "timeout": timeout},
            )
        if outcome.kind is OutcomeKind.ERROR:
            return CheckResult.unknown(
                check,
                f"Error asking DNS question for {question} to {server}: {outcome.error}",
                {"server": str(server), "question": question, "error": str(outcome.error)},
            )

        reply = Reply(outcome.reply)
        LOGGER.debug(
            "Received reply from %s for %s with RCode %s",
            server,
            question,
            dns.rcode.to_text(reply.rcode),
        )
        if reply.rcode != dns.rcode.NOERROR:
            rcode_text = dns.rcode.to_text(reply.rcode)
            return CheckResult.fail(
                check,
                f"Got DNS response with RCode {rcode_text} from {server} for question {question}",
                {"server": str(server), "question": question, "rcode": rcode_text},
            )
        return reply
