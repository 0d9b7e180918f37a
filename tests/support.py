"""Shared test support: canned DNS replies and a recording transport."""

from __future__ import annotations

import socket
import threading
from types import SimpleNamespace
from typing import Callable, Dict, List, Optional, Union

import dns.flags
import dns.message
import dns.rcode
import dns.rdata
import dns.rdataclass
import dns.rdatatype
import dns.rrset

from dns_probe.transport import ExchangeOutcome

SOA_TEXT = "ns1.example.com. hostmaster.example.com. 2024010101 7200 3600 1209600 3600"

ReplyBuilder = Callable[[dns.message.Message], dns.message.Message]


def rrset(name: str, rdtype: str, *rdatas: str, ttl: int = 3600) -> dns.rrset.RRset:
    return dns.rrset.from_text(name, ttl, "IN", rdtype, *rdatas)


def rrsig_text(inception: int, expiration: int, covered: str = "SOA") -> str:
    """Render RRSIG rdata with epoch timestamps."""
    return f"{covered} 13 2 3600 {expiration} {inception} 12345 example.com. AAAA"


def answer_with(*rrsets: dns.rrset.RRset, rcode: int = dns.rcode.NOERROR) -> ReplyBuilder:
    """Build a reply factory answering any query with the given RRsets."""

    def _build(query: dns.message.Message) -> dns.message.Message:
        reply = dns.message.make_response(query)
        reply.set_rcode(rcode)
        for item in rrsets:
            reply.answer.append(item)
        return reply

    return _build


class FakeTransport:
    """Replay canned outcomes per server and record every exchange.

    Responses are keyed by the server's ``host:port`` text. A value may be an
    ExchangeOutcome or a callable building a reply from the query.
    """

    def __init__(self, responses: Dict[str, Union[ExchangeOutcome, ReplyBuilder]]):
        self.responses = responses
        self.calls: List[SimpleNamespace] = []

    def exchange(self, query, server, timeout):
        self.calls.append(SimpleNamespace(server=str(server), query=query, timeout=timeout))
        response = self.responses[str(server)]
        if isinstance(response, ExchangeOutcome):
            return response
        return ExchangeOutcome.received(response(query))

    @property
    def servers(self) -> List[str]:
        return [call.server for call in self.calls]

    @property
    def last_query(self) -> dns.message.Message:
        return self.calls[-1].query


def query_has_rd(query: dns.message.Message) -> bool:
    return bool(query.flags & dns.flags.RD)


def query_has_do(query: dns.message.Message) -> bool:
    return bool(query.ednsflags & dns.flags.DO)


LoopbackReply = Callable[[dns.message.Message], Union[dns.message.Message, bytes, None]]


class LoopbackResponder:
    """Answer one DNS query on a loopback UDP socket from a background thread.

    The reply builder may return a message, raw bytes sent as-is, or None to
    stay silent.
    """

    def __init__(self, host: str, build_reply: LoopbackReply):
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        self.host = host
        self.build_reply = build_reply
        self.queries: List[dns.message.Message] = []
        self.sock = socket.socket(family, socket.SOCK_DGRAM)
        try:
            self.sock.bind((host, 0))
        except OSError:
            self.sock.close()
            raise
        self.sock.settimeout(5)
        self.port = self.sock.getsockname()[1]
        self._thread: Optional[threading.Thread] = None

    @property
    def server(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"

    def _serve(self) -> None:
        try:
            wire, peer = self.sock.recvfrom(65535)
        except OSError:
            return
        query = dns.message.from_wire(wire)
        self.queries.append(query)
        reply = self.build_reply(query)
        if reply is None:
            return
        if isinstance(reply, dns.message.Message):
            reply = reply.to_wire()
        self.sock.sendto(reply, peer)

    def __enter__(self) -> "LoopbackResponder":
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._thread is not None:
            self._thread.join(timeout=6)
        self.sock.close()
