"""Typed views over parsed DNS resource records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

import dns.exception
import dns.name
import dns.rdata
import dns.rdatatype

_WINDOW_FORMAT = "%Y-%m-%d %H:%M"


class Section(Enum):
    """Message sections a record can be read from."""

    QUESTION = "question"
    ANSWER = "answer"
    AUTHORITY = "authority"
    ADDITIONAL = "additional"


def make_name(text: str) -> dns.name.Name:
    """Parse a domain name into an absolute, comparable DNS name.

    Names compare case-insensitively and ``example.com`` equals
    ``example.com.``.

    Args:
        text (str): Domain name text, with or without a trailing dot.

    Returns:
        dns.name.Name: Absolute DNS name.

    Raises:
        ValueError: If the text is empty or not a valid domain name.
    """
    trimmed = str(text).strip()
    if not trimmed:
        raise ValueError("DNS name must not be empty")
    try:
        return dns.name.from_text(trimmed)
    except dns.exception.DNSException as err:
        raise ValueError(f"Invalid DNS name '{trimmed}': {err}") from err


def make_type(mnemonic: str) -> dns.rdatatype.RdataType:
    """Parse a record type mnemonic such as ``NS`` or ``rrsig``.

    Args:
        mnemonic (str): Record type mnemonic.

    Returns:
        dns.rdatatype.RdataType: Parsed record type.

    Raises:
        ValueError: If the mnemonic is not a known record type.
    """
    trimmed = str(mnemonic).strip()
    try:
        return dns.rdatatype.from_text(trimmed)
    except (dns.exception.DNSException, ValueError) as err:
        raise ValueError(f"Unknown DNS record type '{trimmed}'") from err


def type_text(rdtype: dns.rdatatype.RdataType) -> str:
    """Render a record type as its mnemonic."""
    return dns.rdatatype.to_text(rdtype)


def format_timestamp(timestamp: float) -> str:
    """Render a UNIX timestamp as a UTC minute-resolution string.

    Args:
        timestamp (float): Seconds since the epoch.

    Returns:
        str: Timestamp in YYYY-MM-DD HH:MM format (UTC).
    """
    return datetime.fromtimestamp(timestamp, timezone.utc).strftime(_WINDOW_FORMAT)


@dataclass(frozen=True)
class SigWindow:
    """Validity window of an RRSIG record.

    Attributes:
        inception (int): Signature inception as a UNIX timestamp.
        expiration (int): Signature expiration as a UNIX timestamp.
    """

    inception: int
    expiration: int

    @property
    def start_text(self) -> str:
        """Inception as a UTC timestamp string."""
        return format_timestamp(self.inception)

    @property
    def end_text(self) -> str:
        """Expiration as a UTC timestamp string."""
        return format_timestamp(self.expiration)


@dataclass(frozen=True)
class ResourceRecord:
    """One parsed record from a DNS reply.

    ``rdtype`` is the discriminant; ``as_ns`` and ``as_rrsig`` give typed
    access to the fields of those variants and return None for any other
    record type.

    Attributes:
        section (Section): Section the record was read from.
        name (dns.name.Name): Owner name.
        rdtype (dns.rdatatype.RdataType): Record type.
        ttl (int): Time to live in seconds.
        rdata (dns.rdata.Rdata): Type-specific record data.
    """

    section: Section
    name: dns.name.Name
    rdtype: dns.rdatatype.RdataType
    ttl: int
    rdata: dns.rdata.Rdata

    def to_text(self) -> str:
        """Return the canonical rendering of the record data."""
        return self.rdata.to_text()

    def as_ns(self) -> Optional[dns.name.Name]:
        """Return the NS target name, or None for other record types."""
        if self.rdtype != dns.rdatatype.NS:
            return None
        return self.rdata.target

    def as_rrsig(self) -> Optional[SigWindow]:
        """Return the signature validity window, or None for other record types."""
        if self.rdtype != dns.rdatatype.RRSIG:
            return None
        return SigWindow(int(self.rdata.inception), int(self.rdata.expiration))

    def __str__(self) -> str:
        """Render the record in zone-file style."""
        return f"{self.name} {self.ttl} IN {type_text(self.rdtype)} {self.to_text()}"
