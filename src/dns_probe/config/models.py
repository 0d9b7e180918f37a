"""Dataclasses for check configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple, Union

DEFAULT_MIN_DAYS = 7


@dataclass(frozen=True)
class AnswerMatchConfig:
    """Configure an answer-set matching check.

    Attributes:
        server (str): DNS server address, optionally with a port.
        name (str): Name to query.
        type (str): Record type mnemonic to query.
        acceptable (Tuple[str, ...]): Tolerated answer renderings or NS targets.
        label (Optional[str]): Optional display label.
        timeout (Optional[float]): Optional reply timeout override in seconds.
    """

    kind: ClassVar[str] = "dns"
    aliases: ClassVar[Tuple[str, ...]] = ("answer",)

    server: str
    name: str
    type: str
    acceptable: Tuple[str, ...] = field(default_factory=tuple)
    label: Optional[str] = None
    timeout: Optional[float] = None


@dataclass(frozen=True)
class ZoneConsistencyConfig:
    """Configure a cross-server SOA consistency check.

    Attributes:
        domain (str): Zone apex to query.
        servers (Tuple[str, ...]): Servers to compare, in query order.
        label (Optional[str]): Optional display label.
        timeout (Optional[float]): Optional per-server timeout override in seconds.
    """

    kind: ClassVar[str] = "dnssoa"
    aliases: ClassVar[Tuple[str, ...]] = ("soa", "zone")

    domain: str
    servers: Tuple[str, ...]
    label: Optional[str] = None
    timeout: Optional[float] = None


@dataclass(frozen=True)
class SignatureFreshnessConfig:
    """Configure an RRSIG freshness check.

    Attributes:
        server (str): DNS server address, optionally with a port.
        name (str): Signed name to query.
        min_days (float): Required remaining signature validity in days.
        label (Optional[str]): Optional display label.
        timeout (Optional[float]): Optional reply timeout override in seconds.
    """

    kind: ClassVar[str] = "rrsig"
    aliases: ClassVar[Tuple[str, ...]] = ("signature",)

    server: str
    name: str
    min_days: float = DEFAULT_MIN_DAYS
    label: Optional[str] = None
    timeout: Optional[float] = None


CheckConfig = Union[AnswerMatchConfig, ZoneConsistencyConfig, SignatureFreshnessConfig]

CONFIG_TYPES: Tuple[type, ...] = (
    AnswerMatchConfig,
    ZoneConsistencyConfig,
    SignatureFreshnessConfig,
)
