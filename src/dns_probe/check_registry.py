"""Check kind registry shared by configuration, runner, and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .checker import (
    AnswerMatchChecker,
    Checker,
    SignatureFreshnessChecker,
    ZoneConsistencyChecker,
)
from .config import (
    AnswerMatchConfig,
    CheckConfig,
    SignatureFreshnessConfig,
    ZoneConsistencyConfig,
)
from .transport import UdpTransport


@dataclass(frozen=True)
class CheckSpec:
    """Describe a check kind.

    Attributes:
        kind (str): Canonical kind used in checks files.
        config_cls (type): Config dataclass for the kind.
        checker_cls (type): Checker class built from the config.
        description (str): One-line description for listings.
    """

    kind: str
    config_cls: type
    checker_cls: type
    description: str

    @property
    def aliases(self) -> Tuple[str, ...]:
        """Alternate kind names accepted in checks files."""
        return tuple(self.config_cls.aliases)


CHECK_SPECS: Tuple[CheckSpec, ...] = (
    CheckSpec(
        kind=AnswerMatchConfig.kind,
        config_cls=AnswerMatchConfig,
        checker_cls=AnswerMatchChecker,
        description="Every answer for a name/type is in an acceptable set",
    ),
    CheckSpec(
        kind=ZoneConsistencyConfig.kind,
        config_cls=ZoneConsistencyConfig,
        checker_cls=ZoneConsistencyChecker,
        description="All servers return the same SOA for a zone",
    ),
    CheckSpec(
        kind=SignatureFreshnessConfig.kind,
        config_cls=SignatureFreshnessConfig,
        checker_cls=SignatureFreshnessChecker,
        description="A name has an active RRSIG that is not close to expiry",
    ),
)


def spec_for_config(config: CheckConfig) -> CheckSpec:
    """Return the CheckSpec matching a config object.

    Args:
        config (CheckConfig): Check configuration.

    Returns:
        CheckSpec: Matching check spec.

    Raises:
        ValueError: If the config type is not registered.
    """
    for spec in CHECK_SPECS:
        if isinstance(config, spec.config_cls):
            return spec
    raise ValueError(f"Unsupported check configuration {type(config).__name__}")


def build_checker(config: CheckConfig, transport: Optional[UdpTransport] = None) -> Checker:
    """Instantiate the checker for a config object.

    Args:
        config (CheckConfig): Check configuration.
        transport (Optional[UdpTransport]): Transport shared by the checker.

    Returns:
        Checker: Checker ready to perform.

    Raises:
        ValueError: If the config is unsupported or holds invalid values.
    """
    spec = spec_for_config(config)
    return spec.checker_cls.from_config(config, transport=transport)
