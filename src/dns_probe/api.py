"""Stable public API for programmatic usage."""

from __future__ import annotations

from .address import ServerAddress
from .check_registry import CHECK_SPECS, CheckSpec, build_checker
from .checker import (
    AnswerMatchChecker,
    Checker,
    SignatureFreshnessChecker,
    ZoneConsistencyChecker,
)
from .config import (
    AnswerMatchConfig,
    ConfigError,
    SignatureFreshnessConfig,
    ZoneConsistencyConfig,
    load_checks_data,
    load_checks_file,
)
from .result import CheckResult
from .runner import run_check, run_checks
from .status import ExitCodes, Status, exit_code_for_status, worst_status
from .transport import ExchangeOutcome, OutcomeKind, UdpTransport

__all__ = [
    "AnswerMatchChecker",
    "AnswerMatchConfig",
    "CHECK_SPECS",
    "CheckResult",
    "CheckSpec",
    "Checker",
    "ConfigError",
    "ExchangeOutcome",
    "ExitCodes",
    "OutcomeKind",
    "ServerAddress",
    "SignatureFreshnessChecker",
    "SignatureFreshnessConfig",
    "Status",
    "UdpTransport",
    "ZoneConsistencyChecker",
    "ZoneConsistencyConfig",
    "build_checker",
    "exit_code_for_status",
    "load_checks_data",
    "load_checks_file",
    "run_check",
    "run_checks",
    "worst_status",
]
