"""Stable API for running configured checks."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .check_registry import build_checker
from .checker import Checker
from .config import CheckConfig
from .result import CheckResult
from .transport import UdpTransport

LOGGER = logging.getLogger(__name__)


def perform_check(checker: Checker) -> CheckResult:
    """Perform one checker and log its outcome.

    Args:
        checker (Checker): Checker to run.

    Returns:
        CheckResult: Result of the check.
    """
    LOGGER.debug("Starting %s", checker.label)
    result = checker.perform()
    if result.healthy:
        LOGGER.info("%s: %s", result.check, result.status.value)
    else:
        LOGGER.info("%s: %s - %s", result.check, result.status.value, result.message)
    if result.details:
        LOGGER.debug("%s details: %s", result.check, result.details)
    return result


def run_check(config: CheckConfig, transport: Optional[UdpTransport] = None) -> CheckResult:
    """Build and perform the checker for one config.

    Args:
        config (CheckConfig): Check configuration.
        transport (Optional[UdpTransport]): Transport override.

    Returns:
        CheckResult: Result of the check.

    Raises:
        ValueError: If the config holds invalid values.
    """
    return perform_check(build_checker(config, transport=transport))


def run_checks(
    configs: Iterable[CheckConfig], transport: Optional[UdpTransport] = None
) -> List[CheckResult]:
    """Perform each configured check once, in order.

    Every checker is built before any is performed, so an invalid entry is
    reported before network traffic starts.

    Args:
        configs (Iterable[CheckConfig]): Check configurations.
        transport (Optional[UdpTransport]): Transport override.

    Returns:
        List[CheckResult]: One result per config, in input order.

    Raises:
        ValueError: If a config holds invalid values.
    """
    checkers = [build_checker(config, transport=transport) for config in configs]
    if not checkers:
        LOGGER.info("No checks configured")
        return []
    return [perform_check(checker) for checker in checkers]
