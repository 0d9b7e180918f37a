"""Shared status constants and exit code mapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union


class Status(Enum):
    """Known check statuses.

    FAIL means the server answered wrongly or not at all; UNKNOWN means the
    exchange itself broke (socket error, unparseable reply).
    """

    PASS = "PASS"
    FAIL = "FAIL"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class ExitCodes:
    """Exit codes aligned with status values.

    Attributes:
        PASS (int): Exit code for passing checks.
        FAIL (int): Exit code for failed checks.
        UNKNOWN (int): Exit code for broken exchanges.
    """

    PASS: int = 0
    FAIL: int = 2
    UNKNOWN: int = 3


_SEVERITY = {Status.PASS: 0, Status.FAIL: 1, Status.UNKNOWN: 2}


def coerce_status(status: Union[Status, str]) -> Status:
    """Normalize a status string or enum into a Status value.

    Args:
        status (Status | str): Status enum or string value.

    Returns:
        Status: Normalized Status value.
    """
    if isinstance(status, Status):
        return status
    try:
        return Status(str(status).upper())
    except ValueError:
        return Status.UNKNOWN


def worst_status(statuses: Iterable[Union[Status, str]]) -> Status:
    """Return the most severe status, PASS when there are none.

    Args:
        statuses (Iterable[Status | str]): Status values.

    Returns:
        Status: Most severe status.
    """
    worst = Status.PASS
    for status in statuses:
        normalized = coerce_status(status)
        if _SEVERITY[normalized] > _SEVERITY[worst]:
            worst = normalized
    return worst


def exit_code_for_status(status: Union[Status, str]) -> int:
    """Map a status value to an exit code.

    Args:
        status (Status | str): Status enum or string value.

    Returns:
        int: Exit code for the status.
    """
    normalized = coerce_status(status)
    if normalized is Status.PASS:
        return ExitCodes.PASS
    if normalized is Status.FAIL:
        return ExitCodes.FAIL
    return ExitCodes.UNKNOWN


__all__ = ["ExitCodes", "Status", "coerce_status", "exit_code_for_status", "worst_status"]
