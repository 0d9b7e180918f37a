"""Check result model."""

from __future__ import annotations

import dataclasses
from typing import Dict, Optional

from .status import Status, coerce_status


@dataclasses.dataclass(frozen=True)
class CheckResult:
    """Represent the outcome of one check invocation.

    A healthy result has PASS status and an empty message; any other result
    carries a human-readable diagnostic.

    Attributes:
        check (str): Label of the check that produced the result.
        status (Status): Result status.
        message (str): Diagnostic message, empty when healthy.
        details (Dict[str, object]): Structured details for output.
    """

    check: str
    status: Status
    message: str
    details: Dict[str, object] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize the status value."""
        if not isinstance(self.status, Status):
            object.__setattr__(self, "status", coerce_status(self.status))

    @property
    def healthy(self) -> bool:
        """Return whether the result is a PASS."""
        return self.status is Status.PASS

    def __str__(self) -> str:
        """Return the diagnostic message."""
        return self.message

    @classmethod
    def pass_(cls, check: str, details: Optional[Dict[str, object]] = None) -> "CheckResult":
        """Build a healthy CheckResult.

        Args:
            check (str): Check label.
            details (Optional[Dict[str, object]]): Structured details for output.

        Returns:
            CheckResult: Result with PASS status and no message.
        """
        return cls(check, Status.PASS, "", details or {})

    @classmethod
    def fail(
        cls, check: str, message: str, details: Optional[Dict[str, object]] = None
    ) -> "CheckResult":
        """Build a failed CheckResult.

        Args:
            check (str): Check label.
            message (str): Diagnostic message.
            details (Optional[Dict[str, object]]): Structured details for output.

        Returns:
            CheckResult: Result with FAIL status.
        """
        return cls(check, Status.FAIL, message, details or {})

    @classmethod
    def unknown(
        cls, check: str, message: str, details: Optional[Dict[str, object]] = None
    ) -> "CheckResult":
        """Build a CheckResult for an exchange that could not complete.

        Args:
            check (str): Check label.
            message (str): Diagnostic message.
            details (Optional[Dict[str, object]]): Structured details for output.

        Returns:
            CheckResult: Result with UNKNOWN status.
        """
        return cls(check, Status.UNKNOWN, message, details or {})
