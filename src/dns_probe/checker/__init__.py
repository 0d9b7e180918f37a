"""DNS checker package exports."""

from __future__ import annotations

from ..result import CheckResult
from .answer import AnswerMatchChecker
from .base import Checker
from .signature import SignatureFreshnessChecker
from .zone import ZoneConsistencyChecker

__all__ = [
    "AnswerMatchChecker",
    "CheckResult",
    "Checker",
    "SignatureFreshnessChecker",
    "ZoneConsistencyChecker",
]
