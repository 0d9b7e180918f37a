"""Output helpers for presenting check results."""

from __future__ import annotations

import json
from typing import List

from .result import CheckResult
from .status import Status

_OK_MESSAGE = "ok"


def build_json_payload(results: List[CheckResult], report_time: str) -> dict:
    """Build a JSON-serializable payload for results.

    Args:
        results (List[CheckResult]): Check results.
        report_time (str): UTC report timestamp string.

    Returns:
        dict: JSON-serializable payload.
    """
    return {
        "report_time_utc": report_time,
        "results": [
            {
                "check": result.check,
                "status": result.status.value,
                "message": result.message,
                "details": result.details,
            }
            for result in results
        ],
    }


def to_json(results: List[CheckResult], report_time: str) -> str:
    """Render results as formatted JSON.

    Args:
        results (List[CheckResult]): Check results.
        report_time (str): UTC report timestamp string.

    Returns:
        str: JSON string.
    """
    return json.dumps(build_json_payload(results, report_time), indent=2, default=str)


def to_text(results: List[CheckResult], report_time: str) -> str:
    """Render results as one line per check.

    Args:
        results (List[CheckResult]): Check results.
        report_time (str): UTC report timestamp string.

    Returns:
        str: Plain text report.
    """
    lines = [f"DNS probe report {report_time} UTC"]
    if not results:
        lines.append("No checks configured")
    status_width = max(len(status.value) for status in Status)
    label_width = max((len(result.check) for result in results), default=0)
    for result in results:
        message = result.message or _OK_MESSAGE
        lines.append(
            f"{result.status.value.ljust(status_width)}  {result.check.ljust(label_width)}  {message}"
        )
    return "\n".join(lines)
