"""Argument value parsers for the CLI."""

from __future__ import annotations

import argparse


def _parse_positive_float(value: str) -> float:
    """Parse a positive float value for CLI options.

    Args:
        value (str): Raw CLI value.

    Returns:
        float: Parsed float value.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive number.
    """
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a positive number") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be a positive number")
    return parsed


def _parse_min_days(value: str) -> float:
    """Parse the RRSIG validity margin in days.

    Args:
        value (str): Raw CLI value.

    Returns:
        float: Parsed margin.

    Raises:
        argparse.ArgumentTypeError: If the value is not a non-negative number.
    """
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a non-negative number") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("must be a non-negative number")
    return parsed
