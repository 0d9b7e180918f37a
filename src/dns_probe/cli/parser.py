"""Argument parser helpers for the CLI."""

from __future__ import annotations

import argparse
import logging
import time

from .. import __version__
from .parsing import _parse_min_days, _parse_positive_float


def _setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbosity (int): Verbosity count from CLI flags.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.Formatter.converter = time.gmtime  # UTC timestamps
    logging.basicConfig(
        level=level,
        format="%(asctime)sZ [%(levelname)s] %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="dns-probe",
        description=(
            "Run active DNS health checks. Without a subcommand, every check in the "
            "checks file is run. Options must precede the subcommand."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    config_group = parser.add_argument_group("Configuration")
    dns_group = parser.add_argument_group("DNS")
    output_group = parser.add_argument_group("Output")
    logging_group = parser.add_argument_group("Logging")
    misc_group = parser.add_argument_group("Misc")

    config_group.add_argument(
        "--config",
        metavar="PATH",
        help="Checks file to run (defaults to ~/.config/dns-probe/checks.yaml or /etc/dns-probe)",
    )
    config_group.add_argument(
        "--list-checks",
        dest="list_checks",
        action="store_true",
        help="List available check kinds and exit",
    )
    dns_group.add_argument(
        "--timeout",
        type=_parse_positive_float,
        default=None,
        help="Reply timeout in seconds for checks without their own timeout",
    )
    output_group.add_argument(
        "--output",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    logging_group.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (use -vv for debug)",
    )
    misc_group.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    answer = subparsers.add_parser(
        "answer",
        aliases=["dns"],
        help="Check that every answer for a name/type is acceptable",
    )
    answer.add_argument("server", help="DNS server address (IP, optionally with :port)")
    answer.add_argument("name", help="Name to query")
    answer.add_argument("type", help="Record type to query (e.g. A, NS, MX)")
    answer.add_argument(
        "--acceptable",
        action="append",
        default=[],
        required=True,
        metavar="VALUE",
        help="Acceptable answer rendering or NS target (repeatable)",
    )

    soa = subparsers.add_parser(
        "soa",
        aliases=["dnssoa"],
        help="Check that all servers return the same SOA for a zone",
    )
    soa.add_argument("domain", help="Zone apex to query")
    soa.add_argument(
        "--server",
        dest="servers",
        action="append",
        default=[],
        required=True,
        metavar="SERVER",
        help="DNS server address (repeatable, queried in order)",
    )

    rrsig = subparsers.add_parser(
        "rrsig",
        aliases=["signature"],
        help="Check that a name has an active RRSIG not close to expiry",
    )
    rrsig.add_argument("server", help="DNS server address (IP, optionally with :port)")
    rrsig.add_argument("name", help="Signed name to query")
    rrsig.add_argument(
        "--min-days",
        dest="min_days",
        type=_parse_min_days,
        default=7,
        help="Required remaining signature validity in days",
    )
    return parser
