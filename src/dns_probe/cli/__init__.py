"""Command-line interface for the DNS probes."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from datetime import datetime, timezone
from typing import List

from ..check_registry import CHECK_SPECS
from ..config import (
    AnswerMatchConfig,
    CheckConfig,
    SignatureFreshnessConfig,
    ZoneConsistencyConfig,
    find_default_checks_file,
    load_checks_file,
)
from ..output import to_json, to_text
from ..runner import run_checks
from ..status import exit_code_for_status, worst_status
from .parser import _setup_logging, build_parser

LOGGER = logging.getLogger(__name__)

__all__ = ["_setup_logging", "build_parser", "main"]


def _configs_from_command(args: argparse.Namespace) -> List[CheckConfig]:
    """Build the single check config described by a subcommand.

    Args:
        args (argparse.Namespace): Parsed CLI arguments.

    Returns:
        List[CheckConfig]: One check config.
    """
    if args.command in {"answer", "dns"}:
        return [
            AnswerMatchConfig(
                server=args.server,
                name=args.name,
                type=args.type,
                acceptable=tuple(args.acceptable),
            )
        ]
    if args.command in {"soa", "dnssoa"}:
        return [ZoneConsistencyConfig(domain=args.domain, servers=tuple(args.servers))]
    return [SignatureFreshnessConfig(server=args.server, name=args.name, min_days=args.min_days)]


def _apply_timeout(configs: List[CheckConfig], timeout: float | None) -> List[CheckConfig]:
    """Fill in the CLI timeout for configs that do not set their own.

    Args:
        configs (List[CheckConfig]): Loaded check configs.
        timeout (float | None): CLI timeout override.

    Returns:
        List[CheckConfig]: Configs with the timeout applied.
    """
    if timeout is None:
        return configs
    return [
        config if config.timeout is not None else dataclasses.replace(config, timeout=timeout)
        for config in configs
    ]


def main(argv: List[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Args:
        argv (List[str] | None): Optional argument list for parsing.

    Returns:
        int: Exit code (0=PASS, 2=FAIL, 3=UNKNOWN) for the worst check result.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)
    LOGGER.debug("Parsed arguments: %s", args)

    if args.list_checks:
        width = max(len(spec.kind) for spec in CHECK_SPECS)
        for spec in CHECK_SPECS:
            aliases = ", ".join(spec.aliases)
            print(f"{spec.kind.ljust(width)}  {spec.description} (aliases: {aliases})")
        return 0

    if args.command:
        if args.config:
            parser.error("--config cannot be combined with a check subcommand")
        configs = _configs_from_command(args)
    else:
        config_path = args.config or find_default_checks_file()
        if config_path is None:
            parser.error("--config is required when no default checks file exists")
        LOGGER.info("Loading checks from %s", config_path)
        try:
            configs = load_checks_file(config_path)
        except ValueError as exc:
            parser.error(str(exc))

    configs = _apply_timeout(configs, args.timeout)
    try:
        results = run_checks(configs)
    except ValueError as exc:
        parser.error(str(exc))

    report_time = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M")
    if args.output == "json":
        print(to_json(results, report_time))
    else:
        print(to_text(results, report_time))

    return exit_code_for_status(worst_status(result.status for result in results))


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
