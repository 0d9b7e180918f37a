"""Load check configuration from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional

import yaml

from .models import (
    CONFIG_TYPES,
    DEFAULT_MIN_DAYS,
    AnswerMatchConfig,
    CheckConfig,
    SignatureFreshnessConfig,
    ZoneConsistencyConfig,
)
from .schema_validation import collect_checks_schema_errors

LOGGER = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a checks file does not match the expected structure."""

    def __init__(self, source: str, errors: List[Dict[str, str]]) -> None:
        """Initialize a configuration error.

        Args:
            source (str): File path or description of the payload.
            errors (List[Dict[str, str]]): Location/message pairs.
        """
        lines = [f"{error['location']}: {error['message']}" for error in errors]
        super().__init__(f"Invalid checks configuration {source}:\n  " + "\n  ".join(lines))
        self.source = source
        self.errors = errors


def _kind_aliases() -> Dict[str, type]:
    """Map every check kind and alias to its config class.

    Returns:
        Dict[str, type]: Lowercase kind/alias to config class.
    """
    aliases: Dict[str, type] = {}
    for config_cls in CONFIG_TYPES:
        aliases[config_cls.kind] = config_cls
        for alias in config_cls.aliases:
            aliases[alias] = config_cls
    return aliases


def resolve_kind(text: str) -> str:
    """Normalize a check kind or alias to its canonical kind.

    Args:
        text (str): Kind text such as ``soa`` or ``dnssoa``.

    Returns:
        str: Canonical kind.

    Raises:
        ValueError: If the kind is unknown.
    """
    aliases = _kind_aliases()
    normalized = str(text).strip().lower()
    if normalized not in aliases:
        available = ", ".join(sorted(aliases))
        raise ValueError(f"Unknown check kind '{text}'. Available: {available}")
    return aliases[normalized].kind


def _optional_timeout(entry: Mapping[str, object]) -> Optional[float]:
    """Return the per-check timeout override, if any."""
    timeout = entry.get("timeout")
    return float(timeout) if timeout is not None else None


def parse_check(entry: Mapping[str, object]) -> CheckConfig:
    """Build a config dataclass from one schema-valid check mapping.

    Args:
        entry (Mapping[str, object]): Check mapping with a ``check`` kind key.

    Returns:
        CheckConfig: Typed check configuration.

    Raises:
        ValueError: If the check kind is unknown.
    """
    kind = resolve_kind(str(entry.get("check", "")))
    label = entry.get("label")
    timeout = _optional_timeout(entry)
    if kind == AnswerMatchConfig.kind:
        return AnswerMatchConfig(
            server=str(entry["server"]),
            name=str(entry["name"]),
            type=str(entry["type"]),
            acceptable=tuple(str(value) for value in entry.get("acceptable", [])),
            label=label,
            timeout=timeout,
        )
    if kind == ZoneConsistencyConfig.kind:
        return ZoneConsistencyConfig(
            domain=str(entry["domain"]),
            servers=tuple(str(server) for server in entry["servers"]),
            label=label,
            timeout=timeout,
        )
    min_days = entry.get("minDays", entry.get("min_days", DEFAULT_MIN_DAYS))
    return SignatureFreshnessConfig(
        server=str(entry["server"]),
        name=str(entry["name"]),
        min_days=float(min_days),
        label=label,
        timeout=timeout,
    )


def load_checks_data(data: object, source: str = "<data>") -> List[CheckConfig]:
    """Validate a parsed checks payload and build its check configs.

    Args:
        data (object): Parsed YAML payload.
        source (str): Description of the payload for error messages.

    Returns:
        List[CheckConfig]: Check configurations in file order.

    Raises:
        ConfigError: If the payload does not match the checks schema.
    """
    errors = collect_checks_schema_errors(data)
    if errors:
        raise ConfigError(source, errors)
    configs = [parse_check(entry) for entry in data["checks"]]
    LOGGER.debug("Loaded %d checks from %s", len(configs), source)
    return configs


def load_checks_file(path: Path | str) -> List[CheckConfig]:
    """Load check configurations from a YAML file.

    Args:
        path (Path | str): Path to the checks file.

    Returns:
        List[CheckConfig]: Check configurations in file order.

    Raises:
        ConfigError: If the file content is not a valid checks mapping.
        ValueError: If the file cannot be read or parsed.
    """
    file_path = Path(path).expanduser()
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ValueError(f"Cannot read checks file {file_path}: {err}") from err
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as err:
        raise ValueError(f"Checks file {file_path} is not valid YAML: {err}") from err
    if not isinstance(data, dict):
        raise ValueError(f"Checks file {file_path} is not a mapping")
    return load_checks_data(data, source=str(file_path))
