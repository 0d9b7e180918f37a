"""Check configuration loading and models."""

from __future__ import annotations

from .loader import ConfigError, load_checks_data, load_checks_file, parse_check, resolve_kind
from .models import (
    CONFIG_TYPES,
    DEFAULT_MIN_DAYS,
    AnswerMatchConfig,
    CheckConfig,
    SignatureFreshnessConfig,
    ZoneConsistencyConfig,
)
from .paths import external_config_dirs, find_default_checks_file

__all__ = [
    "AnswerMatchConfig",
    "CONFIG_TYPES",
    "CheckConfig",
    "ConfigError",
    "DEFAULT_MIN_DAYS",
    "SignatureFreshnessConfig",
    "ZoneConsistencyConfig",
    "external_config_dirs",
    "find_default_checks_file",
    "load_checks_data",
    "load_checks_file",
    "parse_check",
    "resolve_kind",
]
