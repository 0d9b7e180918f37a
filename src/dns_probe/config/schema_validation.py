"""JSON Schema validation for check configuration payloads."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

_SCHEMA_PACKAGE = "dns_probe.resources"
_SCHEMA_FILENAME = "checks.schema.json"


@lru_cache(maxsize=1)
def _load_checks_schema_validator() -> Draft202012Validator:
    """Load and cache the checks JSON Schema validator.

    Returns:
        Draft202012Validator: Validator for checks YAML payloads.
    """
    schema_text = (
        resources.files(_SCHEMA_PACKAGE).joinpath(_SCHEMA_FILENAME).read_text(encoding="utf-8")
    )
    return Draft202012Validator(json.loads(schema_text))


def _schema_error_data(err: ValidationError) -> dict[str, str]:
    """Render one schema validation error as a structured mapping.

    Args:
        err (ValidationError): JSON Schema validation error.

    Returns:
        dict[str, str]: Error location and message fields.
    """
    location = ".".join(str(part) for part in err.absolute_path) or "<root>"
    return {"location": location, "message": str(err.message)}


def collect_checks_schema_errors(payload: object) -> list[dict[str, str]]:
    """Collect deterministic schema validation errors for a checks payload.

    Args:
        payload (object): Parsed checks file content.

    Returns:
        list[dict[str, str]]: Sorted schema validation errors.
    """
    validator = _load_checks_schema_validator()
    errors = [_schema_error_data(err) for err in validator.iter_errors(payload)]
    return sorted(errors, key=lambda item: (item["location"], item["message"]))
