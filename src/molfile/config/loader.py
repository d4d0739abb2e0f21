"""Configuration loader for molfile splitters.

Settings are merged in precedence order: defaults, then ``MOLFILE_*``
environment variables, then explicit keyword overrides.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from molfile.config.defaults import DEFAULT_SPLITTER_CONFIG
from molfile.config.validator import describe_validation_error
from molfile.lib.errors import ConfigError
from molfile.models.config import SplitterConfig

logger = logging.getLogger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "encoding": "MOLFILE_ENCODING",
    "decode_errors": "MOLFILE_DECODE_ERRORS",
    "min_trailing_length": "MOLFILE_MIN_TRAILING_LENGTH",
}


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to appropriate type.

    Args:
        field_name: Name of the field (used to determine type)
        value: String value from environment variable

    Returns:
        Parsed value in correct type (int or str)

    Raises:
        ValueError: If value cannot be parsed
    """
    if field_name == "min_trailing_length":
        return int(value)
    return value.strip()


def _get_env_value(field_name: str, env_vars: Mapping[str, str]) -> Any | None:
    """Get environment variable value for a field.

    Args:
        field_name: Name of field to get
        env_vars: Environment variables mapping

    Returns:
        Parsed value or None if not found or invalid
    """
    env_var_name = ENV_VAR_MAP.get(field_name)
    if not env_var_name or env_var_name not in env_vars:
        return None

    try:
        return _parse_env_value(field_name, env_vars[env_var_name])
    except ValueError:
        logger.warning(
            "Ignoring unparseable %s=%r", env_var_name, env_vars[env_var_name]
        )
        return None


def load_splitter_config(
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> SplitterConfig:
    """Build a SplitterConfig from defaults, environment and overrides.

    Args:
        overrides: Explicit field values; these win over everything else
        env: Environment mapping to read; defaults to ``os.environ``

    Returns:
        Validated, frozen SplitterConfig

    Raises:
        ConfigError: If the merged settings fail validation
    """
    env_vars = os.environ if env is None else env
    merged: dict[str, Any] = dict(DEFAULT_SPLITTER_CONFIG)

    for field in ENV_VAR_MAP:
        if (env_value := _get_env_value(field, env_vars)) is not None:
            merged[field] = env_value

    if overrides:
        merged.update(overrides)

    try:
        config = SplitterConfig(**merged)
    except PydanticValidationError as e:
        raise ConfigError(*describe_validation_error(e)) from e

    logger.debug("Loaded splitter config: %s", config.model_dump())
    return config
