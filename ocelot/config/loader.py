"""
Loading SDK options from YAML files.

Supports environment variable substitution using ${ENV_VAR} syntax, with an
optional default: ${ENV_VAR:default}. The result is a raw options mapping;
run it through :func:`ocelot.config.validation.validate` before use.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ocelot.exceptions import ConfigurationLoadError, InvalidConfigurationError
from ocelot.logging_config import get_logger

logger = get_logger(__name__)

_ENV_VAR_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in option values.

    Examples:
        "${OCELOT_BASE_URL}" -> value of OCELOT_BASE_URL env var
        "${OCELOT_BASE_URL:https://app.ocelot.dev}" -> env var or the default
    """
    if isinstance(value, str):
        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return _ENV_VAR_PATTERN.sub(replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


def load_options(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load raw SDK options from a YAML file.

    An empty file yields an empty mapping.

    Args:
        path: Path to the YAML options file.

    Returns:
        Raw options mapping with environment variables expanded.

    Raises:
        ConfigurationLoadError: If the file cannot be read or parsed.
        InvalidConfigurationError: If the document is not a mapping.
    """
    path = Path(path).expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to read options file {path}: {e}")
        raise ConfigurationLoadError(f"Failed to read options file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse options file {path}: {e}")
        raise ConfigurationLoadError(f"Failed to parse YAML options file {path}: {e}") from e

    if data is None:
        logger.debug(f"Options file {path} is empty")
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            f"Options file {path} must contain a mapping, got {type(data).__name__}"
        )

    options = _expand_env_vars(data)
    logger.debug(f"Loaded {len(options)} option(s) from {path}")
    return options
