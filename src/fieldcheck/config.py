"""Settings for fieldcheck.

Settings are read from a YAML file with a top-level ``fieldcheck`` section:

```yaml
fieldcheck:
  max_depth: 32
```

The file is looked up in this order:
1. The ``config_path`` argument
2. The ``FIELDCHECK_CONFIG`` environment variable
3. ``./fieldcheck.yaml``

``FIELDCHECK_MAX_DEPTH`` overrides the value from the file.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError

from .compiler import DEFAULT_MAX_DEPTH
from .models import FieldcheckBaseModel

logger = logging.getLogger(__name__)

CONFIG_ENV = "FIELDCHECK_CONFIG"
MAX_DEPTH_ENV = "FIELDCHECK_MAX_DEPTH"
DEFAULT_CONFIG_FILE = "fieldcheck.yaml"


class FieldcheckSettings(FieldcheckBaseModel):
    """Library settings.

    Attributes:
        max_depth: Maximum schema nesting depth accepted by the compiler.
            Validation recurses once per schema level, so this bounds both.
    """

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)


def load_settings(config_path: Path | str | None = None) -> FieldcheckSettings:
    """Load settings from a config file and the environment.

    Args:
        config_path: Optional path to the YAML config file

    Returns:
        Validated FieldcheckSettings

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If the file can't be parsed or the settings are invalid
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV)
        if env_path:
            config_path = Path(env_path)
        elif Path(DEFAULT_CONFIG_FILE).exists():
            config_path = Path(DEFAULT_CONFIG_FILE)

    raw_settings: dict[str, Any] = {}
    if config_path is not None:
        raw_settings = _read_config_file(Path(config_path))

    env_depth = os.environ.get(MAX_DEPTH_ENV)
    if env_depth:
        raw_settings["max_depth"] = env_depth

    try:
        settings = FieldcheckSettings.model_validate(raw_settings)
    except ValidationError as e:
        raise ValueError(f"Invalid fieldcheck settings: {e}") from e

    logger.debug(f"Loaded settings: {settings}")
    return settings


def _read_config_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")

    logger.debug(f"Loading settings from: {config_path}")
    try:
        with open(config_path) as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML config file {config_path}: {e}") from e

    if not raw_config:
        logger.info("Empty config file, using default settings")
        return {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    section = raw_config.get("fieldcheck") or {}
    if not isinstance(section, dict):
        raise ValueError(f"The 'fieldcheck' section of {config_path} must be a mapping")
    return dict(section)
