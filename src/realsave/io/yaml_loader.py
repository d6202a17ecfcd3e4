"""Loader for projection params stored in YAML or JSON files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from realsave.config.schema import ProjectionParams
from realsave.io.serialize import load_params, params_from_data
from realsave.utils.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Args:
        path: Absolute or relative path to the YAML file.

    Returns:
        Parsed YAML content (typically a dict).

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path) as f:
        return yaml.safe_load(f)


def load_params_file(path: Path) -> ProjectionParams:
    """Load projection params from ``.yaml``, ``.yml`` or ``.json``.

    The file may hold the fields directly or nested under a ``params`` key.

    Raises:
        ConfigError: If the file cannot be read or parsed.
        InvalidParameterError: If a value is missing or out of range.
    """
    suffix = path.suffix.lower()
    logger.debug("loading params from %s", path)
    try:
        if suffix in (".yaml", ".yml"):
            return params_from_data(load_yaml(path))
        if suffix == ".json":
            return load_params(path.read_text())
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot parse {path}: {exc}") from exc
    raise ConfigError(f"unsupported params file type {suffix!r}; use .yaml, .yml or .json")
