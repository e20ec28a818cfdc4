"""Resolve extraction options from CLI flags, environment and project config.

The library functions take an explicit options argument and never read
configuration themselves. This module is used by the command line tool to
build that argument:

* **Project config** -- ``./specroutes.json`` in the working directory, with
  the same camelCase keys :class:`~specroutes.models.ExtractOptions` accepts
  (``apiSeparator``, ``rootTag``, ``middleware``). See
  :func:`load_project_config`.
* **Environment** -- ``SPECROUTES_API_SEPARATOR`` and ``SPECROUTES_ROOT_TAG``.
* **Precedence resolution** -- :func:`resolve_options` layers CLI flags over
  the environment over the project config over the model defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from specroutes.exceptions import ConfigError
from specroutes.models import ExtractOptions

logger = logging.getLogger(__name__)

_PROJECT_CONFIG_FILENAME = "specroutes.json"

ENV_API_SEPARATOR = "SPECROUTES_API_SEPARATOR"
ENV_ROOT_TAG = "SPECROUTES_ROOT_TAG"


def project_config_path() -> Path:
    """Path to the project-local config file in the current directory."""
    return Path.cwd() / _PROJECT_CONFIG_FILENAME


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./specroutes.json``.

    Returns:
        The parsed JSON object, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not valid JSON or does not
            hold an object.
    """
    path = project_config_path()
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(
            f"Invalid project config at {path}: expected an object, "
            f"got {type(data).__name__}"
        )
    logger.debug("Loaded project config from %s", path)
    return data


def resolve_options(
    cli_separator: Optional[str] = None,
    cli_root_tag: Optional[str] = None,
) -> ExtractOptions:
    """Resolve extraction options with full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_separator``, ``cli_root_tag``)
        2. Environment variables (``SPECROUTES_API_SEPARATOR``,
           ``SPECROUTES_ROOT_TAG``)
        3. Project config (``./specroutes.json``)
        4. Defaults

    The middleware registry can only come from the project config.

    Returns:
        The effective :class:`~specroutes.models.ExtractOptions`.

    Raises:
        ConfigError: If the project config is unreadable or its values fail
            validation.
    """
    # 4 + 3. Defaults overlaid with project config
    data: dict[str, Any] = dict(load_project_config() or {})

    # 2. Environment
    env_separator = os.environ.get(ENV_API_SEPARATOR)
    if env_separator:
        data["apiSeparator"] = env_separator
    env_root_tag = os.environ.get(ENV_ROOT_TAG)
    if env_root_tag:
        data["rootTag"] = env_root_tag

    # 1. CLI flags
    if cli_separator is not None:
        data["apiSeparator"] = cli_separator
    if cli_root_tag is not None:
        data["rootTag"] = cli_root_tag

    try:
        return ExtractOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid extract options: {exc}") from exc
