# SPDX-License-Identifier: MIT
"""
Policy configuration loading.

A policy file is a small YAML document::

    version: 1
    min_length: 14
    issue_mode: weakOnly
    sort_mode: risk
    ignore_dev_urls: true
    demo_mode: false
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from ..core.exceptions import PwcheckConfigError

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 12
MIN_LENGTH_FLOOR = 6
MIN_LENGTH_CEILING = 64

ISSUE_MODES = ("all", "reuseOnly", "weakOnly")
SORT_MODES = ("risk", "reuseCount", "domain")

# Short names accepted on the command line and in policy files
ISSUE_MODE_ALIASES = {"reuse": "reuseOnly", "weak": "weakOnly"}

DEFAULT_CONFIG_NAMES = (".pwcheck.yml", ".pwcheck.yaml")


def get_default_policy_config() -> Dict[str, Any]:
    """
    Get the default policy configuration.

    Returns:
        Dictionary with default policy settings
    """
    return {
        "version": 1,
        "min_length": DEFAULT_MIN_LENGTH,
        "issue_mode": "all",
        "sort_mode": "risk",
        "ignore_dev_urls": True,
        "demo_mode": False,
    }


def clamp_min_length(value: Any) -> int:
    """
    Coerce a minimum-length setting into the supported range.

    Non-numeric values (including booleans and None) fall back to the default;
    numeric values are truncated and clamped to ``[6, 64]``.
    """
    if isinstance(value, bool) or value is None:
        return DEFAULT_MIN_LENGTH
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_MIN_LENGTH
    return max(MIN_LENGTH_FLOOR, min(MIN_LENGTH_CEILING, number))


def normalize_issue_mode(value: str) -> str:
    """Resolve aliases and validate an issue mode."""
    mode = ISSUE_MODE_ALIASES.get(value, value) if isinstance(value, str) else value
    if mode not in ISSUE_MODES:
        raise PwcheckConfigError(
            f"Invalid issue_mode {value!r}; expected one of {', '.join(ISSUE_MODES)}",
            section="issue_mode",
        )
    return mode


def normalize_sort_mode(value: str) -> str:
    """Validate a sort mode."""
    if value not in SORT_MODES:
        raise PwcheckConfigError(
            f"Invalid sort_mode {value!r}; expected one of {', '.join(SORT_MODES)}",
            section="sort_mode",
        )
    return value


def load_policy_config(config_path: Optional[str] = None, search_dir: str = ".") -> Dict[str, Any]:
    """
    Load policy configuration following the search order.

    1. An explicit ``config_path``
    2. ``.pwcheck.yml`` or ``.pwcheck.yaml`` in ``search_dir``
    3. Built-in defaults

    Args:
        config_path: Path to the policy YAML file
        search_dir: Directory searched for a default policy file

    Returns:
        Dictionary containing the policy configuration

    Raises:
        PwcheckConfigError: If an explicit file is missing or any file is invalid
    """
    if config_path:
        path = Path(config_path).resolve()
        if not path.exists():
            raise PwcheckConfigError(
                f"Policy config file not found: {path}", config_path=str(path)
            )
        return _load_yaml_config(path)

    for name in DEFAULT_CONFIG_NAMES:
        candidate = Path(search_dir).resolve() / name
        if candidate.exists():
            return _load_yaml_config(candidate)

    logger.debug("No policy file found, using defaults")
    return get_default_policy_config()


def _load_yaml_config(path: Path) -> Dict[str, Any]:
    """Load, default and validate one policy file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise PwcheckConfigError(
            f"Failed to parse config file: {e}", config_path=str(path)
        )

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise PwcheckConfigError(
            "Policy config must be a mapping", config_path=str(path)
        )

    config = _apply_policy_defaults(config)
    try:
        _validate_policy_config(config)
    except PwcheckConfigError as e:
        e.config_path = str(path)
        raise

    logger.info("Loaded policy: %s", path)
    return config


def _apply_policy_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply default values to policy configuration."""
    for key, value in get_default_policy_config().items():
        if key not in config:
            config[key] = value
    return config


def _validate_policy_config(config: Dict[str, Any]) -> None:
    """Validate policy configuration structure, normalizing values in place."""
    version = config.get("version")
    if not isinstance(version, int) or version != 1:
        raise PwcheckConfigError("Policy version must be 1", section="version")

    raw_length = config["min_length"]
    config["min_length"] = clamp_min_length(raw_length)
    if config["min_length"] != raw_length:
        logger.warning(
            "min_length %r adjusted to %d", raw_length, config["min_length"]
        )

    config["issue_mode"] = normalize_issue_mode(config["issue_mode"])
    config["sort_mode"] = normalize_sort_mode(config["sort_mode"])

    for flag in ("ignore_dev_urls", "demo_mode"):
        if not isinstance(config[flag], bool):
            raise PwcheckConfigError(f"{flag} must be true or false", section=flag)
