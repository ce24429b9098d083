# SPDX-License-Identifier: MIT
"""Policy configuration for the live projection."""

from .loader import (
    DEFAULT_MIN_LENGTH,
    ISSUE_MODES,
    SORT_MODES,
    clamp_min_length,
    get_default_policy_config,
    load_policy_config,
    normalize_issue_mode,
    normalize_sort_mode,
)

__all__ = [
    "DEFAULT_MIN_LENGTH",
    "ISSUE_MODES",
    "SORT_MODES",
    "clamp_min_length",
    "get_default_policy_config",
    "load_policy_config",
    "normalize_issue_mode",
    "normalize_sort_mode",
]
