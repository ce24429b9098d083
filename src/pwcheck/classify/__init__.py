# SPDX-License-Identifier: MIT
"""
Password weakness classification.

Provides deterministic, explainable rules that flag passwords as weak:
short, missing a character class, or containing a common pattern.
"""

from .rules import (
    BASELINE_MIN_LENGTH,
    classify_password,
    find_weak_entries,
    is_length_reason,
    length_reason,
)

__all__ = [
    "BASELINE_MIN_LENGTH",
    "classify_password",
    "find_weak_entries",
    "is_length_reason",
    "length_reason",
]
