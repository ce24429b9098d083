# SPDX-License-Identifier: MIT
"""
Risk scoring for credential entries.

Provides deterministic risk scoring based on:
- How many accounts share the entry's password
- Whether the password is weak under the live policy

The numeric score is used only for ordering; the label is shown for triage.
"""
from __future__ import annotations

from enum import Enum


class RiskLevel(Enum):
    """Risk level categories."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


REUSE_WEIGHT = 10
WEAK_WEIGHT = 15

# Reuse thresholds for labelling
WIDE_REUSE = 10
REUSE = 2


def calculate_risk_score(reuse_count: int, is_weak: bool) -> int:
    """
    Calculate the ordering score for an entry.

    Args:
        reuse_count: Number of accounts sharing the password (0 when unique)
        is_weak: Whether the password violates any rule

    Returns:
        ``reuse_count * 10 + 15`` when weak, ``reuse_count * 10`` otherwise
    """
    return reuse_count * REUSE_WEIGHT + (WEAK_WEIGHT if is_weak else 0)


def get_risk_level(reuse_count: int, is_weak: bool) -> RiskLevel:
    """Map reuse count and weakness to a risk level; first match wins."""
    if reuse_count >= WIDE_REUSE and is_weak:
        return RiskLevel.HIGH
    elif reuse_count >= REUSE and is_weak:
        return RiskLevel.MEDIUM
    elif reuse_count >= WIDE_REUSE:
        return RiskLevel.MEDIUM
    elif is_weak:
        return RiskLevel.MEDIUM
    else:
        return RiskLevel.LOW

