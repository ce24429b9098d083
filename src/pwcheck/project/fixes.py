# SPDX-License-Identifier: MIT
"""
Remediation suggestions for a triaged row.
"""
from __future__ import annotations

from typing import List, Sequence

from ..classify.rules import (
    REASON_COMMON_PATTERN,
    REASON_NO_DIGIT,
    REASON_NO_LOWERCASE,
    REASON_NO_SYMBOL,
    REASON_NO_UPPERCASE,
    is_length_reason,
)
from ..reuse.groups import MIN_GROUP_SIZE

NO_ACTION = "No action needed based on current checks."

# Order in which advice is listed
REASON_FIXES = (
    (REASON_NO_UPPERCASE, "Add at least one uppercase letter."),
    (REASON_NO_LOWERCASE, "Add at least one lowercase letter."),
    (REASON_NO_DIGIT, "Add at least one number."),
    (REASON_NO_SYMBOL, "Add at least one symbol."),
    (
        REASON_COMMON_PATTERN,
        "Avoid common patterns (dictionary words, predictable substitutions, repeats).",
    ),
)


def suggest_fixes(reuse_count: int, reasons: Sequence[str], min_length: int) -> List[str]:
    """
    List what the operator should change for one account.

    Args:
        reuse_count: Accounts sharing the password
        reasons: Live weakness reasons of the account
        min_length: Live minimum length, quoted in the length advice

    Returns:
        Ordered advice lines; a single "no action" line when nothing applies
    """
    fixes = []
    if reuse_count >= MIN_GROUP_SIZE:
        fixes.append(
            "Change this password so it is unique "
            f"(currently reused across {reuse_count} accounts)."
        )

    lowered = [reason.lower() for reason in reasons]
    if any(is_length_reason(reason) for reason in reasons):
        fixes.append(f"Update to at least {min_length} characters.")
    for label, advice in REASON_FIXES:
        if label.lower() in lowered:
            fixes.append(advice)

    return fixes or [NO_ACTION]
