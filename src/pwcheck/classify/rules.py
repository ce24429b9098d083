# SPDX-License-Identifier: MIT
"""
Weakness rules for stored passwords.

Every password is checked against a fixed baseline rule set. The rules are
evaluated in this order, and the order of the returned labels is part of the
contract because consumers may show only the first one:

1. length: shorter than ``BASELINE_MIN_LENGTH``
2. lowercase: no ``a``-``z``
3. uppercase: no ``A``-``Z``
4. digit: no ``0``-``9``
5. symbol: no character outside ``A-Za-z0-9``
6. common pattern: contains ``password``, ``qwerty`` or ``1234`` (any case)
"""
from __future__ import annotations

import re
from typing import List, Sequence, Tuple, Callable

from ..core.entries import Entry, WeakFinding

BASELINE_MIN_LENGTH = 12

REASON_NO_LOWERCASE = "No lowercase"
REASON_NO_UPPERCASE = "No uppercase"
REASON_NO_DIGIT = "No number"
REASON_NO_SYMBOL = "No symbol"
REASON_COMMON_PATTERN = "Common pattern"

_LENGTH_PREFIX = "Length"

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")
_COMMON_PATTERN_RE = re.compile(r"password|qwerty|1234", re.IGNORECASE)


def length_reason(min_length: int) -> str:
    """Wording of the length rule for a given threshold."""
    return f"{_LENGTH_PREFIX} < {min_length}"


def is_length_reason(reason: str) -> bool:
    """True when ``reason`` was produced by the length rule."""
    return reason.lower().startswith(_LENGTH_PREFIX.lower())


# Character-class rules do not depend on policy; order matters.
CHARACTER_RULES: Tuple[Tuple[str, Callable[[str], bool]], ...] = (
    (REASON_NO_LOWERCASE, lambda pw: not _LOWER_RE.search(pw)),
    (REASON_NO_UPPERCASE, lambda pw: not _UPPER_RE.search(pw)),
    (REASON_NO_DIGIT, lambda pw: not _DIGIT_RE.search(pw)),
    (REASON_NO_SYMBOL, lambda pw: not _SYMBOL_RE.search(pw)),
    (REASON_COMMON_PATTERN, lambda pw: bool(_COMMON_PATTERN_RE.search(pw))),
)


def classify_password(password: str, min_length: int = BASELINE_MIN_LENGTH) -> List[str]:
    """
    Return the violated rule labels for a password.

    Args:
        password: Password to check, possibly empty
        min_length: Length threshold; the baseline report always uses 12

    Returns:
        Ordered list of labels; empty when the password passes every rule
    """
    password = password or ""
    reasons = []

    if len(password) < min_length:
        reasons.append(length_reason(min_length))

    for label, violated in CHARACTER_RULES:
        if violated(password):
            reasons.append(label)

    return reasons


def find_weak_entries(entries: Sequence[Entry]) -> List[WeakFinding]:
    """
    Classify every entry against the baseline rules.

    Entries that pass every rule produce no finding.

    Args:
        entries: Normalized entries in analysis order

    Returns:
        One WeakFinding per weak entry, in entry order
    """
    findings = []
    for index, entry in enumerate(entries):
        reasons = classify_password(entry.password)
        if reasons:
            findings.append(
                WeakFinding(
                    index=index,
                    site=entry.site,
                    username=entry.username,
                    reasons=tuple(reasons),
                )
            )
    return findings
