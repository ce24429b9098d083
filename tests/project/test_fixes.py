# SPDX-License-Identifier: MIT
"""
Tests for remediation suggestions.
"""
from pwcheck.project.fixes import NO_ACTION, suggest_fixes


def test_no_issues():
    assert suggest_fixes(0, [], 12) == [NO_ACTION]


def test_reuse_advice_mentions_count():
    fixes = suggest_fixes(4, [], 12)
    assert fixes == [
        "Change this password so it is unique (currently reused across 4 accounts)."
    ]


def test_advice_order():
    reasons = ["Length < 14", "No uppercase", "No number", "No symbol", "Common pattern"]
    fixes = suggest_fixes(2, reasons, 14)

    assert fixes == [
        "Change this password so it is unique (currently reused across 2 accounts).",
        "Update to at least 14 characters.",
        "Add at least one uppercase letter.",
        "Add at least one number.",
        "Add at least one symbol.",
        "Avoid common patterns (dictionary words, predictable substitutions, repeats).",
    ]


def test_lowercase_advice_after_uppercase():
    fixes = suggest_fixes(0, ["No lowercase", "No uppercase"], 12)
    assert fixes == [
        "Add at least one uppercase letter.",
        "Add at least one lowercase letter.",
    ]
