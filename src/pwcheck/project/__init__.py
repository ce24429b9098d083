# SPDX-License-Identifier: MIT
"""
Live result projection.

Joins the static report with policy parameters into the rows shown for
triage, and suggests fixes for each row.
"""

from .fixes import suggest_fixes
from .results import (
    AnalysisSnapshot,
    ProjectionParams,
    ResultRow,
    adjust_weak_reasons,
    domain_label,
    live_summary,
    project_results,
)

__all__ = [
    "AnalysisSnapshot",
    "ProjectionParams",
    "ResultRow",
    "adjust_weak_reasons",
    "domain_label",
    "live_summary",
    "project_results",
    "suggest_fixes",
]
