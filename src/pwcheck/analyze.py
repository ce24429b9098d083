# SPDX-License-Identifier: MIT
"""
Static analysis of a credential export.

``analyze`` is a pure function of its entries: calling it twice on the same
sequence yields equal reports.
"""
from __future__ import annotations

import logging
from typing import Sequence

from .classify.rules import find_weak_entries
from .core.entries import Entry, Report, Summary
from .reuse.groups import find_reuse_groups

logger = logging.getLogger(__name__)


def analyze(entries: Sequence[Entry]) -> Report:
    """
    Build the weakness and reuse report for a sequence of entries.

    Args:
        entries: Normalized entries; an empty sequence is valid

    Returns:
        Report with summary counts, weak findings and reuse groups
    """
    weak_findings = find_weak_entries(entries)
    reuse_groups = find_reuse_groups(entries)

    summary = Summary(
        total=len(entries),
        weak=len(weak_findings),
        reused_groups=len(reuse_groups),
        reused_accounts=sum(group.count for group in reuse_groups),
    )
    logger.debug(
        "Analyzed %d entries: %d weak, %d reuse groups",
        summary.total,
        summary.weak,
        summary.reused_groups,
    )

    return Report(
        summary=summary,
        weak_findings=tuple(weak_findings),
        reuse_groups=tuple(reuse_groups),
    )
