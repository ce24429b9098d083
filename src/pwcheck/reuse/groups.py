# SPDX-License-Identifier: MIT
"""
Password reuse detection.

Entries are partitioned by exact password value through a single hash index.
The index lives only for the duration of the call and is never logged.
"""
from __future__ import annotations

from typing import Dict, List, Sequence

from ..core.entries import AccountKey, Entry, ReuseGroup

MIN_GROUP_SIZE = 2


def find_reuse_groups(entries: Sequence[Entry]) -> List[ReuseGroup]:
    """
    Group accounts that share an exact password.

    Matching is case-sensitive with no trimming. Members keep first-seen order.
    Groups are sorted by size, largest first; groups of equal size stay in
    the order their password was first seen.

    Args:
        entries: Normalized entries in analysis order

    Returns:
        One ReuseGroup per password used by two or more entries
    """
    index: Dict[str, List[AccountKey]] = {}
    for entry in entries:
        index.setdefault(entry.password, []).append(entry.key)

    groups = [
        ReuseGroup(count=len(members), sites=tuple(members))
        for members in index.values()
        if len(members) >= MIN_GROUP_SIZE
    ]
    groups.sort(key=lambda group: group.count, reverse=True)
    return groups
