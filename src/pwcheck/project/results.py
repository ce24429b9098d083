# SPDX-License-Identifier: MIT
"""
Live projection of a report into the rows an operator triages.

The static report is computed once per entry sequence. Policy parameters
(minimum length, issue filter, sort order, search text) can change at any
time; every change re-runs this projection from an immutable snapshot:

1. reuse counts are re-keyed by account from the reuse groups
2. the length reason is re-derived against the live minimum length and
   recombined with the cached character-class reasons
3. rows are built, filtered by issue mode and search text, then sorted

Account keys are expected to be unique. When two entries share a
(site, username) key the first entry wins every key-based lookup.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..analyze import analyze
from ..classify.rules import is_length_reason, length_reason
from ..core.entries import AccountKey, Entry, Report, domain_label
from ..core.exceptions import PwcheckConfigError
from ..policy.loader import (
    DEFAULT_MIN_LENGTH,
    ISSUE_MODES,
    SORT_MODES,
    clamp_min_length,
    normalize_issue_mode,
    normalize_sort_mode,
)
from ..risk.score import RiskLevel, calculate_risk_score, get_risk_level
from ..reuse.groups import MIN_GROUP_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionParams:
    """Policy parameters of one projection.

    Modes must be canonical names; use ``create`` to resolve aliases and
    clamp untrusted values.
    """

    min_length: int = DEFAULT_MIN_LENGTH
    issue_mode: str = "all"
    sort_mode: str = "risk"
    search_query: str = ""

    def __post_init__(self):
        if self.issue_mode not in ISSUE_MODES:
            raise PwcheckConfigError(
                f"Invalid issue_mode {self.issue_mode!r}; "
                f"expected one of {', '.join(ISSUE_MODES)}",
                section="issue_mode",
            )
        if self.sort_mode not in SORT_MODES:
            raise PwcheckConfigError(
                f"Invalid sort_mode {self.sort_mode!r}; "
                f"expected one of {', '.join(SORT_MODES)}",
                section="sort_mode",
            )

    @classmethod
    def create(
        cls,
        min_length: Any = DEFAULT_MIN_LENGTH,
        issue_mode: str = "all",
        sort_mode: str = "risk",
        search_query: Optional[str] = "",
    ) -> "ProjectionParams":
        """
        Build parameters from untrusted values.

        ``min_length`` is clamped (or defaulted when not a number); modes are
        validated and issue-mode aliases resolved.

        Raises:
            PwcheckConfigError: If a mode is not recognised
        """
        return cls(
            min_length=clamp_min_length(min_length),
            issue_mode=normalize_issue_mode(issue_mode),
            sort_mode=normalize_sort_mode(sort_mode),
            search_query=search_query or "",
        )

    @classmethod
    def from_policy(cls, config: Mapping[str, Any], search_query: str = "") -> "ProjectionParams":
        """Build parameters from a loaded policy configuration."""
        return cls.create(
            min_length=config.get("min_length", DEFAULT_MIN_LENGTH),
            issue_mode=config.get("issue_mode", "all"),
            sort_mode=config.get("sort_mode", "risk"),
            search_query=search_query,
        )


@dataclass(frozen=True)
class ResultRow:
    """One entry as displayed: reuse, live weakness reasons and risk."""

    key: AccountKey
    site: str
    domain: str
    username: str
    url: Optional[str]
    reuse_count: int
    weak_reasons: Tuple[str, ...]
    risk: RiskLevel

    @property
    def is_weak(self) -> bool:
        return bool(self.weak_reasons)

    def to_dict(self) -> Dict[str, Any]:
        """Convert ResultRow to dictionary format."""
        return {
            "key": self.key.to_dict(),
            "site": self.site,
            "domain": self.domain,
            "username": self.username,
            "url": self.url,
            "reuseCount": self.reuse_count,
            "weakReasons": list(self.weak_reasons),
            "isWeak": self.is_weak,
            "risk": self.risk.value,
        }


def adjust_weak_reasons(
    baseline_reasons: Sequence[str], password: str, min_length: int
) -> Tuple[str, ...]:
    """
    Re-derive the length reason under a live minimum length.

    Any baseline length reason is dropped; a new one is prepended when the
    password is non-empty and shorter than ``min_length``. Character-class
    reasons are kept as they are, in their original order.
    """
    reasons = [reason for reason in baseline_reasons if not is_length_reason(reason)]
    if password and len(password) < min_length:
        reasons.insert(0, length_reason(min_length))
    return tuple(reasons)


def _first_index_by_key(entries: Sequence[Entry]) -> Dict[AccountKey, int]:
    """Map each account key to the position of its first entry."""
    first: Dict[AccountKey, int] = {}
    for index, entry in enumerate(entries):
        first.setdefault(entry.key, index)
    duplicates = len(entries) - len(first)
    if duplicates:
        logger.warning(
            "%d entries share a (site, username) key with an earlier entry; "
            "the first entry is used for lookups",
            duplicates,
        )
    return first


def build_reuse_lookup(report: Report) -> Dict[AccountKey, int]:
    """
    Map every reuse group member to its group size.

    Accounts missing from the lookup have a reuse count of 0. A key listed in
    more than one group keeps the count of the first group in report order.
    """
    lookup: Dict[AccountKey, int] = {}
    for group in report.reuse_groups:
        for member in group.sites:
            lookup.setdefault(member, group.count)
    return lookup


def build_weak_lookup(
    entries: Sequence[Entry], report: Report, min_length: int
) -> Dict[AccountKey, Tuple[str, ...]]:
    """
    Map account keys to their weakness reasons under the live policy.

    Baseline findings supply the cached character-class reasons; only the
    length reason is recomputed. Keys left without reasons are omitted.

    Args:
        entries: The entries the report was built from
        report: Baseline report for ``entries``
        min_length: Live minimum password length

    Returns:
        Dictionary from AccountKey to non-empty reason tuples
    """
    baseline = {finding.index: finding.reasons for finding in report.weak_findings}
    lookup: Dict[AccountKey, Tuple[str, ...]] = {}
    for key, index in _first_index_by_key(entries).items():
        reasons = adjust_weak_reasons(
            baseline.get(index, ()), entries[index].password, min_length
        )
        if reasons:
            lookup[key] = reasons
    return lookup


def _matches_issue_mode(row: ResultRow, issue_mode: str) -> bool:
    if issue_mode == "reuseOnly":
        return row.reuse_count >= MIN_GROUP_SIZE
    if issue_mode == "weakOnly":
        return row.is_weak
    return True


def _matches_query(row: ResultRow, query: str) -> bool:
    haystack = f"{row.domain} {row.site} {row.username} {row.url or ''}".casefold()
    return query in haystack


def _sort_rows(rows: List[ResultRow], sort_mode: str) -> List[ResultRow]:
    # sorted() is stable: ties keep entry order
    if sort_mode == "domain":
        return sorted(rows, key=lambda row: (row.domain.casefold(), row.domain))
    if sort_mode == "reuseCount":
        return sorted(rows, key=lambda row: -row.reuse_count)
    return sorted(
        rows, key=lambda row: -calculate_risk_score(row.reuse_count, row.is_weak)
    )


def project_results(
    entries: Sequence[Entry],
    report: Report,
    params: ProjectionParams,
    urls: Optional[Mapping[AccountKey, str]] = None,
) -> List[ResultRow]:
    """
    Produce the filtered, searched and sorted rows for display.

    Args:
        entries: The entries the report was built from
        report: Baseline report for ``entries``
        params: Live policy parameters
        urls: Optional account URLs, shown and searched when present

    Returns:
        Ordered list of ResultRow
    """
    urls = urls or {}
    reuse_lookup = build_reuse_lookup(report)
    weak_lookup = build_weak_lookup(entries, report, clamp_min_length(params.min_length))
    query = params.search_query.strip().casefold()

    rows = []
    for entry in entries:
        key = entry.key
        reuse_count = reuse_lookup.get(key, 0)
        weak_reasons = weak_lookup.get(key, ())
        row = ResultRow(
            key=key,
            site=entry.site,
            domain=domain_label(entry.site),
            username=entry.username,
            url=urls.get(key) or None,
            reuse_count=reuse_count,
            weak_reasons=weak_reasons,
            risk=get_risk_level(reuse_count, bool(weak_reasons)),
        )

        if not _matches_issue_mode(row, params.issue_mode):
            continue
        if query and not _matches_query(row, query):
            continue
        rows.append(row)

    return _sort_rows(rows, params.sort_mode)


def live_summary(
    entries: Sequence[Entry], report: Report, params: ProjectionParams
) -> Dict[str, int]:
    """
    Headline counts under the live policy.

    ``weak`` counts accounts with reasons after re-evaluation and
    ``reusedAccounts`` counts entries whose reuse count is at least 2.
    """
    reuse_lookup = build_reuse_lookup(report)
    weak_lookup = build_weak_lookup(entries, report, clamp_min_length(params.min_length))
    reused_accounts = sum(
        1 for entry in entries if reuse_lookup.get(entry.key, 0) >= MIN_GROUP_SIZE
    )
    return {
        "total": len(entries),
        "weak": len(weak_lookup),
        "reusedGroups": len(report.reuse_groups),
        "reusedAccounts": reused_accounts,
    }


@dataclass(frozen=True)
class AnalysisSnapshot:
    """
    Every input of a projection, captured together.

    The report is derived from ``entries`` once; changing parameters with
    ``with_params`` keeps that report and re-projects against it.
    """

    entries: Tuple[Entry, ...]
    params: ProjectionParams = ProjectionParams()
    urls: Mapping[AccountKey, str] = field(default_factory=dict)
    report: Optional[Report] = None

    @classmethod
    def build(
        cls,
        entries: Sequence[Entry],
        params: Optional[ProjectionParams] = None,
        urls: Optional[Mapping[AccountKey, str]] = None,
    ) -> "AnalysisSnapshot":
        entries = tuple(entries)
        return cls(
            entries=entries,
            params=params or ProjectionParams(),
            urls=dict(urls or {}),
            report=analyze(entries),
        )

    def with_params(self, **changes: Any) -> "AnalysisSnapshot":
        """Return a snapshot with validated parameter changes applied."""
        current = {
            "min_length": self.params.min_length,
            "issue_mode": self.params.issue_mode,
            "sort_mode": self.params.sort_mode,
            "search_query": self.params.search_query,
        }
        current.update(changes)
        return replace(self, params=ProjectionParams.create(**current))

    def results(self) -> List[ResultRow]:
        return project_results(self.entries, self._report(), self.params, self.urls)

    def summary(self) -> Dict[str, int]:
        return live_summary(self.entries, self._report(), self.params)

    def _report(self) -> Report:
        return self.report if self.report is not None else analyze(self.entries)
