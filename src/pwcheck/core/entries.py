# SPDX-License-Identifier: MIT
"""Credential entry and report data structures for pwcheck."""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Dict, Any, Tuple
from urllib.parse import urlsplit

_ABSOLUTE_URL_RE = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class AccountKey:
    """Identity of one account: the (site, username) pair."""

    site: str
    username: str

    def to_dict(self) -> Dict[str, str]:
        return {"site": self.site, "username": self.username}


def domain_label(site: str) -> str:
    """Host of an absolute http(s) URL, otherwise the site name unchanged."""
    if _ABSOLUTE_URL_RE.match(site):
        try:
            host = urlsplit(site).hostname
        except ValueError:
            host = None
        if host:
            return host
    return site


@dataclass(frozen=True)
class Entry:
    """A normalized credential record."""

    site: str
    username: str
    password: str = field(repr=False)

    @property
    def key(self) -> AccountKey:
        return AccountKey(self.site, self.username)


@dataclass(frozen=True)
class WeakFinding:
    """One entry that violates at least one strength rule."""

    index: int  # position of the entry in the analysed sequence
    site: str
    username: str
    reasons: Tuple[str, ...]

    @property
    def key(self) -> AccountKey:
        return AccountKey(self.site, self.username)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "site": self.site,
            "username": self.username,
            "reasons": list(self.reasons),
        }


@dataclass(frozen=True)
class ReuseGroup:
    """Accounts sharing one exact password value."""

    count: int
    sites: Tuple[AccountKey, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "sites": [member.to_dict() for member in self.sites],
        }


@dataclass(frozen=True)
class Summary:
    """Headline counts of a report."""

    total: int = 0
    weak: int = 0
    reused_groups: int = 0
    reused_accounts: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "weak": self.weak,
            "reusedGroups": self.reused_groups,
            "reusedAccounts": self.reused_accounts,
        }


@dataclass(frozen=True)
class Report:
    """Static analysis result for one entry sequence."""

    summary: Summary
    weak_findings: Tuple[WeakFinding, ...] = ()
    reuse_groups: Tuple[ReuseGroup, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert Report to the camelCase dictionary schema."""
        return {
            "summary": self.summary.to_dict(),
            "weakFindings": [finding.to_dict() for finding in self.weak_findings],
            "reuseGroups": [group.to_dict() for group in self.reuse_groups],
        }
