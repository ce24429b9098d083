# SPDX-License-Identifier: MIT
"""
Display masking utilities for pwcheck.

Demo mode hides domains, usernames and URLs so a report can be shown in
screenshots. Masking is applied to rendered output only; Entry and Report
values are never rewritten.
"""

from __future__ import annotations
from typing import Dict, Any
from urllib.parse import urlsplit

from .entries import domain_label


def mask_domain(domain: str) -> str:
    """
    Mask a domain label keeping only its top-level part.

    Args:
        domain: Host name or site label

    Returns:
        ``site.<tld>``, or ``site.example`` when there is no dot
    """
    parts = domain.split(".")
    if len(parts) <= 1:
        return "site.example"
    return f"site.{parts[-1]}"


def mask_url(url: str) -> str:
    """
    Mask a URL keeping its scheme and a masked host.

    Args:
        url: Absolute URL

    Returns:
        ``<scheme>://<masked host>/…``
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return "https://site.example/…"
    if not parts.scheme or not parts.hostname:
        return "https://site.example/…"
    return f"{parts.scheme}://{mask_domain(parts.hostname)}/…"


def mask_username(username: str) -> str:
    """Mask a username, keeping the mail domain of e-mail style names."""
    if not username:
        return ""
    at = username.find("@")
    if at >= 0:
        domain = username[at + 1:] or "example.com"
        return f"user@{domain}"
    return "user"


def mask_result_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """
    Mask the display fields of a serialized result row.

    Args:
        row: Dictionary produced by ``ResultRow.to_dict``

    Returns:
        Copy of the row with domain, site, username and URL masked
    """
    masked = row.copy()
    masked["domain"] = mask_domain(row.get("domain", ""))
    masked["site"] = mask_domain(row.get("domain", ""))
    masked["username"] = mask_username(row.get("username", ""))
    if row.get("url"):
        masked["url"] = mask_url(row["url"])
    if "key" in masked:
        masked["key"] = {"site": masked["site"], "username": masked["username"]}
    return masked


def mask_site(site: str) -> str:
    """Mask a site name or URL through its domain label, dropping any path."""
    return mask_domain(domain_label(site))


def mask_report(report: Dict[str, Any]) -> Dict[str, Any]:
    """
    Mask the account fields of a serialized report.

    Args:
        report: Dictionary produced by ``Report.to_dict``

    Returns:
        Copy of the report with every finding and reuse group member masked
    """
    masked = report.copy()
    masked["weakFindings"] = [
        dict(finding, site=mask_site(finding["site"]), username=mask_username(finding["username"]))
        for finding in report.get("weakFindings", [])
    ]
    masked["reuseGroups"] = [
        dict(group, sites=[_mask_account(member) for member in group["sites"]])
        for group in report.get("reuseGroups", [])
    ]
    return masked


def _mask_account(account: Dict[str, str]) -> Dict[str, str]:
    return {"site": mask_site(account["site"]), "username": mask_username(account["username"])}
