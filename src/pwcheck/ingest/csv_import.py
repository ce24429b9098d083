# SPDX-License-Identifier: MIT
"""
Credential export import.

Parses a password-manager CSV export (``name,url,username,password,note``)
into normalized entries. Rows without a password are dropped, and rows whose
URL points at a loopback or private-network host can optionally be excluded.
"""
from __future__ import annotations

import csv
import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from ..core.entries import AccountKey, Entry
from ..core.exceptions import PwcheckInputError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("name", "url", "username", "password", "note")

# the note column is required in the header but not kept
KEPT_COLUMNS = ("name", "url", "username", "password")

UNKNOWN_SITE = "(unknown)"

DEV_URL_RE = re.compile(
    r"^https?://("
    r"localhost\b"
    r"|127\.0\.0\.1\b"
    r"|0\.0\.0\.0\b"
    r"|192\.168\."
    r"|10\."
    r"|172\.(1[6-9]|2\d|3[0-1])\."
    r")",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ExportRow:
    """One trimmed CSV row."""

    name: str
    url: str
    username: str
    password: str

    @property
    def site(self) -> str:
        return self.name or self.url or UNKNOWN_SITE


@dataclass(frozen=True)
class NormalizedImport:
    """The entries fed to analysis and each account's URL."""

    entries: List[Entry]
    urls: Dict[AccountKey, str]


def is_dev_url(url: str) -> bool:
    """True when ``url`` targets localhost, 0.0.0.0 or a private IPv4 range."""
    return bool(DEV_URL_RE.match(url))


def parse_csv(text: str, source: Optional[str] = None) -> List[ExportRow]:
    """
    Parse CSV text into trimmed rows.

    Args:
        text: CSV document with a header row
        source: Name of the input, used in error messages

    Returns:
        List of ExportRow in file order

    Raises:
        PwcheckInputError: If the CSV is malformed or required columns are missing
    """
    reader = csv.DictReader(io.StringIO(text))
    try:
        raw_fields = reader.fieldnames or []
        fields = [field.strip().lower() for field in raw_fields]
        missing = [column for column in REQUIRED_COLUMNS if column not in fields]
        if missing:
            raise PwcheckInputError(
                f"Missing required columns: {', '.join(missing)}. "
                f"Found: {', '.join(fields)}",
                source=source,
            )
        reader.fieldnames = fields

        rows = []
        for record in reader:
            if not any((value or "").strip() for value in _cells(record)):
                continue
            rows.append(
                ExportRow(**{column: _cell(record, column) for column in KEPT_COLUMNS})
            )
    except csv.Error as e:
        raise PwcheckInputError(f"Malformed CSV: {e}", source=source)

    return rows


def _cells(record: Dict[str, object]) -> List[str]:
    values = []
    for value in record.values():
        if isinstance(value, list):
            values.extend(value)
        elif value is not None:
            values.append(value)
    return values


def _cell(record: Dict[str, object], column: str) -> str:
    value = record.get(column)
    return value.strip() if isinstance(value, str) else ""


def normalize_rows(rows: List[ExportRow], ignore_dev_urls: bool = True) -> NormalizedImport:
    """
    Turn parsed rows into analysis entries.

    Args:
        rows: Parsed export rows
        ignore_dev_urls: Drop rows whose URL is a dev/local address

    Returns:
        NormalizedImport holding the kept entries and a key-to-URL map
    """
    entries = []
    urls: Dict[AccountKey, str] = {}
    dropped_empty = 0
    dropped_dev = 0

    for row in rows:
        if not row.password:
            dropped_empty += 1
            continue
        if ignore_dev_urls and row.url and is_dev_url(row.url):
            dropped_dev += 1
            continue

        entry = Entry(site=row.site, username=row.username, password=row.password)
        entries.append(entry)
        if row.url:
            urls.setdefault(entry.key, row.url)

    if dropped_empty:
        logger.info("Skipped %d rows without a password", dropped_empty)
    if dropped_dev:
        logger.info("Skipped %d rows with a dev/local URL", dropped_dev)

    return NormalizedImport(entries=entries, urls=urls)


def load_export(path: str, ignore_dev_urls: bool = True) -> NormalizedImport:
    """
    Read and normalize a CSV export file.

    Raises:
        PwcheckInputError: If the file cannot be read or is not a valid export
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise PwcheckInputError(f"Failed to read file: {e}", source=str(file_path))

    rows = parse_csv(text, source=str(file_path))
    return normalize_rows(rows, ignore_dev_urls=ignore_dev_urls)
