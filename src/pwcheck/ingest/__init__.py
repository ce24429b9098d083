# SPDX-License-Identifier: MIT
"""Credential export parsing and normalization."""

from .csv_import import (
    ExportRow,
    NormalizedImport,
    is_dev_url,
    load_export,
    normalize_rows,
    parse_csv,
)

__all__ = [
    "ExportRow",
    "NormalizedImport",
    "is_dev_url",
    "load_export",
    "normalize_rows",
    "parse_csv",
]
