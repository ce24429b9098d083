"""Test version information."""

import importlib.metadata
import re

import pytest

from pwcheck import __version__


def test_version_is_semver():
    """__version__ follows major.minor.patch."""
    assert re.match(r"^\d+\.\d+\.\d+(?:[-.+][0-9A-Za-z.]+)?$", __version__)


def test_version_matches_package_metadata():
    """An installed distribution reports the same version."""
    try:
        installed = importlib.metadata.version("pwcheck")
    except importlib.metadata.PackageNotFoundError:
        pytest.skip("pwcheck is not installed")
    assert __version__ == installed
