"""pwcheck package metadata."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pwcheck")
except PackageNotFoundError:
    __version__ = "0.1.0"
