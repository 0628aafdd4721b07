"""Docs Site App"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("docs-site")
except PackageNotFoundError:
    __version__ = "dev"
