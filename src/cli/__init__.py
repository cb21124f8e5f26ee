"""Hoist command line interface."""

from hoist import __version__

__all__ = ["__version__"]
