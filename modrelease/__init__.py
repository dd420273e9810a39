"""Prepare and tag coordinated releases of a multi-module Go repository."""

__version__ = "0.1.0"
__all__ = ["release"]