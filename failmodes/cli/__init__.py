# failmodes/cli/__init__.py
"""Console entry point for the failmodes demonstrations."""

from .main import main

__all__ = ["main"]
