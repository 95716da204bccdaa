"""Command-line application package."""

from .main import main

__all__ = ["main"]
