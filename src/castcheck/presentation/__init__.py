"""Presentation layer: command line."""

from castcheck.presentation.cli import main

__all__ = ["main"]
