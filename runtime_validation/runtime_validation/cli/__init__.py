"""Command line interface for document validation."""

from .run_validate import main

__all__ = ['main']
