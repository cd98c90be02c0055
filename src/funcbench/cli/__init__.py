"""Command line interface for funcbench."""

from funcbench.cli.main import main

__all__ = ["main"]
