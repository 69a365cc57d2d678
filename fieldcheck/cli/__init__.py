"""Command line interface for fieldcheck."""

from .main import build_parser, main, run_command

__all__ = ["build_parser", "main", "run_command"]
