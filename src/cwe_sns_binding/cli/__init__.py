"""Command-line interface package for applying ``cweSns`` bindings."""

from .app import build_parser, main, run

__all__ = ["build_parser", "main", "run"]
