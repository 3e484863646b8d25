"""Command-line interface for populate-boards."""

from populate_boards.cli.app import format_summary, main
from populate_boards.cli.parser import build_parser

__all__ = ["build_parser", "format_summary", "main"]
