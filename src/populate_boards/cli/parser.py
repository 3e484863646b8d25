"""Argument parser for the populate-boards CLI."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _package_version() -> str:
    try:
        return version("populate-boards")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Every option defaults to ``None`` so that unset flags fall back to the
    action inputs found in the environment, then to the built-in defaults.
    """
    parser = argparse.ArgumentParser(
        prog="populate-boards",
        description="Drain and rebuild GitHub project boards from local card folders.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--cards-path", type=Path, help="Root directory of card content")
    parser.add_argument("--boards", type=Path, help="Path to the boards manifest (YAML)")
    parser.add_argument("--delimiter", help="Delimiter separating an ordering prefix from a name")
    parser.add_argument(
        "--use-delimiter",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Strip ordering prefixes from column and card names",
    )
    parser.add_argument(
        "--development-mode",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only perform lookups and local parsing; make no changes",
    )
    parser.add_argument("--column-name", help="Name of the single-select field holding card columns")
    parser.add_argument(
        "--organization",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Board owners are organizations (--no-organization for users)",
    )
    parser.add_argument("--token", help="GitHub token (defaults to the INPUT_TOKEN action input)")
    parser.add_argument("--progress", action="store_true", help="Show a live progress display")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser
