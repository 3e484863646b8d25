"""Pure helpers shared by the reconciliation engine."""

from __future__ import annotations

from collections.abc import Iterable

from populate_boards.contracts.project import FieldOption


def sanitize_name(name: str, delimiter: str, use_delimiter: bool) -> str:
    """Strip a leading ordering prefix from *name*.

    ``"01-Backlog"`` becomes ``"Backlog"`` with delimiter ``"-"``. Only the
    first segment is removed; the rest is rejoined with *delimiter*, so
    ``"01-In-Progress"`` becomes ``"In-Progress"``. Names without the
    delimiter, or calls with sanitization disabled, return *name* unchanged.
    """
    if not use_delimiter or not delimiter:
        return name
    parts = name.split(delimiter)
    if len(parts) == 1:
        return name
    return delimiter.join(parts[1:])


def resolve_option_id(options: Iterable[FieldOption], name: str) -> str | None:
    """Return the id of the first option named exactly *name*, or None."""
    for option in options:
        if option.name == name:
            return option.id
    return None
