"""Column derivation from local card content."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from populate_boards.boards.loader import list_column_dirs
from populate_boards.engine.utils import sanitize_name

logger = logging.getLogger(__name__)


def derive_columns(
    content_groups: Iterable[str],
    cards_path: Path,
    *,
    delimiter: str,
    use_delimiter: bool,
) -> list[str]:
    """Compute the board's column names from its content groups.

    Raw subdirectory names from every group are concatenated and sorted, then
    sanitized; duplicates after sanitization keep their first position.

    Raises:
        ContentPathError: If a content group directory is missing or unreadable.
    """
    raw_names: list[str] = []
    for group in content_groups:
        raw_names.extend(list_column_dirs(cards_path, group))

    columns = dict.fromkeys(sanitize_name(name, delimiter, use_delimiter) for name in sorted(raw_names))
    logger.debug("Derived %d column(s) from %d raw name(s)", len(columns), len(raw_names))
    return list(columns)
