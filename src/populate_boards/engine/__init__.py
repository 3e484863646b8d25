"""Reconciliation engine."""

from populate_boards.engine.columns import derive_columns
from populate_boards.engine.drain import MAX_CYCLES, PAGE_SIZE, ProjectDrainer
from populate_boards.engine.engine import BoardReconciler
from populate_boards.engine.fields import FieldRebuilder
from populate_boards.engine.progress import NullReconcileProgress, ReconcileProgress
from populate_boards.engine.utils import resolve_option_id, sanitize_name

__all__ = [
    "MAX_CYCLES",
    "PAGE_SIZE",
    "BoardReconciler",
    "FieldRebuilder",
    "NullReconcileProgress",
    "ProjectDrainer",
    "ReconcileProgress",
    "derive_columns",
    "resolve_option_id",
    "sanitize_name",
]
