"""Board manifest and card content loading."""

from populate_boards.boards.loader import list_column_dirs, load_boards, load_cards

__all__ = ["list_column_dirs", "load_boards", "load_cards"]
