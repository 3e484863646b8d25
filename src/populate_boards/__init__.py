"""Public API surface for populate-boards."""

from populate_boards.auth import create_token_resolver
from populate_boards.boards import load_boards, load_cards
from populate_boards.config import load_config
from populate_boards.contracts.board import BoardDefinition, CardDefinition
from populate_boards.contracts.config import ConfigOverrides, PopulateConfig, merge_config
from populate_boards.contracts.exceptions import (
    AuthenticationError,
    BoardLoadError,
    ConfigError,
    ContentPathError,
    PopulateBoardsError,
    ProjectNotFoundError,
    ProviderError,
)
from populate_boards.contracts.provider import BoardProvider
from populate_boards.contracts.result import BoardResult, DrainOutcome, ReconcileResult
from populate_boards.engine import BoardReconciler
from populate_boards.providers import create_provider
from populate_boards.sdk import PopulateBoards

__all__ = [
    "AuthenticationError",
    "BoardDefinition",
    "BoardLoadError",
    "BoardProvider",
    "BoardReconciler",
    "BoardResult",
    "CardDefinition",
    "ConfigError",
    "ConfigOverrides",
    "ContentPathError",
    "DrainOutcome",
    "PopulateBoards",
    "PopulateBoardsError",
    "PopulateConfig",
    "ProjectNotFoundError",
    "ProviderError",
    "ReconcileResult",
    "create_provider",
    "create_token_resolver",
    "load_boards",
    "load_cards",
    "load_config",
    "merge_config",
]
