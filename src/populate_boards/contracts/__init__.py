"""Public contracts for populate-boards."""

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
from populate_boards.contracts.project import (
    ClassificationField,
    FieldLookupResult,
    FieldOption,
    ItemsPageResult,
    ProjectLookupResult,
    RemoteItem,
    RemoteProject,
)
from populate_boards.contracts.provider import BoardProvider
from populate_boards.contracts.result import BoardResult, DrainOutcome, ReconcileResult

__all__ = [
    "AuthenticationError",
    "BoardDefinition",
    "BoardLoadError",
    "BoardProvider",
    "BoardResult",
    "CardDefinition",
    "ClassificationField",
    "ConfigError",
    "ConfigOverrides",
    "ContentPathError",
    "DrainOutcome",
    "FieldLookupResult",
    "FieldOption",
    "ItemsPageResult",
    "PopulateBoardsError",
    "PopulateConfig",
    "ProjectLookupResult",
    "ProjectNotFoundError",
    "ProviderError",
    "ReconcileResult",
    "RemoteItem",
    "RemoteProject",
    "merge_config",
]
