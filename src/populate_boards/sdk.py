"""SDK composition root for populate-boards."""

from __future__ import annotations

import logging

from populate_boards.auth import create_token_resolver
from populate_boards.boards import load_boards
from populate_boards.contracts.board import BoardDefinition
from populate_boards.contracts.config import PopulateConfig
from populate_boards.contracts.provider import BoardProvider
from populate_boards.contracts.result import ReconcileResult
from populate_boards.engine import BoardReconciler
from populate_boards.engine.progress import ReconcileProgress
from populate_boards.providers import create_provider

logger = logging.getLogger(__name__)


class PopulateBoards:
    """populate-boards SDK public API."""

    def __init__(
        self,
        *,
        provider: BoardProvider,
        config: PopulateConfig,
        progress: ReconcileProgress | None = None,
    ) -> None:
        self._provider = provider
        self._config = config
        self._progress = progress

    @classmethod
    async def from_config(
        cls,
        config: PopulateConfig,
        *,
        progress: ReconcileProgress | None = None,
    ) -> PopulateBoards:
        """Resolve credentials and build the provider for *config*.

        Raises:
            AuthenticationError: If no usable token can be obtained.
        """
        token = await create_token_resolver(config).resolve()
        return cls(provider=create_provider(config, token=token), config=config, progress=progress)

    async def run(self, boards: list[BoardDefinition] | None = None) -> ReconcileResult:
        """Reconcile *boards*, or every board of the configured manifest."""
        loaded = boards if boards is not None else load_boards(self._config.boards)
        logger.info("Loaded %d board(s) from %s", len(loaded), self._config.boards)
        if self._config.development_mode:
            logger.info("Development mode: no changes will be made")

        async with self._provider:
            return await BoardReconciler(self._provider, self._config, progress=self._progress).run(loaded)
