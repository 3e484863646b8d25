"""Board reconciliation pipeline."""

from __future__ import annotations

import logging

from populate_boards.boards.loader import load_cards
from populate_boards.contracts.board import BoardDefinition, CardDefinition
from populate_boards.contracts.config import PopulateConfig
from populate_boards.contracts.exceptions import PopulateBoardsError, ProjectNotFoundError, ProviderError
from populate_boards.contracts.project import ClassificationField
from populate_boards.contracts.provider import BoardProvider
from populate_boards.contracts.result import BoardResult, DrainOutcome, ReconcileResult
from populate_boards.engine.columns import derive_columns
from populate_boards.engine.drain import ProjectDrainer
from populate_boards.engine.fields import FieldRebuilder
from populate_boards.engine.progress import NullReconcileProgress, ReconcileProgress
from populate_boards.engine.utils import resolve_option_id, sanitize_name

logger = logging.getLogger(__name__)


class BoardReconciler:
    """Drains and rebuilds each board so it matches its local definition.

    Boards are handled one after another. A failure inside one board's
    pipeline abandons that board only; the remaining boards still run. In
    development mode only lookups and local parsing happen, and no mutation
    is sent to the provider.
    """

    def __init__(
        self,
        provider: BoardProvider,
        config: PopulateConfig,
        *,
        progress: ReconcileProgress | None = None,
    ) -> None:
        self._provider = provider
        self._config = config
        self._progress: ReconcileProgress = progress or NullReconcileProgress()
        self._drainer = ProjectDrainer(provider)
        self._rebuilder = FieldRebuilder(provider, field_name=config.column_name)

    async def run(self, boards: list[BoardDefinition]) -> ReconcileResult:
        result = ReconcileResult(development_mode=self._config.development_mode)
        self._progress.boards_started(len(boards))
        for board in boards:
            result.boards.append(await self.reconcile_board(board))
        return result

    async def reconcile_board(self, board: BoardDefinition) -> BoardResult:
        result = BoardResult(board=board.name)
        logger.info("Reconciling board %r (%s #%d)", board.name, board.owner, board.board_id)
        try:
            await self._reconcile(board, result)
        except PopulateBoardsError as exc:
            logger.error("Board %r abandoned: %s", board.name, exc)
            result.success = False
            result.error = str(exc)
        self._progress.board_finished(result)
        return result

    async def _reconcile(self, board: BoardDefinition, result: BoardResult) -> None:
        mutating = not self._config.development_mode

        lookup = await self._provider.fetch_project(board.owner, board.board_id)
        if lookup.project is None:
            raise ProjectNotFoundError(board.owner, board.board_id)
        project_id = lookup.project.id
        field = await self._fetch_field(project_id)

        if mutating:
            result.drain = await self._drainer.drain(project_id)
            await self._provider.update_project_metadata(project_id, board.name, board.description)
        else:
            result.drain = DrainOutcome.SKIPPED

        result.columns = derive_columns(
            board.content,
            self._config.cards_path,
            delimiter=self._config.delimiter,
            use_delimiter=self._config.use_delimiter,
        )
        logger.info("Board %r columns: %s", board.name, ", ".join(result.columns) or "(none)")

        if mutating:
            new_field_id = await self._rebuilder.rebuild(project_id, field.id if field else None, result.columns)
            field = await self._fetch_field(project_id)
            if field is None:
                logger.warning("Rebuilt field %s not visible yet; cards will be left without a column", new_field_id)
                field = ClassificationField(id=new_field_id, name=self._config.column_name)

        cards: list[CardDefinition] = []
        for group in board.content:
            cards.extend(load_cards(self._config.cards_path, group))

        self._progress.cards_started(board.name, len(cards))
        for card in cards:
            if mutating and field is not None:
                await self._insert_card(project_id, field, card, result)
            else:
                logger.info("[development] card %r in column %r", card.title, card.column)
            self._progress.card_done(board.name)

    async def _insert_card(
        self,
        project_id: str,
        field: ClassificationField,
        card: CardDefinition,
        result: BoardResult,
    ) -> None:
        title = self._sanitize(card.title)
        item = await self._provider.create_draft_item(project_id, title, card.body)
        result.cards_created += 1

        column = self._sanitize(card.column)
        option_id = resolve_option_id(field.options, column)
        if option_id is None:
            logger.info("No option %r on field %r; card %r left without a column", column, field.name, title)
            return

        try:
            await self._provider.set_item_field_value(project_id, item.id, field.id, option_id)
        except ProviderError as exc:
            logger.warning("Setting column %r on card %r failed: %s", column, title, exc)
            return
        result.statuses_set += 1

    async def _fetch_field(self, project_id: str) -> ClassificationField | None:
        try:
            lookup = await self._provider.fetch_field(project_id, self._config.column_name)
        except ProviderError as exc:
            logger.warning("Looking up field %r failed, treating as absent: %s", self._config.column_name, exc)
            return None
        return lookup.field

    def _sanitize(self, name: str) -> str:
        return sanitize_name(name, self._config.delimiter, self._config.use_delimiter)
