"""Rebuild of a project's classification field."""

from __future__ import annotations

import logging

from populate_boards.contracts.provider import BoardProvider

logger = logging.getLogger(__name__)


class FieldRebuilder:
    def __init__(self, provider: BoardProvider, *, field_name: str) -> None:
        self._provider = provider
        self._field_name = field_name

    async def rebuild(self, project_id: str, existing_field_id: str | None, columns: list[str]) -> str:
        """Replace the classification field with one offering *columns* as options.

        Deleting the existing field must succeed before the new one is created,
        otherwise the project would end up with two fields of the same name.
        The returned id is new; option ids should be re-fetched before use.
        """
        if existing_field_id:
            logger.info("Deleting field %r (%s)", self._field_name, existing_field_id)
            await self._provider.delete_field(existing_field_id)

        field = await self._provider.create_single_select_field(project_id, self._field_name, columns)
        logger.info("Created field %r with %d option(s)", self._field_name, len(columns))
        return field.id
