from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from demonlist.core.content import ContentRepository
from demonlist.core.levels import Editor, Failed, Level, Loaded, Slot

logger = logging.getLogger(__name__)

LIST_LOAD_ERROR = "Failed to load list. Retry in a few minutes or notify list staff."
EDITORS_LOAD_ERROR = "Failed to load list editors."


def level_load_error(token: str) -> str:
    return f"Failed to load level. ({token}.json)"


class ListSession:
    """Filter and selection state for the ranked list.

    The full list is fixed at construction and its order defines every rank.
    ``selected_index`` points into the *filtered* view, so the filtered view,
    the selected level and its rank are recomputed from the current state on
    every call rather than cached.
    """

    def __init__(
        self,
        slots: Sequence[Slot],
        editors: Optional[List[Editor]] = None,
        errors: Optional[List[str]] = None,
        list_loaded: bool = True,
    ) -> None:
        """Create a session over ``slots``; ``editors`` is None when the roster failed to load."""
        self._slots: tuple[Slot, ...] = tuple(slots)
        self._list_loaded = list_loaded
        self._editors = editors
        self._errors: List[str] = list(errors or [])
        self._query = ""
        self._selected_index = 0

    @property
    def slots(self) -> tuple[Slot, ...]:
        """The full list in rank order."""
        return self._slots

    @property
    def editors(self) -> Optional[List[Editor]]:
        return self._editors

    @property
    def errors(self) -> List[str]:
        """Accumulated load errors, in the order they were recorded."""
        return list(self._errors)

    @property
    def query(self) -> str:
        return self._query

    @property
    def selected_index(self) -> int:
        """Position of the selection within the filtered view (0-based)."""
        return self._selected_index

    @property
    def list_loaded(self) -> bool:
        """False when the list itself failed to load; nothing else is shown then."""
        return self._list_loaded

    def filtered_view(self) -> List[Slot]:
        """Slots matching the query, in rank order; the whole list when the query is empty."""
        if not self._query:
            return list(self._slots)
        needle = self._query.lower()
        return [
            slot
            for slot in self._slots
            if isinstance(slot, Loaded) and needle in slot.level.name.lower()
        ]

    def set_query(self, query: str) -> None:
        """Replace the query and move the selection back to the first row."""
        self._query = query
        self._selected_index = 0

    def select(self, index: int) -> None:
        if index < 0:
            raise ValueError(f"selection index must be >= 0, got {index}")
        self._selected_index = index

    def selected_level(self) -> Optional[Level]:
        """The level under the selection, or None if the row is missing or failed."""
        view = self.filtered_view()
        if self._selected_index >= len(view):
            return None
        slot = view[self._selected_index]
        if isinstance(slot, Loaded):
            return slot.level
        return None

    def original_rank_of(self, level: Level) -> int:
        """Absolute 1-based rank of ``level`` in the full list.

        A level that cannot be found yields ``selected_index + 1``. That value
        is only an approximation and is logged as such.
        """
        for position, slot in enumerate(self._slots):
            if isinstance(slot, Loaded) and slot.level.id == level.id:
                return position + 1
        logger.warning(
            "Level %r (id=%r) not in the full list; approximating rank as %d",
            level.name,
            level.id,
            self._selected_index + 1,
        )
        return self._selected_index + 1

    def rank_of_slot(self, slot: Slot) -> int:
        """Absolute rank of a row from the filtered view."""
        if isinstance(slot, Loaded):
            return self.original_rank_of(slot.level)
        for position, candidate in enumerate(self._slots):
            if candidate is slot:
                return position + 1
        return self._selected_index + 1

    def selected_rank(self) -> int:
        level = self.selected_level()
        if level is None:
            return self._selected_index + 1
        return self.original_rank_of(level)


def load_session(content: ContentRepository) -> ListSession:
    """Run the one-time startup load: the list first, then the editors.

    A missing list is fatal to the page and produces a single error. Failed
    level slots and a missing roster each add an error but keep the rest.
    """
    slots = content.fetch_list()
    if slots is None:
        return ListSession([], editors=None, errors=[LIST_LOAD_ERROR], list_loaded=False)

    errors = [level_load_error(slot.token) for slot in slots if isinstance(slot, Failed)]
    editors = content.fetch_editors()
    if editors is None:
        errors.append(EDITORS_LOAD_ERROR)

    if errors:
        logger.warning("List loaded with %d error(s)", len(errors))
    return ListSession(slots, editors=editors, errors=errors)
