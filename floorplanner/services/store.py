"""Element store with a linear snapshot history for undo/redo."""

from __future__ import annotations
import logging
from typing import Iterable

from pydantic import TypeAdapter

from floorplanner.models import Element
from floorplanner.io.document import FORMAT_VERSION, dump_floorplan, load_floorplan


logger = logging.getLogger(__name__)

MAX_HISTORY_SIZE = 50

_element_adapter = TypeAdapter(Element)


class FloorplanStore:
    """
    Owns the element collection the engine rebuilds from.

    Every mutation replaces the whole collection with a new tuple snapshot
    and pushes it onto the history; undo/redo move through that history.
    Redo entries are dropped by any new mutation.
    """

    def __init__(self, elements: Iterable = (), max_history_size: int = MAX_HISTORY_SIZE) -> None:
        self.max_history_size = max_history_size
        self.elements: tuple = tuple(elements)
        self.history: list[tuple] = [self.elements]
        self.history_index = 0
        self.selected_id: str | None = None

    # -- queries ---------------------------------------------------------

    def get(self, element_id: str):
        for el in self.elements:
            if el.id == element_id:
                return el
        return None

    @property
    def selected(self):
        return self.get(self.selected_id) if self.selected_id else None

    def can_undo(self) -> bool:
        return self.history_index > 0

    def can_redo(self) -> bool:
        return self.history_index < len(self.history) - 1

    # -- mutations -------------------------------------------------------

    def add(self, element) -> None:
        self._commit(self.elements + (element,))

    def update(self, element_id: str, **changes) -> bool:
        """Replace an element with a re-validated copy carrying `changes`.

        Returns False when no element has `element_id`.
        """
        current = self.get(element_id)
        if current is None:
            return False
        data = current.model_dump()
        data.update(changes)
        replacement = _element_adapter.validate_python(data)
        self._commit(tuple(replacement if el.id == element_id else el for el in self.elements))
        return True

    def delete(self, element_id: str) -> bool:
        remaining = tuple(el for el in self.elements if el.id != element_id)
        if len(remaining) == len(self.elements):
            return False
        if self.selected_id == element_id:
            self.selected_id = None
        self._commit(remaining)
        return True

    def replace(self, elements: Iterable) -> None:
        """Swap in a whole new snapshot."""
        self._commit(tuple(elements))

    def select(self, element_id: str | None) -> None:
        self.selected_id = element_id

    def undo(self) -> bool:
        if not self.can_undo():
            return False
        self.history_index -= 1
        self.elements = self.history[self.history_index]
        self.selected_id = None
        return True

    def redo(self) -> bool:
        if not self.can_redo():
            return False
        self.history_index += 1
        self.elements = self.history[self.history_index]
        self.selected_id = None
        return True

    def clear(self) -> None:
        self.elements = ()
        self.history = [self.elements]
        self.history_index = 0
        self.selected_id = None

    # -- persistence -----------------------------------------------------

    def save(self, version: str = FORMAT_VERSION) -> str:
        return dump_floorplan(self.elements, version)

    def load(self, data: str | bytes) -> None:
        """Replace everything with a saved floorplan.

        Raises FloorplanDocumentError and leaves the store untouched when
        the document is rejected.
        """
        doc = load_floorplan(data)
        self.elements = tuple(doc.elements)
        self.history = [self.elements]
        self.history_index = 0
        self.selected_id = None
        logger.info("Loaded floorplan with %d elements", len(self.elements))

    def _commit(self, elements: tuple) -> None:
        self.history = self.history[: self.history_index + 1] + [elements]
        if len(self.history) > self.max_history_size:
            self.history = self.history[-self.max_history_size:]
        self.history_index = len(self.history) - 1
        self.elements = elements
