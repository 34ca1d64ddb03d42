# landing_builder/domain/editor.py
"""
Editing session state.

One EditorSession per open editor: it owns the active document, its undo
history and the selected section. Every edit runs one document operation
to completion and records the result; nothing here is shared between
sessions.
"""
from typing import Any, Callable, Mapping, Optional

from landing_builder.domain import document as ops
from landing_builder.domain.document import APPEND, Document
from landing_builder.domain.history import HISTORY_LIMIT, HistoryManager
from landing_builder.domain.sections import IdFactory


class EditorSession:
    def __init__(
        self,
        document: Document,
        *,
        id_factory: Optional[IdFactory] = None,
        history_limit: int = HISTORY_LIMIT,
    ):
        self.id_factory = id_factory
        self.history = HistoryManager(document, limit=history_limit)
        self.selected_section_id: Optional[str] = None
        self.closed = False
        self._request_token = 0

    @property
    def document(self) -> Document:
        return self.history.current

    # ------------------------
    # Recording edits
    # ------------------------

    def _apply(self, operation: Callable[..., Document], *args) -> Document:
        current = self.document
        updated = operation(current, *args)
        if updated is not current:
            self.history.push(updated)
        return updated

    def update_section(self, section_id: str, partial: Mapping[str, Any]) -> Document:
        return self._apply(ops.update_section, section_id, partial)

    def move_section(self, from_index: int, to_index: int) -> Document:
        return self._apply(ops.move_section, from_index, to_index)

    def add_section(self, section_type: str, after_index: int = APPEND) -> str:
        """Add a section, select it and return its id."""
        updated, new_id = ops.add_section(
            self.document, section_type, after_index, id_factory=self.id_factory
        )
        self.history.push(updated)
        self.selected_section_id = new_id
        return new_id

    def delete_section(self, section_id: str) -> bool:
        """
        Delete a section. Returns True when the deleted section was selected,
        in which case the selection has been cleared.
        """
        self._apply(ops.delete_section, section_id)
        if self.selected_section_id == section_id:
            self.selected_section_id = None
            return True
        return False

    def duplicate_section(self, section_id: str) -> Document:
        return self._apply(ops.duplicate_section, section_id, self.id_factory)

    def toggle_visibility(self, section_id: str) -> Document:
        return self._apply(ops.toggle_visibility, section_id)

    def update_global_style(self, key: str, value: Any) -> Document:
        return self._apply(ops.update_global_style, key, value)

    def apply_color_preset(self, preset_name: str) -> Document:
        return self._apply(ops.apply_color_preset, preset_name)

    def update_meta(self, partial: Mapping[str, Any]) -> Document:
        return self._apply(ops.update_meta, partial)

    def update_social_links(self, partial: Mapping[str, Any]) -> Document:
        return self._apply(ops.update_social_links, partial)

    def undo(self) -> Optional[Document]:
        document = self.history.undo()
        self._drop_stale_selection()
        return document

    def redo(self) -> Optional[Document]:
        document = self.history.redo()
        self._drop_stale_selection()
        return document

    def select(self, section_id: Optional[str]) -> None:
        if section_id is not None and self.document.find_section(section_id) is None:
            section_id = None
        self.selected_section_id = section_id

    def _drop_stale_selection(self) -> None:
        if self.selected_section_id and self.document.find_section(self.selected_section_id) is None:
            self.selected_section_id = None

    # ------------------------
    # Asynchronous results
    # ------------------------

    def begin_request(self) -> int:
        """
        Start a collaborator call (generation, load). Only the most recent
        request's result may be applied.
        """
        self._request_token += 1
        return self._request_token

    def is_current(self, token: int) -> bool:
        return not self.closed and token == self._request_token

    def apply_result(self, token: int, document: Document) -> bool:
        """
        Replace the active document with a collaborator's result, unless a
        newer request superseded it or the session was closed. The replaced
        document stays reachable through undo.
        """
        if not self.is_current(token):
            return False
        self.history.push(document)
        self._drop_stale_selection()
        return True

    def close(self) -> None:
        self.closed = True
