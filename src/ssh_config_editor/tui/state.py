"""Modal editor state for the host browser.

The state machine owns the host list. It knows nothing about Textual: the
app feeds it key names (Textual's spelling) and renders whatever mode it
ends up in. Saving and deleting call the ``persist`` callable with the
full list.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional

from ..core.model import EDITABLE_FIELDS, HostConfig
from ..core.parser import filter_indices

logger = logging.getLogger(__name__)

Persist = Callable[[List[HostConfig]], None]

SAVED_MSG = "Changes saved! Press any key to continue."
SAVE_ERROR_MSG = "Error saving SSH config! Press any key."
DELETE_PROMPT = "Delete this host? (y/n)"
DELETED_MSG = "Host deleted! Press any key."
DELETE_ERROR_MSG = "Error saving after delete! Press any key."

QUIT_KEYS = ("q", "ctrl+c")
NEXT_FIELD_KEYS = ("tab", "down")
PREV_FIELD_KEYS = ("shift+tab", "up")
ERASE_KEYS = ("backspace", "delete")


class Mode(Enum):
    BROWSING = "browsing"
    VIEWING = "viewing"
    EDITING = "editing"
    CONFIRM_SAVE = "confirm_save"
    CONFIRM_DELETE = "confirm_delete"
    DELETED = "deleted"


class Outcome(Enum):
    HANDLED = "handled"
    IGNORED = "ignored"
    QUIT = "quit"


class EditorState:
    def __init__(self, hosts: List[HostConfig], persist: Persist, search: str = ""):
        self.hosts = hosts
        self.persist = persist
        self.search = search
        self.visible: List[int] = filter_indices(hosts, search)
        self.mode = Mode.BROWSING
        self.selected: Optional[HostConfig] = None
        self.selected_index: Optional[int] = None
        self.edit_buffer: Optional[HostConfig] = None
        self.edit_field = 0
        self.message = ""

    def visible_hosts(self) -> List[HostConfig]:
        return [self.hosts[i] for i in self.visible]

    def handle_key(self, key: str, character: Optional[str] = None,
                   highlighted: Optional[int] = None) -> Outcome:
        handler = {
            Mode.BROWSING: self._on_browsing,
            Mode.VIEWING: self._on_viewing,
            Mode.EDITING: self._on_editing,
            Mode.CONFIRM_SAVE: self._on_acknowledge,
            Mode.CONFIRM_DELETE: self._on_confirm_delete,
            Mode.DELETED: self._on_acknowledge,
        }[self.mode]
        return handler(key, character, highlighted)

    # Browsing

    def select(self, row: int) -> bool:
        """Open the detail view for a visible row."""
        if not 0 <= row < len(self.visible):
            return False
        self.selected_index = self.visible[row]
        self.selected = self.hosts[self.selected_index].copy()
        self.mode = Mode.VIEWING
        return True

    def _on_browsing(self, key, character, highlighted) -> Outcome:
        if key in QUIT_KEYS:
            return Outcome.QUIT
        if key == "enter" and highlighted is not None and self.select(highlighted):
            return Outcome.HANDLED
        return Outcome.IGNORED

    # Viewing

    def _on_viewing(self, key, character, highlighted) -> Outcome:
        if key == "e" and self.selected is not None:
            self.edit_buffer = self.selected.copy()
            self.edit_field = 0
            self.mode = Mode.EDITING
        elif key == "d" and self.selected is not None:
            self.message = DELETE_PROMPT
            self.mode = Mode.CONFIRM_DELETE
        else:
            self._back_to_browsing()
        return Outcome.HANDLED

    # Editing

    def _on_editing(self, key, character, highlighted) -> Outcome:
        n = len(EDITABLE_FIELDS)
        if key in NEXT_FIELD_KEYS:
            self.edit_field = (self.edit_field + 1) % n
        elif key in PREV_FIELD_KEYS:
            self.edit_field = (self.edit_field - 1) % n
        elif key == "escape":
            self.edit_buffer = None
            self.mode = Mode.VIEWING
        elif key == "enter":
            self._save_edit()
        elif key in ERASE_KEYS:
            value = self.edit_buffer.get_field(self.edit_field)
            if value:
                self.edit_buffer.set_field(self.edit_field, value[:-1])
        elif character and len(character) == 1 and character.isprintable():
            value = self.edit_buffer.get_field(self.edit_field)
            self.edit_buffer.set_field(self.edit_field, value + character)
        return Outcome.HANDLED

    def _save_edit(self) -> None:
        self.edit_buffer.normalize()
        if not self.edit_buffer.host:
            # Aliases are never empty; a bare "Host" line does not parse.
            logger.warning("Empty alias, edit not applied")
            self.message = SAVE_ERROR_MSG
        elif self._index_valid():
            self.hosts[self.selected_index] = self.edit_buffer
            self.selected = self.edit_buffer.copy()
            self.message = SAVED_MSG if self._write() else SAVE_ERROR_MSG
        else:
            logger.warning("Selected index %s out of range, edit not applied", self.selected_index)
            self.message = SAVE_ERROR_MSG
        self.edit_buffer = None
        self._refresh_visible()
        self.mode = Mode.CONFIRM_SAVE

    # Deleting

    def _on_confirm_delete(self, key, character, highlighted) -> Outcome:
        if key == "y":
            self._delete_selected()
        elif key == "n":
            self.mode = Mode.VIEWING
        return Outcome.HANDLED

    def _delete_selected(self) -> None:
        if self._index_valid():
            removed = self.hosts.pop(self.selected_index)
            logger.debug("Deleted host %s", removed.host)
            self.message = DELETED_MSG if self._write() else DELETE_ERROR_MSG
        else:
            logger.warning("Selected index %s out of range, nothing deleted", self.selected_index)
            self.message = DELETE_ERROR_MSG
        self._refresh_visible()
        self.mode = Mode.DELETED

    # Shared

    def _on_acknowledge(self, key, character, highlighted) -> Outcome:
        self._back_to_browsing()
        return Outcome.HANDLED

    def _back_to_browsing(self) -> None:
        self.selected = None
        self.selected_index = None
        self.edit_buffer = None
        self.mode = Mode.BROWSING

    def _index_valid(self) -> bool:
        return self.selected_index is not None and 0 <= self.selected_index < len(self.hosts)

    def _refresh_visible(self) -> None:
        self.visible = filter_indices(self.hosts, self.search)

    def _write(self) -> bool:
        try:
            self.persist(list(self.hosts))
        except OSError as exc:
            logger.warning("Saving SSH config failed: %s", exc)
            return False
        return True
