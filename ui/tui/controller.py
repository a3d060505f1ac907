"""Key-driven state machine behind the interactive workspace list."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from core.errors import GnavError, InvalidArgumentError
from workspaces.operations import WorkspaceOperations
from world_model.desktop_state import DisplayRow

logger = logging.getLogger("gnav.tui")

HELP_TEXT = "\n".join(
    [
        "Enter: Switch",
        "↑/↓ or j/k: Move",
        "R: Rename",
        "N: New Workspace",
        "Z: Toggle Dynamic",
        "X: Remove",
        "Shift+J/K: Rearrange",
        "G/g: Last/First",
        "Q/Esc: Quit",
    ]
)


class Mode(Enum):
    BROWSING = "browsing"
    EDITING_NAME = "editing_name"
    CREATING_COUNT = "creating_count"
    SHOWING_HELP = "showing_help"
    SHOWING_MESSAGE = "showing_message"


EDIT_MODES = (Mode.EDITING_NAME, Mode.CREATING_COUNT)
MODAL_MODES = (Mode.SHOWING_HELP, Mode.SHOWING_MESSAGE)


@dataclass
class ListState:
    """Everything the view needs to draw the list."""

    mode: Mode = Mode.BROWSING
    rows: list[DisplayRow] = field(default_factory=list)
    cursor: int = 0
    edit_text: str = ""
    edit_index: int | None = None
    message: str = ""
    running: bool = True


class ListController:
    """Maps key symbols to transitions over a :class:`ListState`.

    Rows are display-only. After every mutation they are rebuilt from the
    operations' read path instead of being patched in place.
    """

    BROWSING_KEYS: dict[str, str] = {
        "up": "move_up",
        "k": "move_up",
        "down": "move_down",
        "j": "move_down",
        "g": "jump_first",
        "home": "jump_first",
        "G": "jump_last",
        "end": "jump_last",
        "enter": "activate",
        "r": "start_rename",
        "R": "start_rename",
        "n": "start_create",
        "N": "start_create",
        "z": "toggle_dynamic",
        "Z": "toggle_dynamic",
        "J": "move_row_down",
        "K": "move_row_up",
        "x": "delete_row",
        "X": "delete_row",
        "?": "show_help",
        "q": "quit",
        "Q": "quit",
        "escape": "quit",
    }

    EDIT_KEYS: dict[str, str] = {
        "enter": "commit",
        "escape": "cancel",
        "backspace": "backspace",
    }

    def __init__(self, operations: WorkspaceOperations) -> None:
        self.ops = operations
        self.state = ListState()

    # ------------------------------------------------------------------
    # Entry points used by the view
    # ------------------------------------------------------------------

    def start(self) -> ListState:
        """Load rows and focus the active workspace."""
        self._guard(self._load_initial)
        return self.state

    def handle_key(self, key: str) -> ListState:
        """Apply one key symbol (``"j"``, ``"enter"``, ``"escape"``, ...)."""
        mode = self.state.mode
        if mode is Mode.BROWSING:
            name = self.BROWSING_KEYS.get(key)
            if name is not None:
                self._guard(getattr(self, name))
        elif mode in EDIT_MODES:
            name = self.EDIT_KEYS.get(key)
            if name is not None:
                self._guard(getattr(self, name))
            elif len(key) == 1 and key.isprintable():
                self.state.edit_text += key
        else:
            self.dismiss()
        return self.state

    def submit(self, text: str) -> ListState:
        """Commit text entered through a toolkit input widget."""
        if self.state.mode in EDIT_MODES:
            self.state.edit_text = text
            self._guard(self.commit)
        return self.state

    def cancel(self) -> ListState:
        if self.state.mode in EDIT_MODES:
            self._reset_editor()
            self.state.mode = Mode.BROWSING
        return self.state

    def focus(self, position: int) -> ListState:
        """Move the cursor to a row picked with the mouse."""
        if self.state.mode is Mode.BROWSING and self.state.rows:
            self.state.cursor = min(max(position, 0), len(self.state.rows) - 1)
        return self.state

    def dismiss(self) -> ListState:
        if self.state.mode in MODAL_MODES:
            self.state.message = ""
            self.state.mode = Mode.BROWSING
        return self.state

    # ------------------------------------------------------------------
    # Browsing transitions
    # ------------------------------------------------------------------

    def move_up(self) -> None:
        count = len(self.state.rows)
        if count:
            self.state.cursor = (self.state.cursor - 1) % count

    def move_down(self) -> None:
        count = len(self.state.rows)
        if count:
            self.state.cursor = (self.state.cursor + 1) % count

    def jump_first(self) -> None:
        self.state.cursor = 0

    def jump_last(self) -> None:
        self.state.cursor = max(len(self.state.rows) - 1, 0)

    def activate(self) -> None:
        if not self.state.rows:
            return
        current = self.state.cursor
        self.ops.switch(current + 1)
        self.refresh(focus=current)

    def start_rename(self) -> None:
        if not self.state.rows:
            return
        index = self.state.cursor + 1
        self.state.edit_index = index
        self.state.edit_text = self.ops.stored_label(index)
        self.state.mode = Mode.EDITING_NAME

    def start_create(self) -> None:
        self._reset_editor()
        self.state.mode = Mode.CREATING_COUNT

    def toggle_dynamic(self) -> None:
        enabled = self.ops.toggle_dynamic()
        self.refresh()
        self._show_message(f"Dynamic Workspaces = {'ON' if enabled else 'OFF'}")

    def move_row_down(self) -> None:
        current = self.state.cursor
        if current < len(self.state.rows) - 1:
            self.ops.swap(current, current + 1)
            self.refresh(focus=current + 1)

    def move_row_up(self) -> None:
        current = self.state.cursor
        if current > 0:
            self.ops.swap(current, current - 1)
            self.refresh(focus=current - 1)

    def delete_row(self) -> None:
        current = self.state.cursor
        if self.ops.remove(current):
            self.refresh(focus=current)

    def show_help(self) -> None:
        self.state.message = HELP_TEXT
        self.state.mode = Mode.SHOWING_HELP

    def quit(self) -> None:
        self.state.running = False

    # ------------------------------------------------------------------
    # Editing transitions
    # ------------------------------------------------------------------

    def backspace(self) -> None:
        self.state.edit_text = self.state.edit_text[:-1]

    def commit(self) -> None:
        mode = self.state.mode
        text = self.state.edit_text.strip()
        index = self.state.edit_index
        self._reset_editor()
        self.state.mode = Mode.BROWSING
        if mode is Mode.EDITING_NAME:
            if text and index is not None:
                self.ops.rename(index, text)
                self.refresh(focus=index - 1)
        elif mode is Mode.CREATING_COUNT:
            try:
                count = int(text)
            except ValueError as exc:
                raise InvalidArgumentError(f"invalid workspace count: {text!r}") from exc
            self.ops.create(count)
            self.refresh()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def refresh(self, focus: int | None = None) -> None:
        """Rebuild rows from live state and clamp the cursor into range."""
        rows = self.ops.rows()
        self.state.rows = rows
        target = self.state.cursor if focus is None else focus
        self.state.cursor = min(max(target, 0), max(len(rows) - 1, 0))

    def _load_initial(self) -> None:
        self.refresh(focus=0)
        for row in self.state.rows:
            if row.active:
                self.state.cursor = row.index
                break

    def _guard(self, action: Callable[[], None]) -> None:
        try:
            action()
        except GnavError as exc:
            logger.warning("Operation failed: %s", exc)
            self._show_message(f"Error: {exc}")

    def _show_message(self, text: str) -> None:
        self.state.message = text
        self.state.mode = Mode.SHOWING_MESSAGE

    def _reset_editor(self) -> None:
        self.state.edit_text = ""
        self.state.edit_index = None
