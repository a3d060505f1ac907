"""Textual front-end for the workspace list controller."""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, OptionList, Static

from ui.tui.controller import MODAL_MODES, ListController, Mode
from workspaces.renderer import render_list_entries

logger = logging.getLogger("gnav.tui")

FOOTER_HINTS = "[↑/↓] Move  [Enter] Switch  [X] Remove  [?] More  [Q/Esc] Quit"

APP_CSS = """
Screen {
    background: #1E1E2E;
    color: #D9E0EE;
}
#header {
    height: 1;
    content-align: center middle;
    text-style: bold;
    color: #F5E0DC;
}
#workspaces {
    height: 1fr;
    border: round #F5E0DC;
    border-title-color: #F5E0DC;
    background: #1E1E2E;
}
#workspaces > .option-list--option-highlighted {
    background: #45475A;
    color: #D9E0EE;
}
#footer {
    height: 1;
    background: #313244;
}
#rename {
    height: 3;
    border: tall #F5E0DC;
    background: #313244;
}
"""


class WorkspaceList(OptionList, inherit_bindings=False):
    """Option list whose keys are all routed through the controller."""


class MessageModal(ModalScreen[None]):
    """Help or status text; any key closes it."""

    DEFAULT_CSS = """
    MessageModal {
        align: center middle;
    }
    #message-box {
        width: 50;
        height: auto;
        border: heavy #F5E0DC;
        background: #313244;
        padding: 1 2;
    }
    #message-hint {
        margin-top: 1;
        color: #F5E0DC;
    }
    """

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    def compose(self) -> ComposeResult:
        with Vertical(id="message-box"):
            yield Static(self.text, id="message-text", markup=False)
            yield Static("[ OK ]", id="message-hint", markup=False)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.dismiss(None)


class CountModal(ModalScreen[str | None]):
    """Asks how many workspaces should exist."""

    DEFAULT_CSS = """
    CountModal {
        align: center middle;
    }
    #count-box {
        width: 40;
        height: auto;
        border: heavy #F5E0DC;
        background: #313244;
        padding: 1 2;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="count-box"):
            yield Static("Create # of Workspaces", markup=False)
            yield Input(placeholder="Count", id="count-input", restrict=r"[0-9]*", max_length=3)
            yield Static("Enter to confirm  ·  Esc to cancel", markup=False)

    def on_mount(self) -> None:
        self.query_one("#count-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)


class WorkspaceApp(App):
    """Renders :class:`ListController` state and feeds it key symbols."""

    CSS = APP_CSS
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, controller: ListController, active_marker: str = "*") -> None:
        super().__init__()
        self.controller = controller
        self.active_marker = active_marker
        self._editor: Input | None = None
        self._modal_open = False

    def compose(self) -> ComposeResult:
        yield Static("GNAV TUI", id="header", markup=False)
        yield WorkspaceList(id="workspaces")
        yield Static(FOOTER_HINTS, id="footer", markup=False)

    def on_mount(self) -> None:
        listing = self.query_one("#workspaces", WorkspaceList)
        listing.border_title = " Workspaces "
        listing.focus()
        self.controller.start()
        self._sync()

    # ------------------------------------------------------------------
    # Input routing
    # ------------------------------------------------------------------

    def on_key(self, event: events.Key) -> None:
        mode = self.controller.state.mode
        if mode is Mode.BROWSING:
            event.stop()
            event.prevent_default()
            self.controller.handle_key(self._symbol(event))
            self._sync()
        elif mode is Mode.EDITING_NAME and event.key == "escape":
            event.stop()
            self.controller.cancel()
            self._sync()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "rename":
            return
        event.stop()
        self.controller.submit(event.value)
        self._sync()

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        self.controller.focus(event.option_index)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.controller.focus(event.option_index)
        self.controller.handle_key("enter")
        self._sync()

    @staticmethod
    def _symbol(event: events.Key) -> str:
        if event.is_printable and event.character:
            return event.character
        return event.key

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _sync(self) -> None:
        state = self.controller.state
        if not state.running:
            self.exit()
            return
        self._render_rows()
        self._sync_editor()
        if self._modal_open:
            return
        if state.mode in MODAL_MODES:
            self._modal_open = True
            self.push_screen(MessageModal(state.message), self._on_message_closed)
        elif state.mode is Mode.CREATING_COUNT:
            self._modal_open = True
            self.push_screen(CountModal(), self._on_count_closed)

    def _render_rows(self) -> None:
        state = self.controller.state
        listing = self.query_one("#workspaces", WorkspaceList)
        with listing.prevent(OptionList.OptionHighlighted):
            listing.clear_options()
            listing.add_options(render_list_entries(state.rows, self.active_marker))
            if state.rows:
                listing.highlighted = state.cursor

    def _sync_editor(self) -> None:
        state = self.controller.state
        footer = self.query_one("#footer", Static)
        if state.mode is Mode.EDITING_NAME and self._editor is None:
            self._editor = Input(value=state.edit_text, id="rename")
            footer.display = False
            self.mount(self._editor)
            self._editor.focus()
        elif state.mode is not Mode.EDITING_NAME and self._editor is not None:
            self._editor.remove()
            self._editor = None
            footer.display = True
            self.query_one("#workspaces", WorkspaceList).focus()

    def _on_message_closed(self, _result: None) -> None:
        self._modal_open = False
        self.controller.dismiss()
        self._sync()

    def _on_count_closed(self, value: str | None) -> None:
        self._modal_open = False
        if value is None:
            self.controller.cancel()
        else:
            self.controller.submit(value)
        self._sync()


def run_app(controller: ListController, active_marker: str = "*") -> None:
    """Block until the user quits the list."""
    logger.debug("Starting interactive list")
    WorkspaceApp(controller, active_marker=active_marker).run()
