from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Label, ListItem, ListView, Static

from ..core.model import FIELD_LABELS
from .loading import LoadingScreen
from .state import EditorState, Mode, Outcome

LIST_TITLE = "SSH Config Hosts"
LIST_HELP = "Press q to quit, Enter for details."
DETAIL_HELP = "Press 'e' to edit.\nPress 'd' to delete.\nAny key to return."
EDIT_HELP = "Edit SSH Host (\nTab/Shift+Tab to move,\nEnter to save,\nEsc to cancel):"


def popup_text(state: EditorState) -> str:
    """Text of the bordered popup for every mode except browsing."""
    if state.mode is Mode.VIEWING and state.selected is not None:
        return "\n".join(state.selected.summary_lines()) + "\n\n" + DETAIL_HELP
    if state.mode is Mode.EDITING and state.edit_buffer is not None:
        lines = []
        for i, label in enumerate(FIELD_LABELS):
            cursor = ">" if state.edit_field == i else " "
            lines.append(f"{cursor} {label}: {state.edit_buffer.get_field(i)}")
        return EDIT_HELP + "\n\n" + "\n".join(lines)
    if state.mode in (Mode.CONFIRM_SAVE, Mode.CONFIRM_DELETE, Mode.DELETED):
        return state.message
    return ""


class HostList(ListView):
    # Keys reach the app first; the list only moves when the app forwards them.
    can_focus = False


class SSHConfigApp(App):
    TITLE = LIST_TITLE
    CSS = """
    #browser {
        height: 1fr;
    }
    #hosts {
        height: 1fr;
    }
    #popup {
        width: 50;
        height: auto;
        padding: 1 2;
        border: round $accent;
    }
    .title {
        text-style: bold;
        padding: 0 1;
    }
    """
    # Routed through the state machine before any widget binding sees them.
    BINDINGS = [
        Binding("ctrl+c", "route('ctrl+c')", "Quit", show=False, priority=True),
        Binding("tab", "route('tab')", show=False, priority=True),
        Binding("shift+tab", "route('shift+tab')", show=False, priority=True),
        Binding("escape", "route('escape')", show=False, priority=True),
    ]

    def __init__(self, state: EditorState, splash: bool = True):
        super().__init__()
        self.state = state
        self.splash = splash

    def compose(self) -> ComposeResult:  # type: ignore[override]
        self.host_list = HostList(id="hosts")
        self.popup = Static("", id="popup", markup=False)
        yield Vertical(
            Static(LIST_TITLE, classes="title"),
            self.host_list,
            Static(LIST_HELP, id="help"),
            id="browser",
        )
        yield self.popup

    async def on_mount(self) -> None:
        await self.refresh_hosts()
        self.refresh_view()
        if self.splash:
            self.push_screen(LoadingScreen())

    async def refresh_hosts(self) -> None:
        keep = self.host_list.index or 0
        await self.host_list.clear()
        items = [
            ListItem(Label(f"{h.host}\n{h.hostname}", markup=False))
            for h in self.state.visible_hosts()
        ]
        if items:
            await self.host_list.extend(items)
            self.host_list.index = min(keep, len(items) - 1)

    def refresh_view(self) -> None:
        browsing = self.state.mode is Mode.BROWSING
        self.query_one("#browser").display = browsing
        self.popup.display = not browsing
        self.popup.update(popup_text(self.state))

    def _forward(self, key: str) -> None:
        count = len(self.state.visible)
        if key == "down":
            self.host_list.action_cursor_down()
        elif key == "up":
            self.host_list.action_cursor_up()
        elif key == "home" and count:
            self.host_list.index = 0
        elif key == "end" and count:
            self.host_list.index = count - 1

    async def dispatch_key_to_state(self, key: str, character: str | None = None) -> None:
        if isinstance(self.screen, LoadingScreen):
            return
        previous = self.state.mode
        outcome = self.state.handle_key(key, character, self.host_list.index)
        if outcome is Outcome.QUIT:
            self.exit()
            return
        if outcome is Outcome.IGNORED:
            self._forward(key)
            return
        if self.state.mode is not previous and self.state.mode in (Mode.CONFIRM_SAVE, Mode.DELETED):
            await self.refresh_hosts()
        self.refresh_view()

    async def action_route(self, key: str) -> None:
        await self.dispatch_key_to_state(key)

    async def on_key(self, event: events.Key) -> None:
        event.stop()
        await self.dispatch_key_to_state(event.key, event.character)


__all__ = ["SSHConfigApp", "popup_text"]
