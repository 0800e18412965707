from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Center, Middle
from textual.screen import Screen
from textual.widgets import Static

TICK_INTERVAL = 0.02
BAR_WIDTH = 40


class LoadingProgress:
    """Splash counter, 0 to 100, one step per tick."""

    def __init__(self) -> None:
        self.progress = 0

    @property
    def done(self) -> bool:
        return self.progress >= 100

    def tick(self) -> bool:
        if not self.done:
            self.progress += 1
        return self.done

    def render_bar(self, width: int = BAR_WIDTH) -> str:
        filled = int(self.progress / 100 * width)
        bar = "█" * filled + " " * (width - filled)
        return f"Loading SSH config... Please wait.\n[{bar}] {self.progress}%"


class LoadingScreen(Screen):
    DEFAULT_CSS = """
    LoadingScreen #splash {
        width: auto;
        padding: 2 4;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.counter = LoadingProgress()

    def compose(self) -> ComposeResult:  # type: ignore[override]
        with Middle():
            with Center():
                yield Static(self.counter.render_bar(), id="splash", markup=False)

    def on_mount(self) -> None:
        self._ticker = self.set_interval(TICK_INTERVAL, self._tick)

    def _tick(self) -> None:
        finished = self.counter.tick()
        self.query_one("#splash", Static).update(self.counter.render_bar())
        if finished:
            self._ticker.stop()
            self.dismiss()
