from __future__ import annotations

import os

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Footer, Header, Static

from hexgrid.core.session import LoadResult, load_rows
from hexgrid.core.store import RowStore
from hexgrid.ui.palette import DEFAULT, Palette
from hexgrid.widgets.row_pane import RowPane


class HexgridApp(App):
    """Textual shell: two paired panes over one RowStore.

    Every action mutates the store, then both panes pull its current rows.
    """

    CSS = """
    #panes {
        height: 1fr;
    }
    #hex-pane {
        width: 3fr;
    }
    #ascii-pane {
        width: 1fr;
    }
    #status {
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("up", "shift_up", "Up"),
        ("down", "shift_down", "Down"),
        ("pageup", "page_up", "PgUp"),
        ("pagedown", "page_down", "PgDn"),
        ("r", "reload", "Reload"),
    ]

    def __init__(self, path: str | None = None, *, palette: Palette = DEFAULT) -> None:
        super().__init__()
        self._path = path
        self._palette = palette
        self._result: LoadResult = load_rows(path)
        self.title = f"hexgrid - {os.path.basename(path)}" if path else "hexgrid"
        self.hex_pane = RowPane("Hex", "hex", palette=palette, id="hex-pane")
        self.ascii_pane = RowPane("ASCII", "ascii", palette=palette, id="ascii-pane")
        self.status = Static(id="status")

    @property
    def store(self) -> RowStore:
        return self._result.store

    @property
    def load_result(self) -> LoadResult:
        return self._result

    def compose(self) -> ComposeResult:  # noqa: D401 - Textual API
        yield Header(show_clock=False, id="header")
        yield Horizontal(self.hex_pane, self.ascii_pane, id="panes")
        yield self.status
        yield Footer(id="footer")

    def on_mount(self) -> None:
        self.refresh_panes()

    def refresh_panes(self) -> None:
        store = self.store
        spans = store.current_spans()
        offsets = [off for off, _ln in spans] if spans is not None else None
        self.hex_pane.set_rows(store.current_hex_rows(), offsets)
        self.ascii_pane.set_rows(store.current_ascii_rows())
        self.update_status()

    def update_status(self) -> None:
        r = self._result
        text = Text()
        if r.path is None:
            text.append("no file", style=self._palette.status_fg)
        else:
            text.append(os.path.basename(r.path), style=f"bold {self._palette.status_fg}")
        if r.error:
            text.append(f"  {r.error}", style=self._palette.status_error_fg)
        else:
            text.append(f"  {r.size} bytes  {len(r.store)} rows", style=self._palette.status_fg)
            spans = r.store.current_spans()
            if spans:
                text.append(f"  top 0x{spans[0][0]:08X}", style=self._palette.accent)
        self.status.update(text)

    # ---- Actions (bound in BINDINGS) ----
    def action_shift_up(self) -> None:
        self.store.shift_up(1)
        self.refresh_panes()

    def action_shift_down(self) -> None:
        self.store.shift_down(1)
        self.refresh_panes()

    def action_page_up(self) -> None:
        self.store.shift_up(self.hex_pane.visible_rows())
        self.refresh_panes()

    def action_page_down(self) -> None:
        self.store.shift_down(self.hex_pane.visible_rows())
        self.refresh_panes()

    def action_reload(self) -> None:
        if self._path is None:
            return
        # Swap the whole result at once; panes never see old and new rows mixed
        self._result = load_rows(self._path)
        self.refresh_panes()
