from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from rich.style import Style
from rich.text import Text
from textual.widget import Widget

from hexgrid.ui.palette import DEFAULT, Palette

PaneKind = Literal["hex", "ascii"]


class RowPane(Widget):
    """Bordered pane showing one row sequence, first row at the top.

    The pane owns no navigation state: the app hands it the store's current
    rows after every action and it renders as many as fit.
    """

    def __init__(
        self,
        title: str,
        kind: PaneKind,
        *,
        palette: Palette = DEFAULT,
        id: str | None = None,  # noqa: A002 - Textual API
    ) -> None:
        super().__init__(id=id)
        self.kind = kind
        self.palette = palette
        self.border_title = title
        self._rows: tuple[str, ...] = ()
        self._offsets: tuple[int, ...] | None = None

    def on_mount(self) -> None:
        self.styles.border = ("round", self.palette.panel_border)
        self.styles.background = self.palette.panel_bg
        self.styles.border_title_color = self.palette.title_fg

    def set_rows(self, rows: Sequence[str], offsets: Sequence[int] | None = None) -> None:
        self._rows = tuple(rows)
        self._offsets = tuple(offsets) if offsets is not None else None
        self.refresh()

    @property
    def rows(self) -> tuple[str, ...]:
        return self._rows

    def visible_rows(self) -> int:
        # Before the first layout the height is unknown; treat every row as visible.
        h = self.content_size.height
        if h <= 0:
            return max(1, len(self._rows))
        return h

    def _hex_line(self, row: str) -> Text:
        line = Text()
        # Rows are "XX " cells with a three-space spacer, so three-char steps stay aligned
        for i in range(0, len(row), 3):
            cell = row[i : i + 3]
            if not cell.strip():
                line.append(cell)
            elif cell.startswith("00"):
                line.append(cell, style=Style(color=self.palette.hex_zero_fg))
            else:
                line.append(cell, style=Style(color=self.palette.hex_fg))
        return line

    def render(self) -> Text:
        if not self._rows:
            return Text("<empty>", style=Style(color=self.palette.empty_fg))
        text = Text()
        count = min(len(self._rows), self.visible_rows())
        for i in range(count):
            row = self._rows[i]
            if i:
                text.append("\n")
            if self._offsets is not None and i < len(self._offsets):
                text.append(f"{self._offsets[i]:08X}  ", style=Style(color=self.palette.offset_fg))
            if self.kind == "hex":
                text.append(self._hex_line(row))
            else:
                text.append(row, style=Style(color=self.palette.ascii_fg))
        return text
