from __future__ import annotations

import logging
from typing import Literal

from hexgrid.core.rows import iter_rows

logger = logging.getLogger(__name__)

Direction = Literal["up", "down"]


class RowStore:
    """Paired hex/ASCII row sequences with circular navigation.

    All sequences (hex rows, ASCII rows and their byte spans) are rotated
    together by `_rotate`; index i of each always describes the same bytes.
    There is no top or bottom: shifting `len(store)` times in one direction
    returns to the starting arrangement.
    """

    def __init__(
        self,
        hex_rows: list[str],
        ascii_rows: list[str],
        spans: list[tuple[int, int]] | None = None,
    ) -> None:
        if len(hex_rows) != len(ascii_rows):
            raise ValueError(
                f"hex/ascii row count mismatch: {len(hex_rows)} != {len(ascii_rows)}"
            )
        if spans is not None and len(spans) != len(hex_rows):
            raise ValueError(f"span count mismatch: {len(spans)} != {len(hex_rows)}")
        self._hex: list[str] = list(hex_rows)
        self._ascii: list[str] = list(ascii_rows)
        self._spans: list[tuple[int, int]] | None = list(spans) if spans is not None else None
        self._rotation = 0

    @classmethod
    def empty(cls) -> RowStore:
        return cls([], [])

    @classmethod
    def from_buffer(cls, buffer: bytes) -> RowStore:
        hex_rows: list[str] = []
        ascii_rows: list[str] = []
        spans: list[tuple[int, int]] = []
        for row in iter_rows(buffer):
            hex_rows.append(row.hex_text)
            ascii_rows.append(row.ascii_text)
            spans.append((row.offset, row.length))
        return cls(hex_rows, ascii_rows, spans)

    def __len__(self) -> int:
        return len(self._hex)

    @property
    def is_empty(self) -> bool:
        return not self._hex

    @property
    def rotation(self) -> int:
        """Net number of rows moved from the front to the back, modulo length."""
        return self._rotation

    # ---- Navigation ----
    def shift_up(self, n: int = 1) -> None:
        """Move the last `n` rows to the front."""
        self._rotate("up", n)

    def shift_down(self, n: int = 1) -> None:
        """Move the first `n` rows to the back."""
        self._rotate("down", n)

    def _rotate(self, direction: Direction, n: int) -> None:
        size = len(self._hex)
        if n <= 0 or size <= 1:
            return
        k = n % size
        if k == 0:
            return
        # "up" is a right rotation by k, i.e. a left rotation by size - k
        left = k if direction == "down" else size - k
        self._hex = self._hex[left:] + self._hex[:left]
        self._ascii = self._ascii[left:] + self._ascii[:left]
        if self._spans is not None:
            self._spans = self._spans[left:] + self._spans[:left]
        self._rotation = (self._rotation + left) % size
        logger.debug("rotated %s by %d (net %d of %d)", direction, k, self._rotation, size)

    # ---- Snapshots ----
    def current_hex_rows(self) -> tuple[str, ...]:
        return tuple(self._hex)

    def current_ascii_rows(self) -> tuple[str, ...]:
        return tuple(self._ascii)

    def current_spans(self) -> tuple[tuple[int, int], ...] | None:
        return tuple(self._spans) if self._spans is not None else None
