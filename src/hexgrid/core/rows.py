"""Byte-to-row transcoding for the paired hex and ASCII panes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

GROUP_SIZE = 8
HEX_SPACER = "   "
ASCII_SPACER = " "

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E


@dataclass(frozen=True)
class Row:
    """One display line and the byte span [offset, offset + length) it encodes."""

    offset: int
    length: int
    hex_text: str
    ascii_text: str


def render_hex(group: bytes) -> str:
    return "".join(f"{b:02X} " for b in group)


def render_ascii(group: bytes) -> str:
    return "".join(chr(b) if PRINTABLE_MIN <= b <= PRINTABLE_MAX else "." for b in group)


def _take_group(buffer: bytes, pos: int) -> bytes:
    # Re-check what is left before every group; never read past the end.
    remaining = len(buffer) - pos
    if remaining <= 0:
        return b""
    return buffer[pos : pos + min(GROUP_SIZE, remaining)]


def iter_rows(buffer: bytes) -> Iterator[Row]:
    """Yield rows for `buffer` left to right.

    Each row takes one group of up to 8 bytes followed by the spacer. If at
    least 8 bytes are still left, a second 8-byte group completes the row
    (16 bytes). Otherwise the row is the last one and production stops, so a
    short tail after a one-group final row is not rendered.
    """
    pos = 0
    while pos < len(buffer):
        first = _take_group(buffer, pos)
        if not first:
            return
        start = pos
        pos += len(first)
        hex_text = render_hex(first) + HEX_SPACER
        ascii_text = render_ascii(first) + ASCII_SPACER

        if len(buffer) - pos < GROUP_SIZE:
            yield Row(start, pos - start, hex_text, ascii_text)
            return

        second = _take_group(buffer, pos)
        pos += len(second)
        yield Row(
            start,
            pos - start,
            hex_text + render_hex(second),
            ascii_text + render_ascii(second),
        )


def format_rows(buffer: bytes) -> tuple[list[str], list[str]]:
    """Return the (hex_rows, ascii_rows) pair for `buffer`.

    Total over any input; b"" yields two empty lists.
    """
    hex_rows: list[str] = []
    ascii_rows: list[str] = []
    for row in iter_rows(buffer):
        hex_rows.append(row.hex_text)
        ascii_rows.append(row.ascii_text)
    return hex_rows, ascii_rows
