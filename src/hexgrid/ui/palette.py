from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    footer_bg: str
    footer_fg: str
    accent: str
    focus_border: str
    panel_border: str
    panel_bg: str
    title_fg: str
    offset_fg: str
    hex_fg: str
    hex_zero_fg: str
    ascii_fg: str
    empty_fg: str
    status_fg: str
    status_error_fg: str


DEFAULT = Palette(
    footer_bg="#1f2430",
    footer_fg="#d8dee9",
    accent="#5ea1ff",
    focus_border="#ffa657",
    panel_border="#3b4252",
    panel_bg="#0f1117",
    title_fg="#ffffff",
    offset_fg="#8892a0",
    hex_fg="#9cdcfe",
    hex_zero_fg="#6b7280",
    ascii_fg="#d7ba7d",
    empty_fg="#6b7280",
    status_fg="#d8dee9",
    status_error_fg="#ff5555",
)

DIM = Palette(
    footer_bg="#2b2b2b",
    footer_fg="#cccccc",
    accent="#a0a0a0",
    focus_border="#bbbbbb",
    panel_border="#444444",
    panel_bg="#1a1a1a",
    title_fg="#e0e0e0",
    offset_fg="#777777",
    hex_fg="#cccccc",
    hex_zero_fg="#666666",
    ascii_fg="#bbbbbb",
    empty_fg="#666666",
    status_fg="#cccccc",
    status_error_fg="#ff6666",
)

HIGH_CONTRAST = Palette(
    footer_bg="#000000",
    footer_fg="#ffffff",
    accent="#00ffff",
    focus_border="#ffff00",
    panel_border="#888888",
    panel_bg="#000000",
    title_fg="#ffffff",
    offset_fg="#aaaaaa",
    hex_fg="#00ffff",
    hex_zero_fg="#888888",
    ascii_fg="#ffff00",
    empty_fg="#888888",
    status_fg="#ffffff",
    status_error_fg="#ff6666",
)

PALETTES: dict[str, Palette] = {
    "default": DEFAULT,
    "dim": DIM,
    "high_contrast": HIGH_CONTRAST,
}


def get_palette(name: str) -> Palette:
    try:
        return PALETTES[name]
    except KeyError:
        raise ValueError(f"Unknown palette '{name}'") from None
