"""Cursor positioning and colouring for a terminal using ANSI sequences."""

from __future__ import annotations

import sys
from typing import TextIO

CLEAR_WIDTH = 120


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _ansi_code(attribute: int, normal: int, bright: int) -> int:
    # Console attributes use bit 0 blue, 1 green, 2 red, 3 intensity;
    # ANSI colour indices use bit 0 red, 1 green, 2 blue.
    index = (1 if attribute & 4 else 0) | (2 if attribute & 2 else 0) | (4 if attribute & 1 else 0)
    return (bright if attribute & 8 else normal) + index


def set_cursor(x: int, y: int, stream: TextIO | None = None) -> None:
    """Move the cursor to column ``x``, row ``y`` (both zero-based)."""
    _out(stream).write(f"\x1b[{max(0, y) + 1};{max(0, x) + 1}H")


def set_color(color: int, stream: TextIO | None = None) -> None:
    """Select a colour given as a 16-colour console attribute byte."""
    codes = ["0", str(_ansi_code(color & 0x0F, 30, 90))]
    background = (color >> 4) & 0x0F
    if background:
        codes.append(str(_ansi_code(background, 40, 100)))
    _out(stream).write("\x1b[" + ";".join(codes) + "m")


def clear_line(y: int, stream: TextIO | None = None) -> None:
    """Blank row ``y`` and leave the cursor at its start."""
    out = _out(stream)
    set_cursor(0, y, out)
    out.write(" " * CLEAR_WIDTH)
    set_cursor(0, y, out)