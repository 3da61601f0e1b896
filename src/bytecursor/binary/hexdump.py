from __future__ import annotations
from typing import List, Optional

from colorama import Fore, Style

from .cursor import ByteCursor

ROW_WIDTH = 16
HEADER = " " * 9 + " ".join(f"{i:02X}" for i in range(ROW_WIDTH))


def _paint(text: str, colour: str, enabled: bool) -> str:
    return f"{colour}{text}{Style.RESET_ALL}" if enabled else text


def format_hexdump(cur: ByteCursor, color: bool = False, limit: Optional[int] = None) -> str:
    """
    Render the whole buffer as rows of 16 hex bytes, offsets on the left.
    The byte under the cursor is highlighted when color is on; the footer
    always states the position.
    """
    buf = cur.buffer
    lines: List[str] = [_paint(HEADER, Fore.CYAN, color)]

    rows = range(0, len(buf), ROW_WIDTH)
    if limit is not None:
        rows = rows[:max(limit, 0)]
    for start in rows:
        cells = []
        for off in range(start, min(start + ROW_WIDTH, len(buf))):
            cell = f"{buf[off]:02X}"
            if off == cur.position:
                cell = _paint(cell, Fore.GREEN, color)
            cells.append(cell)
        lines.append(f"{start:08X} " + " ".join(cells))
    if limit is not None and len(rows) * ROW_WIDTH < len(buf):
        lines.append("...")

    lines.append(f"position: 0x{cur.position:08X} ({cur.position}/{len(buf)})")
    return "\n".join(lines)
