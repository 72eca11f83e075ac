from __future__ import annotations

import os
import sys

_COLOR: bool | None = None

_CODES: dict[str, tuple[int, ...]] = {
    "pass": (32,),
    "fail": (31, 1),
    "error": (33,),
    "dim": (2,),
    "bold": (1,),
}


def supports_color() -> bool:
    global _COLOR
    if _COLOR is None:
        _COLOR = not (
            os.environ.get("NO_COLOR", "") != ""
            or os.environ.get("TERM", "") == "dumb"
            or not hasattr(sys.stdout, "isatty")
            or not sys.stdout.isatty()
        )
    return _COLOR


def force_color(enabled: bool) -> None:
    global _COLOR
    _COLOR = enabled


def paint(text: str, name: str) -> str:
    codes = _CODES.get(name, ())
    if not codes or not supports_color():
        return text
    seq = ";".join(str(c) for c in codes)
    return f"\033[{seq}m{text}\033[0m"


def status_label(status: str) -> str:
    # Pad the raw label first so ANSI codes don't break column alignment.
    raw = status.upper()
    return " " * (5 - len(raw)) + paint(raw, status)
