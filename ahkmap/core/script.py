# Module: AutoHotkey script reader (hotkey subset only).
# Main: parse_script, read_script.
# Example: from ahkmap.core.script import read_script; read_script("macros.ahk")

import codecs
import io
import logging
from pathlib import Path
from typing import Iterable, Union

from ahkmap.core.models import Binding, Bindings, Modifier, binding_count

logger = logging.getLogger(__name__)

BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"
LINE_COMMENT = ";"
HOTKEY_DELIM = "::"
COMMENT_TRIM = "; \t>-<"

_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

_MODIFIER_CHARS = {"!": "alt", "+": "shift", "^": "ctrl"}
_NOOP_CHARS = {"$"}


def _parse_hotkey(lhs: str):
    """Split the left side of a hotkey line into (key name, Modifier)."""
    flags = {"alt": False, "shift": False, "ctrl": False}
    key = []
    for ch in lhs:
        if ch in _MODIFIER_CHARS:
            flags[_MODIFIER_CHARS[ch]] = True
        elif ch in _NOOP_CHARS:
            continue
        else:
            key.append(ch)
    return "".join(key).lower(), Modifier(**flags)


def parse_script(lines: Iterable[str]) -> Bindings:
    hotkeys: Bindings = {}
    last_comment = ""
    multiline = False

    for raw in lines:
        line = raw.strip()

        if multiline:
            if BLOCK_CLOSE in line:
                multiline = False
            # the closing line is never interpreted
            continue

        if line.startswith(BLOCK_OPEN):
            multiline = True
            continue

        if line.startswith(LINE_COMMENT):
            last_comment = line.strip(COMMENT_TRIM)
            continue

        pos = line.find(HOTKEY_DELIM)
        if pos == -1:
            continue

        key, mod = _parse_hotkey(line[:pos])
        hotkeys.setdefault(key, []).append(Binding(key=key, mod=mod, description=last_comment))

    return hotkeys


def detect_encoding(head: bytes) -> str:
    """Pick a codec from the byte-order mark; no BOM means UTF-8."""
    # UTF-32 LE starts with the UTF-16 LE mark, so check it first
    for bom, encoding in _BOMS:
        if head.startswith(bom):
            return encoding
    return "utf-8-sig"


def read_script(path: Union[str, Path]) -> Bindings:
    """Read and parse a script file. OSError propagates to the caller."""
    p = Path(path)
    raw = p.read_bytes()
    text = raw.decode(detect_encoding(raw[:4]), errors="replace")
    hotkeys = parse_script(io.StringIO(text, newline=None))
    logger.info(
        "Loaded %s: %d keys, %d bindings",
        p.name, len(hotkeys), binding_count(hotkeys),
    )
    return hotkeys
