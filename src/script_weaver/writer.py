"""Byte-stable output writers."""

from __future__ import annotations

import json
import re
from pathlib import Path

_WHITESPACE = re.compile(r"\s+")
_RESERVED = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def write_json(data: dict, path: str) -> None:
    """Write *data* to *path* as byte-stable, POSIX-compliant JSON.

    Guarantees:
    - sort_keys=True  → eliminates dict ordering non-determinism
    - ensure_ascii=True → no locale-dependent unicode variation
    - newline="\\n"   → Unix line endings everywhere
    - Single trailing "\\n" → POSIX-compliant text file
    """
    serialized = json.dumps(data, sort_keys=True, indent=2, ensure_ascii=True)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(serialized + "\n", encoding="utf-8", newline="\n")


def write_text(text: str, path: str) -> None:
    """Write rendered script text to *path* as UTF-8 with Unix line endings."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8", newline="\n")


def export_filename(title: str) -> str:
    """Download name for a script: ``"Dil Se Digital"`` → ``"dil_se_digital.txt"``."""
    stem = _RESERVED.sub("", _WHITESPACE.sub("_", title.strip())).lower()
    if not stem.strip("_."):
        stem = "script"
    return f"{stem}.txt"
