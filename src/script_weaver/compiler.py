"""Brief-notes compiler: parses human-authored notes files into ScriptBrief dicts."""

from __future__ import annotations

import re
from pathlib import Path

from script_weaver.phrases import GENRES, LANGUAGES, LENGTH_ACTS, TONES


class CompileError(Exception):
    """Raised when a notes file cannot be compiled into a valid ScriptBrief."""


# All scalar directive keys (order defines error messages; not parse order)
_SCALAR_FIELDS = (
    "title",
    "genre",
    "tone",
    "language",
    "setting",
    "logline",
    "length",
)
_REQUIRED_FIELDS = ("title", "genre", "tone")
_OPTIONAL_EMPTY = ("setting", "logline")
_DEFAULTS = {
    "language": "english",
    "setting":  "",
    "logline":  "",
    "length":   "medium",
}

_CHARACTER_SPLIT = re.compile(r"[,\n]")


def parse_characters(notes: str) -> list[str]:
    """Split free-text character notes on commas and newlines.

    Entries are trimmed and empty ones dropped; input order is kept.
    """
    return [chunk.strip() for chunk in _CHARACTER_SPLIT.split(notes) if chunk.strip()]


def _canonical(value: str, choices: tuple[str, ...], field: str, lineno: int) -> str:
    """Match *value* case-insensitively against *choices*, returning the canonical spelling."""
    for choice in choices:
        if value.casefold() == choice.casefold():
            return choice
    raise CompileError(
        f"Line {lineno}: {field!r} must be one of {', '.join(choices)}; got: {value!r}"
    )


def parse_brief_file(path: str) -> dict:
    """Read and parse a notes file into a raw ScriptBrief dict.

    Expected format — one directive per line; blank lines and lines starting
    with ``#`` are ignored::

        title:      <non-empty string>
        genre:      <Drama | Comedy | Thriller | Romance | Sci-Fi | Mystery | Slice of Life>
        tone:       <Hopeful | Gritty | Playful | Melancholic | Inspirational>
        language:   <english | hindi>            (default: english)
        setting:    <string, may be empty>
        logline:    <string, may be empty>
        length:     <short | medium | long>      (default: medium)
        characters: <Name - trait>, <Name>, ...
        [additional characters lines as needed]

    Returns a dict matching the ScriptBrief.v1.json structure.
    Raises CompileError on any parse or semantic problem.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CompileError(f"Cannot read notes file: {exc}") from exc

    fields: dict[str, str] = {}
    characters: list[str] = []

    for lineno, line in enumerate(raw.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if ":" not in stripped:
            raise CompileError(
                f"Line {lineno}: expected 'key: value', got: {stripped!r}"
            )

        key, _, value = stripped.partition(":")
        key = key.strip().lower()
        value = value.strip()

        if key in ("characters", "character"):
            characters.extend(parse_characters(value))

        elif key in _SCALAR_FIELDS:
            if key in fields:
                raise CompileError(f"Line {lineno}: duplicate field {key!r}")
            if not value and key not in _OPTIONAL_EMPTY:
                raise CompileError(f"Line {lineno}: field {key!r} must not be empty")
            if key == "genre":
                value = _canonical(value, GENRES, key, lineno)
            elif key == "tone":
                value = _canonical(value, TONES, key, lineno)
            elif key == "language":
                value = _canonical(value, LANGUAGES, key, lineno)
            elif key == "length":
                value = _canonical(value, tuple(LENGTH_ACTS), key, lineno)
            fields[key] = value

        else:
            raise CompileError(f"Line {lineno}: unknown field {key!r}")

    missing = [f for f in _REQUIRED_FIELDS if f not in fields]
    if missing:
        raise CompileError(f"Missing required field(s): {', '.join(missing)}")

    merged = {**_DEFAULTS, **fields}

    return {
        "schema_id": "ScriptBrief",
        "schema_version": "1.0",
        "title": merged["title"],
        "genre": merged["genre"],
        "tone": merged["tone"],
        "language": merged["language"],
        "setting": merged["setting"],
        "logline": merged["logline"],
        "characters": characters,
        "length": merged["length"],
    }
