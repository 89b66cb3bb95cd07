"""Deterministic script-document assembly: no I/O, no randomness, no timestamps."""

from __future__ import annotations

import logging
import re

from script_weaver.phrases import ARCHETYPES, LENGTH_ACTS, PHRASES

logger = logging.getLogger(__name__)

# Index into a language's "times" table; settings that mention night open there.
_NIGHT_SLOT = 3
_NIGHT_MARKERS = ("night", "रात")

# "Name - trait", "Name – trait", "Name: trait".  Hyphenated names stay whole.
_TRAIT_SEPARATOR = re.compile(r"\s+[-–—](?:\s+|$)|:")


def split_character(descriptor: str) -> tuple[str, str]:
    """Split a character descriptor into ``(display_name, trait)``.

    The trait is ``""`` when the descriptor carries none.
    """
    parts = _TRAIT_SEPARATOR.split(descriptor.strip(), maxsplit=1)
    name = parts[0].strip()
    trait = parts[1].strip() if len(parts) > 1 else ""
    if not name:
        return descriptor.strip(), ""
    return name, trait


def archetype_sequence(act_count: int) -> list[str]:
    """Pick one archetype per act, spread linearly from setup to resolution.

    Act ``i`` takes archetype ``round(i * 4 / (act_count - 1))`` (halves round
    up), so 3 acts give setup/midpoint/resolution and 4 acts give
    setup/rising/climax/resolution.
    """
    if act_count <= 1:
        return [ARCHETYPES[0]]
    last = len(ARCHETYPES) - 1
    span = act_count - 1
    return [ARCHETYPES[(2 * i * last + span) // (2 * span)] for i in range(act_count)]


def build_script_document(brief: dict) -> dict:
    """Build a deterministic ScriptDocument dict from a brief dict.

    Free-text fields may be empty; language fallbacks fill them.  Enum fields
    (genre, tone, language, length) must already be valid.
    """
    language = brief["language"]
    table = PHRASES[language]
    fallbacks = table["fallbacks"]
    act_count = LENGTH_ACTS[brief["length"]]

    title   = _text(brief.get("title"), fallbacks["title"])
    setting = _text(brief.get("setting"), fallbacks["setting"])
    logline = _text(brief.get("logline"), fallbacks["logline"])
    cast = [split_character(c) for c in brief.get("characters", []) if c.strip()]

    context = {
        "title":        title,
        "setting":      setting,
        "logline":      logline,
        "genre":        table["genres"][brief["genre"]],
        "tone":         table["tones"][brief["tone"]],
        "tone_article": table["tone_articles"][brief["tone"]],
        "lead":         cast[0][0] if cast else fallbacks["lead"],
        "lead_intro":   _introduce(cast[0]) if cast else fallbacks["lead"],
        "names":        _join_names([name for name, _ in cast[:3]], table) or fallbacks["names"],
    }

    archetypes = archetype_sequence(act_count)

    structure = []
    for index, archetype in enumerate(archetypes):
        arc = table["archetypes"][archetype]
        structure.append({
            "act":    table["act_labels"][index],
            "focus":  arc["focus"].format(**context),
            "stakes": arc["stakes"].format(**context),
        })

    raw_setting = brief.get("setting") or ""
    time_offset = _NIGHT_SLOT if any(m in raw_setting.lower() for m in _NIGHT_MARKERS) else 0

    # One scene per act.
    scenes = [
        _build_scene(index, archetype, brief, cast, table, context, time_offset)
        for index, archetype in enumerate(archetypes)
    ]

    logger.debug(
        "Built %d acts / %d scenes for %r (%s, %d characters)",
        len(structure), len(scenes), title, language, len(cast),
    )

    return {
        "schema_id":      "ScriptDocument",
        "schema_version": "1.0.0",
        "language":       language,
        "title_page": {
            "title":   title,
            "genre":   brief["genre"],
            "tone":    brief["tone"],
            "logline": logline,
        },
        "summary":   table["summary"].format(**context),
        "structure": structure,
        "scenes":    scenes,
        "closing":   table["closing"].format(**context),
    }


def _build_scene(
    index: int,
    archetype: str,
    brief: dict,
    cast: list[tuple[str, str]],
    table: dict,
    context: dict,
    time_offset: int,
) -> dict:
    arc = table["archetypes"][archetype]
    times = table["times"]
    time = times[(time_offset + index) % len(times)]
    scene_context = {**context, "time": time}

    beats = [{"type": "action", "content": arc["opening"].format(**scene_context)}]
    for slot, speaker in enumerate(_speakers(index, cast, table)):
        beats.append({
            "type":    "dialogue",
            "speaker": speaker,
            "content": _dialogue_line(index + slot, brief, table),
        })
    beats.append({"type": "action", "content": arc["button"].format(**scene_context)})

    return {
        "heading": table["scene_heading"].format(
            number=index + 1,
            location=context["setting"].upper(),
            time=time.upper(),
        ),
        "description": arc["scene"].format(**scene_context),
        "beats": beats,
    }


def _speakers(index: int, cast: list[tuple[str, str]], table: dict) -> list[str]:
    """Every cast member for scene *index*, starting at offset *index* in input order."""
    if not cast:
        return [table["placeholder_speaker"]]
    return [cast[(index + k) % len(cast)][0] for k in range(len(cast))]


def _dialogue_line(pick: int, brief: dict, table: dict) -> str:
    tone_lines = table["tone_lines"][brief["tone"]]
    genre_lines = table["genre_lines"][brief["genre"]]
    return f"{tone_lines[pick % len(tone_lines)]} {genre_lines[(pick + 1) % len(genre_lines)]}"


def _introduce(character: tuple[str, str]) -> str:
    name, trait = character
    return f"{name} ({trait})" if trait else name


def _join_names(names: list[str], table: dict) -> str:
    if len(names) <= 1:
        return "".join(names)
    return ", ".join(names[:-1]) + table["conjunction"] + names[-1]


def _text(value: str | None, fallback: str) -> str:
    if value is None or not value.strip():
        return fallback
    return value.strip()
