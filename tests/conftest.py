"""Shared pytest fixtures for script-weaver tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture()
def dil_se_digital() -> dict:
    """The reference hindi / medium brief, fully valid."""
    return {
        "schema_id": "ScriptBrief",
        "schema_version": "1.0",
        "title": "Dil Se Digital",
        "genre": "Drama",
        "tone": "Hopeful",
        "language": "hindi",
        "setting": "Mumbai coworking studio",
        "logline": (
            "A spirited creator races to shoot a viral short before the sun sets "
            "on her rooftop studio."
        ),
        "characters": [
            "Aarzoo - spirited dreamer",
            "Kabir - loyal friend",
            "Rhea - bold rival",
        ],
        "length": "medium",
    }


@pytest.fixture()
def minimal_brief() -> dict:
    """A valid english brief with every free-text field left empty."""
    return {
        "schema_id": "ScriptBrief",
        "schema_version": "1.0",
        "title": "Quiet Hours",
        "genre": "Mystery",
        "tone": "Melancholic",
        "language": "english",
        "setting": "",
        "logline": "",
        "characters": [],
        "length": "short",
    }


@pytest.fixture()
def brief_file(tmp_path: Path):
    """Factory fixture: write a dict to a uniquely-named temp JSON file, return the Path."""
    counter = {"n": 0}

    def _make(data: dict) -> Path:
        counter["n"] += 1
        p = tmp_path / f"brief_{counter['n']}.json"
        p.write_text(json.dumps(data), encoding="utf-8")
        return p

    return _make
