"""Flat text rendering of a ScriptDocument.

One-way serialization: sections are separated by a blank line, as are the
acts inside Structure and the scenes inside Scenes.  There is no parser for
this format.
"""

from __future__ import annotations

import logging

from script_weaver.phrases import PHRASES

logger = logging.getLogger(__name__)


def render_text(document: dict, language: str) -> str:
    """Render *document* as plain text with *language* section headings.

    The first line is always the document title.  The result ends with a
    single ``"\\n"``.
    """
    headings = PHRASES[language]["headings"]
    page = document["title_page"]

    sections = [
        "\n".join([page["title"], f"{page['genre']} · {page['tone']}"]),
        _section(headings["logline"], [[page["logline"]]]),
        _section(headings["summary"], [[document["summary"]]]),
        _section(
            headings["structure"],
            [[act["act"], act["focus"], act["stakes"]] for act in document["structure"]],
        ),
        _section(
            headings["scenes"],
            [
                [scene["heading"], scene["description"], *(_beat_line(b) for b in scene["beats"])]
                for scene in document["scenes"]
            ],
        ),
        _section(headings["closing"], [[document["closing"]]]),
    ]

    text = "\n\n".join(sections) + "\n"
    logger.debug("Rendered %r in %s (%d lines)", page["title"], language, text.count("\n"))
    return text


def _section(heading: str, blocks: list[list[str]]) -> str:
    return heading + "\n" + "\n\n".join("\n".join(lines) for lines in blocks)


def _beat_line(beat: dict) -> str:
    if beat["type"] == "dialogue":
        return f"{beat['speaker'].upper()}: {beat['content']}"
    return beat["content"]
