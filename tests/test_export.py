"""Tests for the text exporter and the render / export commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from script_weaver.cli import main
from script_weaver.exporter import render_text
from script_weaver.generator import build_script_document

HINDI_HEADINGS = ["लॉगलाइन", "सार", "संरचना", "दृश्य", "अंतिम नोट"]
ENGLISH_HEADINGS = ["Logline", "Summary", "Structure", "Scenes", "Final Note"]


@pytest.fixture()
def document(dil_se_digital) -> dict:
    return build_script_document(dil_se_digital)


def test_reference_export(document):
    text = render_text(document, "hindi")
    lines = text.split("\n")

    assert lines[0] == "Dil Se Digital"
    assert lines[1] == "Drama · Hopeful"
    for heading in HINDI_HEADINGS:
        assert heading in lines, f"Missing heading line {heading!r}"
    for heading in ENGLISH_HEADINGS:
        assert heading not in lines


def test_sections_in_fixed_order(document):
    lines = render_text(document, "english").split("\n")
    positions = [lines.index(h) for h in ENGLISH_HEADINGS]
    assert positions == sorted(positions)
    for pos in positions:
        assert lines[pos - 1] == "", "Sections must be separated by a blank line"


def test_render_is_deterministic(document):
    assert render_text(document, "hindi") == render_text(document, "hindi")


def test_language_only_changes_headings(document):
    english = render_text(document, "english").split("\n")
    hindi = render_text(document, "hindi").split("\n")
    assert len(english) == len(hindi)
    changed = [(e, h) for e, h in zip(english, hindi) if e != h]
    assert changed == list(zip(ENGLISH_HEADINGS, HINDI_HEADINGS))


def test_dialogue_speaker_upper_cased(document):
    text = render_text(document, "english")
    assert "AARZOO: हम अब भी इसे कर सकते हैं। मुझसे सच बोलो।" in text
    assert "\nAarzoo:" not in text


def test_action_beats_are_plain_lines(document):
    lines = render_text(document, "english").split("\n")
    for scene in document["scenes"]:
        for beat in scene["beats"]:
            if beat["type"] == "action":
                assert beat["content"] in lines


def test_scenes_and_acts_separated_by_blank_lines(document):
    lines = render_text(document, "english").split("\n")
    for act in document["structure"][1:]:
        assert lines[lines.index(act["act"]) - 1] == ""
    for scene in document["scenes"][1:]:
        assert lines[lines.index(scene["heading"]) - 1] == ""


def test_plain_text_single_trailing_newline(document):
    text = render_text(document, "hindi")
    assert text.endswith(document["closing"] + "\n")
    assert not text.endswith("\n\n")
    assert "\r" not in text


def test_placeholder_speaker_rendered(minimal_brief):
    text = render_text(build_script_document(minimal_brief), "english")
    assert "NARRATOR: " in text


# ---------------------------------------------------------------------------
# render / export commands
# ---------------------------------------------------------------------------

def _build(runner: CliRunner, brief_path, out) -> None:
    result = runner.invoke(main, ["build", "--brief", str(brief_path), "--out", str(out)])
    assert result.exit_code == 0, f"build failed: {result.output}"


def test_render_command_stdout_defaults_to_script_language(dil_se_digital, brief_file, tmp_path):
    runner = CliRunner()
    script = tmp_path / "script.json"
    _build(runner, brief_file(dil_se_digital), script)

    result = runner.invoke(main, ["render", "--script", str(script)])
    assert result.exit_code == 0, f"render failed: {result.output}"
    assert result.stdout == render_text(build_script_document(dil_se_digital), "hindi")


def test_render_command_writes_file(dil_se_digital, brief_file, tmp_path):
    runner = CliRunner()
    script = tmp_path / "script.json"
    _build(runner, brief_file(dil_se_digital), script)

    out1 = tmp_path / "a.txt"
    out2 = tmp_path / "b.txt"
    for out in (out1, out2):
        result = runner.invoke(
            main, ["render", "--script", str(script), "--language", "english", "--out", str(out)]
        )
        assert result.exit_code == 0, f"render failed: {result.output}"

    assert out1.read_bytes() == out2.read_bytes()
    assert out1.read_text(encoding="utf-8").split("\n")[3] == "Logline"


def test_render_command_rejects_invalid_script(dil_se_digital, tmp_path):
    document = build_script_document(dil_se_digital)
    document["scenes"][0]["beats"] = []
    p = tmp_path / "script.json"
    p.write_text(json.dumps(document), encoding="utf-8")

    result = CliRunner().invoke(main, ["render", "--script", str(p)])
    assert result.exit_code == 1
    assert result.stderr.startswith("ERROR: invalid ScriptDocument")


def test_export_command_names_file_after_title(dil_se_digital, brief_file, tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        main, ["export", "--brief", str(brief_file(dil_se_digital)), "--out-dir", str(tmp_path / "out")]
    )
    assert result.exit_code == 0, f"export failed: {result.output}"

    out = tmp_path / "out" / "dil_se_digital.txt"
    assert result.stdout.strip() == str(out)
    text = out.read_text(encoding="utf-8")
    assert text.split("\n")[0] == "Dil Se Digital"
    assert "सार" in text.split("\n")


def test_export_command_language_override(dil_se_digital, brief_file, tmp_path):
    result = CliRunner().invoke(
        main,
        ["export", "--brief", str(brief_file(dil_se_digital)), "--out-dir", str(tmp_path), "--language", "english"],
    )
    assert result.exit_code == 0, f"export failed: {result.output}"
    lines = (tmp_path / "dil_se_digital.txt").read_text(encoding="utf-8").split("\n")
    assert "Summary" in lines
    assert "सार" not in lines
