"""CLI entry point for script-weaver."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from script_weaver.compiler import CompileError, parse_brief_file
from script_weaver.exporter import render_text
from script_weaver.generator import build_script_document
from script_weaver.phrases import LANGUAGES
from script_weaver.validator import (
    ValidationError,
    validate_brief,
    validate_brief_dict,
    validate_script,
    validate_script_output,
)
from script_weaver.writer import export_filename, write_json, write_text

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log debug output to stderr",
)
def main(verbose: bool) -> None:
    """script-weaver: deterministic screenplay builder."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


@main.command("compile")
@click.option(
    "--notes",
    "notes_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to brief notes text file",
)
@click.option(
    "--out",
    "out_path",
    required=True,
    type=click.Path(),
    help="Output path for Brief.json",
)
def compile_brief(notes_path: str, out_path: str) -> None:
    """Compile a brief notes file into a validated Brief.json."""
    # ── 1. Parse notes text → brief dict ─────────────────────────────────────
    try:
        brief = parse_brief_file(notes_path)
    except CompileError as exc:
        click.echo(f"ERROR: {exc}", err=True)
        sys.exit(1)

    # ── 2. Validate in-memory against ScriptBrief contract ───────────────────
    try:
        validate_brief_dict(brief)
    except ValidationError as exc:
        click.echo(f"ERROR: compiled ScriptBrief violates contract: {exc}", err=True)
        sys.exit(1)

    write_json(brief, out_path)
    logger.debug("Compiled %s -> %s", notes_path, out_path)
    sys.exit(0)


def _build_checked(brief_path: str) -> dict:
    """Validate the brief at *brief_path*, build it and validate the result.

    Exits 1 with an ERROR line on stderr when either side violates its contract.
    """
    try:
        brief = validate_brief(brief_path)
    except ValidationError as exc:
        logger.debug("Brief rejected: %s", exc)
        click.echo("ERROR: invalid ScriptBrief", err=True)
        sys.exit(1)

    document = build_script_document(brief)

    try:
        validate_script_output(document)
    except ValidationError:
        click.echo("ERROR: generated script violates contract", err=True)
        sys.exit(1)

    return document


@main.command("build")
@click.option(
    "--brief",
    "brief_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to Brief.json",
)
@click.option(
    "--out",
    "out_path",
    required=True,
    type=click.Path(),
    help="Output path for Script.json",
)
def build(brief_path: str, out_path: str) -> None:
    """Build a Script.json from a Brief.json."""
    document = _build_checked(brief_path)
    write_json(document, out_path)
    sys.exit(0)


@main.command("render")
@click.option(
    "--script",
    "script_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to Script.json",
)
@click.option(
    "--language",
    type=click.Choice(LANGUAGES),
    default=None,
    help="Heading language (defaults to the script's own language)",
)
@click.option(
    "--out",
    "out_path",
    type=click.Path(),
    default=None,
    help="Write text here instead of stdout",
)
def render(script_path: str, language: str | None, out_path: str | None) -> None:
    """Render a Script.json as plain text."""
    try:
        document = validate_script(script_path)
    except ValidationError as exc:
        click.echo(f"ERROR: invalid ScriptDocument: {exc}", err=True)
        sys.exit(1)

    text = render_text(document, language or document["language"])

    if out_path is None:
        click.echo(text, nl=False)
    else:
        write_text(text, out_path)
    sys.exit(0)


@main.command("export")
@click.option(
    "--brief",
    "brief_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to Brief.json",
)
@click.option(
    "--out-dir",
    "out_dir",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Directory for the exported .txt file",
)
@click.option(
    "--language",
    type=click.Choice(LANGUAGES),
    default=None,
    help="Heading language (defaults to the brief's language)",
)
def export(brief_path: str, out_dir: str, language: str | None) -> None:
    """Build a Brief.json and write its text export named after the title."""
    document = _build_checked(brief_path)
    text = render_text(document, language or document["language"])

    out = Path(out_dir) / export_filename(document["title_page"]["title"])
    write_text(text, str(out))
    click.echo(str(out))
    sys.exit(0)
