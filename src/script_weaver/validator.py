"""Input validation for ScriptBrief files and output validation against contracts."""

from __future__ import annotations

import json
from pathlib import Path

import jsonschema

# Contract schemas ship inside the package: src/script_weaver/schemas/
_SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"
_BRIEF_SCHEMA_PATH = _SCHEMAS_DIR / "ScriptBrief.v1.json"
_SCRIPT_SCHEMA_PATH = _SCHEMAS_DIR / "ScriptDocument.v1.json"


class ValidationError(Exception):
    """Raised when a ScriptBrief fails validation or a ScriptDocument violates the contract."""


def _load_schema(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def _read_json(path: str) -> dict:
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ValidationError(f"Cannot read file: {exc}") from exc

    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid JSON: {exc}") from exc


def validate_brief_dict(data: dict) -> dict:
    """Validate an in-memory ScriptBrief dict against the contract schema and semantic rules.

    Schema-level validation (ScriptBrief.v1.json) runs first.
    Semantic rules below catch constraints that JSON Schema cannot express.

    Returns *data* unchanged on success.
    Raises ValidationError on any problem.
    """
    # 1. Schema validation against ScriptBrief.v1.json contract
    try:
        jsonschema.validate(data, _load_schema(_BRIEF_SCHEMA_PATH))
    except jsonschema.ValidationError as exc:
        raise ValidationError(f"ScriptBrief violates contract schema: {exc.message}") from exc

    # ── Semantic rules (constraints JSON Schema cannot express) ───────────────

    # 2. title is not whitespace-only
    if not data["title"].strip():
        raise ValidationError("'title' must be a non-empty string")

    # 3. character descriptors are not whitespace-only
    for i, descriptor in enumerate(data["characters"]):
        if not descriptor.strip():
            raise ValidationError(f"characters[{i}] must be a non-empty string")

    return data


def validate_brief(path: str) -> dict:
    """Read a ScriptBrief JSON file, then validate it via validate_brief_dict.

    Returns the parsed brief dict on success.
    Raises ValidationError on any problem.
    """
    return validate_brief_dict(_read_json(path))


def validate_script_output(script: dict) -> None:
    """Validate a ScriptDocument dict against the ScriptDocument.v1.json contract schema.

    Raises ValidationError if the document violates the schema or has a
    scene count that does not match its act count.
    """
    try:
        jsonschema.validate(script, _load_schema(_SCRIPT_SCHEMA_PATH))
    except jsonschema.ValidationError as exc:
        raise ValidationError(f"ScriptDocument violates contract: {exc.message}") from exc

    if len(script["scenes"]) != len(script["structure"]):
        raise ValidationError(
            f"ScriptDocument has {len(script['scenes'])} scenes for "
            f"{len(script['structure'])} acts"
        )


def validate_script(path: str) -> dict:
    """Read a ScriptDocument JSON file and validate it via validate_script_output.

    Returns the parsed document dict on success.
    """
    script = _read_json(path)
    validate_script_output(script)
    return script
