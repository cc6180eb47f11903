"""Minimal CLI entrypoint for contributor-resolver."""

from __future__ import annotations

import argparse
import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from typing import Sequence
from uuid import uuid4

import jsonschema

from core.models import ContributorRecord
from core.structured_logging import emit_json_event
from resolution import ContributorsView, build_contributors_view, resolve_username


PROJECT_ROOT = Path(__file__).resolve().parent.parent
SCHEMAS_DIR = PROJECT_ROOT / "schemas"
CONTRIBUTOR_SCHEMA_PATH = SCHEMAS_DIR / "contributor.schema.json"

_PAGE_FLAGS = {"on": True, "off": False}


def _resolution_summary(records: list[ContributorRecord], view: ContributorsView) -> dict[str, Any]:
    """Counts describing what the merge did, for the completion event."""
    handles = sum(1 for item in view.contributors if resolve_username(item))
    return {
        "input_count": len(records),
        "output_count": len(view.contributors),
        "merged_count": len(records) - len(view.contributors) if view.disabled_reason is None else 0,
        "handle_count": handles,
        "disabled_reason": view.disabled_reason,
    }


def _read_json(path: Path, label: str) -> Any:
    """Load a JSON document, failing with a readable message."""
    if not path.exists():
        raise FileNotFoundError(f"{label} file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{label} file is not valid JSON: {path} ({exc.msg})") from exc


def _load_raw_contributors(path: Path) -> list[Any]:
    """Accept a bare JSON array or an object with a `contributors` array."""
    raw = _read_json(path, "Input")
    if isinstance(raw, dict):
        raw = raw.get("contributors")
    if not isinstance(raw, list):
        raise ValueError("Invalid input file: expected a list of contributors")
    return raw


def _load_site_contributors(path: str | None) -> Any:
    """Read the site-level contributors option (bool, mapping, or absent)."""
    if not path:
        return None
    raw = _read_json(Path(path), "Site config")
    if isinstance(raw, dict) and "contributors" in raw:
        return raw["contributors"]
    return raw


def _load_contributor_schema() -> dict[str, Any]:
    return json.loads(CONTRIBUTOR_SCHEMA_PATH.read_text(encoding="utf-8"))


def _validate_schema_file(path: Path) -> None:
    """Validate that a JSON schema file is well-formed and has required top-level keys."""
    data = json.loads(path.read_text(encoding="utf-8"))
    required_keys = {"$schema", "type", "properties", "required"}
    missing = required_keys.difference(data)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ValueError(f"{path.name} missing required schema keys: {missing_str}")
    validator_cls = jsonschema.validators.validator_for(data)
    try:
        validator_cls.check_schema(data)
    except jsonschema.SchemaError as exc:
        raise ValueError(f"{path.name} is not a valid JSON schema: {exc.message}") from exc


def _cmd_validate_schemas(_: argparse.Namespace, run_id: str) -> int:
    """Validate schema files for basic structural correctness."""
    if not CONTRIBUTOR_SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {CONTRIBUTOR_SCHEMA_PATH}")
    _validate_schema_file(CONTRIBUTOR_SCHEMA_PATH)
    emit_json_event(
        "cli_validate_schemas_completed",
        run_id=run_id,
        command="validate-schemas",
        schema_files=[str(CONTRIBUTOR_SCHEMA_PATH)],
    )
    return 0


def _cmd_resolve(args: argparse.Namespace, run_id: str) -> int:
    """Merge a raw contributor list and write the page-facing result."""
    input_path = Path(args.input)
    raw = _load_raw_contributors(input_path)

    records: list[ContributorRecord] = []
    invalid = 0
    for item in raw:
        if not isinstance(item, dict):
            invalid += 1
            continue
        records.append(ContributorRecord.from_mapping(item))

    page_contributors = _PAGE_FLAGS.get(args.page) if args.page else None
    view = build_contributors_view(
        records,
        page_contributors=page_contributors,
        site_contributors=_load_site_contributors(args.site_config),
    )

    schema = _load_contributor_schema()
    payload = view.to_dict()
    for row in payload["contributors"]:
        try:
            jsonschema.validate(row, schema)
        except jsonschema.ValidationError as exc:
            raise ValueError(
                f"Output validation failed for contributor {row.get('name')!r}: {exc.message}"
            ) from exc

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    document = {"generated_at": datetime.now(UTC).isoformat(), **payload}
    output_path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    emit_json_event(
        "cli_resolve_completed",
        run_id=run_id,
        level="info" if invalid == 0 else "warning",
        command="resolve",
        input=str(input_path),
        output=str(output_path),
        mode=view.mode.value,
        invalid=invalid,
        **_resolution_summary(records, view),
    )
    return 0 if invalid == 0 else 1


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser for the contributor-resolver CLI."""
    parser = argparse.ArgumentParser(
        prog="contributor-resolver",
        description="Merge raw commit contributors into one entry per identity",
    )
    parser.add_argument("--version", action="version", version="contributor-resolver 0.1.0")
    parser.add_argument("--run-id", help="Optional explicit run ID for logging")

    subparsers = parser.add_subparsers(dest="command")

    validate_parser = subparsers.add_parser(
        "validate-schemas",
        help="Validate JSON schemas used by contract tests",
    )
    validate_parser.set_defaults(func=_cmd_validate_schemas)

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Deduplicate a raw contributor list",
    )
    resolve_parser.add_argument("--input", required=True, help="Raw contributors JSON path")
    resolve_parser.add_argument("--output", default="contributors.json", help="Output JSON path")
    resolve_parser.add_argument(
        "--page",
        choices=sorted(_PAGE_FLAGS),
        help="Page-level contributors flag (overrides the site option)",
    )
    resolve_parser.add_argument(
        "--site-config",
        help="JSON file holding the site-level contributors option",
    )
    resolve_parser.add_argument(
        "--run-id",
        default=argparse.SUPPRESS,
        help="Optional explicit run ID for logging",
    )
    resolve_parser.set_defaults(func=_cmd_resolve)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Execute CLI and return process exit code; every outcome shares one run_id."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    run_id = args.run_id or str(uuid4())
    try:
        return int(args.func(args, run_id))
    except Exception as exc:
        emit_json_event(
            "cli_error",
            run_id=run_id,
            level="error",
            command=args.command,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return 1


def cli() -> None:
    """Console-script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    raise SystemExit(main())
