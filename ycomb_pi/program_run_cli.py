"""
ycomb Program Run CLI

Runs a named program from program_registry on a JSON list of ints and
emits a single JSON object.

Contract: emits JSON with schema tag + schema_doc.
"""

from __future__ import annotations

import argparse
import datetime
import hashlib
import json
import sys
from typing import Any, List, Optional

from ycomb_pi import call_coverage
from ycomb_pi.api import run_named_program
from ycomb_pi.program_registry import list_program_names


SCHEMA_TAG = "ycomb-program-run.v1"
SCHEMA_DOC = "docs/schemas/program_run_schema.json"


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(program: str, xs: List[int]) -> str:
    payload = json.dumps({"program": program, "input": xs}, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _parse_int_list_from_json_text(text: str) -> List[int]:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Input must be JSON. Parse error: {e}") from e

    if not isinstance(obj, list):
        raise ValueError("Input JSON must be a list of integers (e.g. [5]).")

    out: List[int] = []
    for i, v in enumerate(obj):
        # bool is an int subclass, but we don't want True/False silently.
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"Input[{i}] is not an integer: {v!r}")
        out.append(v)
    return out


def _read_input_json(args: argparse.Namespace) -> List[int]:
    """
    Priority:
      1) positional input_json (if provided)
      2) --input-file
      3) --stdin
    """
    if args.input_json is not None:
        return _parse_int_list_from_json_text(args.input_json)

    if args.input_file is not None:
        with args.input_file as fh:
            return _parse_int_list_from_json_text(fh.read())

    if args.stdin:
        return _parse_int_list_from_json_text(sys.stdin.read())

    raise ValueError("No input provided. Use positional JSON, --input-file, or --stdin.")


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run a named ycomb program on a JSON list of ints and emit JSON.")
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc path and exit.")
    ap.add_argument("--list", action="store_true", help="List known program names and exit.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    ap.add_argument("--stdin", action="store_true", help="Read input JSON from stdin.")
    ap.add_argument(
        "--input-file",
        type=argparse.FileType("r", encoding="utf-8"),
        default=None,
        help="Read input JSON from a file (expects a JSON list of ints).",
    )
    ap.add_argument(
        "--count-calls",
        action="store_true",
        help="Count recursive generator calls and report them under meta.calls.",
    )

    ap.add_argument("program", nargs="?", help="Registered program name (e.g. fibonacci)")
    ap.add_argument(
        "input_json",
        nargs="?",
        default=None,
        help='Input JSON list of ints, e.g. "[5]". Optional if using --stdin/--input-file.',
    )

    args = ap.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_DOC}")
        return 0

    if args.list:
        for name in list_program_names():
            print(name)
        return 0

    if not args.program:
        ap.error("program is required unless --schema or --list is used")

    try:
        xs = _read_input_json(args)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    # Counts already collected (e.g. a session-wide run) are left intact;
    # meta.calls reports only what this run added.
    was_counting = call_coverage.is_enabled()
    calls_before = call_coverage.get_stats()["generators"]
    if args.count_calls:
        call_coverage.enable()

    warnings: List[str] = []
    output: Any = None
    try:
        output = run_named_program(args.program, xs)
        ok = True
    except (KeyError, TypeError, ValueError, RecursionError) as e:
        ok = False
        warnings.append(f"{type(e).__name__}: {e}")
    finally:
        if args.count_calls and not was_counting:
            call_coverage.disable()

    meta: dict[str, Any] = {
        "tool": "program_run_cli",
        "generated_at": _utc_now_z(),
        "determinism": {
            "inputs_hash": _inputs_hash(args.program, xs),
        },
    }
    if args.count_calls:
        calls_after = call_coverage.get_stats()["generators"]
        meta["calls"] = {
            name: n - calls_before.get(name, 0)
            for name, n in calls_after.items()
            if n > calls_before.get(name, 0)
        }

    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "program": args.program,
        "input": xs,
        "output": output,
        "ok": bool(ok),
        "warnings": warnings,
        "meta": meta,
    }

    _emit(payload, pretty=bool(args.pretty))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
