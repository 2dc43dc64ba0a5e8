from __future__ import annotations

"""
numfunc sequence-run CLI

Runs apply / filter / reduce with a registered named function over a JSON list
of ints and emits a JSON payload.

Contract: emits JSON with schema tag + schema_doc.

    python3 -m numfunc.seq_run_cli apply square "[1,2,3,4]" --pretty
    python3 -m numfunc.seq_run_cli filter is-even --stdin < xs.json
    python3 -m numfunc.seq_run_cli reduce sum "[1,2,3,4]" --initial 0
"""

import argparse
import json
import sys
from typing import Any, List, Optional

from numfunc.cli_schema import print_schema_triplet
from numfunc.op_registry import list_fold_names, list_predicate_names, list_unary_names
from numfunc.seq_run import KINDS, SCHEMA, SCHEMA_DOC, SCHEMA_JSON, run_seq_json


def _parse_int_list_from_json_text(text: str) -> List[int]:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Input must be JSON. Parse error: {e}") from e

    if not isinstance(obj, list):
        raise ValueError("Input JSON must be a list of integers (e.g. [1,2,3]).")

    out: List[int] = []
    for i, v in enumerate(obj):
        # bool is an int subclass; reject it explicitly
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
    file_text: Optional[str] = None
    if args.input_file is not None:
        # argparse already opened it; close it whichever source wins
        with args.input_file as fp:
            file_text = fp.read()

    if args.input_json is not None:
        return _parse_int_list_from_json_text(args.input_json)

    if file_text is not None:
        return _parse_int_list_from_json_text(file_text)

    if args.stdin:
        return _parse_int_list_from_json_text(sys.stdin.read())

    raise ValueError("No input provided. Use positional JSON, --input-file, or --stdin.")


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def _print_names() -> None:
    for kind, names in (
        ("apply", list_unary_names()),
        ("filter", list_predicate_names()),
        ("reduce", list_fold_names()),
    ):
        for name in names:
            print(f"{kind} {name}")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="Run apply/filter/reduce with a named function on a JSON list of ints and emit JSON."
    )
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc paths and exit.")
    ap.add_argument("--list", action="store_true", help="List registered function names per kind and exit.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    ap.add_argument("--stdin", action="store_true", help="Read input JSON from stdin.")
    ap.add_argument(
        "--input-file",
        type=argparse.FileType("r", encoding="utf-8"),
        default=None,
        help="Read input JSON from a file (expects a JSON list of ints).",
    )
    ap.add_argument("--initial", type=int, default=None, help="Initial accumulator for reduce (default 0).")

    ap.add_argument("kind", nargs="?", choices=KINDS, help="One of: apply, filter, reduce")
    ap.add_argument("op", nargs="?", help="Registered function name (e.g. square, is-even, sum)")
    ap.add_argument(
        "input_json",
        nargs="?",
        default=None,
        help='Input JSON list of ints, e.g. "[1,2,3]". Optional if using --stdin/--input-file.',
    )

    args = ap.parse_args(argv)

    if args.schema:
        print_schema_triplet(SCHEMA, SCHEMA_DOC, SCHEMA_JSON)
        return 0

    if args.list:
        _print_names()
        return 0

    if not args.kind or not args.op:
        ap.error("kind and op are required unless --schema or --list is used")

    if args.initial is not None and args.kind != "reduce":
        ap.error("--initial only applies to reduce")

    try:
        xs = _read_input_json(args)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    payload = run_seq_json(args.kind, args.op, xs, initial=args.initial)
    _emit(payload, pretty=bool(args.pretty))
    return 0 if payload["ok"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
