from __future__ import annotations

import datetime
import hashlib
import json
from typing import Any, Dict, List, Optional, Tuple

from .higher import apply, filter, reduce
from .op_registry import get_fold, get_predicate, get_unary


SCHEMA = "numfunc-seq-run.v1"
SCHEMA_DOC = "docs/seq_run_schema.md"
SCHEMA_JSON = "docs/schemas/seq_run_schema.json"

KINDS = ("apply", "filter", "reduce")


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.UTC).isoformat(timespec="seconds").replace("+00:00", "Z")


def _hash_inputs(kind: str, op: str, input_list: List[int], initial: Optional[int]) -> str:
    # Determinism hash should be simple and stable across platforms.
    blob = json.dumps(
        {"kind": kind, "op": op, "input": input_list, "initial": initial},
        sort_keys=True,
        separators=(",", ":"),
    ).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()


def run_seq(
    kind: str,
    op: str,
    input_list: List[int],
    initial: Optional[int] = None,
) -> Tuple[Any, List[str]]:
    """
    Canonical execution seam: run apply/filter/reduce with a named function.

    Returns:
        (output_or_none, warnings)
    """
    warnings: List[str] = []

    if kind == "apply":
        fn = get_unary(op)
    elif kind == "filter":
        fn = get_predicate(op)
    elif kind == "reduce":
        fn = get_fold(op)
    else:
        warnings.append(f"unknown kind {kind!r}; expected one of {', '.join(KINDS)}")
        return None, warnings

    if fn is None:
        warnings.append(f"no {kind} function named {op!r} is registered")
        return None, warnings

    try:
        if kind == "apply":
            return apply(input_list, fn), warnings
        if kind == "filter":
            return filter(input_list, fn), warnings
        return reduce(input_list, 0 if initial is None else initial, fn), warnings
    except Exception as e:
        warnings.append(f"{type(e).__name__}: {e}")
        return None, warnings


def run_seq_json(
    kind: str,
    op: str,
    input_list: List[int],
    initial: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Canonical JSON output contract for sequence runs.
    """
    now = _utc_now_z()
    # reduce always folds from a concrete value; other kinds take none
    if kind == "reduce":
        initial = 0 if initial is None else initial
    else:
        initial = None
    inputs_hash = _hash_inputs(kind, op, input_list, initial)

    out, warnings = run_seq(kind, op, input_list, initial)
    ok = out is not None

    if not ok and kind != "reduce":
        out = []

    payload: Dict[str, Any] = {
        "schema": SCHEMA,
        "schema_doc": SCHEMA_DOC,
        "kind": kind,
        "op": op,
        "input": input_list,
        "output": out,
        "ok": ok,
        "warnings": warnings,
        "meta": {
            "tool": "seq_run",
            "generated_at": now,
            "determinism": {
                "inputs_hash": inputs_hash,
            },
        },
    }
    if kind == "reduce":
        payload["initial"] = initial
    return payload
