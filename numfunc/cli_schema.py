# numfunc/cli_schema.py
"""
The one-line answer to ``numfunc.seq_run_cli --schema``.

    numfunc-seq-run.v1 docs/seq_run_schema.md docs/schemas/seq_run_schema.json

Scripts that consume the runner's JSON read this line to learn which payload
version they will get and where its human doc and JSON Schema live, relative
to the repo root. Splitting on single spaces must therefore always give
exactly three fields, so none of them may contain whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SchemaTriplet:
    """Parsed --schema line: payload tag, doc path, JSON Schema path."""
    tag: str
    doc_md: str
    schema_json: str


def _check_token(name: str, s: str) -> str:
    # single non-empty token, no whitespace anywhere
    if not isinstance(s, str):
        raise TypeError(f"{name} must be str, got {type(s).__name__}")
    if not s or any(ch.isspace() for ch in s):
        raise ValueError(f"{name} must be a single non-empty token: {s!r}")
    return s


def schema_triplet(tag: str, doc_md: str, schema_json: str) -> str:
    """Format the --schema line: "tag doc_md schema_json", no trailing newline."""
    return " ".join(
        (
            _check_token("tag", tag),
            _check_token("doc_md", doc_md),
            _check_token("schema_json", schema_json),
        )
    )


def print_schema_triplet(tag: str, doc_md: str, schema_json: str) -> None:
    print(schema_triplet(tag, doc_md, schema_json), flush=True)


def parse_schema_triplet(line: str) -> SchemaTriplet:
    """
    Strict parser for a --schema line.

    Accepts an optional single trailing newline. Rejects extra fields,
    doubled separators and embedded whitespace.
    """
    if not isinstance(line, str):
        raise TypeError(f"line must be str, got {type(line).__name__}")

    s = line[:-1] if line.endswith("\n") else line
    parts = s.split(" ")
    if len(parts) != 3:
        raise ValueError(f"expected exactly 3 fields separated by single spaces: {line!r}")

    tag, doc_md, schema_json = parts
    return SchemaTriplet(
        tag=_check_token("tag", tag),
        doc_md=_check_token("doc_md", doc_md),
        schema_json=_check_token("schema_json", schema_json),
    )
