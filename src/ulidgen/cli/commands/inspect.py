"""Inspect mode: decode an existing ULID and show its components."""

from __future__ import annotations

import json

from ulidgen.cli.ui import console, fail
from ulidgen.core import UlidError, inspect_ulid


def run_inspect(text: str, json_output: bool = False) -> None:
    try:
        report = inspect_ulid(text)
    except UlidError as exc:
        raise fail(f"parse `{text}` as ULID: {exc}") from exc

    if json_output:
        print(json.dumps(report.to_dict(), indent=2))
        return

    rows = [
        ("ULID:", report.ulid),
        ("Timestamp:", report.datetime or "[dim]beyond year 9999[/dim]"),
        ("Unix ms:", str(report.timestamp_ms)),
        ("Random:", report.random_hex),
    ]
    for label, value in rows:
        console.print(f"[bold]{label:<10}[/bold] {value}", highlight=False)
