"""
ulidgen - generate and inspect ULIDs from the command line.

Usage:
    ulidgen                       one ULID for the current time
    ulidgen -n 5 --lowercase      five monotonic ULIDs, lowercase
    ulidgen --timestamp 1469922850259
    ulidgen --datetime 2016-07-30T23:54:10.259Z
    ulidgen --inspect 01ARZ3NDEKTSV4RRFFQ69G5FAV
    ulidgen config
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import typer

from ulidgen.cli.commands import config, run_generate, run_inspect
from ulidgen.cli.ui import fail
from ulidgen.config import load_config
from ulidgen.timestamps import TimestampResolutionError, resolve_timestamp

__version__ = "0.1.0"

app = typer.Typer(
    name="ulidgen",
    help="A command-line ULID generator, like uuidgen but for ULIDs.",
    add_completion=False,
    invoke_without_command=True,
)

app.command("config")(config)


def _version_callback(value: bool) -> None:
    if value:
        print(f"ulidgen {__version__}")
        raise typer.Exit()


class OnRegression(str, Enum):
    """Choices for --on-regression."""

    CLAMP = "clamp"
    REJECT = "reject"


def _given(ctx: typer.Context, name: str) -> bool:
    # typer may vendor its own click; match the source by name.
    source = ctx.get_parameter_source(name)
    return source is not None and source.name == "COMMANDLINE"


@app.callback()
def callback(
    ctx: typer.Context,
    inspect: Optional[str] = typer.Option(
        None,
        "--inspect",
        help="Parse and display the components of an existing ULID.",
    ),
    timestamp: Optional[int] = typer.Option(
        None,
        "--timestamp",
        min=0,
        help="Pin the timestamp to a Unix epoch value in milliseconds.",
    ),
    datetime_text: Optional[str] = typer.Option(
        None,
        "--datetime",
        help="Pin the timestamp to an RFC 3339 datetime (offset required).",
    ),
    count: int = typer.Option(
        1,
        "--count",
        "-n",
        min=0,
        help="Number of ULIDs to generate.",
    ),
    lowercase: bool = typer.Option(
        False,
        "--lowercase/--no-lowercase",
        "-l",
        help="Output in lowercase (overrides the config file either way).",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print --inspect output as JSON.",
    ),
    on_regression: Optional[OnRegression] = typer.Option(
        None,
        "--on-regression",
        case_sensitive=False,
        help="When a pinned timestamp is older than the previous ULID: clamp or reject.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Generate ULIDs, or inspect one with --inspect."""
    if ctx.invoked_subcommand is not None:
        return

    if inspect is not None:
        for name, flag in (
            ("timestamp", "--timestamp"),
            ("datetime_text", "--datetime"),
            ("count", "--count"),
            ("lowercase", "--lowercase"),
        ):
            if _given(ctx, name):
                raise typer.BadParameter(f"cannot be combined with {flag}", param_hint="--inspect")
        run_inspect(inspect, json_output=json_output)
        return

    if json_output:
        raise typer.BadParameter("only applies together with --inspect", param_hint="--json")
    if timestamp is not None and datetime_text is not None:
        raise typer.BadParameter("cannot be combined with --datetime", param_hint="--timestamp")

    try:
        pinned = resolve_timestamp(timestamp, datetime_text)
    except TimestampResolutionError as exc:
        raise fail(str(exc)) from exc

    settings = load_config()
    run_generate(
        count=count if _given(ctx, "count") else settings.count,
        timestamp_ms=pinned,
        lowercase=lowercase if _given(ctx, "lowercase") else settings.lowercase,
        on_regression=on_regression.value if on_regression else settings.on_regression,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
