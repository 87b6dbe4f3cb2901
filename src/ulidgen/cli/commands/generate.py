"""Generate mode: print one or more monotonic ULIDs."""

from __future__ import annotations

import logging

from ulidgen.cli.ui import fail
from ulidgen.core import MonotonicGenerator, UlidError

logger = logging.getLogger(__name__)


def run_generate(
    count: int,
    timestamp_ms: int | None,
    lowercase: bool,
    on_regression: str,
) -> None:
    """Print ``count`` ULIDs from a single generator, one per line.

    Values already printed stay printed when a later one fails.
    """
    generator = MonotonicGenerator(on_regression=on_regression)  # type: ignore[arg-type]

    for index in range(count):
        try:
            ulid = generator.generate(timestamp_ms)
        except UlidError as exc:
            logger.debug("Generation stopped after %d of %d ULIDs", index, count)
            raise fail(f"generate ULID: {exc}") from exc
        print(ulid.to_str(lowercase=lowercase))
