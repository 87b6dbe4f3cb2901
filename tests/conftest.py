from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point ULIDGEN_CONFIG at a per-test file so user config never leaks in."""
    config_path = tmp_path / "ulidgen" / "config.toml"
    monkeypatch.setenv("ULIDGEN_CONFIG", str(config_path))
    yield config_path


@pytest.fixture()
def write_config(isolated_config: Path) -> Callable[[str], Path]:
    def _write(body: str) -> Path:
        isolated_config.parent.mkdir(parents=True, exist_ok=True)
        isolated_config.write_text(body, encoding="utf-8")
        return isolated_config

    return _write


class CountingRandom:
    """Deterministic random source: 1, 2, 3, ... as big-endian bytes."""

    def __init__(self, start: int = 1) -> None:
        self.next_value = start
        self.calls = 0

    def __call__(self, n: int) -> bytes:
        self.calls += 1
        value = self.next_value
        self.next_value += 1
        return value.to_bytes(n, "big")


@pytest.fixture()
def counting_random() -> CountingRandom:
    return CountingRandom()
