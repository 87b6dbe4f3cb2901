"""CLI tests for the ulidgen typer app."""

from __future__ import annotations

import json
import re

import pytest
from typer.testing import CliRunner

from ulidgen import __version__, app
from ulidgen.core import codec

runner = CliRunner()

ULID_UPPER = re.compile(r"^[0-9A-HJKMNP-TV-Z]{26}$")
ULID_LOWER = re.compile(r"^[0-9a-hjkmnp-tv-z]{26}$")
KNOWN_ULID = "01ARZ3NDEKTSV4RRFFQ69G5FAV"


def _lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


class TestGenerate:
    def test_single_ulid(self) -> None:
        result = runner.invoke(app, [])
        assert result.exit_code == 0, result.output
        lines = _lines(result.stdout)
        assert len(lines) == 1
        assert ULID_UPPER.match(lines[0])

    def test_count_is_strictly_increasing(self) -> None:
        result = runner.invoke(app, ["-n", "50"])
        assert result.exit_code == 0, result.output
        lines = _lines(result.stdout)
        assert len(lines) == 50
        assert lines == sorted(lines)
        assert len(set(lines)) == 50

    def test_count_zero_prints_nothing(self) -> None:
        result = runner.invoke(app, ["--count", "0"])
        assert result.exit_code == 0
        assert _lines(result.stdout) == []

    def test_negative_count_is_usage_error(self) -> None:
        result = runner.invoke(app, ["--count", "-1"])
        assert result.exit_code == 2

    def test_lowercase(self) -> None:
        result = runner.invoke(app, ["-l", "-n", "3"])
        assert result.exit_code == 0
        assert all(ULID_LOWER.match(line) for line in _lines(result.stdout))

    def test_pinned_timestamp_same_millisecond_increments(self) -> None:
        result = runner.invoke(app, ["--timestamp", "1469922850259", "-n", "3"])
        assert result.exit_code == 0, result.output
        values = [codec.decode(line) for line in _lines(result.stdout)]
        fields = [codec.split(value) for value in values]
        assert {ts for ts, _ in fields} == {1469922850259}
        assert fields[1][1] - fields[0][1] == 1
        assert fields[2][1] - fields[1][1] == 1
        assert all(line.startswith("01ARZ3NDEK") for line in _lines(result.stdout))

    def test_pinned_datetime(self) -> None:
        result = runner.invoke(app, ["--datetime", "2016-07-30T23:54:10.259Z"])
        assert result.exit_code == 0, result.output
        assert _lines(result.stdout)[0].startswith("01ARZ3NDEK")

    def test_datetime_before_epoch(self) -> None:
        result = runner.invoke(app, ["--datetime", "1969-07-20T20:17:40Z"])
        assert result.exit_code == 1
        assert "before the Unix epoch" in result.output

    def test_unparseable_datetime(self) -> None:
        result = runner.invoke(app, ["--datetime", "not-a-date"])
        assert result.exit_code == 1
        assert "RFC 3339" in result.output

    def test_timestamp_overflow(self) -> None:
        result = runner.invoke(app, ["--timestamp", str(codec.MAX_TIMESTAMP + 1)])
        assert result.exit_code == 1
        assert "48-bit" in result.output

    def test_max_timestamp(self) -> None:
        result = runner.invoke(app, ["--timestamp", str(codec.MAX_TIMESTAMP)])
        assert result.exit_code == 0
        assert _lines(result.stdout)[0].startswith("7ZZZZZZZZZ")

    def test_timestamp_and_datetime_conflict(self) -> None:
        result = runner.invoke(
            app, ["--timestamp", "1", "--datetime", "1970-01-01T00:00:00Z"]
        )
        assert result.exit_code == 2

    def test_json_requires_inspect(self) -> None:
        result = runner.invoke(app, ["--json"])
        assert result.exit_code == 2

    def test_invalid_regression_policy(self) -> None:
        result = runner.invoke(app, ["--on-regression", "ignore"])
        assert result.exit_code == 2
        assert "ignore" in result.output

    @pytest.mark.parametrize("policy", ["reject", "REJECT", "clamp"])
    def test_regression_policy_choices(self, policy: str) -> None:
        result = runner.invoke(app, ["--on-regression", policy, "--timestamp", "5"])
        assert result.exit_code == 0, result.output
        assert len(_lines(result.stdout)) == 1

    def test_rfc3339_basic_format_is_rejected(self) -> None:
        result = runner.invoke(app, ["--datetime", "20160730T235410Z"])
        assert result.exit_code == 1
        assert "RFC 3339" in result.output


class TestConfigDefaults:
    def test_config_supplies_count_and_case(self, write_config) -> None:
        write_config("[generate]\ncount = 4\nlowercase = true\n")
        result = runner.invoke(app, [])
        assert result.exit_code == 0, result.output
        lines = _lines(result.stdout)
        assert len(lines) == 4
        assert all(ULID_LOWER.match(line) for line in lines)

    def test_flags_override_config(self, write_config) -> None:
        write_config("[generate]\ncount = 4\nlowercase = true\n")
        result = runner.invoke(app, ["-n", "2"])
        lines = _lines(result.stdout)
        assert len(lines) == 2
        assert all(ULID_LOWER.match(line) for line in lines)

    def test_no_lowercase_overrides_config(self, write_config) -> None:
        write_config("[generate]\nlowercase = true\n")
        result = runner.invoke(app, ["--no-lowercase", "-n", "2"])
        assert result.exit_code == 0, result.output
        lines = _lines(result.stdout)
        assert len(lines) == 2
        assert all(ULID_UPPER.match(line) for line in lines)

    def test_explicit_count_beats_config_default(self, write_config) -> None:
        write_config("[generate]\ncount = 4\n")
        result = runner.invoke(app, ["--count", "1"])
        assert len(_lines(result.stdout)) == 1

    def test_config_command(self, write_config) -> None:
        write_config("[generate]\ncount = 7\n")
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0, result.output
        assert "count" in result.stdout
        assert "7" in result.stdout
        assert "on_regression" in result.stdout
        assert "clamp" in result.stdout

    def test_config_path(self, isolated_config) -> None:
        result = runner.invoke(app, ["config", "--path"])
        assert result.exit_code == 0
        assert result.stdout.strip() == str(isolated_config)

    def test_config_subcommand_does_not_generate(self) -> None:
        result = runner.invoke(app, ["config", "--path"])
        assert not any(ULID_UPPER.match(line) for line in _lines(result.stdout))


class TestInspect:
    def test_human_output(self) -> None:
        result = runner.invoke(app, ["--inspect", KNOWN_ULID])
        assert result.exit_code == 0, result.output
        random = codec.split(codec.decode(KNOWN_ULID))[1]
        lines = _lines(result.stdout)
        assert lines[0] == f"ULID:      {KNOWN_ULID}"
        assert lines[1] == "Timestamp: 2016-07-30T23:54:10.259+00:00"
        assert lines[2] == "Unix ms:   1469922850259"
        assert lines[3] == f"Random:    0x{random:020x}"

    def test_lowercase_input(self) -> None:
        result = runner.invoke(app, ["--inspect", KNOWN_ULID.lower()])
        assert result.exit_code == 0
        assert KNOWN_ULID in result.stdout

    def test_json_output(self) -> None:
        result = runner.invoke(app, ["--inspect", KNOWN_ULID, "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["ulid"] == KNOWN_ULID
        assert payload["timestamp_ms"] == 1469922850259
        assert payload["datetime"] == "2016-07-30T23:54:10.259+00:00"

    @pytest.mark.parametrize("text", ["", "01ARZ3NDEKTSV4RRFFQ69G5FA", "I" * 26, "8" + "0" * 25])
    def test_invalid_input(self, text: str) -> None:
        result = runner.invoke(app, ["--inspect", text])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "as ULID" in result.output

    @pytest.mark.parametrize(
        "extra",
        [
            ["--timestamp", "1"],
            ["--datetime", "1970-01-01T00:00:00Z"],
            ["-n", "2"],
            ["-l"],
            ["--no-lowercase"],
        ],
    )
    def test_conflicting_flags(self, extra: list[str]) -> None:
        result = runner.invoke(app, ["--inspect", KNOWN_ULID, *extra])
        assert result.exit_code == 2
        assert "--inspect" in result.output


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_help_lists_options() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for option in ["--inspect", "--timestamp", "--datetime", "--count", "--lowercase"]:
        assert option in result.stdout
