"""Tests for the line-by-line and whole-input commands of the catalog."""

from __future__ import annotations

import itertools
from pathlib import Path

import pytest
from conftest import RecordingInput

from linepipe import envsubst, grep, head, tail, uniq, wc
from linepipe.command import ExecutionMode
from linepipe.commands.grep import GrepOption
from linepipe.commands.uniq import UniqOption
from linepipe.commands.wc import WcOption
from linepipe.context import ExecutionContext
from linepipe.errors import InvalidConfigurationError
from linepipe.streams import IteratorInput, ListOutput

LOG = [
    "INFO started",
    "ERROR disk full",
    "warn retrying",
    "error: timeout",
    "INFO done",
]


def _run(command, lines, context: ExecutionContext | None = None) -> list[str]:
    out = ListOutput()
    command.execute(IteratorInput(lines), out, context)
    return out.lines


class TestGrep:
    def test_regex_match(self) -> None:
        assert _run(grep("ERROR|warn"), LOG) == ["ERROR disk full", "warn retrying"]

    def test_ignore_case(self) -> None:
        assert _run(grep("error", GrepOption.IGNORE_CASE), LOG) == [
            "ERROR disk full",
            "error: timeout",
        ]

    def test_invert_match(self) -> None:
        assert _run(grep("INFO", GrepOption.INVERT_MATCH), LOG) == [
            "ERROR disk full",
            "warn retrying",
            "error: timeout",
        ]

    def test_fixed_strings_treats_pattern_literally(self) -> None:
        lines = ["a.c", "abc"]

        assert _run(grep("a.c"), lines) == ["a.c", "abc"]
        assert _run(grep("a.c", GrepOption.FIXED_STRINGS), lines) == ["a.c"]

    def test_line_regexp_requires_whole_line(self) -> None:
        assert _run(grep("INFO", GrepOption.LINE_REGEXP), ["INFO", "INFO done"]) == ["INFO"]

    def test_is_line_by_line(self) -> None:
        assert grep("x").mode is ExecutionMode.LINE_BY_LINE

    def test_invalid_pattern_is_rejected_before_reading(self) -> None:
        source = RecordingInput(LOG)

        with pytest.raises(InvalidConfigurationError, match="Invalid grep pattern"):
            grep("(unclosed").execute(source, ListOutput())

        assert source.reads == 0

    def test_missing_pattern_is_rejected(self) -> None:
        command = grep("x").with_args(grep("x").arguments.with_operands())

        with pytest.raises(InvalidConfigurationError, match="requires a pattern"):
            command.execute(IteratorInput(LOG), ListOutput())


class TestUniq:
    LINES = ["a", "a", "b", "a", "c", "c", "c"]

    def test_collapses_adjacent_duplicates(self) -> None:
        assert _run(uniq(), self.LINES) == ["a", "b", "a", "c"]

    def test_count(self) -> None:
        assert _run(uniq(UniqOption.COUNT), self.LINES) == [
            "      2 a",
            "      1 b",
            "      1 a",
            "      3 c",
        ]

    def test_duplicates_only(self) -> None:
        assert _run(uniq(UniqOption.DUPLICATES_ONLY), self.LINES) == ["a", "c"]

    def test_unique_only(self) -> None:
        assert _run(uniq(UniqOption.UNIQUE_ONLY), self.LINES) == ["b", "a"]

    def test_contradictory_options_are_rejected(self) -> None:
        out = ListOutput()

        with pytest.raises(InvalidConfigurationError):
            uniq(UniqOption.DUPLICATES_ONLY, UniqOption.UNIQUE_ONLY).execute(
                IteratorInput(self.LINES), out
            )

        assert out.lines == []


class TestHeadTail:
    def test_head_default_count(self) -> None:
        lines = [str(n) for n in range(20)]

        assert _run(head(), lines) == lines[:10]

    def test_head_stops_reading_unbounded_input(self) -> None:
        source = IteratorInput(str(n) for n in itertools.count())
        out = ListOutput()

        head(3).execute(source, out)

        assert out.lines == ["0", "1", "2"]

    def test_head_reads_no_more_than_needed(self) -> None:
        source = RecordingInput(["a", "b", "c", "d"])

        head(2).execute(source, ListOutput())

        assert source.reads == 2

    def test_tail(self) -> None:
        assert _run(tail(2), ["a", "b", "c"]) == ["b", "c"]
        assert _run(tail(5), ["a", "b"]) == ["a", "b"]
        assert _run(tail(0), ["a", "b"]) == []

    def test_string_count_is_accepted(self) -> None:
        assert _run(head("1"), ["a", "b"]) == ["a"]

    @pytest.mark.parametrize("count", [-1, "many", 1.5, None])
    def test_invalid_count_is_rejected(self, count: object) -> None:
        source = RecordingInput(["a"])

        with pytest.raises(InvalidConfigurationError, match="count"):
            tail(count).execute(source, ListOutput())  # type: ignore[arg-type]

        assert source.reads == 0

    def test_modes(self) -> None:
        assert head().mode is ExecutionMode.LINE_BY_LINE
        assert tail().mode is ExecutionMode.COMPLETE_INPUT

    def test_to_shell(self) -> None:
        assert head(3).to_shell() == "head -n 3"
        assert tail().to_shell() == "tail -n 10"


class TestWc:
    LINES = ["hello world", "", "one"]

    def test_all_counts_by_default(self) -> None:
        assert _run(wc(), self.LINES) == ["3 3 17"]

    def test_selected_counts_keep_fixed_order(self) -> None:
        assert _run(wc(WcOption.CHARS, WcOption.LINES), self.LINES) == ["3 17"]
        assert _run(wc(WcOption.WORDS), self.LINES) == ["3"]

    def test_empty_input(self) -> None:
        assert _run(wc(), []) == ["0 0 0"]


class TestEnvsubst:
    def test_substitutes_from_context_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("GREETING", "hello")
        monkeypatch.delenv("LINEPIPE_MISSING", raising=False)
        ctx = ExecutionContext(current_directory=tmp_path)

        result = _run(envsubst(), ["$GREETING ${GREETING}!", "[$LINEPIPE_MISSING]"], ctx)

        assert result == ["hello hello!", "[]"]

    def test_restricts_to_named_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("A", "1")
        monkeypatch.setenv("B", "2")

        assert _run(envsubst("A", "$B"), ["$A $B $C"]) == ["1 2 $C"]

    def test_uses_supplied_context(self) -> None:
        class FixedContext(ExecutionContext):
            def env(self) -> dict[str, str]:
                return {"NAME": "linepipe"}

        assert _run(envsubst(), ["I am $NAME"], FixedContext()) == ["I am linepipe"]
