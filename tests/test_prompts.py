"""Tests for the interactive version prompt.

Operator answers are scripted through the ask/confirm callables.
"""

from collections.abc import Callable, Iterable

import pytest

from material_release.exceptions import InvalidSelectionError, ReleaseCancelledError
from material_release.prompts import VersionPrompt, parse_selection
from material_release.version import SemanticVersion, parse_version


def scripted(answers: Iterable[object]) -> Callable[[str], object]:
    iterator = iter(answers)
    return lambda _text: next(iterator)


def make_prompt(current: str, entries: list[str], confirms: list[bool], max_attempts: int = 10) -> VersionPrompt:
    return VersionPrompt(
        parse_version(current),
        max_attempts=max_attempts,
        ask=scripted(entries),  # type: ignore[arg-type]
        confirm=scripted(confirms),  # type: ignore[arg-type]
        clear_screen=False,
    )


class TestParseSelection:
    OPTIONS = [parse_version("0.9.7"), parse_version("0.10.0"), parse_version("1.0.0")]

    def test_menu_index_is_one_based(self) -> None:
        assert parse_selection("1", self.OPTIONS) == parse_version("0.9.7")
        assert parse_selection(" 3 ", self.OPTIONS) == parse_version("1.0.0")

    def test_literal_version(self) -> None:
        assert parse_selection("0.9.8-rc2", self.OPTIONS) == SemanticVersion(0, 9, 8, 2)

    @pytest.mark.parametrize("entry", ["0", "4", "", "minor", "1.0", "v1.0.0", "1.0.0-rc0"])
    def test_invalid_entries(self, entry: str) -> None:
        with pytest.raises(InvalidSelectionError):
            parse_selection(entry, self.OPTIONS)

    @pytest.mark.parametrize("entry", ["q", "quit", "Q"])
    def test_quit(self, entry: str) -> None:
        with pytest.raises(ReleaseCancelledError):
            parse_selection(entry, self.OPTIONS)


class TestVersionPrompt:
    def test_stable_choice_declining_rc(self) -> None:
        prompt = make_prompt("0.9.6", ["1"], [False, True])
        assert str(prompt.choose()) == "0.9.7"

    def test_minor_choice(self) -> None:
        prompt = make_prompt("0.9.6", ["2"], [False, True])
        assert str(prompt.choose()) == "0.10.0"

    def test_accepting_rc_appends_rc1(self) -> None:
        prompt = make_prompt("0.9.6", ["2"], [True, True])
        assert str(prompt.choose()) == "0.10.0-rc1"

    def test_rc_choice_skips_rc_question(self) -> None:
        # Only the final confirmation is asked
        prompt = make_prompt("1.0.0-rc4", ["1"], [True])
        assert str(prompt.choose()) == "1.0.0-rc5"

    def test_literal_entry(self) -> None:
        prompt = make_prompt("0.9.6", ["0.9.9"], [False, True])
        assert str(prompt.choose()) == "0.9.9"

    def test_invalid_entry_reprompts(self) -> None:
        prompt = make_prompt("0.9.6", ["banana", "3"], [False, True])
        assert str(prompt.choose()) == "1.0.0"

    def test_declined_confirmation_restarts(self) -> None:
        prompt = make_prompt("0.9.6", ["1", "2"], [False, False, False, True])
        assert str(prompt.choose()) == "0.10.0"

    def test_quit_cancels(self) -> None:
        prompt = make_prompt("0.9.6", ["q"], [])
        with pytest.raises(ReleaseCancelledError):
            prompt.choose()

    def test_gives_up_after_max_attempts(self) -> None:
        prompt = make_prompt("0.9.6", ["x", "y", "z"], [], max_attempts=3)
        with pytest.raises(InvalidSelectionError, match="3 invalid entries"):
            prompt.choose()

    def test_invalid_entries_counted_per_round(self) -> None:
        # One bad entry in each of two rounds stays under the limit of 2
        prompt = make_prompt("0.9.6", ["x", "1", "y", "2"], [False, False, False, True], max_attempts=2)
        assert str(prompt.choose()) == "0.10.0"
