from __future__ import annotations

import pytest

from argmatch.names import (
    format_flag_name,
    format_long_name,
    is_valid_option_token,
    is_valid_positional_name,
)


@pytest.mark.parametrize("name", ["file", "x", "input-file", "in_2", "_private", "1st"])
def test_is_valid_positional_name_accepts_word_start(name: str) -> None:
    assert is_valid_positional_name(name)


@pytest.mark.parametrize("name", ["", "-file", "--file", "two words", "a.b", "é"])
def test_is_valid_positional_name_rejects_bad_names(name: str) -> None:
    assert not is_valid_positional_name(name)


@pytest.mark.parametrize("token", ["-v", "-_", "--verbose", "-verbose", "--dry-run", "--a1"])
def test_is_valid_option_token_recognizes_options(token: str) -> None:
    assert is_valid_option_token(token)


@pytest.mark.parametrize(
    "token",
    ["-5", "-1.5", "-", "--", "---x", "--v", "-1abc", "value", "--out=file", "-v x"],
)
def test_is_valid_option_token_leaves_values_alone(token: str) -> None:
    assert not is_valid_option_token(token)


def test_format_long_name_strips_one_or_two_dashes() -> None:
    assert format_long_name("--output") == "output"
    assert format_long_name("-output") == "output"
    assert format_long_name("--dry-run") == "dry-run"


@pytest.mark.parametrize("name", ["output", "---output", "--o", "-o", "--9lives", ""])
def test_format_long_name_returns_none_without_match(name: str) -> None:
    assert format_long_name(name) is None


def test_format_flag_name_requires_exactly_one_character() -> None:
    assert format_flag_name("-v") == "v"
    assert format_flag_name("-_") == "_"
    assert format_flag_name("--v") is None
    assert format_flag_name("-vv") is None
    assert format_flag_name("-1") is None
    assert format_flag_name("v") is None
