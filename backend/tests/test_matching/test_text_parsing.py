"""Tests for free-text number and token extraction."""

import pytest

from services.matching.text_parsing import (
    all_ints,
    first_int,
    last_int,
    leading_int,
    normalize,
    split_tokens,
)


def test_first_int_takes_first_run_of_digits():
    assert first_int("3-5 years") == 3
    assert first_int("Minimum 10+ years, ideally 12") == 10


def test_first_int_missing_is_zero():
    assert first_int("no experience needed") == 0
    assert first_int("") == 0
    assert first_int(None) == 0


def test_all_ints_in_order():
    assert all_ints("6-10 LPA") == [6, 10]
    assert all_ints("n/a") == []


def test_last_int_is_upper_bound():
    assert last_int("6-10 LPA") == 10
    assert last_int("up to 12") == 12
    assert last_int("negotiable") == 0
    assert last_int(None) == 0


@pytest.mark.parametrize(
    "value, expected",
    [
        (4, 4),
        (2.9, 2),
        ("3", 3),
        (" 2 years", 2),
        ("3.5", 3),
        ("-1", -1),
        ("about 5", 0),
        ("", 0),
        (None, 0),
        (float("nan"), 0),
    ],
)
def test_leading_int(value, expected):
    assert leading_int(value) == expected


def test_normalize_lowercases_without_trimming():
    assert normalize("  New York ") == "  new york "
    assert normalize(None) == ""


def test_split_tokens_keeps_empty_positions():
    assert split_tokens("React, Node ,, SQL,") == ["react", "node", "", "sql", ""]
    assert split_tokens("   ") == [""]
    assert split_tokens("") == []
    assert split_tokens(None) == []
