from __future__ import annotations

import pytest

from ticket_check.extractor import (
    ANYWHERE_RULES,
    PREFIX_RULES,
    extract_anywhere,
    extract_prefix_only,
    extract_ticket_id,
)


# -- anywhere mode -------------------------------------------------------------

@pytest.mark.parametrize(
    "title",
    [
        "SC-123: Add feature",
        "sc-123: Add feature",
        "SHORTCUT-123 Implement new feature",
        "shortcut-123: Add feature",
        "Fix bug SC-123",
        "Fix bug sHoRtCuT-123",
    ],
)
def test_extract_anywhere_dash_token_any_case(title: str) -> None:
    assert extract_anywhere(title) == "123"


def test_extract_anywhere_token_without_dash() -> None:
    assert extract_anywhere("SC123: Add feature") == "123"
    assert extract_anywhere("Fix bug sc456") == "456"
    assert extract_anywhere("SHORTCUT789 Implement new feature") == "789"


def test_extract_anywhere_bracketed_token() -> None:
    assert extract_anywhere("[SC-94667] tidy up imports") == "94667"
    assert extract_anywhere("chore:[shortcut-12] bump") == "12"


@pytest.mark.parametrize(
    "title",
    [
        " 123 : test",
        " 123: test",
        "123 : test",
        "123:adfadf",
        "123-adfadf",
        "123 - adfadf",
        "123- adfadf",
        " # 123 : test",
        " #123 : test",
        "#123: test",
        "#123 : test",
        "#123:adfadf",
        " #123 - test",
    ],
)
def test_extract_anywhere_bare_numbers(title: str) -> None:
    assert extract_anywhere(title) == "123"


def test_extract_anywhere_bare_number_later_in_title() -> None:
    assert extract_anywhere("Update readme #84563: followup") == "84563"


def test_extract_anywhere_first_rule_wins_over_position() -> None:
    assert extract_anywhere("SC-123 and SC-456") == "123"
    assert extract_anywhere("Fix SC-789 and SC-101") == "789"
    # The bare number comes first in the text but its rule has lower priority.
    assert extract_anywhere("2024: ship SC-77") == "77"
    assert extract_anywhere("[SC-5] follow up to SC6") == "6"


def test_extract_anywhere_edge_cases() -> None:
    assert extract_anywhere("SC-0: Zero ticket") == "0"
    assert extract_anywhere("SC-999999: Large number") == "999999"
    assert extract_anywhere("  SC-123  : Whitespace  ") == "123"
    assert extract_anywhere("SC-00042 keep zeros") == "00042"


@pytest.mark.parametrize(
    "title",
    [
        "",
        "Add new feature",
        "Fix bug",
        "SC-",
        "SC-abc",
        "[KMP] fix deeplink",
        "DESC-123 not a shortcut token",
        "SC-12a trailing letters",
    ],
)
def test_extract_anywhere_no_match(title: str) -> None:
    assert extract_anywhere(title) is None


# -- prefix mode ---------------------------------------------------------------

@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("1234: Add feature", "1234"),
        ("#1234: Add feature", "1234"),
        ("sc-1234: Add feature", "1234"),
        ("SC-5678: Fix bug", "5678"),
        ("#sc-1234: Add feature", "1234"),
        ("#SC-5678: Fix bug", "5678"),
        ("[sc-1234]: Add feature", "1234"),
        ("[SC-5678]: Fix bug", "5678"),
        ("SHORTCUT-789: Implement feature", "789"),
        ("shortcut-101: Quick fix", "101"),
        ("94558: add feature", "94558"),
        ("#94558: fix xyz", "94558"),
        ("# 94558: fix xyz", "94558"),
        ("  94558: chore", "94558"),
    ],
)
def test_extract_prefix_formats(title: str, expected: str) -> None:
    assert extract_prefix_only(title) == expected


@pytest.mark.parametrize(
    "title",
    [
        " 123 : test",
        "123:adfadf",
        "123-adfadf",
        "123 - adfadf",
        "123- adfadf",
        " # 123 : test",
        " #123 - test",
        "  [sc-123]: Whitespace  ",
        "  #sc-123: Add feature",
    ],
)
def test_extract_prefix_tolerates_whitespace(title: str) -> None:
    assert extract_prefix_only(title) == "123"


def test_extract_prefix_edge_cases() -> None:
    assert extract_prefix_only("0: Zero ticket") == "0"
    assert extract_prefix_only("999999: Large number") == "999999"
    assert extract_prefix_only("007: keep zeros") == "007"


# -- whitespace ----------------------------------------------------------------

def test_byte_order_mark_counts_as_whitespace() -> None:
    assert extract_anywhere("\ufeffSC-7 x") == "7"
    assert extract_anywhere("Fix SC-8\u3000done") == "8"
    assert extract_prefix_only("\ufeff12: title") == "12"


@pytest.mark.parametrize("separator", ["\x1c", "\x1d", "\x1e", "\x1f", "\x85"])
def test_control_separators_are_not_whitespace(separator: str) -> None:
    assert extract_anywhere(f"x{separator}SC-3 y") is None
    assert extract_anywhere(f"1{separator}: x") is None
    assert extract_prefix_only(f"1{separator}: x") is None


@pytest.mark.parametrize(
    "title",
    [
        "",
        "Add feature SC-123",
        "Fix bug sc-456",
        "Add new feature",
        "1234 Title",
        "1234",
        "SC-123 Add feature",
        "[sc-123] missing colon",
        "sc123: no dash",
    ],
)
def test_extract_prefix_no_match(title: str) -> None:
    assert extract_prefix_only(title) is None


# -- dispatch ------------------------------------------------------------------

def test_extract_ticket_id_uses_one_mode() -> None:
    title = "Add feature SC-123"
    assert extract_ticket_id(title, "anywhere") == "123"
    assert extract_ticket_id(title, "prefix") is None


def test_extract_ticket_id_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError):
        extract_ticket_id("SC-1: x", "suffix")  # type: ignore[arg-type]


def test_rule_tables_are_ordered() -> None:
    assert [rule.name for rule in ANYWHERE_RULES] == [
        "token_dash",
        "token_no_dash",
        "bracketed_token",
        "number_colon",
        "number_dash",
    ]
    assert [rule.name for rule in PREFIX_RULES] == [
        "number_colon",
        "number_dash",
        "sc_colon",
        "bracketed_sc_colon",
        "token_colon",
    ]
