from __future__ import annotations

import pytest

from ticket_check.skip import find_skip_match

_RULES = ["Bump SDK", "no ticket for this PR", "chore:"]


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Bump SDK to v2.1.0", "Bump SDK"),
        ("BUMP SDK to v2.1.0", "Bump SDK"),
        ("bump sdk to 1.x.0", "Bump SDK"),
        ("no ticket for this PR - quick fix", "no ticket for this PR"),
        ("chore: update dependencies", "chore:"),
        ("CHORE: update dependencies", "chore:"),
        ("SC-123: Add feature", None),
        ("Fix bug in authentication", None),
        ("Update documentation", None),
    ],
)
def test_find_skip_match(title: str, expected: str | None) -> None:
    assert find_skip_match(title, _RULES) == expected


def test_empty_rules_never_skip() -> None:
    assert find_skip_match("Bump SDK to v2.1.0", []) is None
    assert find_skip_match("", []) is None


def test_partial_words_do_not_match() -> None:
    rules = ["Bump SDK", "chore:"]
    assert find_skip_match("Bump", rules) is None
    assert find_skip_match("SDK", rules) is None
    assert find_skip_match("chore", rules) is None
    assert find_skip_match("chore:", rules) == "chore:"


def test_first_rule_in_list_wins() -> None:
    title = "chore: Bump SDK [External Team]"
    assert find_skip_match(title, ["[External Team]", "Bump SDK", "chore:"]) == "[External Team]"
    assert find_skip_match(title, ["chore:", "[External Team]"]) == "chore:"


def test_match_is_case_insensitive_both_ways() -> None:
    for rule in ("[external team]", "[EXTERNAL TEAM]", "[External Team]"):
        for title in ("feat: thing [EXTERNAL TEAM]", "fix: bug [external team]"):
            assert find_skip_match(title, [rule]) == rule


def test_empty_rule_strings_are_ignored() -> None:
    assert find_skip_match("anything", ["", "thing"]) == "thing"
    assert find_skip_match("anything", [""]) is None
