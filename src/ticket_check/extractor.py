"""Shortcut story id extraction from pull request titles.

Two grammars are supported, each an ordered table of rules. The first rule
that matches decides the result; a later rule is never consulted, even when
it would match earlier in the title.

``anywhere``
    The id may appear anywhere, e.g. ``"Fix login SC-123"`` or
    ``"[SC-94667] tidy up"``.

``prefix``
    The id must open the title and be followed by ``:`` (or ``-`` for bare
    numbers), e.g. ``"1234: title"``, ``"#sc-1234: title"``,
    ``"[sc-1234]: title"``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Optional

ExtractionMode = Literal["anywhere", "prefix"]

# ASCII digits only; ``\d`` would also accept other Unicode decimal digits.
_DIGITS = r"([0-9]+)"
_TOKEN = r"(?:SC|SHORTCUT)"
# Whitespace as JavaScript regexps define it: the BOM counts, the \x1c-\x1f
# separators and U+0085 do not.
_WS = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"


@dataclass(frozen=True)
class TicketRule:
    name: str
    pattern: re.Pattern

    def find(self, title: str) -> Optional[str]:
        match = self.pattern.search(title)
        return match.group(1) if match else None


def _rule(name: str, pattern: str) -> TicketRule:
    return TicketRule(name=name, pattern=re.compile(pattern, re.IGNORECASE))


ANYWHERE_RULES: tuple[TicketRule, ...] = (
    _rule("token_dash", rf"(?:^|{_WS}){_TOKEN}-{_DIGITS}(?:{_WS}|\Z|:)"),
    _rule("token_no_dash", rf"(?:^|{_WS}){_TOKEN}{_DIGITS}(?:{_WS}|\Z|:)"),
    _rule("bracketed_token", rf"\[{_TOKEN}-{_DIGITS}\]"),
    _rule("number_colon", rf"(?:^|{_WS})#?{_WS}*{_DIGITS}{_WS}*:"),
    _rule("number_dash", rf"(?:^|{_WS})#?{_WS}*{_DIGITS}{_WS}*-"),
)

PREFIX_RULES: tuple[TicketRule, ...] = (
    _rule("number_colon", rf"^{_WS}*#?{_WS}*{_DIGITS}{_WS}*:"),
    _rule("number_dash", rf"^{_WS}*#?{_WS}*{_DIGITS}{_WS}*-"),
    _rule("sc_colon", rf"^{_WS}*#?{_WS}*sc-{_DIGITS}{_WS}*:"),
    _rule("bracketed_sc_colon", rf"^{_WS}*\[sc-{_DIGITS}\]{_WS}*:"),
    _rule("token_colon", rf"^{_WS}*{_TOKEN}-{_DIGITS}{_WS}*:"),
)


def _first_match(title: str, rules: tuple[TicketRule, ...]) -> Optional[str]:
    for rule in rules:
        ticket_id = rule.find(title)
        if ticket_id is not None:
            return ticket_id
    return None


def extract_anywhere(title: str) -> Optional[str]:
    return _first_match(title, ANYWHERE_RULES)


def extract_prefix_only(title: str) -> Optional[str]:
    return _first_match(title, PREFIX_RULES)


def extract_ticket_id(title: str, mode: ExtractionMode) -> Optional[str]:
    if mode == "prefix":
        return extract_prefix_only(title)
    if mode == "anywhere":
        return extract_anywhere(title)
    raise ValueError(f"Unknown extraction mode: {mode}")
