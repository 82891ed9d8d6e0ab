from __future__ import annotations

from typing import Optional, Sequence


def find_skip_match(title: str, rules: Sequence[str]) -> Optional[str]:
    """Return the first rule contained in ``title``, ignoring case.

    Rules are checked in list order and the rule is returned as configured,
    since callers surface it as the skip reason.
    """
    lowered = title.lower()
    for rule in rules:
        if rule and rule.lower() in lowered:
            return rule
    return None
