#!/usr/bin/env python3
"""Check a PR title locally, without calling GitHub or Shortcut.

Applies the same skip rules and ticket id grammar as the action, so authors
can try a title before opening the pull request.
"""

from __future__ import annotations

import argparse
import sys

sys.path.append("src")
from ticket_check.config import parse_list  # noqa: E402
from ticket_check.extractor import extract_ticket_id  # noqa: E402
from ticket_check.pipeline import missing_ticket_message  # noqa: E402
from ticket_check.skip import find_skip_match  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(description="Check a PR title for a Shortcut ticket reference")
    parser.add_argument("title", help="Pull request title")
    parser.add_argument(
        "--anywhere",
        action="store_true",
        help="Accept the ticket anywhere in the title instead of only as a prefix",
    )
    parser.add_argument("--skip", default="", help="Comma separated skip_if_title_contains rules")
    args = parser.parse_args()

    title = args.title
    mode = "anywhere" if args.anywhere else "prefix"

    matched_rule = find_skip_match(title, parse_list(args.skip))
    if matched_rule is not None:
        print(f"Skipped: title contains {matched_rule!r}")
        return 0

    ticket_id = extract_ticket_id(title, mode)
    if ticket_id is None:
        headline, *details = missing_ticket_message(title, mode).splitlines()
        print(f"::error::{headline}")
        for line in details:
            print(line)
        return 1

    print(f"Found ticket ID: SC-{ticket_id}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
