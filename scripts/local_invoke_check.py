#!/usr/bin/env python3
"""Run the ticket check against real APIs with inputs taken from the shell.

Export GITHUB_TOKEN and SHORTCUT_TOKEN, then:

    scripts/local_invoke_check.py example-org/example-repo 42 "in progress,to do"
"""

import os
import sys

sys.path.append("src")
from ticket_check.app import main as run_check  # noqa: E402


def main() -> int:
    if len(sys.argv) < 4:
        print("Usage: local_invoke_check.py <owner/repo> <pr_number> <expected_states> [skip_rules]")
        return 1

    env = dict(os.environ)
    env.update(
        {
            "INPUT_GITHUB_AUTH_TOKEN": os.getenv("GITHUB_TOKEN", ""),
            "INPUT_SHORTCUT_AUTH_TOKEN": os.getenv("SHORTCUT_TOKEN", ""),
            "INPUT_GITHUB_REPO_NAME": sys.argv[1],
            "INPUT_PR_NUMBER": sys.argv[2],
            "INPUT_EXPECTED_STATES": sys.argv[3],
            "INPUT_SKIP_IF_TITLE_CONTAINS": sys.argv[4] if len(sys.argv) > 4 else "",
        }
    )
    env.pop("GITHUB_OUTPUT", None)
    return run_check(env)


if __name__ == "__main__":
    raise SystemExit(main())
