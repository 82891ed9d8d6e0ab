"""GitHub Actions entrypoint for the Shortcut ticket check.

Reads the step inputs, fetches the pull request title, runs the pipeline and
publishes the outcome:

- skipped: outputs ``skipped`` and ``skip_reason``, exit code 0
- accepted: outputs ``ticket_id``, ``ticket_title`` and ``ticket_state``,
  exit code 0
- rejected or failed: one ``::error::`` message, exit code 1
"""

from __future__ import annotations

import os
import uuid
from typing import Any, Mapping, Optional

from shared.github_client import GitHubClient
from shared.logging import get_logger
from shared.secrets import SecretTokenProvider
from shared.shortcut_client import ShortcutClient
from ticket_check.config import CheckConfig, ConfigurationError, load_config
from ticket_check.pipeline import Tracker, run_pipeline
from ticket_check.validator import Accepted, Rejected, Skipped, Verdict

logger = get_logger("ticket_check")


def _escape_command_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, value: str) -> None:
    print(f"::{command}::{_escape_command_data(value)}", flush=True)


def set_output(name: str, value: str, env: Optional[Mapping[str, str]] = None) -> None:
    env = os.environ if env is None else env
    output_path = env.get("GITHUB_OUTPUT")
    if not output_path:
        print(f"{name}={value}", flush=True)
        return

    if "\n" in value or "\r" in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        line = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
    else:
        line = f"{name}={value}\n"
    with open(output_path, "a", encoding="utf-8") as handle:
        handle.write(line)


def resolve_shortcut_token(config: CheckConfig) -> str:
    if config.shortcut_token:
        return config.shortcut_token
    return SecretTokenProvider(config.shortcut_token_secret_arn)()


def check_pull_request(
    config: CheckConfig,
    github: GitHubClient,
    tracker: Tracker,
    local_logger: Optional[Any] = None,
) -> Verdict:
    log = local_logger or logger
    title = github.get_pull_request_title(config.owner, config.repo, config.pr_number)
    log.info("validating_pull_request", extra={"extra": {"title": title}})
    return run_pipeline(title, config, tracker, local_logger=log)


def publish_verdict(verdict: Verdict, env: Optional[Mapping[str, str]] = None) -> int:
    if isinstance(verdict, Skipped):
        set_output("skipped", "true", env)
        set_output("skip_reason", f"Title contains: {verdict.reason}", env)
        return 0

    if isinstance(verdict, Rejected):
        issue_command("error", verdict.reason)
        return 1

    if isinstance(verdict, Accepted):
        set_output("ticket_id", verdict.ticket_id, env)
        set_output("ticket_title", verdict.ticket_title, env)
        set_output("ticket_state", verdict.state_name, env)
        return 0

    raise TypeError(f"Unsupported verdict: {verdict!r}")


def main(env: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if env is None else env

    try:
        config = load_config(env)
    except ConfigurationError as exc:
        logger.error("configuration_invalid", extra={"extra": {"error": str(exc)}})
        issue_command("error", f"Action failed: {exc}")
        return 1

    for secret in config.secret_values():
        issue_command("add-mask", secret)

    local_logger = get_logger(
        "ticket_check",
        repo=config.repo_full_name,
        pr_number=config.pr_number,
        mode=config.extraction_mode,
        correlation_id=f"{config.repo_full_name}#{config.pr_number}",
    )

    try:
        shortcut_token = resolve_shortcut_token(config)
        if not config.shortcut_token:
            issue_command("add-mask", shortcut_token)

        github = GitHubClient(token_provider=lambda: config.github_token, api_base=config.github_api_base)
        tracker = ShortcutClient(token_provider=lambda: shortcut_token, api_base=config.shortcut_api_base)
        verdict = check_pull_request(config, github, tracker, local_logger)
    except Exception as exc:  # noqa: BLE001
        local_logger.exception("ticket_check_failed")
        issue_command("error", f"Action failed: {exc}")
        return 1

    if isinstance(verdict, Accepted):
        local_logger.info(
            "ticket_check_passed",
            extra={"extra": {"ticket_id": verdict.ticket_id, "ticket_state": verdict.state_name}},
        )
    return publish_verdict(verdict, env)


if __name__ == "__main__":
    raise SystemExit(main())
