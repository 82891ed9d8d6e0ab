"""Action input parsing.

GitHub Actions exposes step inputs as ``INPUT_<NAME>`` environment variables.
Everything here runs before any network call, so a bad input fails the run
without touching GitHub or Shortcut.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from shared.constants import GITHUB_API_BASE, SHORTCUT_API_BASE
from ticket_check.extractor import ExtractionMode


class ConfigurationError(ValueError):
    pass


def _get_input(env: Mapping[str, str], name: str, *, required: bool = False) -> str:
    value = env.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value


def _as_bool(value: Optional[str], *, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() == "true"


def parse_list(value: Optional[str]) -> list[str]:
    """Split a comma separated input, trimming items and dropping empties."""
    return [item.strip() for item in (value or "").split(",") if item.strip()]


def split_repo_name(repo_full_name: str) -> tuple[str, str]:
    owner, _, repo = repo_full_name.partition("/")
    if not owner or not repo:
        raise ConfigurationError("Invalid repository name format. Expected: owner/repo")
    return owner, repo


@dataclass
class CheckConfig:
    github_token: str
    repo_full_name: str
    shortcut_token: str
    pr_number: int
    expected_states: list[str]
    enforce_prefix_check: bool = True
    enforce_single_pr: bool = True
    skip_if_title_contains: list[str] = field(default_factory=list)
    shortcut_token_secret_arn: str = ""
    github_api_base: str = GITHUB_API_BASE
    shortcut_api_base: str = SHORTCUT_API_BASE

    @property
    def extraction_mode(self) -> ExtractionMode:
        return "prefix" if self.enforce_prefix_check else "anywhere"

    @property
    def owner(self) -> str:
        return split_repo_name(self.repo_full_name)[0]

    @property
    def repo(self) -> str:
        return split_repo_name(self.repo_full_name)[1]

    def secret_values(self) -> list[str]:
        return [value for value in (self.github_token, self.shortcut_token) if value]


def load_config(env: Optional[Mapping[str, str]] = None) -> CheckConfig:
    env = os.environ if env is None else env

    shortcut_token_secret_arn = env.get("SHORTCUT_TOKEN_SECRET_ARN", "").strip()

    github_token = _get_input(env, "github_auth_token", required=True)
    repo_full_name = _get_input(env, "github_repo_name", required=True)
    shortcut_token = _get_input(env, "shortcut_auth_token", required=not shortcut_token_secret_arn)
    raw_pr_number = _get_input(env, "pr_number", required=True)
    expected_states = parse_list(_get_input(env, "expected_states", required=True))

    if not expected_states:
        raise ConfigurationError("Expected states cannot be empty")

    split_repo_name(repo_full_name)

    try:
        pr_number = int(raw_pr_number)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid pr_number: {raw_pr_number!r}") from exc

    return CheckConfig(
        github_token=github_token,
        repo_full_name=repo_full_name,
        shortcut_token=shortcut_token,
        pr_number=pr_number,
        expected_states=expected_states,
        enforce_prefix_check=_as_bool(_get_input(env, "enforce_prefix_check"), default=True),
        enforce_single_pr=_as_bool(_get_input(env, "enforce_single_pr_for_each_ticket"), default=True),
        skip_if_title_contains=parse_list(_get_input(env, "skip_if_title_contains")),
        shortcut_token_secret_arn=shortcut_token_secret_arn,
        github_api_base=env.get("GITHUB_API_BASE", GITHUB_API_BASE),
        shortcut_api_base=env.get("SHORTCUT_API_BASE", SHORTCUT_API_BASE),
    )
