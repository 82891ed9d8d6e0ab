from __future__ import annotations

import json
from typing import Optional

import boto3
from botocore.client import BaseClient


class SecretTokenProvider:
    """Callable token provider backed by an AWS Secrets Manager secret.

    The secret may hold the raw token, or a JSON object with an ``api_token``
    field. The value is read once per provider instance.
    """

    def __init__(self, secret_arn: str, secrets_client: Optional[BaseClient] = None) -> None:
        self._secret_arn = secret_arn
        self._secrets = secrets_client or boto3.client("secretsmanager")
        self._cached_token: Optional[str] = None

    def _read_secret_string(self) -> str:
        response = self._secrets.get_secret_value(SecretId=self._secret_arn)
        secret_string = response.get("SecretString")
        if not secret_string:
            raise ValueError(f"Secret {self._secret_arn} has no SecretString")
        return secret_string

    def __call__(self) -> str:
        if self._cached_token:
            return self._cached_token

        raw = self._read_secret_string().strip()
        token = raw
        if raw.startswith("{"):
            data = json.loads(raw)
            token = str(data.get("api_token") or "").strip()
            if not token:
                raise ValueError(f"Secret {self._secret_arn} missing field: api_token")

        self._cached_token = token
        return token
