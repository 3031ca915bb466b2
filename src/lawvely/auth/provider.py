"""Authentication provider Protocol and mock implementation."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml

from lawvely.auth.models import AuthCredentials, AuthResult, TokenValidation

_DEFAULT_FIXTURES_PATH = Path(__file__).resolve().parents[3] / "config" / "auth_fixtures.yml"


@runtime_checkable
class AuthProvider(Protocol):
    """Protocol for authentication providers."""

    def authenticate(self, credentials: AuthCredentials) -> AuthResult: ...

    def validate_token(self, token: str) -> TokenValidation: ...

    def revoke_token(self, token: str) -> bool: ...


class MockAuthProvider:
    """Mock auth provider with fixture users from YAML.

    Stands in for a hosted identity provider during development: a user
    listed in the fixtures signs in with their fixture code (or any
    non-empty code when the fixture sets none) and receives an opaque
    bearer token.
    """

    def __init__(
        self,
        fixtures_path: str | Path | None = None,
        token_expiry_minutes: int = 60,
    ) -> None:
        self._users: dict[str, dict[str, Any]] = {}
        self._tokens: dict[str, dict[str, Any]] = {}
        self._token_expiry = timedelta(minutes=token_expiry_minutes)
        self._load_fixtures(Path(fixtures_path) if fixtures_path else _DEFAULT_FIXTURES_PATH)

    def _load_fixtures(self, path: Path) -> None:
        if not path.exists():
            return
        with open(path) as fh:
            data = yaml.safe_load(fh) or {}
        for user in data.get("users", []):
            self._users[user["username"]] = user

    @property
    def users(self) -> dict[str, dict[str, Any]]:
        return dict(self._users)

    def add_user(self, username: str, code: str = "", display_name: str = "") -> None:
        self._users[username] = {
            "username": username,
            "code": code,
            "display_name": display_name or username,
        }

    def authenticate(self, credentials: AuthCredentials) -> AuthResult:
        user = self._users.get(credentials.username)
        if user is None:
            return AuthResult(success=False, error="User not found")

        expected_code = user.get("code", "")
        if not credentials.code or not credentials.code.strip():
            return AuthResult(success=False, error="Verification code is required")

        if expected_code and credentials.code != expected_code:
            return AuthResult(success=False, error="Invalid verification code")

        token = str(uuid.uuid4())
        display_name = user.get("display_name", user["username"])
        self._tokens[token] = {
            "user_id": user["username"],
            "display_name": display_name,
            "expires_at": datetime.now(timezone.utc) + self._token_expiry,
        }

        return AuthResult(
            success=True,
            token=token,
            user_id=user["username"],
            display_name=display_name,
        )

    def validate_token(self, token: str) -> TokenValidation:
        info = self._tokens.get(token)
        if info is None:
            return TokenValidation(valid=False)

        if datetime.now(timezone.utc) > info["expires_at"]:
            del self._tokens[token]
            return TokenValidation(valid=False)

        return TokenValidation(
            valid=True,
            user_id=info["user_id"],
            expires_at=info["expires_at"],
        )

    def revoke_token(self, token: str) -> bool:
        if token in self._tokens:
            del self._tokens[token]
            return True
        return False
