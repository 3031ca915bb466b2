"""Tests for the fixture-backed auth provider."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from lawvely.auth.models import AuthCredentials
from lawvely.auth.provider import AuthProvider, MockAuthProvider


class TestMockAuthProvider:
    def setup_method(self) -> None:
        self.provider = MockAuthProvider()

    def test_fixtures_loaded(self) -> None:
        assert "demo" in self.provider.users
        assert "reviewer" in self.provider.users

    def test_satisfies_protocol(self) -> None:
        assert isinstance(self.provider, AuthProvider)

    def test_authenticate_success(self) -> None:
        result = self.provider.authenticate(AuthCredentials(username="demo", code="123456"))
        assert result.success
        assert result.token is not None
        assert result.user_id == "demo"
        assert result.display_name == "Demo User"

    def test_any_code_when_fixture_has_none(self) -> None:
        result = self.provider.authenticate(AuthCredentials(username="reviewer", code="x"))
        assert result.success

    def test_authenticate_wrong_code(self) -> None:
        result = self.provider.authenticate(AuthCredentials(username="demo", code="wrong"))
        assert not result.success
        assert "Invalid" in result.error

    def test_authenticate_empty_code(self) -> None:
        result = self.provider.authenticate(AuthCredentials(username="reviewer", code="  "))
        assert not result.success

    def test_authenticate_unknown_user(self) -> None:
        result = self.provider.authenticate(AuthCredentials(username="nobody", code="1"))
        assert not result.success
        assert "not found" in result.error

    def test_validate_and_revoke(self) -> None:
        auth = self.provider.authenticate(AuthCredentials(username="demo", code="123456"))
        validation = self.provider.validate_token(auth.token)
        assert validation.valid
        assert validation.user_id == "demo"

        assert self.provider.revoke_token(auth.token)
        assert not self.provider.validate_token(auth.token).valid
        assert not self.provider.revoke_token(auth.token)

    def test_expired_token(self) -> None:
        auth = self.provider.authenticate(AuthCredentials(username="demo", code="123456"))
        self.provider._tokens[auth.token]["expires_at"] = (
            datetime.now(timezone.utc) - timedelta(seconds=1)
        )
        assert not self.provider.validate_token(auth.token).valid

    def test_missing_fixture_file(self, tmp_path) -> None:
        provider = MockAuthProvider(fixtures_path=tmp_path / "missing.yml")
        assert provider.users == {}
        provider.add_user("alice", code="42")
        assert provider.authenticate(AuthCredentials(username="alice", code="42")).success
