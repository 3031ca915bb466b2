"""Authentication for per-user preferences and saved legislation."""

from lawvely.auth.middleware import AuthMiddleware, require_user
from lawvely.auth.provider import AuthProvider, MockAuthProvider

__all__ = ["AuthMiddleware", "AuthProvider", "MockAuthProvider", "require_user"]
