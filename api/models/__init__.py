"""API models package."""

from .auth import AuthError

__all__ = [
    "AuthError",
]
