"""Viewer identity from request tokens.

Token issuance lives elsewhere; this module only turns an optional token into
an optional user id.
"""

from __future__ import annotations

from typing import Mapping, Protocol


class InvalidTokenError(RuntimeError):
    """Raised when a supplied token does not identify a user."""


class TokenValidator(Protocol):
    def validate(self, token: str) -> int:
        ...


class StaticTokenValidator:
    """Validator backed by a fixed ``token -> user id`` mapping."""

    def __init__(self, tokens: Mapping[str, int] | None = None):
        self._tokens = dict(tokens or {})

    def validate(self, token: str) -> int:
        try:
            return self._tokens[token]
        except KeyError:
            raise InvalidTokenError("Token is not valid.") from None


def optional_validate_token(validator: TokenValidator | None, token: str | None) -> int | None:
    """Return the user id for ``token``, or ``None`` for an anonymous caller.

    A token that is present but invalid raises ``InvalidTokenError``.
    """
    if token is None:
        return None
    if validator is None:
        raise InvalidTokenError("No token validator configured.")
    return validator.validate(token)


__all__ = [
    "InvalidTokenError",
    "StaticTokenValidator",
    "TokenValidator",
    "optional_validate_token",
]
