"""
Credential models passed to Repository.login and on to the transport.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, SecretStr


class SimpleCredentials(BaseModel):
    """User id and password credentials with optional attributes."""

    user_id: str = Field(description="User id to authenticate as")
    password: SecretStr = Field(default=SecretStr(""), description="Password")
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra attributes made available on the session",
    )

    def get_password(self) -> str:
        """Get the plain text password."""
        return self.password.get_secret_value()


class GuestCredentials(BaseModel):
    """Anonymous access. Transports decide whether guests may log in."""

    attributes: dict[str, Any] = Field(default_factory=dict)


Credentials = SimpleCredentials | GuestCredentials
