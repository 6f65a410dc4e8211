"""
Exception hierarchy for lantana.

Every failure surfaced by the repository core, its collaborators and the
bundled transports is a RepositoryError or one of its subclasses.
"""

from __future__ import annotations

from typing import Any


class RepositoryError(Exception):
    """Base error for anything that goes wrong talking to the repository."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize the error.

        Args:
            message: Human readable error message
            details: Additional structured context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class LoginError(RepositoryError):
    """Authentication or authorization for the requested workspace failed."""


class NoSuchWorkspaceError(RepositoryError):
    """The requested workspace name is not recognized by the repository."""

    def __init__(self, message: str, workspace_name: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.workspace_name = workspace_name
        self.details.setdefault("workspace_name", workspace_name)


class UnsupportedRepositoryOperationError(RepositoryError):
    """The operation is not supported by this repository or transport."""


class TransactionStateError(RepositoryError):
    """A transaction call was made in the wrong state."""


class ValueFormatError(RepositoryError):
    """A value cannot be converted to the requested form."""
