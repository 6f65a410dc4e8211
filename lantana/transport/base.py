"""
Transport contracts.

A transport does the actual protocol work against the repository server.
The repository core only ever talks to these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lantana.exceptions import UnsupportedRepositoryOperationError

if TYPE_CHECKING:
    from lantana.models.credentials import Credentials
    from lantana.models.descriptors import DescriptorValue


class Transport(ABC):
    """
    Base class for all transports.

    Subclasses must implement:
    - login(): authenticate against a workspace
    - get_repository_descriptors(): fetch the repository descriptor map

    Example:
        >>> class MyTransport(Transport):
        ...     def login(self, credentials, workspace_name):
        ...         return True
        ...
        ...     def get_repository_descriptors(self):
        ...         return {"jcr.repository.name": "example"}
    """

    @abstractmethod
    def login(self, credentials: Credentials | None, workspace_name: str) -> bool:
        """
        Authenticate against a workspace.

        Args:
            credentials: Credentials of the user, passed through unchanged
            workspace_name: Name of the workspace to log into

        Returns:
            True on success

        Raises:
            LoginError: If the credentials or workspace access are rejected
            NoSuchWorkspaceError: If the workspace is unknown
            RepositoryError: On any other failure
        """

    @abstractmethod
    def get_repository_descriptors(self) -> dict[str, DescriptorValue]:
        """
        Fetch all repository descriptors.

        Returns:
            Mapping of descriptor key to a string or a list of strings
        """

    def get_binary_stream(self, workspace_name: str, path: str) -> bytes:
        """
        Fetch the content of a binary property.

        Args:
            workspace_name: Workspace the property lives in
            path: Absolute path of the property

        Returns:
            Raw property bytes
        """
        raise UnsupportedRepositoryOperationError(
            f"{type(self).__name__} does not support binary streams"
        )

    def logout(self) -> None:
        """Release any server side state held for the current login."""

    def close(self) -> None:
        """Release client side resources such as connections."""

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class TransactionalTransport(Transport):
    """
    Marker for transports able to run transactions.

    The repository only attaches a transaction manager to sessions when its
    transport is an instance of this class.
    """

    @abstractmethod
    def begin_transaction(self) -> str:
        """
        Start a transaction.

        Returns:
            Transaction token
        """

    @abstractmethod
    def commit_transaction(self) -> None:
        """Commit the current transaction."""

    @abstractmethod
    def rollback_transaction(self) -> None:
        """Roll back the current transaction."""

    @abstractmethod
    def set_transaction_timeout(self, seconds: int) -> None:
        """
        Set the timeout applied to transactions started afterwards.

        Args:
            seconds: Timeout in seconds, 0 resets to the server default
        """
