"""
In-memory transports.

Useful for tests and for embedding a repository without a server. Users,
workspaces, descriptors and binary contents are all supplied up front.
"""

from __future__ import annotations

from uuid import uuid4

from lantana.exceptions import (
    LoginError,
    NoSuchWorkspaceError,
    RepositoryError,
    TransactionStateError,
)
from lantana.models.credentials import Credentials, GuestCredentials, SimpleCredentials
from lantana.models.descriptors import DescriptorValue
from lantana.transport.base import TransactionalTransport, Transport
from lantana.utils.logger import get_logger

logger = get_logger(__name__)


class MemoryTransport(Transport):
    """
    Transport backed by plain dictionaries.

    Example:
        >>> transport = MemoryTransport(
        ...     users={"admin": "secret"},
        ...     workspaces=["default", "archive"],
        ...     descriptors={"jcr.repository.name": "memory"},
        ... )
        >>> transport.login(SimpleCredentials(user_id="admin", password="secret"), "default")
        True
    """

    def __init__(
        self,
        users: dict[str, str] | None = None,
        workspaces: list[str] | None = None,
        descriptors: dict[str, DescriptorValue] | None = None,
        binaries: dict[tuple[str, str], bytes] | None = None,
        allow_guest: bool = False,
    ):
        """
        Initialize the transport.

        Args:
            users: Mapping of user id to password
            workspaces: Known workspace names
            descriptors: Repository descriptors to report
            binaries: Binary property contents keyed by (workspace, path)
            allow_guest: Accept GuestCredentials and None credentials
        """
        self.users = dict(users or {})
        self.workspaces = list(workspaces if workspaces is not None else ["default"])
        self.descriptors = dict(descriptors or {})
        self.binaries = dict(binaries or {})
        self.allow_guest = allow_guest

        self.workspace_name: str | None = None
        self.user_id: str | None = None
        self.descriptor_requests = 0
        self.binary_requests = 0
        self.closed = False

    def login(self, credentials: Credentials | None, workspace_name: str) -> bool:
        if credentials is None or isinstance(credentials, GuestCredentials):
            if not self.allow_guest:
                raise LoginError("anonymous login is not allowed")
            user_id = None
        elif isinstance(credentials, SimpleCredentials):
            if self.users.get(credentials.user_id) != credentials.get_password():
                raise LoginError(f"invalid credentials for user '{credentials.user_id}'")
            user_id = credentials.user_id
        else:
            raise LoginError(f"unsupported credentials type {type(credentials).__name__}")

        if workspace_name not in self.workspaces:
            raise NoSuchWorkspaceError(
                f"workspace '{workspace_name}' does not exist",
                workspace_name=workspace_name,
            )

        self.workspace_name = workspace_name
        self.user_id = user_id
        logger.debug("memory login as %s on %s", user_id or "guest", workspace_name)
        return True

    def get_repository_descriptors(self) -> dict[str, DescriptorValue]:
        self.descriptor_requests += 1
        return {
            key: list(value) if isinstance(value, list) else value
            for key, value in self.descriptors.items()
        }

    def get_binary_stream(self, workspace_name: str, path: str) -> bytes:
        self.binary_requests += 1
        try:
            return self.binaries[(workspace_name, path)]
        except KeyError:
            raise RepositoryError(
                f"no binary property at {path} in workspace '{workspace_name}'"
            ) from None

    def logout(self) -> None:
        self.workspace_name = None
        self.user_id = None

    def close(self) -> None:
        self.closed = True


class TransactionalMemoryTransport(MemoryTransport, TransactionalTransport):
    """MemoryTransport that also tracks transaction state."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.transaction_token: str | None = None
        self.transaction_timeout = 0
        self.committed: list[str] = []
        self.rolled_back: list[str] = []

    def begin_transaction(self) -> str:
        if self.transaction_token is not None:
            raise TransactionStateError("a transaction is already open")
        self.transaction_token = uuid4().hex
        return self.transaction_token

    def commit_transaction(self) -> None:
        if self.transaction_token is None:
            raise TransactionStateError("no transaction to commit")
        self.committed.append(self.transaction_token)
        self.transaction_token = None

    def rollback_transaction(self) -> None:
        if self.transaction_token is None:
            raise TransactionStateError("no transaction to roll back")
        self.rolled_back.append(self.transaction_token)
        self.transaction_token = None

    def set_transaction_timeout(self, seconds: int) -> None:
        self.transaction_timeout = seconds
