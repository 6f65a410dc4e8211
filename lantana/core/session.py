"""
Session and workspace handles returned by Repository.login.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, BinaryIO
from uuid import uuid4

from lantana.core import streams
from lantana.exceptions import RepositoryError, UnsupportedRepositoryOperationError
from lantana.models.credentials import Credentials, SimpleCredentials
from lantana.utils.logger import get_logger

if TYPE_CHECKING:
    from lantana.core.repository import Repository
    from lantana.core.transaction import UserTransaction
    from lantana.transport.base import Transport

logger = get_logger(__name__)


class Workspace:
    """The workspace a session is bound to."""

    def __init__(self, session: Session, name: str):
        self.session = session
        self.name = name
        self._transaction_manager: UserTransaction | None = None

    def get_session(self) -> Session:
        return self.session

    def get_name(self) -> str:
        return self.name

    def set_transaction_manager(self, transaction_manager: UserTransaction) -> None:
        """Attach the transaction manager used for this workspace."""
        self._transaction_manager = transaction_manager

    def get_transaction_manager(self) -> UserTransaction:
        """
        Get the transaction manager.

        Raises:
            UnsupportedRepositoryOperationError: If transactions are not enabled
        """
        if self._transaction_manager is None:
            raise UnsupportedRepositoryOperationError(
                "transactions are not supported by this session"
            )
        return self._transaction_manager

    @property
    def has_transaction_manager(self) -> bool:
        return self._transaction_manager is not None


class Session:
    """
    A logged in handle on one workspace.

    Example:
        >>> session = repository.login(SimpleCredentials(user_id="admin", password="admin"))
        >>> session.get_workspace().name
        'default'
    """

    def __init__(
        self,
        repository: Repository,
        workspace_name: str,
        credentials: Credentials | None,
        transport: Transport,
    ):
        """
        Initialize the session.

        Args:
            repository: Repository that created the session
            workspace_name: Workspace the transport logged into
            credentials: Credentials used for the login
            transport: Transport bound to this session
        """
        self.session_id = uuid4().hex
        self.repository = repository
        self.credentials = credentials
        self.transport = transport
        self.workspace = Workspace(self, workspace_name)
        self._live = True
        streams.track_session(self)

    def get_repository(self) -> Repository:
        return self.repository

    def get_workspace(self) -> Workspace:
        return self.workspace

    def get_transport(self) -> Transport:
        return self.transport

    def get_user_id(self) -> str | None:
        """Get the user id from the credentials, None for anonymous sessions."""
        if isinstance(self.credentials, SimpleCredentials):
            return self.credentials.user_id
        return None

    def get_attribute_names(self) -> list[str]:
        if self.credentials is None:
            return []
        return list(self.credentials.attributes.keys())

    def get_attribute(self, name: str) -> Any:
        if self.credentials is None:
            return None
        return self.credentials.attributes.get(name)

    def is_live(self) -> bool:
        return self._live

    def get_binary_url(self, path: str) -> str:
        """Build the lazy stream URL for a binary property at an absolute path."""
        if not path.startswith("/"):
            raise RepositoryError(f"binary property path must be absolute, got '{path}'")
        return streams.build_stream_url(self.session_id, path)

    def open_binary(self, path: str) -> BinaryIO:
        """
        Open a binary property as a lazily loaded stream.

        Raises:
            RepositoryError: If the session has logged out
            UnsupportedRepositoryOperationError: If the stream handler is not registered
        """
        if not self._live:
            raise RepositoryError("session is logged out")
        return streams.open_stream(self.get_binary_url(path))

    def logout(self) -> None:
        """End the session. Further binary access fails."""
        if not self._live:
            return
        self._live = False
        streams.untrack_session(self)
        self.transport.logout()
        logger.debug("session %s logged out of %s", self.session_id, self.workspace.name)
