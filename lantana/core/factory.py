"""
Object factories used by the repository to build sessions and transaction managers.

Subclass Factory (or implement ObjectFactory) to make the repository hand out
custom session or transaction classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from lantana.core.session import Session
from lantana.core.transaction import UserTransaction

if TYPE_CHECKING:
    from lantana.core.repository import Repository
    from lantana.models.credentials import Credentials
    from lantana.transport.base import TransactionalTransport, Transport


class ObjectFactory(ABC):
    """Constructs the objects a Repository hands out."""

    @abstractmethod
    def new_session(
        self,
        repository: Repository,
        workspace_name: str,
        credentials: Credentials | None,
        transport: Transport,
    ) -> Any:
        """Build a session. It must expose get_workspace()."""

    @abstractmethod
    def new_transaction_manager(self, transport: TransactionalTransport, session: Any) -> Any:
        """Build the transaction manager attached to a session's workspace."""


class Factory(ObjectFactory):
    """Default factory producing Session and UserTransaction."""

    session_class: type = Session
    transaction_class: type = UserTransaction

    def new_session(self, repository, workspace_name, credentials, transport):
        return self.session_class(repository, workspace_name, credentials, transport)

    def new_transaction_manager(self, transport, session):
        return self.transaction_class(transport, session)
