"""
User transaction support for sessions on transactional transports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lantana.exceptions import TransactionStateError, UnsupportedRepositoryOperationError
from lantana.utils.logger import get_logger

if TYPE_CHECKING:
    from lantana.core.session import Session
    from lantana.transport.base import TransactionalTransport

logger = get_logger(__name__)


class UserTransaction:
    """
    Begin, commit and roll back transactions for one session.

    Example:
        >>> utx = session.get_workspace().get_transaction_manager()
        >>> utx.begin()
        >>> ...
        >>> utx.commit()
    """

    def __init__(self, transport: TransactionalTransport, session: Session):
        self.transport = transport
        self.session = session
        self._in_transaction = False

    def begin(self) -> None:
        """
        Start a transaction.

        Raises:
            UnsupportedRepositoryOperationError: If a transaction is already open
        """
        if self._in_transaction:
            raise UnsupportedRepositoryOperationError("nested transactions are not supported")
        token = self.transport.begin_transaction()
        self._in_transaction = True
        logger.debug("transaction %s started", token)

    def commit(self) -> None:
        """
        Commit the open transaction.

        Raises:
            TransactionStateError: If no transaction is open
        """
        if not self._in_transaction:
            raise TransactionStateError("no transaction to commit")
        self.transport.commit_transaction()
        self._in_transaction = False

    def rollback(self) -> None:
        """
        Roll back the open transaction.

        Raises:
            TransactionStateError: If no transaction is open
        """
        if not self._in_transaction:
            raise TransactionStateError("no transaction to roll back")
        self.transport.rollback_transaction()
        self._in_transaction = False

    def in_transaction(self) -> bool:
        return self._in_transaction

    def set_transaction_timeout(self, seconds: int) -> None:
        """Set the timeout for transactions started afterwards. 0 resets it."""
        if seconds < 0:
            raise ValueError("transaction timeout must not be negative")
        self.transport.set_transaction_timeout(seconds)
