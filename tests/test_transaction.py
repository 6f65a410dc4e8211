"""
Tests for UserTransaction.
"""

import pytest

from lantana.core.repository import Repository
from lantana.exceptions import TransactionStateError, UnsupportedRepositoryOperationError


@pytest.fixture
def utx(transactional_transport, credentials):
    """Transaction manager of a freshly logged in session."""
    session = Repository(transport=transactional_transport).login(credentials, "ws1")
    return session.get_workspace().get_transaction_manager()


class TestUserTransaction:
    """Tests for UserTransaction."""

    def test_begin_commit(self, utx, transactional_transport):
        """Test begin then commit."""
        utx.begin()
        assert utx.in_transaction()
        token = transactional_transport.transaction_token

        utx.commit()
        assert not utx.in_transaction()
        assert transactional_transport.committed == [token]

    def test_begin_rollback(self, utx, transactional_transport):
        """Test begin then rollback."""
        utx.begin()
        token = transactional_transport.transaction_token
        utx.rollback()
        assert not utx.in_transaction()
        assert transactional_transport.rolled_back == [token]

    def test_nested_begin(self, utx):
        """Test nested transactions are unsupported."""
        utx.begin()
        with pytest.raises(UnsupportedRepositoryOperationError):
            utx.begin()

    def test_commit_without_begin(self, utx):
        """Test commit without begin fails."""
        with pytest.raises(TransactionStateError):
            utx.commit()

    def test_rollback_without_begin(self, utx):
        """Test rollback without begin fails."""
        with pytest.raises(TransactionStateError):
            utx.rollback()

    def test_timeout(self, utx, transactional_transport):
        """Test the timeout reaches the transport."""
        utx.set_transaction_timeout(30)
        assert transactional_transport.transaction_timeout == 30

    def test_negative_timeout(self, utx):
        """Test a negative timeout is rejected."""
        with pytest.raises(ValueError):
            utx.set_transaction_timeout(-1)
