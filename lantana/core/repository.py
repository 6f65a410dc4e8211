"""
The repository entry point.

A Repository wraps a transport and hands out sessions. It also exposes the
repository descriptors, fetched from the transport on first use and cached
for the lifetime of the instance.
"""

from __future__ import annotations

from typing import Any

from lantana.core import streams
from lantana.core.descriptors import DescriptorCache
from lantana.core.factory import Factory, ObjectFactory
from lantana.exceptions import RepositoryError, ValueFormatError
from lantana.models.config import RepositoryOptions
from lantana.models.credentials import Credentials
from lantana.models.descriptors import STANDARD_DESCRIPTORS, DescriptorValue
from lantana.transport.base import TransactionalTransport, Transport
from lantana.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_WORKSPACE = "default"


class Repository:
    """
    Entry point into the content repository.

    Example:
        >>> transport = HttpTransport(HttpTransportConfig(server_url="http://localhost:8080/server"))
        >>> repository = Repository(transport=transport)
        >>> session = repository.login(SimpleCredentials(user_id="admin", password="admin"), "default")
        >>> repository.get_descriptor("jcr.repository.vendor")
        'Apache Software Foundation'
    """

    def __init__(
        self,
        factory: ObjectFactory | None = None,
        transport: Transport | None = None,
        options: RepositoryOptions | dict[str, Any] | None = None,
    ):
        """
        Initialize the repository.

        The first Repository created in the process decides, through its
        stream_wrapper option, whether the lazy binary stream handler gets
        registered. Later instances never change that decision.

        Args:
            factory: Builds sessions and transaction managers (Factory if None)
            transport: Transport to the server; may be None until login
            options: Optional features, merged over the defaults
        """
        self.factory = factory if factory is not None else Factory()
        self.transport = transport

        options = RepositoryOptions.merge(options)
        transactional = isinstance(transport, TransactionalTransport)
        if options.transactions and not transactional:
            logger.debug(
                "transport %s is not transactional, disabling transactions",
                type(transport).__name__,
            )
        options.transactions = options.transactions and transactional
        self._options = options

        self._descriptors = DescriptorCache(self._load_descriptors)

        streams.stream_registration.latch(
            options.stream_wrapper,
            streams.register_binary_stream_wrapper,
        )

    @property
    def options(self) -> RepositoryOptions:
        """Effective options, as a copy."""
        return self._options.model_copy()

    def _require_transport(self) -> Transport:
        if self.transport is None:
            raise RepositoryError("no transport configured for this repository")
        return self.transport

    def login(
        self,
        credentials: Credentials | None = None,
        workspace_name: str | None = None,
    ) -> Any:
        """
        Authenticate and open a session on a workspace.

        Args:
            credentials: Credentials of the user, handed to the transport unchanged
            workspace_name: Workspace to use; "default" when omitted

        Returns:
            A session created by the factory

        Raises:
            LoginError: If authentication or authorization for the workspace fails
            NoSuchWorkspaceError: If the workspace is not recognized
            RepositoryError: If another error occurs
        """
        transport = self._require_transport()

        if not workspace_name:
            # TODO: ask the transport for the user's default workspace once one exposes it
            workspace_name = DEFAULT_WORKSPACE

        logger.debug("logging into workspace %s", workspace_name)
        try:
            logged_in = transport.login(credentials, workspace_name)
        except RepositoryError:
            raise
        except Exception as e:
            raise RepositoryError(f"transport failed to login: {e}") from e

        if not logged_in:
            raise RepositoryError("transport failed to login without telling why")

        session = self.factory.new_session(self, workspace_name, credentials, transport)
        if self._options.transactions:
            utx = self.factory.new_transaction_manager(transport, session)
            session.get_workspace().set_transaction_manager(utx)

        return session

    def _load_descriptors(self) -> dict[str, DescriptorValue]:
        return self._require_transport().get_repository_descriptors()

    def get_descriptor_keys(self) -> list[str]:
        """
        Get all descriptor keys, standard and implementation specific.

        Raises:
            RepositoryError: If the descriptors cannot be loaded
        """
        return self._descriptors.keys()

    def is_standard_descriptor(self, key: str) -> bool:
        """Whether key is one of the standard descriptor constants."""
        return key in STANDARD_DESCRIPTORS

    def get_descriptor(self, key: str) -> DescriptorValue | None:
        """
        Get the value(s) of a descriptor.

        Returns:
            A string, a fresh list of strings for multi-valued descriptors,
            or None if the repository does not report this key
        """
        return self._descriptors.get(key)

    def is_single_value_descriptor(self, key: str) -> bool:
        """Whether key is reported with a single value. False for unknown keys."""
        return isinstance(self._descriptors.get(key), str)

    def get_descriptor_value(self, key: str) -> str | None:
        """
        Get the value of a single-valued descriptor.

        Raises:
            ValueFormatError: If the descriptor has multiple values
        """
        value = self._descriptors.get(key)
        if isinstance(value, list):
            raise ValueFormatError(f"descriptor '{key}' is multi-valued")
        return value

    def get_descriptor_values(self, key: str) -> list[str] | None:
        """Get the values of a descriptor, wrapping single values in a list."""
        value = self._descriptors.get(key)
        if value is None:
            return None
        if isinstance(value, list):
            return list(value)
        return [value]
