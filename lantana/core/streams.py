"""
Lazy binary property streams.

Binary property values are addressed by URLs under the ``lantana://`` scheme
and only fetched from the transport when first read. The handler for that
scheme is registered once per process by the first Repository constructed.
"""

from __future__ import annotations

import io
import threading
import weakref
from typing import TYPE_CHECKING, BinaryIO, Callable
from urllib.parse import unquote, urlsplit

from lantana.exceptions import RepositoryError, UnsupportedRepositoryOperationError
from lantana.utils.logger import get_logger

if TYPE_CHECKING:
    from lantana.core.session import Session

logger = get_logger(__name__)

STREAM_SCHEME = "lantana"

StreamHandler = Callable[[str], BinaryIO]


class StreamHandlerRegistry:
    """Maps URL schemes to callables that open a stream for a URL."""

    def __init__(self):
        self._handlers: dict[str, StreamHandler] = {}
        self._lock = threading.Lock()

    def register(self, scheme: str, handler: StreamHandler) -> None:
        """
        Register a handler for a scheme.

        Raises:
            RepositoryError: If the scheme already has a handler
        """
        with self._lock:
            if scheme in self._handlers:
                raise RepositoryError(f"stream scheme '{scheme}' is already registered")
            self._handlers[scheme] = handler

    def unregister(self, scheme: str) -> None:
        """Remove the handler for a scheme, if any."""
        with self._lock:
            self._handlers.pop(scheme, None)

    def is_registered(self, scheme: str) -> bool:
        """Whether a handler exists for the scheme."""
        return scheme in self._handlers

    def open(self, url: str) -> BinaryIO:
        """
        Open a stream for a URL using the handler of its scheme.

        Raises:
            UnsupportedRepositoryOperationError: If no handler is registered
        """
        scheme = urlsplit(url).scheme
        handler = self._handlers.get(scheme)
        if handler is None:
            raise UnsupportedRepositoryOperationError(
                f"no stream handler registered for scheme '{scheme}'"
            )
        return handler(url)


# Process wide handler registry
stream_handlers = StreamHandlerRegistry()

# Live sessions by id, so stream URLs can be resolved back to a transport
_sessions: weakref.WeakValueDictionary[str, Session] = weakref.WeakValueDictionary()


def track_session(session: Session) -> None:
    """Make a session resolvable from binary stream URLs."""
    _sessions[session.session_id] = session


def untrack_session(session: Session) -> None:
    """Stop resolving stream URLs for a session."""
    _sessions.pop(session.session_id, None)


def find_session(session_id: str) -> Session | None:
    """Look up a live session by id."""
    return _sessions.get(session_id)


def build_stream_url(session_id: str, path: str) -> str:
    """Build the stream URL of a binary property."""
    return f"{STREAM_SCHEME}://{session_id}{path}"


class BinaryStreamWrapper(io.RawIOBase):
    """
    Read-only stream over a binary property value.

    Nothing is fetched until the first read or seek, so handing out stream
    objects for large binaries is cheap.

    Example:
        >>> stream = BinaryStreamWrapper("lantana://4f2a.../content/file/jcr:data")
        >>> header = stream.read(16)
    """

    def __init__(self, url: str):
        """
        Initialize the wrapper.

        Args:
            url: lantana:// URL naming a session id and property path

        Raises:
            RepositoryError: If the URL is malformed
        """
        super().__init__()
        parts = urlsplit(url)
        if parts.scheme != STREAM_SCHEME or not parts.netloc:
            raise RepositoryError(f"invalid binary stream url '{url}'")
        self.url = url
        self.session_id = parts.netloc
        self.path = unquote(parts.path) or "/"
        self._buffer: io.BytesIO | None = None

    def _load(self) -> io.BytesIO:
        if self._buffer is None:
            session = find_session(self.session_id)
            if session is None or not session.is_live():
                raise RepositoryError(
                    f"session {self.session_id} is not live, cannot read {self.path}"
                )
            logger.debug("fetching binary %s", self.path)
            data = session.get_transport().get_binary_stream(
                session.get_workspace().name, self.path
            )
            self._buffer = io.BytesIO(data)
        return self._buffer

    @property
    def is_loaded(self) -> bool:
        """Whether the content has been fetched."""
        return self._buffer is not None

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        return self._load().readinto(b)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._load().seek(offset, whence)

    def tell(self) -> int:
        if self._buffer is None:
            return 0
        return self._buffer.tell()


def register_binary_stream_wrapper() -> None:
    """Register BinaryStreamWrapper as the handler of the lantana scheme."""
    stream_handlers.register(STREAM_SCHEME, BinaryStreamWrapper)
    logger.debug("registered binary stream handler for %s://", STREAM_SCHEME)


def open_stream(url: str) -> BinaryIO:
    """Open a binary stream URL through the process wide handler registry."""
    return stream_handlers.open(url)


class StreamRegistrationLatch:
    """
    Init-once decision on whether the stream handler is registered.

    The first caller decides; everyone after gets the latched outcome without
    the register callable running again.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._registered: bool | None = None

    @property
    def registered(self) -> bool | None:
        """Latched outcome, or None while undecided."""
        return self._registered

    def latch(self, enabled: bool, register: Callable[[], None]) -> bool:
        """
        Decide once whether to register.

        Args:
            enabled: Whether the caller wants the handler registered
            register: Performs the registration

        Returns:
            The latched outcome
        """
        with self._lock:
            if self._registered is None:
                if enabled:
                    register()
                self._registered = enabled
            return self._registered


# Process wide latch
stream_registration = StreamRegistrationLatch()
