"""
Tests for lazy binary streams and the stream handler registry.
"""

import io

import pytest

from lantana.core import streams
from lantana.core.repository import Repository
from lantana.exceptions import RepositoryError, UnsupportedRepositoryOperationError


class TestStreamHandlerRegistry:
    """Tests for StreamHandlerRegistry."""

    def test_register_and_open(self):
        """Test a registered handler opens URLs of its scheme."""
        registry = streams.StreamHandlerRegistry()
        registry.register("mem", lambda url: io.BytesIO(url.encode()))

        assert registry.is_registered("mem")
        assert registry.open("mem://abc").read() == b"mem://abc"

    def test_double_register_rejected(self):
        """Test registering a scheme twice fails."""
        registry = streams.StreamHandlerRegistry()
        registry.register("mem", io.BytesIO)
        with pytest.raises(RepositoryError):
            registry.register("mem", io.BytesIO)

    def test_unknown_scheme(self):
        """Test opening an unregistered scheme fails."""
        registry = streams.StreamHandlerRegistry()
        with pytest.raises(UnsupportedRepositoryOperationError):
            registry.open("nope://x")

    def test_unregister(self):
        """Test unregister removes the handler."""
        registry = streams.StreamHandlerRegistry()
        registry.register("mem", io.BytesIO)
        registry.unregister("mem")
        assert not registry.is_registered("mem")


class TestStreamRegistrationLatch:
    """Tests for StreamRegistrationLatch."""

    def test_undecided_initially(self):
        """Test a new latch has not decided."""
        assert streams.StreamRegistrationLatch().registered is None

    def test_first_decision_wins(self):
        """Test only the first decision is applied."""
        latch = streams.StreamRegistrationLatch()
        calls = []

        assert latch.latch(True, lambda: calls.append(1)) is True
        assert latch.latch(False, lambda: calls.append(1)) is True
        assert latch.latch(True, lambda: calls.append(1)) is True
        assert calls == [1]

    def test_failed_registration_not_latched(self):
        """Test a failed registration leaves the latch undecided."""
        latch = streams.StreamRegistrationLatch()

        def fail():
            raise RepositoryError("scheme taken")

        with pytest.raises(RepositoryError):
            latch.latch(True, fail)
        assert latch.registered is None


class TestBinaryStreamWrapper:
    """Tests for lazily loaded binary property streams."""

    @pytest.fixture
    def session(self, memory_transport, credentials):
        repository = Repository(transport=memory_transport)
        return repository.login(credentials, "ws1")

    def test_binary_url(self, session):
        """Test binary URLs carry the session id and path."""
        url = session.get_binary_url("/files/logo/jcr:data")
        assert url == f"lantana://{session.session_id}/files/logo/jcr:data"

    def test_relative_path_rejected(self, session):
        """Test relative paths are rejected."""
        with pytest.raises(RepositoryError):
            session.get_binary_url("files/logo")

    def test_lazy_read(self, session, memory_transport):
        """Test content is fetched on first read only."""
        stream = session.open_binary("/files/logo/jcr:data")

        assert isinstance(stream, streams.BinaryStreamWrapper)
        assert not stream.is_loaded
        assert memory_transport.binary_requests == 0

        assert stream.read(4) == b"\x89PNG"
        assert stream.read() == b" binary content"
        assert memory_transport.binary_requests == 1

    def test_seek_and_tell(self, session):
        """Test seek and tell on a loaded stream."""
        stream = session.open_binary("/files/logo/jcr:data")
        assert stream.tell() == 0
        stream.seek(5)
        assert stream.read(6) == b"binary"
        assert stream.tell() == 11

    def test_open_via_registry(self, session):
        """Test binary URLs open through the handler registry."""
        url = session.get_binary_url("/files/logo/jcr:data")
        assert streams.open_stream(url).read() == b"\x89PNG binary content"

    def test_logged_out_session(self, session, memory_transport):
        """Test streams of a logged out session cannot load."""
        stream = session.open_binary("/files/logo/jcr:data")
        session.logout()

        assert not session.is_live()
        with pytest.raises(RepositoryError):
            stream.read()
        with pytest.raises(RepositoryError):
            session.open_binary("/files/logo/jcr:data")

    def test_missing_binary(self, session):
        """Test a missing binary fails on read."""
        stream = session.open_binary("/files/none/jcr:data")
        with pytest.raises(RepositoryError):
            stream.read()

    def test_unknown_session(self):
        """Test a URL naming an unknown session fails on read."""
        stream = streams.BinaryStreamWrapper("lantana://doesnotexist/a/b")
        with pytest.raises(RepositoryError):
            stream.read()

    def test_invalid_url(self):
        """Test malformed URLs are rejected."""
        with pytest.raises(RepositoryError):
            streams.BinaryStreamWrapper("http://example.com/a")
        with pytest.raises(RepositoryError):
            streams.BinaryStreamWrapper("lantana:///no-session")

    def test_handler_not_registered(self, memory_transport, credentials):
        """Test opening fails when the handler was never registered."""
        repository = Repository(transport=memory_transport, options={"stream_wrapper": False})
        session = repository.login(credentials, "ws1")
        with pytest.raises(UnsupportedRepositoryOperationError):
            session.open_binary("/files/logo/jcr:data")

    def test_transport_without_binary_support(self, stub_transport, credentials):
        """Test reading fails when the transport has no binary support."""
        session = Repository(transport=stub_transport).login(credentials, "ws1")
        stream = session.open_binary("/any/jcr:data")
        with pytest.raises(UnsupportedRepositoryOperationError):
            stream.read()
