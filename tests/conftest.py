"""
Test configuration and fixtures.
"""

import pytest

from lantana.core import streams
from lantana.models.credentials import SimpleCredentials
from lantana.transport.base import Transport
from lantana.transport.memory import MemoryTransport, TransactionalMemoryTransport


class StubTransport(Transport):
    """Transport recording every call and returning canned answers."""

    def __init__(self, login_result=True, descriptors=None, error=None):
        self.login_result = login_result
        self.descriptors = descriptors if descriptors is not None else {}
        self.error = error
        self.login_calls = []
        self.descriptor_calls = 0

    def login(self, credentials, workspace_name):
        self.login_calls.append((credentials, workspace_name))
        if self.error is not None:
            raise self.error
        return self.login_result

    def get_repository_descriptors(self):
        self.descriptor_calls += 1
        if self.error is not None:
            raise self.error
        return self.descriptors


@pytest.fixture(autouse=True)
def fresh_stream_state(monkeypatch):
    """Give every test its own stream latch and handler registry."""
    monkeypatch.setattr(streams, "stream_registration", streams.StreamRegistrationLatch())
    monkeypatch.setattr(streams, "stream_handlers", streams.StreamHandlerRegistry())


@pytest.fixture
def credentials():
    """Valid credentials for the memory transports."""
    return SimpleCredentials(user_id="user", password="pw")


@pytest.fixture
def sample_descriptors():
    """Descriptor map reported by the stub transports."""
    return {"identifier.stable": "true", "repository.vendor": ["Acme", "Test"]}


@pytest.fixture
def stub_transport(sample_descriptors):
    """Non-transactional transport that accepts any login."""
    return StubTransport(descriptors=sample_descriptors)


@pytest.fixture
def memory_transport(sample_descriptors):
    """Non-transactional in-memory transport."""
    return MemoryTransport(
        users={"user": "pw"},
        workspaces=["default", "ws1"],
        descriptors=sample_descriptors,
        binaries={("ws1", "/files/logo/jcr:data"): b"\x89PNG binary content"},
    )


@pytest.fixture
def transactional_transport(sample_descriptors):
    """Transactional in-memory transport."""
    return TransactionalMemoryTransport(
        users={"user": "pw"},
        workspaces=["default", "ws1"],
        descriptors=sample_descriptors,
    )
