"""
Transports.

The repository core talks to the server exclusively through a Transport.
"""

from lantana.transport.base import Transport, TransactionalTransport
from lantana.transport.memory import MemoryTransport, TransactionalMemoryTransport
from lantana.transport.davex import HttpTransport

__all__ = [
    "Transport",
    "TransactionalTransport",
    "MemoryTransport",
    "TransactionalMemoryTransport",
    "HttpTransport",
]
