"""
Core package.

The repository entry point together with the session, transaction and
descriptor machinery it coordinates.
"""

from lantana.core.repository import Repository
from lantana.core.factory import Factory, ObjectFactory
from lantana.core.session import Session, Workspace
from lantana.core.transaction import UserTransaction
from lantana.core.descriptors import DescriptorCache
from lantana.core.streams import BinaryStreamWrapper, open_stream

__all__ = [
    "Repository",
    "Factory",
    "ObjectFactory",
    "Session",
    "Workspace",
    "UserTransaction",
    "DescriptorCache",
    "BinaryStreamWrapper",
    "open_stream",
]
