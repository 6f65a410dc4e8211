"""
lantana - client library for hierarchical content repositories

Log into workspaces of a remote content repository over a pluggable transport
and inspect the repository descriptors.
"""

__version__ = "0.1.0"
__author__ = "lantana Team"
__license__ = "MIT"

from lantana.core.repository import Repository
from lantana.exceptions import (
    RepositoryError,
    LoginError,
    NoSuchWorkspaceError,
    UnsupportedRepositoryOperationError,
)
from lantana.models.config import LantanaConfig, RepositoryOptions
from lantana.models.credentials import SimpleCredentials, GuestCredentials

__all__ = [
    "__version__",
    "Repository",
    "RepositoryError",
    "LoginError",
    "NoSuchWorkspaceError",
    "UnsupportedRepositoryOperationError",
    "LantanaConfig",
    "RepositoryOptions",
    "SimpleCredentials",
    "GuestCredentials",
]
