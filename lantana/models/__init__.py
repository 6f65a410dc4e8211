"""lantana models package."""

from lantana.models.config import (
    LantanaConfig,
    RepositoryOptions,
    HttpTransportConfig,
    CredentialsConfig,
    LoggingConfig,
)
from lantana.models.credentials import Credentials, SimpleCredentials, GuestCredentials
from lantana.models.descriptors import (
    DescriptorValue,
    STANDARD_DESCRIPTORS,
    is_standard_descriptor,
)

__all__ = [
    # Config
    "LantanaConfig",
    "RepositoryOptions",
    "HttpTransportConfig",
    "CredentialsConfig",
    "LoggingConfig",
    # Credentials
    "Credentials",
    "SimpleCredentials",
    "GuestCredentials",
    # Descriptors
    "DescriptorValue",
    "STANDARD_DESCRIPTORS",
    "is_standard_descriptor",
]
