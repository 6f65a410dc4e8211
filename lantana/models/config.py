"""
Configuration models for lantana.

Supports configuration via YAML file, environment variables, or programmatic setup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RepositoryOptions(BaseModel):
    """
    Optional features of a Repository.

    Unknown keys are kept so callers and subclasses can carry their own
    options alongside the recognized ones.
    """

    model_config = ConfigDict(extra="allow")

    transactions: bool = Field(
        default=True,
        description="Attach a transaction manager to sessions if the transport supports it",
    )
    stream_wrapper: bool = Field(
        default=True,
        description="Register the global handler for lazy binary property streams",
    )

    @classmethod
    def merge(cls, options: RepositoryOptions | dict[str, Any] | None) -> "RepositoryOptions":
        """
        Merge caller supplied options over the defaults.

        Args:
            options: Options as a model, a plain dict, or None

        Returns:
            New RepositoryOptions instance
        """
        if options is None:
            return cls()
        if isinstance(options, RepositoryOptions):
            return options.model_copy()
        return cls(**options)


class HttpTransportConfig(BaseModel):
    """Settings for the HTTP (WebDAV) transport."""

    server_url: str = Field(
        default="http://localhost:8080/server",
        description="Base URL of the repository server",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )
    max_retries: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Retries for connection level failures",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates",
    )
    user_agent: str = Field(
        default="lantana",
        description="User-Agent header sent with every request",
    )

    @field_validator("server_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the server URL."""
        return v.rstrip("/")


class CredentialsConfig(BaseModel):
    """Default credentials used by the CLI."""

    user_id: str | None = Field(default=None, description="User id")
    password: str | None = Field(default=None, description="Password")
    workspace: str | None = Field(
        default=None,
        description="Workspace to log into (None = repository default)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level"
    )
    file: str | None = Field(
        default=None,
        description="Log file path (None = console only)"
    )
    json_format: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )


class LantanaConfig(BaseSettings):
    """
    Main lantana configuration.

    Configuration can be loaded from:
    1. YAML file (lantana.yaml or config.yaml)
    2. Environment variables (LANTANA_* prefix)
    3. Programmatic setup
    """

    model_config = SettingsConfigDict(
        env_prefix="LANTANA_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    repository: RepositoryOptions = Field(default_factory=RepositoryOptions)
    transport: HttpTransportConfig = Field(default_factory=HttpTransportConfig)
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "LantanaConfig":
        """
        Load configuration from file and environment.

        Priority (highest to lowest):
        1. Environment variables
        2. Specified config file
        3. Default config files (lantana.yaml, config.yaml)
        4. Default values
        """
        config_data: dict = {}

        if config_path:
            config_file = Path(config_path)
            if config_file.exists():
                config_data = cls._load_yaml(config_file)
        else:
            for filename in ["lantana.yaml", "config.yaml", "lantana.yml", "config.yml"]:
                config_file = Path(filename)
                if config_file.exists():
                    config_data = cls._load_yaml(config_file)
                    break

        return cls(**config_data)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        """Load YAML configuration file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if data else {}

    def save(self, path: str | Path) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
