"""Configuration contract for rbaccore.

Pydantic-validated settings for the translator and the role permission
manager. Services embedding rbaccore build an ``RBACConfig`` once at start-up
and pass it down; direct os.environ/os.getenv usage is confined to
:func:`load_config_from_env`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

_TRUTHY = ("true", "1", "yes", "on")


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RBACConfig(BaseModel):
    """Settings shared by the translator, manager and logging setup.

    ``strict_domains`` decides what happens when a permission names a domain
    with no resource layout: raise :class:`~rbaccore.exceptions.UnknownDomainError`
    (default) or fall back to an empty resource path as legacy stores expect.
    """

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level for the service",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )
    service_name: Optional[str] = Field(
        default=None,
        description="Service name used as the logger namespace",
    )

    # Translation
    strict_domains: bool = Field(
        default=True,
        description="Reject unknown permission domains instead of emitting an empty resource path",
    )
    protect_builtin_roles: bool = Field(
        default=True,
        description="Refuse to add or remove permissions on built-in roles",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",
        "frozen": True,
    }


def load_config_from_env() -> RBACConfig:
    """Load configuration from environment variables.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - SERVICE_NAME: Service name for logging
    - RBAC_STRICT_DOMAINS: Reject unknown domains (default: true)
    - RBAC_PROTECT_BUILTIN_ROLES: Refuse built-in role edits (default: true)

    Returns:
        RBACConfig instance with values from environment or defaults.

    Raises:
        ConfigurationError: An environment value fails validation.
    """
    import os

    try:
        return RBACConfig(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_json=os.getenv("LOG_JSON", "false").lower() in _TRUTHY,
            service_name=os.getenv("SERVICE_NAME"),
            strict_domains=os.getenv("RBAC_STRICT_DOMAINS", "true").lower() in _TRUTHY,
            protect_builtin_roles=os.getenv("RBAC_PROTECT_BUILTIN_ROLES", "true").lower() in _TRUTHY,
        )
    except ValidationError as e:
        fields = sorted({str(error["loc"][0]) for error in e.errors() if error["loc"]})
        raise ConfigurationError(f"invalid environment configuration: {e}", fields=fields) from e


__all__ = [
    "LogLevel",
    "RBACConfig",
    "load_config_from_env",
]
