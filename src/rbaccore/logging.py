"""Logging utilities for rbaccore.

This module provides:
- Logging configuration from RBACConfig
- Structured (JSON) or plain-text formatting
- A logger adapter that binds the role being administered

The pure translation functions never log; the manager and the gRPC
boundary helpers do.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import LogLevel, RBACConfig

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName", "role", "domain",
    }
)


class RBACFormatter(logging.Formatter):
    """Formatter that surfaces ``role`` and ``domain`` context.

    Outputs one JSON object per record, or a plain-text line with the same
    context appended as ``key=value`` pairs.
    """

    def __init__(self, json_format: bool = True, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        role = getattr(record, "role", None)
        domain = getattr(record, "domain", None)

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if role:
            log_data["role"] = role
        if domain:
            log_data["domain"] = domain

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            log_data["level"],
            log_data["logger"],
        ]
        if role:
            parts.append(f"role={role}")
        if domain:
            parts.append(f"domain={domain}")
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class RBACLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds the administered role to every record.

    Usage:
        logger = get_rbac_logger(__name__, role="editor")
        logger.info("Added permissions", domain="collections")
    """

    def __init__(self, logger: logging.Logger, role: Optional[str] = None):
        super().__init__(logger, {})
        self.role = role

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        role = kwargs.pop("role", self.role)
        domain = kwargs.pop("domain", None)

        extra = dict(kwargs.get("extra") or {})
        if role:
            extra["role"] = role
        if domain:
            extra["domain"] = domain
        kwargs["extra"] = extra

        return msg, kwargs


def setup_logging(
    config: Optional[RBACConfig] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure the root logger for a service embedding rbaccore.

    Args:
        config: RBACConfig instance (if None, loads from environment)
        json_format: Override ``config.log_json`` when given
    """
    if config is None:
        from .config import load_config_from_env

        config = load_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(config.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        RBACFormatter(json_format=config.log_json if json_format is None else json_format)
    )
    root_logger.addHandler(console_handler)

    if config.service_name:
        logging.getLogger(config.service_name).setLevel(log_level)


def get_rbac_logger(name: str, role: Optional[str] = None) -> RBACLoggerAdapter:
    """Get a logger adapter, optionally bound to a role.

    Example:
        logger = get_rbac_logger(__name__)
        logger.warning("Skipping policy", role="viewer", domain="tenants")
    """
    return RBACLoggerAdapter(logging.getLogger(name), role=role)


__all__ = [
    "RBACFormatter",
    "RBACLoggerAdapter",
    "setup_logging",
    "get_rbac_logger",
]
