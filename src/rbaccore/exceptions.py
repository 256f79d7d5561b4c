"""Exception hierarchy for rbaccore.

Every failure raised by the translator, codec, path parsers, and manager
inherits from RBACError. This module provides:
- Base exception hierarchy with stable error codes
- ErrorRegistry for protocol mapping
- gRPC status mapping and a unary handler decorator for the API boundary

Usage:
    from rbaccore.exceptions import (
        RBACError,
        MalformedActionError,
        PathDecodeError,
        grpc_error_handler,
    )
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar, cast

__all__ = [
    # Base hierarchy
    "RBACError",
    "ConfigurationError",
    "PermissionEncodeError",
    "MalformedActionError",
    "UnknownDomainError",
    "PolicyDecodeError",
    "UnknownVerbError",
    "PathDecodeError",
    "MalformedPolicyError",
    "BuiltinRoleError",
    "PolicyStoreError",
    # Registry
    "ErrorRegistry",
    "error_registry",
    "register_error",
    # gRPC helpers
    "get_grpc_status_code",
    "grpc_error_handler",
]

logger = logging.getLogger(__name__)


# ---- Exception Hierarchy ----------------------------------------------------


class RBACError(Exception):
    """Base exception for rbaccore.

    Attributes:
        code: Stable error code string for protocol mapping (e.g. "UNKNOWN_VERB").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(RBACError):
    """Invalid or missing configuration."""

    code: str = "CONFIGURATION_ERROR"
    message: str = "Invalid configuration"


class PermissionEncodeError(RBACError):
    """A permission could not be turned into a policy."""

    code: str = "PERMISSION_ENCODE_ERROR"
    message: str = "Permission cannot be encoded"


class MalformedActionError(PermissionEncodeError):
    """Action token lacks the ``<verb>_<domain>`` separator."""

    code: str = "MALFORMED_ACTION"
    message: str = "Invalid action"


class UnknownDomainError(PermissionEncodeError):
    """Action domain has no resource path layout."""

    code: str = "UNKNOWN_DOMAIN"
    message: str = "Unknown permission domain"


class PolicyDecodeError(RBACError):
    """A stored policy could not be turned back into a permission."""

    code: str = "POLICY_DECODE_ERROR"
    message: str = "Policy cannot be decoded"


class UnknownVerbError(PolicyDecodeError):
    """Verb has no entry in the verb-word table."""

    code: str = "UNKNOWN_VERB"
    message: str = "Unknown policy verb"


class PathDecodeError(PolicyDecodeError):
    """Resource path does not match the layout its domain requires."""

    code: str = "PATH_DECODE_ERROR"
    message: str = "Resource path does not match its domain"


class MalformedPolicyError(PolicyDecodeError):
    """Policy tuple has fewer fields than the engine layout requires."""

    code: str = "MALFORMED_POLICY"
    message: str = "Malformed policy tuple"


class BuiltinRoleError(RBACError):
    """Attempt to modify a built-in role."""

    code: str = "BUILTIN_ROLE_ERROR"
    message: str = "Built-in roles cannot be modified"


class PolicyStoreError(RBACError):
    """The policy engine refused a write."""

    code: str = "POLICY_STORE_ERROR"
    message: str = "Policy engine rejected the change"


# ---- Error Registry for Protocol Mapping ------------------------------------

_E = TypeVar("_E", bound=type[RBACError])


class ErrorRegistry:
    """Registry for mapping internal errors to external protocol codes."""

    def __init__(self) -> None:
        self._errors: dict[str, type[RBACError]] = {}

    def register(self, code: str, error_cls: type[RBACError]) -> None:
        self._errors[code] = error_cls

    def get(self, code: str) -> type[RBACError] | None:
        return self._errors.get(code)

    def all(self) -> dict[str, type[RBACError]]:
        return dict(self._errors)


error_registry = ErrorRegistry()


def register_error(code: str) -> Callable[[_E], _E]:
    """Decorator to register a custom error type.

    Usage:
        @register_error("ROLE_LIMIT_EXCEEDED")
        class RoleLimitExceeded(RBACError):
            code = "ROLE_LIMIT_EXCEEDED"
    """

    def decorator(cls: _E) -> _E:
        error_registry.register(code, cls)
        return cls

    return cast(Callable[[_E], _E], decorator)


# Register base errors
error_registry.register("INTERNAL_ERROR", RBACError)
error_registry.register("CONFIGURATION_ERROR", ConfigurationError)
error_registry.register("PERMISSION_ENCODE_ERROR", PermissionEncodeError)
error_registry.register("MALFORMED_ACTION", MalformedActionError)
error_registry.register("UNKNOWN_DOMAIN", UnknownDomainError)
error_registry.register("POLICY_DECODE_ERROR", PolicyDecodeError)
error_registry.register("UNKNOWN_VERB", UnknownVerbError)
error_registry.register("PATH_DECODE_ERROR", PathDecodeError)
error_registry.register("MALFORMED_POLICY", MalformedPolicyError)
error_registry.register("BUILTIN_ROLE_ERROR", BuiltinRoleError)
error_registry.register("POLICY_STORE_ERROR", PolicyStoreError)


# ---- gRPC Error Handling Utilities ------------------------------------------


def get_grpc_status_code(error: RBACError) -> Any:
    """Map RBACError to gRPC status code.

    Encode and decode failures are caller mistakes or legacy data, so they
    surface as INVALID_ARGUMENT. Import grpc locally to avoid hard
    dependency at module level.
    """
    import grpc

    error_to_status = {
        "CONFIGURATION_ERROR": grpc.StatusCode.FAILED_PRECONDITION,
        "PERMISSION_ENCODE_ERROR": grpc.StatusCode.INVALID_ARGUMENT,
        "MALFORMED_ACTION": grpc.StatusCode.INVALID_ARGUMENT,
        "UNKNOWN_DOMAIN": grpc.StatusCode.INVALID_ARGUMENT,
        "POLICY_DECODE_ERROR": grpc.StatusCode.INVALID_ARGUMENT,
        "UNKNOWN_VERB": grpc.StatusCode.INVALID_ARGUMENT,
        "PATH_DECODE_ERROR": grpc.StatusCode.INVALID_ARGUMENT,
        "MALFORMED_POLICY": grpc.StatusCode.INVALID_ARGUMENT,
        "BUILTIN_ROLE_ERROR": grpc.StatusCode.PERMISSION_DENIED,
        "POLICY_STORE_ERROR": grpc.StatusCode.ABORTED,
    }
    return error_to_status.get(error.code, grpc.StatusCode.INTERNAL)


def grpc_error_handler(method):
    """Decorator for unary gRPC service methods that call into rbaccore.

    Catches RBACError and aborts the call with the mapped status code,
    so malformed permission data becomes a request-level rejection.

    Usage:
        @grpc_error_handler
        async def AddPermissions(self, request, context):
            ...
    """

    @functools.wraps(method)
    async def wrapper(self, request, context):
        try:
            return await method(self, request, context)
        except RBACError as e:
            status_code = get_grpc_status_code(e)
            error_message = f"[{e.code}] {e.message}"

            logger.error(
                "%s failed: %s",
                method.__name__,
                error_message,
                extra={
                    "error_code": e.code,
                    "error_details": e.details,
                },
            )

            context.set_trailing_metadata([("error-code", e.code)])
            await context.abort(status_code, error_message)
            return

        except Exception as e:
            import grpc

            logger.exception("%s unexpected error: %s", method.__name__, e)
            await context.abort(
                grpc.StatusCode.INTERNAL,
                f"Unexpected {type(e)}: {e}",
            )
            return

    return wrapper
