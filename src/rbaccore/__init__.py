from .config import RBACConfig, LogLevel, load_config_from_env
from .exceptions import (
    RBACError,
    ConfigurationError,
    PermissionEncodeError,
    MalformedActionError,
    UnknownDomainError,
    PolicyDecodeError,
    UnknownVerbError,
    PathDecodeError,
    MalformedPolicyError,
    BuiltinRoleError,
    PolicyStoreError,
)
from .logging import (
    RBACFormatter,
    RBACLoggerAdapter,
    setup_logging,
    get_rbac_logger,
)
from .interfaces import PolicyEngine
from .manager import RBACManager
from .permissions import (
    BUILTIN_ROLES,
    Action,
    BuiltinRole,
    Domains,
    Permission,
    Policy,
    Verbs,
    builtin_role_verbs,
    cluster,
    collections,
    decode_action,
    encode_action,
    get_builtin_role,
    is_builtin_role,
    objects,
    permission_to_policy,
    permissions_to_policies,
    policies_to_permissions,
    policy_to_permission,
    roles,
    shards,
)

__all__ = [
    'RBACConfig',
    'LogLevel',
    'load_config_from_env',
    'RBACError',
    'ConfigurationError',
    'PermissionEncodeError',
    'MalformedActionError',
    'UnknownDomainError',
    'PolicyDecodeError',
    'UnknownVerbError',
    'PathDecodeError',
    'MalformedPolicyError',
    'BuiltinRoleError',
    'PolicyStoreError',
    'RBACFormatter',
    'RBACLoggerAdapter',
    'setup_logging',
    'get_rbac_logger',
    'PolicyEngine',
    'RBACManager',
    'BUILTIN_ROLES',
    'Action',
    'BuiltinRole',
    'Domains',
    'Permission',
    'Policy',
    'Verbs',
    'builtin_role_verbs',
    'cluster',
    'collections',
    'decode_action',
    'encode_action',
    'get_builtin_role',
    'is_builtin_role',
    'objects',
    'permission_to_policy',
    'permissions_to_policies',
    'policies_to_permissions',
    'policy_to_permission',
    'roles',
    'shards',
]
