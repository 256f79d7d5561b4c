"""Permission ⇄ policy translation for the policy engine.

Defines:
- Verbs / Domains: verb letters, aggregate verbs and resource families
- Resource path builders and per-domain parsers
- Action codec: ``read_collections`` ⇄ ``("R", "collections")``
- Permission / Policy models
- permission_to_policy(), policy_to_permission(): the translator
- BUILTIN_ROLES: viewer / editor / admin verb sets
"""

from .actions import Action, decode_action, encode_action
from .constants import VERB_WORDS, WILDCARD, Domains, Verbs
from .models import Permission, Policy
from .roles import (
    BUILTIN_ROLE_NAMES,
    BUILTIN_ROLES,
    BuiltinRole,
    builtin_role_verbs,
    get_builtin_role,
    is_builtin_role,
)
from .paths import (
    PATH_PARSERS,
    ResourceRef,
    cluster,
    collections,
    objects,
    parse_cluster_path,
    parse_collections_path,
    parse_objects_path,
    parse_roles_path,
    parse_shards_path,
    roles,
    shards,
)
from .translator import (
    permission_to_policy,
    permission_to_policy_record,
    permissions_to_policies,
    policies_to_permissions,
    policy_to_permission,
)

__all__ = [
    "Action",
    "BUILTIN_ROLES",
    "BUILTIN_ROLE_NAMES",
    "BuiltinRole",
    "Domains",
    "PATH_PARSERS",
    "Permission",
    "Policy",
    "ResourceRef",
    "VERB_WORDS",
    "Verbs",
    "WILDCARD",
    "builtin_role_verbs",
    "cluster",
    "collections",
    "decode_action",
    "encode_action",
    "get_builtin_role",
    "is_builtin_role",
    "objects",
    "parse_cluster_path",
    "parse_collections_path",
    "parse_objects_path",
    "parse_roles_path",
    "parse_shards_path",
    "permission_to_policy",
    "permission_to_policy_record",
    "permissions_to_policies",
    "policies_to_permissions",
    "policy_to_permission",
    "roles",
    "shards",
]
