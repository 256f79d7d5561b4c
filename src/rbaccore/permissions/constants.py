"""Verb, domain and path constants shared by the codec, builders and parsers.

Provides:
- ``Verbs`` — CRUD verb letters and the aggregate verbs used by the policy engine.
- ``Domains`` — resource families a permission can target.
- ``VERB_WORDS`` — verb → English verb-word table used to rebuild action tokens.
"""

from __future__ import annotations

from types import MappingProxyType

WILDCARD = "*"
PATH_SEPARATOR = "/"
ACTION_SEPARATOR = "_"


class Verbs:
    """Verb values stored in policies.

    The aggregate verbs are matcher regexes understood by the policy
    engine, so they must stay byte-exact.
    """

    CREATE = "C"
    READ = "R"
    UPDATE = "U"
    DELETE = "D"
    CRU = "(C)|(R)|(U)"
    CRUD = "(C)|(R)|(U)|(D)"

    # First letter of a verb-word that means "all of CRUD"
    MANAGE_LETTER = "M"


class Domains:
    """Resource families. The value is the suffix of an action token."""

    CLUSTER = "cluster"
    ROLES = "roles"
    COLLECTIONS = "collections"
    TENANTS = "tenants"
    OBJECTS_COLLECTION = "objects_collection"
    OBJECTS_TENANTS = "objects_tenants"
    ALL = WILDCARD

    OBJECTS = frozenset({"objects_collection", "objects_tenants"})
    KNOWN = frozenset(
        {
            "cluster",
            "roles",
            "collections",
            "tenants",
            "objects_collection",
            "objects_tenants",
        }
    )


# Read-only after import.
VERB_WORDS: MappingProxyType[str, str] = MappingProxyType(
    {
        Verbs.CRUD: "manage",
        Verbs.CREATE: "create",
        Verbs.READ: "read",
        Verbs.UPDATE: "update",
        Verbs.DELETE: "delete",
    }
)


__all__ = [
    "ACTION_SEPARATOR",
    "Domains",
    "PATH_SEPARATOR",
    "VERB_WORDS",
    "Verbs",
    "WILDCARD",
]
