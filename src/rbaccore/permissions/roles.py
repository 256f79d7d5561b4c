"""Built-in roles that exist as code, not as stored policies.

Role provisioning reads this table to seed default policies for the three
predefined roles. The table is built at import and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from .constants import Verbs


@dataclass(frozen=True)
class BuiltinRole:
    name: str
    verbs: str


BUILTIN_ROLES: MappingProxyType[str, str] = MappingProxyType(
    {
        "viewer": Verbs.READ,
        "editor": Verbs.CRU,
        "admin": Verbs.CRUD,
    }
)

BUILTIN_ROLE_NAMES: frozenset[str] = frozenset(BUILTIN_ROLES)

_ROLE_DEFINITIONS: MappingProxyType[str, BuiltinRole] = MappingProxyType(
    {name: BuiltinRole(name=name, verbs=verbs) for name, verbs in BUILTIN_ROLES.items()}
)


def is_builtin_role(name: str) -> bool:
    """Check if a role name is a built-in role."""
    return name in BUILTIN_ROLE_NAMES


def builtin_role_verbs(name: str) -> Optional[str]:
    """Verb set granted by a built-in role, or None when ``name`` is not one."""
    return BUILTIN_ROLES.get(name)


def get_builtin_role(name: str) -> Optional[BuiltinRole]:
    """Frozen definition of a built-in role, or None when ``name`` is not one."""
    return _ROLE_DEFINITIONS.get(name)


__all__ = [
    "BUILTIN_ROLES",
    "BUILTIN_ROLE_NAMES",
    "BuiltinRole",
    "builtin_role_verbs",
    "get_builtin_role",
    "is_builtin_role",
]
