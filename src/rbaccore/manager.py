"""Role permission management on top of an external policy engine.

``RBACManager`` is the piece the administrative API calls: it translates
permissions into policies for a role, hands them to the engine, and turns
stored policies back into permissions for listing.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from .config import RBACConfig
from .exceptions import BuiltinRoleError, PermissionEncodeError, PolicyDecodeError, PolicyStoreError
from .interfaces import PolicyEngine
from .logging import get_rbac_logger
from .permissions.constants import VERB_WORDS
from .permissions.models import Permission, Policy
from .permissions.roles import BuiltinRole, get_builtin_role, is_builtin_role
from .permissions.translator import permissions_to_policies, policy_to_permission

logger = get_rbac_logger(__name__)

# Position of the subject in the engine's policy layout
SUBJECT_FIELD = 0


class RBACManager:
    """Grant, revoke and list role permissions through a :class:`PolicyEngine`.

    Args:
        engine: Policy store and decision point.
        config: Settings; defaults to ``RBACConfig()``.

    Example::

        manager = RBACManager(engine)
        manager.add_permissions("reader", [
            Permission(action="read_collections", collection="Article"),
        ])
        manager.get_role_permissions("reader")
        # [Permission(action="read_collections", collection="Article", ...)]
    """

    def __init__(self, engine: PolicyEngine, config: Optional[RBACConfig] = None) -> None:
        self.engine = engine
        self.config = config or RBACConfig()

    def _check_mutable(self, role: str) -> None:
        if self.config.protect_builtin_roles and is_builtin_role(role):
            raise BuiltinRoleError(f"built-in role {role!r} cannot be modified", role=role)

    def _policies(self, role: str, permissions: Iterable[Permission]) -> list[Policy]:
        policies = permissions_to_policies(role, permissions, strict=self.config.strict_domains)
        for policy in policies:
            if policy.verb not in VERB_WORDS:
                raise PermissionEncodeError(
                    f"verb {policy.verb!r} for domain {policy.domain!r} cannot be listed back",
                    verb=policy.verb,
                    domain=policy.domain,
                )
        return policies

    def _stored(self, role: str) -> set[Policy]:
        return {Policy.from_tuple(stored) for stored in self.engine.get_filtered_policy(SUBJECT_FIELD, role)}

    def add_permissions(self, role: str, permissions: Iterable[Permission]) -> list[Policy]:
        """Encode ``permissions`` for ``role`` and store the ones not yet held.

        Every permission is encoded before anything is written, so a
        malformed one leaves the engine untouched. Only verbs that decode
        back to a verb-word are accepted.

        Returns:
            The policies actually written.

        Raises:
            PermissionEncodeError: A permission cannot be encoded or listed back.
            PolicyStoreError: The engine refused the write.
        """
        self._check_mutable(role)
        encoded = self._policies(role, permissions)
        stored = self._stored(role)
        policies = [policy for policy in encoded if policy not in stored]
        if policies and not self.engine.add_policies([policy.as_list() for policy in policies]):
            raise PolicyStoreError(f"engine refused {len(policies)} policies for role {role!r}", role=role)
        logger.info("Added %d policies", len(policies), role=role)
        return policies

    def remove_permissions(self, role: str, permissions: Iterable[Permission]) -> list[Policy]:
        """Remove the stored policies matching ``permissions``; returns those removed."""
        self._check_mutable(role)
        encoded = self._policies(role, permissions)
        stored = self._stored(role)
        policies = [policy for policy in encoded if policy in stored]
        if policies and not self.engine.remove_policies([policy.as_list() for policy in policies]):
            raise PolicyStoreError(f"engine refused to remove {len(policies)} policies for role {role!r}", role=role)
        logger.info("Removed %d policies", len(policies), role=role)
        return policies

    def _decode(self, stored: list[str]) -> tuple[str, Permission]:
        policy = Policy.from_tuple(stored)
        try:
            return policy.subject, policy_to_permission(policy)
        except PolicyDecodeError as e:
            logger.warning(
                "Cannot decode stored policy %s: [%s] %s",
                policy.as_tuple(),
                e.code,
                e.message,
                role=policy.subject,
                domain=policy.domain,
            )
            raise

    def get_role_permissions(self, role: str) -> list[Permission]:
        """Permissions stored for ``role``.

        Raises:
            PolicyDecodeError: A stored policy cannot be decoded; nothing is returned.
        """
        stored = self.engine.get_filtered_policy(SUBJECT_FIELD, role)
        return [self._decode(policy)[1] for policy in stored]

    def get_roles(self) -> dict[str, list[Permission]]:
        """Every subject in the engine mapped to its decoded permissions."""
        roles: dict[str, list[Permission]] = {}
        for stored in self.engine.get_policy():
            subject, permission = self._decode(stored)
            roles.setdefault(subject, []).append(permission)
        return roles

    def authorize(self, subject: str, resource: str, verb: str) -> bool:
        """Delegate a decision to the engine."""
        return self.engine.authorize(subject, resource, verb)

    @staticmethod
    def builtin_role(name: str) -> Optional[BuiltinRole]:
        return get_builtin_role(name)


__all__ = ["RBACManager", "SUBJECT_FIELD"]
