"""Permission ⇄ policy translation.

Provides:
- ``permission_to_policy()`` — Permission → ``(resource, verb, domain)``.
- ``policy_to_permission()`` — stored policy → Permission.
- ``permissions_to_policies()`` / ``policies_to_permissions()`` — batch forms
  used when granting to or listing a role.

Wildcard defaulting is all-or-nothing: a ``tenants`` permission missing
either its collection or its tenant targets ``collections/*/shards/*``, and an
objects permission missing any of its three names targets every object.
Decoding such a policy yields ``*`` in every field, not the original partial
input.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Union

from ..exceptions import UnknownDomainError
from . import paths
from .actions import Action
from .constants import WILDCARD, Domains
from .models import Permission, Policy

PolicyLike = Union[Policy, Sequence[str]]


def _resource_for(domain: str, permission: Permission, strict: bool) -> str:
    if domain == Domains.ROLES:
        return paths.roles()[0]

    if domain == Domains.CLUSTER:
        return paths.cluster()

    if domain == Domains.COLLECTIONS:
        collection = permission.collection if permission.collection is not None else WILDCARD
        return paths.collections(collection)

    if domain == Domains.TENANTS:
        if permission.collection is None or permission.tenant is None:
            return paths.shards(WILDCARD, WILDCARD)
        return paths.shards(permission.collection, permission.tenant)

    if domain in Domains.OBJECTS:
        if permission.collection is None or permission.tenant is None or permission.object is None:
            return paths.objects(WILDCARD, WILDCARD, WILDCARD)
        return paths.objects(permission.collection, permission.tenant, permission.object)

    if strict:
        raise UnknownDomainError(
            f"action {permission.action!r} targets unknown domain {domain!r}",
            action=permission.action,
            domain=domain,
        )
    return ""


def permission_to_policy(permission: Permission, *, strict: bool = True) -> tuple[str, str, str]:
    """Translate a permission into the engine's ``(resource, verb, domain)``.

    Args:
        permission: Grant built by the administrative API.
        strict: Raise for domains with no resource layout. With ``False`` the
            resource is ``""`` as older policy stores expect.

    Raises:
        MalformedActionError: ``permission.action`` has no ``_`` separator.
        UnknownDomainError: Unknown domain and ``strict`` is set.

    Example::

        permission_to_policy(Permission(action="read_collections", collection="Article"))
        # ("collections/Article", "R", "collections")
    """
    action = Action.parse(permission.action)
    return _resource_for(action.domain, permission, strict), action.verb, action.domain


def policy_to_permission(policy: PolicyLike) -> Permission:
    """Rebuild a permission from a stored policy.

    Args:
        policy: A :class:`Policy` or the engine's
            ``[subject, resource, verb, domain, ...]`` sequence.

    Raises:
        MalformedPolicyError: Sequence with fewer than four fields.
        UnknownVerbError: Verb has no verb-word.
        PathDecodeError: Resource path does not fit the domain's layout.
    """
    if not isinstance(policy, Policy):
        policy = Policy.from_tuple(policy)

    domain = policy.domain
    action = Action(verb=policy.verb, domain=domain).token

    if domain == Domains.ALL:
        return Permission(action=action, collection=WILDCARD, tenant=WILDCARD, object=WILDCARD, role=WILDCARD)

    parser = paths.PATH_PARSERS.get(domain)
    if parser is None:
        return Permission(action=action)

    ref = parser(policy.resource, domain)
    return Permission(
        action=action,
        collection=ref.collection,
        tenant=ref.tenant,
        object=ref.object,
        role=ref.role,
    )


def permission_to_policy_record(subject: str, permission: Permission, *, strict: bool = True) -> Policy:
    """Like :func:`permission_to_policy`, bound to ``subject`` as a :class:`Policy`."""
    resource, verb, domain = permission_to_policy(permission, strict=strict)
    return Policy(subject=subject, resource=resource, verb=verb, domain=domain)


def permissions_to_policies(
    subject: str,
    permissions: Iterable[Permission],
    *,
    strict: bool = True,
) -> list[Policy]:
    """Translate every permission for ``subject``; duplicates are dropped, order kept.

    Fails on the first permission that cannot be encoded.
    """
    seen: set[Policy] = set()
    policies: list[Policy] = []
    for permission in permissions:
        policy = permission_to_policy_record(subject, permission, strict=strict)
        if policy not in seen:
            seen.add(policy)
            policies.append(policy)
    return policies


def policies_to_permissions(policies: Iterable[PolicyLike]) -> list[Permission]:
    """Decode every policy. Fails on the first one that cannot be decoded."""
    return [policy_to_permission(policy) for policy in policies]


__all__ = [
    "permission_to_policy",
    "permission_to_policy_record",
    "permissions_to_policies",
    "policies_to_permissions",
    "policy_to_permission",
]
