"""Canonical resource paths and their per-domain parsers.

Builders and parsers share one layout table, so a path produced here always
parses back under its domain::

    objects("Article", "tenant1", "1111")
    # "collections/Article/shards/tenant1/objects/1111"
    parse_objects_path("collections/Article/shards/tenant1/objects/1111")
    # ResourceRef(collection="Article", tenant="tenant1", object="1111", role=None)

Any name segment may be ``*``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Optional

from ..exceptions import PathDecodeError
from .constants import PATH_SEPARATOR, WILDCARD, Domains

# Keyword segments by position; None marks a name slot.
CLUSTER_LAYOUT: tuple[Optional[str], ...] = ("cluster",)
ROLES_LAYOUT: tuple[Optional[str], ...] = ("roles", None)
COLLECTIONS_LAYOUT: tuple[Optional[str], ...] = ("collections", None)
SHARDS_LAYOUT: tuple[Optional[str], ...] = ("collections", None, "shards", None)
OBJECTS_LAYOUT: tuple[Optional[str], ...] = ("collections", None, "shards", None, "objects", None)


@dataclass(frozen=True)
class ResourceRef:
    """Names extracted from a resource path. Unset means not part of the layout."""

    collection: Optional[str] = None
    tenant: Optional[str] = None
    object: Optional[str] = None
    role: Optional[str] = None


def _build(layout: tuple[Optional[str], ...], *names: str) -> str:
    values = iter(names)
    return PATH_SEPARATOR.join(keyword if keyword is not None else next(values) for keyword in layout)


# ── Builders ────────────────────────────────────────────


def cluster() -> str:
    """Path of the cluster itself: ``"cluster"``."""
    return _build(CLUSTER_LAYOUT)


def roles(*names: str) -> list[str]:
    """Role paths, one per name. Without names, the family wildcard ``["roles/*"]``."""
    if not names:
        return [_build(ROLES_LAYOUT, WILDCARD)]
    return [_build(ROLES_LAYOUT, name) for name in names]


def collections(name: str) -> str:
    """``"collections/<name>"``; ``"*"`` matches every collection."""
    return _build(COLLECTIONS_LAYOUT, name)


def shards(collection: str, tenant: str) -> str:
    """``"collections/<collection>/shards/<tenant>"``."""
    return _build(SHARDS_LAYOUT, collection, tenant)


def objects(collection: str, tenant: str, object_id: str) -> str:
    """``"collections/<collection>/shards/<tenant>/objects/<object_id>"``."""
    return _build(OBJECTS_LAYOUT, collection, tenant, str(object_id))


# ── Parsers ─────────────────────────────────────────────


def _split(path: str, domain: str, layout: tuple[Optional[str], ...]) -> list[str]:
    """Split ``path`` and check it against ``layout``.

    The segment count must match the layout exactly, so a name holding the
    separator or a path from a longer family is rejected.

    Raises:
        PathDecodeError: Wrong segment count, or a keyword segment out of place.
    """
    if not isinstance(path, str):
        raise PathDecodeError(
            f"resource path for domain {domain!r} must be a string, got {type(path).__name__}",
            path=path,
            domain=domain,
        )

    segments = path.split(PATH_SEPARATOR)
    if len(segments) != len(layout):
        raise PathDecodeError(
            f"resource path {path!r} has {len(segments)} segment(s), domain {domain!r} needs {len(layout)}",
            path=path,
            domain=domain,
        )

    for position, keyword in enumerate(layout):
        if keyword is not None and segments[position] != keyword:
            raise PathDecodeError(
                f"resource path {path!r} expected {keyword!r} at segment {position} for domain {domain!r}",
                path=path,
                domain=domain,
            )
    return segments


def parse_cluster_path(path: str, domain: str = Domains.CLUSTER) -> ResourceRef:
    _split(path, domain, CLUSTER_LAYOUT)
    return ResourceRef()


def parse_roles_path(path: str, domain: str = Domains.ROLES) -> ResourceRef:
    segments = _split(path, domain, ROLES_LAYOUT)
    return ResourceRef(role=segments[1])


def parse_collections_path(path: str, domain: str = Domains.COLLECTIONS) -> ResourceRef:
    segments = _split(path, domain, COLLECTIONS_LAYOUT)
    return ResourceRef(collection=segments[1])


def parse_shards_path(path: str, domain: str = Domains.TENANTS) -> ResourceRef:
    segments = _split(path, domain, SHARDS_LAYOUT)
    return ResourceRef(collection=segments[1], tenant=segments[3])


def parse_objects_path(path: str, domain: str = Domains.OBJECTS_TENANTS) -> ResourceRef:
    segments = _split(path, domain, OBJECTS_LAYOUT)
    return ResourceRef(collection=segments[1], tenant=segments[3], object=segments[5])


PathParser = Callable[[str, str], ResourceRef]

PATH_PARSERS: MappingProxyType[str, PathParser] = MappingProxyType(
    {
        Domains.CLUSTER: parse_cluster_path,
        Domains.ROLES: parse_roles_path,
        Domains.COLLECTIONS: parse_collections_path,
        Domains.TENANTS: parse_shards_path,
        Domains.OBJECTS_COLLECTION: parse_objects_path,
        Domains.OBJECTS_TENANTS: parse_objects_path,
    }
)

__all__ = [
    "PATH_PARSERS",
    "ResourceRef",
    "cluster",
    "collections",
    "objects",
    "parse_cluster_path",
    "parse_collections_path",
    "parse_objects_path",
    "parse_roles_path",
    "parse_shards_path",
    "roles",
    "shards",
]
