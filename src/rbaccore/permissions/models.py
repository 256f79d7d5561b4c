"""Permission DTO and policy record.

``Permission`` is what the administrative API builds from user input.
``Policy`` is the named form of the engine's
``[subject, resource, verb, domain, ...]`` tuple.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from pydantic import BaseModel

from ..exceptions import MalformedPolicyError

POLICY_FIELDS = ("subject", "resource", "verb", "domain")


class Permission(BaseModel):
    """A requested or stored grant.

    ``action`` is the joined ``<verbWord>_<domain>`` token; the other fields
    name the targeted resource and are left unset for "any".
    """

    action: str
    collection: Optional[str] = None
    tenant: Optional[str] = None
    object: Optional[str] = None
    role: Optional[str] = None


class Policy(BaseModel):
    """One engine policy line."""

    model_config = {"frozen": True}

    subject: str = ""
    resource: str
    verb: str
    domain: str

    @classmethod
    def from_tuple(cls, values: Sequence[str]) -> Policy:
        """Build from the engine's positional layout.

        Fields past the fourth are engine-specific and ignored.

        Raises:
            MalformedPolicyError: Fewer than four fields, or a non-string field.
        """
        if not isinstance(values, Sequence) or isinstance(values, (str, bytes)) or len(values) < len(POLICY_FIELDS):
            raise MalformedPolicyError(
                f"policy needs {len(POLICY_FIELDS)} fields {POLICY_FIELDS}, got {values!r}",
                policy=values,
            )
        head = list(values[: len(POLICY_FIELDS)])
        if not all(isinstance(value, str) for value in head):
            raise MalformedPolicyError(f"policy fields must be strings, got {head!r}", policy=values)
        return cls(**dict(zip(POLICY_FIELDS, head)))

    def as_tuple(self) -> tuple[str, str, str, str]:
        return (self.subject, self.resource, self.verb, self.domain)

    def as_list(self) -> list[str]:
        """Form accepted by engines that store policies as string lists."""
        return list(self.as_tuple())


__all__ = [
    "POLICY_FIELDS",
    "Permission",
    "Policy",
]
