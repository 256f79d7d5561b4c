"""Action token codec.

An action token joins a verb-word and a domain: ``"read_collections"``,
``"manage_roles"``, ``"delete_objects_tenants"``. Internally the pair is kept
as an :class:`Action`; the joined string only exists at the API boundary.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..exceptions import MalformedActionError, UnknownVerbError
from .constants import ACTION_SEPARATOR, VERB_WORDS, WILDCARD, Verbs

_WILDCARD_SUFFIX = ACTION_SEPARATOR + WILDCARD


def encode_action(token: str) -> tuple[str, str]:
    """Split an action token into ``(verb, domain)``.

    The verb is the upper-cased first letter of the verb-word; ``manage``
    (any word starting with ``m``) becomes :attr:`Verbs.CRUD`.

    Raises:
        MalformedActionError: No ``_`` separator, or an empty verb-word.

    Example::

        encode_action("create_collections")   # ("C", "collections")
        encode_action("manage_roles")         # ("(C)|(R)|(U)|(D)", "roles")
        encode_action("read_objects_tenants") # ("R", "objects_tenants")
    """
    if not isinstance(token, str):
        raise MalformedActionError(f"invalid action: expected string, got {type(token).__name__}", action=token)

    word, separator, domain = token.partition(ACTION_SEPARATOR)
    if not separator or not word:
        raise MalformedActionError(f"invalid action {token!r}", action=token)

    verb = word[0].upper()
    if verb == Verbs.MANAGE_LETTER:
        verb = Verbs.CRUD
    return verb, domain


def decode_action(verb: str, domain: str) -> str:
    """Rebuild an action token from a stored verb and domain.

    A trailing ``"_*"`` (the fully-wildcard domain) is dropped, so
    ``decode_action(Verbs.CRUD, "*")`` gives ``"manage"``.

    Raises:
        UnknownVerbError: ``verb`` is not in :data:`VERB_WORDS`.
    """
    try:
        word = VERB_WORDS[verb]
    except (KeyError, TypeError):
        raise UnknownVerbError(f"unknown verb {verb!r} for domain {domain!r}", verb=verb, domain=domain) from None

    token = f"{word}{ACTION_SEPARATOR}{domain}"
    if token.endswith(_WILDCARD_SUFFIX):
        token = token[: -len(_WILDCARD_SUFFIX)]
    return token


class Action(BaseModel):
    """Typed ``{verb, domain}`` pair behind an action token."""

    model_config = {"frozen": True}

    verb: str
    domain: str

    @classmethod
    def parse(cls, token: str) -> Action:
        """Build from a joined token. Raises :class:`MalformedActionError`."""
        verb, domain = encode_action(token)
        return cls(verb=verb, domain=domain)

    @property
    def token(self) -> str:
        """Joined form. Raises :class:`UnknownVerbError` for verbs with no word."""
        return decode_action(self.verb, self.domain)

    def __str__(self) -> str:
        return self.token


__all__ = [
    "Action",
    "decode_action",
    "encode_action",
]
