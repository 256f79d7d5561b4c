"""Tests for the action token codec."""

from __future__ import annotations

import pytest

from rbaccore import (
    Action,
    MalformedActionError,
    UnknownVerbError,
    Verbs,
    decode_action,
    encode_action,
)
from rbaccore.permissions import VERB_WORDS


class TestEncodeAction:
    """Tests for token → (verb, domain)."""

    def test_create(self) -> None:
        assert encode_action("create_collections") == ("C", "collections")

    def test_manage_is_crud(self) -> None:
        assert encode_action("manage_collections") == (Verbs.CRUD, "collections")

    def test_read_cluster(self) -> None:
        assert encode_action("read_cluster") == ("R", "cluster")

    def test_update_and_delete(self) -> None:
        assert encode_action("update_tenants") == ("U", "tenants")
        assert encode_action("delete_roles") == ("D", "roles")

    def test_splits_on_first_separator(self) -> None:
        """Domain keeps its own underscores."""
        assert encode_action("delete_objects_tenants") == ("D", "objects_tenants")
        assert encode_action("read_objects_collection") == ("R", "objects_collection")

    def test_first_letter_only(self) -> None:
        """Only the first letter matters, in any case."""
        assert encode_action("Reading_collections") == ("R", "collections")
        assert encode_action("mutate_roles") == (Verbs.CRUD, "roles")

    @pytest.mark.parametrize("token", ["readcollections", "", "_collections", "manage"])
    def test_malformed(self, token: str) -> None:
        with pytest.raises(MalformedActionError, match="invalid action"):
            encode_action(token)

    def test_non_string(self) -> None:
        with pytest.raises(MalformedActionError):
            encode_action(None)  # type: ignore[arg-type]


class TestDecodeAction:
    """Tests for (verb, domain) → token."""

    def test_read(self) -> None:
        assert decode_action(Verbs.READ, "collections") == "read_collections"

    def test_crud_is_manage(self) -> None:
        assert decode_action(Verbs.CRUD, "roles") == "manage_roles"

    def test_wildcard_domain_stripped(self) -> None:
        assert decode_action(Verbs.CRUD, "*") == "manage"
        assert decode_action(Verbs.READ, "*") == "read"

    def test_compound_domain(self) -> None:
        assert decode_action(Verbs.DELETE, "objects_tenants") == "delete_objects_tenants"

    @pytest.mark.parametrize("verb", ["X", "", "M", Verbs.CRU, "r"])
    def test_unknown_verb(self, verb: str) -> None:
        with pytest.raises(UnknownVerbError, match="unknown verb"):
            decode_action(verb, "collections")

    def test_unhashable_verb(self) -> None:
        with pytest.raises(UnknownVerbError):
            decode_action(["R"], "collections")  # type: ignore[arg-type]

    def test_every_word_round_trips(self) -> None:
        """Each verb-word encodes back to its verb."""
        for verb, word in VERB_WORDS.items():
            assert encode_action(f"{word}_collections") == (verb, "collections")


class TestAction:
    """Tests for the typed Action pair."""

    def test_parse(self) -> None:
        action = Action.parse("manage_roles")
        assert action.verb == Verbs.CRUD
        assert action.domain == "roles"

    def test_token(self) -> None:
        assert Action(verb="D", domain="objects_tenants").token == "delete_objects_tenants"
        assert str(Action(verb="R", domain="cluster")) == "read_cluster"

    def test_frozen(self) -> None:
        action = Action.parse("read_cluster")
        with pytest.raises(ValueError):
            action.verb = "C"  # type: ignore[misc]

    def test_parse_malformed(self) -> None:
        with pytest.raises(MalformedActionError):
            Action.parse("nothing")

    def test_token_unknown_verb(self) -> None:
        with pytest.raises(UnknownVerbError):
            Action(verb=Verbs.CRU, domain="collections").token
