"""Tests for identifier classification."""

import math
from enum import Enum

from event_hub.identifiers import OpaqueIdentifier, TextualIdentifier, parse_identifier


class Channel(str, Enum):
    READY = "app.ready"


def test_strings_are_textual() -> None:
    parsed = parse_identifier("user.*")
    assert parsed == TextualIdentifier("user.*")
    assert parsed.is_pattern


def test_str_enum_is_normalised_to_its_value() -> None:
    parsed = parse_identifier(Channel.READY)
    assert parsed == TextualIdentifier("app.ready")
    assert type(parsed.raw) is str


def test_non_strings_are_opaque() -> None:
    parsed = parse_identifier(7)
    assert isinstance(parsed, OpaqueIdentifier)
    assert not parsed.is_pattern


def test_parse_is_idempotent() -> None:
    parsed = parse_identifier("evt")
    assert parse_identifier(parsed) is parsed


def test_hashable_opaque_values_compare_by_equality() -> None:
    assert parse_identifier((1, "a")) == parse_identifier((1, "a"))
    assert hash(parse_identifier((1, "a"))) == hash(parse_identifier((1, "a")))


def test_bool_and_int_are_distinct() -> None:
    assert parse_identifier(True) != parse_identifier(1)


def test_unhashable_opaque_values_compare_by_identity() -> None:
    key = ["a"]
    assert parse_identifier(key) == parse_identifier(key)
    assert parse_identifier(key) != parse_identifier(["a"])
    assert hash(parse_identifier(key)) == hash(parse_identifier(key))


def test_functions_can_be_their_own_key() -> None:
    def handler() -> None:
        pass

    assert parse_identifier(handler) == parse_identifier(handler)


def test_nan_matches_itself() -> None:
    assert parse_identifier(float("nan")) == parse_identifier(float("nan"))
    assert hash(parse_identifier(float("nan"))) == hash(parse_identifier(math.nan))
    assert parse_identifier(float("nan")) != parse_identifier(1.0)


def test_same_object_always_matches() -> None:
    class Odd:
        def __eq__(self, other: object) -> bool:
            return False

        __hash__ = object.__hash__

    key = Odd()
    assert parse_identifier(key) == parse_identifier(key)
