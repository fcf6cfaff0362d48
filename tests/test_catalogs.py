"""Tests for option catalogs."""

import pytest

from render_studio.catalogs import (
    CATALOGS,
    CONTEXTS,
    DESIGN_STYLES,
    FALLBACK_NAME,
    resolve_option,
    reverse_lookup,
    short_name,
)
from render_studio.domain.selection import Axis
from render_studio.errors import ValidationError


def test_every_axis_has_a_catalog() -> None:
    assert set(CATALOGS) == set(Axis)
    assert all(CATALOGS[axis] for axis in Axis)


@pytest.mark.parametrize("axis", list(Axis))
def test_fragments_are_unique_within_an_axis(axis: Axis) -> None:
    fragments = [entry.fragment for entry in CATALOGS[axis]]

    assert len(fragments) == len(set(fragments))


@pytest.mark.parametrize("axis", list(Axis))
def test_reverse_lookup_returns_stripped_label(axis: Axis) -> None:
    for entry in CATALOGS[axis]:
        assert reverse_lookup(axis, entry.fragment) == short_name(entry.label)


def test_reverse_lookup_unknown_fragment_falls_back() -> None:
    assert reverse_lookup(Axis.STYLE, "hand-written style") == FALLBACK_NAME
    assert reverse_lookup(Axis.VIEW, "") == FALLBACK_NAME


def test_short_name_strips_parentheses_and_symbols() -> None:
    assert short_name("Three-Quarter (3/4)") == "ThreeQuarter"
    assert short_name("Bird's Eye") == "BirdsEye"
    assert short_name("Coastal (Resort)") == "Coastal"


def test_resolve_option_accepts_label_or_fragment() -> None:
    modern = DESIGN_STYLES[0]

    assert resolve_option(Axis.STYLE, "Modern") == modern.fragment
    assert resolve_option(Axis.STYLE, modern.fragment) == modern.fragment
    assert resolve_option(Axis.CONTEXT, "Urban") == CONTEXTS[0].fragment


def test_resolve_option_empty_clears() -> None:
    assert resolve_option(Axis.VIEW, "") == ""


def test_resolve_option_rejects_unknown_value() -> None:
    with pytest.raises(ValidationError):
        resolve_option(Axis.STYLE, "Baroque")


def test_resolve_option_rejects_fragment_from_another_axis() -> None:
    with pytest.raises(ValidationError):
        resolve_option(Axis.VIEW, CONTEXTS[0].fragment)
