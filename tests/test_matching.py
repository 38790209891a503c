"""
Tests for the ingredient / watch-list matcher.

Covers:
- CAS number priority and normalization (case, surrounding whitespace)
- CAS mismatch suppressing the name comparison (and the policy switch)
- Short-name equality rule and bidirectional containment
- Symmetry of the core comparison
- find_matches ordering and the DEHP scenario
"""

import pytest

from domain.enums import MatchKind, SourceId
from services.matching import (
    MatchPolicy,
    classify_pair,
    collect_matches,
    match_substance,
    names_overlap,
    normalize_cas,
)
from test_fixtures import make_entry, make_ingredient_ref


# ============================================================================
# CAS comparison
# ============================================================================


def test_equal_cas_numbers_match_regardless_of_name():
    ingredient = make_ingredient_ref("Plastifiant X", "117-81-7")
    entry = make_entry("Bis(2-ethylhexyl) phthalate (DEHP)", "117-81-7")
    assert match_substance(ingredient, entry) is MatchKind.CAS_MATCH


def test_cas_comparison_ignores_case_and_whitespace():
    assert classify_pair("foo", "  50-00-0 ", "bar", "50-00-0") is MatchKind.CAS_MATCH
    assert classify_pair("foo", "ABC-1", "bar", "abc-1") is MatchKind.CAS_MATCH


def test_cas_mismatch_is_definitive_even_when_names_are_equal():
    kind = classify_pair("Lead", "7439-92-1", "Lead", "7439-92-2")
    assert kind is MatchKind.NO_MATCH


def test_cas_mismatch_falls_back_to_names_when_policy_allows():
    policy = MatchPolicy(name_fallback_on_cas_mismatch=True)
    kind = classify_pair("Lead", "7439-92-1", "Lead", "7439-92-2", policy)
    assert kind is MatchKind.NAME_MATCH


def test_missing_cas_on_either_side_uses_names():
    assert classify_pair("Formaldehyde", None, "formaldehyde", "50-00-0") is MatchKind.NAME_MATCH
    assert classify_pair("Formaldehyde", "50-00-0", "FORMALDEHYDE", None) is MatchKind.NAME_MATCH


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_cas_counts_as_absent(blank):
    assert normalize_cas(blank) is None
    assert classify_pair("Formaldehyde", blank, "Formaldehyde", "50-00-0") is MatchKind.NAME_MATCH


# ============================================================================
# Name comparison
# ============================================================================


def test_short_names_require_full_equality():
    assert names_overlap("abc", "abc")
    assert names_overlap(" ABC ", "abc")
    assert not names_overlap("abc", "abcdef")
    assert not names_overlap("abcdef", "abc")


def test_names_match_by_containment_in_both_directions():
    assert names_overlap("lead", "Lead chromate")
    assert names_overlap("Lead chromate", "lead")
    assert not names_overlap("Lead chromate", "Cadmium")


def test_blank_names_never_match():
    assert not names_overlap("", "")
    assert not names_overlap("  ", "Lead")
    assert classify_pair("", None, "", None) is MatchKind.NO_MATCH


def test_min_name_length_is_configurable():
    policy = MatchPolicy(min_name_length=6)
    assert classify_pair("lead", None, "lead chromate", None) is MatchKind.NAME_MATCH
    assert classify_pair("lead", None, "lead chromate", None, policy) is MatchKind.NO_MATCH


@pytest.mark.parametrize(
    "a,b",
    [
        (("Lead", None), ("Lead chromate", "7758-97-6")),
        (("abc", None), ("abcdef", None)),
        (("DEHP", "117-81-7"), ("Bis(2-ethylhexyl) phthalate (DEHP)", "117-81-7")),
        (("Lead", "7439-92-1"), ("Lead", "7439-92-2")),
        (("Talc", " "), ("Talc", "14807-96-6")),
    ],
)
def test_classification_is_symmetric(a, b):
    assert classify_pair(a[0], a[1], b[0], b[1]) == classify_pair(b[0], b[1], a[0], a[1])


# ============================================================================
# find_matches
# ============================================================================


def test_dehp_scenario_matches_by_cas_and_by_name():
    by_cas = make_ingredient_ref("Some plasticiser", "117-81-7")
    by_name = make_ingredient_ref("dehp")
    unrelated = make_ingredient_ref("Aqua")
    entries = [
        make_entry("Bis(2-ethylhexyl) phthalate (DEHP)", "117-81-7"),
        make_entry("Lead", "7439-92-1"),
    ]

    matches = collect_matches([by_cas, by_name, unrelated], entries)

    assert [(m.ingredient, m.match_kind) for m in matches] == [
        (by_cas, MatchKind.CAS_MATCH),
        (by_name, MatchKind.NAME_MATCH),
    ]
    assert all(m.entry.name.endswith("(DEHP)") for m in matches)


def test_matches_follow_ingredient_then_entry_order():
    first = make_ingredient_ref("Lead")
    second = make_ingredient_ref("Lead acetate")
    entries = [
        make_entry("Lead", source_id=SourceId.ECHA_SVHC),
        make_entry("Lead acetate", source_id=SourceId.EUR_LEX, regulation="Annex II"),
    ]

    matches = collect_matches([first, second], entries)

    assert [(m.ingredient.name, m.entry.source_id) for m in matches] == [
        ("Lead", SourceId.ECHA_SVHC),
        ("Lead", SourceId.EUR_LEX),
        ("Lead acetate", SourceId.ECHA_SVHC),
        ("Lead acetate", SourceId.EUR_LEX),
    ]


def test_no_ingredients_or_no_entries_yield_nothing():
    assert collect_matches([], [make_entry("Lead")]) == []
    assert collect_matches([make_ingredient_ref("Lead")], []) == []


def test_cas_priority_ignores_unrelated_names():
    ingredient = make_ingredient_ref("Stuff A", "7439-92-1")
    assert match_substance(ingredient, make_entry("Lead", "7439-92-1")) is MatchKind.CAS_MATCH


def test_cas_mismatch_blocks_identical_names():
    ingredient = make_ingredient_ref("Lead", "111-11-1")
    assert match_substance(ingredient, make_entry("Lead", "7439-92-1")) is MatchKind.NO_MATCH


def test_four_character_name_is_substring_eligible():
    assert classify_pair("Lead", None, "Lead chromate", None) is MatchKind.NAME_MATCH
    assert classify_pair("ABC", None, "ABCDEF", None) is MatchKind.NO_MATCH


def test_entry_name_contained_in_ingredient_name():
    ingredient = make_ingredient_ref("Titanium dioxide")
    assert match_substance(ingredient, make_entry("Dioxide")) is MatchKind.NAME_MATCH
