"""Tests for filtering proposed alerts against existing and in-run keys."""

from domain.enums import MatchKind, SourceId
from domain.values import AlertKey, ProposedAlert
from services.dedup import deduplicate
from test_fixtures import make_entry, make_ingredient_ref


def _proposal(ingredient, entry):
    return ProposedAlert(ingredient=ingredient, entry=entry, match_kind=MatchKind.NAME_MATCH)


def test_existing_keys_are_skipped():
    ingredient = make_ingredient_ref("Lead")
    entry = make_entry("Lead")
    existing = {AlertKey(ingredient.ingredient_id, "Lead", SourceId.ECHA_SVHC)}

    result = deduplicate(existing, [_proposal(ingredient, entry)])

    assert result.accepted == []
    assert result.duplicates_skipped == 1


def test_same_key_twice_in_one_run_is_accepted_once():
    ingredient = make_ingredient_ref("Lead")
    entry = make_entry("Lead")
    # e.g. the same substance listed twice by one source
    proposals = [_proposal(ingredient, entry), _proposal(ingredient, make_entry("Lead", "7439-92-1"))]

    result = deduplicate(set(), proposals)

    assert result.accepted == [proposals[0]]
    assert result.duplicates_skipped == 1


def test_key_is_per_ingredient_and_per_source():
    first = make_ingredient_ref("Lead")
    second = make_ingredient_ref("Lead")
    proposals = [
        _proposal(first, make_entry("Lead", source_id=SourceId.ECHA_SVHC)),
        _proposal(first, make_entry("Lead", source_id=SourceId.EUR_LEX)),
        _proposal(second, make_entry("Lead", source_id=SourceId.ECHA_SVHC)),
    ]

    result = deduplicate(set(), proposals)

    assert result.accepted == proposals
    assert result.duplicates_skipped == 0


def test_input_key_set_is_not_mutated():
    ingredient = make_ingredient_ref("Lead")
    existing = frozenset()
    plain = set()

    deduplicate(existing, [_proposal(ingredient, make_entry("Lead"))])
    deduplicate(plain, [_proposal(ingredient, make_entry("Lead"))])

    assert plain == set()
