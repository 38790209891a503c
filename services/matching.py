"""
Ingredient / watch-list matching.

Pure functions only: no settings lookups, no I/O. Both the on-demand check
and the daily check go through ``find_matches``.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from domain.enums import MatchKind
from domain.values import IngredientRef, ProposedAlert, SubstanceEntry

logger = logging.getLogger("reglement.matching")


@dataclass(frozen=True)
class MatchPolicy:
    """
    Tunables of the matcher.

    min_name_length: names shorter than this (after trimming) only match on
        full equality ("abc" never matches "abcdef").
    name_fallback_on_cas_mismatch: when both CAS numbers are present but
        differ, compare names anyway. Off by default: a CAS mismatch is a
        definitive no-match.
    """

    min_name_length: int = 4
    name_fallback_on_cas_mismatch: bool = False

    @classmethod
    def from_settings(cls, settings) -> "MatchPolicy":
        return cls(
            min_name_length=settings.min_name_length,
            name_fallback_on_cas_mismatch=settings.name_fallback_on_cas_mismatch,
        )


DEFAULT_POLICY = MatchPolicy()


def normalize_cas(cas_number: Optional[str]) -> Optional[str]:
    """Trimmed, lower-cased CAS number, or None when absent or blank"""
    if cas_number is None:
        return None
    normalized = cas_number.strip().lower()
    return normalized or None


def normalize_name(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def names_overlap(a: str, b: str, min_length: int = 4) -> bool:
    """
    Case-insensitive name comparison.

    Short names need full equality; longer ones match when either contains
    the other.
    """
    la = normalize_name(a)
    lb = normalize_name(b)
    # Blank names never match, not even each other; unnamed ingredients and
    # scraped rows are rejected before they get here
    if not la or not lb:
        return False
    if len(la) < min_length or len(lb) < min_length:
        return la == lb
    return la in lb or lb in la


def classify_pair(
    name_a: str,
    cas_a: Optional[str],
    name_b: str,
    cas_b: Optional[str],
    policy: MatchPolicy = DEFAULT_POLICY,
) -> MatchKind:
    """Symmetric core of the matcher; argument order never changes the result"""
    norm_a = normalize_cas(cas_a)
    norm_b = normalize_cas(cas_b)

    if norm_a is not None and norm_b is not None:
        if norm_a == norm_b:
            return MatchKind.CAS_MATCH
        if not policy.name_fallback_on_cas_mismatch:
            return MatchKind.NO_MATCH

    if names_overlap(name_a, name_b, policy.min_name_length):
        return MatchKind.NAME_MATCH
    return MatchKind.NO_MATCH


def match_substance(
    ingredient: IngredientRef,
    entry: SubstanceEntry,
    policy: MatchPolicy = DEFAULT_POLICY,
) -> MatchKind:
    """Decide whether an ingredient and a watch-list entry are the same substance"""
    return classify_pair(
        ingredient.name, ingredient.cas_number, entry.name, entry.cas_number, policy
    )


def find_matches(
    ingredients: Sequence[IngredientRef],
    entries: Sequence[SubstanceEntry],
    policy: MatchPolicy = DEFAULT_POLICY,
) -> Iterator[ProposedAlert]:
    """
    Yield every matching pair, in ingredient order then entry order.

    The order is what makes in-run deduplication deterministic.
    """
    for ingredient in ingredients:
        for entry in entries:
            kind = match_substance(ingredient, entry, policy)
            if kind is MatchKind.NO_MATCH:
                continue
            logger.debug(
                "match ingredient=%r cas=%s -> [%s] %r via %s",
                ingredient.name,
                ingredient.cas_number or "none",
                entry.source_id.value,
                entry.name,
                kind.value,
            )
            yield ProposedAlert(ingredient=ingredient, entry=entry, match_kind=kind)


def collect_matches(
    ingredients: Iterable[IngredientRef],
    entries: Sequence[SubstanceEntry],
    policy: MatchPolicy = DEFAULT_POLICY,
) -> list[ProposedAlert]:
    return list(find_matches(list(ingredients), entries, policy))
