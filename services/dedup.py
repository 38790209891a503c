"""Filtering of proposed alerts against what a tenant already has."""

from dataclasses import dataclass, field
from typing import AbstractSet, Iterable

from domain.values import AlertKey, ProposedAlert


@dataclass
class DedupResult:
    accepted: list[ProposedAlert] = field(default_factory=list)
    duplicates_skipped: int = 0


def deduplicate(
    existing_keys: AbstractSet[AlertKey], proposals: Iterable[ProposedAlert]
) -> DedupResult:
    """
    Keep only proposals whose key is neither persisted nor already accepted.

    Accepted keys join the working set immediately, so a second proposal with
    the same (ingredient, substance, source) later in the same run is skipped
    as well. ``existing_keys`` itself is left untouched.
    """
    seen = set(existing_keys)
    result = DedupResult()

    for proposal in proposals:
        key = proposal.key
        if key in seen:
            result.duplicates_skipped += 1
            continue
        seen.add(key)
        result.accepted.append(proposal)

    return result
