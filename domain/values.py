"""
In-memory value types shared by the sources, the matching engine and the
alert writer. None of these are persisted directly.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional
from uuid import UUID

from domain.enums import FetchStatus, MatchKind, SourceId


@dataclass(frozen=True)
class SubstanceEntry:
    """One row of a regulatory watch-list, tagged with its source"""

    name: str
    regulation: str
    source_id: SourceId
    cas_number: Optional[str] = None
    reason: Optional[str] = None
    reference_url: Optional[str] = None


@dataclass(frozen=True)
class IngredientRef:
    """Detached view of a monitored ingredient, safe to pass between threads"""

    ingredient_id: UUID
    owner_id: UUID
    name: str
    cas_number: Optional[str] = None

    @classmethod
    def from_model(cls, ingredient) -> "IngredientRef":
        return cls(
            ingredient_id=ingredient.ingredient_id,
            owner_id=ingredient.owner_id,
            name=ingredient.name,
            cas_number=ingredient.cas_number,
        )


class AlertKey(NamedTuple):
    """Natural deduplication key of an alert within one tenant"""

    ingredient_id: Optional[UUID]
    substance_name: str
    source_id: SourceId


@dataclass(frozen=True)
class ProposedAlert:
    """An (ingredient, entry) pair the matcher accepted"""

    ingredient: IngredientRef
    entry: SubstanceEntry
    match_kind: MatchKind

    @property
    def key(self) -> AlertKey:
        return AlertKey(
            self.ingredient.ingredient_id, self.entry.name, self.entry.source_id
        )


@dataclass(frozen=True)
class ProviderResult:
    """What one source provider returned on this run"""

    source_id: SourceId
    entries: tuple[SubstanceEntry, ...]
    status: FetchStatus
    detail: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.status == FetchStatus.DEGRADED


@dataclass(frozen=True)
class TenantContact:
    """Who receives the alert summary for a tenant"""

    tenant_id: UUID
    email: Optional[str]
    company_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.company_name or self.email or "your company"


@dataclass
class TenantWorkload:
    """Ingredients of one tenant grouped for the daily check"""

    contact: TenantContact
    ingredients: list[IngredientRef] = field(default_factory=list)
