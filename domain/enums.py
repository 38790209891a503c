"""
Domain enums for ReglementAlert.
Contains all enumeration types used across the domain models and services.
"""

import enum


class SourceId(str, enum.Enum):
    """Regulatory watch-list an entry originates from"""

    ECHA_SVHC = "ECHA_SVHC"
    EUR_LEX = "EUR_LEX"
    ANSM = "ANSM"


class MatchKind(str, enum.Enum):
    """Outcome of comparing one ingredient with one substance entry"""

    NO_MATCH = "none"
    CAS_MATCH = "cas"
    NAME_MATCH = "name"


class FetchStatus(str, enum.Enum):
    """Where a provider's entries came from on this run"""

    FRESH = "fresh"  # live data accepted
    DEGRADED = "degraded"  # live fetch failed or looked incomplete, snapshot used
    CURATED = "curated"  # snapshot-only provider


class InsertOutcome(str, enum.Enum):
    """Result of writing one proposed alert"""

    INSERTED = "inserted"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"
