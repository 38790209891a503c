"""
Response models of the regulatory check endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Dict, List


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CheckReport(_CamelModel):
    """Outcome of an on-demand check for one tenant"""

    source_counts: Dict[str, int] = Field(default_factory=dict)
    ingredients_checked: int = 0
    entries_considered: int = 0
    alerts_created: int = 0
    duplicates_skipped: int = 0
    already_recorded: int = Field(
        0, description="Alerts another run wrote between our read and our insert"
    )
    write_failures: int = 0
    email_sent: bool = False
    degraded_sources: List[str] = Field(default_factory=list)
    source_statuses: Dict[str, str] = Field(default_factory=dict)


class DailyCheckReport(_CamelModel):
    """Aggregate outcome of the scheduled check across all tenants"""

    tenants_checked: int = 0
    tenants_failed: int = 0
    alerts_created: int = 0
    notifications_sent: int = 0
    elapsed_seconds: float = 0.0
    source_counts: Dict[str, int] = Field(default_factory=dict)
    source_statuses: Dict[str, str] = Field(default_factory=dict)
