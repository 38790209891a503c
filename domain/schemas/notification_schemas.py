from pydantic import BaseModel, Field
from typing import List, Optional

from domain.enums import SourceId


class AlertSummaryItem(BaseModel):
    """One newly created alert as shown in the notification"""

    substance_name: str
    cas_number: Optional[str] = None
    ingredient_name: str
    reason: Optional[str] = None
    source_id: SourceId


class AlertNotification(BaseModel):
    """Batch of new alerts for one recipient"""

    recipient: str
    display_name: str
    alerts: List[AlertSummaryItem] = Field(..., min_length=1)

    @property
    def count(self) -> int:
        return len(self.alerts)
