"""
Checkout receipt model.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List
from datetime import datetime


class Receipt(BaseModel):
    """Snapshot of a cart taken at checkout."""
    items: List[str]
    total: float
    cart_type: str
    checked_out_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = ConfigDict(frozen=True)

    @property
    def item_count(self) -> int:
        return len(self.items)
