from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.domain.identifiers import generate_id


@dataclass
class Quote:
    id: str
    name: str
    client_name: str = ""
    area_id: Optional[int] = None
    work_on_saturday: bool = False
    work_on_sunday: bool = False
    # selection order is kept; it drives scheduling priority
    machine_type_ids: List[int] = field(default_factory=list)
    software_type_ids: List[int] = field(default_factory=list)

    @staticmethod
    def create(name: str, client_name: str = "", area_id: Optional[int] = None) -> "Quote":
        return Quote(id=generate_id(), name=name, client_name=client_name, area_id=area_id)


@dataclass
class AreaCost:
    """Daily travel costs for a geographic area."""

    id: Optional[int]
    area_name: str
    daily_accommodation_food_cost: float = 0.0
    daily_allowance: float = 0.0
    daily_pocket_money: float = 0.0

    @property
    def daily_total(self) -> float:
        return self.daily_accommodation_food_cost + self.daily_allowance + self.daily_pocket_money


__all__ = ["Quote", "AreaCost"]
