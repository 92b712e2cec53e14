from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Resource:
    """A trainer/engineer who delivers on-site training."""

    id: Optional[int]
    name: str
    hourly_rate: float = 0.0
    is_active: bool = True

    @staticmethod
    def create(name: str, hourly_rate: float = 0.0, is_active: bool = True) -> "Resource":
        # id is assigned by the data store on insert
        return Resource(id=None, name=name, hourly_rate=hourly_rate, is_active=is_active)


__all__ = ["Resource"]
