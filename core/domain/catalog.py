from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.domain.enums import ItemKind


@dataclass
class MachineType:
    id: Optional[int]
    name: str
    description: str = ""


@dataclass
class SoftwareType:
    id: Optional[int]
    name: str
    description: str = ""
    always_included: bool = False


@dataclass
class TrainingPlan:
    """Independent scheduling scope (Standard, Extended, ...)."""

    id: Optional[int]
    name: str
    description: str = ""
    display_order: int = 0


@dataclass
class TrainingOffer:
    """Hours of training a plan grants for one catalog item."""

    id: Optional[int]
    plan_id: int
    item_kind: ItemKind
    item_id: int
    hours_required: float = 0.0


@dataclass
class RequirementAssignment:
    """
    Links a catalog item and plan to the resource that must deliver it.
    resource_id stays None until someone is assigned.
    """

    id: Optional[int]
    item_kind: ItemKind
    item_id: int
    plan_id: int
    resource_id: Optional[int] = None


@dataclass
class TrainingTopic:
    """Topic line taught for a catalog item under a plan, shown in display_order."""

    id: Optional[int]
    plan_id: int
    item_kind: ItemKind
    item_id: int
    topic_text: str
    display_order: int = 0


__all__ = [
    "MachineType",
    "SoftwareType",
    "TrainingPlan",
    "TrainingOffer",
    "RequirementAssignment",
    "TrainingTopic",
]
