"""Compatibility surface: domain models importable from one place."""
from core.domain import (
    AreaCost,
    ItemKind,
    MachineType,
    Quote,
    RequirementAssignment,
    Resource,
    SoftwareType,
    TrainingOffer,
    TrainingPlan,
    TrainingTopic,
    generate_id,
)

__all__ = [
    "AreaCost",
    "ItemKind",
    "MachineType",
    "Quote",
    "RequirementAssignment",
    "Resource",
    "SoftwareType",
    "TrainingOffer",
    "TrainingPlan",
    "TrainingTopic",
    "generate_id",
]
