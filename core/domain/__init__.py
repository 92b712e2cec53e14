from core.domain.catalog import (
    MachineType,
    RequirementAssignment,
    SoftwareType,
    TrainingOffer,
    TrainingPlan,
    TrainingTopic,
)
from core.domain.enums import ItemKind
from core.domain.identifiers import generate_id
from core.domain.quote import AreaCost, Quote
from core.domain.resource import Resource

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
