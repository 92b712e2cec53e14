# core/interfaces.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from core.models import (
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
)

if TYPE_CHECKING:
    from core.services.scheduling.models import TrainingRequirement


class ResourceRepository(ABC):
    @abstractmethod
    def add(self, resource: Resource) -> Resource: ...
    @abstractmethod
    def update(self, resource: Resource) -> None: ...
    @abstractmethod
    def delete(self, resource_id: int) -> None: ...
    @abstractmethod
    def get(self, resource_id: int) -> Optional[Resource]: ...
    @abstractmethod
    def list_all(self) -> List[Resource]: ...


class MachineTypeRepository(ABC):
    @abstractmethod
    def add(self, machine: MachineType) -> MachineType: ...
    @abstractmethod
    def update(self, machine: MachineType) -> None: ...
    @abstractmethod
    def delete(self, machine_type_id: int) -> None: ...
    @abstractmethod
    def get(self, machine_type_id: int) -> Optional[MachineType]: ...
    @abstractmethod
    def list_all(self) -> List[MachineType]: ...


class SoftwareTypeRepository(ABC):
    @abstractmethod
    def add(self, software: SoftwareType) -> SoftwareType: ...
    @abstractmethod
    def update(self, software: SoftwareType) -> None: ...
    @abstractmethod
    def delete(self, software_type_id: int) -> None: ...
    @abstractmethod
    def get(self, software_type_id: int) -> Optional[SoftwareType]: ...
    @abstractmethod
    def list_all(self) -> List[SoftwareType]: ...


class TrainingPlanRepository(ABC):
    @abstractmethod
    def add(self, plan: TrainingPlan) -> TrainingPlan: ...
    @abstractmethod
    def update(self, plan: TrainingPlan) -> None: ...
    @abstractmethod
    def delete(self, plan_id: int) -> None: ...
    @abstractmethod
    def get(self, plan_id: int) -> Optional[TrainingPlan]: ...
    @abstractmethod
    def list_all(self) -> List[TrainingPlan]: ...


class TrainingOfferRepository(ABC):
    @abstractmethod
    def upsert(self, offer: TrainingOffer) -> TrainingOffer: ...
    @abstractmethod
    def delete(self, offer_id: int) -> None: ...
    @abstractmethod
    def get_for_item(self, plan_id: int, item_kind: ItemKind, item_id: int) -> Optional[TrainingOffer]: ...
    @abstractmethod
    def list_by_plan(self, plan_id: int) -> List[TrainingOffer]: ...
    @abstractmethod
    def delete_for_item(self, item_kind: ItemKind, item_id: int) -> None: ...


class RequirementAssignmentRepository(ABC):
    @abstractmethod
    def add(self, assignment: RequirementAssignment) -> RequirementAssignment: ...
    @abstractmethod
    def update(self, assignment: RequirementAssignment) -> None: ...
    @abstractmethod
    def delete(self, assignment_id: int) -> None: ...
    @abstractmethod
    def get(self, assignment_id: int) -> Optional[RequirementAssignment]: ...
    @abstractmethod
    def list_for_item(self, item_kind: ItemKind, item_id: int) -> List[RequirementAssignment]: ...
    @abstractmethod
    def delete_for_item(self, item_kind: ItemKind, item_id: int) -> None: ...


class TrainingTopicRepository(ABC):
    @abstractmethod
    def add(self, topic: TrainingTopic) -> TrainingTopic: ...
    @abstractmethod
    def update(self, topic: TrainingTopic) -> None: ...
    @abstractmethod
    def delete(self, topic_id: int) -> None: ...
    @abstractmethod
    def get(self, topic_id: int) -> Optional[TrainingTopic]: ...
    @abstractmethod
    def list_for_plan(self, plan_id: int) -> List[TrainingTopic]: ...
    @abstractmethod
    def list_for_item(self, plan_id: int, item_kind: ItemKind, item_id: int) -> List[TrainingTopic]: ...
    @abstractmethod
    def delete_for_item(self, item_kind: ItemKind, item_id: int) -> None: ...


class QuoteRepository(ABC):
    @abstractmethod
    def add(self, quote: Quote) -> None: ...
    @abstractmethod
    def update(self, quote: Quote) -> None: ...
    @abstractmethod
    def delete(self, quote_id: str) -> None: ...
    @abstractmethod
    def get(self, quote_id: str) -> Optional[Quote]: ...
    @abstractmethod
    def list_all(self) -> List[Quote]: ...


class AreaCostRepository(ABC):
    @abstractmethod
    def add(self, area: AreaCost) -> AreaCost: ...
    @abstractmethod
    def update(self, area: AreaCost) -> None: ...
    @abstractmethod
    def get(self, area_id: int) -> Optional[AreaCost]: ...
    @abstractmethod
    def list_all(self) -> List[AreaCost]: ...


class TrainingRequirementQuery(ABC):
    """Read model: the ordered training requirements of a quote."""

    @abstractmethod
    def list_for_quote(self, quote_id: str) -> List[TrainingRequirement]: ...
