from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from core.interfaces import (
    MachineTypeRepository,
    RequirementAssignmentRepository,
    ResourceRepository,
    SoftwareTypeRepository,
    TrainingOfferRepository,
    TrainingPlanRepository,
    TrainingTopicRepository,
)
from core.models import (
    ItemKind,
    MachineType,
    RequirementAssignment,
    SoftwareType,
    TrainingOffer,
    TrainingPlan,
    TrainingTopic,
)
from core.services.common.base import ServiceBase

logger = logging.getLogger(__name__)


def _clean_name(name: str, label: str) -> str:
    if not name or not name.strip():
        raise ValidationError(f"{label} name cannot be empty.")
    return name.strip()


class CatalogService(ServiceBase):
    """
    Machine/software catalogs, training plans, offers (hours per item and plan),
    the item -> resource links that turn into training requirements and the
    ordered training topics listed in quote exports.
    """

    def __init__(
        self,
        session: Session,
        machine_repo: MachineTypeRepository,
        software_repo: SoftwareTypeRepository,
        plan_repo: TrainingPlanRepository,
        offer_repo: TrainingOfferRepository,
        assignment_repo: RequirementAssignmentRepository,
        resource_repo: ResourceRepository,
        topic_repo: TrainingTopicRepository,
    ):
        super().__init__(session)
        self._machine_repo = machine_repo
        self._software_repo = software_repo
        self._plan_repo = plan_repo
        self._offer_repo = offer_repo
        self._assignment_repo = assignment_repo
        self._resource_repo = resource_repo
        self._topic_repo = topic_repo

    def _drop_item_links(self, item_kind: ItemKind, item_id: int) -> None:
        self._offer_repo.delete_for_item(item_kind, item_id)
        self._assignment_repo.delete_for_item(item_kind, item_id)
        self._topic_repo.delete_for_item(item_kind, item_id)

    # ---------------- machines ----------------

    def create_machine_type(self, name: str, description: str = "") -> MachineType:
        machine = self._machine_repo.add(
            MachineType(id=None, name=_clean_name(name, "Machine"), description=description.strip())
        )
        self.commit("machine type")
        logger.info("Created machine type %s - %s", machine.id, machine.name)
        return machine

    def update_machine_type(
        self,
        machine_type_id: int,
        name: str | None = None,
        description: str | None = None,
    ) -> MachineType:
        machine = self.get_machine_type(machine_type_id)
        if name is not None:
            machine.name = _clean_name(name, "Machine")
        if description is not None:
            machine.description = description.strip()
        self._machine_repo.update(machine)
        self.commit("machine type")
        return machine

    def delete_machine_type(self, machine_type_id: int) -> None:
        self.get_machine_type(machine_type_id)
        self._drop_item_links(ItemKind.MACHINE, machine_type_id)
        self._machine_repo.delete(machine_type_id)
        self.commit("machine type deletion")
        domain_events.catalog_changed.emit("machine_type")

    def get_machine_type(self, machine_type_id: int) -> MachineType:
        machine = self._machine_repo.get(machine_type_id)
        if machine is None:
            raise NotFoundError("Machine type not found.", code="MACHINE_TYPE_NOT_FOUND")
        return machine

    def list_machine_types(self) -> List[MachineType]:
        return self._machine_repo.list_all()

    # ---------------- software ----------------

    def create_software_type(
        self,
        name: str,
        description: str = "",
        always_included: bool = False,
    ) -> SoftwareType:
        software = self._software_repo.add(
            SoftwareType(
                id=None,
                name=_clean_name(name, "Software"),
                description=description.strip(),
                always_included=always_included,
            )
        )
        self.commit("software type")
        logger.info("Created software type %s - %s", software.id, software.name)
        return software

    def update_software_type(
        self,
        software_type_id: int,
        name: str | None = None,
        description: str | None = None,
        always_included: bool | None = None,
    ) -> SoftwareType:
        software = self.get_software_type(software_type_id)
        if name is not None:
            software.name = _clean_name(name, "Software")
        if description is not None:
            software.description = description.strip()
        if always_included is not None:
            software.always_included = always_included
        self._software_repo.update(software)
        self.commit("software type")
        return software

    def delete_software_type(self, software_type_id: int) -> None:
        self.get_software_type(software_type_id)
        self._drop_item_links(ItemKind.SOFTWARE, software_type_id)
        self._software_repo.delete(software_type_id)
        self.commit("software type deletion")
        domain_events.catalog_changed.emit("software_type")

    def get_software_type(self, software_type_id: int) -> SoftwareType:
        software = self._software_repo.get(software_type_id)
        if software is None:
            raise NotFoundError("Software type not found.", code="SOFTWARE_TYPE_NOT_FOUND")
        return software

    def list_software_types(self) -> List[SoftwareType]:
        return self._software_repo.list_all()

    # ---------------- plans ----------------

    def create_plan(
        self,
        name: str,
        description: str = "",
        display_order: int = 0,
        plan_id: Optional[int] = None,
    ) -> TrainingPlan:
        if plan_id is not None and self._plan_repo.get(plan_id) is not None:
            raise BusinessRuleError(f"Training plan {plan_id} already exists.", code="PLAN_EXISTS")
        plan = self._plan_repo.add(
            TrainingPlan(
                id=plan_id,
                name=_clean_name(name, "Plan"),
                description=description.strip(),
                display_order=display_order,
            )
        )
        self.commit("training plan")
        return plan

    def get_plan(self, plan_id: int) -> TrainingPlan:
        plan = self._plan_repo.get(plan_id)
        if plan is None:
            raise NotFoundError("Training plan not found.", code="PLAN_NOT_FOUND")
        return plan

    def list_plans(self) -> List[TrainingPlan]:
        return self._plan_repo.list_all()

    def delete_plan(self, plan_id: int) -> None:
        self.get_plan(plan_id)
        self._plan_repo.delete(plan_id)
        self.commit("training plan deletion")
        domain_events.catalog_changed.emit("training_plan")

    # ---------------- offers & requirement links ----------------

    def _ensure_item(self, item_kind: ItemKind, item_id: int) -> None:
        if item_kind == ItemKind.MACHINE:
            self.get_machine_type(item_id)
        else:
            self.get_software_type(item_id)

    def set_training_offer(
        self,
        plan_id: int,
        item_kind: ItemKind,
        item_id: int,
        hours_required: float,
    ) -> TrainingOffer:
        if hours_required < 0:
            raise ValidationError("Training hours cannot be negative.")
        self.get_plan(plan_id)
        self._ensure_item(item_kind, item_id)

        existing = self._offer_repo.get_for_item(plan_id, item_kind, item_id)
        offer = TrainingOffer(
            id=existing.id if existing else None,
            plan_id=plan_id,
            item_kind=item_kind,
            item_id=item_id,
            hours_required=float(hours_required),
        )
        offer = self._offer_repo.upsert(offer)
        self.commit("training offer")
        domain_events.catalog_changed.emit("training_offer")
        return offer

    def list_offers(self, plan_id: int) -> List[TrainingOffer]:
        return self._offer_repo.list_by_plan(plan_id)

    def add_requirement(
        self,
        item_kind: ItemKind,
        item_id: int,
        plan_id: int,
        resource_id: Optional[int] = None,
    ) -> RequirementAssignment:
        self.get_plan(plan_id)
        self._ensure_item(item_kind, item_id)
        if resource_id is not None and self._resource_repo.get(resource_id) is None:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")

        assignment = self._assignment_repo.add(
            RequirementAssignment(
                id=None,
                item_kind=item_kind,
                item_id=item_id,
                plan_id=plan_id,
                resource_id=resource_id,
            )
        )
        self.commit("training requirement")
        domain_events.catalog_changed.emit("training_requirement")
        return assignment

    def assign_resource(self, assignment_id: int, resource_id: Optional[int]) -> RequirementAssignment:
        assignment = self._assignment_repo.get(assignment_id)
        if assignment is None:
            raise NotFoundError("Training requirement not found.", code="REQUIREMENT_NOT_FOUND")
        if resource_id is not None and self._resource_repo.get(resource_id) is None:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        assignment.resource_id = resource_id
        self._assignment_repo.update(assignment)
        self.commit("training requirement")
        domain_events.catalog_changed.emit("training_requirement")
        return assignment

    def remove_requirement(self, assignment_id: int) -> None:
        self._assignment_repo.delete(assignment_id)
        self.commit("training requirement deletion")
        domain_events.catalog_changed.emit("training_requirement")

    def list_requirements(self, item_kind: ItemKind, item_id: int) -> List[RequirementAssignment]:
        return self._assignment_repo.list_for_item(item_kind, item_id)

    # ---------------- training topics ----------------

    def _get_topic(self, topic_id: int) -> TrainingTopic:
        topic = self._topic_repo.get(topic_id)
        if topic is None:
            raise NotFoundError("Training topic not found.", code="TOPIC_NOT_FOUND")
        return topic

    def add_topic(
        self,
        plan_id: int,
        item_kind: ItemKind,
        item_id: int,
        topic_text: str,
    ) -> TrainingTopic:
        """Append a topic after the existing topics of the same item and plan."""
        text = (topic_text or "").strip()
        if not text:
            raise ValidationError("Topic text cannot be empty.")
        self.get_plan(plan_id)
        self._ensure_item(item_kind, item_id)

        existing = self._topic_repo.list_for_item(plan_id, item_kind, item_id)
        next_order = max((t.display_order for t in existing), default=-1) + 1
        topic = self._topic_repo.add(
            TrainingTopic(
                id=None,
                plan_id=plan_id,
                item_kind=item_kind,
                item_id=item_id,
                topic_text=text,
                display_order=next_order,
            )
        )
        self.commit("training topic")
        logger.info("Added training topic %s to %s %s (plan %s)", topic.id, item_kind.value, item_id, plan_id)
        domain_events.catalog_changed.emit("training_topic")
        return topic

    def update_topic(self, topic_id: int, topic_text: str) -> TrainingTopic:
        text = (topic_text or "").strip()
        if not text:
            raise ValidationError("Topic text cannot be empty.")
        topic = self._get_topic(topic_id)
        topic.topic_text = text
        self._topic_repo.update(topic)
        self.commit("training topic")
        domain_events.catalog_changed.emit("training_topic")
        return topic

    def remove_topic(self, topic_id: int) -> None:
        self._get_topic(topic_id)
        self._topic_repo.delete(topic_id)
        self.commit("training topic deletion")
        domain_events.catalog_changed.emit("training_topic")

    def reorder_topics(self, topic_ids: List[int]) -> List[TrainingTopic]:
        """
        Rewrite display_order to follow topic_ids. All ids must belong to the
        same item and plan.
        """
        topics = [self._get_topic(topic_id) for topic_id in topic_ids]
        scopes = {(t.plan_id, t.item_kind, t.item_id) for t in topics}
        if len(scopes) > 1:
            raise BusinessRuleError(
                "Topics from different items or plans cannot be reordered together.",
                code="TOPIC_SCOPE_MISMATCH",
            )
        for order, topic in enumerate(topics):
            topic.display_order = order
            self._topic_repo.update(topic)
        self.commit("training topic order")
        domain_events.catalog_changed.emit("training_topic")
        return topics

    def list_topics(
        self,
        plan_id: int,
        item_kind: Optional[ItemKind] = None,
        item_id: Optional[int] = None,
    ) -> List[TrainingTopic]:
        if item_kind is not None and item_id is not None:
            return self._topic_repo.list_for_item(plan_id, item_kind, item_id)
        return self._topic_repo.list_for_plan(plan_id)


__all__ = ["CatalogService"]
