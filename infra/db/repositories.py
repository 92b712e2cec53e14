# infra/db/repositories.py
from __future__ import annotations
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.interfaces import (
    AreaCostRepository,
    MachineTypeRepository,
    RequirementAssignmentRepository,
    ResourceRepository,
    SoftwareTypeRepository,
    TrainingOfferRepository,
    TrainingPlanRepository,
    TrainingTopicRepository,
)
from core.models import (
    AreaCost,
    ItemKind,
    MachineType,
    RequirementAssignment,
    Resource,
    SoftwareType,
    TrainingOffer,
    TrainingPlan,
    TrainingTopic,
)
from infra.db.mappers import (
    area_cost_from_orm,
    area_cost_to_orm,
    assignment_from_orm,
    assignment_to_orm,
    machine_from_orm,
    machine_to_orm,
    offer_from_orm,
    offer_to_orm,
    plan_from_orm,
    plan_to_orm,
    resource_from_orm,
    resource_to_orm,
    software_from_orm,
    software_to_orm,
    topic_from_orm,
    topic_to_orm,
)
from infra.db.models import (
    AreaCostORM,
    MachineTypeORM,
    RequirementAssignmentORM,
    ResourceORM,
    SoftwareTypeORM,
    TrainingOfferORM,
    TrainingPlanORM,
    TrainingTopicORM,
)
from infra.db.quote import SqlAlchemyQuoteRepository
from infra.db.requirements import SqlAlchemyTrainingRequirementQuery


def _require(session: Session, orm_cls, row_id, message: str):
    obj = session.get(orm_cls, row_id)
    if obj is None:
        raise NotFoundError(message)
    return obj


class SqlAlchemyResourceRepository(ResourceRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, resource: Resource) -> Resource:
        obj = resource_to_orm(resource)
        self.session.add(obj)
        self.session.flush()
        resource.id = obj.id
        return resource

    def update(self, resource: Resource) -> None:
        obj = _require(self.session, ResourceORM, resource.id, "Resource not found.")
        obj.name = resource.name
        obj.hourly_rate = resource.hourly_rate
        obj.is_active = resource.is_active

    def delete(self, resource_id: int) -> None:
        # unassign instead of dropping the requirement; it still has to be staffed
        self.session.query(RequirementAssignmentORM).filter_by(resource_id=resource_id).update(
            {RequirementAssignmentORM.resource_id: None}
        )
        self.session.query(ResourceORM).filter_by(id=resource_id).delete()

    def get(self, resource_id: int) -> Optional[Resource]:
        obj = self.session.get(ResourceORM, resource_id)
        return resource_from_orm(obj) if obj else None

    def list_all(self) -> List[Resource]:
        stmt = select(ResourceORM).order_by(ResourceORM.id)
        rows = self.session.execute(stmt).scalars().all()
        return [resource_from_orm(row) for row in rows]


class SqlAlchemyMachineTypeRepository(MachineTypeRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, machine: MachineType) -> MachineType:
        obj = machine_to_orm(machine)
        self.session.add(obj)
        self.session.flush()
        machine.id = obj.id
        return machine

    def update(self, machine: MachineType) -> None:
        obj = _require(self.session, MachineTypeORM, machine.id, "Machine type not found.")
        obj.name = machine.name
        obj.description = machine.description

    def delete(self, machine_type_id: int) -> None:
        self.session.query(MachineTypeORM).filter_by(id=machine_type_id).delete()

    def get(self, machine_type_id: int) -> Optional[MachineType]:
        obj = self.session.get(MachineTypeORM, machine_type_id)
        return machine_from_orm(obj) if obj else None

    def list_all(self) -> List[MachineType]:
        rows = self.session.execute(select(MachineTypeORM).order_by(MachineTypeORM.id)).scalars().all()
        return [machine_from_orm(row) for row in rows]


class SqlAlchemySoftwareTypeRepository(SoftwareTypeRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, software: SoftwareType) -> SoftwareType:
        obj = software_to_orm(software)
        self.session.add(obj)
        self.session.flush()
        software.id = obj.id
        return software

    def update(self, software: SoftwareType) -> None:
        obj = _require(self.session, SoftwareTypeORM, software.id, "Software type not found.")
        obj.name = software.name
        obj.description = software.description
        obj.always_included = software.always_included

    def delete(self, software_type_id: int) -> None:
        self.session.query(SoftwareTypeORM).filter_by(id=software_type_id).delete()

    def get(self, software_type_id: int) -> Optional[SoftwareType]:
        obj = self.session.get(SoftwareTypeORM, software_type_id)
        return software_from_orm(obj) if obj else None

    def list_all(self) -> List[SoftwareType]:
        rows = self.session.execute(select(SoftwareTypeORM).order_by(SoftwareTypeORM.id)).scalars().all()
        return [software_from_orm(row) for row in rows]


class SqlAlchemyTrainingPlanRepository(TrainingPlanRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, plan: TrainingPlan) -> TrainingPlan:
        obj = plan_to_orm(plan)
        self.session.add(obj)
        self.session.flush()
        plan.id = obj.id
        return plan

    def update(self, plan: TrainingPlan) -> None:
        obj = _require(self.session, TrainingPlanORM, plan.id, "Training plan not found.")
        obj.name = plan.name
        obj.description = plan.description
        obj.display_order = plan.display_order

    def delete(self, plan_id: int) -> None:
        # SQLite does not enforce ON DELETE CASCADE unless the pragma is on
        self.session.query(TrainingOfferORM).filter_by(plan_id=plan_id).delete()
        self.session.query(RequirementAssignmentORM).filter_by(plan_id=plan_id).delete()
        self.session.query(TrainingTopicORM).filter_by(plan_id=plan_id).delete()
        self.session.query(TrainingPlanORM).filter_by(id=plan_id).delete()

    def get(self, plan_id: int) -> Optional[TrainingPlan]:
        obj = self.session.get(TrainingPlanORM, plan_id)
        return plan_from_orm(obj) if obj else None

    def list_all(self) -> List[TrainingPlan]:
        stmt = select(TrainingPlanORM).order_by(TrainingPlanORM.display_order, TrainingPlanORM.id)
        return [plan_from_orm(row) for row in self.session.execute(stmt).scalars().all()]


class SqlAlchemyTrainingOfferRepository(TrainingOfferRepository):
    def __init__(self, session: Session):
        self.session = session

    def upsert(self, offer: TrainingOffer) -> TrainingOffer:
        obj = self.session.get(TrainingOfferORM, offer.id) if offer.id is not None else None
        if obj is None:
            obj = offer_to_orm(offer)
            self.session.add(obj)
        else:
            obj.hours_required = offer.hours_required
        self.session.flush()
        offer.id = obj.id
        return offer

    def delete(self, offer_id: int) -> None:
        self.session.query(TrainingOfferORM).filter_by(id=offer_id).delete()

    def get_for_item(self, plan_id: int, item_kind: ItemKind, item_id: int) -> Optional[TrainingOffer]:
        stmt = select(TrainingOfferORM).where(
            TrainingOfferORM.plan_id == plan_id,
            TrainingOfferORM.item_kind == item_kind,
            TrainingOfferORM.item_id == item_id,
        )
        obj = self.session.execute(stmt).scalars().first()
        return offer_from_orm(obj) if obj else None

    def list_by_plan(self, plan_id: int) -> List[TrainingOffer]:
        stmt = select(TrainingOfferORM).where(TrainingOfferORM.plan_id == plan_id).order_by(TrainingOfferORM.id)
        return [offer_from_orm(row) for row in self.session.execute(stmt).scalars().all()]

    def delete_for_item(self, item_kind: ItemKind, item_id: int) -> None:
        self.session.query(TrainingOfferORM).filter_by(item_kind=item_kind, item_id=item_id).delete()


class SqlAlchemyRequirementAssignmentRepository(RequirementAssignmentRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, assignment: RequirementAssignment) -> RequirementAssignment:
        obj = assignment_to_orm(assignment)
        self.session.add(obj)
        self.session.flush()
        assignment.id = obj.id
        return assignment

    def update(self, assignment: RequirementAssignment) -> None:
        obj = _require(self.session, RequirementAssignmentORM, assignment.id, "Training requirement not found.")
        obj.plan_id = assignment.plan_id
        obj.resource_id = assignment.resource_id

    def delete(self, assignment_id: int) -> None:
        self.session.query(RequirementAssignmentORM).filter_by(id=assignment_id).delete()

    def get(self, assignment_id: int) -> Optional[RequirementAssignment]:
        obj = self.session.get(RequirementAssignmentORM, assignment_id)
        return assignment_from_orm(obj) if obj else None

    def list_for_item(self, item_kind: ItemKind, item_id: int) -> List[RequirementAssignment]:
        stmt = (
            select(RequirementAssignmentORM)
            .where(
                RequirementAssignmentORM.item_kind == item_kind,
                RequirementAssignmentORM.item_id == item_id,
            )
            .order_by(RequirementAssignmentORM.id)
        )
        return [assignment_from_orm(row) for row in self.session.execute(stmt).scalars().all()]

    def delete_for_item(self, item_kind: ItemKind, item_id: int) -> None:
        self.session.query(RequirementAssignmentORM).filter_by(item_kind=item_kind, item_id=item_id).delete()


class SqlAlchemyTrainingTopicRepository(TrainingTopicRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, topic: TrainingTopic) -> TrainingTopic:
        obj = topic_to_orm(topic)
        self.session.add(obj)
        self.session.flush()
        topic.id = obj.id
        return topic

    def update(self, topic: TrainingTopic) -> None:
        obj = _require(self.session, TrainingTopicORM, topic.id, "Training topic not found.")
        obj.topic_text = topic.topic_text
        obj.display_order = topic.display_order

    def delete(self, topic_id: int) -> None:
        self.session.query(TrainingTopicORM).filter_by(id=topic_id).delete()

    def get(self, topic_id: int) -> Optional[TrainingTopic]:
        obj = self.session.get(TrainingTopicORM, topic_id)
        return topic_from_orm(obj) if obj else None

    def list_for_plan(self, plan_id: int) -> List[TrainingTopic]:
        stmt = (
            select(TrainingTopicORM)
            .where(TrainingTopicORM.plan_id == plan_id)
            .order_by(TrainingTopicORM.display_order, TrainingTopicORM.id)
        )
        return [topic_from_orm(row) for row in self.session.execute(stmt).scalars().all()]

    def list_for_item(self, plan_id: int, item_kind: ItemKind, item_id: int) -> List[TrainingTopic]:
        stmt = (
            select(TrainingTopicORM)
            .where(
                TrainingTopicORM.plan_id == plan_id,
                TrainingTopicORM.item_kind == item_kind,
                TrainingTopicORM.item_id == item_id,
            )
            .order_by(TrainingTopicORM.display_order, TrainingTopicORM.id)
        )
        return [topic_from_orm(row) for row in self.session.execute(stmt).scalars().all()]

    def delete_for_item(self, item_kind: ItemKind, item_id: int) -> None:
        self.session.query(TrainingTopicORM).filter_by(item_kind=item_kind, item_id=item_id).delete()


class SqlAlchemyAreaCostRepository(AreaCostRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, area: AreaCost) -> AreaCost:
        obj = area_cost_to_orm(area)
        self.session.add(obj)
        self.session.flush()
        area.id = obj.id
        return area

    def update(self, area: AreaCost) -> None:
        obj = _require(self.session, AreaCostORM, area.id, "Area not found.")
        obj.area_name = area.area_name
        obj.daily_accommodation_food_cost = area.daily_accommodation_food_cost
        obj.daily_allowance = area.daily_allowance
        obj.daily_pocket_money = area.daily_pocket_money

    def get(self, area_id: int) -> Optional[AreaCost]:
        obj = self.session.get(AreaCostORM, area_id)
        return area_cost_from_orm(obj) if obj else None

    def list_all(self) -> List[AreaCost]:
        rows = self.session.execute(select(AreaCostORM).order_by(AreaCostORM.id)).scalars().all()
        return [area_cost_from_orm(row) for row in rows]


__all__ = [
    "SqlAlchemyResourceRepository",
    "SqlAlchemyMachineTypeRepository",
    "SqlAlchemySoftwareTypeRepository",
    "SqlAlchemyTrainingPlanRepository",
    "SqlAlchemyTrainingOfferRepository",
    "SqlAlchemyRequirementAssignmentRepository",
    "SqlAlchemyTrainingTopicRepository",
    "SqlAlchemyAreaCostRepository",
    "SqlAlchemyQuoteRepository",
    "SqlAlchemyTrainingRequirementQuery",
]
