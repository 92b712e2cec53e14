# infra/db/mappers.py
from __future__ import annotations

from core.models import (
    AreaCost,
    MachineType,
    RequirementAssignment,
    Resource,
    SoftwareType,
    TrainingOffer,
    TrainingPlan,
    TrainingTopic,
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


def resource_to_orm(resource: Resource) -> ResourceORM:
    return ResourceORM(
        id=resource.id,
        name=resource.name,
        hourly_rate=resource.hourly_rate,
        is_active=resource.is_active,
    )


def resource_from_orm(obj: ResourceORM) -> Resource:
    return Resource(
        id=obj.id,
        name=obj.name,
        hourly_rate=obj.hourly_rate or 0.0,
        is_active=bool(obj.is_active),
    )


def machine_to_orm(machine: MachineType) -> MachineTypeORM:
    return MachineTypeORM(id=machine.id, name=machine.name, description=machine.description)


def machine_from_orm(obj: MachineTypeORM) -> MachineType:
    return MachineType(id=obj.id, name=obj.name, description=obj.description or "")


def software_to_orm(software: SoftwareType) -> SoftwareTypeORM:
    return SoftwareTypeORM(
        id=software.id,
        name=software.name,
        description=software.description,
        always_included=software.always_included,
    )


def software_from_orm(obj: SoftwareTypeORM) -> SoftwareType:
    return SoftwareType(
        id=obj.id,
        name=obj.name,
        description=obj.description or "",
        always_included=bool(obj.always_included),
    )


def plan_to_orm(plan: TrainingPlan) -> TrainingPlanORM:
    return TrainingPlanORM(
        id=plan.id,
        name=plan.name,
        description=plan.description,
        display_order=plan.display_order,
    )


def plan_from_orm(obj: TrainingPlanORM) -> TrainingPlan:
    return TrainingPlan(
        id=obj.id,
        name=obj.name,
        description=obj.description or "",
        display_order=obj.display_order or 0,
    )


def offer_to_orm(offer: TrainingOffer) -> TrainingOfferORM:
    return TrainingOfferORM(
        id=offer.id,
        plan_id=offer.plan_id,
        item_kind=offer.item_kind,
        item_id=offer.item_id,
        hours_required=offer.hours_required,
    )


def offer_from_orm(obj: TrainingOfferORM) -> TrainingOffer:
    return TrainingOffer(
        id=obj.id,
        plan_id=obj.plan_id,
        item_kind=obj.item_kind,
        item_id=obj.item_id,
        hours_required=obj.hours_required or 0.0,
    )


def assignment_to_orm(assignment: RequirementAssignment) -> RequirementAssignmentORM:
    return RequirementAssignmentORM(
        id=assignment.id,
        item_kind=assignment.item_kind,
        item_id=assignment.item_id,
        plan_id=assignment.plan_id,
        resource_id=assignment.resource_id,
    )


def assignment_from_orm(obj: RequirementAssignmentORM) -> RequirementAssignment:
    return RequirementAssignment(
        id=obj.id,
        item_kind=obj.item_kind,
        item_id=obj.item_id,
        plan_id=obj.plan_id,
        resource_id=obj.resource_id,
    )


def topic_to_orm(topic: TrainingTopic) -> TrainingTopicORM:
    return TrainingTopicORM(
        id=topic.id,
        plan_id=topic.plan_id,
        item_kind=topic.item_kind,
        item_id=topic.item_id,
        topic_text=topic.topic_text,
        display_order=topic.display_order,
    )


def topic_from_orm(obj: TrainingTopicORM) -> TrainingTopic:
    return TrainingTopic(
        id=obj.id,
        plan_id=obj.plan_id,
        item_kind=obj.item_kind,
        item_id=obj.item_id,
        topic_text=obj.topic_text,
        display_order=obj.display_order or 0,
    )


def area_cost_to_orm(area: AreaCost) -> AreaCostORM:
    return AreaCostORM(
        id=area.id,
        area_name=area.area_name,
        daily_accommodation_food_cost=area.daily_accommodation_food_cost,
        daily_allowance=area.daily_allowance,
        daily_pocket_money=area.daily_pocket_money,
    )


def area_cost_from_orm(obj: AreaCostORM) -> AreaCost:
    return AreaCost(
        id=obj.id,
        area_name=obj.area_name,
        daily_accommodation_food_cost=obj.daily_accommodation_food_cost or 0.0,
        daily_allowance=obj.daily_allowance or 0.0,
        daily_pocket_money=obj.daily_pocket_money or 0.0,
    )
