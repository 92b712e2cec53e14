from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.services.catalog import CatalogService
from core.services.quote import QuoteService
from core.services.resource import ResourceService
from core.services.scheduling import QuoteScheduleService
from infra.db.repositories import (
    SqlAlchemyAreaCostRepository,
    SqlAlchemyMachineTypeRepository,
    SqlAlchemyQuoteRepository,
    SqlAlchemyRequirementAssignmentRepository,
    SqlAlchemyResourceRepository,
    SqlAlchemySoftwareTypeRepository,
    SqlAlchemyTrainingOfferRepository,
    SqlAlchemyTrainingPlanRepository,
    SqlAlchemyTrainingRequirementQuery,
    SqlAlchemyTrainingTopicRepository,
)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    resource_service: ResourceService
    catalog_service: CatalogService
    quote_service: QuoteService
    schedule_service: QuoteScheduleService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "resource_service": self.resource_service,
            "catalog_service": self.catalog_service,
            "quote_service": self.quote_service,
            "schedule_service": self.schedule_service,
        }


def build_service_graph(session: Session) -> ServiceGraph:
    resource_repo = SqlAlchemyResourceRepository(session)
    machine_repo = SqlAlchemyMachineTypeRepository(session)
    software_repo = SqlAlchemySoftwareTypeRepository(session)
    plan_repo = SqlAlchemyTrainingPlanRepository(session)
    offer_repo = SqlAlchemyTrainingOfferRepository(session)
    assignment_repo = SqlAlchemyRequirementAssignmentRepository(session)
    area_cost_repo = SqlAlchemyAreaCostRepository(session)
    quote_repo = SqlAlchemyQuoteRepository(session)
    requirement_query = SqlAlchemyTrainingRequirementQuery(session)
    topic_repo = SqlAlchemyTrainingTopicRepository(session)

    resource_service = ResourceService(session, resource_repo)
    catalog_service = CatalogService(
        session,
        machine_repo,
        software_repo,
        plan_repo,
        offer_repo,
        assignment_repo,
        resource_repo,
        topic_repo,
    )
    quote_service = QuoteService(
        session,
        quote_repo,
        machine_repo,
        software_repo,
        area_cost_repo,
    )
    schedule_service = QuoteScheduleService(
        quote_repo=quote_repo,
        plan_repo=plan_repo,
        resource_repo=resource_repo,
        requirement_query=requirement_query,
        area_cost_repo=area_cost_repo,
        topic_repo=topic_repo,
    )

    return ServiceGraph(
        session=session,
        resource_service=resource_service,
        catalog_service=catalog_service,
        quote_service=quote_service,
        schedule_service=schedule_service,
    )


def build_service_dict(session: Session) -> dict[str, Any]:
    return build_service_graph(session).as_dict()
