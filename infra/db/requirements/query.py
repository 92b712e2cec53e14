from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import TrainingRequirementQuery
from core.models import ItemKind
from core.services.scheduling.models import TrainingRequirement
from infra.db.models import (
    MachineTypeORM,
    QuoteItemORM,
    QuoteORM,
    RequirementAssignmentORM,
    ResourceORM,
    SoftwareTypeORM,
    TrainingOfferORM,
)

logger = logging.getLogger(__name__)

# software without an explicit offer still needs a short introduction
DEFAULT_SOFTWARE_HOURS = 2.0


class SqlAlchemyTrainingRequirementQuery(TrainingRequirementQuery):
    """
    Single read model for "requirement -> resource/hours".

    Order of the result is the scheduling priority:
    machines in quote selection order, then software (selected first, then
    always-included), each item's requirement rows in insertion order.
    """

    def __init__(self, session: Session):
        self.session = session

    def _selected(self, quote_id: str, kind: ItemKind) -> List[int]:
        stmt = (
            select(QuoteItemORM.item_id)
            .where(QuoteItemORM.quote_id == quote_id, QuoteItemORM.item_kind == kind)
            .order_by(QuoteItemORM.position, QuoteItemORM.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    def _software_ids(self, quote_id: str) -> List[int]:
        ids = self._selected(quote_id, ItemKind.SOFTWARE)
        stmt = (
            select(SoftwareTypeORM.id)
            .where(SoftwareTypeORM.always_included.is_(True))
            .order_by(SoftwareTypeORM.id)
        )
        for software_id in self.session.execute(stmt).scalars().all():
            if software_id not in ids:
                ids.append(software_id)
        return ids

    def _assignments(self, kind: ItemKind, item_ids: Sequence[int]) -> Dict[int, List[RequirementAssignmentORM]]:
        if not item_ids:
            return {}
        stmt = (
            select(RequirementAssignmentORM)
            .where(
                RequirementAssignmentORM.item_kind == kind,
                RequirementAssignmentORM.item_id.in_(list(item_ids)),
            )
            .order_by(RequirementAssignmentORM.id)
        )
        grouped: Dict[int, List[RequirementAssignmentORM]] = {}
        for row in self.session.execute(stmt).scalars().all():
            grouped.setdefault(row.item_id, []).append(row)
        return grouped

    def _offer_hours(self) -> Dict[Tuple[int, ItemKind, int], float]:
        rows = self.session.execute(select(TrainingOfferORM)).scalars().all()
        return {(row.plan_id, row.item_kind, row.item_id): float(row.hours_required or 0.0) for row in rows}

    def _names(self, orm_cls) -> Dict[int, str]:
        rows = self.session.execute(select(orm_cls.id, orm_cls.name)).all()
        return {row_id: name for row_id, name in rows}

    def list_for_quote(self, quote_id: str) -> List[TrainingRequirement]:
        if self.session.get(QuoteORM, quote_id) is None:
            return []

        machine_ids = self._selected(quote_id, ItemKind.MACHINE)
        software_ids = self._software_ids(quote_id)
        offers = self._offer_hours()
        resource_names = self._names(ResourceORM)
        item_names = {
            ItemKind.MACHINE: self._names(MachineTypeORM),
            ItemKind.SOFTWARE: self._names(SoftwareTypeORM),
        }

        requirements: List[TrainingRequirement] = []
        for kind, item_ids, default_hours in (
            (ItemKind.MACHINE, machine_ids, 0.0),
            (ItemKind.SOFTWARE, software_ids, DEFAULT_SOFTWARE_HOURS),
        ):
            assignments = self._assignments(kind, item_ids)
            for item_id in item_ids:
                for row in assignments.get(item_id, []):
                    requirements.append(
                        TrainingRequirement(
                            resource_id=row.resource_id,
                            item_id=item_id,
                            item_kind=kind,
                            plan_id=row.plan_id,
                            hours_required=offers.get((row.plan_id, kind, item_id), default_hours),
                            item_name=item_names[kind].get(item_id, ""),
                            resource_name=resource_names.get(row.resource_id, "") if row.resource_id else "",
                        )
                    )

        logger.debug("Loaded %s training requirement(s) for quote %s", len(requirements), quote_id)
        return requirements


__all__ = ["DEFAULT_SOFTWARE_HOURS", "SqlAlchemyTrainingRequirementQuery"]
