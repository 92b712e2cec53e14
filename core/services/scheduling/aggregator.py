from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from core.services.scheduling.models import TrainingRequirement

logger = logging.getLogger(__name__)


def is_schedulable(requirement: TrainingRequirement) -> bool:
    """A requirement produces a task only with an assigned resource and positive hours."""
    if requirement.resource_id is None:
        return False
    return float(requirement.hours_required or 0.0) > 0.0


def aggregate_requirements(
    records: Iterable[TrainingRequirement],
    plan_id: Optional[int] = None,
) -> List[TrainingRequirement]:
    """
    Normalize raw requirement records into the ordered scheduling input of one plan.

    - records without a resource are skipped (not yet assigned while quoting)
    - records with zero or negative hours are skipped
    - relative order is preserved; it is the scheduling priority
    """
    kept: List[TrainingRequirement] = []
    unassigned = 0
    no_hours = 0

    for record in records:
        if plan_id is not None and record.plan_id != plan_id:
            continue
        if record.resource_id is None:
            unassigned += 1
            continue
        if float(record.hours_required or 0.0) <= 0.0:
            no_hours += 1
            continue
        kept.append(record)

    if unassigned or no_hours:
        logger.debug(
            "Aggregated %s requirement(s) for plan %s; skipped %s unassigned, %s without hours",
            len(kept),
            plan_id,
            unassigned,
            no_hours,
        )
    return kept


def group_by_plan(records: Iterable[TrainingRequirement]) -> dict[int, List[TrainingRequirement]]:
    """Split raw records per plan, keeping plan first-appearance and record order."""
    grouped: dict[int, List[TrainingRequirement]] = {}
    for record in records:
        grouped.setdefault(record.plan_id, []).append(record)
    return grouped


__all__ = ["aggregate_requirements", "group_by_plan", "is_schedulable"]
