from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import (
    AreaCostRepository,
    MachineTypeRepository,
    QuoteRepository,
    SoftwareTypeRepository,
)
from core.models import AreaCost, Quote
from core.services.common.base import ServiceBase

logger = logging.getLogger(__name__)


def _unique_ids(ids: Sequence[int]) -> List[int]:
    seen: set[int] = set()
    out: List[int] = []
    for value in ids:
        value = int(value)
        if value not in seen:
            seen.add(value)
            out.append(value)
    return out


class QuoteService(ServiceBase):
    """
    Quote editing: client data, selected machines/software and weekend toggles.
    Every change that affects the schedule emits domain_events.quote_changed.
    """

    def __init__(
        self,
        session: Session,
        quote_repo: QuoteRepository,
        machine_repo: MachineTypeRepository,
        software_repo: SoftwareTypeRepository,
        area_cost_repo: AreaCostRepository,
    ):
        super().__init__(session)
        self._quote_repo = quote_repo
        self._machine_repo = machine_repo
        self._software_repo = software_repo
        self._area_cost_repo = area_cost_repo

    def create_quote(self, name: str, client_name: str = "", area_id: Optional[int] = None) -> Quote:
        if not name or not name.strip():
            raise ValidationError("Quote name cannot be empty.")
        if area_id is not None:
            self.get_area_cost(area_id)
        quote = Quote.create(name=name.strip(), client_name=client_name.strip(), area_id=area_id)
        self._quote_repo.add(quote)
        self.commit("quote")
        logger.info("Created quote %s - %s", quote.id, quote.name)
        return quote

    def get_quote(self, quote_id: str) -> Quote:
        quote = self._quote_repo.get(quote_id)
        if quote is None:
            raise NotFoundError("Quote not found.", code="QUOTE_NOT_FOUND")
        return quote

    def list_quotes(self) -> List[Quote]:
        return self._quote_repo.list_all()

    def delete_quote(self, quote_id: str) -> None:
        self.get_quote(quote_id)
        self._quote_repo.delete(quote_id)
        self.commit("quote deletion")

    def _save(self, quote: Quote) -> Quote:
        self._quote_repo.update(quote)
        self.commit("quote")
        domain_events.quote_changed.emit(quote.id)
        return quote

    def set_weekend_policy(self, quote_id: str, work_on_saturday: bool, work_on_sunday: bool) -> Quote:
        quote = self.get_quote(quote_id)
        quote.work_on_saturday = bool(work_on_saturday)
        quote.work_on_sunday = bool(work_on_sunday)
        return self._save(quote)

    def select_machines(self, quote_id: str, machine_type_ids: Sequence[int]) -> Quote:
        quote = self.get_quote(quote_id)
        ids = _unique_ids(machine_type_ids)
        for machine_id in ids:
            if self._machine_repo.get(machine_id) is None:
                raise NotFoundError(f"Machine type {machine_id} not found.", code="MACHINE_TYPE_NOT_FOUND")
        quote.machine_type_ids = ids
        return self._save(quote)

    def select_software(self, quote_id: str, software_type_ids: Sequence[int]) -> Quote:
        quote = self.get_quote(quote_id)
        ids = _unique_ids(software_type_ids)
        for software_id in ids:
            if self._software_repo.get(software_id) is None:
                raise NotFoundError(f"Software type {software_id} not found.", code="SOFTWARE_TYPE_NOT_FOUND")
        quote.software_type_ids = ids
        return self._save(quote)

    def set_area(self, quote_id: str, area_id: Optional[int]) -> Quote:
        quote = self.get_quote(quote_id)
        if area_id is not None:
            self.get_area_cost(area_id)
        quote.area_id = area_id
        return self._save(quote)

    # ---------------- area costs ----------------

    def create_area_cost(
        self,
        area_name: str,
        daily_accommodation_food_cost: float = 0.0,
        daily_allowance: float = 0.0,
        daily_pocket_money: float = 0.0,
    ) -> AreaCost:
        if not area_name or not area_name.strip():
            raise ValidationError("Area name cannot be empty.")
        if min(daily_accommodation_food_cost, daily_allowance, daily_pocket_money) < 0:
            raise ValidationError("Daily area costs cannot be negative.")
        area = self._area_cost_repo.add(
            AreaCost(
                id=None,
                area_name=area_name.strip(),
                daily_accommodation_food_cost=daily_accommodation_food_cost,
                daily_allowance=daily_allowance,
                daily_pocket_money=daily_pocket_money,
            )
        )
        self.commit("area cost")
        return area

    def get_area_cost(self, area_id: int) -> AreaCost:
        area = self._area_cost_repo.get(area_id)
        if area is None:
            raise NotFoundError("Area not found.", code="AREA_NOT_FOUND")
        return area

    def list_area_costs(self) -> List[AreaCost]:
        return self._area_cost_repo.list_all()


__all__ = ["QuoteService"]
