from __future__ import annotations

from typing import Iterable, List

from core.models import ItemKind, Quote
from infra.db.models import QuoteItemORM, QuoteORM


def quote_to_orm(quote: Quote) -> QuoteORM:
    return QuoteORM(
        id=quote.id,
        name=quote.name,
        client_name=quote.client_name,
        area_id=quote.area_id,
        work_on_saturday=quote.work_on_saturday,
        work_on_sunday=quote.work_on_sunday,
    )


def quote_items_to_orm(quote: Quote) -> List[QuoteItemORM]:
    items: List[QuoteItemORM] = []
    for position, machine_id in enumerate(quote.machine_type_ids):
        items.append(
            QuoteItemORM(quote_id=quote.id, item_kind=ItemKind.MACHINE, item_id=machine_id, position=position)
        )
    for position, software_id in enumerate(quote.software_type_ids):
        items.append(
            QuoteItemORM(quote_id=quote.id, item_kind=ItemKind.SOFTWARE, item_id=software_id, position=position)
        )
    return items


def quote_from_orm(obj: QuoteORM, items: Iterable[QuoteItemORM]) -> Quote:
    ordered = sorted(items, key=lambda item: (item.position, item.id or 0))
    return Quote(
        id=obj.id,
        name=obj.name,
        client_name=obj.client_name or "",
        area_id=obj.area_id,
        work_on_saturday=bool(obj.work_on_saturday),
        work_on_sunday=bool(obj.work_on_sunday),
        machine_type_ids=[i.item_id for i in ordered if i.item_kind == ItemKind.MACHINE],
        software_type_ids=[i.item_id for i in ordered if i.item_kind == ItemKind.SOFTWARE],
    )


__all__ = ["quote_to_orm", "quote_items_to_orm", "quote_from_orm"]
