from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.interfaces import QuoteRepository
from core.models import Quote
from infra.db.models import QuoteItemORM, QuoteORM
from infra.db.quote.mapper import quote_from_orm, quote_items_to_orm, quote_to_orm


class SqlAlchemyQuoteRepository(QuoteRepository):
    def __init__(self, session: Session):
        self.session = session

    def _items(self, quote_id: str) -> List[QuoteItemORM]:
        stmt = select(QuoteItemORM).where(QuoteItemORM.quote_id == quote_id)
        return list(self.session.execute(stmt).scalars().all())

    def add(self, quote: Quote) -> None:
        self.session.add(quote_to_orm(quote))
        self.session.add_all(quote_items_to_orm(quote))

    def update(self, quote: Quote) -> None:
        obj = self.session.get(QuoteORM, quote.id)
        if obj is None:
            raise NotFoundError("Quote not found.", code="QUOTE_NOT_FOUND")
        obj.name = quote.name
        obj.client_name = quote.client_name
        obj.area_id = quote.area_id
        obj.work_on_saturday = quote.work_on_saturday
        obj.work_on_sunday = quote.work_on_sunday

        # selections are replaced wholesale to keep positions contiguous
        self.session.execute(delete(QuoteItemORM).where(QuoteItemORM.quote_id == quote.id))
        self.session.add_all(quote_items_to_orm(quote))

    def delete(self, quote_id: str) -> None:
        self.session.execute(delete(QuoteItemORM).where(QuoteItemORM.quote_id == quote_id))
        self.session.query(QuoteORM).filter_by(id=quote_id).delete()

    def get(self, quote_id: str) -> Optional[Quote]:
        obj = self.session.get(QuoteORM, quote_id)
        if obj is None:
            return None
        return quote_from_orm(obj, self._items(quote_id))

    def list_all(self) -> List[Quote]:
        rows = self.session.execute(select(QuoteORM).order_by(QuoteORM.name)).scalars().all()
        return [quote_from_orm(row, self._items(row.id)) for row in rows]


__all__ = ["SqlAlchemyQuoteRepository"]
