from infra.db.quote.mapper import quote_from_orm, quote_items_to_orm, quote_to_orm
from infra.db.quote.repository import SqlAlchemyQuoteRepository

__all__ = [
    "quote_to_orm",
    "quote_items_to_orm",
    "quote_from_orm",
    "SqlAlchemyQuoteRepository",
]
