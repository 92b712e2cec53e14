from .catalog import CatalogService
from .quote import QuoteService
from .resource import ResourceService
from .scheduling import QuoteSchedule, QuoteScheduleService

__all__ = [
    "CatalogService",
    "QuoteService",
    "ResourceService",
    "QuoteSchedule",
    "QuoteScheduleService",
]
