from .service import QuoteService

__all__ = ["QuoteService"]
