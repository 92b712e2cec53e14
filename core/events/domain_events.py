"""Quote changes that invalidate the computed training schedule."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.quote_changed: Signal[str] = Signal()      # quote_id
        self.catalog_changed: Signal[str] = Signal()    # entity label


# SINGLE global instance
domain_events = DomainEvents()
