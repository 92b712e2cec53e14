import logging

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class ServiceBase:
    def __init__(self, session: Session):
        self._session = session

    def commit(self, action: str = "change"):
        try:
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error(f"Error saving {action}: {e}")
            raise e
