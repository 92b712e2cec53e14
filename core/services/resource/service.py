# core/services/resource/service.py
from __future__ import annotations
from typing import List
from sqlalchemy.orm import Session

from core.models import Resource
from core.interfaces import ResourceRepository
from core.exceptions import NotFoundError, ValidationError
from core.services.common.base import ServiceBase
import logging

logger = logging.getLogger(__name__)


class ResourceService(ServiceBase):
    def __init__(self, session: Session, resource_repo: ResourceRepository):
        super().__init__(session)
        self._resource_repo = resource_repo

    def create_resource(self, name: str, hourly_rate: float = 0.0, is_active: bool = True) -> Resource:
        if not name or not name.strip():
            raise ValidationError("Resource name cannot be empty.")
        if hourly_rate < 0:
            raise ValidationError("Hourly rate cannot be negative.")
        resource = Resource.create(name=name.strip(), hourly_rate=hourly_rate, is_active=is_active)
        try:
            resource = self._resource_repo.add(resource)
            self._session.commit()
            logger.info(f"Created resource {resource.id} - {resource.name}")
        except Exception as e:
            self._session.rollback()
            logger.error(f"Error creating resource: {e}")
            raise
        return resource

    def update_resource(
        self,
        resource_id: int,
        name: str | None = None,
        hourly_rate: float | None = None,
        is_active: bool | None = None,
    ) -> Resource:
        resource = self.get_resource(resource_id)

        if name is not None:
            if not name.strip():
                raise ValidationError("Resource name cannot be empty.")
            resource.name = name.strip()
        if hourly_rate is not None:
            if hourly_rate < 0:
                raise ValidationError("Hourly rate cannot be negative.")
            resource.hourly_rate = hourly_rate
        if is_active is not None:
            resource.is_active = is_active

        self._resource_repo.update(resource)
        self.commit("resource")
        return resource

    def delete_resource(self, resource_id: int) -> None:
        self.get_resource(resource_id)
        self._resource_repo.delete(resource_id)
        self.commit("resource deletion")
        logger.info(f"Deleted resource {resource_id}")

    def list_resources(self) -> List[Resource]:
        return self._resource_repo.list_all()

    def get_resource(self, resource_id: int) -> Resource:
        resource = self._resource_repo.get(resource_id)
        if not resource:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        return resource
