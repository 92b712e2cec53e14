# infra/db/models.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import (
    Boolean,
    Enum as SAEnum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.models import ItemKind


class ResourceORM(Base):
    __tablename__ = "resources"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    hourly_rate: Mapped[float] = mapped_column(Float, default=0.0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class MachineTypeORM(Base):
    __tablename__ = "machine_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")


class SoftwareTypeORM(Base):
    __tablename__ = "software_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    always_included: Mapped[bool] = mapped_column(Boolean, default=False)


class TrainingPlanORM(Base):
    __tablename__ = "training_plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    display_order: Mapped[int] = mapped_column(Integer, default=0)


class TrainingOfferORM(Base):
    __tablename__ = "training_offers"
    __table_args__ = (
        UniqueConstraint("plan_id", "item_kind", "item_id", name="uq_training_offer_item"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    plan_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("training_plans.id", ondelete="CASCADE"), nullable=False
    )
    item_kind: Mapped[ItemKind] = mapped_column(SAEnum(ItemKind), nullable=False)
    item_id: Mapped[int] = mapped_column(Integer, nullable=False)
    hours_required: Mapped[float] = mapped_column(Float, default=0.0)


class RequirementAssignmentORM(Base):
    __tablename__ = "training_requirements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item_kind: Mapped[ItemKind] = mapped_column(SAEnum(ItemKind), nullable=False)
    item_id: Mapped[int] = mapped_column(Integer, nullable=False)
    plan_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("training_plans.id", ondelete="CASCADE"), nullable=False
    )
    resource_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("resources.id", ondelete="SET NULL"), nullable=True
    )
Index("idx_training_requirements_item", RequirementAssignmentORM.item_kind, RequirementAssignmentORM.item_id)


class TrainingTopicORM(Base):
    __tablename__ = "training_topics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    plan_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("training_plans.id", ondelete="CASCADE"), nullable=False
    )
    item_kind: Mapped[ItemKind] = mapped_column(SAEnum(ItemKind), nullable=False)
    item_id: Mapped[int] = mapped_column(Integer, nullable=False)
    topic_text: Mapped[str] = mapped_column(String, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0)
Index("idx_training_topics_plan_item", TrainingTopicORM.plan_id, TrainingTopicORM.item_kind, TrainingTopicORM.item_id)


class AreaCostORM(Base):
    __tablename__ = "area_costs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    area_name: Mapped[str] = mapped_column(String, nullable=False)
    daily_accommodation_food_cost: Mapped[float] = mapped_column(Float, default=0.0)
    daily_allowance: Mapped[float] = mapped_column(Float, default=0.0)
    daily_pocket_money: Mapped[float] = mapped_column(Float, default=0.0)


class QuoteORM(Base):
    __tablename__ = "quotes"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    client_name: Mapped[str] = mapped_column(String, default="")
    area_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("area_costs.id", ondelete="SET NULL"), nullable=True
    )
    work_on_saturday: Mapped[bool] = mapped_column(Boolean, default=False)
    work_on_sunday: Mapped[bool] = mapped_column(Boolean, default=False)


class QuoteItemORM(Base):
    """Selected machine or software of a quote; position keeps selection order."""

    __tablename__ = "quote_items"
    __table_args__ = (
        UniqueConstraint("quote_id", "item_kind", "item_id", name="uq_quote_item"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    quote_id: Mapped[str] = mapped_column(
        String, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=False
    )
    item_kind: Mapped[ItemKind] = mapped_column(SAEnum(ItemKind), nullable=False)
    item_id: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, default=0)
Index("idx_quote_items_quote_id", QuoteItemORM.quote_id)
