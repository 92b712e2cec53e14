"""create training quote schema

Revision ID: 4b8e2c71d9a0
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "4b8e2c71d9a0"
down_revision = None
branch_labels = None
depends_on = None


def _item_kind() -> sa.Enum:
    return sa.Enum("MACHINE", "SOFTWARE", name="itemkind")


def upgrade() -> None:
    op.create_table(
        "resources",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("hourly_rate", sa.Float(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
    )
    op.create_table(
        "machine_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
    )
    op.create_table(
        "software_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("always_included", sa.Boolean(), nullable=True),
    )
    op.create_table(
        "training_plans",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=True),
    )
    op.create_table(
        "training_offers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "plan_id",
            sa.Integer(),
            sa.ForeignKey("training_plans.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("item_kind", _item_kind(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("hours_required", sa.Float(), nullable=True),
        sa.UniqueConstraint("plan_id", "item_kind", "item_id", name="uq_training_offer_item"),
    )
    op.create_table(
        "training_requirements",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("item_kind", _item_kind(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column(
            "plan_id",
            sa.Integer(),
            sa.ForeignKey("training_plans.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "resource_id",
            sa.Integer(),
            sa.ForeignKey("resources.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    op.create_index(
        "idx_training_requirements_item",
        "training_requirements",
        ["item_kind", "item_id"],
    )
    op.create_table(
        "area_costs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("area_name", sa.String(), nullable=False),
        sa.Column("daily_accommodation_food_cost", sa.Float(), nullable=True),
        sa.Column("daily_allowance", sa.Float(), nullable=True),
        sa.Column("daily_pocket_money", sa.Float(), nullable=True),
    )
    op.create_table(
        "quotes",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("client_name", sa.String(), nullable=True),
        sa.Column(
            "area_id",
            sa.Integer(),
            sa.ForeignKey("area_costs.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("work_on_saturday", sa.Boolean(), nullable=True),
        sa.Column("work_on_sunday", sa.Boolean(), nullable=True),
    )
    op.create_table(
        "quote_items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "quote_id",
            sa.String(),
            sa.ForeignKey("quotes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("item_kind", _item_kind(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=True),
        sa.UniqueConstraint("quote_id", "item_kind", "item_id", name="uq_quote_item"),
    )
    op.create_index("idx_quote_items_quote_id", "quote_items", ["quote_id"])


def downgrade() -> None:
    op.drop_index("idx_quote_items_quote_id", table_name="quote_items")
    op.drop_table("quote_items")
    op.drop_table("quotes")
    op.drop_table("area_costs")
    op.drop_index("idx_training_requirements_item", table_name="training_requirements")
    op.drop_table("training_requirements")
    op.drop_table("training_offers")
    op.drop_table("training_plans")
    op.drop_table("software_types")
    op.drop_table("machine_types")
    op.drop_table("resources")
