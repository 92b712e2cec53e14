"""add training topics

Revision ID: 9d3f5a17c2e4
Revises: 4b8e2c71d9a0
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "9d3f5a17c2e4"
down_revision = "4b8e2c71d9a0"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "training_topics",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "plan_id",
            sa.Integer(),
            sa.ForeignKey("training_plans.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("item_kind", sa.Enum("MACHINE", "SOFTWARE", name="itemkind"), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("topic_text", sa.String(), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=True),
    )
    op.create_index(
        "idx_training_topics_plan_item",
        "training_topics",
        ["plan_id", "item_kind", "item_id"],
    )


def downgrade() -> None:
    op.drop_index("idx_training_topics_plan_item", table_name="training_topics")
    op.drop_table("training_topics")
