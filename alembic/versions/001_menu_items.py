"""Menu items table with category/availability enums and positive price check.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("CREATE TYPE menu_category AS ENUM ('Appetizer', 'Main Course', 'Dessert', 'Drink')")
    op.execute("CREATE TYPE menu_availability AS ENUM ('In Stock', 'Out of Stock')")

    op.create_table(
        "menu_items",
        sa.Column("id", sa.Integer(), sa.Identity(always=False), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column(
            "category",
            postgresql.ENUM("Appetizer", "Main Course", "Dessert", "Drink", name="menu_category", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "availability",
            postgresql.ENUM("In Stock", "Out of Stock", name="menu_availability", create_type=False),
            nullable=False,
            server_default="In Stock",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("price > 0", name="ck_menu_items_price_positive"),
    )


def downgrade() -> None:
    op.drop_table("menu_items")
    op.execute("DROP TYPE menu_availability")
    op.execute("DROP TYPE menu_category")
