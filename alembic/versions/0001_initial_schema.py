"""Initial schema — example consumer tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "navigation_classes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.UniqueConstraint("name", name="uq_navigation_classes_name"),
    )

    op.create_table(
        "example_classes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "navigation_class_id",
            sa.Integer,
            sa.ForeignKey("navigation_classes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.Text, nullable=False),
    )
    op.create_index(
        "ix_example_classes_navigation_class_id", "example_classes", ["navigation_class_id"]
    )

    # Composite PK: (example_class_id, label), in that order.
    op.create_table(
        "example_tags",
        sa.Column(
            "example_class_id",
            sa.Integer,
            sa.ForeignKey("example_classes.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("label", sa.Text, primary_key=True),
        sa.Column("weight", sa.Integer, nullable=False, server_default="0"),
    )


def downgrade() -> None:
    op.drop_table("example_tags")
    op.drop_index("ix_example_classes_navigation_class_id", table_name="example_classes")
    op.drop_table("example_classes")
    op.drop_table("navigation_classes")
