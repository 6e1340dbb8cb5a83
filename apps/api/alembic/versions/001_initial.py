"""Initial schema: organisations, profiles, results.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "organisations",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
    )

    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "organisation_id",
            sa.UUID(),
            sa.ForeignKey("organisations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
    )
    op.create_index("ix_profiles_organisation_id", "profiles", ["organisation_id"])

    op.create_table(
        "results",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "profile_id",
            sa.UUID(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("result", sa.String(50), nullable=False),
        sa.Column("sample_id", sa.String(100), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("activate_time", sa.String(32), nullable=False),
        sa.Column("result_time", sa.String(32), nullable=False),
    )
    op.create_index("ix_results_profile_id", "results", ["profile_id"])
    op.create_index("ix_results_sample_id", "results", ["sample_id"])


def downgrade() -> None:
    op.drop_index("ix_results_sample_id", table_name="results")
    op.drop_index("ix_results_profile_id", table_name="results")
    op.drop_table("results")
    op.drop_index("ix_profiles_organisation_id", table_name="profiles")
    op.drop_table("profiles")
    op.drop_table("organisations")
