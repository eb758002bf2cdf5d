"""Initial FundRazor schema.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

Creates the six application tables:
- users: staff accounts (campaign, canvas and opportunity owners)
- persons: donor/contact records
- opportunities: pipeline entries per person
- interactions: logged touchpoints per person
- campaigns: fundraising campaigns with goal and running totals
- organization_canvases: saved org-chart layouts (JSON document)
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=True,
        ),
    ]


def upgrade() -> None:
    # ── users ───────────────────────────────────────────────────────────

    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("hashed_password", sa.String(255), nullable=True),
        sa.Column("role", sa.String(30), server_default=sa.text("'MGO'"), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # ── persons ─────────────────────────────────────────────────────────

    op.create_table(
        "persons",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("preferred_name", sa.String(100), nullable=True),
        sa.Column("primary_email", sa.String(255), nullable=True),
        sa.Column("primary_phone", sa.String(50), nullable=True),
        sa.Column("organization_name", sa.String(255), nullable=True),
        sa.Column("wealth_band", sa.String(50), nullable=True),
        sa.Column("capacity_score", sa.Integer(), nullable=True),
        sa.Column("engagement_score", sa.Integer(), nullable=True),
        sa.Column("source_system", sa.String(100), nullable=True),
        sa.Column("source_record_id", sa.String(200), nullable=True),
        sa.Column("synced_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("data_quality_score", sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_persons_last_first", "persons", ["last_name", "first_name"])

    # ── opportunities ───────────────────────────────────────────────────

    op.create_table(
        "opportunities",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "person_id",
            sa.String(36),
            sa.ForeignKey("persons.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("stage", sa.String(30), server_default=sa.text("'Prospect'"), nullable=False),
        sa.Column("ask_amount", sa.Numeric(10, 2), nullable=True),
        sa.Column("probability", sa.Integer(), nullable=True),
        sa.Column("close_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("owner_id", sa.String(36), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )

    # ── interactions ────────────────────────────────────────────────────

    op.create_table(
        "interactions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "person_id",
            sa.String(36),
            sa.ForeignKey("persons.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("occurred_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("owner_id", sa.String(36), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("source", sa.String(100), nullable=True),
        sa.Column("source_system", sa.String(100), nullable=True),
        sa.Column("source_record_id", sa.String(200), nullable=True),
        sa.Column("synced_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("data_quality_score", sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index(
        "ix_interactions_person_occurred", "interactions", ["person_id", "occurred_at"]
    )
    op.create_index("ix_interactions_occurred_at", "interactions", ["occurred_at"])

    # ── campaigns ───────────────────────────────────────────────────────

    op.create_table(
        "campaigns",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), server_default=sa.text("'planning'"), nullable=False),
        sa.Column("goal", sa.Numeric(12, 2), nullable=True),
        sa.Column("raised", sa.Numeric(12, 2), server_default=sa.text("0.00"), nullable=True),
        sa.Column("donor_count", sa.Integer(), server_default=sa.text("0"), nullable=True),
        sa.Column("avg_gift_size", sa.Numeric(12, 2), nullable=True),
        sa.Column("total_gifts", sa.Integer(), server_default=sa.text("0"), nullable=True),
        sa.Column(
            "owner_id",
            sa.String(36),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_campaigns_start_date", "campaigns", ["start_date"])

    # ── organization_canvases ───────────────────────────────────────────

    op.create_table(
        "organization_canvases",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "owner_id",
            sa.String(36),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("is_default", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("canvas_data", sa.JSON(), nullable=False),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("organization_canvases")
    op.drop_index("ix_campaigns_start_date", table_name="campaigns")
    op.drop_table("campaigns")
    op.drop_index("ix_interactions_occurred_at", table_name="interactions")
    op.drop_index("ix_interactions_person_occurred", table_name="interactions")
    op.drop_table("interactions")
    op.drop_table("opportunities")
    op.drop_index("ix_persons_last_first", table_name="persons")
    op.drop_table("persons")
    op.drop_table("users")
