"""Initial schema - all tables

Revision ID: 0001
Revises: None
Create Date: 2026-10-18
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # ── Catalogs ──────────────────────────────────────────────────────
    op.create_table(
        "roles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), unique=True, nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "drug_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, index=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "hospitals",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("hospital_code", sa.String(50), unique=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False, index=True),
        sa.Column("address", sa.String(500), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        *_timestamps(),
    )

    for table in ("majors", "certifications"):
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("name", sa.String(255), unique=True, nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
            *_timestamps(),
        )

    # ── Doctors ───────────────────────────────────────────────────────
    op.create_table(
        "doctors",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), unique=True, index=True, nullable=False),
        sa.Column("practising_certificate", sa.String(255), nullable=False),
        sa.Column("certificate_code", sa.String(100), unique=True, nullable=False),
        sa.Column("place_of_certificate", sa.String(255), nullable=False),
        sa.Column("date_of_certificate", sa.Date(), nullable=False),
        sa.Column("scope_of_practice", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("number_of_consultants", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("rating", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("is_verify", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "hospital_doctors",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("doctor_id", sa.Integer(), sa.ForeignKey("doctors.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("hospital_id", sa.Integer(), sa.ForeignKey("hospitals.id"), nullable=False, index=True),
        sa.Column("is_working", sa.Boolean(), server_default=sa.text("true"), nullable=False),
    )

    op.create_table(
        "major_doctors",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("doctor_id", sa.Integer(), sa.ForeignKey("doctors.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("major_id", sa.Integer(), sa.ForeignKey("majors.id"), nullable=False, index=True),
    )

    op.create_table(
        "certification_doctors",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("doctor_id", sa.Integer(), sa.ForeignKey("doctors.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column(
            "certification_id", sa.Integer(), sa.ForeignKey("certifications.id"), nullable=False, index=True
        ),
        sa.Column("evidence", sa.String(500), nullable=True),
        sa.Column("date_of_issue", sa.Date(), nullable=True),
    )

    # ── Patients & scheduling ─────────────────────────────────────────
    op.create_table(
        "patients",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), unique=True, index=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("background_disease", sa.Text(), nullable=True),
        sa.Column("allergy", sa.Text(), nullable=True),
        sa.Column("blood_group", sa.String(10), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "slots",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("assigned_date", sa.Date(), nullable=False, index=True),
        sa.Column("doctor_id", sa.Integer(), sa.ForeignKey("doctors.id"), nullable=False, index=True),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("health_check_id", sa.Integer(), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    for table in (
        "slots",
        "patients",
        "certification_doctors",
        "major_doctors",
        "hospital_doctors",
        "doctors",
        "certifications",
        "majors",
        "hospitals",
        "drug_types",
        "roles",
    ):
        op.drop_table(table)
