"""Initial users and patients tables.

Revision ID: 0001_initial_schema
Revises:
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "patients",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("gender", sa.Text(), nullable=False),
        sa.Column("contact_number", sa.Text(), nullable=True),
        sa.Column("visit_date", sa.Text(), nullable=True),
        sa.Column("followup_date", sa.Text(), nullable=True),
        sa.Column("disease_symptoms", sa.Text(), nullable=False),
        sa.Column("prescription_treatment", sa.Text(), nullable=True),
        sa.Column("dose", sa.Text(), nullable=True),
        sa.Column("fee", sa.Numeric(10, 2), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("patients")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
