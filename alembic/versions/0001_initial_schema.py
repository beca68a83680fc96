"""initial schema: users, utilities, meters, bills, payments

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("role", sa.String(20), server_default="user", nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("user_id", name="pk_users"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "utilities",
        sa.Column("utility_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("utility_name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("utility_id", name="pk_utilities"),
        sa.UniqueConstraint("utility_name", name="uq_utilities_utility_name"),
    )

    op.create_table(
        "meters",
        sa.Column("meter_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("meter_number", sa.String(100), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("utility_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], name="fk_meters_user_id_users", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["utility_id"], ["utilities.utility_id"], name="fk_meters_utility_id_utilities"),
        sa.PrimaryKeyConstraint("meter_id", name="pk_meters"),
        sa.UniqueConstraint("meter_number", name="uq_meters_meter_number"),
    )
    op.create_index("ix_meters_user_id", "meters", ["user_id"])
    op.create_index("ix_meters_utility_id", "meters", ["utility_id"])

    op.create_table(
        "bills",
        sa.Column("bill_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("meter_id", sa.Integer(), nullable=False),
        sa.Column("bill_month", sa.Date(), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("status IN ('unpaid', 'overdue', 'paid')", name="ck_bills_status"),
        sa.CheckConstraint("amount >= 0", name="ck_bills_amount_non_negative"),
        sa.ForeignKeyConstraint(["meter_id"], ["meters.meter_id"], name="fk_bills_meter_id_meters", ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("bill_id", name="pk_bills"),
    )
    op.create_index("ix_bills_meter_id", "bills", ["meter_id"])
    op.create_index("ix_bills_status", "bills", ["status"])

    op.create_table(
        "payments",
        sa.Column("payment_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("bill_id", sa.Integer(), nullable=False),
        sa.Column("payment_method", sa.Text(), nullable=False),
        sa.Column("payment_date", sa.DateTime(), nullable=False),
        sa.Column("transaction_ref", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["bill_id"], ["bills.bill_id"], name="fk_payments_bill_id_bills", ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("payment_id", name="pk_payments"),
        sa.UniqueConstraint("bill_id", name="uq_payments_bill_id"),
        sa.UniqueConstraint("transaction_ref", name="uq_payments_transaction_ref"),
    )


def downgrade() -> None:
    op.drop_table("payments")
    op.drop_index("ix_bills_status", table_name="bills")
    op.drop_index("ix_bills_meter_id", table_name="bills")
    op.drop_table("bills")
    op.drop_index("ix_meters_utility_id", table_name="meters")
    op.drop_index("ix_meters_user_id", table_name="meters")
    op.drop_table("meters")
    op.drop_table("utilities")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
