"""
Name: 001_foundation (Alembic Migration)

Responsibilities:
  - Create the base schema: users, employees, attendance, payroll

Policy:
  - Baseline migration; downgrade drops everything
  - Naming:
      pk_<table>                       - Primary keys
      uq_<table>_<col>                 - Unique constraints
      ix_<table>_<col>                 - Indexes
      fk_<table>_<col>__<ref_table>    - Foreign keys
  - uq_payroll_employee_id_period backs the "one record per employee per
    period" rule; the payroll run turns its violation into ALREADY_GENERATED
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_foundation"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def upgrade() -> None:
    # =========================================================
    # 1) IDENTITY
    # =========================================================
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger, sa.Identity(), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column(
            "role",
            sa.String(32),
            server_default=sa.text("'employee'"),
            nullable=False,
        ),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint(
            "role IN ('admin', 'employee')", name="ck_users_role"
        ),
    )

    # =========================================================
    # 2) DIRECTORY
    # =========================================================
    op.create_table(
        "employees",
        sa.Column("id", sa.BigInteger, sa.Identity(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), server_default=sa.text("''"), nullable=False),
        sa.Column(
            "department", sa.String(200), server_default=sa.text("''"), nullable=False
        ),
        sa.Column("basic_salary", sa.Numeric(12, 2), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_employees"),
    )

    op.create_table(
        "attendance",
        sa.Column("id", sa.BigInteger, sa.Identity(), nullable=False),
        sa.Column("employee_id", sa.BigInteger, nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("status", sa.String(32), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_attendance"),
        sa.ForeignKeyConstraint(
            ["employee_id"],
            ["employees.id"],
            name="fk_attendance_employee_id__employees",
            ondelete="CASCADE",
        ),
    )
    op.create_index("ix_attendance_employee_id", "attendance", ["employee_id"])

    # =========================================================
    # 3) PAYROLL LEDGER
    # =========================================================
    op.create_table(
        "payroll",
        sa.Column("id", sa.BigInteger, sa.Identity(), nullable=False),
        sa.Column("employee_id", sa.BigInteger, nullable=False),
        sa.Column("period", sa.String(7), nullable=False),
        sa.Column("basic", sa.Numeric(12, 2), nullable=False),
        sa.Column("hra", sa.Numeric(12, 2), nullable=False),
        sa.Column("da", sa.Numeric(12, 2), nullable=False),
        sa.Column("pf", sa.Numeric(12, 2), nullable=False),
        sa.Column("tds", sa.Numeric(12, 2), nullable=False),
        sa.Column("net_salary", sa.Numeric(12, 2), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_payroll"),
        sa.ForeignKeyConstraint(
            ["employee_id"],
            ["employees.id"],
            name="fk_payroll_employee_id__employees",
            ondelete="CASCADE",
        ),
        sa.UniqueConstraint(
            "employee_id", "period", name="uq_payroll_employee_id_period"
        ),
    )
    op.create_index("ix_payroll_period", "payroll", ["period"])


def downgrade() -> None:
    op.drop_table("payroll")
    op.drop_table("attendance")
    op.drop_table("employees")
    op.drop_table("users")
