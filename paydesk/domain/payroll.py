"""
Name: Payroll Calculation (pure domain service)

Responsibilities:
  - Derive HRA, DA, PF, TDS and net pay from a basic salary
  - Derive the payroll period label from a point in time

Constraints:
  - Pure functions, no I/O
  - Decimal arithmetic; every component is rounded to cents first and the
    net is summed from the rounded components, so the net invariant is exact

Notes:
  - Rates are illustrative, not jurisdiction-correct
  - Zero or negative basic salaries are not rejected
"""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from .entities import PayrollRecord

HRA_RATE = Decimal("0.15")
DA_RATE = Decimal("0.05")
PF_RATE = Decimal("0.10")
TDS_RATE = Decimal("0.03")

CENTS = Decimal("0.01")

# Keeps every payroll amount within NUMERIC(12, 2).
MAX_BASIC_SALARY = Decimal("9000000000.00")

PERIOD_FORMAT = "%Y-%m"


def _to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def compute_payroll_record(
    employee_id: int, basic_salary: Decimal, period: str
) -> PayrollRecord:
    """
    Compute one payroll line.

    net = basic + HRA + DA - PF - TDS
    """
    basic = _to_cents(Decimal(basic_salary))
    hra = _to_cents(basic * HRA_RATE)
    da = _to_cents(basic * DA_RATE)
    pf = _to_cents(basic * PF_RATE)
    tds = _to_cents(basic * TDS_RATE)
    net = basic + hra + da - pf - tds

    return PayrollRecord(
        employee_id=employee_id,
        period=period,
        basic=basic,
        hra=hra,
        da=da,
        pf=pf,
        tds=tds,
        net_salary=net,
    )


def period_label(moment: datetime) -> str:
    """YYYY-MM label of `moment` in UTC (naive datetimes are taken as UTC)."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(PERIOD_FORMAT)
