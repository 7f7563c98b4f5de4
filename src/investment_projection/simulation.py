"""
Month-by-month growth simulation of a deposit schedule.

The schedule is: the initial amount at month 0, then one contribution at the
start of every month after the first. Interest is applied monthly on the
post-contribution balance.
"""

import math
from dataclasses import dataclass, field
from typing import List

from .models import CompoundingFrequency, MonthlyBreakdownEntry
from .rates import monthly_growth_rate


@dataclass
class GrowthTrajectory:
    """Full balance path plus totals for one deterministic simulation."""
    entries: List[MonthlyBreakdownEntry] = field(default_factory=list)
    future_value: float = 0.0
    total_contributions: float = 0.0

    @property
    def total_interest(self) -> float:
        return self.future_value - self.total_contributions


def simulate_growth(
    initial_amount: float,
    monthly_contribution: float,
    rate: float,
    frequency: CompoundingFrequency,
    years: int,
    inflation_rate: float,
) -> GrowthTrajectory:
    """
    Step the balance forward one month at a time.

    Args:
        initial_amount: Balance at month 0
        monthly_contribution: Deposit made at the start of months 2..N
        rate: Nominal annual rate (decimal)
        frequency: Compounding convention for `rate`
        years: Investment period; N = years * 12 months
        inflation_rate: Annual inflation (decimal) used for the real balance

    Returns:
        GrowthTrajectory with one MonthlyBreakdownEntry per month
    """
    step_rate = monthly_growth_rate(rate, frequency)
    balance = initial_amount
    total_contributions = initial_amount
    entries: List[MonthlyBreakdownEntry] = []

    for month in range(1, years * 12 + 1):
        if month > 1:
            balance += monthly_contribution
            total_contributions += monthly_contribution

        interest = balance * step_rate
        balance += interest

        real_balance = balance / (1.0 + inflation_rate) ** (month / 12.0)

        entries.append(
            MonthlyBreakdownEntry(
                month=month,
                contribution=initial_amount if month == 1 else monthly_contribution,
                interest_earned=interest,
                nominal_balance=balance,
                real_balance=real_balance,
            )
        )

    return GrowthTrajectory(
        entries=entries,
        future_value=balance,
        total_contributions=total_contributions,
    )


def continuous_compounding_value(
    initial_amount: float,
    monthly_contribution: float,
    rate: float,
    years: int,
) -> float:
    """
    Terminal value of the same deposit schedule under continuous compounding.

    P * e^(rT) + C * sum(e^(r*k/12) for k in 1..N-1), where the deposit made at
    the start of month m has N - m + 1 months to grow.
    """
    n_months = years * 12
    principal = initial_amount * math.exp(rate * years)

    n_deposits = n_months - 1
    if n_deposits <= 0 or monthly_contribution == 0:
        return principal
    if rate == 0:
        return principal + monthly_contribution * n_deposits

    # geometric series q + q^2 + ... + q^(N-1), q = e^(r/12)
    q = math.exp(rate / 12.0)
    series = q * math.expm1(rate * n_deposits / 12.0) / math.expm1(rate / 12.0)
    return principal + monthly_contribution * series
