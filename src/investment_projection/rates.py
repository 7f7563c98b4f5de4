"""
Interest-rate conventions: compounding periods, effective annual rate and
the per-month step rate used by the growth simulator.

All rates here are decimal fractions (0.07 for 7%).
"""

import math
from typing import Optional

from .models import CompoundingFrequency

PERIODS_PER_YEAR = {
    CompoundingFrequency.DAILY: 365,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.ANNUALLY: 1,
}


def periods_per_year(frequency: CompoundingFrequency) -> Optional[int]:
    """Compounding periods per year, or None for continuous compounding."""
    return PERIODS_PER_YEAR.get(CompoundingFrequency(frequency))


def effective_annual_rate(rate: float, frequency: CompoundingFrequency) -> float:
    """Actual one-year growth once compounding frequency is accounted for."""
    n = periods_per_year(frequency)
    if n is None:
        return math.exp(rate) - 1.0
    return (1.0 + rate / n) ** n - 1.0


def monthly_growth_rate(rate: float, frequency: CompoundingFrequency) -> float:
    """
    Growth applied to the balance for one simulated month.

    Non-monthly discrete frequencies are converted to an equivalent monthly
    rate so every frequency shares the same monthly stepping loop. This is an
    approximation of true quarterly/daily compounding between deposits.
    """
    n = periods_per_year(frequency)
    if n is None:
        return math.exp(rate / 12.0) - 1.0
    if n == 12:
        return rate / 12.0
    return (1.0 + rate / n) ** (n / 12.0) - 1.0
