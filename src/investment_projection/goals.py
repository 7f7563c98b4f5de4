"""
Goal seeking: invert the growth formula to answer "how long until X" and
"what monthly contribution reaches X by year Y".
"""

import math
from dataclasses import dataclass
from typing import Optional

from .errors import IndeterminateGoalError


@dataclass
class GoalSolution:
    months_to_goal: Optional[float]
    required_monthly_contribution: float
    indeterminate_reason: Optional[str] = None

    @property
    def years_to_goal(self) -> Optional[float]:
        if self.months_to_goal is None:
            return None
        return self.months_to_goal / 12.0


def months_to_goal(goal_amount: float, initial_amount: float, monthly_rate: float) -> float:
    """
    Months for the initial amount alone to grow to the goal.

    Contributions are not part of this estimate. A goal the initial amount
    already meets gives 0.

    Raises:
        IndeterminateGoalError: initial_amount <= 0, or a goal above the
            initial amount with monthly_rate <= 0
    """
    if initial_amount <= 0:
        raise IndeterminateGoalError(IndeterminateGoalError.NON_POSITIVE_INITIAL_AMOUNT)
    if goal_amount <= initial_amount:
        return 0.0
    if monthly_rate <= 0:
        raise IndeterminateGoalError(IndeterminateGoalError.NON_POSITIVE_MONTHLY_RATE)
    return math.log(goal_amount / initial_amount) / math.log1p(monthly_rate)


def required_monthly_contribution(
    goal_amount: float,
    initial_amount: float,
    monthly_rate: float,
    years: int,
) -> float:
    """
    Contribution C solving FV = P(1+i)^n + C((1+i)^n - 1)/i for FV = goal.

    Clamped at 0 when the initial amount alone reaches the goal.
    """
    n = years * 12
    growth = (1.0 + monthly_rate) ** n
    if monthly_rate == 0:
        annuity_factor = float(n)
    else:
        annuity_factor = (growth - 1.0) / monthly_rate
    required = (goal_amount - initial_amount * growth) / annuity_factor
    return max(0.0, required)


def solve_goal(
    goal_amount: float,
    initial_amount: float,
    monthly_rate: float,
    years: int,
) -> GoalSolution:
    """Run both inversions; an undefined months-to-goal is reported, not raised."""
    required = required_monthly_contribution(goal_amount, initial_amount, monthly_rate, years)
    try:
        months = months_to_goal(goal_amount, initial_amount, monthly_rate)
    except IndeterminateGoalError as exc:
        return GoalSolution(
            months_to_goal=None,
            required_monthly_contribution=required,
            indeterminate_reason=exc.reason,
        )
    return GoalSolution(months_to_goal=months, required_monthly_contribution=required)
