"""
Projection facade: validates a settings snapshot and runs every component in
dependency order to build one ProjectionResult.
"""

import logging
import threading
from typing import Optional, Union

import numpy as np

from .adjustments import after_tax, real_value
from .config import SAFE_WITHDRAWAL_RATE
from .goals import solve_goal
from .models import (
    AdvancedSettings,
    GoalAnalysis,
    InvestmentSettings,
    ProjectionResult,
    RetirementAnalysis,
)
from .monte_carlo import Engine, MonteCarloResult, ReturnSampler, risk_profile
from .rates import effective_annual_rate, monthly_growth_rate
from .simulation import continuous_compounding_value, simulate_growth
from .validation import validate

logger = logging.getLogger(__name__)


def _retirement_analysis(future_value: float, simulated: MonteCarloResult) -> RetirementAnalysis:
    safe_withdrawal = future_value * SAFE_WITHDRAWAL_RATE
    return RetirementAnalysis(
        safe_withdrawal_amount=safe_withdrawal,
        monthly_withdrawal=safe_withdrawal / 12.0,
        years_to_deplete=future_value / safe_withdrawal if safe_withdrawal > 0 else 0.0,
        success_probability=simulated.success_probability,
        end_balance_percentiles=simulated.end_balance_percentiles,
    )


def project(
    settings: InvestmentSettings,
    advanced: Optional[AdvancedSettings] = None,
    rng: Optional[np.random.Generator] = None,
    sampler: Union[ReturnSampler, str, None] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ProjectionResult:
    """
    Run a full projection.

    Args:
        settings: Core investment inputs (percent rates)
        advanced: Optional refinements; defaults apply when omitted
        rng: Random source for the Monte Carlo runs. A freshly seeded
             Generator gives reproducible results.
        sampler: Annual return sampler or its registered name
        cancel_event: Set it to abort the Monte Carlo runs

    Returns:
        ProjectionResult

    Raises:
        ProjectionValidationError: inputs out of range, nothing was computed
        SimulationCancelled: cancel_event was set during a Monte Carlo run
    """
    advanced = advanced or AdvancedSettings()
    validate(settings, advanced)

    growth_default = AdvancedSettings.model_fields["contribution_growth_rate"].default
    if advanced.contribution_growth_rate != growth_default or advanced.irregular_contributions:
        logger.info(
            "contribution_growth_rate and irregular_contributions are not applied to the projection"
        )

    rate = settings.annual_interest_rate / 100.0
    inflation = settings.inflation_rate / 100.0
    tax = settings.tax_rate / 100.0
    years = settings.investment_period_years
    frequency = settings.compounding_frequency

    trajectory = simulate_growth(
        settings.initial_amount,
        settings.monthly_contribution,
        rate,
        frequency,
        years,
        inflation,
    )
    future_value = trajectory.future_value
    logger.debug("simulated %d months, future value %.2f", len(trajectory.entries), future_value)

    continuous_value = continuous_compounding_value(
        settings.initial_amount, settings.monthly_contribution, rate, years
    )

    engine = Engine(
        settings.initial_amount,
        settings.monthly_contribution,
        years,
        risk_profile(advanced.risk_tolerance),
        rng=rng,
        sampler=sampler,
    )
    retirement = _retirement_analysis(future_value, engine.run(cancel_event=cancel_event))

    goal_analysis = None
    if advanced.goal_amount is not None:
        solution = solve_goal(
            advanced.goal_amount,
            settings.initial_amount,
            monthly_growth_rate(rate, frequency),
            years,
        )
        if solution.indeterminate_reason:
            logger.debug("months to goal indeterminate: %s", solution.indeterminate_reason)
        goal_run = engine.run(advanced.goal_amount, cancel_event=cancel_event)
        goal_analysis = GoalAnalysis(
            goal_amount=advanced.goal_amount,
            months_to_goal=solution.months_to_goal,
            years_to_goal=solution.years_to_goal,
            required_monthly_contribution=solution.required_monthly_contribution,
            probability_of_success=goal_run.success_probability,
            indeterminate_reason=solution.indeterminate_reason,
            end_balance_percentiles=goal_run.end_balance_percentiles,
        )

    result = ProjectionResult(
        future_value=future_value,
        continuous_compounding_value=continuous_value,
        effective_annual_rate=effective_annual_rate(rate, frequency) * 100.0,
        total_contributions=trajectory.total_contributions,
        total_interest=trajectory.total_interest,
        real_value=real_value(future_value, inflation, years),
        after_tax_value=after_tax(future_value, tax, settings.account_type),
        monthly_breakdown=trajectory.entries,
        retirement_analysis=retirement,
        goal_analysis=goal_analysis,
    )
    logger.info(
        "projection: %d years at %.2f%% %s -> future value %.2f",
        years, settings.annual_interest_rate, frequency.value, future_value,
    )
    return result
