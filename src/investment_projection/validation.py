"""
Boundary validation. Every check runs before any computation and all
failures are raised together.
"""

from typing import List, Optional

from .config import (
    MAX_ANNUAL_RATE,
    MAX_PERIOD_YEARS,
    MAX_TAX_RATE,
    MIN_ANNUAL_RATE,
    MIN_PERIOD_YEARS,
)
from .errors import (
    FieldValidationError,
    InvalidGoalError,
    InvalidPeriodError,
    InvalidRateError,
    InvalidTaxRateError,
    NegativeAmountError,
    NegativeInflationError,
    ProjectionValidationError,
)
from .models import AdvancedSettings, InvestmentSettings


def collect_errors(
    settings: InvestmentSettings,
    advanced: Optional[AdvancedSettings] = None,
) -> List[FieldValidationError]:
    """Return every constraint violation in the inputs (empty when valid)."""
    errors: List[FieldValidationError] = []

    if settings.initial_amount < 0:
        errors.append(NegativeAmountError("initial_amount", "must be >= 0", settings.initial_amount))
    if settings.monthly_contribution < 0:
        errors.append(
            NegativeAmountError("monthly_contribution", "must be >= 0", settings.monthly_contribution)
        )

    rate = settings.annual_interest_rate
    if not MIN_ANNUAL_RATE <= rate <= MAX_ANNUAL_RATE:
        errors.append(
            InvalidRateError(
                "annual_interest_rate",
                f"must be between {MIN_ANNUAL_RATE:g} and {MAX_ANNUAL_RATE:g} percent",
                rate,
            )
        )

    years = settings.investment_period_years
    if not MIN_PERIOD_YEARS <= years <= MAX_PERIOD_YEARS:
        errors.append(
            InvalidPeriodError(
                "investment_period_years",
                f"must be between {MIN_PERIOD_YEARS} and {MAX_PERIOD_YEARS} years",
                years,
            )
        )

    if settings.inflation_rate < 0:
        errors.append(NegativeInflationError("inflation_rate", "must be >= 0", settings.inflation_rate))
    if not 0 <= settings.tax_rate <= MAX_TAX_RATE:
        errors.append(
            InvalidTaxRateError(
                "tax_rate", f"must be between 0 and {MAX_TAX_RATE:g} percent", settings.tax_rate
            )
        )

    if advanced is not None and advanced.goal_amount is not None and advanced.goal_amount <= 0:
        errors.append(InvalidGoalError("goal_amount", "must be > 0 when set", advanced.goal_amount))

    return errors


def validate(
    settings: InvestmentSettings,
    advanced: Optional[AdvancedSettings] = None,
) -> None:
    """
    Raises:
        ProjectionValidationError: one or more fields are out of range
    """
    errors = collect_errors(settings, advanced)
    if errors:
        raise ProjectionValidationError(errors)
