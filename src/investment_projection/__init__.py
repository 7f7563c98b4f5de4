"""Investment growth and retirement projection engine."""

from .errors import (
    FieldValidationError,
    IndeterminateGoalError,
    InvalidGoalError,
    InvalidPeriodError,
    InvalidRateError,
    InvalidTaxRateError,
    NegativeAmountError,
    NegativeInflationError,
    ProjectionError,
    ProjectionValidationError,
    SimulationCancelled,
)
from .models import (
    AccountType,
    AdvancedSettings,
    CompoundingFrequency,
    GoalAnalysis,
    InvestmentSettings,
    MonthlyBreakdownEntry,
    ProjectionResult,
    RetirementAnalysis,
    RiskTolerance,
    TaxTreatment,
)
from .projection import project

__all__ = [
    "project",
    "AccountType",
    "AdvancedSettings",
    "CompoundingFrequency",
    "GoalAnalysis",
    "InvestmentSettings",
    "MonthlyBreakdownEntry",
    "ProjectionResult",
    "RetirementAnalysis",
    "RiskTolerance",
    "TaxTreatment",
    "ProjectionError",
    "ProjectionValidationError",
    "FieldValidationError",
    "InvalidRateError",
    "InvalidPeriodError",
    "NegativeAmountError",
    "InvalidTaxRateError",
    "NegativeInflationError",
    "InvalidGoalError",
    "IndeterminateGoalError",
    "SimulationCancelled",
]
