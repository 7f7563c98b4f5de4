"""
Pydantic models for the investment projection engine.
Request settings, per-month breakdown rows and the projection result.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================
# Enumerations
# ============================
class CompoundingFrequency(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"
    CONTINUOUS = "continuous"


class TaxTreatment(str, Enum):
    TAXABLE = "taxable"
    TAX_DEFERRED = "tax_deferred"
    TAX_FREE = "tax_free"


class AccountType(str, Enum):
    """Account types as offered in the calculator, plus the raw treatments."""
    TAXABLE = "taxable"
    K401 = "401k"
    IRA = "ira"
    ROTH_IRA = "roth_ira"
    TAX_DEFERRED = "tax_deferred"
    TAX_FREE = "tax_free"


class RiskTolerance(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


# ============================
# Input Models
# ============================
class InvestmentSettings(BaseModel):
    """Core inputs for one calculation. Rates are in percent (7 means 7%)."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    initial_amount: float = 1000.0
    monthly_contribution: float = 500.0
    annual_interest_rate: float = 7.0
    compounding_frequency: CompoundingFrequency = CompoundingFrequency.MONTHLY
    investment_period_years: int = 30
    inflation_rate: float = 2.5
    tax_rate: float = 22.0
    account_type: AccountType = AccountType.TAXABLE


class IrregularContribution(BaseModel):
    """One-off deposit (bonus, refund, windfall). Carried but not simulated."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    year: int
    amount: float
    description: str = ""


class AdvancedSettings(BaseModel):
    """Optional refinements to a calculation."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    contribution_growth_rate: float = 3.0  # percent per year, not applied
    irregular_contributions: List[IrregularContribution] = Field(default_factory=list)
    risk_tolerance: RiskTolerance = RiskTolerance.MODERATE
    goal_amount: Optional[float] = None

    # Advisory only (display)
    current_age: Optional[int] = None
    retirement_age: Optional[int] = None


class ProjectionRequest(BaseModel):
    """HTTP request body for a projection."""
    settings: InvestmentSettings = Field(default_factory=InvestmentSettings)
    advanced: AdvancedSettings = Field(default_factory=AdvancedSettings)
    seed: Optional[int] = None  # pins the Monte Carlo random source


# ============================
# Result Models
# ============================
class MonthlyBreakdownEntry(BaseModel):
    """One simulated month. Month 1 records the initial amount as its contribution."""
    model_config = ConfigDict(frozen=True)

    month: int
    contribution: float
    interest_earned: float
    nominal_balance: float
    real_balance: float


class RetirementAnalysis(BaseModel):
    """4% rule figures for the projected balance."""
    model_config = ConfigDict(frozen=True)

    safe_withdrawal_amount: float
    monthly_withdrawal: float
    years_to_deplete: float
    success_probability: float
    end_balance_percentiles: Dict[str, float] = Field(default_factory=dict)


class GoalAnalysis(BaseModel):
    """Goal-seeking figures. months_to_goal is None when indeterminate."""
    model_config = ConfigDict(frozen=True)

    goal_amount: float
    months_to_goal: Optional[float] = None
    years_to_goal: Optional[float] = None
    required_monthly_contribution: float
    probability_of_success: float
    indeterminate_reason: Optional[str] = None
    end_balance_percentiles: Dict[str, float] = Field(default_factory=dict)


class ProjectionResult(BaseModel):
    """Everything one calculation produces."""
    model_config = ConfigDict(frozen=True)

    future_value: float
    continuous_compounding_value: float
    effective_annual_rate: float  # percent
    total_contributions: float
    total_interest: float
    real_value: float
    after_tax_value: float
    monthly_breakdown: List[MonthlyBreakdownEntry]
    retirement_analysis: Optional[RetirementAnalysis] = None
    goal_analysis: Optional[GoalAnalysis] = None


class RiskProfile(BaseModel):
    """Return assumptions behind a risk tolerance."""
    mean_return: float
    volatility: float
