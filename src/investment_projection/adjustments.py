"""
Inflation and tax normalization of a terminal value.
Simplified approximations, not tax advice.
"""

from .config import TAXABLE_GAINS_FACTOR
from .models import AccountType, TaxTreatment

ACCOUNT_TREATMENTS = {
    AccountType.TAXABLE: TaxTreatment.TAXABLE,
    AccountType.K401: TaxTreatment.TAX_DEFERRED,
    AccountType.IRA: TaxTreatment.TAX_DEFERRED,
    AccountType.ROTH_IRA: TaxTreatment.TAX_FREE,
    AccountType.TAX_DEFERRED: TaxTreatment.TAX_DEFERRED,
    AccountType.TAX_FREE: TaxTreatment.TAX_FREE,
}


def tax_treatment(account_type: AccountType) -> TaxTreatment:
    """Map an account type onto its tax treatment."""
    return ACCOUNT_TREATMENTS[AccountType(account_type)]


def real_value(nominal_value: float, inflation_rate: float, years: float) -> float:
    """Express a future nominal amount in today's purchasing power."""
    return nominal_value / (1.0 + inflation_rate) ** years


def after_tax(value: float, tax_rate: float, account_type: AccountType) -> float:
    """
    Apply the account's tax treatment to a terminal value.

    tax_free: untouched (Roth withdrawals)
    tax_deferred: whole value taxed at tax_rate on withdrawal (401k, IRA)
    taxable: long-term capital gains haircut of tax_rate * 0.15
    """
    treatment = tax_treatment(account_type)
    if treatment is TaxTreatment.TAX_FREE:
        return value
    if treatment is TaxTreatment.TAX_DEFERRED:
        return value * (1.0 - tax_rate)
    return value * (1.0 - tax_rate * TAXABLE_GAINS_FACTOR)
