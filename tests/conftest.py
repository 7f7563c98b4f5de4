"""
Shared fixtures for projection engine testing.
"""

import numpy as np
import pytest

from investment_projection.models import AdvancedSettings, InvestmentSettings


@pytest.fixture
def default_settings_dict():
    """Calculator defaults: $1,000 start, $500/month, 7% monthly, 30 years."""
    return {
        "initial_amount": 1000,
        "monthly_contribution": 500,
        "annual_interest_rate": 7,
        "compounding_frequency": "monthly",
        "investment_period_years": 30,
        "inflation_rate": 2.5,
        "tax_rate": 22,
        "account_type": "taxable",
    }


@pytest.fixture
def make_settings(default_settings_dict):
    """Factory fixture: default settings with keyword overrides."""
    def _make(**overrides):
        return InvestmentSettings(**{**default_settings_dict, **overrides})

    return _make


@pytest.fixture
def moderate_advanced():
    """Advanced settings with no goal and nothing that affects the growth loop."""
    return AdvancedSettings(contribution_growth_rate=0, risk_tolerance="moderate")


@pytest.fixture
def seeded_rng():
    """Factory fixture for reproducible random sources."""
    def _rng(seed=1234):
        return np.random.default_rng(seed)

    return _rng


@pytest.fixture
def tolerance():
    """Tolerances for floating point comparisons."""
    return {
        "money": 1e-6,  # absolute, dollars
        "relative": 1e-9,
        "months": 1.0,  # goal solver round trip
    }
