"""
Test boundary validation of projection inputs.
"""

import pydantic
import pytest

from investment_projection.errors import (
    InvalidGoalError,
    InvalidPeriodError,
    InvalidRateError,
    InvalidTaxRateError,
    NegativeAmountError,
    NegativeInflationError,
    ProjectionValidationError,
)
from investment_projection.models import AdvancedSettings, InvestmentSettings
from investment_projection.validation import collect_errors, validate


class TestSingleField:

    @pytest.mark.parametrize("overrides,error_type,field", [
        ({"initial_amount": -1}, NegativeAmountError, "initial_amount"),
        ({"monthly_contribution": -0.01}, NegativeAmountError, "monthly_contribution"),
        ({"annual_interest_rate": 50.5}, InvalidRateError, "annual_interest_rate"),
        ({"annual_interest_rate": -51}, InvalidRateError, "annual_interest_rate"),
        ({"investment_period_years": 0}, InvalidPeriodError, "investment_period_years"),
        ({"investment_period_years": 101}, InvalidPeriodError, "investment_period_years"),
        ({"inflation_rate": -0.5}, NegativeInflationError, "inflation_rate"),
        ({"tax_rate": -1}, InvalidTaxRateError, "tax_rate"),
        ({"tax_rate": 100.1}, InvalidTaxRateError, "tax_rate"),
    ])
    def test_rejects(self, make_settings, overrides, error_type, field):
        errors = collect_errors(make_settings(**overrides))
        assert len(errors) == 1, f"expected one error, got {errors}"
        assert isinstance(errors[0], error_type)
        assert errors[0].field == field

    @pytest.mark.parametrize("overrides", [
        {"initial_amount": 0, "monthly_contribution": 0},
        {"annual_interest_rate": 50},
        {"annual_interest_rate": -50},
        {"investment_period_years": 1},
        {"investment_period_years": 100},
        {"inflation_rate": 0},
        {"tax_rate": 0},
        {"tax_rate": 100},
    ])
    def test_accepts_boundaries(self, make_settings, overrides):
        assert collect_errors(make_settings(**overrides)) == []

    @pytest.mark.parametrize("goal", [0, -100])
    def test_goal_must_be_positive(self, make_settings, goal):
        errors = collect_errors(make_settings(), AdvancedSettings(goal_amount=goal))
        assert [type(e) for e in errors] == [InvalidGoalError]

    def test_missing_goal_is_fine(self, make_settings):
        assert collect_errors(make_settings(), AdvancedSettings()) == []


class TestAggregation:

    def test_all_failures_reported_together(self, make_settings):
        settings = make_settings(initial_amount=-5, annual_interest_rate=75, tax_rate=150)
        with pytest.raises(ProjectionValidationError) as info:
            validate(settings)
        fields = [e.field for e in info.value.errors]
        assert fields == ["initial_amount", "annual_interest_rate", "tax_rate"]
        assert "initial_amount" in str(info.value)
        assert "tax_rate" in str(info.value)

    def test_error_dicts(self, make_settings):
        with pytest.raises(ProjectionValidationError) as info:
            validate(make_settings(investment_period_years=0))
        (detail,) = info.value.to_list()
        assert detail["field"] == "investment_period_years"
        assert detail["value"] == 0
        assert "between 1 and 100" in detail["constraint"]

    def test_valid_settings_pass(self, make_settings):
        validate(make_settings())


class TestModelLevel:

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_numbers_rejected(self, default_settings_dict, value):
        with pytest.raises(pydantic.ValidationError):
            InvestmentSettings(**{**default_settings_dict, "annual_interest_rate": value})

    def test_unknown_frequency_rejected(self, default_settings_dict):
        with pytest.raises(pydantic.ValidationError):
            InvestmentSettings(**{**default_settings_dict, "compounding_frequency": "weekly"})

    def test_settings_are_immutable(self, make_settings):
        settings = make_settings()
        with pytest.raises(pydantic.ValidationError):
            settings.initial_amount = 5
