"""
Error types raised by the projection engine.
"""

from typing import Any, Dict, List


class ProjectionError(Exception):
    """Base class for all projection engine errors."""


# ============================
# Validation Errors
# ============================
class FieldValidationError(ProjectionError):
    """A single input field that violates its constraint."""

    def __init__(self, field: str, constraint: str, value: Any):
        self.field = field
        self.constraint = constraint
        self.value = value
        super().__init__(f"{field}: {constraint} (got {value!r})")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "constraint": self.constraint,
            "value": self.value,
            "message": str(self),
        }


class InvalidRateError(FieldValidationError):
    """Annual interest rate outside the supported range."""


class InvalidPeriodError(FieldValidationError):
    """Investment period outside the supported range."""


class NegativeAmountError(FieldValidationError):
    """Initial amount or monthly contribution below zero."""


class InvalidTaxRateError(FieldValidationError):
    """Tax rate outside [0, 100] percent."""


class NegativeInflationError(FieldValidationError):
    """Inflation rate below zero."""


class InvalidGoalError(FieldValidationError):
    """Goal amount that is not strictly positive."""


class ProjectionValidationError(ProjectionError):
    """All validation failures for one request, reported together."""

    def __init__(self, errors: List[FieldValidationError]):
        self.errors = errors
        super().__init__("; ".join(str(e) for e in errors))

    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.errors]


# ============================
# Computation Errors
# ============================
class IndeterminateGoalError(ProjectionError):
    """Months-to-goal has no finite answer for the given inputs."""

    NON_POSITIVE_INITIAL_AMOUNT = "non_positive_initial_amount"
    NON_POSITIVE_MONTHLY_RATE = "non_positive_monthly_rate"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"months to goal is indeterminate: {reason}")


class SimulationCancelled(ProjectionError):
    """Monte Carlo run stopped because its cancel event was set."""

    def __init__(self, completed: int, requested: int):
        self.completed = completed
        self.requested = requested
        super().__init__(f"simulation cancelled after {completed}/{requested} paths")
