"""
Monte Carlo estimate of the probability that a savings plan reaches a target.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import numpy as np

from ..config import (
    CHUNK_SIZE,
    DEFAULT_RETURN_SAMPLER,
    DEFAULT_SIMULATIONS,
    MONTE_CARLO_SEED,
    RISK_PROFILES,
)
from ..errors import SimulationCancelled
from ..models import RiskProfile, RiskTolerance
from .sampling import ReturnSampler, get_sampler

logger = logging.getLogger(__name__)


def risk_profile(tolerance: RiskTolerance) -> RiskProfile:
    """Mean annual return and volatility for a risk tolerance."""
    return RiskProfile(**RISK_PROFILES[RiskTolerance(tolerance).value])


@dataclass
class MonteCarloResult:
    """Outcome of one batch of simulated paths."""
    success_probability: float  # percent, 0..100
    n_simulations: int
    end_balance_percentiles: Dict[str, float] = field(default_factory=dict)


class Engine:
    """Monte Carlo simulation of annual returns on a fixed contribution plan."""

    def __init__(
        self,
        initial_amount: float,
        monthly_contribution: float,
        years: int,
        profile: Union[RiskProfile, RiskTolerance],
        rng: Optional[np.random.Generator] = None,
        sampler: Union[ReturnSampler, str, None] = None,
        n_simulations: int = DEFAULT_SIMULATIONS,
    ):
        """
        Initialize the Monte Carlo engine.

        Args:
            initial_amount: Starting balance of every path
            monthly_contribution: Deposited as monthly_contribution * 12 each year
            years: Number of annual steps per path
            profile: Risk profile, or a risk tolerance to look one up
            rng: Random source; pass a seeded Generator for reproducible runs
            sampler: Return sampler or its registered name
            n_simulations: Number of paths
        """
        if n_simulations < 1:
            raise ValueError("n_simulations must be >= 1")
        if not isinstance(profile, RiskProfile):
            profile = risk_profile(profile)
        if sampler is None or isinstance(sampler, str):
            sampler = get_sampler(sampler or DEFAULT_RETURN_SAMPLER)

        self.initial_amount = initial_amount
        self.annual_contribution = monthly_contribution * 12.0
        self.years = years
        self.profile = profile
        self.rng = rng if rng is not None else np.random.default_rng(MONTE_CARLO_SEED)
        self.sampler = sampler
        self.n_simulations = n_simulations

    def _simulate_batch(self, n_paths: int) -> np.ndarray:
        """Terminal balances for n_paths independent paths."""
        returns = self.sampler(
            self.profile.mean_return,
            self.profile.volatility,
            self.rng,
            (self.years, n_paths),
        )
        balances = np.full(n_paths, self.initial_amount, dtype=float)
        for year_returns in returns:
            balances = balances * (1.0 + year_returns) + self.annual_contribution
        return balances

    def run(
        self,
        target_amount: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> MonteCarloResult:
        """
        Simulate all paths and count those ending at or above target_amount.

        With no target every path counts as a success.

        Raises:
            SimulationCancelled: cancel_event was set between batches
        """
        end_batches: List[np.ndarray] = []
        done = 0
        while done < self.n_simulations:
            if cancel_event is not None and cancel_event.is_set():
                raise SimulationCancelled(done, self.n_simulations)
            batch = min(CHUNK_SIZE, self.n_simulations - done)
            end_batches.append(self._simulate_batch(batch))
            done += batch

        end_balances = np.concatenate(end_batches)
        if target_amount is None:
            successes = len(end_balances)
        else:
            successes = int((end_balances >= target_amount).sum())

        result = MonteCarloResult(
            success_probability=100.0 * successes / self.n_simulations,
            n_simulations=self.n_simulations,
            end_balance_percentiles={
                "p20": float(np.percentile(end_balances, 20)),
                "p50": float(np.percentile(end_balances, 50)),
                "p80": float(np.percentile(end_balances, 80)),
            },
        )
        logger.debug(
            "monte carlo: %d paths, %d years, target=%s, success=%.1f%%",
            self.n_simulations, self.years, target_amount, result.success_probability,
        )
        return result


def estimate_success_probability(
    initial_amount: float,
    monthly_contribution: float,
    years: int,
    profile: Union[RiskProfile, RiskTolerance],
    target_amount: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
    sampler: Union[ReturnSampler, str, None] = None,
    n_simulations: int = DEFAULT_SIMULATIONS,
    cancel_event: Optional[threading.Event] = None,
) -> float:
    """Success probability in percent for one plan and target."""
    engine = Engine(
        initial_amount,
        monthly_contribution,
        years,
        profile,
        rng=rng,
        sampler=sampler,
        n_simulations=n_simulations,
    )
    return engine.run(target_amount, cancel_event=cancel_event).success_probability
