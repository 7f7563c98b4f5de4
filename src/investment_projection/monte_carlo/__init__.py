from .engine import Engine, MonteCarloResult, estimate_success_probability, risk_profile
from .sampling import SAMPLERS, ReturnSampler, gaussian, get_sampler, uniform_perturbation

__all__ = [
    "Engine",
    "MonteCarloResult",
    "estimate_success_probability",
    "risk_profile",
    "SAMPLERS",
    "ReturnSampler",
    "gaussian",
    "get_sampler",
    "uniform_perturbation",
]
