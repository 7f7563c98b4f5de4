"""
Annual return samplers for the Monte Carlo engine.

Every sampler has the signature sampler(mean, volatility, rng, size) and
returns an array of annual returns (decimal) of the requested shape.
"""

from typing import Callable, Dict, Tuple, Union

import numpy as np

Size = Union[int, Tuple[int, ...]]
ReturnSampler = Callable[[float, float, np.random.Generator, Size], np.ndarray]


def uniform_perturbation(
    mean: float, volatility: float, rng: np.random.Generator, size: Size
) -> np.ndarray:
    """
    mean + (U - 0.5) * 2 * volatility with U ~ Uniform[0, 1).

    Stands in for a normal draw: bounded to mean +/- volatility, with a
    standard deviation of volatility / sqrt(3).
    """
    u = rng.random(size)
    return mean + (u - 0.5) * 2.0 * volatility


def gaussian(
    mean: float, volatility: float, rng: np.random.Generator, size: Size
) -> np.ndarray:
    """Normally distributed annual returns."""
    return rng.normal(loc=mean, scale=volatility, size=size)


SAMPLERS: Dict[str, ReturnSampler] = {
    "uniform": uniform_perturbation,
    "gaussian": gaussian,
}


def get_sampler(name: str) -> ReturnSampler:
    """Look up a sampler by name ("uniform" or "gaussian")."""
    try:
        return SAMPLERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown return sampler {name!r}; expected one of {sorted(SAMPLERS)}"
        ) from None
