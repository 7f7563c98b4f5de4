"""
Application configuration and constants.
"""

import logging
import os
from typing import Dict, List, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# API configuration
API_VERSION = "1.0.0"
API_TITLE = "Investment Projection API"
API_DESCRIPTION = "Compound growth, goal solving and Monte Carlo success estimates for investment planning"

# CORS configuration
CORS_ORIGINS: List[str] = ["*"]  # In production, replace with specific origins
CORS_CREDENTIALS = True
CORS_METHODS = ["*"]
CORS_HEADERS = ["*"]

# Validation bounds (percent values as entered by the user)
MIN_ANNUAL_RATE = -50.0
MAX_ANNUAL_RATE = 50.0
MIN_PERIOD_YEARS = 1
MAX_PERIOD_YEARS = 100
MAX_TAX_RATE = 100.0

# Simulation defaults
DEFAULT_SIMULATIONS = 1000
CHUNK_SIZE = 250  # simulations per batch between cancellation checks

# Risk tolerance -> (mean annual return, annual volatility)
RISK_PROFILES: Dict[str, Dict[str, float]] = {
    "conservative": {"mean_return": 0.04, "volatility": 0.05},
    "moderate": {"mean_return": 0.07, "volatility": 0.12},
    "aggressive": {"mean_return": 0.10, "volatility": 0.18},
}

# Return sampler selection
# Options: "uniform" (reference perturbation), "gaussian"
DEFAULT_RETURN_SAMPLER = os.getenv("RETURN_SAMPLER", "uniform")

# Optional fixed seed for reproducible production runs
_seed = os.getenv("MONTE_CARLO_SEED")
MONTE_CARLO_SEED: Optional[int] = int(_seed) if _seed else None

# Retirement and tax heuristics
SAFE_WITHDRAWAL_RATE = 0.04  # 4% rule
TAXABLE_GAINS_FACTOR = 0.15  # long-term capital gains haircut on taxable accounts

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger from LOG_LEVEL / LOG_FORMAT."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
