"""Core foundation layer: scenario configuration and random source."""

from wlsim.core.scenario import (
    EXAMPLE_SCENARIOS,
    NamedScenario,
    ParameterError,
    SimulationParameters,
)
from wlsim.core.rng import Mulberry32, sample_poisson

__all__ = [
    "SimulationParameters",
    "NamedScenario",
    "ParameterError",
    "EXAMPLE_SCENARIOS",
    "Mulberry32",
    "sample_poisson",
]
