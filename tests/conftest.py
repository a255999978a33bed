"""Pytest fixtures for waitlist simulator tests."""

import pytest

from wlsim.core.scenario import SimulationParameters


@pytest.fixture
def baseline_params() -> SimulationParameters:
    """Baseline example scenario (180 days, 14 day warm-up)."""
    return SimulationParameters(
        arrival_rate=18,
        capacity_per_day=16,
        dna_rate=12,
        rebook_rate=70,
        rebook_delay=7,
        days=180,
        warmup=14,
        seed=42,
    )


@pytest.fixture
def short_params() -> SimulationParameters:
    """Short, lightly loaded run for quick tests."""
    return SimulationParameters(
        arrival_rate=2,
        capacity_per_day=3,
        dna_rate=20,
        rebook_rate=50,
        rebook_delay=3,
        days=10,
        warmup=0,
        seed=1,
    )
