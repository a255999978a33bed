"""Illustrative staffing cost figures for scenario comparison.

Costs are POST-HOC calculations - they do not change simulation behaviour,
only put an indicative price on a capacity change:

- extra daily slots are converted to whole-time-equivalent (WTE) staff
  using a slots-per-WTE ratio
- WTE are priced with an annual cost per WTE
- the annual cost is divided by the weeks of median wait saved
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from wlsim.core.scenario import SimulationParameters


# Currency symbols for display
CURRENCY_SYMBOLS = {
    "GBP": "£",
    "USD": "$",
    "EUR": "€",
}


@dataclass
class CostConfig:
    """Cost modelling configuration.

    Defaults are placeholders for a clinic-based service. Users should
    adjust to their local context.

    Attributes:
        slots_per_wte: Appointment slots per day one WTE clinician delivers.
        annual_cost_per_wte: Fully loaded annual cost of one WTE.
        currency: "GBP" | "USD" | "EUR".
    """

    slots_per_wte: float = 8.0
    annual_cost_per_wte: float = 60000.0
    currency: str = "GBP"

    def __post_init__(self) -> None:
        if self.slots_per_wte <= 0:
            raise ValueError("slots_per_wte must be positive")
        if self.annual_cost_per_wte < 0:
            raise ValueError("annual_cost_per_wte cannot be negative")

    def get_currency_symbol(self) -> str:
        """Get the currency symbol for display."""
        return CURRENCY_SYMBOLS.get(self.currency, self.currency)


@dataclass
class ScenarioCost:
    """Incremental cost of a scenario relative to a baseline."""

    currency: str
    extra_slots: int = 0
    extra_wte: float = 0.0
    annual_cost: float = 0.0
    median_reduction_weeks: Optional[float] = None
    cost_per_week_reduction: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "currency": self.currency,
            "extra_slots": self.extra_slots,
            "extra_wte": self.extra_wte,
            "annual_cost": self.annual_cost,
            "median_reduction_weeks": self.median_reduction_weeks,
            "cost_per_week_reduction": self.cost_per_week_reduction,
        }


def extra_daily_slots(
    baseline: SimulationParameters, scenario: SimulationParameters
) -> int:
    """Additional slots/day the scenario offers over the baseline (never negative)."""
    return max(0, scenario.effective_capacity - baseline.effective_capacity)


def incremental_wte(extra_slots: float, config: CostConfig) -> float:
    """Convert extra daily slots into WTE staff."""
    return extra_slots / config.slots_per_wte


def incremental_annual_cost(
    baseline: SimulationParameters,
    scenario: SimulationParameters,
    config: CostConfig,
) -> float:
    """Annual staffing cost of the scenario's extra capacity."""
    wte = incremental_wte(extra_daily_slots(baseline, scenario), config)
    return wte * config.annual_cost_per_wte


def cost_per_week_of_median_reduction(
    baseline_median: Optional[float],
    scenario_median: Optional[float],
    annual_cost: float,
) -> Optional[float]:
    """Annual cost per week of median wait saved.

    Args:
        baseline_median: Baseline median wait (days), or None.
        scenario_median: Scenario median wait (days), or None.
        annual_cost: Incremental annual cost of the scenario.

    Returns:
        Cost per week saved, or None if either median is undefined or the
        scenario does not reduce the median wait.
    """
    if baseline_median is None or scenario_median is None:
        return None
    weeks_saved = (baseline_median - scenario_median) / 7
    if weeks_saved <= 0:
        return None
    return annual_cost / weeks_saved


def calculate_scenario_cost(
    baseline: SimulationParameters,
    scenario: SimulationParameters,
    baseline_median: Optional[float],
    scenario_median: Optional[float],
    config: CostConfig,
) -> ScenarioCost:
    """Calculate all cost figures for one scenario against a baseline."""
    extra = extra_daily_slots(baseline, scenario)
    annual = incremental_annual_cost(baseline, scenario, config)

    reduction = None
    if baseline_median is not None and scenario_median is not None:
        reduction = (baseline_median - scenario_median) / 7

    return ScenarioCost(
        currency=config.currency,
        extra_slots=extra,
        extra_wte=incremental_wte(extra, config),
        annual_cost=annual,
        median_reduction_weeks=reduction,
        cost_per_week_reduction=cost_per_week_of_median_reduction(
            baseline_median, scenario_median, annual
        ),
    )


def format_currency(value: Optional[float], symbol: str = "£", decimals: int = 0) -> str:
    """Format a value as currency string.

    Args:
        value: The monetary value, or None.
        symbol: Currency symbol (default £).
        decimals: Decimal places (default 0 for whole numbers).

    Returns:
        Formatted currency string (e.g., "£1,234"), or the placeholder
        for None.
    """
    if value is None:
        return "—"
    if decimals == 0:
        return f"{symbol}{value:,.0f}"
    return f"{symbol}{value:,.{decimals}f}"
