"""Results and metrics layer: collection, statistics, histogram, costs."""

from wlsim.results.collector import (
    DayRecord,
    ResultsCollector,
    SimulationResult,
    WaitMetrics,
    fraction_within,
    quantile,
)
from wlsim.results.costs import (
    CostConfig,
    ScenarioCost,
    calculate_scenario_cost,
    cost_per_week_of_median_reduction,
    format_currency,
    incremental_annual_cost,
    incremental_wte,
)
from wlsim.results.formatting import PLACEHOLDER, fmt_num, fmt_pct, metric_items
from wlsim.results.histogram import WaitHistogram, build_histogram

__all__ = [
    "DayRecord",
    "ResultsCollector",
    "SimulationResult",
    "WaitMetrics",
    "fraction_within",
    "quantile",
    "CostConfig",
    "ScenarioCost",
    "calculate_scenario_cost",
    "cost_per_week_of_median_reduction",
    "format_currency",
    "incremental_annual_cost",
    "incremental_wte",
    "PLACEHOLDER",
    "fmt_num",
    "fmt_pct",
    "metric_items",
    "WaitHistogram",
    "build_histogram",
]
