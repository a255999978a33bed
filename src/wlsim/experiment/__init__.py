"""Experimentation layer: named scenario comparison and export."""

from wlsim.experiment.comparison import ComparisonResult, run_scenario_comparison

__all__ = [
    "ComparisonResult",
    "run_scenario_comparison",
]
