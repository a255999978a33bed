"""Side-by-side comparison of a fixed set of named scenarios.

Each scenario is run once with its own seed; scenarios sharing seed and
horizon give a like-for-like comparison. Costs of extra capacity are
reported relative to a baseline scenario.
"""

import csv
import io
import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

import pandas as pd

from wlsim.core.scenario import NamedScenario, SimulationParameters
from wlsim.model.processes import run_simulation
from wlsim.results.collector import SimulationResult
from wlsim.results.costs import CostConfig, calculate_scenario_cost

logger = logging.getLogger(__name__)

ScenarioInput = Union[Mapping[str, SimulationParameters], List[NamedScenario]]

# Table columns that hold None when a statistic is undefined
OPTIONAL_COLUMNS = ("median_wait", "p90_wait", "within_28", "cost_per_week_reduction")

# Columns written by ComparisonResult.to_csv, in order
EXPORT_COLUMNS = {
    "scenario": "Scenario",
    "utilisation": "Utilisation",
    "median_wait": "Median wait (days)",
    "p90_wait": "P90 wait (days)",
    "within_28": "Seen within 4 weeks",
    "cost_per_week_reduction": "Cost per week of median wait reduction",
}


@dataclass
class ComparisonResult:
    """Result of running a set of scenarios.

    Attributes:
        baseline_name: Scenario the costs are measured against.
        results: Simulation result per scenario name, in input order.
        table: DataFrame with one row per scenario.
        cost_config: Cost configuration used for the cost columns.
    """
    baseline_name: str
    results: Dict[str, SimulationResult]
    table: pd.DataFrame
    cost_config: CostConfig

    def to_csv(self, path: Optional[Union[str, Path]] = None) -> str:
        """Export the comparison as delimited text.

        Scenario names are quoted; undefined values are written as empty
        fields.

        Args:
            path: Optional file to write.

        Returns:
            The CSV text.
        """
        export = self.table[list(EXPORT_COLUMNS)].rename(columns=EXPORT_COLUMNS)
        buffer = io.StringIO()
        export.to_csv(buffer, index=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
        text = buffer.getvalue()
        if path is not None:
            Path(path).write_text(text, encoding="utf-8")
            logger.info(f"Exported comparison of {len(export)} scenarios to {path}")
        return text


def _normalise(scenarios: ScenarioInput) -> List[NamedScenario]:
    if isinstance(scenarios, Mapping):
        return [NamedScenario(name, params) for name, params in scenarios.items()]
    return list(scenarios)


def run_scenario_comparison(
    scenarios: ScenarioInput,
    cost_config: Optional[CostConfig] = None,
    baseline: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> ComparisonResult:
    """Run multiple scenarios for comparison.

    Args:
        scenarios: Mapping of scenario name to parameters, or a list of
            NamedScenario. Order is preserved in the table.
        cost_config: Cost configuration (defaults to CostConfig()).
        baseline: Name of the baseline scenario. Defaults to the first.
        max_workers: If given, run scenarios in a process pool of this size.
            Results are identical to a sequential run.

    Returns:
        ComparisonResult with per-scenario results and the comparison table.

    Raises:
        ValueError: If no scenarios are given, names repeat, or the baseline
            name is unknown.
    """
    named = _normalise(scenarios)
    if not named:
        raise ValueError("At least one scenario is required")
    names = [s.name for s in named]
    if len(set(names)) != len(names):
        raise ValueError("Scenario names must be unique")
    baseline_name = baseline if baseline is not None else names[0]
    if baseline_name not in names:
        raise ValueError(f"Unknown baseline scenario: {baseline_name}")
    cost_config = cost_config or CostConfig()

    logger.info(f"Comparing {len(named)} scenarios against '{baseline_name}'")

    param_list = [s.params for s in named]
    if max_workers is not None and max_workers > 1:
        with ProcessPoolExecutor(max_workers=max_workers) as pool:
            outputs = list(pool.map(run_simulation, param_list))
    else:
        outputs = [run_simulation(p) for p in param_list]

    results = dict(zip(names, outputs))
    base = results[baseline_name]

    rows = []
    for name, result in results.items():
        m = result.metrics
        cost = calculate_scenario_cost(
            base.params,
            result.params,
            base.metrics.median_wait,
            m.median_wait,
            cost_config,
        )
        rows.append({
            "scenario": name,
            "utilisation": m.utilisation,
            "median_wait": m.median_wait,
            "p90_wait": m.p90_wait,
            "within_28": m.within_28,
            "n_seen": m.n_seen,
            "extra_slots": cost.extra_slots,
            "extra_wte": cost.extra_wte,
            "annual_cost": cost.annual_cost,
            "cost_per_week_reduction": cost.cost_per_week_reduction,
        })

    table = pd.DataFrame(rows)
    # object dtype keeps None (not NaN) and leaves integer waits as integers
    for col in OPTIONAL_COLUMNS:
        table[col] = pd.Series([row[col] for row in rows], dtype=object)

    return ComparisonResult(
        baseline_name=baseline_name,
        results=results,
        table=table,
        cost_config=cost_config,
    )
