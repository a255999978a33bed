"""Unit tests for cost modelling module."""

import pytest

from wlsim.core.scenario import SimulationParameters
from wlsim.results.costs import (
    CURRENCY_SYMBOLS,
    CostConfig,
    ScenarioCost,
    calculate_scenario_cost,
    cost_per_week_of_median_reduction,
    extra_daily_slots,
    format_currency,
    incremental_annual_cost,
    incremental_wte,
)


class TestCostConfig:
    """Tests for CostConfig dataclass."""

    def test_defaults(self):
        config = CostConfig()

        assert config.slots_per_wte == 8.0
        assert config.annual_cost_per_wte == 60000.0
        assert config.currency == "GBP"

    def test_currency_symbol(self):
        assert CostConfig().get_currency_symbol() == "£"
        assert CostConfig(currency="USD").get_currency_symbol() == "$"
        assert CostConfig(currency="CHF").get_currency_symbol() == "CHF"
        assert CURRENCY_SYMBOLS["EUR"] == "€"

    @pytest.mark.parametrize("slots", [0, -2.0])
    def test_rejects_non_positive_slots(self, slots):
        with pytest.raises(ValueError):
            CostConfig(slots_per_wte=slots)

    def test_rejects_negative_cost(self):
        with pytest.raises(ValueError):
            CostConfig(annual_cost_per_wte=-1)


class TestIncrementalCost:
    """Extra slots -> WTE -> annual cost."""

    def test_extra_slots(self):
        base = SimulationParameters(capacity_per_day=16)

        assert extra_daily_slots(base, base.with_changes(capacity_per_day=18)) == 2
        assert extra_daily_slots(base, base.with_changes(capacity_per_day=18.9)) == 2

    def test_fewer_slots_cost_nothing(self):
        base = SimulationParameters(capacity_per_day=16)

        assert extra_daily_slots(base, base.with_changes(capacity_per_day=12)) == 0

    def test_wte(self):
        assert incremental_wte(2, CostConfig(slots_per_wte=8)) == 0.25
        assert incremental_wte(0, CostConfig()) == 0.0

    def test_annual_cost(self):
        base = SimulationParameters(capacity_per_day=16)
        config = CostConfig(slots_per_wte=8, annual_cost_per_wte=60000)

        cost = incremental_annual_cost(base, base.with_changes(capacity_per_day=18), config)
        assert cost == pytest.approx(15000.0)


class TestCostPerWeek:
    """Cost per week of median wait reduction."""

    def test_cost_per_week(self):
        """14 days saved is two weeks."""
        assert cost_per_week_of_median_reduction(20, 6, 15000.0) == pytest.approx(7500.0)

    def test_no_reduction_is_none(self):
        assert cost_per_week_of_median_reduction(20, 20, 15000.0) is None
        assert cost_per_week_of_median_reduction(6, 20, 15000.0) is None

    def test_undefined_median_is_none(self):
        assert cost_per_week_of_median_reduction(None, 6, 15000.0) is None
        assert cost_per_week_of_median_reduction(20, None, 15000.0) is None

    def test_free_improvement(self):
        """Zero extra cost with a reduction costs nothing per week."""
        assert cost_per_week_of_median_reduction(20, 19, 0.0) == 0.0


class TestCalculateScenarioCost:
    """All figures together."""

    def test_full_breakdown(self):
        base = SimulationParameters(capacity_per_day=16)
        scenario = base.with_changes(capacity_per_day=18)

        cost = calculate_scenario_cost(base, scenario, 20, 6, CostConfig())

        assert isinstance(cost, ScenarioCost)
        assert cost.extra_slots == 2
        assert cost.extra_wte == 0.25
        assert cost.annual_cost == pytest.approx(15000.0)
        assert cost.median_reduction_weeks == pytest.approx(2.0)
        assert cost.cost_per_week_reduction == pytest.approx(7500.0)
        assert cost.to_dict()["currency"] == "GBP"

    def test_baseline_against_itself(self):
        base = SimulationParameters()

        cost = calculate_scenario_cost(base, base, 20, 20, CostConfig())

        assert cost.annual_cost == 0.0
        assert cost.median_reduction_weeks == 0.0
        assert cost.cost_per_week_reduction is None


class TestFormatCurrency:
    """Tests for currency formatting."""

    def test_whole_numbers(self):
        assert format_currency(1234567) == "£1,234,567"

    def test_decimals(self):
        assert format_currency(1234.5, symbol="$", decimals=2) == "$1,234.50"

    def test_none_is_placeholder(self):
        assert format_currency(None) == "—"
