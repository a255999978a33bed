"""Scenario Comparison Page."""

import pandas as pd
import plotly.express as px
import streamlit as st

from wlsim.core.scenario import EXAMPLE_SCENARIOS
from wlsim.experiment.comparison import run_scenario_comparison
from wlsim.results.costs import CostConfig, format_currency
from wlsim.results.formatting import fmt_num, fmt_pct

st.set_page_config(page_title="Compare - Waitlist Simulator", page_icon="⚖️", layout="wide")

st.title("⚖️ Compare Scenarios")

st.info("""
**What this does**: Runs the example scenarios with the same seed and horizon
for an apples-to-apples comparison.

**Cost figures are illustrative**: extra slots per day are converted to
whole-time-equivalent (WTE) staff and priced per year, then divided by the
weeks of median wait saved.
""")

# ===== Cost settings =====
st.subheader("Cost Settings")
cost_col1, cost_col2 = st.columns(2)

with cost_col1:
    slots_per_wte = st.number_input(
        "Slots per day per WTE", min_value=0.5, max_value=50.0, value=8.0, step=0.5
    )
with cost_col2:
    cost_per_wte = st.number_input(
        "Annual cost per WTE (£)", min_value=0.0, value=60000.0, step=1000.0
    )

cost_config = CostConfig(slots_per_wte=slots_per_wte, annual_cost_per_wte=cost_per_wte)

st.divider()

if st.button("🚀 Run Comparison", type="primary", use_container_width=True):
    with st.spinner("Running scenarios..."):
        st.session_state.compare_results = run_scenario_comparison(
            list(EXAMPLE_SCENARIOS.values()), cost_config=cost_config
        )

comparison = st.session_state.get("compare_results")

if comparison is not None:
    st.header("Scenario comparison")
    st.caption(f"Costs relative to **{comparison.baseline_name}**.")

    symbol = comparison.cost_config.get_currency_symbol()
    table = comparison.table
    display = table.assign(
        utilisation=table["utilisation"].map(fmt_pct),
        median_wait=table["median_wait"].map(lambda x: f"{fmt_num(x, 0)}d"),
        p90_wait=table["p90_wait"].map(lambda x: f"{fmt_num(x, 0)}d"),
        within_28=table["within_28"].map(fmt_pct),
        annual_cost=table["annual_cost"].map(lambda x: format_currency(x, symbol)),
        cost_per_week_reduction=table["cost_per_week_reduction"].map(
            lambda x: format_currency(None if pd.isna(x) else x, symbol)
        ),
    ).rename(columns={
        "scenario": "Scenario",
        "utilisation": "Utilisation",
        "median_wait": "Median wait",
        "p90_wait": "P90 wait",
        "within_28": "Seen ≤ 4 weeks",
        "n_seen": "N seen",
        "extra_slots": "Extra slots/day",
        "extra_wte": "Extra WTE",
        "annual_cost": "Annual cost",
        "cost_per_week_reduction": "Cost per week saved",
    })
    st.dataframe(display, use_container_width=True, hide_index=True)

    fig = px.bar(
        table,
        x="scenario",
        y=["median_wait", "p90_wait"],
        barmode="group",
        labels={"value": "Wait (days)", "scenario": "Scenario", "variable": "Metric"},
    )
    st.plotly_chart(fig, use_container_width=True)

    st.download_button(
        "Download comparison (CSV)",
        data=comparison.to_csv(),
        file_name="scenario_comparison.csv",
        mime="text/csv",
    )
