"""Waitlist Simulator - single run page."""

import random

import streamlit as st

from wlsim.core.scenario import EXAMPLE_SCENARIOS, ParameterError, SimulationParameters
from wlsim.model.processes import run_simulation
from wlsim.results.formatting import metric_items

from components.charts import queue_size_figure, session_chart_slot, wait_histogram_figure

st.set_page_config(page_title="Waitlist Simulator", layout="wide")

st.title("Waitlist Simulator")

st.markdown("""
Daily referrals join a first-come-first-served waitlist. A fixed number of
appointment slots is offered each day; some people **do not attend (DNA)**
and a share of those are **rebooked** after a delay.

Waits are measured from joining the queue to being seen. Days before the
**warm-up** ends still appear on the queue chart but are left out of the
wait statistics.
""")

# Form ids and labels, in display order
FIELDS = [
    ("arrival_rate", "Referrals per day (mean)"),
    ("capacity_per_day", "Appointment slots per day"),
    ("dna_rate", "DNA rate (%)"),
    ("rebook_rate", "Rebook rate for DNAs (%)"),
    ("rebook_delay", "Rebook delay (days)"),
    ("days", "Days to simulate"),
    ("warmup", "Warm-up (days)"),
    ("seed", "Random seed"),
]


def load_scenario(params: SimulationParameters) -> None:
    for name, _ in FIELDS:
        st.session_state[f"input_{name}"] = str(getattr(params, name))


if "input_arrival_rate" not in st.session_state:
    load_scenario(SimulationParameters())

# ===== Example scenarios =====
st.subheader("Example scenarios")
btn_cols = st.columns(len(EXAMPLE_SCENARIOS) + 1)
for col, scenario in zip(btn_cols, EXAMPLE_SCENARIOS.values()):
    with col:
        if st.button(scenario.name, use_container_width=True):
            load_scenario(scenario.params)
with btn_cols[-1]:
    if st.button("Random example", use_container_width=True):
        load_scenario(random.choice(list(EXAMPLE_SCENARIOS.values())).params)

# ===== Parameters =====
with st.sidebar:
    st.header("Parameters")
    raw = {name: st.text_input(label, key=f"input_{name}") for name, label in FIELDS}

try:
    params = SimulationParameters.from_inputs(raw)
except ParameterError as exc:
    st.error(f"Invalid input - {exc}")
    st.stop()

result = run_simulation(params)
st.session_state.result = result

# ===== Metrics =====
st.header("Results")
items = metric_items(result.metrics)
for row_start in range(0, len(items), 4):
    cols = st.columns(4)
    for col, (label, value) in zip(cols, items[row_start:row_start + 4]):
        with col:
            st.metric(label, value)

# ===== Charts =====
chart_col1, chart_col2 = st.columns(2)

with chart_col1:
    st.subheader("Queue size by day")
    queue_slot = session_chart_slot(st.session_state, "queue_chart", st.empty)
    queue_slot.replace(queue_size_figure(result))

with chart_col2:
    st.subheader("Wait time distribution")
    wait_slot = session_chart_slot(st.session_state, "wait_chart", st.empty)
    wait_slot.replace(wait_histogram_figure(result))

with st.expander("Daily flow"):
    st.dataframe(result.to_dataframe(), use_container_width=True)

st.info("⚖️ Use the **Compare** page to run the example scenarios side by side.")
