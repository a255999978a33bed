"""Plotly chart builders for simulation results.

Figures are built from a SimulationResult only, so they can be tested
without a running Streamlit session.
"""

from typing import Any, Callable, MutableMapping, Optional

import plotly.graph_objects as go

from wlsim.results.collector import SimulationResult
from wlsim.results.histogram import build_histogram


def queue_size_figure(result: SimulationResult) -> go.Figure:
    """Line chart of end-of-day queue size, days numbered from 1."""
    days = list(range(1, len(result.queue_sizes) + 1))

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=days,
        y=result.queue_sizes,
        mode="lines",
        name="Queue size",
        line=dict(shape="spline", smoothing=0.2),
    ))
    if result.params.warmup > 0:
        fig.add_vrect(
            x0=0.5,
            x1=min(result.params.warmup, len(days)) + 0.5,
            fillcolor="grey",
            opacity=0.15,
            line_width=0,
            annotation_text="Warm-up",
        )
    fig.update_layout(
        xaxis_title="Day",
        yaxis_title="People waiting",
        yaxis_rangemode="tozero",
        showlegend=True,
        margin=dict(l=20, r=20, t=30, b=20),
    )
    return fig


def wait_histogram_figure(
    result: SimulationResult, bin_size: int = 3, max_bins: int = 30
) -> go.Figure:
    """Bar chart of binned waits for people seen after warm-up."""
    hist = build_histogram(result.waits, bin_size=bin_size, max_bins=max_bins)

    fig = go.Figure()
    fig.add_trace(go.Bar(x=hist.labels, y=hist.counts, name="Count"))
    fig.update_layout(
        xaxis_title="Wait time (days, binned)",
        yaxis_title="Number of people seen",
        yaxis_rangemode="tozero",
        showlegend=True,
        margin=dict(l=20, r=20, t=30, b=20),
    )
    return fig


class ChartSlot:
    """A rendered chart bound to one container.

    Re-running a simulation replaces the chart: the previous figure is torn
    down (container cleared) before the new one is drawn.

    Attributes:
        container: Streamlit placeholder (anything with ``empty()`` and
            ``plotly_chart()``).
        figure: Figure currently drawn, or None.
    """

    def __init__(self, container: Any) -> None:
        self.container = container
        self.figure: Optional[go.Figure] = None

    def replace(self, figure: go.Figure) -> None:
        """Tear down the current chart and draw a new one."""
        if self.figure is not None:
            self.container.empty()
        self.figure = figure
        self.container.plotly_chart(figure, use_container_width=True)

    def clear(self) -> None:
        if self.figure is not None:
            self.container.empty()
            self.figure = None


def session_chart_slot(
    state: MutableMapping[str, Any], key: str, make_container: Callable[[], Any]
) -> ChartSlot:
    """Return the chart slot kept under ``key``, creating it on first use.

    The slot and its container survive reruns, so a later ``replace`` tears
    down the chart drawn by an earlier run.
    """
    slot = state.get(key)
    if slot is None:
        slot = ChartSlot(make_container())
        state[key] = slot
    return slot
