"""
wlsim - Waitlist Simulator.

A seeded, day-stepped queue simulation of a service waitlist with
non-attendance and rebooking, built with SimPy and Streamlit.
"""

__version__ = "0.1.0"

from wlsim.core.scenario import SimulationParameters
from wlsim.model.processes import run_simulation

__all__ = ["SimulationParameters", "run_simulation", "__version__"]
