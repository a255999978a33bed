"""SimPy model layer: daily queue process."""

from wlsim.model.processes import run_simulation

__all__ = [
    "run_simulation",
]
