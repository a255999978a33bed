"""Scenario configuration dataclass and raw input parsing."""

import math
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Union


class ParameterError(ValueError):
    """Raised when raw form input cannot be turned into parameters."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(f"{field_name}: {message}")


# Form input ids mapped to dataclass fields
_INPUT_ALIASES: Dict[str, str] = {
    "arrivalRate": "arrival_rate",
    "capacityPerDay": "capacity_per_day",
    "dnaRate": "dna_rate",
    "rebookRate": "rebook_rate",
    "rebookDelay": "rebook_delay",
    "days": "days",
    "warmup": "warmup",
    "seed": "seed",
}

_FLOAT_FIELDS = ("arrival_rate", "dna_rate", "rebook_rate")
_INT_FIELDS = ("capacity_per_day", "rebook_delay", "days", "warmup", "seed")


@dataclass(frozen=True)
class SimulationParameters:
    """Configuration for one waitlist simulation run.

    Defaults reproduce the baseline service: 18 referrals/day against 16
    slots/day, 12% DNA, 70% of DNAs rebooked a week later, over a 180 day
    horizon with a two week warm-up.

    Attributes:
        arrival_rate: Mean daily referrals (Poisson mean).
        capacity_per_day: Appointment slots per day. Truncated and floored
            at zero when used.
        dna_rate: Percentage (0-100) of appointments not attended.
        rebook_rate: Percentage (0-100) of DNAs rebooked.
        rebook_delay: Days until a rebooked person rejoins the queue.
        days: Simulation horizon in days.
        warmup: Initial days excluded from wait statistics.
        seed: Random seed for reproducibility.
    """

    arrival_rate: float = 18.0
    capacity_per_day: float = 16
    dna_rate: float = 12.0
    rebook_rate: float = 70.0
    rebook_delay: float = 7
    days: int = 180
    warmup: int = 14
    seed: int = 42

    @property
    def effective_capacity(self) -> int:
        """Slots actually offered each day."""
        return max(0, math.floor(self.capacity_per_day))

    @property
    def effective_rebook_delay(self) -> int:
        """Delay in whole days applied to rebooked DNAs."""
        return max(0, math.floor(self.rebook_delay))

    @property
    def dna_probability(self) -> float:
        return self.dna_rate / 100

    @property
    def rebook_probability(self) -> float:
        return self.rebook_rate / 100

    def clone_with_seed(self, new_seed: int) -> "SimulationParameters":
        """Create a copy of these parameters with a different seed."""
        return replace(self, seed=new_seed)

    def with_changes(self, **changes: Any) -> "SimulationParameters":
        """Create a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_inputs(
        cls, values: Mapping[str, Union[str, float, int, None]]
    ) -> "SimulationParameters":
        """Parse raw form values into parameters.

        Accepts either field names or the camelCase form ids. Rates are
        parsed as floats; counts, capacity, delay and seed as integers
        (decimal strings are truncated toward zero). Fields not present
        keep their defaults.

        Args:
            values: Mapping of field name (or form id) to raw value.

        Returns:
            Parsed SimulationParameters.

        Raises:
            ParameterError: A value is blank, non-numeric or non-finite,
                the horizon is not positive, or the warm-up is negative.
        """
        parsed: Dict[str, Any] = {}
        for key, raw in values.items():
            name = _INPUT_ALIASES.get(key, key)
            if name in _FLOAT_FIELDS:
                parsed[name] = _parse_float(name, raw)
            elif name in _INT_FIELDS:
                parsed[name] = _parse_int(name, raw)
            else:
                raise ParameterError(key, "unknown parameter")

        params = cls(**parsed)
        if params.days <= 0:
            raise ParameterError("days", "horizon must be at least one day")
        if params.warmup < 0:
            raise ParameterError("warmup", "warm-up cannot be negative")
        return params


def _parse_float(name: str, raw: Union[str, float, int, None]) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ParameterError(name, "a value is required")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ParameterError(name, f"{raw!r} is not a number") from None
    if not math.isfinite(value):
        raise ParameterError(name, "value must be finite")
    return value


def _parse_int(name: str, raw: Union[str, float, int, None]) -> int:
    # Whole numbers are parsed exactly; only decimals go through float
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError:
            pass
    return int(_parse_float(name, raw))


@dataclass(frozen=True)
class NamedScenario:
    """A labelled parameter set for scenario comparison."""
    name: str
    params: SimulationParameters


# Example scenarios share seed and horizon so comparisons are like-for-like
EXAMPLE_SCENARIOS: Dict[str, NamedScenario] = {
    "baseline": NamedScenario("Baseline", SimulationParameters()),
    "add_capacity": NamedScenario(
        "+2 slots/day capacity", SimulationParameters(capacity_per_day=18)
    ),
    "reduce_dna": NamedScenario(
        "Reduce DNA (12% → 7%)", SimulationParameters(dna_rate=7.0)
    ),
}
