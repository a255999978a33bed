"""Event logging during simulation runs and wait-time metrics."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from wlsim.core.scenario import SimulationParameters


# Conventional reporting points (2, 4 and 6 weeks)
REPORTING_THRESHOLDS = (14, 28, 42)


def quantile(sorted_waits: Sequence[int], q: float) -> Optional[int]:
    """Nearest-rank quantile of an ascending sequence.

    Picks ``sorted_waits[floor((n - 1) * q)]``; no interpolation.

    Returns:
        The selected wait, or None if the sequence is empty.
    """
    n = len(sorted_waits)
    if n == 0:
        return None
    idx = int(np.floor((n - 1) * q))
    return int(sorted_waits[idx])


def fraction_within(waits: Sequence[int], threshold: float) -> Optional[float]:
    """Fraction of waits less than or equal to threshold, or None if empty."""
    if len(waits) == 0:
        return None
    return float(np.mean(np.asarray(waits) <= threshold))


@dataclass(frozen=True)
class DayRecord:
    """Flow counts for one simulated day.

    Attributes:
        day: Day index (0-based).
        referrals: New Poisson referrals.
        rebook_returns: Rebooked people re-entering the queue today.
        capacity: Slots offered.
        served: Slots used (attended plus DNA).
        dna: Appointments not attended.
        rebooked: DNAs scheduled to return.
        dropped_rebookings: Rebookings whose return day fell outside the
            pre-allocated horizon window.
        seen: Attendances recorded as waits (post warm-up only).
        queue_size: Queue length after arrivals and service.
    """
    day: int
    referrals: int
    rebook_returns: int
    capacity: int
    served: int
    dna: int
    rebooked: int
    dropped_rebookings: int
    seen: int
    queue_size: int

    @property
    def arrivals(self) -> int:
        return self.referrals + self.rebook_returns


@dataclass(frozen=True)
class WaitMetrics:
    """Summary statistics for a run.

    Undefined statistics (nobody seen after warm-up) are None.
    """
    utilisation: float
    mean_wait: Optional[float]
    median_wait: Optional[int]
    p90_wait: Optional[int]
    within_14: Optional[float]
    within_28: Optional[float]
    within_42: Optional[float]
    n_seen: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "utilisation": self.utilisation,
            "mean_wait": self.mean_wait,
            "median_wait": self.median_wait,
            "p90_wait": self.p90_wait,
            "within_14": self.within_14,
            "within_28": self.within_28,
            "within_42": self.within_42,
            "n_seen": self.n_seen,
        }


@dataclass
class SimulationResult:
    """Output of a single run.

    Attributes:
        params: Parameters the run used.
        queue_sizes: Queue length at the end of each day.
        waits: Waits (days) of everyone seen after warm-up, ascending.
        metrics: Derived summary statistics.
        daily: Per-day flow trace.
    """
    params: SimulationParameters
    queue_sizes: List[int]
    waits: List[int]
    metrics: WaitMetrics
    daily: List[DayRecord] = field(default_factory=list)

    def quantile(self, q: float) -> Optional[int]:
        return quantile(self.waits, q)

    def within(self, threshold: float) -> Optional[float]:
        return fraction_within(self.waits, threshold)

    def to_dataframe(self) -> pd.DataFrame:
        """Daily trace as a DataFrame indexed by day."""
        columns = [
            "day", "referrals", "rebook_returns", "capacity", "served",
            "dna", "rebooked", "dropped_rebookings", "seen", "queue_size",
        ]
        records = [{col: getattr(r, col) for col in columns} for r in self.daily]
        return pd.DataFrame.from_records(records, columns=columns).set_index("day")


@dataclass
class ResultsCollector:
    """Collect flow counts and waits during a run.

    The collector accumulates per-day counts while the day loop runs and
    derives the summary metrics once the horizon is complete. Slot counters
    cover the whole horizon, warm-up included; waits only include people
    seen on or after the warm-up day.

    Attributes:
        warmup: First service day whose attendances are recorded.
        total_slots: Slots offered over the horizon.
        used_slots: Slots used over the horizon.
        queue_sizes: End-of-day queue lengths.
        waits: Recorded waits in recording order.
        daily: Completed day records.
    """

    warmup: int = 0
    total_slots: int = 0
    used_slots: int = 0
    queue_sizes: List[int] = field(default_factory=list)
    waits: List[int] = field(default_factory=list)
    daily: List[DayRecord] = field(default_factory=list)

    _day: Dict[str, int] = field(default_factory=dict, init=False, repr=False)

    def start_day(self, day: int, referrals: int, rebook_returns: int, capacity: int) -> None:
        """Open a day record with its arrivals and offered capacity."""
        self.total_slots += capacity
        self._day = {
            "day": day,
            "referrals": referrals,
            "rebook_returns": rebook_returns,
            "capacity": capacity,
            "served": 0,
            "dna": 0,
            "rebooked": 0,
            "dropped_rebookings": 0,
            "seen": 0,
        }

    def record_dna(self, rebooked: bool, dropped: bool = False) -> None:
        """Record a used slot where the person did not attend."""
        self.used_slots += 1
        self._day["served"] += 1
        self._day["dna"] += 1
        if rebooked:
            self._day["rebooked"] += 1
        if dropped:
            self._day["dropped_rebookings"] += 1

    def record_attendance(self, day: int, entered_day: int) -> None:
        """Record a used slot where the person attended.

        Args:
            day: Service day.
            entered_day: Day the person joined the queue.
        """
        self.used_slots += 1
        self._day["served"] += 1
        if day >= self.warmup:
            self.waits.append(day - entered_day)
            self._day["seen"] += 1

    def end_day(self, queue_size: int) -> None:
        """Close the current day with its post-service queue length."""
        self.queue_sizes.append(queue_size)
        self.daily.append(DayRecord(queue_size=queue_size, **self._day))
        self._day = {}

    def compute_metrics(self) -> WaitMetrics:
        """Sort recorded waits and derive summary statistics."""
        self.waits.sort()
        waits = self.waits
        n = len(waits)

        utilisation = self.used_slots / self.total_slots if self.total_slots > 0 else 0.0
        mean_wait = float(np.mean(waits)) if n else None
        within = {t: fraction_within(waits, t) for t in REPORTING_THRESHOLDS}

        return WaitMetrics(
            utilisation=utilisation,
            mean_wait=mean_wait,
            median_wait=quantile(waits, 0.5),
            p90_wait=quantile(waits, 0.9),
            within_14=within[14],
            within_28=within[28],
            within_42=within[42],
            n_seen=n,
        )

    def to_result(self, params: SimulationParameters) -> SimulationResult:
        """Finalise the run into a SimulationResult."""
        metrics = self.compute_metrics()
        return SimulationResult(
            params=params,
            queue_sizes=list(self.queue_sizes),
            waits=list(self.waits),
            metrics=metrics,
            daily=list(self.daily),
        )
