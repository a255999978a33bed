"""SimPy process logic for the daily waitlist cycle."""

import logging
import math
from collections import deque
from typing import Deque, Generator, List

import simpy

from wlsim.core.rng import Mulberry32, sample_poisson
from wlsim.core.scenario import SimulationParameters
from wlsim.results.collector import ResultsCollector, SimulationResult

logger = logging.getLogger(__name__)


def create_future_arrivals(params: SimulationParameters) -> List[int]:
    """Allocate the rebooking return counts for the horizon.

    Sized ``days + rebook_delay + 2`` so every return day reachable with a
    non-negative delay has a slot. Never grown during the run.
    """
    return [0] * max(0, params.days + math.floor(params.rebook_delay) + 2)


def day_process(
    env: simpy.Environment,
    params: SimulationParameters,
    rng: Mulberry32,
    results: ResultsCollector,
) -> Generator[simpy.Event, None, None]:
    """Daily cycle: arrivals -> capacity -> service -> record queue length.

    One iteration per simulated day; the environment clock advances one
    unit (day) per iteration.

    Args:
        env: SimPy environment.
        params: Run parameters.
        rng: Uniform source shared by every draw of the run.
        results: Collector for flow counts and waits.

    Yields:
        SimPy timeout events, one per day.
    """
    queue: Deque[int] = deque()
    future_adds = create_future_arrivals(params)
    cap = params.effective_capacity
    delay = params.effective_rebook_delay
    p_dna = params.dna_probability
    p_rebook = params.rebook_probability

    while env.now < params.days:
        day = int(env.now)

        # Arrivals: new referrals plus rebooked DNAs due back today
        referrals = sample_poisson(params.arrival_rate, rng)
        returns = future_adds[day] if day < len(future_adds) else 0
        queue.extend([day] * (referrals + returns))

        results.start_day(day, referrals, returns, cap)

        for _ in range(cap):
            if not queue:
                break
            entered_day = queue.popleft()

            if rng() < p_dna:
                rebooked = rng() < p_rebook
                dropped = False
                if rebooked:
                    return_day = day + delay
                    if return_day < len(future_adds):
                        future_adds[return_day] += 1
                    else:
                        dropped = True
                results.record_dna(rebooked, dropped)
            else:
                results.record_attendance(day, entered_day)

        results.end_day(len(queue))

        yield env.timeout(1)


def run_simulation(params: SimulationParameters) -> SimulationResult:
    """Execute a single simulation run.

    The run owns its random source, queue and accumulators, so repeated
    calls with the same parameters (seed included) give identical results.

    Args:
        params: Simulation parameters.

    Returns:
        SimulationResult with daily queue sizes, sorted waits, metrics and
        the per-day flow trace.
    """
    logger.debug(
        f"Running simulation: {params.days} days, seed={params.seed}, "
        f"arrival_rate={params.arrival_rate}, capacity={params.effective_capacity}"
    )

    env = simpy.Environment()
    rng = Mulberry32(params.seed)
    results = ResultsCollector(warmup=params.warmup)

    env.process(day_process(env, params, rng, results))
    env.run()

    result = results.to_result(params)
    logger.debug(
        f"Simulation complete: n_seen={result.metrics.n_seen}, "
        f"utilisation={result.metrics.utilisation:.3f}"
    )
    return result
