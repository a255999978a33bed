"""Display formatting for metrics; undefined values become a placeholder."""

import math
from typing import List, Optional, Tuple

from wlsim.results.collector import WaitMetrics

PLACEHOLDER = "—"


def _missing(x: Optional[float]) -> bool:
    return x is None or (isinstance(x, float) and math.isnan(x))


def fmt_pct(x: Optional[float]) -> str:
    """Format a fraction as a percentage with one decimal place."""
    if _missing(x):
        return PLACEHOLDER
    return f"{x * 100:.1f}%"


def fmt_num(x: Optional[float], dp: int = 1) -> str:
    """Format a number to a fixed number of decimal places."""
    if _missing(x):
        return PLACEHOLDER
    return f"{x:.{dp}f}"


def metric_items(m: WaitMetrics) -> List[Tuple[str, str]]:
    """Label/value pairs for the metrics panel, in display order."""
    return [
        ("Utilisation", fmt_pct(m.utilisation)),
        ("Mean wait (days)", fmt_num(m.mean_wait)),
        ("Median wait (days)", fmt_num(m.median_wait, 0)),
        ("P90 wait (days)", fmt_num(m.p90_wait, 0)),
        ("Seen ≤ 2 weeks", fmt_pct(m.within_14)),
        ("Seen ≤ 4 weeks", fmt_pct(m.within_28)),
        ("Seen ≤ 6 weeks", fmt_pct(m.within_42)),
        ("N seen (post warm-up)", str(m.n_seen)),
    ]
