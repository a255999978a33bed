"""Fixed-width binning of wait times for the histogram chart."""

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np


@dataclass
class WaitHistogram:
    """Binned wait counts with display labels ("0-2", "3-5", ...)."""
    labels: List[str] = field(default_factory=list)
    counts: List[int] = field(default_factory=list)
    bin_size: int = 3

    @property
    def total(self) -> int:
        return int(sum(self.counts))


def build_histogram(
    waits: Sequence[int], bin_size: int = 3, max_bins: int = 30
) -> WaitHistogram:
    """Bin waits into fixed-width bins.

    The top edge is the smaller of the largest wait and
    ``bin_size * max_bins``; waits above it are clamped into the last bin.

    Args:
        waits: Wait times in days.
        bin_size: Width of each bin in days.
        max_bins: Number of bins before clamping starts.

    Returns:
        WaitHistogram. Empty when there are no waits.

    Raises:
        ValueError: If bin_size or max_bins is not positive.
    """
    if bin_size <= 0:
        raise ValueError("bin_size must be positive")
    if max_bins <= 0:
        raise ValueError("max_bins must be positive")
    if len(waits) == 0:
        return WaitHistogram(bin_size=bin_size)

    values = np.asarray(waits)
    max_edge = min(values.max(), bin_size * max_bins)
    n_bins = int(max_edge // bin_size) + 1

    idx = (np.minimum(values, max_edge) // bin_size).astype(int)
    counts = np.bincount(idx, minlength=n_bins)

    labels = [f"{i * bin_size}-{i * bin_size + bin_size - 1}" for i in range(n_bins)]
    return WaitHistogram(labels=labels, counts=[int(c) for c in counts], bin_size=bin_size)
