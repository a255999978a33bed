"""Tests for wait-time histogram binning."""

import pytest

from wlsim.results.histogram import build_histogram


class TestBuildHistogram:
    """Fixed-width bins with clamping into the last bin."""

    def test_empty(self):
        hist = build_histogram([])

        assert hist.labels == []
        assert hist.counts == []
        assert hist.total == 0

    def test_bins_up_to_largest_wait(self):
        """Bins stop at the bin containing the largest wait."""
        hist = build_histogram([0, 1, 2, 3, 5], bin_size=3)

        assert hist.labels == ["0-2", "3-5"]
        assert hist.counts == [3, 2]

    def test_values_beyond_max_clamped(self):
        """Waits above bin_size * max_bins fall in the last bin."""
        hist = build_histogram([0, 1, 2, 3, 4, 100, 250], bin_size=3, max_bins=30)

        assert len(hist.counts) == 31
        assert hist.counts[0] == 3
        assert hist.counts[1] == 2
        assert hist.counts[-1] == 2
        assert hist.labels[-1] == "90-92"
        assert hist.total == 7

    def test_custom_bin_size(self):
        hist = build_histogram([0, 7, 14], bin_size=7, max_bins=2)

        assert hist.labels == ["0-6", "7-13", "14-20"]
        assert hist.counts == [1, 1, 1]

    @pytest.mark.parametrize("bin_size,max_bins", [(0, 30), (-1, 30), (3, 0)])
    def test_invalid_arguments(self, bin_size, max_bins):
        with pytest.raises(ValueError):
            build_histogram([1, 2], bin_size=bin_size, max_bins=max_bins)
