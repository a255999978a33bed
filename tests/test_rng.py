"""Tests for the seeded random source."""

import pytest

from wlsim.core.rng import Mulberry32, sample_poisson


class TestMulberry32:
    """Test the uniform generator."""

    def test_reference_stream_seed_42(self):
        """Seed 42 reproduces the reference stream exactly."""
        rng = Mulberry32(42)
        draws = [rng.next_uniform() for _ in range(5)]

        assert draws == [
            0.6011037519201636,
            0.44829055899754167,
            0.8524657934904099,
            0.6697340414393693,
            0.17481389874592423,
        ]

    def test_reference_stream_seed_0(self):
        """Seed 0 is a valid seed."""
        rng = Mulberry32(0)

        assert [rng() for _ in range(3)] == [
            0.26642920868471265,
            0.0003297457005828619,
            0.2232720274478197,
        ]

    def test_negative_seed_wraps(self):
        """Negative seeds wrap to the unsigned 32-bit value."""
        a = Mulberry32(-1)
        b = Mulberry32(0xFFFFFFFF)

        assert a.state == 0xFFFFFFFF
        assert [a(), a()] == [b(), b()] == [0.8964226141106337, 0.189478256739676]

    def test_call_matches_next_uniform(self):
        """Calling the generator is the same as next_uniform()."""
        a = Mulberry32(123)
        b = Mulberry32(123)

        assert [a() for _ in range(10)] == [b.next_uniform() for _ in range(10)]

    def test_values_in_unit_interval(self):
        """Draws lie in [0, 1)."""
        rng = Mulberry32(99)
        draws = [rng() for _ in range(5000)]

        assert all(0.0 <= x < 1.0 for x in draws)

    def test_state_stays_32_bit(self):
        """State never exceeds 32 bits."""
        rng = Mulberry32(2**40 + 5)
        for _ in range(100):
            rng()
            assert 0 <= rng.state <= 0xFFFFFFFF


class TestPoisson:
    """Test the Knuth Poisson sampler."""

    def test_reference_counts(self):
        """Seeded counts match the reference implementation."""
        rng = Mulberry32(7)
        counts = [sample_poisson(3.5, rng) for _ in range(10)]

        assert counts == [0, 3, 3, 2, 3, 4, 2, 2, 3, 6]

    @pytest.mark.parametrize("lam", [0.0, -1.0])
    def test_non_positive_mean_returns_zero(self, lam):
        """Non-positive mean returns 0 without consuming draws."""
        rng = Mulberry32(5)
        untouched = Mulberry32(5)

        assert sample_poisson(lam, rng) == 0
        assert rng() == untouched()

    def test_sample_mean_close_to_lambda(self):
        """Sample mean is close to lambda."""
        rng = Mulberry32(2024)
        samples = [sample_poisson(18.0, rng) for _ in range(5000)]

        assert 17.5 < sum(samples) / len(samples) < 18.5

    def test_uses_k_plus_one_draws(self):
        """A count of k consumes k + 1 uniforms."""
        draws = iter([0.5, 0.5, 0.01])
        # exp(-1) ~ 0.368: 0.5 > L, 0.25 <= L -> 1
        assert sample_poisson(1.0, lambda: next(draws)) == 1
        assert next(draws) == 0.01
