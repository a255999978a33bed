"""Seeded uniform generator and Poisson sampler."""

import math
from typing import Callable

_MASK32 = 0xFFFFFFFF
_TWO_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply (unsigned result)."""
    return (a * b) & _MASK32


class Mulberry32:
    """Mulberry32 pseudo-random generator.

    A 32-bit state is advanced by a fixed odd increment on every draw and
    mixed with two multiply/xor-shift rounds. The mixing function is frozen:
    the same seed must give the same stream as every other port of the model,
    so that scenario results can be checked against stored regression values.

    Attributes:
        state: Current 32-bit generator state.
    """

    INCREMENT = 0x6D2B79F5

    def __init__(self, seed: int) -> None:
        """Initialise the generator.

        Args:
            seed: Any integer. Reduced modulo 2**32, so negative seeds
                wrap the same way an unsigned 32-bit conversion would.
        """
        self.state = int(seed) & _MASK32

    def next_uniform(self) -> float:
        """Draw the next float in [0, 1)."""
        self.state = (self.state + self.INCREMENT) & _MASK32
        a = self.state
        t = _imul(a ^ (a >> 15), 1 | a)
        t = (t ^ ((t + _imul(t ^ (t >> 7), 61 | t)) & _MASK32)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_32

    def __call__(self) -> float:
        return self.next_uniform()


def sample_poisson(lam: float, source: Callable[[], float]) -> int:
    """Sample a Poisson count using Knuth's multiplicative method.

    Exact for the small daily rates used in service planning; no large-mean
    approximation is attempted.

    Args:
        lam: Poisson mean. Non-positive means return 0 without drawing.
        source: Zero-argument callable returning uniforms in [0, 1).

    Returns:
        Non-negative integer count.
    """
    if lam <= 0:
        return 0
    limit = math.exp(-lam)
    k = 0
    p = 1.0
    while True:
        k += 1
        p *= source()
        if p <= limit:
            break
    return k - 1
