"""Counter-based Philox2x32-10 random stream.

Each stream is identified by a 32-bit key and a 64-bit counter, so a
simulation step can hand out reproducible streams per cell or per phonon
without sharing mutable global state.
"""

import math

PHILOX_M: int = 0xD2511F53
PHILOX_W: int = 0x9E3779B9
PHILOX_ROUNDS: int = 10
UINT32_MASK: int = 0xFFFFFFFF
UINT32_TO_FLOAT: float = 2.3283064365e-10  # 2**-32


class PhiloxRNG:
    """Philox2x32-10 generator producing uniforms in [0, 1)."""

    def __init__(self, key: int, counter_hi: int = 0, counter_lo: int = 0) -> None:
        self.key = key & UINT32_MASK
        self.counter_hi = counter_hi & UINT32_MASK
        self.counter_lo = counter_lo & UINT32_MASK

    @staticmethod
    def _bijection(lo: int, hi: int, key: int) -> tuple[int, int]:
        for _ in range(PHILOX_ROUNDS):
            product = PHILOX_M * lo
            lo, hi = ((product >> 32) ^ key ^ hi) & UINT32_MASK, product & UINT32_MASK
            key = (key + PHILOX_W) & UINT32_MASK
        return lo, hi

    def next_uint32(self) -> int:
        word, _ = self._bijection(self.counter_lo, self.counter_hi, self.key)
        self.counter_lo = (self.counter_lo + 1) & UINT32_MASK
        if self.counter_lo == 0:
            self.counter_hi = (self.counter_hi + 1) & UINT32_MASK
        return word

    def uniform(self) -> float:
        return self.next_uint32() * UINT32_TO_FLOAT

    def sample_direction(self) -> tuple[float, float]:
        """Isotropic unit direction in the plane."""
        phi = 2.0 * math.pi * self.uniform()
        return (math.cos(phi), math.sin(phi))

