"""Gradilac: a configurable pseudo-random number generator on the PRVHASH core."""

from __future__ import annotations

import math
from collections.abc import Callable
from functools import partial

from .core import Round, core, core64

_WIDTHS = (8, 16, 32, 64)
_INIT_ROUNDS = 5
_FLOAT_BITS = 53


class Gradilac:
    """PRVHASH-based PRNG with a hashword array, fusing and a CSPRNG mode.

    ``hcount`` is the number of hashwords (at least 1), ``bits`` the width of
    the state variables (8, 16, 32 or 64), ``fuse`` the fusing level (at
    least 1) and ``cs`` the number of extra XOR rounds per output (0 turns
    the CSPRNG mode off). Floating-point values lie in [0, 1) or [0, N).
    """

    def __init__(
        self,
        iseed: int = 0,
        hcount: int = 1,
        bits: int = 64,
        fuse: int = 1,
        cs: int = 0,
    ) -> None:
        if hcount < 1:
            raise ValueError(f"hashword count must be at least 1, got {hcount}")
        if bits not in _WIDTHS:
            raise ValueError(f"state width must be one of {_WIDTHS}, got {bits}")
        if fuse < 1:
            raise ValueError(f"fusing must be at least 1, got {fuse}")
        if cs < 0:
            raise ValueError(f"CSPRNG rounds must not be negative, got {cs}")

        self._hcount = hcount
        self._bits = bits
        self._fuse = fuse
        self._cs = cs
        self._mask = (1 << bits) - 1
        self._im = 2.0 ** -bits
        self._core: Callable[[int, int, int], Round] = (
            core64 if bits == 64 else partial(core, bits=bits)
        )
        self.seed(iseed)

    @property
    def bits(self) -> int:
        """Width of the state variables in bits."""
        return self._bits

    def seed(self, iseed: int = 0) -> None:
        """Reinitialise the generator from a small seed value."""
        self._seed = [0] * self._fuse
        self._lcg = [0] * self._fuse
        self._hash = [0] * self._hcount
        self._seed[0] = iseed & self._mask
        self._hpos = 0
        self._bit_pool = 0
        self._bits_left = 0

        # Only the first hashword is initialised; the rest fill in on the go.
        for _ in range(_INIT_ROUNDS):
            for lane in range(self._fuse):
                self._round(lane, 0)

    def _round(self, lane: int, pos: int) -> int:
        r = self._core(self._seed[lane], self._lcg[lane], self._hash[pos])
        self._seed[lane], self._lcg[lane], self._hash[pos] = r.seed, r.lcg, r.hash_word
        return r.out

    def _step(self) -> int:
        pos = self._hpos
        self._hpos = (pos + 1) % self._hcount
        for lane in range(self._fuse - 1):
            self._round(lane, pos)
        return self._round(self._fuse - 1, pos)

    def _inject(self, value: int) -> None:
        self._seed[0] ^= value
        self._lcg[0] ^= value
        self.get_raw()

    def reseed(self, ent: int) -> None:
        """Mix a single entropy value into the running state."""
        self._inject(ent & self._mask)
        if self._fuse > 1:
            self.get_raw()

    def reseed_bytes(self, data: bytes | bytearray | memoryview, psize: int = 1) -> None:
        """Mix a block of entropy into the state, ``psize`` bytes per step."""
        if psize < 1:
            raise ValueError(f"packet size must be at least 1, got {psize}")
        block = bytes(data)
        for start in range(0, len(block), psize):
            packet = 0
            for byte in block[start:start + psize]:
                packet = ((packet << 8) | byte) & self._mask
            self._inject(packet)

        # Pass over the hashword array to remove traces of the input.
        passes = self._hcount + (self._hcount > 1) + (self._fuse > 1)
        for _ in range(passes):
            self.get_raw()

    def get_raw(self) -> int:
        """Advance the generator and return a raw state-width integer."""
        res = self._step()
        for _ in range(self._cs):
            res ^= self._step()
        return res

    def get(self, n1: float | None = None) -> float:
        """Return a float in [0, 1), or in [0, n1) when ``n1`` is given."""
        if self._bits > _FLOAT_BITS:
            v = (self.get_raw() >> (self._bits - _FLOAT_BITS)) * 2.0 ** -_FLOAT_BITS
        else:
            v = self.get_raw() * self._im
        return v if n1 is None else v * n1

    def __call__(self) -> float:
        return self.get()

    def get_int(self, n1: int) -> int:
        """Return an integer in [0, n1); ``n1`` is the number of bins."""
        return int(self.get(float(n1)))

    def get_sqr(self) -> float:
        """Return a squared uniform value in [0, 1) (Beta, alpha=0.5, beta=1)."""
        v = self.get()
        return v * v

    def get_tpdf(self) -> float:
        """Return a triangular-distributed value in (-1, 1)."""
        if self._bits == 64:
            rv = self.get_raw()
            return ((rv >> 32) - (rv & 0xFFFFFFFF)) * 2.0 ** -32
        v1 = float(self.get_raw())
        v2 = float(self.get_raw())
        return (v1 - v2) * self._im

    def _norm(self) -> float:
        while True:
            u = self.get()
            v = self.get()
            if u == 0.0 or v == 0.0:
                u = 1.0
                v = 1.0
            v = 1.7156 * (v - 0.5)
            x = u - 0.449871
            y = abs(v) + 0.386595
            q = x * x + y * (0.19600 * y - 0.25472 * x)
            if q < 0.27597:
                break
            if not (q > 0.27846 or v * v > -4.0 * math.log(u) * u * u):
                break
        return v / u

    def get_norm(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        """Return a normally distributed value with the given mean and deviation."""
        return mean + stddev * self._norm()

    def get_bit(self) -> int:
        """Return the next bit from the bit pool, refilling it when empty."""
        if self._bits_left == 0:
            self._bit_pool = self.get_raw()
            self._bits_left = self._bits
        b = self._bit_pool & 1
        self._bit_pool >>= 1
        self._bits_left -= 1
        return b

    def period_exp(self) -> int:
        """Return the estimated base-2 exponent of the generator's period."""
        size = self._bits // 8
        return (
            (self._fuse * 8 + self._fuse * 4 + self._hcount * 8) * size
            - self._hcount
            - self._cs
        )