"""An entropy-injecting PRNG built on the 64-bit PRVHASH core."""

from __future__ import annotations

import argparse
import os
from collections.abc import Callable, Sequence
from typing import BinaryIO

from .core import core64

_FUSE = 2
_HASH_COUNT = 16
_WORD = 8

EntropySource = "str | os.PathLike[str] | BinaryIO | None"


class EntropyRng:
    """Byte generator that occasionally mixes in external entropy.

    ``source`` may be ``None`` (the operating system's random source), a path
    to a file opened and owned by the generator, or a readable binary stream,
    which is left open by ``close``. Short reads are padded with zero bytes.
    """

    def __init__(self, source: str | os.PathLike[str] | BinaryIO | None = None) -> None:
        self._owned: BinaryIO | None = None
        if source is None:
            self._read: Callable[[int], bytes] = os.urandom
        elif isinstance(source, (str, os.PathLike)):
            self._owned = open(source, "rb")
            self._read = self._owned.read
        else:
            self._read = source.read

        self._seed = [0] * _FUSE
        self._lcg = [0] * _FUSE
        for lane in range(_FUSE):
            self._seed[lane] = self._entropy(_WORD)
            self._lcg[lane] = self._entropy(_WORD)
        self._hash = [self._entropy(_WORD) for _ in range(_HASH_COUNT)]
        self._hash_pos = 0
        self._ent_ctr = 0
        self._out_left = 0
        self._last_out = 0

        for pos in range(_HASH_COUNT):
            for lane in range(_FUSE):
                self._round(lane, pos)

    def _entropy(self, count: int) -> int:
        data = bytes(self._read(count))[:count]
        return int.from_bytes(data, "little")

    def _round(self, lane: int, pos: int) -> int:
        r = core64(self._seed[lane], self._lcg[lane], self._hash[pos])
        self._seed[lane], self._lcg[lane], self._hash[pos] = r.seed, r.lcg, r.hash_word
        return r.out

    def _refill(self) -> None:
        if self._ent_ctr == 0:
            v = self._entropy(2) & 0xFFFF
            self._ent_ctr = (v & 0xFF) + 1
            ent = (v >> 8) + 1
            self._seed[0] ^= ent
            self._lcg[0] ^= ent

        rv = 0
        for _ in range(2):
            pos = self._hash_pos
            for lane in range(_FUSE - 1):
                self._round(lane, pos)
            rv ^= self._round(_FUSE - 1, pos)
            self._hash_pos = (pos + 1) % _HASH_COUNT

        self._last_out = rv
        self._out_left = _WORD
        self._ent_ctr -= 1

    def next_byte(self) -> int:
        """Return the next random byte, 0 to 255."""
        if self._out_left == 0:
            self._refill()
        r = self._last_out & 0xFF
        self._last_out >>= 8
        self._out_left -= 1
        return r

    def close(self) -> None:
        """Close the entropy file if the generator opened it."""
        if self._owned is not None:
            self._owned.close()

    def __enter__(self) -> EntropyRng:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Print random bytes from the entropy generator, one per line."""
    parser = argparse.ArgumentParser(description="Print random bytes.")
    parser.add_argument("--source", help="file to read entropy from")
    parser.add_argument("--count", type=int, default=16, help="number of bytes")
    args = parser.parse_args(argv)

    try:
        rng = EntropyRng(args.source)
    except OSError:
        print("Cannot obtain the entropy source!")
        return 1

    with rng:
        for _ in range(args.count):
            print(rng.next_byte())
    return 0