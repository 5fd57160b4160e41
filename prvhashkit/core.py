"""PRVHASH core round functions and little-endian word loaders."""

from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple

MASK64 = (1 << 64) - 1
MASK32 = (1 << 32) - 1


class Round(NamedTuple):
    """State after one PRVHASH round, plus the round's random output."""

    seed: int
    lcg: int
    hash_word: int
    out: int


@lru_cache(maxsize=None)
def _constants(bits: int) -> tuple[int, int, int]:
    """Return (mask, 0xAA.. pattern, 0x55.. pattern) for a state width."""
    mask = (1 << bits) - 1
    digits = (bits + 3) // 4
    return mask, int("A" * digits, 16) & mask, int("5" * digits, 16) & mask


def core(seed: int, lcg: int, hash_word: int, bits: int) -> Round:
    """Run one PRVHASH round on state variables of the given bit width.

    The width must be a positive even number. Inputs are reduced to the
    width before use.
    """
    if bits < 2 or bits % 2:
        raise ValueError(f"state width must be a positive even number, got {bits}")
    mask, pattern_a, pattern_5 = _constants(bits)
    half = bits // 2
    seed = (seed * (lcg * 2 + 1)) & mask
    rs = ((seed >> half) | (seed << half)) & mask
    hash_word = (hash_word + rs + pattern_a) & mask
    lcg = (lcg + seed + pattern_5) & mask
    seed ^= hash_word
    return Round(seed, lcg, hash_word, lcg ^ rs)


def core64(seed: int, lcg: int, hash_word: int) -> Round:
    """Run one PRVHASH round with 64-bit state variables."""
    seed = (seed * (lcg * 2 + 1)) & MASK64
    rs = ((seed >> 32) | (seed << 32)) & MASK64
    hash_word = (hash_word + rs + 0xAAAAAAAAAAAAAAAA) & MASK64
    lcg = (lcg + seed + 0x5555555555555555) & MASK64
    seed ^= hash_word
    return Round(seed, lcg, hash_word, lcg ^ rs)


def core32(seed: int, lcg: int, hash_word: int) -> Round:
    """Run one PRVHASH round with 32-bit state variables."""
    return core(seed, lcg, hash_word, 32)


def core16(seed: int, lcg: int, hash_word: int) -> Round:
    """Run one PRVHASH round with 16-bit state variables."""
    return core(seed, lcg, hash_word, 16)


def core8(seed: int, lcg: int, hash_word: int) -> Round:
    """Run one PRVHASH round with 8-bit state variables."""
    return core(seed, lcg, hash_word, 8)


def core4(seed: int, lcg: int, hash_word: int) -> Round:
    """Run one PRVHASH round with 4-bit state variables."""
    return core(seed, lcg, hash_word, 4)


def core2(seed: int, lcg: int, hash_word: int) -> Round:
    """Run one PRVHASH round with 2-bit state variables."""
    return core(seed, lcg, hash_word, 2)


def core128(seed: int, lcg: int, hash_word: int) -> Round:
    """Run one PRVHASH round with 128-bit state variables."""
    return core(seed, lcg, hash_word, 128)


def _load(data: bytes | bytearray | memoryview, offset: int, size: int) -> int:
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    chunk = bytes(data[offset:offset + size])
    if len(chunk) != size:
        raise ValueError(f"need {size} bytes at offset {offset}, got {len(chunk)}")
    return int.from_bytes(chunk, "little")


def load_u32(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read an unsigned little-endian 32-bit value at the given offset."""
    return _load(data, offset, 4)


def load_u64(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read an unsigned little-endian 64-bit value at the given offset."""
    return _load(data, offset, 8)