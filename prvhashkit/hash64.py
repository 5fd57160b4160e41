"""The prvhash64 hash function and its minimal 64-bit variant."""

from __future__ import annotations

from collections.abc import Iterator

from .core import MASK64, core64

# State after five core rounds from the all-zero state.
_SEED0 = 0x217992B44669F46A
_LCG0 = 0xB5E2CC2FE9F0B35B
_HASH0 = 0x949B5E0A608D76D5
_WORD = 8
_FINAL_BYTE = 0x10


def _message_words(data: bytes) -> Iterator[int]:
    """Yield 64-bit message words, ending with the padded final word."""
    full = len(data) // _WORD * _WORD
    for pos in range(0, full, _WORD):
        yield int.from_bytes(data[pos:pos + _WORD], "little")
    tail = data[full:]
    yield ((_FINAL_BYTE << (8 * len(tail))) | int.from_bytes(tail, "little")) & MASK64


def prvhash64(msg: bytes | bytearray | memoryview, hash_len: int, seed: int = 0) -> bytes:
    """Hash a message with 64-bit state variables.

    ``hash_len`` is the hash length in bytes: at least 8, in steps of 8.
    ``seed`` is an optional 64-bit entropy value; 0 selects the default seed.
    Hash words are stored little-endian.
    """
    if hash_len < _WORD or hash_len % _WORD:
        raise ValueError(f"hash length must be a positive multiple of 8, got {hash_len}")
    data = bytes(msg)
    seed &= MASK64
    count = hash_len // _WORD
    words = [0] * count
    words[0] = _HASH0
    s, l = _SEED0 ^ seed, _LCG0 ^ seed
    pos = 0

    for w in _message_words(data):
        s, l, words[pos], _ = core64(s, l, words[pos])
        pos = (pos + 1) % count
        s ^= w
        l ^= w
    s, l, words[pos], _ = core64(s, l, words[pos])
    pos = (pos + 1) % count

    if hash_len == _WORD:
        final_count = 0
    else:
        extra = (count - pos) * _WORD if len(data) + _WORD * 2 < hash_len else 0
        final_count = hash_len + extra
    for _ in range(0, final_count + 1, _WORD):
        s, l, words[pos], _ = core64(s, l, words[pos])
        pos = (pos + 1) % count

    for _ in range(count):
        s, l, _, words[pos] = core64(s, l, words[pos])
        pos = (pos + 1) % count

    return b"".join(w.to_bytes(_WORD, "little") for w in words)


def prvhash64_64m(msg: bytes | bytearray | memoryview, seed: int = 0) -> int:
    """Return the 64-bit hash of a message as an integer.

    Equal to ``prvhash64`` with an 8-byte hash, read little-endian.
    """
    data = bytes(msg)
    seed &= MASK64
    s, l, h = _SEED0 ^ seed, _LCG0 ^ seed, _HASH0

    for w in _message_words(data):
        s, l, h, _ = core64(s, l, h)
        s ^= w
        l ^= w
    s, l, h, _ = core64(s, l, h)
    s, l, h, _ = core64(s, l, h)
    return core64(s, l, h).out