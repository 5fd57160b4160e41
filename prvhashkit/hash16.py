"""The prvhash16 hash function, a 16-bit demonstration variant."""

from __future__ import annotations

from collections.abc import Iterator

from .core import MASK32, core16

_SEED0 = 0x128D
_LCG0 = 0x8D5B
_HASH0 = 0x0932
_WORD = 2


def _message_words(data: bytes) -> Iterator[int]:
    """Yield 16-bit message words, ending with the padded final word."""
    full = len(data) // _WORD * _WORD
    for pos in range(0, full, _WORD):
        yield data[pos] | data[pos + 1] << 8
    if len(data) % _WORD:
        yield data[-1] | 0x1000
    else:
        yield 0x0010


def prvhash16(msg: bytes | bytearray | memoryview, hash_len: int, seed: int = 0) -> bytes:
    """Hash a message with 16-bit state variables.

    ``hash_len`` is the hash length in bytes: at least 4, in steps of 2.
    ``seed`` is an optional 32-bit entropy value; 0 selects the default seed.
    Hash words are stored little-endian.
    """
    if hash_len < 4 or hash_len % _WORD:
        raise ValueError(f"hash length must be >= 4 and even, got {hash_len}")
    data = bytes(msg)
    count = hash_len // _WORD
    words = [0] * count
    words[0] = _HASH0
    s, l = _SEED0, _LCG0
    pos = 0
    use_seed = seed & MASK32

    for _ in range(2):
        part = use_seed & 0xFFFF
        s ^= part
        l ^= part
        s, l, words[pos], _ = core16(s, l, words[pos])
        pos = (pos + 1) % count
        use_seed >>= 16

    for w in _message_words(data):
        s ^= w
        l ^= w
        s, l, words[pos], _ = core16(s, l, words[pos])
        pos = (pos + 1) % count

    extra = (count - pos) * _WORD if len(data) + _WORD * 3 < hash_len else 0
    final_count = hash_len + extra
    for _ in range(0, final_count + 1, _WORD):
        s, l, words[pos], _ = core16(s, l, words[pos])
        pos = (pos + 1) % count

    for _ in range(count):
        s, l, _, words[pos] = core16(s, l, words[pos])
        pos = (pos + 1) % count

    return b"".join(w.to_bytes(_WORD, "little") for w in words)