"""The prvhash64s streamed hash function: a fused, output-XORing variant."""

from __future__ import annotations

from .core import MASK64, core64, load_u64

MAX_HASH_LEN = 512
_WORD = 8
_FUSE = 4
_BLOCK = _WORD * _FUSE
_INIT_ROUNDS = 5


class Prvhash64s:
    """Streaming prvhash64s hasher.

    ``hash_len`` is the hash length in bytes: at least 8, in steps of 8, and
    at most 512. ``seeds`` is an optional 32-byte entropy pool read as four
    little-endian 64-bit values; ``None`` selects the default (all-zero)
    seeds.
    """

    def __init__(
        self,
        hash_len: int = 8,
        seeds: bytes | bytearray | memoryview | None = None,
    ) -> None:
        if hash_len < _WORD or hash_len % _WORD or hash_len > MAX_HASH_LEN:
            raise ValueError(
                f"hash length must be a multiple of 8 between 8 and "
                f"{MAX_HASH_LEN}, got {hash_len}"
            )
        pool = bytes(_BLOCK) if seeds is None else bytes(seeds)
        if len(pool) != _BLOCK:
            raise ValueError(f"seeds must be {_BLOCK} bytes long, got {len(pool)}")

        self._hash_len = hash_len
        self._seed = [load_u64(pool, i * _WORD) for i in range(_FUSE)]
        self._lcg = [0] * _FUSE
        self._hash = [0] * (hash_len // _WORD)
        self._pos = 0
        self._block = bytearray()
        self._msg_len = 0
        self._fb = 0
        self._done = False

        for _ in range(_INIT_ROUNDS):
            for lane in range(_FUSE):
                self._round(lane, 0)

    @property
    def hash_len(self) -> int:
        """The hash length in bytes."""
        return self._hash_len

    def _round(self, lane: int, pos: int) -> int:
        r = core64(self._seed[lane], self._lcg[lane], self._hash[pos])
        self._seed[lane], self._lcg[lane], self._hash[pos] = r.seed, r.lcg, r.hash_word
        return r.out

    def _advance(self) -> None:
        self._pos = (self._pos + 1) % len(self._hash)

    def _absorb(self, block: bytes) -> None:
        pos = self._pos
        for lane in range(_FUSE):
            m = load_u64(block, lane * _WORD)
            self._seed[lane] ^= m
            self._lcg[lane] ^= m
            self._round(lane, pos)
        self._advance()

    def _check_open(self) -> None:
        if self._done:
            raise ValueError("hasher has already been finalized")

    def update(self, data: bytes | bytearray | memoryview) -> None:
        """Feed more message bytes into the hash."""
        self._check_open()
        chunk = bytes(data)
        if not chunk:
            return
        self._msg_len = (self._msg_len + len(chunk)) & MASK64

        start = 0
        if self._block and len(self._block) + len(chunk) >= _BLOCK:
            start = _BLOCK - len(self._block)
            self._absorb(bytes(self._block) + chunk[:start])
            self._block.clear()

        while len(chunk) - start >= _BLOCK:
            self._absorb(chunk[start:start + _BLOCK])
            start += _BLOCK

        self._block += chunk[start:]
        self._fb = chunk[-1]

    def _final_marker(self) -> bytes:
        return bytes(_WORD - 1) + bytes([1 << (self._fb >> 7)])

    def final(self) -> bytes:
        """Finish hashing and return the hash; the hasher cannot be reused."""
        self._check_open()
        self.update(self._final_marker())
        self.update(self._msg_len.to_bytes(_WORD, "little"))
        self.update(self._final_marker())
        if self._block:
            self.update(bytes(_BLOCK - len(self._block)))

        count = len(self._hash)
        if self._hash_len == _WORD:
            final_count = _WORD
        else:
            extra = (
                (count - self._pos) * _WORD
                if self._msg_len < self._hash_len * _FUSE
                else 0
            )
            final_count = _WORD + self._hash_len + extra

        for _ in range(0, final_count + 1, _WORD):
            for lane in range(_FUSE):
                self._round(lane, self._pos)
            self._advance()

        out = bytearray()
        for _ in range(count):
            res = 0
            for _ in range(_FUSE):
                for lane in range(_FUSE - 1):
                    self._round(lane, self._pos)
                res ^= self._round(_FUSE - 1, self._pos)
                self._advance()
            out += res.to_bytes(_WORD, "little")

        self._wipe()
        return bytes(out)

    def _wipe(self) -> None:
        self._seed = [0] * _FUSE
        self._lcg = [0] * _FUSE
        self._hash = [0] * len(self._hash)
        self._block.clear()
        self._pos = 0
        self._msg_len = 0
        self._fb = 0
        self._done = True


def prvhash64s_oneshot(msg: bytes | bytearray | memoryview, hash_len: int = 8) -> bytes:
    """Hash a whole message with default seeds in one call."""
    hasher = Prvhash64s(hash_len)
    hasher.update(msg)
    return hasher.final()