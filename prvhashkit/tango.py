"""The tango642 keyed stream XOR function built on the 64-bit PRVHASH core."""

from __future__ import annotations

from .core import core64, load_u64

_WORD = 8
_HASH_COUNT = 16
_PAR = 4
_INIT_ROUNDS = 5
_MIN_KEY = 16
_MAX_KEY = 128
_MAX_IV = 64
# Byte size of the context structure whose worth of keystream the
# self-destructing finalization consumes.
_CTX_SIZE = 328


class Tango642:
    """Keyed XOR stream generator.

    ``key`` must be 16 to 128 bytes long, in steps of 8. ``iv`` is an
    optional nonce of up to 64 bytes, in steps of 8. Applying ``xor`` twice
    with generators built from the same key and nonce restores the data.
    The output does not depend on how the data is split between calls.
    """

    def __init__(
        self,
        key: bytes | bytearray | memoryview,
        iv: bytes | bytearray | memoryview | None = None,
    ) -> None:
        key = bytes(key)
        iv = b"" if iv is None else bytes(iv)
        if len(key) < _MIN_KEY or len(key) > _MAX_KEY or len(key) % _WORD:
            raise ValueError(
                f"key length must be a multiple of 8 between {_MIN_KEY} and "
                f"{_MAX_KEY}, got {len(key)}"
            )
        if len(iv) > _MAX_IV or len(iv) % _WORD:
            raise ValueError(
                f"iv length must be a multiple of 8 up to {_MAX_IV}, got {len(iv)}"
            )

        self._seed = load_u64(key, 0)
        self._lcg = 0
        self._hash = [0] * _HASH_COUNT
        for j in range(1, len(key) // _WORD):
            self._hash[j - 1] = load_u64(key, j * _WORD)

        for _ in range(_INIT_ROUNDS):
            self._round_at(0)

        iv_words = len(iv) // _WORD
        for n in range(iv_words):
            self._round_at(2 * n)
            v = load_u64(iv, n * _WORD)
            self._seed ^= v
            self._lcg ^= v
            self._round_at(2 * n + 1)

        for j in range(2 * iv_words, _HASH_COUNT):
            self._round_at(j)

        # Eliminate traces of the input entropy.
        for j in range(_HASH_COUNT):
            self._round_at(j)
        self._round_at(0)

        self._seed_f = [0] * _PAR
        self._lcg_f = [0] * _PAR
        self._hash_f = [0] * (_PAR + 1)
        self._hash_pos = 1

        # Each firewalling lcg and hash value receives keyed entropy thrice.
        for _ in range((_PAR + 1) * 3):
            self._seed_f[_PAR - 1] ^= self._keyed_round()
            for lane in range(_PAR):
                self._firewall_round(lane)
            self._rotate()

        self._rnd_bytes = [0] * _PAR
        self._rnd_left = [0] * _PAR
        self._rnd_pos = _PAR
        self._closed = False

    def _round_at(self, pos: int) -> int:
        r = core64(self._seed, self._lcg, self._hash[pos])
        self._seed, self._lcg, self._hash[pos] = r.seed, r.lcg, r.hash_word
        return r.out

    def _keyed_round(self) -> int:
        out = self._round_at(self._hash_pos)
        self._hash_pos = (self._hash_pos + 1) % _HASH_COUNT
        return out

    def _firewall_round(self, lane: int) -> int:
        r = core64(self._seed_f[lane], self._lcg_f[lane], self._hash_f[lane])
        self._seed_f[lane], self._lcg_f[lane], self._hash_f[lane] = (
            r.seed,
            r.lcg,
            r.hash_word,
        )
        return r.out

    def _rotate(self) -> None:
        self._hash_f = self._hash_f[1:] + self._hash_f[:1]

    def _keystream(self, length: int) -> bytes:
        out = bytearray()
        while True:
            if self._rnd_pos == _PAR:
                while length >= _WORD * _PAR:
                    self._seed_f[_PAR - 1] ^= self._keyed_round()
                    for lane in range(_PAR):
                        out += self._firewall_round(lane).to_bytes(_WORD, "little")
                    self._rotate()
                    length -= _WORD * _PAR

                self._seed_f[_PAR - 1] ^= self._keyed_round()
                self._rnd_bytes = [self._firewall_round(lane) for lane in range(_PAR)]
                self._rotate()
                self._rnd_left = [_WORD] * _PAR
                self._rnd_pos = 0

            p = self._rnd_pos
            while True:
                left = self._rnd_left[p]
                if length < left:
                    if length:
                        rb = self._rnd_bytes[p]
                        out += (rb & ((1 << (8 * length)) - 1)).to_bytes(length, "little")
                        self._rnd_bytes[p] = rb >> (8 * length)
                        self._rnd_left[p] = left - length
                    self._rnd_pos = p
                    return bytes(out)

                rb = self._rnd_bytes[p]
                out += (rb & ((1 << (8 * left)) - 1)).to_bytes(left, "little")
                length -= left
                p += 1
                if p == _PAR:
                    self._rnd_pos = _PAR
                    break

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("stream has already been finalized")

    def xor(self, data: bytes | bytearray | memoryview) -> bytes:
        """Return the data XORed with the next bytes of the keystream."""
        self._check_open()
        chunk = bytes(data)
        stream = self._keystream(len(chunk))
        if not chunk:
            return b""
        mixed = int.from_bytes(chunk, "little") ^ int.from_bytes(stream, "little")
        return mixed.to_bytes(len(chunk), "little")

    def _wipe(self) -> None:
        self._seed = 0
        self._lcg = 0
        self._hash = [0] * _HASH_COUNT
        self._seed_f = [0] * _PAR
        self._lcg_f = [0] * _PAR
        self._hash_f = [0] * (_PAR + 1)
        self._rnd_bytes = [0] * _PAR
        self._rnd_left = [0] * _PAR
        self._rnd_pos = 0
        self._hash_pos = 0
        self._closed = True

    def final(self) -> None:
        """Clear the state; the generator cannot be used afterwards."""
        self._wipe()

    def final_selfdestruct(self) -> None:
        """Overwrite the state with its own keystream, then clear it."""
        self._check_open()
        self._keystream(_CTX_SIZE)
        self._wipe()