# prvhashkit

A pure-Python toolkit built around the PRVHASH core round: a family of hash
functions, a keyed streamed XOR function, a configurable pseudo-random
number generator and an entropy-fed byte generator, plus two small command
line programs.

## Installation

```
pip install prvhashkit
```

To run the test suite:

```
pip install "prvhashkit[test]"
pytest
```

## Modules

| Module                | Contents |
|-----------------------|----------|
| `prvhashkit.core`     | The core round for 2, 4, 8, 16, 32, 64 and 128-bit state words (`core2` ... `core128`, and the generic `core(seed, lcg, hash_word, bits)` for any positive even width). Each returns a `Round` named tuple `(seed, lcg, hash_word, out)`. Also the little-endian loaders `load_u32` and `load_u64`. |
| `prvhashkit.hash16`   | `prvhash16`, a demonstration hash with 16-bit state words. |
| `prvhashkit.hash64`   | `prvhash64`, a hash of any length in 8-byte steps, and `prvhash64_64m`, which returns the 8-byte hash as an integer. |
| `prvhashkit.hash64s`  | `Prvhash64s`, the streamed, fused hash, and `prvhash64s_oneshot`. |
| `prvhashkit.tango`    | `Tango642`, a keyed PRNG-based streamed XOR function. |
| `prvhashkit.gradilac` | `Gradilac`, a configurable PRNG with uniform, integer, squared, triangular, normal and bit outputs. |
| `prvhashkit.prvrng`   | `EntropyRng`, a byte generator that injects outside entropy from time to time. |
| `prvhashkit.proofs`   | Patterns drawn from the single-bit form of the core round, as HTML, integer words or JPEG images. |

## Hashing

```python
from prvhashkit.hash64 import prvhash64, prvhash64_64m
from prvhashkit.hash64s import Prvhash64s, prvhash64s_oneshot

digest = prvhash64(b"hello world", 16, 0)     # 16-byte hash, default seed
value = prvhash64_64m(b"hello world", 0)      # the 8-byte hash as an int

# Streamed hashing: feed data in pieces of any size.
hasher = Prvhash64s(hash_len=32, seeds=None)
hasher.update(b"hello ")
hasher.update(b"world")
streamed = hasher.final()

assert streamed == prvhash64s_oneshot(b"hello world", 32)
```

Hash lengths are in bytes:

- `prvhash16`: at least 4, in steps of 2; the seed is a 32-bit value.
- `prvhash64`: at least 8, in steps of 8; the seed is a 64-bit value.
- `Prvhash64s`: 8 to 512, in steps of 8; `seeds` is `None` or exactly 32
  bytes, read as four little-endian 64-bit values.

Hash words are written little-endian. A bad length raises `ValueError`.
`Prvhash64s.final()` returns the hash and clears the state; calling
`update` or `final` after that raises `ValueError`.

## Streamed XOR

`Tango642` produces a keystream from a key of 16 to 128 bytes (in steps of
8) and an optional initialisation vector of up to 64 bytes (in steps of 8).
`xor` returns its input XOR-ed with the next keystream bytes, so applying it
again with a generator built from the same key and vector gives back the
data. The result does not depend on how the data is split between calls.

```python
from prvhashkit.tango import Tango642

key = b"secret" * 4      # 24 bytes, made-up key material
iv = bytes(8)

cipher = Tango642(key, iv)
encrypted = cipher.xor(b"attack at dawn")
cipher.final()

decipher = Tango642(key, iv)
assert decipher.xor(encrypted) == b"attack at dawn"
decipher.final_selfdestruct()
```

`final()` clears the state; `final_selfdestruct()` first runs the keystream
over a state-sized block, then clears it. Using the generator after either
raises `ValueError`.

## Random numbers

```python
from prvhashkit.gradilac import Gradilac

rng = Gradilac(iseed=1, hcount=1, bits=64, fuse=1, cs=0)
rng.get()                    # float in [0, 1); rng() does the same
rng.get(10.0)                # float in [0, 10)
rng.get_int(6)               # integer in [0, 6)
rng.get_sqr()                # squared uniform value in [0, 1)
rng.get_norm(0.0, 1.0)       # normally distributed
rng.get_tpdf()               # triangular, in (-1, 1)
rng.get_bit()                # 0 or 1, from a bit pool
rng.get_raw()                # raw state-word value
rng.period_exp()             # estimated period exponent, 2**N
```

`bits` is the width of the state words (8, 16, 32 or 64), `hcount` the
number of hash words, `fuse` the fusing degree and `cs` the number of extra
rounds XOR-ed into each output (the cryptographically stronger mode).
Restart with `seed(iseed)`, or mix in fresh entropy with `reseed(value)` or
`reseed_bytes(data, psize)`.

`EntropyRng` draws its initial state and occasional injections from an
entropy source: `None` for the operating system's random source, a file
path (opened and closed by the generator), or a readable binary stream
(left open). It works as a context manager:

```python
from prvhashkit.prvrng import EntropyRng

with EntropyRng(None) as rng:
    data = bytes(rng.next_byte() for _ in range(16))
```

## Command-line programs

```
prvhashkit-rng [--source FILE] [--count N]
```

prints `N` (default 16) random bytes from `EntropyRng`, one per line,
reading entropy from `FILE` or, without it, from the operating system.

```
prvhashkit-proofs christmas-tree [--hash-count N] [--read-mode 0|1]
prvhashkit-proofs math [--hash-count N] [--read-mode 0|1] [--word-bits B] [--count C] [--bit-order 0|1]
prvhashkit-proofs fine-art [--hash-count N] [--height H] [--passes P] [--read-mode 0|1] [--seed-count S] [--output PATH] [--quality Q]
prvhashkit-proofs reptile [--hash-count N] [--height H] [--passes P] [--seed-count S] [--output PATH] [--quality Q]
```

- `christmas-tree` prints an HTML page of ASCII art drawn from the output bit.
- `math` prints the output read as integer words, one per line.
- `fine-art` writes a colour JPEG built from three single-bit systems over
  many passes.
- `reptile` writes a grey JPEG from the minimal single-bit system.

Both image commands write `prvhash1-2048.jpg` unless `--output` is given.
The same results are available from Python as `christmas_tree_html`,
`math_is_engineered`, `fine_art_pixels`, `reptile_pixels` and `save_jpeg`.
With the default sizes the image commands are slow in pure Python; smaller
`--hash-count`, `--height` or `--passes` values finish much sooner.

## What this package does not do

The code is pure Python and aims at the same results, not at speed: the
hashes and generators are far slower than compiled implementations and are
not meant for bulk throughput.