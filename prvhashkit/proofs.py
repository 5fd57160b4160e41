"""Pictures and number sequences drawn from the single-bit PRVHASH system.

The single-bit system reduces every state variable to one bit and replaces
arithmetic by XOR. Its output, read at the right width, shows regular
structure rather than noise; these helpers produce that output as an HTML
page, integer words or RGB images.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from itertools import chain, islice
from operator import add

_CHANNELS = 3
_TREE_ROWS_PER_COLUMN = 32
_MAX_WORD_BITS = 64
_DEFAULT_IMAGE = "prvhash1-2048.jpg"


def _check_positive(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")


def _check_flag(name: str, value: int) -> None:
    if value not in (0, 1):
        raise ValueError(f"{name} must be 0 or 1, got {value}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _single_bit_stream(
    hash_count: int,
    read_mode: int,
    seed_count: int = 1,
    hash_init: Iterable[int] | None = None,
) -> Iterator[int]:
    """Yield the outputs of the single-bit system, round after round."""
    seeds = [0] * seed_count
    hashes = [0] * hash_count if hash_init is None else list(hash_init)
    lcg = 0
    hash_pos = 0
    seed_pos = 0
    while True:
        s = seeds[seed_pos]
        h = (hashes[hash_pos] ^ s ^ 1) & 0xFF
        lcg = (lcg ^ s ^ read_mode) & 0xFF
        out = lcg ^ s
        hashes[hash_pos] = h
        seeds[seed_pos] = s ^ h
        yield out
        hash_pos = (hash_pos + 1) % hash_count
        seed_pos = (seed_pos + 1) % seed_count


def _minimal_stream(hash_count: int, seed_count: int) -> Iterator[int]:
    """Yield the outputs of the minimal single-bit system without an lcg."""
    seeds = [0] * seed_count
    hashes = [0] * hash_count
    hash_pos = 0
    seed_pos = 0
    while True:
        s = seeds[seed_pos]
        h = (hashes[hash_pos] ^ s ^ 1) & 0xFF
        hashes[hash_pos] = h
        seeds[seed_pos] = s ^ h
        yield s
        hash_pos = (hash_pos + 1) % hash_count
        seed_pos = (seed_pos + 1) % seed_count


def _accumulate(stream: Iterator[int], size: int, passes: int) -> list[int]:
    """Add each pass's outputs, shifted left by one, into 8-bit cells."""
    totals = [0] * size
    for _ in range(passes):
        totals = list(map(add, totals, islice(stream, size)))
    return [(t << 1) & 0xFF for t in totals]


def christmas_tree_html(hash_count: int = 200, read_mode: int = 1) -> str:
    """Render the low output bit as ASCII art inside an HTML page.

    Each row holds ``hash_count + 1`` characters and there are 32 times as
    many rows as columns; a set bit is drawn as ``0``, a clear bit as space.
    """
    _check_positive("hash_count", hash_count)
    _check_flag("read_mode", read_mode)
    width = hash_count + 1
    height = width * _TREE_ROWS_PER_COLUMN
    stream = _single_bit_stream(hash_count, read_mode)
    # Skip the first rounds to remove the pixel offset.
    for _ in islice(stream, hash_count + 2):
        pass

    parts = [
        "<html><head><style>body{font: 1px Courier; line-height: 1px;}</style>\n",
        "</head><body><pre>\n",
    ]
    for _ in range(height):
        row = "".join("0" if bit & 1 else " " for bit in islice(stream, width))
        parts.append(row + "\n")
    parts.append("</pre></body>\n</html>\n")
    return "".join(parts)


def math_is_engineered(
    hash_count: int = 15,
    read_mode: int = 0,
    word_bits: int = 16,
    count: int = 512,
    bit_order: int = 0,
) -> list[int]:
    """Read ``count`` words of ``word_bits`` output bits each.

    With ``bit_order`` 0 the first bit read becomes the most significant;
    with 1 it becomes the least significant.
    """
    _check_positive("hash_count", hash_count)
    _check_flag("read_mode", read_mode)
    _check_flag("bit_order", bit_order)
    _check_non_negative("count", count)
    if not 1 <= word_bits <= _MAX_WORD_BITS:
        raise ValueError(f"word_bits must be between 1 and {_MAX_WORD_BITS}, got {word_bits}")

    stream = _single_bit_stream(hash_count, read_mode)
    words = []
    for _ in range(count):
        r = 0
        for k, bit in enumerate(islice(stream, word_bits)):
            if bit_order == 0:
                r = (r << 1) | (bit & 1)
            else:
                r |= (bit & 1) << k
        words.append(r)
    return words


def fine_art_pixels(
    hash_count: int = 1638,
    height: int = 2048,
    passes: int = 127,
    read_mode: int = 1,
    seed_count: int = 1,
) -> bytes:
    """Build a colour image from three single-bit systems over many passes.

    The image is ``hash_count + 1`` pixels wide and ``height`` high, returned
    as packed RGB bytes. The systems differ only in their starting hashwords:
    all zero, every second one set, and every third one set.
    """
    _check_positive("hash_count", hash_count)
    _check_positive("height", height)
    _check_positive("seed_count", seed_count)
    _check_non_negative("passes", passes)
    _check_flag("read_mode", read_mode)

    size = (hash_count + 1) * height
    every_second = (1 if i % 2 == 0 else 0 for i in range(hash_count))
    every_third = (1 if i % 3 == 0 else 0 for i in range(hash_count))
    red_stream = _single_bit_stream(hash_count, read_mode, seed_count)
    blue_stream = _single_bit_stream(hash_count, read_mode, seed_count, every_second)
    green_stream = _single_bit_stream(hash_count, read_mode, seed_count, every_third)

    red = [0] * size
    green = [0] * size
    blue = [0] * size
    for _ in range(passes):
        red = list(map(add, red, islice(red_stream, size)))
        blue = list(map(add, blue, islice(blue_stream, size)))
        green = list(map(add, green, islice(green_stream, size)))

    def scale(cells: list[int]) -> Iterator[int]:
        return ((c << 1) & 0xFF for c in cells)

    return bytes(chain.from_iterable(zip(scale(red), scale(green), scale(blue))))


def reptile_pixels(
    hash_count: int = 2046,
    height: int = 2048,
    passes: int = 127,
    seed_count: int = 32,
) -> bytes:
    """Build a grey image from the minimal single-bit system over many passes.

    The image is ``hash_count + 1`` pixels wide and ``height`` high, returned
    as packed RGB bytes with equal channels.
    """
    _check_positive("hash_count", hash_count)
    _check_positive("height", height)
    _check_positive("seed_count", seed_count)
    _check_non_negative("passes", passes)

    size = (hash_count + 1) * height
    grey = _accumulate(_minimal_stream(hash_count, seed_count), size, passes)
    return bytes(chain.from_iterable((g, g, g) for g in grey))


def save_jpeg(
    pixels: bytes | bytearray | memoryview,
    width: int,
    height: int,
    path: str,
    quality: int = 90,
) -> None:
    """Write packed RGB bytes to a JPEG file."""
    from PIL import Image

    data = bytes(pixels)
    _check_positive("width", width)
    _check_positive("height", height)
    if len(data) != width * height * _CHANNELS:
        raise ValueError(
            f"expected {width * height * _CHANNELS} bytes for a {width}x{height} "
            f"RGB image, got {len(data)}"
        )
    if not 1 <= quality <= 100:
        raise ValueError(f"quality must be between 1 and 100, got {quality}")
    Image.frombytes("RGB", (width, height), data).save(path, "JPEG", quality=quality)


def main(argv: Sequence[str] | None = None) -> int:
    """Produce one of the single-bit pictures or number sequences."""
    parser = argparse.ArgumentParser(description="Single-bit PRVHASH pictures.")
    commands = parser.add_subparsers(dest="command", required=True)

    tree = commands.add_parser("christmas-tree", help="print an HTML picture")
    tree.add_argument("--hash-count", type=int, default=200)
    tree.add_argument("--read-mode", type=int, default=1)

    numbers = commands.add_parser("math", help="print output words")
    numbers.add_argument("--hash-count", type=int, default=15)
    numbers.add_argument("--read-mode", type=int, default=0)
    numbers.add_argument("--word-bits", type=int, default=16)
    numbers.add_argument("--count", type=int, default=512)
    numbers.add_argument("--bit-order", type=int, default=0)

    art = commands.add_parser("fine-art", help="write a colour JPEG")
    art.add_argument("--hash-count", type=int, default=1638)
    art.add_argument("--height", type=int, default=2048)
    art.add_argument("--passes", type=int, default=127)
    art.add_argument("--read-mode", type=int, default=1)
    art.add_argument("--seed-count", type=int, default=1)
    art.add_argument("--output", default=_DEFAULT_IMAGE)
    art.add_argument("--quality", type=int, default=90)

    reptile = commands.add_parser("reptile", help="write a grey JPEG")
    reptile.add_argument("--hash-count", type=int, default=2046)
    reptile.add_argument("--height", type=int, default=2048)
    reptile.add_argument("--passes", type=int, default=127)
    reptile.add_argument("--seed-count", type=int, default=32)
    reptile.add_argument("--output", default=_DEFAULT_IMAGE)
    reptile.add_argument("--quality", type=int, default=95)

    args = parser.parse_args(argv)
    try:
        if args.command == "christmas-tree":
            print(christmas_tree_html(args.hash_count, args.read_mode), end="")
        elif args.command == "math":
            words = math_is_engineered(
                args.hash_count, args.read_mode, args.word_bits, args.count, args.bit_order
            )
            for word in words:
                print(word)
        elif args.command == "fine-art":
            pixels = fine_art_pixels(
                args.hash_count, args.height, args.passes, args.read_mode, args.seed_count
            )
            save_jpeg(pixels, args.hash_count + 1, args.height, args.output, args.quality)
        else:
            pixels = reptile_pixels(
                args.hash_count, args.height, args.passes, args.seed_count
            )
            save_jpeg(pixels, args.hash_count + 1, args.height, args.output, args.quality)
    except ValueError as exc:
        parser.error(str(exc))
    return 0