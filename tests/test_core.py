import pytest

from prvhashkit.core import (
    core,
    core2,
    core4,
    core8,
    core16,
    core32,
    core64,
    core128,
    load_u32,
    load_u64,
)


def test_core64_five_rounds_from_zero_state():
    seed = lcg = hash_word = 0
    for _ in range(5):
        seed, lcg, hash_word, _ = core64(seed, lcg, hash_word)
    assert (seed, lcg, hash_word) == (
        0x217992B44669F46A,
        0xB5E2CC2FE9F0B35B,
        0x949B5E0A608D76D5,
    )


def test_core16_five_rounds_from_zero_state():
    seed = lcg = hash_word = 0
    for _ in range(5):
        seed, lcg, hash_word, _ = core16(seed, lcg, hash_word)
    assert (seed, lcg, hash_word) == (0x128D, 0x8D5B, 0x0932)


def test_core64_first_round_from_zero():
    result = core64(0, 0, 0)
    assert result.seed == 0xAAAAAAAAAAAAAAAA
    assert result.lcg == 0x5555555555555555
    assert result.hash_word == 0xAAAAAAAAAAAAAAAA
    assert result.out == 0x5555555555555555


@pytest.mark.parametrize(
    "state",
    [
        (1, 2, 3),
        (0xFFFFFFFFFFFFFFFF, 0x123456789ABCDEF0, 0x0F0F0F0F0F0F0F0F),
        (0xDEADBEEF, 0, 0xFFFFFFFFFFFFFFFF),
    ],
)
def test_core64_matches_generic(state):
    assert core64(*state) == core(*state, 64)


@pytest.mark.parametrize(
    "fn, bits",
    [(core32, 32), (core16, 16), (core8, 8), (core4, 4), (core2, 2), (core128, 128)],
)
def test_outputs_stay_within_width(fn, bits):
    mask = (1 << bits) - 1
    seed, lcg, hash_word = 7, 11, 13
    for _ in range(50):
        result = fn(seed, lcg, hash_word)
        assert all(0 <= value <= mask for value in result)
        seed, lcg, hash_word, _ = result


def test_core4_exhaustive_range():
    for seed in range(16):
        for lcg in range(16):
            for hash_word in range(16):
                assert all(0 <= v < 16 for v in core4(seed, lcg, hash_word))


def test_core2_exhaustive_range():
    for seed in range(4):
        for lcg in range(4):
            for hash_word in range(4):
                assert all(0 <= v < 4 for v in core2(seed, lcg, hash_word))


def test_inputs_reduced_to_width():
    assert core8(0x1FF, 0x102, 0x303) == core8(0xFF, 0x02, 0x03)


def test_core128_high_half_participates():
    low = core128(1, 0, 0)
    high = core128(1 | (1 << 100), 0, 0)
    assert low != high
    assert high.seed < (1 << 128)


@pytest.mark.parametrize("bits", [0, 3, -2, 7])
def test_core_rejects_bad_width(bits):
    with pytest.raises(ValueError):
        core(1, 2, 3, bits)


def test_load_u32_little_endian():
    assert load_u32(b"\x01\x02\x03\x04") == 0x04030201


def test_load_u64_offset():
    data = b"\xff" + bytes(range(1, 9))
    assert load_u64(data, 1) == int.from_bytes(bytes(range(1, 9)), "little")


def test_load_round_trip():
    value = 0x0123456789ABCDEF
    assert load_u64(value.to_bytes(8, "little")) == value


def test_load_short_data_raises():
    with pytest.raises(ValueError):
        load_u64(b"\x00" * 7)
    with pytest.raises(ValueError):
        load_u32(b"\x00" * 8, 5)


def test_load_negative_offset_raises():
    with pytest.raises(ValueError):
        load_u32(b"\x00" * 8, -1)