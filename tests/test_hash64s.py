import pytest

from prvhashkit.hash64s import MAX_HASH_LEN, Prvhash64s, prvhash64s_oneshot

MESSAGE = bytes(range(256)) * 3


@pytest.mark.parametrize("hash_len", [8, 16, 32, 64, 512])
def test_output_length(hash_len):
    assert len(prvhash64s_oneshot(b"hello", hash_len)) == hash_len


def test_single_update_matches_oneshot():
    hasher = Prvhash64s(32)
    hasher.update(MESSAGE)
    assert hasher.final() == prvhash64s_oneshot(MESSAGE, 32)


@pytest.mark.parametrize("chunk", [1, 3, 7, 8, 31, 32, 33, 64, 100])
@pytest.mark.parametrize("hash_len", [8, 24, 64])
def test_streaming_matches_oneshot(chunk, hash_len):
    hasher = Prvhash64s(hash_len)
    for start in range(0, len(MESSAGE), chunk):
        hasher.update(MESSAGE[start:start + chunk])
    assert hasher.final() == prvhash64s_oneshot(MESSAGE, hash_len)


def test_empty_updates_do_not_change_hash():
    hasher = Prvhash64s(16)
    hasher.update(b"")
    hasher.update(b"abc")
    hasher.update(b"")
    assert hasher.final() == prvhash64s_oneshot(b"abc", 16)


def test_zero_seeds_equal_default():
    hasher = Prvhash64s(16, bytes(32))
    hasher.update(b"message")
    assert hasher.final() == prvhash64s_oneshot(b"message", 16)


def test_seeds_change_output():
    hasher = Prvhash64s(16, bytes(range(32)))
    hasher.update(b"message")
    assert hasher.final() != prvhash64s_oneshot(b"message", 16)


def test_different_messages_differ():
    digests = {prvhash64s_oneshot(bytes([i]) * n, 16) for i in range(4) for n in range(1, 40)}
    assert len(digests) == 4 * 39


def test_last_byte_high_bit_affects_padding():
    assert prvhash64s_oneshot(b"\x7f", 8) != prvhash64s_oneshot(b"\xff", 8)


def test_accepts_memoryview_and_bytearray():
    expected = prvhash64s_oneshot(b"data block", 16)
    assert prvhash64s_oneshot(memoryview(b"data block"), 16) == expected
    assert prvhash64s_oneshot(bytearray(b"data block"), 16) == expected


@pytest.mark.parametrize("hash_len", [0, 4, 12, MAX_HASH_LEN + 8])
def test_invalid_hash_length(hash_len):
    with pytest.raises(ValueError):
        Prvhash64s(hash_len)


@pytest.mark.parametrize("size", [0, 16, 33])
def test_invalid_seed_length(size):
    with pytest.raises(ValueError):
        Prvhash64s(8, bytes(size))


def test_use_after_final_raises():
    hasher = Prvhash64s(8)
    hasher.update(b"x")
    hasher.final()
    with pytest.raises(ValueError):
        hasher.update(b"y")
    with pytest.raises(ValueError):
        hasher.final()


def test_hash_len_property():
    assert Prvhash64s(40).hash_len == 40