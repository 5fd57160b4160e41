import pytest
from PIL import Image

from prvhashkit.proofs import (
    christmas_tree_html,
    fine_art_pixels,
    main,
    math_is_engineered,
    reptile_pixels,
    save_jpeg,
)


def _reverse_bits(value, width):
    return int(format(value, f"0{width}b")[::-1], 2)


def test_math_single_hashword_msb_first():
    assert math_is_engineered(1, 0, 6, 2, 0) == [14, 14]


def test_math_single_hashword_lsb_first():
    assert math_is_engineered(1, 0, 6, 2, 1) == [28, 28]


def test_math_bit_orders_are_reversals():
    msb = math_is_engineered(15, 0, 16, 40, 0)
    lsb = math_is_engineered(15, 0, 16, 40, 1)
    assert [_reverse_bits(v, 16) for v in msb] == lsb


def test_math_words_fit_width_and_count():
    words = math_is_engineered(7, 1, 5, 30, 0)
    assert len(words) == 30
    assert all(0 <= w < 2 ** 5 for w in words)


def test_math_is_deterministic():
    assert math_is_engineered() == math_is_engineered()
    assert len(math_is_engineered()) == 512


@pytest.mark.parametrize(
    "kwargs",
    [
        {"hash_count": 0},
        {"read_mode": 2},
        {"word_bits": 0},
        {"word_bits": 65},
        {"bit_order": 3},
        {"count": -1},
    ],
)
def test_math_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        math_is_engineered(**kwargs)


def test_christmas_tree_layout():
    html = christmas_tree_html(3, 1)
    assert html.startswith(
        "<html><head><style>body{font: 1px Courier; line-height: 1px;}</style>\n"
        "</head><body><pre>\n"
    )
    assert html.endswith("</pre></body>\n</html>\n")
    body = html.split("<pre>\n", 1)[1].rsplit("</pre>", 1)[0]
    rows = body.split("\n")[:-1]
    assert len(rows) == 4 * 32
    assert all(len(row) == 4 for row in rows)
    assert set("".join(rows)) <= {"0", " "}
    assert "0" in "".join(rows)


def test_christmas_tree_rejects_bad_read_mode():
    with pytest.raises(ValueError):
        christmas_tree_html(3, 5)


def test_fine_art_shape_and_values():
    pixels = fine_art_pixels(4, 3, 3, 1, 1)
    assert len(pixels) == 5 * 3 * 3
    assert all(p % 2 == 0 for p in pixels)
    assert max(pixels) <= 2 * 3


def test_fine_art_zero_passes_is_black():
    assert fine_art_pixels(4, 2, 0) == bytes(5 * 2 * 3)


def test_fine_art_fused_seeds_shape_and_values():
    pixels = fine_art_pixels(6, 2, 4, 0, 2)
    assert len(pixels) == 7 * 2 * 3
    assert all(p % 2 == 0 and p <= 2 * 4 for p in pixels)


def test_fine_art_rejects_bad_arguments():
    with pytest.raises(ValueError):
        fine_art_pixels(4, 3, 3, read_mode=2)
    with pytest.raises(ValueError):
        fine_art_pixels(4, 0, 3)


def test_reptile_channels_are_equal():
    pixels = reptile_pixels(5, 4, 3, 2)
    assert len(pixels) == 6 * 4 * 3
    triples = [pixels[i:i + 3] for i in range(0, len(pixels), 3)]
    assert all(t[0] == t[1] == t[2] for t in triples)
    assert all(t[0] % 2 == 0 and t[0] <= 6 for t in triples)


def test_reptile_rejects_bad_seed_count():
    with pytest.raises(ValueError):
        reptile_pixels(5, 4, 3, 0)


def test_save_jpeg_round_trip(tmp_path):
    pixels = reptile_pixels(7, 5, 2, 4)
    path = tmp_path / "out.jpg"
    save_jpeg(pixels, 8, 5, str(path), 95)
    with Image.open(path) as image:
        assert image.format == "JPEG"
        assert image.size == (8, 5)
        assert image.mode == "RGB"


def test_save_jpeg_rejects_wrong_length(tmp_path):
    with pytest.raises(ValueError):
        save_jpeg(bytes(10), 2, 2, str(tmp_path / "bad.jpg"))


def test_main_math_prints_words(capsys):
    assert main(["math", "--hash-count", "1", "--word-bits", "6", "--count", "3"]) == 0
    lines = capsys.readouterr().out.split()
    assert lines == [str(v) for v in math_is_engineered(1, 0, 6, 3, 0)]


def test_main_christmas_tree_prints_html(capsys):
    assert main(["christmas-tree", "--hash-count", "2"]) == 0
    assert capsys.readouterr().out == christmas_tree_html(2, 1)


def test_main_reptile_writes_file(tmp_path):
    path = tmp_path / "reptile.jpg"
    assert main(
        ["reptile", "--hash-count", "3", "--height", "2", "--passes", "2",
         "--seed-count", "2", "--output", str(path)]
    ) == 0
    with Image.open(path) as image:
        assert image.size == (4, 2)


def test_main_rejects_bad_read_mode():
    with pytest.raises(SystemExit):
        main(["math", "--read-mode", "7"])