import pytest

from shardkeys import demo64
from shardkeys.key64 import Encoder


def _rows_for(text, label):
    return [line.split() for line in text.splitlines() if line.split()[0] == label]


def test_example_values_contains_edges():
    values = demo64.example_values()
    assert 0 in values
    assert (1 << 64) - 1 in values
    assert 0x0123456789ABCDEF in values
    assert len(values) == len(set(values))


def test_unique_sorted():
    assert demo64.unique_sorted([5, 5, 0, 2]) == [0, 2, 5]


def test_render_table_line_count():
    encoder = Encoder(demo64.MASK_OFFSET, demo64.MASK_SIZE)
    values = demo64.unique_sorted(demo64.example_values())
    lines = demo64.render_table(encoder, values).splitlines()
    assert len(lines) == 2 + 4 * len(values)
    assert lines[0].split() == list(demo64._HEADER)
    assert lines[1].split() == list(demo64._SEPARATOR)


def test_render_table_left_aligned_lines_have_equal_length():
    encoder = Encoder(demo64.MASK_OFFSET, demo64.MASK_SIZE)
    text = demo64.render_table(encoder, demo64.example_values())
    lengths = {len(line) for line in text.splitlines()}
    assert len(lengths) == 1
    assert text.splitlines()[2].startswith("orig ")


def test_render_table_known_encoding():
    encoder = Encoder(8, 8)
    text = demo64.render_table(encoder, [0x0123456789ABCDEF])
    encoded_row = _rows_for(text, "encoded")[0]
    assert encoded_row[2] == "b30123456789abef"
    assert int(encoded_row[1]) == 0xB30123456789ABEF
    orig_row = _rows_for(text, "orig")[0]
    assert orig_row[2] == "0123456789abcdef"


@pytest.mark.parametrize(
    "value", [0, 1, 2047, (1 << 32), (1 << 64) - 1, 0x0123456789ABCDEF]
)
def test_render_table_rows_match_encoder(value):
    encoder = Encoder(demo64.MASK_OFFSET, demo64.MASK_SIZE)
    text = demo64.render_table(encoder, [value])
    orig = _rows_for(text, "orig")[0]
    enc = _rows_for(text, "encoded")[0]
    pre = _rows_for(text, "prefix")[0]
    assert int(orig[1]) == value
    assert int(orig[3], 2) == value
    encoded = encoder.encode(value)
    assert int(enc[2], 16) == encoded
    assert int(enc[3], 2) == encoded
    prefix = encoder.prefix(encoded)
    assert int(pre[1]) == prefix
    assert int(pre[2], 16) == encoder.prefix_hex_pad(prefix)
    assert len(pre[2]) == encoder.prefix_hex_size()


def test_render_table_rejects_out_of_range():
    encoder = Encoder(demo64.MASK_OFFSET, demo64.MASK_SIZE)
    with pytest.raises(ValueError):
        demo64.render_table(encoder, [1 << 64])


def test_main_prints_settings_and_table(capsys):
    assert demo64.main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "mask offset:\t11"
    assert out[1] == "mask size:\t13"
    assert out[2] == "hex nibbles:\t4"
    assert out[3].split() == list(demo64._HEADER)
    count = len(demo64.unique_sorted(demo64.example_values()))
    assert len(out) == 3 + 2 + 4 * count