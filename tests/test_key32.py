import pytest

from shardkeys.key32 import Encoder, reverse_bits

CASES = [
    # name, orig, offset, size, left, prefix_bits, right, encoded, prefix
    ("simple-8bit", 0x12345678, 8, 8, 8, 8, 32 - 8 - 8, 0x6A123478, 0x6A),
    ("zero", 0x00000000, 5, 4, 5, 4, 32 - 5 - 4, 0x00000000, 0x0),
    ("fullMask-16bit", 0xFFFFFFFF, 16, 16, 16, 16, 0, 0xFFFFFFFF, 0xFFFF),
    ("65535-13bit", 0x0000FFFF, 11, 13, 11, 13, 32 - 11 - 13, 0xF80007FF, 0x1F00),
]


@pytest.mark.parametrize(
    "name, orig, offset, size, want_left, want_pre, want_right, want_enc, want_prefix",
    CASES,
    ids=[c[0] for c in CASES],
)
def test_encoder_table(
    name, orig, offset, size, want_left, want_pre, want_right, want_enc, want_prefix
):
    enc = Encoder(offset, size)

    assert enc.left_size() == want_left
    assert enc.prefix_size() == want_pre
    assert enc.right_size() == want_right
    assert enc.left_size() + enc.prefix_size() + enc.right_size() == 32

    got = enc.encode(orig)
    assert got == want_enc
    assert enc.prefix(got) == want_prefix
    assert enc.decode(got) == orig


def test_prefix_hex_helpers():
    enc = Encoder(11, 13)
    assert enc.prefix_hex_size() == 4
    assert enc.prefix_hex_pad(0x1F00) == 0xF800
    assert enc.encoded_bits() == 32


def test_prefix_hex_pad_aligned_size_is_unchanged():
    enc = Encoder(8, 8)
    assert enc.prefix_hex_size() == 2
    assert enc.prefix_hex_pad(0x6A) == 0x6A


@pytest.mark.parametrize(
    "x, count, expected",
    [(0x56, 8, 0x6A), (0x1F, 13, 0x1F00), (0b1, 4, 0b1000), (0xFF, 0, 0), (0x1F6, 4, 0x6)],
)
def test_reverse_bits(x, count, expected):
    assert reverse_bits(x, count) == expected


@pytest.mark.parametrize(
    "value",
    [0, 1, 2047, 2048, 2049, 0x7FFFFFFF, 0x80000000, 0xFFFFF7FE, 0xFFFFFFFF, 0xDEADBEEF],
)
def test_round_trip(value):
    enc = Encoder(11, 13)
    assert enc.decode(enc.encode(value)) == value


def test_zero_width_field_is_identity():
    enc = Encoder(0, 0)
    assert enc.encode(0xCAFEBABE) == 0xCAFEBABE
    assert enc.prefix(0xCAFEBABE) == 0


@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_out_of_range_values_rejected(value):
    enc = Encoder(11, 13)
    with pytest.raises(ValueError):
        enc.encode(value)
    with pytest.raises(ValueError):
        enc.decode(value)


@pytest.mark.parametrize("offset, size", [(30, 4), (-1, 4), (4, -1)])
def test_invalid_layout_rejected(offset, size):
    with pytest.raises(ValueError):
        Encoder(offset, size)