"""Print a table showing how 32-bit sample values are encoded."""

import argparse
from typing import Iterable, List, Optional, Sequence

from shardkeys.key32 import VALUE_BITS, Encoder

MASK_OFFSET = 11
MASK_SIZE = 13
_PADDING = 3
_MAX_UINT32 = (1 << 32) - 1
_HEADER = (
    "orig(dec)",
    "orig(hex)",
    "orig(bin)",
    "enc(hex)",
    "enc(bin)",
    "prefix(hex)",
    "prefix(bin)",
)


def example_values() -> List[int]:
    """Return the demonstration values, duplicates and all."""
    seq = [
        0, 1, 2, 3, 4, 127, 128, 129, 255, 256, 1023, 1024,
        (1 << MASK_OFFSET) - 1,
        (1 << MASK_OFFSET),
        (1 << MASK_OFFSET) + 1,
        (2 << MASK_OFFSET) - 1,
        (2 << MASK_OFFSET),
        (2 << MASK_OFFSET) + 1,
        (_MAX_UINT32 - (1 << MASK_OFFSET)) - 1,
        (_MAX_UINT32 - (1 << MASK_OFFSET)),
        (_MAX_UINT32 - (1 << MASK_OFFSET)) + 1,
        _MAX_UINT32 - 1,
        _MAX_UINT32,
    ]
    for i in range(2, 33):
        base = i << MASK_OFFSET
        seq.extend((base - 1, base, base + 1))
    seq.extend(((1 << 31) - 1, 1 << 31, (1 << 31) + 1, (1 << 32) - 1, 1 << 32))
    return seq


def unique_sorted(values: Iterable[int]) -> List[int]:
    """Return the distinct values in ascending order."""
    return sorted(set(values))


def _align_right(rows: Sequence[Sequence[str]]) -> str:
    columns = max((len(row) for row in rows), default=0)
    widths = [
        max((len(row[i]) for row in rows if i < len(row)), default=0) + _PADDING
        for i in range(columns)
    ]
    return "".join(
        "".join(cell.rjust(width) for cell, width in zip(row, widths)) + "\n"
        for row in rows
    )


def render_table(encoder: Encoder, values: Iterable[int]) -> str:
    """Render original, encoded and prefix forms of each value as a table.

    Values wider than 32 bits are truncated to their low 32 bits.
    """
    value_mask = (1 << VALUE_BITS) - 1
    hex_digits = encoder.prefix_hex_size()
    prefix_bits = encoder.prefix_size()
    rows: List[List[str]] = [list(_HEADER)]
    for v in values:
        orig = v & value_mask
        encoded = encoder.encode(orig)
        decoded = encoder.decode(encoded)
        if decoded != orig:
            raise RuntimeError(f"round-trip failed: got {decoded}, want {orig}")
        prefix = encoder.prefix(encoded)
        rows.append([
            f"{orig:10d}",
            f"{orig:08x}",
            f"{orig:032b}",
            f"{encoded:08x}",
            f"{encoded:032b}",
            f"{encoder.prefix_hex_pad(prefix):0{hex_digits}x}",
            f"{prefix:0{prefix_bits}b}",
        ])
    return _align_right(rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the 32-bit encoding table."""
    parser = argparse.ArgumentParser(
        description="Show how sample 32-bit values are encoded."
    )
    parser.parse_args(argv)

    encoder = Encoder(MASK_OFFSET, MASK_SIZE)
    print(f"mask offset:\t{MASK_OFFSET}")
    print(f"mask size:\t{MASK_SIZE}")
    print(f"hex nibbles:\t{encoder.prefix_hex_size()}")
    print(render_table(encoder, unique_sorted(example_values())), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())