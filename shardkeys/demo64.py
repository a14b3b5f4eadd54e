"""Print a table showing how 64-bit sample values are encoded."""

import argparse
from typing import Iterable, List, Optional, Sequence

from shardkeys.key64 import Encoder

MASK_OFFSET = 11
MASK_SIZE = 13
_PADDING = 3
_MAX_UINT32 = (1 << 32) - 1
_MAX_UINT64 = (1 << 64) - 1
_HEADER = ("Input", "Decimal", "Hex", "Binary")
_SEPARATOR = ("-" * 7, "-" * 20, "-" * 16, "-" * 64)


def example_values() -> List[int]:
    """Return the demonstration values."""
    return [
        0,
        1,
        (1 << MASK_OFFSET) - 1,
        (1 << MASK_OFFSET),
        (1 << MASK_OFFSET) + 1,
        (2 << MASK_OFFSET) - 1,
        (2 << MASK_OFFSET),
        (2 << MASK_OFFSET) + 1,
        _MAX_UINT32 - 1,
        _MAX_UINT32,
        _MAX_UINT32 + 1,
        _MAX_UINT64 - 1,
        _MAX_UINT64,
        0x0123456789ABCDEF - 1,
        0x0123456789ABCDEF,
        0x0123456789ABCDEF + 1,
    ]


def unique_sorted(values: Iterable[int]) -> List[int]:
    """Return the distinct values in ascending order."""
    return sorted(set(values))


def _align_left(rows: Sequence[Sequence[str]]) -> str:
    columns = max((len(row) for row in rows), default=0)
    widths = [
        max((len(row[i]) for row in rows if i < len(row)), default=0) + _PADDING
        for i in range(columns)
    ]
    return "".join(
        "".join(cell.ljust(width) for cell, width in zip(row, widths)) + "\n"
        for row in rows
    )


def render_table(encoder: Encoder, values: Iterable[int]) -> str:
    """Render original, encoded and prefix rows for each value as a table."""
    hex_digits = encoder.prefix_hex_size()
    prefix_bits = encoder.prefix_size()
    rows: List[Sequence[str]] = [_HEADER, _SEPARATOR]
    for v in values:
        encoded = encoder.encode(v)
        decoded = encoder.decode(encoded)
        if decoded != v:
            raise RuntimeError(f"round-trip failed: got {decoded:x}, want {v:x}")
        prefix = encoder.prefix(encoded)
        padded = encoder.prefix_hex_pad(prefix)
        rows.append(("orig", f"{v:20d}", f"{v:016x}", f"{v:064b}"))
        rows.append(
            ("encoded", f"{encoded:20d}", f"{encoded:016x}", f"{encoded:064b}")
        )
        rows.append((
            "prefix",
            f"{prefix:20d}",
            f"{padded:0{hex_digits}x}",
            f"{padded:0{prefix_bits}b}",
        ))
        rows.append(_SEPARATOR)
    return _align_left(rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the 64-bit encoding table."""
    parser = argparse.ArgumentParser(
        description="Show how sample 64-bit values are encoded."
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