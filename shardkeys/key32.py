"""Bit-shuffling encoder for 32-bit shard keys.

A run of ``size`` bits starting at bit ``offset`` (0 = least significant)
is extracted, reversed and placed in the top ``size`` bits of the word.
The bits above the run slide down to fill the gap, and the bits below it
stay where they are.
"""

from dataclasses import dataclass, field

VALUE_BITS = 32
_VALUE_MASK = (1 << VALUE_BITS) - 1


def reverse_bits(x: int, bit_count: int) -> int:
    """Reverse the low ``bit_count`` bits of ``x``; higher bits are ignored."""
    if bit_count <= 0:
        return 0
    low = x & ((1 << bit_count) - 1)
    return int(format(low, f"0{bit_count}b")[::-1], 2)


def _check_value(v: int) -> int:
    if not 0 <= v <= _VALUE_MASK:
        raise ValueError(f"value {v!r} does not fit in {VALUE_BITS} unsigned bits")
    return v


@dataclass(frozen=True)
class Encoder:
    """Encodes and decodes 32-bit values with a reversed shard prefix."""

    offset: int
    size: int
    hex_digits: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.offset < 0 or self.size < 0:
            raise ValueError("offset and size must not be negative")
        if self.offset + self.size > VALUE_BITS:
            raise ValueError(
                f"offset + size must not exceed {VALUE_BITS} "
                f"(got {self.offset} + {self.size})"
            )
        object.__setattr__(self, "hex_digits", (self.size + 3) // 4)

    def left_size(self) -> int:
        """Number of low bits to the right of the prefix field."""
        return self.offset

    def prefix_size(self) -> int:
        """Width of the prefix in bits."""
        return self.size

    def right_size(self) -> int:
        """Number of high bits to the left of the prefix field."""
        return VALUE_BITS - self.offset - self.size

    def encoded_bits(self) -> int:
        """Number of bits in an encoded value."""
        return VALUE_BITS

    def encode(self, v: int) -> int:
        """Move the reversed shard field of ``v`` into the top bits."""
        v = _check_value(v)
        mask = (1 << self.size) - 1
        shard = (v >> self.offset) & mask
        rev = reverse_bits(shard, self.size)
        left = v >> (self.offset + self.size)
        right = v & ((1 << self.offset) - 1)
        encoded = (rev << (VALUE_BITS - self.size)) | (left << self.offset) | right
        return encoded & _VALUE_MASK

    def decode(self, value: int) -> int:
        """Invert :meth:`encode`, returning the original value."""
        u = _check_value(value)
        mask = (1 << self.size) - 1
        rev = (u >> (VALUE_BITS - self.size)) & mask
        shard = reverse_bits(rev, self.size)
        left = (u >> self.offset) & ((1 << (VALUE_BITS - self.size - self.offset)) - 1)
        right = u & ((1 << self.offset) - 1)
        decoded = (left << (self.offset + self.size)) | (shard << self.offset) | right
        return decoded & _VALUE_MASK

    def prefix(self, value: int) -> int:
        """Return the top ``size`` bits of an encoded value."""
        u = _check_value(value)
        return (u >> (VALUE_BITS - self.size)) & ((1 << self.size) - 1)

    def prefix_hex_pad(self, prefix: int) -> int:
        """Shift a prefix so its top bit sits at the top of its hex nibbles."""
        return prefix << (self.hex_digits * 4 - self.size)

    def prefix_hex_size(self) -> int:
        """Number of hex digits needed to show the prefix."""
        return (self.size + 3) // 4