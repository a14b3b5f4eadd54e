"""Shard-prefix encoder for UUIDs and ULID-shaped 128-bit identifiers.

The encoder works on the top ``total_bits`` of the UUID's first eight
bytes (the timestamp of a UUIDv7 or ULID). Within that field a run of
``prefix_size`` bits at ``mask_offset`` is reversed and moved to the top.
An encoder with all three parameters zero is the identity.
"""

import uuid
from dataclasses import dataclass

_MSB_BITS = 64
_MSB_MASK = (1 << _MSB_BITS) - 1


def reverse_bits(x: int, bit_count: int) -> int:
    """Reverse the low ``bit_count`` bits of ``x``; higher bits are ignored."""
    if bit_count <= 0:
        return 0
    low = x & ((1 << bit_count) - 1)
    return int(format(low, f"0{bit_count}b")[::-1], 2)


def _with_msb(msb: int, rest: bytes) -> uuid.UUID:
    return uuid.UUID(bytes=(msb & _MSB_MASK).to_bytes(8, "big") + rest)


@dataclass(frozen=True)
class Encoder:
    """Encodes and decodes UUIDs with a reversed shard prefix."""

    total_bits: int
    mask_offset: int
    prefix_size_bits: int

    def __post_init__(self) -> None:
        if self._is_identity:
            return
        if min(self.total_bits, self.mask_offset, self.prefix_size_bits) < 0:
            raise ValueError("encoder parameters must not be negative")
        if not 0 < self.total_bits <= _MSB_BITS:
            raise ValueError(f"total_bits must be between 1 and {_MSB_BITS}")
        if self.mask_offset + self.prefix_size_bits > self.total_bits:
            raise ValueError("mask_offset + prefix_size must not exceed total_bits")

    @property
    def _is_identity(self) -> bool:
        return self.total_bits == 0 and self.mask_offset == 0 and self.prefix_size_bits == 0

    def left_size(self) -> int:
        """Number of field bits above the shard run (128 for the identity)."""
        if self.total_bits == 0:
            return 128
        return self.total_bits - self.mask_offset - self.prefix_size_bits

    def prefix_size(self) -> int:
        """Number of bits in the prefix."""
        return self.prefix_size_bits

    def right_size(self) -> int:
        """Number of field bits below the shard run."""
        if self.total_bits == 0:
            return 0
        return self.mask_offset

    def encode(self, u: uuid.UUID) -> uuid.UUID:
        """Move the reversed shard run into the top bits of the UUID."""
        if self._is_identity:
            return u
        raw = u.bytes
        msb = int.from_bytes(raw[:8], "big")
        low_bits = _MSB_BITS - self.total_bits
        target = msb >> low_bits

        mask = (1 << self.prefix_size_bits) - 1
        shard = (target >> self.mask_offset) & mask
        rev = reverse_bits(shard, self.prefix_size_bits)
        left = target >> (self.mask_offset + self.prefix_size_bits)
        right = target & ((1 << self.mask_offset) - 1)

        encoded = (
            (rev << (self.total_bits - self.prefix_size_bits))
            | (left << self.mask_offset)
            | right
        )
        new_msb = (encoded << low_bits) | (msb & ((1 << low_bits) - 1))
        return _with_msb(new_msb, raw[8:])

    def decode(self, u: uuid.UUID) -> uuid.UUID:
        """Invert :meth:`encode`."""
        if self._is_identity:
            return u
        raw = u.bytes
        msb = int.from_bytes(raw[:8], "big")
        low_bits = _MSB_BITS - self.total_bits
        target = msb >> low_bits

        mask = (1 << self.prefix_size_bits) - 1
        rev = (target >> (self.total_bits - self.prefix_size_bits)) & mask
        shard = reverse_bits(rev, self.prefix_size_bits)
        left_width = self.total_bits - self.mask_offset - self.prefix_size_bits
        left = (target >> self.mask_offset) & ((1 << left_width) - 1)
        right = target & ((1 << self.mask_offset) - 1)

        decoded = (
            (left << (self.mask_offset + self.prefix_size_bits))
            | (shard << self.mask_offset)
            | right
        )
        new_msb = (decoded << low_bits) | (msb & ((1 << low_bits) - 1))
        return _with_msb(new_msb, raw[8:])

    def prefix(self, u: uuid.UUID) -> uuid.UUID:
        """Return a UUID holding only the top prefix bits of ``u``."""
        if self._is_identity:
            return uuid.UUID(int=0)
        msb = int.from_bytes(u.bytes[:8], "big")
        shift = _MSB_BITS - self.prefix_size_bits
        top = (msb >> shift) & ((1 << self.prefix_size_bits) - 1)
        return _with_msb(top << shift, bytes(8))


def uuidv7_encoder() -> Encoder:
    """Encoder over a UUIDv7 48-bit timestamp: 4 bits reversed at offset 11."""
    return Encoder(48, 11, 4)


def ulid_encoder() -> Encoder:
    """Encoder over a ULID 48-bit timestamp: 16 bits reversed at offset 16."""
    return Encoder(48, 16, 16)