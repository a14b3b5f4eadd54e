# shardkeys

Encoders that spread monotonically increasing keys (counters, timestamps,
UUIDv7s, ULIDs) across a cluster's key space.

Each encoder takes a run of bits from the middle of a key, reverses them, and
moves them into the key's top bits. The bits above the run slide down to fill
the gap; the bits below it stay where they are. Neighbouring keys then land in
different shards, and the transformation can be undone exactly.

The package has no dependencies beyond the standard library.

## Install

```
pip install shardkeys
```

## Integer keys

`shardkeys.key32.Encoder` works on 32-bit values and `shardkeys.key64.Encoder`
on 64-bit values. Both take the offset of the field from the least
significant bit, then its width.

```python
from shardkeys.key32 import Encoder

enc = Encoder(11, 13)          # 13 bits starting at bit 11
encoded = enc.encode(0x0000FFFF)
assert encoded == 0xF80007FF
assert enc.decode(encoded) == 0x0000FFFF

shard = enc.prefix(encoded)    # the reversed 13-bit field
print(f"{enc.prefix_hex_pad(shard):0{enc.prefix_hex_size()}x}")
```

Methods of the integer encoders:

- `encode(v)` and `decode(value)` convert between original and encoded keys.
- `prefix(value)` returns the top `size` bits of an encoded key.
- `prefix_hex_pad(prefix)` shifts a prefix left so that its top bit sits at
  the top of a whole number of hex digits; `prefix_hex_size()` gives that
  number of digits.
- `left_size()` gives the number of low bits left untouched (the offset).
- `prefix_size()` gives the width of the shard prefix.
- `right_size()` gives the number of high bits left over.
- `encoded_bits()` gives the width of the encoded word, 32 or 64.

Both modules also expose `reverse_bits(x, bit_count)`, which reverses the low
`bit_count` bits of `x`.

A `ValueError` is raised when the offset or width is negative, when their sum
exceeds the word width, or when a value passed to `encode`, `decode` or
`prefix` does not fit in the word as an unsigned integer.

## UUID keys

`shardkeys.keyuuid.Encoder(total_bits, mask_offset, prefix_size_bits)` works on
`uuid.UUID` values. It applies the same transformation inside the top
`total_bits` (at most 64) of the UUID; every other bit is kept unchanged.

```python
import uuid
from shardkeys.keyuuid import uuidv7_encoder, ulid_encoder, Encoder

enc = uuidv7_encoder()         # 4-bit shard at offset 11 of the 48-bit timestamp
u = uuid.UUID("018f14e0-8f0a-7def-91b4-f0ecb69f5f01")
assert enc.decode(enc.encode(u)) == u
print(enc.prefix(enc.encode(u)))   # only the shard bits set

identity = Encoder(0, 0, 0)    # passes UUIDs through unchanged
```

`ulid_encoder()` uses a 16-bit shard at offset 16 of the 48-bit ULID
timestamp. A ULID's 16 bytes can be passed as `uuid.UUID(bytes=...)`.

`prefix(u)` returns a UUID holding only the top `prefix_size_bits` bits of
`u`; for the identity encoder it returns the all-zero UUID. `left_size()`,
`prefix_size()` and `right_size()` describe the layout inside the
`total_bits` field; for the identity encoder they are 128, 0 and 0.

Invalid parameter combinations raise `ValueError`.

## Demo tables

Two commands print tables of sample values, their encoded forms and their
prefixes. Both use an offset of 11 and a width of 13:

```
shardkeys-demo32
shardkeys-demo64
```

The same tables are available from Python through
`shardkeys.demo32.render_table(encoder, values)` and
`shardkeys.demo64.render_table(encoder, values)`, which return the table as a
string and raise `RuntimeError` if a value fails to round-trip. The 32-bit
table truncates values wider than 32 bits to their low 32 bits.

## Scope

This is a library of key transformations only. It does not generate UUIDs or
ULIDs, store keys, or assign keys to servers; pair it with your own ID
generator and storage.