"""Reversible bit-shuffling encoders for 32-bit, 64-bit and UUID shard keys, with demo tables."""

__version__ = "0.1.0"
__all__ = ["key32", "key64", "keyuuid", "demo32", "demo64"]