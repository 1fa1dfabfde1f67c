"""
Word Codecs

Fixed-width conversions between byte strings and integers. State, key
and digest words are little-endian; the CTR counter field is big-endian.
"""

import struct
from typing import Sequence, Tuple


def words_from_bytes(data: bytes) -> Tuple[int, ...]:
    """
    Split a byte string into little-endian 32-bit words.

    Args:
        data: Input bytes, length a multiple of 4

    Returns:
        A tuple of words
    """
    if len(data) % 4:
        raise ValueError("Data length must be a multiple of 4 bytes")
    return struct.unpack(f'<{len(data) // 4}I', data)


def words_to_bytes(words: Sequence[int]) -> bytes:
    """Serialize 32-bit words low-word-first, each little-endian."""
    return struct.pack(f'<{len(words)}I', *words)


def pack_u32_be(value: int) -> bytes:
    """Encode a 32-bit counter big-endian."""
    return struct.pack('>I', value)


def pack_u64_le(value: int) -> bytes:
    """Encode a value modulo 2**64 as 8 little-endian bytes."""
    return struct.pack('<Q', value & 0xFFFFFFFFFFFFFFFF)
