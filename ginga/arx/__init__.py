"""
ARX Primitive Package

This package implements the Addition-Rotation-XOR building blocks shared
by the Ginga block cipher and the Ginga hash, together with the
fixed-width word codecs used to move between bytes and 32-bit words.
"""

from .primitives import (rotl, rotr, confuse, deconfuse, round_function,
                         inv_round_function, sub_key, word_at, WORD_MASK)
from .codec import words_from_bytes, words_to_bytes, pack_u32_be, pack_u64_le

__all__ = ['rotl', 'rotr', 'confuse', 'deconfuse', 'round_function',
           'inv_round_function', 'sub_key', 'word_at', 'WORD_MASK',
           'words_from_bytes', 'words_to_bytes', 'pack_u32_be', 'pack_u64_le']
