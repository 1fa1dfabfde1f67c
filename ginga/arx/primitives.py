"""
ARX Primitives

This module implements the word-level operations both Ginga primitives
are built from: 32-bit rotations, the fixed "confuse" permutation, the
keyed round function and the subkey selector. Every function is pure and
closed over 32-bit wraparound arithmetic.
"""

from typing import Sequence

WORD_BITS = 32
WORD_MASK = 0xFFFFFFFF

# Constants of the confusion step
CONFUSE_XOR = 0xA5A5A5A5
CONFUSE_ADD = 0x3C3C3C3C
CONFUSE_ROTATION = 7


def rotl(value: int, shift: int) -> int:
    """
    Rotate a 32-bit word left.

    Args:
        value: The word to rotate
        shift: Rotation amount, already reduced to 0..31

    Returns:
        The rotated word
    """
    return ((value << shift) | (value >> (WORD_BITS - shift))) & WORD_MASK


def rotr(value: int, shift: int) -> int:
    """
    Rotate a 32-bit word right.

    Args:
        value: The word to rotate
        shift: Rotation amount, already reduced to 0..31

    Returns:
        The rotated word
    """
    return ((value >> shift) | (value << (WORD_BITS - shift))) & WORD_MASK


def confuse(x: int) -> int:
    """XOR, add and rotate with fixed constants."""
    x ^= CONFUSE_XOR
    x = (x + CONFUSE_ADD) & WORD_MASK
    return rotl(x, CONFUSE_ROTATION)


def deconfuse(x: int) -> int:
    """Inverse of confuse()."""
    x = rotr(x, CONFUSE_ROTATION)
    x = (x - CONFUSE_ADD) & WORD_MASK
    return x ^ CONFUSE_XOR


def round_function(x: int, k: int, r: int) -> int:
    """
    Apply one keyed round to a single word.

    Args:
        x: The state word
        k: The subkey for this word and round
        r: The round index

    Returns:
        The transformed word
    """
    x = (x + k) & WORD_MASK
    x = confuse(x)
    x = rotl(x, (r + 3) & 31)
    x ^= k
    return rotl(x, (r + 5) & 31)


def inv_round_function(x: int, k: int, r: int) -> int:
    """
    Undo round_function() for the same subkey and round index.

    Args:
        x: The transformed word
        k: The subkey used in the forward direction
        r: The round index

    Returns:
        The original word
    """
    x = rotr(x, (r + 5) & 31)
    x ^= k
    x = rotr(x, (r + 3) & 31)
    x = deconfuse(x)
    return (x - k) & WORD_MASK


def word_at(words: Sequence[int], index: int) -> int:
    """Read words[index] with the index wrapped around the sequence."""
    return words[index % len(words)]


def sub_key(key_words: Sequence[int], round_index: int, i: int) -> int:
    """
    Derive the subkey for word i in the given round.

    The key words are indexed cyclically (8 words for both the cipher key
    and a hash message block).

    Args:
        key_words: The 8 key (or message) words
        round_index: The round index
        i: The word position inside the state

    Returns:
        A 32-bit subkey
    """
    base = word_at(key_words, i + round_index)
    tweak = (i * 73 + round_index * 91) & WORD_MASK
    return rotl(base ^ tweak, (round_index + i) & 31)
