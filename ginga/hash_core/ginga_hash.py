"""
Ginga-Hash-256

This module implements the Ginga hash function. Input is padded with a
0x80 byte, zero bytes and the 64-bit little-endian bit length, then
processed in 32-byte blocks. Each block is mixed into a 16-word chaining
state by 8 rounds of the ARX round function keyed with the message
words, followed by a feed-forward of the message and the previous state.
The digest is the first 8 words of the final state.
"""

import logging
from typing import Sequence, Tuple

from ..arx.primitives import rotl, round_function, sub_key, word_at
from ..arx.codec import words_from_bytes, words_to_bytes, pack_u64_le
from ..errors import require_bytes, require_length

logger = logging.getLogger(__name__)

BLOCK_SIZE = 32
DIGEST_SIZE = 32
ROUNDS = 8
STATE_WORDS = 16

# Hexadecimal digits of pi
INITIAL_STATE = (
    0x243F6A88, 0x85A308D3, 0x13198A2E, 0x03707344,
    0xA4093822, 0x299F31D0, 0x082EFA98, 0xEC4E6C89,
    0x452821E6, 0x38D01377, 0xBE5466CF, 0x34E90C6C,
    0xC0AC29B7, 0xC97C50DD, 0x3F84D5B5, 0xB5470917,
)


def _padding(message_length: int) -> bytes:
    """Return the padding that follows a message of the given length."""
    zeros = (BLOCK_SIZE - (message_length + 1 + 8) % BLOCK_SIZE) % BLOCK_SIZE
    return b'\x80' + bytes(zeros) + pack_u64_le(message_length * 8)


def pad_message(message: bytes) -> bytes:
    """
    Pad a message to a multiple of the block size.

    Args:
        message: The raw message

    Returns:
        message || 0x80 || zeros || 64-bit little-endian bit length
    """
    return message + _padding(len(message))


def mix_state512(state: Sequence[int]) -> Tuple[int, ...]:
    """
    Diffuse the 16-word chaining state.

    Word j absorbs word j+3 (cyclically) rotated by 7*j + 13. Updates are
    sequential, so the last three words read already mixed values.
    """
    s = list(state)
    for j in range(STATE_WORDS):
        s[j] ^= rotl(word_at(s, j + 3), (7 * j + 13) & 31)
    return tuple(s)


def compress(state: Sequence[int], block: bytes) -> Tuple[int, ...]:
    """
    Compress one 32-byte block into the chaining state.

    Args:
        state: The 16-word chaining state
        block: A 32-byte message block

    Returns:
        The new chaining state
    """
    block = require_length("Block", block, BLOCK_SIZE)
    m = words_from_bytes(block)
    prev = tuple(state)

    s = prev
    for r in range(ROUNDS):
        s = tuple(round_function(s[j], sub_key(m, r, j & 7), r) for j in range(STATE_WORDS))
        s = mix_state512(s)

    # Feed-forward of message and previous state
    return tuple(s[j] ^ word_at(m, j) ^ prev[j] for j in range(STATE_WORDS))


class GingaHash:
    """
    Incremental Ginga-Hash-256 object with a hashlib-like interface.
    """

    name = 'ginga256'
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b''):
        self._state = INITIAL_STATE
        self._buffer = b''
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """
        Feed more data into the hash.

        Args:
            data: Bytes-like data of any length
        """
        data = require_bytes("Data", data)
        self._length += len(data)
        buffer = self._buffer + data

        full = len(buffer) - len(buffer) % BLOCK_SIZE
        for i in range(0, full, BLOCK_SIZE):
            self._state = compress(self._state, buffer[i:i + BLOCK_SIZE])
        self._buffer = buffer[full:]

    def digest(self) -> bytes:
        """
        Return the digest of the data fed so far.

        The running state is left untouched, so more data can be added
        afterwards.
        """
        tail = self._buffer + _padding(self._length)
        state = self._state
        for i in range(0, len(tail), BLOCK_SIZE):
            state = compress(state, tail[i:i + BLOCK_SIZE])
        logger.debug("Finalized Ginga hash over %d bytes", self._length)
        return words_to_bytes(state[:DIGEST_SIZE // 4])

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> 'GingaHash':
        """Return an independent copy of the current hash state."""
        other = GingaHash()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other


def new(data: bytes = b'') -> GingaHash:
    """Create a new GingaHash object, optionally fed with initial data."""
    return GingaHash(data)


def ginga_hash(message: bytes) -> bytes:
    """
    Compute the Ginga-Hash-256 digest of a message.

    Args:
        message: The message to hash, any length

    Returns:
        The 32-byte digest
    """
    return GingaHash(message).digest()
