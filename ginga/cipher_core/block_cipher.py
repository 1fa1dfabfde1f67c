"""
Block Cipher Implementation

This module provides the core implementation of Ginga-128, an ARX
(Addition-Rotation-XOR) symmetric block cipher with a 128-bit block
and a 256-bit key.

Each round applies the keyed round function to the four state words and
then runs a diffusion layer that chains every word into its neighbour,
so after a few rounds each output word depends on every input word.
"""

import logging
from typing import Tuple

from ..arx.primitives import rotl, round_function, inv_round_function, sub_key
from ..arx.codec import words_from_bytes, words_to_bytes
from ..errors import require_length

logger = logging.getLogger(__name__)

BLOCK_SIZE = 16  # bytes, 4 words
KEY_SIZE = 32    # bytes, 8 words
ROUNDS = 16

State = Tuple[int, int, int, int]


def mix_state(state: State) -> State:
    """
    Apply the diffusion layer to a 4-word state.

    The words are updated in order, so word 3 absorbs the already
    updated word 0.

    Args:
        state: The 4 state words

    Returns:
        The mixed state
    """
    s0, s1, s2, s3 = state
    s0 ^= rotl(s1, 5)
    s1 ^= rotl(s2, 11)
    s2 ^= rotl(s3, 17)
    s3 ^= rotl(s0, 23)
    return s0, s1, s2, s3


def inv_mix_state(state: State) -> State:
    """Undo mix_state(), walking the dependency chain backwards."""
    s0, s1, s2, s3 = state
    s3 ^= rotl(s0, 23)
    s2 ^= rotl(s3, 17)
    s1 ^= rotl(s2, 11)
    s0 ^= rotl(s1, 5)
    return s0, s1, s2, s3


class GingaBlockCipher:
    """
    Ginga-128 block cipher bound to a single 256-bit key.
    """

    block_size = BLOCK_SIZE
    key_size = KEY_SIZE

    def __init__(self, key: bytes, num_rounds: int = ROUNDS):
        """
        Initialize the block cipher with a key.

        Args:
            key: The secret key (32 bytes)
            num_rounds: Number of rounds (default: 16)

        Raises:
            InvalidLengthError: If the key is not 32 bytes
            ValueError: If num_rounds is not positive
        """
        key = require_length("Key", key, KEY_SIZE)
        if num_rounds < 1:
            raise ValueError("Number of rounds must be at least 1")

        self.num_rounds = num_rounds
        self._key_words = words_from_bytes(key)

        # The subkey schedule only depends on the key, so derive it once
        self._round_keys = tuple(
            tuple(sub_key(self._key_words, r, i) for i in range(4))
            for r in range(num_rounds)
        )
        logger.debug("Initialized Ginga-128 with %d rounds", num_rounds)

    def _encrypt_words(self, state: State) -> State:
        for r in range(self.num_rounds):
            keys = self._round_keys[r]
            state = tuple(round_function(state[i], keys[i], r) for i in range(4))
            state = mix_state(state)
        return state

    def _decrypt_words(self, state: State) -> State:
        for r in range(self.num_rounds - 1, -1, -1):
            state = inv_mix_state(state)
            keys = self._round_keys[r]
            state = tuple(inv_round_function(state[i], keys[i], r) for i in range(4))
        return state

    def encrypt_block(self, plaintext: bytes) -> bytes:
        """
        Encrypt a single 16-byte block.

        Args:
            plaintext: The plaintext block to encrypt

        Returns:
            The encrypted ciphertext block

        Raises:
            InvalidLengthError: If the block is not 16 bytes
        """
        plaintext = require_length("Plaintext", plaintext, BLOCK_SIZE)
        return words_to_bytes(self._encrypt_words(words_from_bytes(plaintext)))

    def decrypt_block(self, ciphertext: bytes) -> bytes:
        """
        Decrypt a single 16-byte block.

        Args:
            ciphertext: The ciphertext block to decrypt

        Returns:
            The decrypted plaintext block

        Raises:
            InvalidLengthError: If the block is not 16 bytes
        """
        ciphertext = require_length("Ciphertext", ciphertext, BLOCK_SIZE)
        return words_to_bytes(self._decrypt_words(words_from_bytes(ciphertext)))


def encrypt_block(plaintext: bytes, key: bytes, num_rounds: int = ROUNDS) -> bytes:
    """
    Convenience function to encrypt a single block.

    Args:
        plaintext: The plaintext block to encrypt (16 bytes)
        key: The key (32 bytes)
        num_rounds: Number of rounds (default: 16)

    Returns:
        The encrypted ciphertext block
    """
    return GingaBlockCipher(key, num_rounds=num_rounds).encrypt_block(plaintext)


def decrypt_block(ciphertext: bytes, key: bytes, num_rounds: int = ROUNDS) -> bytes:
    """
    Convenience function to decrypt a single block.

    Args:
        ciphertext: The ciphertext block to decrypt (16 bytes)
        key: The key (32 bytes)
        num_rounds: Number of rounds (default: 16)

    Returns:
        The decrypted plaintext block
    """
    return GingaBlockCipher(key, num_rounds=num_rounds).decrypt_block(ciphertext)
