"""
CTR Mode Encryption

This module implements counter mode for the Ginga-128 block cipher.

The 16-byte nonce is split into a 12-byte fixed prefix and a 4-byte
counter field. Whatever the caller puts in bytes 12..15 is overwritten
with the big-endian block index, so only the first 12 bytes carry
nonce material. The same nonce must never be reused under one key.
"""

import logging
from typing import Optional

from ..arx.codec import pack_u32_be
from ..cipher_core.block_cipher import GingaBlockCipher, BLOCK_SIZE, KEY_SIZE
from ..errors import InvalidLengthError, require_bytes, require_length

logger = logging.getLogger(__name__)

NONCE_SIZE = 16
COUNTER_OFFSET = 12
COUNTER_SIZE = 4
MAX_BLOCKS = 1 << (8 * COUNTER_SIZE)


def build_counter_block(nonce: bytes, index: int) -> bytes:
    """
    Build the counter block for a given block index.

    Args:
        nonce: The 16-byte nonce
        index: Zero-based block index (0 <= index < 2**32)

    Returns:
        The nonce with bytes 12..15 replaced by the big-endian index
    """
    if not 0 <= index < MAX_BLOCKS:
        raise ValueError(f"Block index {index} does not fit in the 32-bit counter")
    return nonce[:COUNTER_OFFSET] + pack_u32_be(index)


class GingaCTR:
    """
    Counter mode stream cipher over Ginga-128.

    Encryption and decryption are the same operation.
    """

    def __init__(self, key: bytes, nonce: bytes, block_cipher: Optional[GingaBlockCipher] = None):
        """
        Initialize CTR mode with a key and nonce.

        Args:
            key: The secret key (32 bytes)
            nonce: The nonce (16 bytes, last 4 bytes reserved for the counter)
            block_cipher: Optional pre-initialized block cipher for the same key;
                when given it is used instead of building one from key

        Raises:
            InvalidLengthError: If the key or nonce has the wrong length
        """
        self.nonce = require_length("Nonce", nonce, NONCE_SIZE)
        key = require_length("Key", key, KEY_SIZE)
        if block_cipher is None:
            self.cipher = GingaBlockCipher(key)
        else:
            self.cipher = block_cipher

    def keystream_block(self, index: int) -> bytes:
        """
        Compute the keystream for one block.

        Each block depends only on key, nonce and its own index, so blocks
        can be produced in any order.
        """
        return self.cipher.encrypt_block(build_counter_block(self.nonce, index))

    def process(self, data: bytes) -> bytes:
        """
        Encrypt or decrypt data of any length.

        Args:
            data: The data to transform

        Returns:
            The transformed data, same length as the input
        """
        data = require_bytes("Data", data)
        if not data:
            return b''

        num_blocks = (len(data) + BLOCK_SIZE - 1) // BLOCK_SIZE
        if num_blocks > MAX_BLOCKS:
            raise InvalidLengthError("Data", MAX_BLOCKS * BLOCK_SIZE, len(data), at_most=True)
        logger.debug("CTR processing %d bytes in %d blocks", len(data), num_blocks)

        result = bytearray()
        for i in range(num_blocks):
            block = data[i * BLOCK_SIZE:(i + 1) * BLOCK_SIZE]
            keystream = self.keystream_block(i)

            # The final block may be short; only use that much keystream
            result.extend(a ^ b for a, b in zip(block, keystream[:len(block)]))

        return bytes(result)


def ctr_mode(data: bytes, key: bytes, nonce: bytes) -> bytes:
    """
    Apply Ginga-128 CTR mode to data.

    Args:
        data: The data to encrypt or decrypt
        key: The key (32 bytes)
        nonce: The nonce (16 bytes)

    Returns:
        The transformed data
    """
    return GingaCTR(key, nonce).process(data)


def encrypt(plaintext: bytes, key: bytes, nonce: bytes) -> bytes:
    """Encrypt plaintext with Ginga-128 in CTR mode."""
    return ctr_mode(plaintext, key, nonce)


def decrypt(ciphertext: bytes, key: bytes, nonce: bytes) -> bytes:
    """Decrypt ciphertext produced by encrypt()."""
    return ctr_mode(ciphertext, key, nonce)
