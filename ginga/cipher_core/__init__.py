"""
Cipher Core Package

This package implements Ginga-128, a 16-round ARX block cipher with a
128-bit block and a 256-bit key, including the diffusion layer and the
encryption/decryption operations.
"""

from .block_cipher import (GingaBlockCipher, encrypt_block, decrypt_block,
                           mix_state, inv_mix_state, BLOCK_SIZE, KEY_SIZE, ROUNDS)

__all__ = ['GingaBlockCipher', 'encrypt_block', 'decrypt_block',
           'mix_state', 'inv_mix_state', 'BLOCK_SIZE', 'KEY_SIZE', 'ROUNDS']
