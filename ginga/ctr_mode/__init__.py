"""
Counter Mode Package

This package turns the Ginga-128 block cipher into a stream cipher by
encrypting a nonce-derived counter block per 16-byte chunk of data.
"""

from .ctr import GingaCTR, ctr_mode, encrypt, decrypt, build_counter_block, NONCE_SIZE

__all__ = ['GingaCTR', 'ctr_mode', 'encrypt', 'decrypt', 'build_counter_block', 'NONCE_SIZE']
