"""
Hash Core Package

This package implements Ginga-Hash-256, a Merkle-Damgard hash with a
512-bit chaining state, an 8-round ARX compression function and a
256-bit digest.
"""

from .ginga_hash import (GingaHash, new, ginga_hash, compress, pad_message,
                         mix_state512, BLOCK_SIZE, DIGEST_SIZE)

__all__ = ['GingaHash', 'new', 'ginga_hash', 'compress', 'pad_message',
           'mix_state512', 'BLOCK_SIZE', 'DIGEST_SIZE']
