"""
Ginga - ARX Symmetric Primitive Library

This library implements the Ginga family of symmetric primitives built
from Addition, Rotation and XOR on 32-bit words.

Key Features:
- Ginga-128 block cipher (128-bit block, 256-bit key, 16 rounds)
- CTR mode turning the block cipher into a stream cipher
- Ginga-Hash-256 with a 512-bit chaining state
- HMAC-Ginga message authentication
- Statistical avalanche and uniformity measurements

CTR mode provides confidentiality only; no integrity tag is bound to
the ciphertext.
"""

from .cipher_core import GingaBlockCipher, encrypt_block, decrypt_block
from .ctr_mode import GingaCTR, ctr_mode
from .hash_core import GingaHash, ginga_hash
from .hmac import hmac_ginga, hmac_verify
from .errors import GingaError, InvalidLengthError

__version__ = '0.1.0'
__author__ = 'Ginga Team'

__all__ = ['GingaBlockCipher', 'encrypt_block', 'decrypt_block',
           'GingaCTR', 'ctr_mode', 'GingaHash', 'ginga_hash',
           'hmac_ginga', 'hmac_verify', 'GingaError', 'InvalidLengthError']
