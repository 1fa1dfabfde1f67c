"""
HMAC-based Authentication

This module implements the generic HMAC construction instantiated with
Ginga-Hash-256 (32-byte block, 32-byte tag).
"""

import hmac

from ..errors import require_bytes
from ..hash_core.ginga_hash import GingaHash, ginga_hash, BLOCK_SIZE

IPAD = 0x36
OPAD = 0x5C

_TRANS_36 = bytes(x ^ IPAD for x in range(256))
_TRANS_5C = bytes(x ^ OPAD for x in range(256))


def prepare_key(key: bytes) -> bytes:
    """
    Bring an HMAC key to exactly one hash block.

    Keys longer than the block are hashed first; shorter keys are padded
    on the right with zero bytes.

    Args:
        key: The HMAC key, any length

    Returns:
        A 32-byte key block
    """
    key = require_bytes("Key", key)
    if len(key) > BLOCK_SIZE:
        key = ginga_hash(key)
    return key.ljust(BLOCK_SIZE, b'\x00')


def hmac_ginga(key: bytes, message: bytes) -> bytes:
    """
    Generate an HMAC-Ginga authentication tag.

    Args:
        key: The HMAC key
        message: The data to authenticate

    Returns:
        The 32-byte authentication tag
    """
    key_block = prepare_key(key)

    inner = GingaHash(key_block.translate(_TRANS_36))
    inner.update(require_bytes("Message", message))

    outer = GingaHash(key_block.translate(_TRANS_5C))
    outer.update(inner.digest())
    return outer.digest()


def hmac_verify(message: bytes, tag: bytes, key: bytes) -> bool:
    """
    Verify an HMAC-Ginga tag for the provided message.

    Args:
        message: The data to verify
        tag: The authentication tag to verify
        key: The HMAC key

    Returns:
        True if verification succeeds, False otherwise
    """
    expected_tag = hmac_ginga(key, message)

    # Use constant-time comparison to prevent timing attacks
    return hmac.compare_digest(require_bytes("Tag", tag), expected_tag)
