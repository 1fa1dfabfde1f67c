"""
HMAC Authentication Package

This package implements HMAC over the Ginga hash for message
authentication.
"""

from .auth import hmac_ginga, hmac_verify, prepare_key

__all__ = ['hmac_ginga', 'hmac_verify', 'prepare_key']
