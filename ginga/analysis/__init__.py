"""
Statistical Analysis Package

This package implements empirical quality measurements for the Ginga
primitives: avalanche behaviour, output bit balance and byte
uniformity.
"""

from .statistics import (bit_difference, cipher_avalanche, key_avalanche,
                         hash_avalanche, bit_balance, byte_entropy,
                         chi_squared, evaluate_cipher)

__all__ = ['bit_difference', 'cipher_avalanche', 'key_avalanche',
           'hash_avalanche', 'bit_balance', 'byte_entropy', 'chi_squared',
           'evaluate_cipher']
