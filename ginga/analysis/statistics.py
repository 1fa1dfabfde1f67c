"""
Statistical Tests for the Ginga Primitives

This module measures how well the cipher and hash spread input changes
over their outputs and how uniform their outputs look. The numbers are
indicators only: passing them says nothing about resistance to real
cryptanalysis.
"""

import logging
from typing import Callable, Dict, Optional

import numpy as np

from ..cipher_core.block_cipher import GingaBlockCipher, BLOCK_SIZE, KEY_SIZE
from ..hash_core.ginga_hash import ginga_hash

logger = logging.getLogger(__name__)


def bit_difference(a: bytes, b: bytes) -> int:
    """
    Count the bits that differ between two equal-length byte strings.

    Args:
        a: First byte string
        b: Second byte string

    Returns:
        The Hamming distance in bits
    """
    if len(a) != len(b):
        raise ValueError("Inputs must have the same length")
    x = np.frombuffer(a, dtype=np.uint8) ^ np.frombuffer(b, dtype=np.uint8)
    return int(np.unpackbits(x).sum())


def _check_positive(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")


def _flip_bit(data: bytes, bit: int) -> bytes:
    flipped = bytearray(data)
    flipped[bit // 8] ^= 1 << (bit % 8)
    return bytes(flipped)


def _summarize(diffs: np.ndarray, output_bits: int) -> Dict[str, float]:
    mean = float(diffs.mean())
    return {
        'mean': mean,
        'std': float(diffs.std()),
        'min': int(diffs.min()),
        'max': int(diffs.max()),
        'ratio': mean / output_bits,
    }


def _avalanche(func: Callable[[bytes], bytes],
               input_len: int,
               samples: int,
               rng: np.random.Generator) -> Dict[str, float]:
    """Flip every input bit of random inputs and record output bit changes."""
    _check_positive("samples", samples)
    _check_positive("input_len", input_len)
    diffs = []
    output_bits = 0
    for _ in range(samples):
        data = rng.bytes(input_len)
        original = func(data)
        output_bits = len(original) * 8
        for bit in range(input_len * 8):
            diffs.append(bit_difference(original, func(_flip_bit(data, bit))))
    return _summarize(np.array(diffs), output_bits)


def cipher_avalanche(key: bytes, samples: int = 16, seed: Optional[int] = None) -> Dict[str, float]:
    """
    Measure the plaintext avalanche effect of the block cipher.

    Args:
        key: The cipher key (32 bytes)
        samples: Number of random plaintexts
        seed: Optional seed for reproducible sampling

    Returns:
        Statistics on changed output bits per flipped input bit; 'ratio'
        should be close to 0.5
    """
    cipher = GingaBlockCipher(key)
    stats = _avalanche(cipher.encrypt_block, BLOCK_SIZE, samples, np.random.default_rng(seed))
    logger.info(f"Plaintext avalanche: {stats['ratio']:.2%} of output bits changed")
    return stats


def key_avalanche(plaintext: bytes, samples: int = 4, seed: Optional[int] = None) -> Dict[str, float]:
    """
    Measure how much the ciphertext changes when one key bit flips.

    Args:
        plaintext: A fixed 16-byte plaintext
        samples: Number of random keys
        seed: Optional seed for reproducible sampling

    Returns:
        Statistics on changed output bits per flipped key bit
    """
    def encrypt_under(key: bytes) -> bytes:
        return GingaBlockCipher(key).encrypt_block(plaintext)

    stats = _avalanche(encrypt_under, KEY_SIZE, samples, np.random.default_rng(seed))
    logger.info(f"Key avalanche: {stats['ratio']:.2%} of output bits changed")
    return stats


def hash_avalanche(message_len: int = 32, samples: int = 4, seed: Optional[int] = None) -> Dict[str, float]:
    """
    Measure the avalanche effect of the hash.

    Args:
        message_len: Length of the random messages in bytes
        samples: Number of random messages
        seed: Optional seed for reproducible sampling

    Returns:
        Statistics on changed digest bits per flipped message bit
    """
    _check_positive("message_len", message_len)
    stats = _avalanche(ginga_hash, message_len, samples, np.random.default_rng(seed))
    logger.info(f"Hash avalanche: {stats['ratio']:.2%} of digest bits changed")
    return stats


def _cipher_outputs(key: bytes, samples: int, seed: Optional[int]) -> np.ndarray:
    """Encrypt random blocks and return all ciphertext bytes as one array."""
    _check_positive("samples", samples)
    rng = np.random.default_rng(seed)
    cipher = GingaBlockCipher(key)
    out = b''.join(cipher.encrypt_block(rng.bytes(BLOCK_SIZE)) for _ in range(samples))
    return np.frombuffer(out, dtype=np.uint8)


def bit_balance(key: bytes, samples: int = 1000, seed: Optional[int] = None) -> float:
    """
    Fraction of one bits in the ciphertexts of random plaintexts.

    Returns:
        A value that should be close to 0.5
    """
    bits = np.unpackbits(_cipher_outputs(key, samples, seed))
    return float(bits.mean())


def byte_entropy(key: bytes, samples: int = 1000, seed: Optional[int] = None) -> float:
    """
    Shannon entropy of the ciphertext byte distribution.

    Returns:
        Entropy in bits per byte (maximum 8.0)
    """
    counts = np.bincount(_cipher_outputs(key, samples, seed), minlength=256)
    probabilities = counts[counts > 0] / counts.sum()
    return float(-(probabilities * np.log2(probabilities)).sum())


def chi_squared(key: bytes, samples: int = 1000, seed: Optional[int] = None) -> float:
    """
    Chi-squared statistic of ciphertext bytes against a uniform distribution.

    With 255 degrees of freedom, values near 255 are expected for a
    uniform source.
    """
    counts = np.bincount(_cipher_outputs(key, samples, seed), minlength=256)
    expected = counts.sum() / 256.0
    return float(((counts - expected) ** 2 / expected).sum())


def evaluate_cipher(key: bytes, samples: int = 1000, seed: Optional[int] = None) -> Dict[str, float]:
    """
    Evaluate the block cipher under a key.

    Args:
        key: The cipher key (32 bytes)
        samples: Number of random plaintexts for the distribution tests
        seed: Optional seed for reproducible sampling

    Returns:
        A dictionary of scores
    """
    return {
        'avalanche': cipher_avalanche(key, seed=seed)['ratio'],
        'bit_balance': bit_balance(key, samples, seed),
        'entropy': byte_entropy(key, samples, seed),
        'chi_squared': chi_squared(key, samples, seed),
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    metrics = evaluate_cipher(bytes(KEY_SIZE), seed=0)
    hash_avalanche(seed=0)

    print(f"Avalanche ratio: {metrics['avalanche']:.4f}")
    print(f"Bit balance: {metrics['bit_balance']:.4f}")
    print(f"Byte entropy: {metrics['entropy']:.4f}")
    print(f"Chi-squared: {metrics['chi_squared']:.2f}")
