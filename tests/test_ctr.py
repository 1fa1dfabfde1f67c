"""Tests for Ginga-128 CTR mode."""

import random

import pytest

from ginga.cipher_core import GingaBlockCipher, encrypt_block
from ginga.ctr_mode import ctr as ctr_module
from ginga.ctr_mode import GingaCTR, ctr_mode, encrypt, decrypt, build_counter_block
from ginga.errors import InvalidLengthError

PLAINTEXT = b"Mensagem confidencial com Ginga-CTR em PHP"

# Zero nonce: identical under prefix overwrite and whole-block increment
CIPHERTEXT_ZERO_NONCE = bytes.fromhex(
    "bc65da987c42984e5ff6111a0d224158"
    "02a6c553826eab4094f514e80159a137"
    "5f9c7979ded5a1535efe"
)
# All-0xFF nonce: bytes 12..15 replaced by the big-endian block index.
# Incrementing the whole 16-byte block would give a different stream here.
CIPHERTEXT_FF_NONCE = bytes.fromhex(
    "8eb509f52c3d910d18e830495365d099"
    "08750665df04c9c6591788e0a2da5393"
    "6d7352564e1d1fbaed84"
)


def test_known_vector():
    key = bytes(32)
    nonce = bytes(16)
    ciphertext = ctr_mode(PLAINTEXT, key, nonce)
    assert ciphertext == CIPHERTEXT_ZERO_NONCE
    assert ctr_mode(ciphertext, key, nonce) == PLAINTEXT


def test_known_vector_counter_field_overwritten():
    key = bytes(32)
    nonce = b'\xff' * 16
    assert ctr_mode(PLAINTEXT, key, nonce) == CIPHERTEXT_FF_NONCE
    # Only the 12-byte prefix matters
    assert ctr_mode(PLAINTEXT, key, b'\xff' * 12 + b'\x00' * 4) == CIPHERTEXT_FF_NONCE


def test_self_inverse_various_lengths():
    rng = random.Random(5)
    key = bytes(rng.getrandbits(8) for _ in range(32))
    nonce = bytes(rng.getrandbits(8) for _ in range(16))
    for length in (0, 1, 15, 16, 17, 31, 32, 33, 100):
        data = bytes(rng.getrandbits(8) for _ in range(length))
        ct = encrypt(data, key, nonce)
        assert len(ct) == length
        assert decrypt(ct, key, nonce) == data


def test_empty_data():
    assert ctr_mode(b'', bytes(32), bytes(16)) == b''


def test_keystream_matches_block_cipher():
    key = bytes(range(32))
    nonce = bytes(range(100, 116))
    keystream = ctr_mode(bytes(48), key, nonce)
    for i in range(3):
        expected = encrypt_block(nonce[:12] + i.to_bytes(4, 'big'), key)
        assert keystream[i * 16:(i + 1) * 16] == expected


def test_keystream_blocks_are_independent():
    ctr = GingaCTR(bytes(range(32)), bytes(16))
    forward = [ctr.keystream_block(i) for i in range(4)]
    backward = [ctr.keystream_block(i) for i in reversed(range(4))]
    assert forward == list(reversed(backward))
    assert len(set(forward)) == 4


def test_build_counter_block():
    nonce = bytes(range(16))
    assert build_counter_block(nonce, 0) == bytes(range(12)) + b'\x00\x00\x00\x00'
    assert build_counter_block(nonce, 0x01020304) == bytes(range(12)) + b'\x01\x02\x03\x04'
    with pytest.raises(ValueError):
        build_counter_block(nonce, 1 << 32)
    with pytest.raises(ValueError):
        build_counter_block(nonce, -1)


def test_invalid_lengths_rejected():
    with pytest.raises(InvalidLengthError):
        ctr_mode(b'data', bytes(32), bytes(12))
    with pytest.raises(InvalidLengthError):
        ctr_mode(b'data', bytes(16), bytes(16))
    with pytest.raises(TypeError):
        ctr_mode("data", bytes(32), bytes(16))


def test_key_checked_with_prebuilt_cipher():
    cipher = GingaBlockCipher(bytes(32))
    with pytest.raises(InvalidLengthError):
        GingaCTR(b'short', bytes(16), block_cipher=cipher)

    ctr = GingaCTR(bytes(32), bytes(16), block_cipher=cipher)
    assert ctr.process(PLAINTEXT) == CIPHERTEXT_ZERO_NONCE


def test_counter_overflow_reports_maximum(monkeypatch):
    monkeypatch.setattr(ctr_module, 'MAX_BLOCKS', 2)
    ctr = GingaCTR(bytes(32), bytes(16))
    assert len(ctr.process(bytes(32))) == 32

    with pytest.raises(InvalidLengthError) as exc_info:
        ctr.process(bytes(33))
    assert exc_info.value.at_most
    assert exc_info.value.expected == 32
    assert "at most 32 bytes" in str(exc_info.value)
