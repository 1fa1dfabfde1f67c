"""Tests for the ARX primitive layer and the word codecs."""

import random

import pytest

from ginga.arx import (rotl, rotr, confuse, deconfuse, round_function,
                       inv_round_function, sub_key, word_at, WORD_MASK,
                       words_from_bytes, words_to_bytes, pack_u32_be, pack_u64_le)


def _sample_words(n=200, seed=1234):
    rng = random.Random(seed)
    return [0, 1, WORD_MASK, 0x80000000] + [rng.getrandbits(32) for _ in range(n)]


def test_rotations():
    assert rotl(0x80000000, 1) == 1
    assert rotr(1, 1) == 0x80000000
    assert rotl(0x12345678, 8) == 0x34567812
    assert rotr(0x12345678, 8) == 0x78123456
    for x in _sample_words(20):
        assert rotl(x, 0) == x
        assert rotr(x, 0) == x
        for n in range(32):
            assert rotr(rotl(x, n), n) == x


def test_confuse_known_value():
    # 0 ^ 0xA5A5A5A5 + 0x3C3C3C3C = 0xE1E1E1E1, rotated left by 7
    assert confuse(0) == 0xF0F0F0F0


def test_deconfuse_inverts_confuse():
    for x in _sample_words():
        assert deconfuse(confuse(x)) == x
        assert confuse(deconfuse(x)) == x


def test_inv_round_inverts_round():
    rng = random.Random(99)
    for x in _sample_words(50):
        k = rng.getrandbits(32)
        for r in range(32):
            y = round_function(x, k, r)
            assert 0 <= y <= WORD_MASK
            assert inv_round_function(y, k, r) == x


def test_sub_key():
    assert sub_key([0] * 8, 0, 0) == 0
    # base = words[3] = 3, tweak = 2*73 + 91 = 237, 3 ^ 237 = 238, rotated by 3
    assert sub_key(list(range(8)), 1, 2) == rotl(238, 3)
    # Key words wrap around after 8
    assert sub_key(list(range(8)), 7, 5) == rotl(4 ^ (5 * 73 + 7 * 91), 12)


def test_word_at_wraps():
    words = (10, 11, 12, 13, 14, 15, 16, 17)
    assert word_at(words, 3) == 13
    assert word_at(words, 11) == 13
    assert word_at(words, 15) == 17


def test_word_codecs():
    data = b'\x01\x00\x00\x00\x00\x00\x00\x80'
    assert words_from_bytes(data) == (1, 0x80000000)
    assert words_to_bytes((1, 0x80000000)) == data
    assert words_from_bytes(b'') == ()

    with pytest.raises(ValueError):
        words_from_bytes(b'\x00' * 5)


def test_counter_and_length_codecs():
    assert pack_u32_be(1) == b'\x00\x00\x00\x01'
    assert pack_u32_be(0x01020304) == b'\x01\x02\x03\x04'
    assert pack_u64_le(8) == b'\x08' + b'\x00' * 7
    assert pack_u64_le((1 << 64) + 5) == pack_u64_le(5)
