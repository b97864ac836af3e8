"""Tests for the cipher engine: construction, words and in-place buffers."""

import os
import random
import threading

import pytest

from speck import (
    VARIANTS,
    LengthMismatchError,
    Speck64_96,
    Speck64_128,
    Speck128_128,
    Speck128_256,
    SpeckCipher,
    get_variant,
)


def random_key(variant, rng: random.Random) -> bytes:
    return bytes(rng.getrandbits(8) for _ in range(variant.params.key_size))


def test_variant_parameters() -> None:
    """Standard table: name -> (key bytes, block bytes, rounds)."""
    expected = {
        "SPECK-64/96": (12, 8, 26),
        "SPECK-64/128": (16, 8, 27),
        "SPECK-128/128": (16, 16, 32),
        "SPECK-128/192": (24, 16, 33),
        "SPECK-128/256": (32, 16, 34),
    }
    assert set(VARIANTS) == set(expected)
    for name, (key_size, block_size, rounds) in expected.items():
        p = VARIANTS[name].params
        assert (p.key_size, p.block_size, p.rounds) == (key_size, block_size, rounds)
        assert (p.rotate_left, p.rotate_right) == (3, 8)


def test_round_trip(variant) -> None:
    """open(seal(buffer)) == buffer for random keys and blocks."""
    rng = random.Random(1234)
    for _ in range(50):
        cipher = variant.from_bytes(random_key(variant, rng))
        original = bytes(rng.getrandbits(8) for _ in range(variant.params.block_size))
        buffer = bytearray(original)
        cipher.seal_in_place(buffer)
        cipher.open_in_place(buffer)
        assert bytes(buffer) == original


def test_seal_changes_block(variant) -> None:
    """Sealing a random block under a random key is not the identity."""
    cipher = variant.from_bytes(os.urandom(variant.params.key_size))
    original = os.urandom(variant.params.block_size)
    buffer = bytearray(original)
    cipher.seal_in_place(buffer)
    assert bytes(buffer) != original


def test_words_round_trip(variant) -> None:
    rng = random.Random(99)
    bits = variant.params.word_bits
    cipher = variant([rng.getrandbits(bits) for _ in range(variant.params.key_words)])
    for _ in range(50):
        block = [rng.getrandbits(bits), rng.getrandbits(bits)]
        assert cipher.decrypt_words(cipher.encrypt_words(block)) == block


def test_same_key_same_schedule(variant) -> None:
    """Two instances from the same key agree on round keys and ciphertext."""
    key = bytes(range(variant.params.key_size))
    a = variant.from_bytes(key)
    b = variant.from_bytes(key)
    assert a.round_keys == b.round_keys
    assert len(a.round_keys) == variant.params.rounds
    block = bytes(range(100, 100 + variant.params.block_size))
    assert a.seal(block) == b.seal(block)


def test_from_bytes_matches_words() -> None:
    """Key chunk i becomes key word i, little-endian."""
    from_bytes = Speck128_128.from_bytes(bytes(range(16)))
    from_words = Speck128_128([0x0706050403020100, 0x0F0E0D0C0B0A0908])
    assert from_bytes.round_keys == from_words.round_keys


def test_seal_matches_encrypt_words() -> None:
    """Buffer holds word 0 then word 1, each little-endian."""
    cipher = Speck64_96([1, 2, 3])
    y, x = cipher.encrypt_words([0x03020100, 0x07060504])
    assert cipher.seal(bytes(range(8))) == y.to_bytes(4, "little") + x.to_bytes(4, "little")


def test_wrong_key_length(variant) -> None:
    size = variant.params.key_size
    for bad in (0, size - 1, size + 1, 2 * size):
        with pytest.raises(LengthMismatchError) as exc_info:
            variant.from_bytes(bytes(bad))
        assert exc_info.value.expected == size
        assert exc_info.value.actual == bad


def test_wrong_block_length_leaves_buffer(variant) -> None:
    """Seal/open reject bad lengths without touching the buffer."""
    cipher = variant.from_bytes(bytes(variant.params.key_size))
    size = variant.params.block_size
    for bad in (0, size - 1, size + 1):
        original = bytes(range(bad))
        buffer = bytearray(original)
        with pytest.raises(LengthMismatchError):
            cipher.seal_in_place(buffer)
        with pytest.raises(LengthMismatchError):
            cipher.open_in_place(buffer)
        assert bytes(buffer) == original


def test_length_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="must be 16 bytes, got 3"):
        Speck128_256.from_bytes(bytes(32)).seal(b"abc")


def test_memoryview_buffer() -> None:
    """A writable view into a larger buffer is transformed in place."""
    cipher = Speck64_128([0, 1, 3, 4])
    backing = bytearray(b"\xff" * 4 + bytes(range(8)) + b"\xff" * 4)
    view = memoryview(backing)[4:12]
    cipher.seal_in_place(view)
    assert backing[:4] == b"\xff" * 4 and backing[12:] == b"\xff" * 4
    cipher.open_in_place(view)
    assert bytes(backing[4:12]) == bytes(range(8))


def test_seal_returns_new_bytes() -> None:
    cipher = Speck64_128([0, 1, 3, 4])
    block = bytes(8)
    sealed = cipher.seal(block)
    assert isinstance(sealed, bytes)
    assert block == bytes(8)
    assert cipher.open(sealed) == block


def test_round_keys_read_only() -> None:
    cipher = Speck64_96([1, 2, 3])
    with pytest.raises(AttributeError):
        cipher.round_keys = ()
    with pytest.raises(AttributeError):
        cipher.extra = 1


def test_base_class_is_abstract() -> None:
    with pytest.raises(TypeError, match="abstract"):
        SpeckCipher([0, 1])


def test_wrong_number_of_key_words() -> None:
    with pytest.raises(ValueError, match="needs 4 key words"):
        Speck64_128([0, 1, 2])


def test_get_variant() -> None:
    assert get_variant("SPECK-128/256") is Speck128_256
    with pytest.raises(KeyError, match="unknown SPECK variant"):
        get_variant("SPECK-48/72")


def test_repr_hides_key() -> None:
    cipher = Speck128_128([0xAAAA, 0xBBBB])
    assert repr(cipher) == "Speck128_128(SPECK-128/128)"


def test_shared_instance_across_threads() -> None:
    """One instance used concurrently on disjoint buffers gives consistent results."""
    cipher = Speck128_128.from_bytes(bytes(range(16)))
    blocks = [i.to_bytes(16, "little") for i in range(64)]
    expected = [cipher.seal(b) for b in blocks]
    results = [None] * len(blocks)

    def worker(start: int) -> None:
        for i in range(start, len(blocks), 4):
            buffer = bytearray(blocks[i])
            cipher.seal_in_place(buffer)
            results[i] = bytes(buffer)

    threads = [threading.Thread(target=worker, args=(s,)) for s in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == expected


@pytest.mark.parametrize("bad", [-1, 1 << 32, (1 << 33) + 7])
def test_encrypt_words_rejects_non_words_32(bad) -> None:
    """Block halves outside [0, 2**32) are rejected, not masked."""
    cipher = Speck64_96([1, 2, 3])
    with pytest.raises(ValueError, match="32-bit unsigned"):
        cipher.encrypt_words([bad, 5])
    with pytest.raises(ValueError, match="32-bit unsigned"):
        cipher.decrypt_words([5, bad])


@pytest.mark.parametrize("bad", [-1, 1 << 64])
def test_encrypt_words_rejects_non_words_64(bad) -> None:
    cipher = Speck128_128([0, 1])
    with pytest.raises(ValueError, match="64-bit unsigned"):
        cipher.encrypt_words([0, bad])
    with pytest.raises(ValueError, match="64-bit unsigned"):
        cipher.decrypt_words([bad, 0])


def test_encrypt_words_accepts_domain_edges(variant) -> None:
    cipher = variant(list(range(variant.params.key_words)))
    top = variant.params.word.mask
    block = [top, 0]
    assert cipher.decrypt_words(cipher.encrypt_words(block)) == block


def test_encrypt_words_wrong_pair_size() -> None:
    with pytest.raises(ValueError, match="word pair"):
        Speck64_96([1, 2, 3]).encrypt_words([1, 2, 3])


def test_base_class_from_bytes_is_abstract() -> None:
    with pytest.raises(TypeError, match="abstract"):
        SpeckCipher.from_bytes(bytes(16))
