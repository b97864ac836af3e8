"""Vectorized SPECK over torch tensors.

Encrypts or decrypts many independent [y, x] word pairs at once. Words are
carried in torch.long (int64) tensors; 64-bit words use their two's
complement bit pattern, so values >= 2**63 appear negative. Results are
bit-identical to `SpeckCipher.encrypt_words` / `decrypt_words` applied to
each pair.
"""

from typing import TYPE_CHECKING, Iterable, Sequence

from speck.cipher import SpeckCipher
from speck.params import SpeckParams

if TYPE_CHECKING:
    import torch


def to_int64(word: int) -> int:
    """Reinterpret an unsigned 64-bit value as a signed int64."""
    if not (isinstance(word, int) and 0 <= word < 2**64):
        raise ValueError(f"word {word!r} is not a 64-bit unsigned int")
    if word < 2**63:
        return word
    return word - 2**64


def _mask(bits: int) -> int:
    # -1 keeps every bit of an int64
    return -1 if bits == 64 else (1 << bits) - 1


def _logical_right_shift(x: "torch.LongTensor", shift: int, bits: int) -> "torch.LongTensor":
    """Zero-filling right shift of words held in int64.

    Arithmetic shift sign-extends negative int64 values, so the upper
    `shift` bits are masked off afterwards.
    """
    return (x >> shift) & ((1 << (bits - shift)) - 1)


def _rotate_left(x: "torch.LongTensor", n: int, bits: int) -> "torch.LongTensor":
    return ((x << n) | _logical_right_shift(x, bits - n, bits)) & _mask(bits)


def _rotate_right(x: "torch.LongTensor", n: int, bits: int) -> "torch.LongTensor":
    return (_logical_right_shift(x, n, bits) | (x << (bits - n))) & _mask(bits)


def _check_words(words: "torch.LongTensor", bits: int = 64) -> None:
    import torch

    if not isinstance(words, torch.Tensor):
        raise TypeError(f"words must be torch.LongTensor, got {type(words)}")
    if words.dtype != torch.long:
        raise TypeError(f"words must be torch.long dtype, got {words.dtype}")
    if words.dim() == 0 or words.shape[-1] != 2:
        raise ValueError(
            f"words must have shape [..., 2] ([y, x] pairs), got {tuple(words.shape)}"
        )
    # Every int64 is a valid 64-bit word; narrower words must already be in range
    if bits < 64 and words.numel() > 0:
        if bool((words < 0).any()) or bool((words > (1 << bits) - 1).any()):
            raise ValueError(f"words must be {bits}-bit unsigned ints")


def _round_keys_int64(cipher: SpeckCipher) -> list[int]:
    return [to_int64(k) for k in cipher.round_keys]


def encrypt_words_tensor(cipher: SpeckCipher, words: "torch.LongTensor") -> "torch.LongTensor":
    """Encrypt a batch of [y, x] word pairs.

    Args:
        cipher: Any SPECK variant instance
        words: torch.long tensor of shape [..., 2]

    Returns:
        Tensor of the same shape holding the encrypted pairs

    Raises:
        TypeError: If `words` is not a torch.long tensor
        ValueError: If the last dimension is not 2, or if a word of a
            32-bit variant is negative or above 2**32 - 1
    """
    import torch

    p = cipher.params
    _check_words(words, p.word_bits)
    bits = p.word_bits
    mask = _mask(bits)

    y = words[..., 0]
    x = words[..., 1]
    for k in _round_keys_int64(cipher):
        x = _rotate_right(x, p.rotate_right, bits)
        x = (x + y) & mask
        x = x ^ k

        y = _rotate_left(y, p.rotate_left, bits)
        y = y ^ x

    return torch.stack((y, x), dim=-1)


def decrypt_words_tensor(cipher: SpeckCipher, words: "torch.LongTensor") -> "torch.LongTensor":
    """Decrypt a batch of [y, x] word pairs.

    Exactly reverses encrypt_words_tensor() for the same cipher.

    Args:
        cipher: Any SPECK variant instance
        words: torch.long tensor of shape [..., 2]

    Returns:
        Tensor of the same shape holding the decrypted pairs

    Raises:
        TypeError: If `words` is not a torch.long tensor
        ValueError: If the last dimension is not 2, or if a word of a
            32-bit variant is out of range
    """
    import torch

    p = cipher.params
    _check_words(words, p.word_bits)
    bits = p.word_bits
    mask = _mask(bits)

    y = words[..., 0]
    x = words[..., 1]
    for k in reversed(_round_keys_int64(cipher)):
        y = y ^ x
        y = _rotate_right(y, p.rotate_left, bits)

        x = x ^ k
        x = (x - y) & mask
        x = _rotate_left(x, p.rotate_right, bits)

    return torch.stack((y, x), dim=-1)


def words_to_tensor(
    pairs: Iterable[Sequence[int]], device: "str | torch.device" = "cpu"
) -> "torch.LongTensor":
    """Pack unsigned [y, x] word pairs into an int64 tensor of shape [N, 2].

    Raises:
        ValueError: If a word is not in [0, 2**64)
    """
    import torch

    data = [[to_int64(y), to_int64(x)] for y, x in pairs]
    if not data:
        return torch.empty((0, 2), dtype=torch.long, device=device)
    return torch.tensor(data, dtype=torch.long, device=device)


def tensor_to_words(words: "torch.LongTensor", params: SpeckParams) -> list[list[int]]:
    """Unpack an int64 tensor of shape [..., 2] into unsigned word pairs.

    Leading dimensions are flattened; pairs come back in row-major order.
    """
    _check_words(words)
    mask = params.word.mask
    flat = words.reshape(-1, 2).cpu().tolist()
    return [[y & mask, x & mask] for y, x in flat]
