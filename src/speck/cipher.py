"""SPECK cipher engine.

Each standard variant is a subclass of `SpeckCipher` bound to one
`SpeckParams`. An instance derives its round keys once at construction and
never changes afterwards, so a single instance can be shared between
threads as long as each call works on its own buffer.

Byte convention: a block buffer holds word 0 ("y") followed by word 1 ("x"),
each little-endian. A key buffer holds the key words in index order, each
little-endian, word 0 being the initial running key.
"""

from typing import ClassVar, Sequence

from speck.errors import LengthMismatchError
from speck.key_schedule import expand_key
from speck.params import (
    SPECK_64_96,
    SPECK_64_128,
    SPECK_128_128,
    SPECK_128_192,
    SPECK_128_256,
    SpeckParams,
)
from speck.round import speck_round, speck_unround


class SpeckCipher:
    """Base class of the SPECK variants.

    Subclasses set the `params` class attribute; the base class itself has
    no parameters and cannot be instantiated.

    Example:
        >>> cipher = Speck128_128([0x0706050403020100, 0x0F0E0D0C0B0A0908])
        >>> block = bytearray(16)
        >>> cipher.seal_in_place(block)
        >>> cipher.open_in_place(block)
        >>> block == bytearray(16)
        True
    """

    params: ClassVar[SpeckParams]

    __slots__ = ("_round_keys",)

    def __init__(self, key_words: Sequence[int]) -> None:
        """Derive the round keys from raw key words.

        Args:
            key_words: `params.key_words` unsigned words

        Raises:
            TypeError: If called on the abstract base class
            ValueError: If the key words do not fit the variant
        """
        self._round_keys = expand_key(key_words, self._variant_params())

    @classmethod
    def _variant_params(cls) -> SpeckParams:
        if not hasattr(cls, "params"):
            raise TypeError(
                "SpeckCipher is abstract; use one of "
                + ", ".join(variant.__name__ for variant in VARIANTS.values())
            )
        return cls.params

    @classmethod
    def from_bytes(cls, key: bytes) -> "SpeckCipher":
        """Construct a cipher from a raw byte key.

        Args:
            key: Exactly `params.key_size` bytes

        Returns:
            Cipher instance of this variant

        Raises:
            TypeError: If called on the abstract base class
            LengthMismatchError: If the key length is wrong
        """
        p = cls._variant_params()
        if len(key) != p.key_size:
            raise LengthMismatchError(f"{p.name} key", p.key_size, len(key))

        size = p.word_size
        words = [
            p.word.from_le_bytes(key[i:i + size])
            for i in range(0, p.key_size, size)
        ]
        return cls(words)

    @property
    def round_keys(self) -> tuple[int, ...]:
        """Derived round keys, in encryption order."""
        return self._round_keys

    @property
    def block_size(self) -> int:
        return self.params.block_size

    @property
    def key_size(self) -> int:
        return self.params.key_size

    def encrypt_words(self, block: Sequence[int]) -> list[int]:
        """Encrypt one block given as words.

        Args:
            block: [y, x] word pair

        Returns:
            Encrypted [y, x] word pair

        Raises:
            ValueError: If a half is not an unsigned word of the variant
        """
        p = self.params
        y, x = self._check_block(block)
        for k in self._round_keys:
            x, y = speck_round(x, y, k, p)
        return [y, x]

    def decrypt_words(self, block: Sequence[int]) -> list[int]:
        """Decrypt one block given as words.

        Args:
            block: Encrypted [y, x] word pair

        Returns:
            Decrypted [y, x] word pair

        Raises:
            ValueError: If a half is not an unsigned word of the variant
        """
        p = self.params
        y, x = self._check_block(block)
        for k in reversed(self._round_keys):
            x, y = speck_unround(x, y, k, p)
        return [y, x]

    def _check_block(self, block: Sequence[int]) -> tuple[int, int]:
        if len(block) != 2:
            raise ValueError(f"block must be a [y, x] word pair, got {len(block)} words")
        w = self.params.word
        for word in block:
            if not w.contains(word):
                raise ValueError(f"block word {word!r} is not a {w.bits}-bit unsigned int")
        return block[0], block[1]

    def seal_in_place(self, buffer) -> None:
        """Encrypt a block held in a writable buffer, in place.

        Args:
            buffer: bytearray or writable memoryview of `block_size` bytes

        Raises:
            LengthMismatchError: If the buffer length is wrong. The buffer
                is left untouched.
        """
        self._transform_in_place(buffer, self.encrypt_words)

    def open_in_place(self, buffer) -> None:
        """Decrypt a block held in a writable buffer, in place.

        Raises:
            LengthMismatchError: If the buffer length is wrong. The buffer
                is left untouched.
        """
        self._transform_in_place(buffer, self.decrypt_words)

    def seal(self, block: bytes) -> bytes:
        """Return the encryption of an immutable block."""
        buffer = bytearray(block)
        self.seal_in_place(buffer)
        return bytes(buffer)

    def open(self, block: bytes) -> bytes:
        """Return the decryption of an immutable block."""
        buffer = bytearray(block)
        self.open_in_place(buffer)
        return bytes(buffer)

    def _transform_in_place(self, buffer, transform) -> None:
        p = self.params
        if len(buffer) != p.block_size:
            raise LengthMismatchError(f"{p.name} block", p.block_size, len(buffer))

        size = p.word_size
        w = p.word
        words = [
            w.from_le_bytes(buffer[:size]),
            w.from_le_bytes(buffer[size:]),
        ]

        y, x = transform(words)

        w.to_le_bytes(y, buffer, 0)
        w.to_le_bytes(x, buffer, size)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.params.name})"


class Speck64_96(SpeckCipher):
    """SPECK with 64-bit blocks and a 96-bit key."""

    params = SPECK_64_96
    __slots__ = ()


class Speck64_128(SpeckCipher):
    """SPECK with 64-bit blocks and a 128-bit key."""

    params = SPECK_64_128
    __slots__ = ()


class Speck128_128(SpeckCipher):
    """SPECK with 128-bit blocks and a 128-bit key."""

    params = SPECK_128_128
    __slots__ = ()


class Speck128_192(SpeckCipher):
    """SPECK with 128-bit blocks and a 192-bit key."""

    params = SPECK_128_192
    __slots__ = ()


class Speck128_256(SpeckCipher):
    """SPECK with 128-bit blocks and a 256-bit key."""

    params = SPECK_128_256
    __slots__ = ()


VARIANTS: dict[str, type[SpeckCipher]] = {
    cls.params.name: cls
    for cls in (Speck64_96, Speck64_128, Speck128_128, Speck128_192, Speck128_256)
}


def get_variant(name: str) -> type[SpeckCipher]:
    """Look up a variant class by its standard name.

    Args:
        name: e.g. "SPECK-64/128"

    Returns:
        The variant class

    Raises:
        KeyError: If the name is not a standard variant
    """
    try:
        return VARIANTS[name]
    except KeyError:
        raise KeyError(
            f"unknown SPECK variant {name!r}; expected one of {sorted(VARIANTS)}"
        ) from None
