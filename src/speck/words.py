"""Word arithmetic for SPECK.

A word is a Python int held in [0, 2**bits). All arithmetic here is modular
in the word width, so addition and subtraction wrap instead of growing.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WordSpec:
    """Capability set of an unsigned word of fixed bit width.

    Attributes:
        bits: Word width in bits (32 or 64)
        mask: 2**bits - 1
        size: Word width in bytes
    """

    bits: int
    mask: int = field(init=False, repr=False)
    size: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate width and precompute mask."""
        if self.bits not in (32, 64):
            raise ValueError(f"bits must be 32 or 64, got {self.bits}")
        object.__setattr__(self, "mask", (1 << self.bits) - 1)
        object.__setattr__(self, "size", self.bits // 8)

    def from_le_bytes(self, data: bytes) -> int:
        """Decode exactly `size` little-endian bytes into a word.

        Args:
            data: Bytes-like span of length `size`

        Returns:
            Decoded word

        Raises:
            ValueError: If the span is not exactly one word long
        """
        if len(data) != self.size:
            raise ValueError(f"expected {self.size} bytes, got {len(data)}")
        return int.from_bytes(data, "little")

    def to_le_bytes(self, word: int, out, offset: int = 0) -> None:
        """Write `word` little-endian into `out[offset:offset + size]`."""
        out[offset:offset + self.size] = (word & self.mask).to_bytes(self.size, "little")

    def from_index(self, i: int) -> int:
        """Widen a small non-negative counter (a round index) into a word."""
        if i < 0:
            raise ValueError(f"index must be non-negative, got {i}")
        return i & self.mask

    def wrapping_add(self, a: int, b: int) -> int:
        return (a + b) & self.mask

    def wrapping_sub(self, a: int, b: int) -> int:
        return (a - b) & self.mask

    def rotate_left(self, word: int, n: int) -> int:
        """Circular left rotation by n bits, 0 <= n < bits."""
        return ((word << n) | (word >> (self.bits - n))) & self.mask

    def rotate_right(self, word: int, n: int) -> int:
        """Circular right rotation by n bits, 0 <= n < bits."""
        return ((word >> n) | (word << (self.bits - n))) & self.mask

    def contains(self, word: int) -> bool:
        """Return True if `word` is an int in [0, 2**bits)."""
        return isinstance(word, int) and 0 <= word <= self.mask


WORD32 = WordSpec(32)
WORD64 = WordSpec(64)
