"""Parameter sets of the standard SPECK variants."""

from dataclasses import dataclass, field

from speck.words import WORD32, WORD64, WordSpec


@dataclass(frozen=True)
class SpeckParams:
    """Fixed parameters of one SPECK variant.

    Attributes:
        name: Standard variant name, e.g. "SPECK-128/256"
        word_bits: Word width in bits (32 or 64)
        key_words: Number of words in the raw key (>= 2)
        rounds: Number of rounds, one round key each (>= 1)
        rotate_left: Left rotation applied to y in each round
        rotate_right: Right rotation applied to x in each round
    """

    name: str
    word_bits: int
    key_words: int
    rounds: int
    rotate_left: int = 3
    rotate_right: int = 8
    word: WordSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.word_bits not in (32, 64):
            raise ValueError(f"word_bits must be 32 or 64, got {self.word_bits}")
        if self.key_words < 2:
            raise ValueError(
                f"key_words must be >= 2 (one running key word plus leftovers), "
                f"got {self.key_words}"
            )
        if self.rounds < 1:
            raise ValueError(f"rounds must be >= 1, got {self.rounds}")
        for label, amount in (("rotate_left", self.rotate_left), ("rotate_right", self.rotate_right)):
            if not (0 < amount < self.word_bits):
                raise ValueError(
                    f"{label} must be in (0, {self.word_bits}), got {amount}"
                )
        object.__setattr__(self, "word", WORD32 if self.word_bits == 32 else WORD64)

    @property
    def word_size(self) -> int:
        """Word width in bytes."""
        return self.word_bits // 8

    @property
    def key_size(self) -> int:
        """Raw key length in bytes."""
        return self.key_words * self.word_size

    @property
    def block_size(self) -> int:
        """Block length in bytes (two words)."""
        return 2 * self.word_size


SPECK_64_96 = SpeckParams("SPECK-64/96", word_bits=32, key_words=3, rounds=26)
SPECK_64_128 = SpeckParams("SPECK-64/128", word_bits=32, key_words=4, rounds=27)
SPECK_128_128 = SpeckParams("SPECK-128/128", word_bits=64, key_words=2, rounds=32)
SPECK_128_192 = SpeckParams("SPECK-128/192", word_bits=64, key_words=3, rounds=33)
SPECK_128_256 = SpeckParams("SPECK-128/256", word_bits=64, key_words=4, rounds=34)

STANDARD_PARAMS = (
    SPECK_64_96,
    SPECK_64_128,
    SPECK_128_128,
    SPECK_128_192,
    SPECK_128_256,
)
