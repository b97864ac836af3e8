"""SPECK key expansion.

The schedule reuses the round transform: the running key word is mixed
with one of the leftover key words per round, and the round index plays
the part of the round key.
"""

from typing import Sequence

from speck.params import SpeckParams
from speck.round import speck_round


def expand_key(key_words: Sequence[int], params: SpeckParams) -> tuple[int, ...]:
    """Expand raw key words into the round-key sequence.

    Args:
        key_words: Exactly `params.key_words` words. Index 0 is the initial
            running key, the rest seed the leftover buffer.
        params: Variant parameters

    Returns:
        Tuple of `params.rounds` round keys in application order

    Raises:
        ValueError: If the number of words is wrong or a word is out of range

    Example:
        >>> from speck.params import SPECK_128_128
        >>> len(expand_key([0, 1], SPECK_128_128))
        32
    """
    if len(key_words) != params.key_words:
        raise ValueError(
            f"{params.name} needs {params.key_words} key words, got {len(key_words)}"
        )
    w = params.word
    for word in key_words:
        if not w.contains(word):
            raise ValueError(f"key word {word!r} is not a {w.bits}-bit unsigned int")

    key = key_words[0]
    leftover = list(key_words[1:])
    slots = len(leftover)

    round_keys = []
    for r in range(params.rounds):
        round_keys.append(key)
        i = r % slots
        leftover[i], key = speck_round(leftover[i], key, w.from_index(r), params)

    return tuple(round_keys)
