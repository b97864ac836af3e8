"""SPECK round transform and its inverse.

Both functions operate on Python ints in the word domain of `params` and
are exact inverses of each other for every (x, y, k):

    speck_unround(*speck_round(x, y, k, p), k, p) == (x, y)
"""

from speck.params import SpeckParams


def speck_round(x: int, y: int, k: int, params: SpeckParams) -> tuple[int, int]:
    """Apply one forward round.

    Args:
        x: Left half
        y: Right half
        k: Round key
        params: Variant parameters (word width, rotation amounts)

    Returns:
        (x, y) after the round
    """
    w = params.word
    x = w.rotate_right(x, params.rotate_right)
    x = w.wrapping_add(x, y)
    x ^= k

    y = w.rotate_left(y, params.rotate_left)
    y ^= x

    return x, y


def speck_unround(x: int, y: int, k: int, params: SpeckParams) -> tuple[int, int]:
    """Undo one round given the same round key.

    Args:
        x: Left half after the round
        y: Right half after the round
        k: Round key used by the forward round
        params: Variant parameters

    Returns:
        (x, y) before the round
    """
    w = params.word
    y ^= x
    y = w.rotate_right(y, params.rotate_left)

    x ^= k
    x = w.wrapping_sub(x, y)
    x = w.rotate_left(x, params.rotate_right)

    return x, y
