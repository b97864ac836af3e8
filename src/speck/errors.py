"""Exceptions raised by the SPECK cipher engine."""


class LengthMismatchError(ValueError):
    """A key or block buffer does not have the length the variant requires.

    Raised before any state or buffer is touched, so a failed call leaves
    the caller's data exactly as it was.

    Attributes:
        expected: Required length in bytes
        actual: Length that was supplied
    """

    def __init__(self, what: str, expected: int, actual: int) -> None:
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} must be {expected} bytes, got {actual}")
