"""Published SPECK test vectors and a conformance self-test.

Vectors are stored in this library's byte convention: the key is the key
words in index order, the blocks are word y then word x, all little-endian.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from speck.cipher import get_variant
from speck.config import load_config

logger = logging.getLogger(__name__)

DEFAULT_VECTORS_PATH = Path(__file__).parent / "data" / "vectors.yaml"


@dataclass(frozen=True)
class TestVector:
    """One (variant, key, plaintext, ciphertext) triple."""

    __test__ = False  # not a pytest test class

    name: str
    key: bytes
    plaintext: bytes
    ciphertext: bytes


def load_vectors(path: Optional[Union[str, Path]] = None) -> list[TestVector]:
    """Load test vectors from a YAML file.

    The file holds a `vectors:` list whose entries have `name`, `key`,
    `plaintext` and `ciphertext`, the last three as hex strings.

    Args:
        path: Vector file; defaults to the vectors shipped with the package

    Returns:
        List of TestVector in file order
    """
    data = load_config(path or DEFAULT_VECTORS_PATH)
    vectors = [
        TestVector(
            name=entry["name"],
            key=bytes.fromhex(entry["key"]),
            plaintext=bytes.fromhex(entry["plaintext"]),
            ciphertext=bytes.fromhex(entry["ciphertext"]),
        )
        for entry in data.get("vectors", [])
    ]
    logger.debug(f"Loaded {len(vectors)} test vectors")
    return vectors


def self_test(vectors: Optional[Iterable[TestVector]] = None) -> bool:
    """Check every vector: sealing the plaintext must give the ciphertext.

    Args:
        vectors: Vectors to check; defaults to load_vectors()

    Returns:
        True if every vector matched
    """
    if vectors is None:
        vectors = load_vectors()

    ok = True
    for vector in vectors:
        cipher = get_variant(vector.name).from_bytes(vector.key)
        buffer = bytearray(vector.plaintext)
        cipher.seal_in_place(buffer)
        if bytes(buffer) != vector.ciphertext:
            logger.warning(
                f"{vector.name}: expected {vector.ciphertext.hex()}, got {buffer.hex()}"
            )
            ok = False
        else:
            logger.debug(f"{vector.name}: ok")
    return ok
