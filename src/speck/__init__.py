"""speck: the SPECK family of lightweight block ciphers."""

from .cipher import (
    VARIANTS,
    Speck64_96,
    Speck64_128,
    Speck128_128,
    Speck128_192,
    Speck128_256,
    SpeckCipher,
    get_variant,
)
from .config import CipherConfig, cipher_from_config, load_config
from .errors import LengthMismatchError
from .key_schedule import expand_key
from .params import STANDARD_PARAMS, SpeckParams
from .round import speck_round, speck_unround
from .tensor_ops import (
    decrypt_words_tensor,
    encrypt_words_tensor,
    tensor_to_words,
    words_to_tensor,
)
from .utils import Timer, get_logger, seed_everything, timer
from .vectors import TestVector, load_vectors, self_test
from .words import WORD32, WORD64, WordSpec

__version__ = "0.1.0"

__all__ = [
    # Cipher engine
    "SpeckCipher",
    "Speck64_96",
    "Speck64_128",
    "Speck128_128",
    "Speck128_192",
    "Speck128_256",
    "VARIANTS",
    "get_variant",
    "LengthMismatchError",
    # Building blocks
    "SpeckParams",
    "STANDARD_PARAMS",
    "WordSpec",
    "WORD32",
    "WORD64",
    "expand_key",
    "speck_round",
    "speck_unround",
    # Batch
    "encrypt_words_tensor",
    "decrypt_words_tensor",
    "words_to_tensor",
    "tensor_to_words",
    # Config and vectors
    "CipherConfig",
    "cipher_from_config",
    "load_config",
    "TestVector",
    "load_vectors",
    "self_test",
    # Utils
    "get_logger",
    "seed_everything",
    "Timer",
    "timer",
]
