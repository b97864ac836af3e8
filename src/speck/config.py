"""Configuration loading utilities."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from speck.cipher import VARIANTS, SpeckCipher, get_variant

logger = logging.getLogger(__name__)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}

    logger.debug(f"Loaded config from {config_path}")
    return config


@dataclass(frozen=True)
class CipherConfig:
    """Cipher selection read from configuration.

    Attributes:
        variant: Standard variant name, e.g. "SPECK-128/256"
        key: Raw key as a hex string (whitespace ignored)
    """

    variant: str
    key: str

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.variant not in VARIANTS:
            raise ValueError(
                f"variant must be one of {sorted(VARIANTS)}, got {self.variant!r}"
            )
        try:
            bytes.fromhex(self.key)
        except (TypeError, ValueError) as e:
            raise ValueError(f"key must be a hex string: {e}") from e

    @property
    def key_bytes(self) -> bytes:
        return bytes.fromhex(self.key)

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "CipherConfig":
        """Build from a mapping with `variant` and `key` entries.

        A nested `cipher:` section is accepted as well.
        """
        section = config.get("cipher", config)
        missing = [name for name in ("variant", "key") if name not in section]
        if missing:
            raise ValueError(f"cipher config missing {', '.join(missing)}")
        return cls(variant=str(section["variant"]), key=str(section["key"]))


def cipher_from_config(
    config: Union[CipherConfig, Mapping[str, Any], str, Path]
) -> SpeckCipher:
    """Construct a cipher from a CipherConfig, a mapping, or a YAML file.

    Raises:
        LengthMismatchError: If the key length does not fit the variant
    """
    if isinstance(config, (str, Path)):
        config = load_config(config)
    if not isinstance(config, CipherConfig):
        config = CipherConfig.from_dict(config)

    return get_variant(config.variant).from_bytes(config.key_bytes)
