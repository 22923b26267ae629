"""Configuration for hashing defaults."""

from __future__ import annotations

import binascii
import os
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from blake256.crypto.constants import SALT_SIZE
from blake256.crypto.digest import Blake256
from blake256.logs import get_logger

log = get_logger(__name__)

ENV_DIGEST_BITS = "BLAKE256_DIGEST_BITS"
ENV_SALT = "BLAKE256_SALT"
ENV_CHUNK_SIZE = "BLAKE256_CHUNK_SIZE"


class DigestSize(Enum):
    """Supported output widths, in bits."""
    BLAKE224 = 224
    BLAKE256 = 256


@dataclass
class HashConfig:
    """Hashing defaults for applications.

    ``salt`` is kept as raw bytes; ``chunk_size`` is the read size used when
    hashing files or streams.
    """

    digest_size: DigestSize = DigestSize.BLAKE256
    salt: Optional[bytes] = None
    chunk_size: int = 64 * 1024

    @classmethod
    def from_environment(cls) -> HashConfig:
        """
        Build a configuration from environment variables.

        ``BLAKE256_DIGEST_BITS`` selects 224 or 256, ``BLAKE256_SALT`` is a
        32-character hex string and ``BLAKE256_CHUNK_SIZE`` a positive
        integer. Unset variables keep the defaults.

        Raises:
            ValueError: If a variable cannot be parsed.
        """
        config = cls()

        bits = os.getenv(ENV_DIGEST_BITS)
        if bits is not None:
            config.digest_size = DigestSize(int(bits))

        salt = os.getenv(ENV_SALT)
        if salt:
            try:
                config.salt = bytes.fromhex(salt)
            except (ValueError, binascii.Error) as e:
                raise ValueError(f"{ENV_SALT} must be hex") from e

        chunk_size = os.getenv(ENV_CHUNK_SIZE)
        if chunk_size is not None:
            config.chunk_size = int(chunk_size)

        log.debug("loaded %r from environment", config)
        return config

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of validation errors. Empty if valid.
        """
        errors = []

        if not isinstance(self.digest_size, DigestSize):
            errors.append("digest_size must be a DigestSize")

        if self.salt is not None and len(self.salt) != SALT_SIZE:
            errors.append(f"salt must be {SALT_SIZE} bytes")

        if self.chunk_size <= 0:
            errors.append("chunk_size must be positive")

        return errors

    def new_hasher(self, data: bytes = b"") -> Blake256:
        """Create a hash object using this configuration."""
        return Blake256(data, digest_bits=self.digest_size.value, salt=self.salt)
