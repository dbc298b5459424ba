"""Mapping of encryption parameter names in service responses to enums."""

from __future__ import annotations

import enum

from .constants import (
    JSON_RESPONSE_BLOCK_MODE_CHAINING_GCM_VALUE,
    JSON_RESPONSE_BLOCK_PADDING_PKCS7_VALUE,
    JSON_RESPONSE_CIPHER_AES_VALUE,
)
from .log import log_error


class BlockCipherMode(enum.Enum):
    """Block mode used for encryption and decryption of data."""

    CHAINING_MODE_GCM = JSON_RESPONSE_BLOCK_MODE_CHAINING_GCM_VALUE
    INVALID = "Invalid"


class BlockCipherPadding(enum.Enum):
    """Padding scheme used for encryption and decryption of data."""

    PKCS7 = JSON_RESPONSE_BLOCK_PADDING_PKCS7_VALUE
    INVALID = "Invalid"


class CipherAlgorithm(enum.Enum):
    """Algorithm used for encryption and decryption of data."""

    AES = JSON_RESPONSE_CIPHER_AES_VALUE
    INVALID = "Invalid"


def parse_block_mode(value: str) -> BlockCipherMode:
    """Return the block mode named by ``value``; raises ValueError if unsupported."""
    if value == JSON_RESPONSE_BLOCK_MODE_CHAINING_GCM_VALUE:
        return BlockCipherMode.CHAINING_MODE_GCM
    log_error("Invalid Block mode")
    raise ValueError(f"invalid block mode: {value!r}")


def parse_block_padding(value: str) -> BlockCipherPadding:
    """Return the padding named by ``value``; raises ValueError if unsupported."""
    if value == JSON_RESPONSE_BLOCK_PADDING_PKCS7_VALUE:
        return BlockCipherPadding.PKCS7
    log_error("Invalid Block padding")
    raise ValueError(f"invalid block padding: {value!r}")


def parse_cipher(value: str) -> CipherAlgorithm:
    """Return the cipher named by ``value``; raises ValueError if unsupported."""
    if value == JSON_RESPONSE_CIPHER_AES_VALUE:
        return CipherAlgorithm.AES
    log_error("Invalid Cipher Algorithm")
    raise ValueError(f"invalid cipher algorithm: {value!r}")