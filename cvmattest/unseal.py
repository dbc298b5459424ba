"""Extraction and decryption of the encrypted token in an attestation response."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .constants import (
    JSON_RESPONSE_AUTHENTICATION_DATA_KEY,
    JSON_RESPONSE_BLOCK_KEY_SIZE_KEY,
    JSON_RESPONSE_BLOCK_MODE_KEY,
    JSON_RESPONSE_BLOCK_PADDING_KEY,
    JSON_RESPONSE_CIPHER_KEY,
    JSON_RESPONSE_ENC_INNER_KEY_KEY,
    JSON_RESPONSE_EXCRYPTION_PARAMETERS_KEY,
    JSON_RESPONSE_IV_KEY,
    JSON_RESPONSE_JWT_KEY,
)
from .converters import (
    BlockCipherMode,
    BlockCipherPadding,
    CipherAlgorithm,
    parse_block_mode,
    parse_block_padding,
    parse_cipher,
)
from .encoding import base64_to_binary
from .log import log_error
from .types import AttestationError, ErrorCode

TRANSPORT_KEY_AAD = b"Transport Key"
_AES_GCM_KEY_SIZES = frozenset({128 // 8, 192 // 8, 256 // 8})


class UnsealError(AttestationError):
    """Failure to extract or decrypt the token held in a service response."""

    def __init__(self, description: str) -> None:
        super().__init__(ErrorCode.ERROR_JWT_DECRYPTION_FAILED, description)


@dataclass
class EncryptionParameters:
    """Parameters with which the service encrypted the token."""

    block_mode: BlockCipherMode = BlockCipherMode.INVALID
    block_padding: BlockCipherPadding = BlockCipherPadding.INVALID
    cipher_alg: CipherAlgorithm = CipherAlgorithm.INVALID
    key_size: int = 0
    iv: bytes = b""
    authentication_data: bytes = b""


def _fail(message: str) -> UnsealError:
    log_error("%s", message)
    return UnsealError(message)


def _get_str(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key, "")
    return value if isinstance(value, str) else ""


def _get_int(obj: Mapping[str, Any], key: str) -> int:
    value = obj.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _decode(value: str, what: str) -> bytes:
    try:
        return base64_to_binary(value)
    except ValueError as exc:
        raise _fail(f"Failed to decode {what}: {exc}") from exc


def get_encryption_parameters(json_obj: Mapping[str, Any]) -> EncryptionParameters:
    """Read the encryption parameters from a decoded service response."""
    params = json_obj.get(JSON_RESPONSE_EXCRYPTION_PARAMETERS_KEY)
    if not isinstance(params, Mapping):
        raise _fail("Failed to get encryption parameters from response.")

    block_mode_str = _get_str(params, JSON_RESPONSE_BLOCK_MODE_KEY)
    if not block_mode_str:
        raise _fail("Failed to get block mode from encryption parameters")
    try:
        block_mode = parse_block_mode(block_mode_str)
    except ValueError:
        raise _fail("Unsupported block mode:" + block_mode_str) from None

    block_padding_str = _get_str(params, JSON_RESPONSE_BLOCK_PADDING_KEY)
    if not block_padding_str:
        raise _fail("Failed to get block padding from encryption parameters")
    try:
        block_padding = parse_block_padding(block_padding_str)
    except ValueError:
        raise _fail("Unsupported block padding:" + block_padding_str) from None

    cipher_str = _get_str(params, JSON_RESPONSE_CIPHER_KEY)
    if not cipher_str:
        raise _fail("Failed to get cipher algorithm from encryption parameters")
    try:
        cipher = parse_cipher(cipher_str)
    except ValueError:
        raise _fail("Unsupported cipher algorithm:" + cipher_str) from None

    key_bits = _get_int(params, JSON_RESPONSE_BLOCK_KEY_SIZE_KEY)
    if key_bits == 0:
        raise _fail("Failed to get key bits from encryption parameters")

    iv_str = _get_str(params, JSON_RESPONSE_IV_KEY)
    if not iv_str:
        raise _fail("Failed to get iv from encryption parameters")

    auth_data_str = _get_str(json_obj, JSON_RESPONSE_AUTHENTICATION_DATA_KEY)
    if not auth_data_str:
        raise _fail("Failed to get authentication data response")

    return EncryptionParameters(
        block_mode=block_mode,
        block_padding=block_padding,
        cipher_alg=cipher,
        key_size=key_bits,
        iv=_decode(iv_str, "iv"),
        authentication_data=_decode(auth_data_str, "authentication data"),
    )


def get_encrypted_jwt(json_obj: Mapping[str, Any]) -> bytes:
    """Return the encrypted token held in a decoded service response."""
    jwt_str = _get_str(json_obj, JSON_RESPONSE_JWT_KEY)
    if not jwt_str:
        raise _fail("Failed to get jwt from response.")
    return _decode(jwt_str, "jwt")


def get_encrypted_inner_key(json_obj: Mapping[str, Any]) -> bytes:
    """Return the encrypted symmetric inner key held in a decoded service response."""
    key_str = _get_str(json_obj, JSON_RESPONSE_ENC_INNER_KEY_KEY)
    if not key_str:
        raise _fail("Failed to get encrypted inner key from response.")
    return _decode(key_str, "encrypted inner key")


def decrypt_jwt(
    encryption_params: EncryptionParameters,
    key: bytes,
    jwt_encrypted: bytes,
) -> str:
    """Decrypt the token with AES-GCM under ``key`` and return it as text."""
    if encryption_params.block_mode is not BlockCipherMode.CHAINING_MODE_GCM:
        raise _fail("Error: Unsupported block mode")
    if encryption_params.block_padding is not BlockCipherPadding.PKCS7:
        raise _fail("Error: Unsupported block padding")
    if encryption_params.cipher_alg is not CipherAlgorithm.AES:
        raise _fail("Error: Unsupported decryption algorithm")

    key = bytes(key)
    if len(key) not in _AES_GCM_KEY_SIZES:
        raise _fail("Openssl Error: Failed to get decryption algorithm")

    try:
        decryptor = Cipher(
            algorithms.AES(key),
            modes.GCM(
                bytes(encryption_params.iv),
                bytes(encryption_params.authentication_data),
                min_tag_length=4,
            ),
        ).decryptor()
        decryptor.authenticate_additional_data(TRANSPORT_KEY_AAD)
        plain_text = decryptor.update(bytes(jwt_encrypted)) + decryptor.finalize()
    except InvalidTag:
        raise _fail("Openssl Error:authentication tag mismatch") from None
    except ValueError as exc:
        raise _fail(f"Openssl Error:{exc}") from exc

    try:
        return plain_text.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise _fail(f"Decrypted jwt is not valid text: {exc}") from exc