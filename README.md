# cvmattest

Building blocks for attesting a confidential virtual machine: assembling
the TPM and isolation evidence sent to an attestation service, reading the
VCEK certificate chain returned by the instance metadata service, and
unsealing the AES-GCM encrypted JWT that comes back from the service.

## Installation

```
pip install cvmattest
```

## Modules

- `cvmattest.types` – `ErrorCode`, the exception `AttestationError`
  (with `code`, `description` and `tpm_error_code`), and the value types
  `ClientParameters`, `OsInfo`, `OsType`, `RsaScheme`, `RsaHashAlg` and
  `EncryptionType`.
- `cvmattest.constants` – JSON field names and values used on the wire.
- `cvmattest.log` – the `AttestationLogger` abstract class and `LogLevel`.
  Install a logger with `set_logger` (only the first one installed is kept;
  `get_logger` returns it). The library reports through `log_error`,
  `log_warn`, `log_info` and `log_debug`, which pass a printf-style format
  and its arguments, plus the calling function's name and line, to the
  logger; with no logger installed they do nothing.
- `cvmattest.encoding` – `binary_to_base64`, `base64_to_binary`,
  `binary_to_base64url` (unpadded), `base64url_to_binary` (padded or not),
  `base64_encode` and `base64_decode` (UTF-8 text). Decoding raises
  `ValueError` on malformed input.
- `cvmattest.tpm_info` – `TpmInfo` with its parts `PcrSet`, `PcrValue`,
  `PcrQuote` and `EphemeralKey`. `validate()` checks that the AIK
  certificate and public key, at least one PCR, and all three parts of the
  encryption key are present; `to_json()` returns the evidence as a dict
  with base64 encoded fields.
- `cvmattest.isolation` – `IsolationType` and `IsolationInfo`. For
  Trusted Launch `to_json()` gives only the type; for SEV-SNP it adds the
  evidence: a base64 encoded JSON proof holding the SNP report (base64url)
  and the VCEK chain, and the base64 encoded runtime data. `validate()`
  requires the SNP report, VCEK chain and runtime data for SEV-SNP.
- `cvmattest.imds` – `parse_vcek_response(body)` and `get_vcek_cert(fetch)`,
  which return the VCEK certificate followed by its chain, base64 encoded.
- `cvmattest.converters` – `BlockCipherMode`, `BlockCipherPadding`,
  `CipherAlgorithm` and `parse_block_mode`, `parse_block_padding`,
  `parse_cipher`, which raise `ValueError` for unsupported names.
- `cvmattest.unseal` – `EncryptionParameters`, `get_encryption_parameters`,
  `get_encrypted_jwt`, `get_encrypted_inner_key` and `decrypt_jwt`
  (AES-GCM with 128, 192 or 256 bit keys). All raise `UnsealError`.

## Examples

Building the TPM evidence document:

```python
from cvmattest.tpm_info import EphemeralKey, PcrSet, PcrValue, TpmInfo

info = TpmInfo(
    aik_cert=b"cert",
    aik_pub=b"pub",
    pcr_values=PcrSet(pcrs=[PcrValue(index=0, digest=b"\x00" * 32)]),
    encryption_key=EphemeralKey(b"key", b"certify", b"signature"),
)
if info.validate():
    document = info.to_json()
```

Fetching the VCEK chain with any HTTP client:

```python
import urllib.request

from cvmattest.imds import get_vcek_cert

def fetch(url: str) -> str:
    request = urllib.request.Request(url, headers={"Metadata": "true"})
    with urllib.request.urlopen(request) as response:
        return response.read().decode("utf-8")

vcek_chain = get_vcek_cert(fetch)
```

Unsealing a decoded service response once the inner key has been recovered:

```python
from cvmattest.unseal import decrypt_jwt, get_encrypted_jwt, get_encryption_parameters

params = get_encryption_parameters(response)
jwt = decrypt_jwt(params, inner_key, get_encrypted_jwt(response))
```

## Errors

`imds` raises `AttestationError` carrying an `ErrorCode`
(`ERROR_INVALID_JSON_RESPONSE`, `ERROR_EMPTY_VCEK_CERT`); errors raised by
the `fetch` callable are passed on. `unseal` raises `UnsealError`, a
subclass of `AttestationError` with code `ERROR_JWT_DECRYPTION_FAILED`.
`encoding` and `converters` raise `ValueError`.

## What this package does not do

- It makes no HTTP requests itself: `get_vcek_cert` calls the function you
  give it, and there is no client that sends evidence to an attestation
  service.
- It does not talk to a TPM. Reading PCRs, quoting, and decrypting the
  encrypted inner key with the TPM's ephemeral key are left to the caller;
  `get_encrypted_inner_key` only extracts that key from the response.
- There is no command-line program.

## Running the tests

```
pip install "cvmattest[test]"
pytest
```