"""Confidential VM attestation helpers: evidence documents, VCEK chain parsing and JWT unsealing."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "converters",
    "encoding",
    "imds",
    "isolation",
    "log",
    "tpm_info",
    "types",
    "unseal",
]