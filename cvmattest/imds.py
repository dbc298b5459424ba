"""Retrieval of the VCEK certificate chain from the instance metadata service."""

from __future__ import annotations

import json
from collections.abc import Callable

from .encoding import base64_encode
from .log import log_debug, log_error
from .types import AttestationError, ErrorCode

IMDS_ENDPOINT = "http://169.254.169.254/metadata"
VCEK_CERT_PATH = "/THIM/amd/certification"
VCEK_CERT_URL = IMDS_ENDPOINT + VCEK_CERT_PATH


def parse_vcek_response(body: str) -> str:
    """Return the base64 encoded certificate chain held in an IMDS response body.

    Raises AttestationError if the body is not JSON or lacks the certificate
    or its chain.
    """
    try:
        root = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        root = None
    if not isinstance(root, dict):
        log_error("Invalid JSON reponse from IMDS")
        raise AttestationError(
            ErrorCode.ERROR_INVALID_JSON_RESPONSE, "Invalid JSON reponse from IMDS"
        )

    cert = root.get("vcekCert")
    chain = root.get("certificateChain")
    if not isinstance(cert, str) or not isinstance(chain, str) or not cert or not chain:
        log_error("Empty VCek cert received from THIM")
        raise AttestationError(
            ErrorCode.ERROR_EMPTY_VCEK_CERT, "Empty VCek cert received from THIM"
        )

    log_debug("VCek cert received from IMDS successfully")
    return base64_encode(cert + chain)


def get_vcek_cert(fetch: Callable[[str], str]) -> str:
    """Fetch the VCEK certificate chain with ``fetch`` and return it base64 encoded.

    ``fetch`` performs an HTTP GET on the given URL and returns the body; any
    AttestationError it raises is passed on.
    """
    try:
        body = fetch(VCEK_CERT_URL)
    except AttestationError as exc:
        log_error("Failed to retrieve VCek certificate from IMDS: %s", exc.description)
        raise
    return parse_vcek_response(body)