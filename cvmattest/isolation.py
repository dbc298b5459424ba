"""Isolation (confidential VM) evidence sent to the attestation service."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any

from .constants import (
    JSON_ISOLATION_EVIDENCE_KEY,
    JSON_ISOLATION_EVIDENCE_SNPREPORT,
    JSON_ISOLATION_EVIDENCE_VCEKCERT,
    JSON_ISOLATION_PROOF_KEY,
    JSON_ISOLATION_RUNTIME_DATA_KEY,
    JSON_ISOLATION_TYPE_KEY,
    JSON_ISOLATION_TYPE_SEVSNP,
    JSON_ISOLATION_TYPE_TVM,
)
from .encoding import base64_encode, binary_to_base64, binary_to_base64url


class IsolationType(enum.Enum):
    TRUSTED_LAUNCH = JSON_ISOLATION_TYPE_TVM
    SEV_SNP = JSON_ISOLATION_TYPE_SEVSNP


def _styled_json(value: dict[str, Any]) -> str:
    return json.dumps(value, indent="\t", sort_keys=True, separators=(",", " : "))


@dataclass
class IsolationInfo:
    """Isolation type and, for SEV-SNP, the hardware evidence."""

    isolation_type: IsolationType = IsolationType.TRUSTED_LAUNCH
    snp_report: bytes = b""
    runtime_data: bytes = b""
    vcek_cert: str = ""

    def validate(self) -> bool:
        """Return False if SEV-SNP evidence is incomplete, True otherwise."""
        if self.isolation_type is IsolationType.SEV_SNP:
            return bool(self.snp_report and self.vcek_cert and self.runtime_data)
        return True

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object describing the isolation evidence."""
        if self.isolation_type is IsolationType.TRUSTED_LAUNCH:
            return {JSON_ISOLATION_TYPE_KEY: JSON_ISOLATION_TYPE_TVM}

        proof = {
            JSON_ISOLATION_EVIDENCE_SNPREPORT: binary_to_base64url(self.snp_report),
            JSON_ISOLATION_EVIDENCE_VCEKCERT: self.vcek_cert,
        }
        return {
            JSON_ISOLATION_TYPE_KEY: JSON_ISOLATION_TYPE_SEVSNP,
            JSON_ISOLATION_EVIDENCE_KEY: {
                JSON_ISOLATION_PROOF_KEY: base64_encode(_styled_json(proof)),
                JSON_ISOLATION_RUNTIME_DATA_KEY: binary_to_base64(self.runtime_data),
            },
        }