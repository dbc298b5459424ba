import json

import pytest

from cvmattest.encoding import base64_to_binary
from cvmattest.tpm_info import EphemeralKey, PcrQuote, PcrSet, PcrValue, TpmInfo


def _full_info():
    return TpmInfo(
        aik_cert=b"aik-cert",
        aik_pub=b"aik-pub",
        pcr_values=PcrSet([PcrValue(0, b"\x00" * 32), PcrValue(7, b"\xff" * 32)]),
        pcr_quote=PcrQuote(quote=b"quote", signature=b"sig"),
        encryption_key=EphemeralKey(
            encryption_key=b"enc-key",
            certify_info=b"certify",
            certify_info_signature=b"certify-sig",
        ),
    )


def test_full_info_validates():
    assert _full_info().validate() is True


def test_default_info_does_not_validate():
    assert TpmInfo().validate() is False


@pytest.mark.parametrize(
    "clear",
    [
        lambda i: setattr(i, "aik_cert", b""),
        lambda i: setattr(i, "aik_pub", b""),
        lambda i: setattr(i, "pcr_values", PcrSet()),
        lambda i: setattr(i.encryption_key, "certify_info", b""),
        lambda i: setattr(i.encryption_key, "encryption_key", b""),
        lambda i: setattr(i.encryption_key, "certify_info_signature", b""),
    ],
)
def test_missing_value_fails_validation(clear):
    info = _full_info()
    clear(info)
    assert info.validate() is False


def test_missing_quote_does_not_affect_validation():
    info = _full_info()
    info.pcr_quote = PcrQuote()
    assert info.validate() is True


def test_to_json_keys():
    doc = _full_info().to_json()
    assert set(doc) == {
        "AikCert",
        "AikPub",
        "PcrQuote",
        "PcrSignature",
        "EncKeyPub",
        "EncKeyCertifyInfo",
        "EncKeyCertifyInfoSignature",
        "PcrSet",
        "PCRs",
    }


def test_to_json_round_trips_binary_fields():
    info = _full_info()
    doc = info.to_json()
    assert base64_to_binary(doc["AikCert"]) == info.aik_cert
    assert base64_to_binary(doc["AikPub"]) == info.aik_pub
    assert base64_to_binary(doc["PcrQuote"]) == info.pcr_quote.quote
    assert base64_to_binary(doc["PcrSignature"]) == info.pcr_quote.signature
    assert base64_to_binary(doc["EncKeyPub"]) == info.encryption_key.encryption_key
    assert base64_to_binary(doc["EncKeyCertifyInfo"]) == info.encryption_key.certify_info
    assert (
        base64_to_binary(doc["EncKeyCertifyInfoSignature"])
        == info.encryption_key.certify_info_signature
    )


def test_to_json_pcrs_keep_order_and_indices():
    info = _full_info()
    doc = info.to_json()
    assert doc["PcrSet"] == [pcr.index for pcr in info.pcr_values.pcrs]
    assert [entry["Index"] for entry in doc["PCRs"]] == doc["PcrSet"]
    assert [base64_to_binary(entry["Digest"]) for entry in doc["PCRs"]] == [
        pcr.digest for pcr in info.pcr_values.pcrs
    ]


def test_to_json_is_serialisable():
    doc = _full_info().to_json()
    assert json.loads(json.dumps(doc)) == doc


def test_empty_info_serialises_empty_values():
    doc = TpmInfo().to_json()
    assert doc["AikCert"] == ""
    assert doc["PcrSet"] == []
    assert doc["PCRs"] == []