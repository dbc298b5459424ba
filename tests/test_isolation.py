import json

from cvmattest.encoding import base64_decode, base64_to_binary, base64url_to_binary
from cvmattest.isolation import IsolationInfo, IsolationType


def _snp_info():
    return IsolationInfo(
        isolation_type=IsolationType.SEV_SNP,
        snp_report=bytes(range(64)),
        runtime_data=b'{"keys": []}',
        vcek_cert="Y2VydA==",
    )


def test_default_is_trusted_launch_and_valid():
    info = IsolationInfo()
    assert info.isolation_type is IsolationType.TRUSTED_LAUNCH
    assert info.validate() is True


def test_trusted_launch_json():
    assert IsolationInfo().to_json() == {"Type": "TrustedLaunch"}


def test_trusted_launch_valid_without_evidence():
    info = IsolationInfo(isolation_type=IsolationType.TRUSTED_LAUNCH, snp_report=b"")
    assert info.validate() is True


def test_full_snp_validates():
    assert _snp_info().validate() is True


def test_snp_missing_report_invalid():
    info = _snp_info()
    info.snp_report = b""
    assert info.validate() is False


def test_snp_missing_cert_invalid():
    info = _snp_info()
    info.vcek_cert = ""
    assert info.validate() is False


def test_snp_missing_runtime_data_invalid():
    info = _snp_info()
    info.runtime_data = b""
    assert info.validate() is False


def test_snp_json_structure():
    doc = _snp_info().to_json()
    assert doc["Type"] == "SevSnp"
    assert set(doc["Evidence"]) == {"Proof", "RunTimeData"}


def test_snp_runtime_data_round_trip():
    info = _snp_info()
    doc = info.to_json()
    assert base64_to_binary(doc["Evidence"]["RunTimeData"]) == info.runtime_data


def test_snp_proof_round_trip():
    info = _snp_info()
    proof_text = base64_decode(info.to_json()["Evidence"]["Proof"])
    proof = json.loads(proof_text)
    assert proof["VcekCertChain"] == info.vcek_cert
    assert base64url_to_binary(proof["SnpReport"]) == info.snp_report


def test_snp_proof_is_indented_with_sorted_keys():
    proof_text = base64_decode(_snp_info().to_json()["Evidence"]["Proof"])
    lines = proof_text.splitlines()
    assert lines[0] == "{"
    assert lines[-1] == "}"
    assert lines[1].startswith('\t"SnpReport" : ')
    assert lines[2].startswith('\t"VcekCertChain" : ')