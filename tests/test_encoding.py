import pytest

from cvmattest.encoding import (
    base64_decode,
    base64_encode,
    base64_to_binary,
    base64url_to_binary,
    binary_to_base64,
    binary_to_base64url,
)

SAMPLES = [b"", b"\x00", b"ab", b"abc", bytes(range(256)), b"\xfb\xff\xfe" * 7]


def test_known_encoding():
    assert binary_to_base64(b"hello") == "aGVsbG8="


def test_url_alphabet_differs_from_standard():
    data = bytes([0xFB, 0xFF])
    assert binary_to_base64(data) == "+/8="
    assert binary_to_base64url(data) == "-_8"


@pytest.mark.parametrize("data", SAMPLES)
def test_base64_round_trip(data):
    assert base64_to_binary(binary_to_base64(data)) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_base64url_round_trip(data):
    encoded = binary_to_base64url(data)
    assert "=" not in encoded
    assert "+" not in encoded and "/" not in encoded
    assert base64url_to_binary(encoded) == data


def test_base64url_accepts_padding():
    data = b"\x01\x02\x03\x04"
    padded = binary_to_base64url(data) + "=="
    assert base64url_to_binary(padded) == data


def test_list_of_ints_accepted():
    assert base64_to_binary(binary_to_base64([1, 2, 3])) == b"\x01\x02\x03"


@pytest.mark.parametrize("text", ["", "cert-chain", "-----BEGIN CERTIFICATE-----\nabc\n", "ünïcode"])
def test_string_round_trip(text):
    assert base64_decode(base64_encode(text)) == text


def test_string_encode_matches_binary():
    assert base64_encode("hello") == binary_to_base64(b"hello")


@pytest.mark.parametrize("bad", ["abc", "a$==", "****"])
def test_invalid_base64_raises(bad):
    with pytest.raises(ValueError):
        base64_to_binary(bad)


def test_invalid_base64url_raises():
    with pytest.raises(ValueError):
        base64url_to_binary("a+b/")