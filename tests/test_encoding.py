import pytest

from cvmattest.encoding import (
    base64_decode,
    base64_encode,
    base64_to_binary,
    base64url_to_binary,
    binary_to_base64,
    binary_to_base64url,
)

ALL_BYTES = bytes(range(256))


def test_rfc_example_encodes():
    assert binary_to_base64(b"Man") == "TWFu"


def test_padding_length_follows_input_size():
    for size in range(10):
        encoded = binary_to_base64(b"x" * size)
        assert len(encoded) % 4 == 0
        assert encoded.count("=") == (3 - size % 3) % 3


@pytest.mark.parametrize("size", [0, 1, 2, 3, 4, 5, 31, 256])
def test_binary_round_trip(size):
    data = ALL_BYTES[:size]
    assert base64_to_binary(binary_to_base64(data)) == data


@pytest.mark.parametrize("size", [0, 1, 2, 3, 4, 5, 31, 256])
def test_url_round_trip(size):
    data = ALL_BYTES[:size]
    assert base64url_to_binary(binary_to_base64url(data)) == data


def test_url_alphabet_has_no_reserved_characters():
    encoded = binary_to_base64url(ALL_BYTES)
    assert "+" not in encoded
    assert "/" not in encoded
    assert "=" not in encoded


def test_decoding_accepts_missing_padding():
    padded = binary_to_base64(b"ab")
    assert base64_to_binary(padded.rstrip("=")) == b"ab"


def test_decoding_preserves_trailing_zero_bytes():
    data = b"\x01\x00\x00"
    assert base64_to_binary(binary_to_base64(data)) == data


def test_invalid_characters_raise():
    with pytest.raises(ValueError):
        base64_to_binary("ab$d")


def test_invalid_length_raises():
    with pytest.raises(ValueError):
        base64_to_binary("abcde")


def test_string_round_trip():
    text = "Linux distribution \u00e9"
    assert base64_decode(base64_encode(text)) == text


def test_string_decode_drops_trailing_nuls():
    assert base64_decode(base64_encode("abc\0\0")) == "abc"


def test_encode_accepts_bytes_and_str_alike():
    assert base64_encode(b"Windows") == base64_encode("Windows")