"""RSA public-key helpers: wrapping data and building keys from a JWK."""

from __future__ import annotations

import enum
import logging

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from cvmattest.encoding import base64url_to_binary
from cvmattest.errors import AttestationError, ErrorCode

__all__ = ["RsaScheme", "RsaHashAlg", "encrypt_with_rsa_public_key", "jwk_to_rsa_public_key"]

_log = logging.getLogger(__name__)


class RsaScheme(enum.Enum):
    """RSA padding scheme used to wrap data."""

    RsaEs = enum.auto()
    RsaOaep = enum.auto()
    RsaNull = enum.auto()


class RsaHashAlg(enum.Enum):
    """Digest used together with the RSA padding scheme."""

    RsaSha1 = enum.auto()
    RsaSha256 = enum.auto()
    RsaSha384 = enum.auto()
    RsaSha512 = enum.auto()


_HASHES = {
    RsaHashAlg.RsaSha1: hashes.SHA1,
    RsaHashAlg.RsaSha256: hashes.SHA256,
    RsaHashAlg.RsaSha384: hashes.SHA384,
    RsaHashAlg.RsaSha512: hashes.SHA512,
}


def _load_public_key(public_key_pem: str | bytes) -> rsa.RSAPublicKey:
    pem = public_key_pem.encode("ascii") if isinstance(public_key_pem, str) else bytes(public_key_pem)
    try:
        key = serialization.load_pem_public_key(pem)
    except (ValueError, TypeError) as exc:
        raise AttestationError(
            ErrorCode.ERROR_EVP_PKEY_ENCRYPT_INIT_FAILED, "EVP_PKEY_encrypt_init failed"
        ) from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise AttestationError(
            ErrorCode.ERROR_EVP_PKEY_ENCRYPT_INIT_FAILED, "EVP_PKEY_CTX_set_rsa_padding failed"
        )
    return key


def _raw_encrypt(key: rsa.RSAPublicKey, data: bytes) -> bytes:
    numbers = key.public_numbers()
    size = (key.key_size + 7) // 8
    if len(data) != size:
        raise ValueError("data length must equal the modulus size")
    message = int.from_bytes(data, "big")
    if message >= numbers.n:
        raise ValueError("data too large for modulus")
    return pow(message, numbers.e, numbers.n).to_bytes(size, "big")


def encrypt_with_rsa_public_key(
    public_key_pem: str | bytes,
    wrap_alg: RsaScheme,
    hash_alg: RsaHashAlg,
    data: bytes,
) -> bytes:
    """Encrypt ``data`` with the RSA public key given in PEM form.

    ``RsaEs`` is PKCS#1 v1.5, ``RsaOaep`` is OAEP with ``hash_alg`` and
    ``RsaNull`` is raw RSA, which needs input exactly as long as the modulus.
    Raises AttestationError on bad input, an unusable key or failed encryption.
    """
    if not public_key_pem or not data:
        raise AttestationError(ErrorCode.ERROR_INVALID_INPUT_PARAMETER, "Invalid input parameter")

    hash_cls = _HASHES.get(hash_alg)
    if hash_cls is None:
        raise AttestationError(
            ErrorCode.ERROR_EVP_PKEY_ENCRYPT_INIT_FAILED,
            "EncryptDataWithRSAPubKey failed; called with unknown message digest algorithm",
        )
    if not isinstance(wrap_alg, RsaScheme):
        raise AttestationError(
            ErrorCode.ERROR_EVP_PKEY_ENCRYPT_INIT_FAILED,
            "EncryptDataWithRSAPubKey failed; called with unknown RSA padding algorithm",
        )

    key = _load_public_key(public_key_pem)
    data = bytes(data)
    try:
        if wrap_alg is RsaScheme.RsaOaep:
            scheme = padding.OAEP(mgf=padding.MGF1(algorithm=hash_cls()), algorithm=hash_cls(), label=None)
            return key.encrypt(data, scheme)
        if wrap_alg is RsaScheme.RsaEs:
            return key.encrypt(data, padding.PKCS1v15())
        return _raw_encrypt(key, data)
    except ValueError as exc:
        raise AttestationError(ErrorCode.ERROR_EVP_PKEY_ENCRYPT_FAILED, "EVP_PKEY_encrypt failed") from exc


def jwk_to_rsa_public_key(n: str, e: str) -> bytes:
    """Build a PEM (SubjectPublicKeyInfo) RSA public key from base64url ``n`` and ``e``.

    Raises AttestationError when an input is empty or no valid key results.
    """
    if not n or not e:
        raise AttestationError(ErrorCode.ERROR_INVALID_INPUT_PARAMETER, "Invalid input parameter")
    try:
        modulus = int.from_bytes(base64url_to_binary(n), "big")
        exponent = int.from_bytes(base64url_to_binary(e), "big")
        key = rsa.RSAPublicNumbers(exponent, modulus).public_key()
    except ValueError as exc:
        raise AttestationError(
            ErrorCode.ERROR_CONVERTING_JWK_TO_RSA_PUB,
            "Error while converting JWK to RSA public key",
        ) from exc
    return key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )