# cvmattest

Building blocks for a confidential VM attestation client.

## What it provides

- `cvmattest.encoding`: base64 and base64url conversions.
  `binary_to_base64` gives padded standard base64 and `binary_to_base64url`
  gives base64url without padding. `base64_to_binary` and
  `base64url_to_binary` accept text with or without padding and raise
  `ValueError` on bad input. `base64_encode` takes a string (encoded as UTF-8)
  or bytes. `base64_decode` returns a string with trailing NUL characters
  removed.
- `cvmattest.utils`: `new_uuid()`, `current_utc_time()` (a
  `YYYY-MM-DDTHH:MM:SSZ` timestamp, read from the local clock),
  `time_since_epoch_millis()` and `get_pid()`.
- `cvmattest.telemetry`: a process-wide slot for a telemetry reporter object,
  with `set_telemetry_reporting`, `get_telemetry_reporting` and
  `reset_telemetry_reporting`. The first reporter set stays in place until the
  slot is reset.
- `cvmattest.osinfo`: `parse_os_release_file(path, delim="=")` reads an
  os-release style file into a dict. `parse_version_string(text)` returns
  `(major, minor)`. `windows_version()` returns `(10, 0, "NotApplicable")`.
  `attestation_pcr_list(windows=None)` returns PCRs 0–7, or 0–7 and 11–14
  for Windows. When `windows` is None, the running platform decides.
- `cvmattest.url`: `split_url(url)` returns a `UrlInfo` with `protocol`,
  `domain`, `port`, `path` and `query`. `parse_url(url)` returns only the
  domain.
- `cvmattest.http`: `send_request(url, payload, session=None, sleep=time.sleep)`
  POSTs a JSON payload and returns the response body. It retries on 408, 429
  and 5xx responses, at most three times. Each wait is an exponential back-off
  from 5 seconds, or `Retry-After` if that is longer, plus jitter from
  `generate_random_jitter()` (0–5000 ms).
- `cvmattest.jwt`: `extract_jwk_info(jwt)` returns the base64url `n` and `e` of
  `x-ms-runtime.keys[0]` in the token's claims.
- `cvmattest.crypto`: `jwk_to_rsa_public_key(n, e)` builds a PEM public key.
  `encrypt_with_rsa_public_key(pem, wrap_alg, hash_alg, data)` encrypts with it.
  `wrap_alg` is a `RsaScheme` member:
  - `RsaEs` is PKCS#1 v1.5.
  - `RsaOaep` is OAEP using `hash_alg`.
  - `RsaNull` is raw RSA, and its input must be exactly as long as the modulus.

  `hash_alg` is one of `RsaHashAlg.RsaSha1`, `RsaSha256`, `RsaSha384` or `RsaSha512`.

Failures in `url`, `http` and `crypto` are raised as
`cvmattest.errors.AttestationError`. Its `code` is an `ErrorCode` member and
its `description` explains what went wrong. Input errors in `encoding`,
`osinfo` and `jwt` are raised as `ValueError`.

## What it does not do

These are helpers only. The package does not:

- talk to a TPM or collect measurement logs
- parse hardware isolation reports
- build the attestation payload
- decrypt the token returned by the service

The telemetry slot only holds a reporter object. Nothing in the package sends
telemetry.

## Installation

```
pip install cvmattest
```

## Example

```python
from cvmattest.crypto import RsaHashAlg, RsaScheme, encrypt_with_rsa_public_key, jwk_to_rsa_public_key
from cvmattest.errors import AttestationError
from cvmattest.jwt import extract_jwk_info


def wrap_key(attestation_jwt: str, symmetric_key: bytes) -> bytes:
    n, e = extract_jwk_info(attestation_jwt)
    pem = jwk_to_rsa_public_key(n, e)
    return encrypt_with_rsa_public_key(pem, RsaScheme.RsaOaep, RsaHashAlg.RsaSha256, symmetric_key)


try:
    wrapped = wrap_key(attestation_jwt, symmetric_key)
except AttestationError as err:
    print(err.code, err.description)
```

## Running the tests

```
pip install -e .[test]
pytest
```