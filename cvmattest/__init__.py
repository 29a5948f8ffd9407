"""Helpers for confidential VM attestation clients: encoding, OS info, URLs, HTTP retries, JWT keys and RSA wrapping."""

__version__ = "0.1.0"