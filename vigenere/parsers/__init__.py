"""
Vigenère Parsers
=================

Input parsing utilities for the Vigenère calculator. Turns untrusted
API and form payloads into engine requests.
"""

from vigenere.parsers.request_parser import (
    DecryptPayload,
    EncryptPayload,
    FormPayload,
    RequestValidationError,
    parse_payload,
)

__all__ = [
    "DecryptPayload",
    "EncryptPayload",
    "FormPayload",
    "RequestValidationError",
    "parse_payload",
]
