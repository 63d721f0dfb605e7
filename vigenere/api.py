"""
Vigenère Request Adapters
==========================

Framework-agnostic adapters for the two web flows built on the engine:

    - a JSON API (``encrypt_api`` / ``decrypt_api``) that answers with a
      status code and a JSON-ready body;
    - a calculator form (``process_form``) that answers with either the
      field errors to show next to the form or the state to render.

No routing, sessions or rendering live here. A web handler decodes the
request body, calls one of these functions and relays the outcome.

Text errors are reported under ``plaintext`` by every adapter, whatever
the mode.

Status codes:
    - 200: calculation succeeded
    - 400: the engine rejected the input (modulus, key or text)
    - 422: the payload itself was malformed
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from shared.config import get_config

from vigenere.core.engine import VigenereEngine
from vigenere.core.models import CipherResult, Mode
from vigenere.parsers.request_parser import (
    DecryptPayload,
    EncryptPayload,
    FormPayload,
    RequestValidationError,
    parse_payload,
)

ENGINE_ERROR_MESSAGE = "Input validation failed during cipher calculation."
PAYLOAD_ERROR_MESSAGE = "The given data was invalid."


class ApiResponse(BaseModel):
    """Status code plus JSON body for a web framework to send."""

    status_code: int
    body: dict[str, Any] = Field(default_factory=dict)


class FormState(BaseModel):
    """Values the calculator page renders after a successful submission.

    ``plaintext`` and ``ciphertext`` always hold the plain and the
    enciphered side, whichever one was the input.
    """

    plaintext: str = ""
    key: str = ""
    mode: Mode = Mode.ENCODE
    mod: int = 26
    ciphertext: str = ""
    details: list[dict[str, Any]] = Field(default_factory=list)


class FormOutcome(BaseModel):
    """Result of a form submission: a state to render or errors to show."""

    state: Optional[FormState] = None
    errors: dict[str, str] = Field(default_factory=dict)
    old_input: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.state is not None


@lru_cache(maxsize=1)
def _default_engine() -> VigenereEngine:
    return VigenereEngine(get_config())


def _error_response(status_code: int, message: str, errors: dict[str, str]) -> ApiResponse:
    return ApiResponse(
        status_code=status_code,
        body={"status": "error", "message": message, "errors": errors},
    )


def _run_api(
    model: type[EncryptPayload] | type[DecryptPayload],
    data: Optional[Mapping[str, Any]],
    output_field: str,
    engine: Optional[VigenereEngine],
) -> ApiResponse:
    try:
        payload = parse_payload(model, data)
    except RequestValidationError as exc:
        return _error_response(422, PAYLOAD_ERROR_MESSAGE, exc.errors)

    engine = engine or _default_engine()
    result: CipherResult = engine.run(
        payload.to_request(payload.mode), text_field="plaintext"
    )
    if result.error is not None:
        return _error_response(400, ENGINE_ERROR_MESSAGE, result.error.as_field_error())

    return ApiResponse(
        status_code=200,
        body={"status": "success", output_field: result.output},
    )


def encrypt_api(
    data: Optional[Mapping[str, Any]],
    engine: Optional[VigenereEngine] = None,
) -> ApiResponse:
    """Encrypt ``plainText`` with ``key`` over modulus ``mod``.

    Success body: ``{"status": "success", "ciphertext": "..."}``.
    """
    return _run_api(EncryptPayload, data, "ciphertext", engine)


def decrypt_api(
    data: Optional[Mapping[str, Any]],
    engine: Optional[VigenereEngine] = None,
) -> ApiResponse:
    """Decrypt ``ciphertext`` with ``key`` over modulus ``mod``.

    Success body: ``{"status": "success", "plaintext": "..."}``.
    """
    return _run_api(DecryptPayload, data, "plaintext", engine)


def process_form(
    data: Optional[Mapping[str, Any]],
    engine: Optional[VigenereEngine] = None,
) -> FormOutcome:
    """Handle a calculator form submission."""
    old_input = dict(data or {})
    try:
        payload = parse_payload(FormPayload, data)
    except RequestValidationError as exc:
        return FormOutcome(errors=exc.errors, old_input=old_input)

    engine = engine or _default_engine()
    result = engine.run(payload.to_request(payload.mode), text_field="plaintext")
    if result.error is not None:
        return FormOutcome(errors=result.error.as_field_error(), old_input=old_input)

    if payload.mode is Mode.DECODE:
        plaintext, ciphertext = result.output, payload.text
    else:
        plaintext, ciphertext = payload.text, result.output

    return FormOutcome(
        state=FormState(
            plaintext=plaintext,
            key=payload.key,
            mode=payload.mode,
            mod=payload.mod,
            ciphertext=ciphertext,
            details=[step.model_dump(by_alias=True) for step in result.trace],
        ),
    )
