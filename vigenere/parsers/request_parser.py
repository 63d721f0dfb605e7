"""
Request Parser
===============

Parses untrusted payloads (JSON API bodies and form submissions) into
:class:`~vigenere.core.models.CipherRequest` objects.

This layer owns the caller responsibilities the engine relies on:

    - text and key are trimmed and uppercased before the engine sees them;
    - a missing or ``null`` text becomes the empty string;
    - the key is required and non-empty after trimming;
    - the modulus is an integer bounded to ``1..200`` (the engine then
      narrows it to 26, 27 or 37).

Payload shapes:
    - API encrypt: ``{"plainText": ..., "key": ..., "mod": ...}``
    - API decrypt: ``{"ciphertext": ..., "key": ..., "mod": ...}``
    - Form:        ``{"plaintext": ..., "key": ..., "mode": ..., "mod": ...}``
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from vigenere.core.models import CipherRequest, Mode

MOD_MIN = 1
MOD_MAX = 200

_P = TypeVar("_P", bound="_CipherPayload")


class RequestValidationError(Exception):
    """Raised when a payload fails structural validation.

    Attributes:
        errors: Mapping of payload field name to the first error message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        detail = "; ".join(f"{k}: {v}" for k, v in errors.items())
        super().__init__(f"Invalid request payload ({detail})")


# ===================================================================== #
#  Payload Models
# ===================================================================== #


class _CipherPayload(BaseModel):
    """Fields shared by every payload shape."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    text: str = ""
    key: str = Field(..., min_length=1)
    mod: int = Field(..., ge=MOD_MIN, le=MOD_MAX)

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("text", "key", mode="after")
    @classmethod
    def _uppercase(cls, v: str) -> str:
        return v.upper()

    def to_request(self, mode: Mode) -> CipherRequest:
        return CipherRequest(text=self.text, key=self.key, mode=mode, modulus=self.mod)


class EncryptPayload(_CipherPayload):
    """Body of the JSON encrypt endpoint; mode is always encode."""

    mode: ClassVar[Mode] = Mode.ENCODE

    text: str = Field(default="", alias="plainText")


class DecryptPayload(_CipherPayload):
    """Body of the JSON decrypt endpoint; mode is always decode."""

    mode: ClassVar[Mode] = Mode.DECODE

    text: str = Field(default="", alias="ciphertext")


class FormPayload(_CipherPayload):
    """Calculator form submission; the caller picks the mode."""

    text: str = Field(default="", alias="plaintext")
    mode: Mode


# ===================================================================== #
#  Parsing
# ===================================================================== #


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("payload",)
        errors.setdefault(str(loc[0]), err["msg"])
    return errors


def parse_payload(model: type[_P], data: Optional[Mapping[str, Any]]) -> _P:
    """Validate *data* against *model*.

    Args:
        model: One of :class:`EncryptPayload`, :class:`DecryptPayload`
            or :class:`FormPayload`.
        data: The decoded request body.

    Returns:
        The validated payload.

    Raises:
        RequestValidationError: If any field is missing or malformed.
    """
    if data is None:
        raise RequestValidationError({"payload": "Request body is required"})
    try:
        return model.model_validate(dict(data))
    except ValidationError as exc:
        raise RequestValidationError(_field_errors(exc)) from exc
