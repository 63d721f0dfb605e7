"""
Vigenère Core Data Models
==========================

Pydantic models for the Vigenère calculation engine: the request, the
per-character trace, validation failures and the tagged result.

All models are serialisable to JSON and designed for consumption by the
CLI output layer, the report generators and the request adapters.

References:
    - Kahn, D. (1967). The Codebreakers. Macmillan. (Ch. 4, Vigenère)
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Mode(str, enum.Enum):
    """Direction of the transform."""

    ENCODE = "encode"
    DECODE = "decode"

    @property
    def text_field(self) -> str:
        """Name of the input role reported in text validation errors."""
        return "plaintext" if self is Mode.ENCODE else "ciphertext"


class ErrorKind(str, enum.Enum):
    """Validation failure taxonomy.

    Every kind is detected before any transform work begins.
    """

    INVALID_MODULUS = "InvalidModulus"
    UNSUPPORTED_MODULUS = "UnsupportedModulus"
    EMPTY_KEY = "EmptyKey"
    INVALID_KEY_CHARACTER = "InvalidKeyCharacter"
    INVALID_TEXT_CHARACTER = "InvalidTextCharacter"


# ===================================================================== #
#  Request
# ===================================================================== #


class CipherRequest(BaseModel):
    """One calculation request.

    Attributes:
        text: Input text, already uppercased by the caller.
        key: Key text, already uppercased by the caller.
        mode: Encode or decode.
        modulus: Alphabet size to work in.
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    key: str
    mode: Mode = Mode.ENCODE
    modulus: int = 26


# ===================================================================== #
#  Trace
# ===================================================================== #


class TraceStep(BaseModel):
    """The arithmetic performed for one input character.

    Dumping with ``by_alias=True`` yields the short wire names used by
    the form and API payloads (``P``, ``Pval``, ``K``, ``Kval``,
    ``Formula``, ``Result``).

    Attributes:
        input_char: Character taken from the input text.
        input_value: Alphabet index of ``input_char``.
        key_char: Key character applied at this position.
        key_value: Alphabet index of ``key_char``.
        formula: The substituted arithmetic, e.g. ``"(7 + 10) mod 26 = 17"``.
        output_char: The resulting character.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    input_char: str = Field(alias="P")
    input_value: int = Field(alias="Pval", ge=0)
    key_char: str = Field(alias="K")
    key_value: int = Field(alias="Kval", ge=0)
    formula: str = Field(alias="Formula")
    output_char: str = Field(alias="Result")


# ===================================================================== #
#  Result
# ===================================================================== #


class ValidationFailure(BaseModel):
    """A caller input error, reported as data rather than raised.

    Attributes:
        kind: Which validation rule failed.
        field: Name of the offending input field (``mod``, ``key``,
            ``plaintext`` or ``ciphertext``).
        message: Human-readable explanation.
        character: The offending character, for character errors.
        alphabet_label: Label of the selected alphabet, for character errors.
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    field: str
    message: str
    character: Optional[str] = None
    alphabet_label: Optional[str] = None

    def as_field_error(self) -> dict[str, str]:
        """Return the failure as a single ``{field: message}`` mapping."""
        return {self.field: self.message}


class CipherResult(BaseModel):
    """Tagged outcome of a calculation.

    Exactly one side is populated: either ``error`` is set and there is no
    output, or ``error`` is ``None`` and ``output``/``trace`` hold the
    transformed text.
    """

    model_config = ConfigDict(frozen=True)

    output: str = ""
    trace: list[TraceStep] = Field(default_factory=list)
    error: Optional[ValidationFailure] = None

    @model_validator(mode="after")
    def _one_side_only(self) -> CipherResult:
        if self.error is not None and (self.output or self.trace):
            raise ValueError("a failed result carries no output or trace")
        return self

    @property
    def ok(self) -> bool:
        """``True`` when the calculation succeeded."""
        return self.error is None

    @classmethod
    def success(cls, output: str, trace: list[TraceStep]) -> CipherResult:
        return cls(output=output, trace=trace)

    @classmethod
    def failure(cls, error: ValidationFailure) -> CipherResult:
        return cls(error=error)
