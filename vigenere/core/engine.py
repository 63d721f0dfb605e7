"""
Vigenère Calculation Engine
============================

The single pure function that every entry point shares. :func:`compute`
selects the alphabet for the requested modulus, validates the key and the
text against it, and then runs the encode/decode transform while
recording a per-character trace.

:class:`VigenereEngine` is a thin facade over :func:`compute` that adds
structured logging for the CLI and the request adapters. It never changes
the result.

Transform, for alphabet index values ``p`` (text) and ``k`` (key)::

    encode:  o = (p + k) mod m
    decode:  o = (p - k + m) mod m

References:
    - Vigenère, B. de (1586). Traicté des chiffres, ou secrètes manières
      d'escrire.
    - Kahn, D. (1967). The Codebreakers. Macmillan.
"""

from __future__ import annotations

from typing import Optional

from shared.config import TabulaConfig
from shared.logger import TabulaLogger

from vigenere.core.alphabets import SUPPORTED_MODULI, Alphabet, get_alphabet
from vigenere.core.models import (
    CipherRequest,
    CipherResult,
    ErrorKind,
    Mode,
    TraceStep,
    ValidationFailure,
)


# ===================================================================== #
#  Validation
# ===================================================================== #


def _select_alphabet(modulus: int) -> Alphabet | ValidationFailure:
    if modulus < 1:
        return ValidationFailure(
            kind=ErrorKind.INVALID_MODULUS,
            field="mod",
            message="modulus must be greater than 0",
        )

    alphabet = get_alphabet(modulus)
    if alphabet is None:
        supported = ", ".join(str(m) for m in SUPPORTED_MODULI)
        return ValidationFailure(
            kind=ErrorKind.UNSUPPORTED_MODULUS,
            field="mod",
            message=(
                f"Unsupported modulus: {modulus}. "
                f"Only {supported} are supported."
            ),
        )
    return alphabet


def _first_foreign_char(value: str, alphabet: Alphabet) -> Optional[str]:
    for ch in value:
        if ch not in alphabet:
            return ch
    return None


def _validate(
    text: str,
    key: str,
    alphabet: Alphabet,
    text_field: str,
) -> Optional[ValidationFailure]:
    """Check key then text; return the first failure found."""
    if not key:
        return ValidationFailure(
            kind=ErrorKind.EMPTY_KEY,
            field="key",
            message="key must not be empty",
        )

    bad = _first_foreign_char(key, alphabet)
    if bad is not None:
        return ValidationFailure(
            kind=ErrorKind.INVALID_KEY_CHARACTER,
            field="key",
            message=f"Invalid character '{bad}' in key. Allowed: {alphabet.label}.",
            character=bad,
            alphabet_label=alphabet.label,
        )

    bad = _first_foreign_char(text, alphabet)
    if bad is not None:
        return ValidationFailure(
            kind=ErrorKind.INVALID_TEXT_CHARACTER,
            field=text_field,
            message=(
                f"Invalid character '{bad}' in input text. "
                f"Allowed: {alphabet.label}."
            ),
            character=bad,
            alphabet_label=alphabet.label,
        )
    return None


# ===================================================================== #
#  Transform
# ===================================================================== #


def _transform(
    text: str,
    key: str,
    mode: Mode,
    alphabet: Alphabet,
) -> CipherResult:
    modulus = alphabet.modulus
    key_length = len(key)
    output: list[str] = []
    trace: list[TraceStep] = []

    for cursor, p_char in enumerate(text):
        k_char = key[cursor % key_length]
        p_val = alphabet.index(p_char)
        k_val = alphabet.index(k_char)

        if mode is Mode.ENCODE:
            out_val = (p_val + k_val) % modulus
            formula = f"({p_val} + {k_val}) mod {modulus} = {out_val}"
        else:
            out_val = (p_val - k_val + modulus) % modulus
            formula = f"({p_val} - {k_val} + {modulus}) mod {modulus} = {out_val}"

        out_char = alphabet.char_at(out_val)
        output.append(out_char)
        trace.append(TraceStep(
            input_char=p_char,
            input_value=p_val,
            key_char=k_char,
            key_value=k_val,
            formula=formula,
            output_char=out_char,
        ))

    return CipherResult.success("".join(output), trace)


def compute(
    text: str,
    key: str,
    mode: Mode | str,
    modulus: int,
    *,
    text_field: Optional[str] = None,
) -> CipherResult:
    """Encode or decode *text* with *key* over the alphabet for *modulus*.

    Pure: no state, no randomness, no I/O. Validation failures come back
    inside the result, never as exceptions.

    Args:
        text: Input text. Every character must be in the alphabet.
        key: Repeating key. Must be non-empty and in the alphabet.
        mode: :class:`Mode` or its string value.
        modulus: 26, 27 or 37.
        text_field: Field name reported for text errors. Defaults to
            ``plaintext`` when encoding and ``ciphertext`` when decoding.

    Returns:
        A :class:`CipherResult` holding either output and trace, or one
        :class:`ValidationFailure`.
    """
    mode = Mode(mode)

    selected = _select_alphabet(modulus)
    if isinstance(selected, ValidationFailure):
        return CipherResult.failure(selected)

    failure = _validate(text, key, selected, text_field or mode.text_field)
    if failure is not None:
        return CipherResult.failure(failure)

    return _transform(text, key, mode, selected)


# ===================================================================== #
#  Facade
# ===================================================================== #


class VigenereEngine:
    """Logging facade over :func:`compute` used by the CLI and adapters.

    Usage::

        engine = VigenereEngine()
        result = engine.encode("HELLO", "KEY", 26)
        result.output
        'RIJVS'

    Attributes:
        config: Tabula configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[TabulaConfig] = None,
        *,
        console_logging: bool = True,
    ) -> None:
        self.config = config or TabulaConfig()
        settings = self.config.global_settings
        self.logger = TabulaLogger(
            "vigenere.engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
            console_output=console_logging,
        )

    def run(
        self,
        request: CipherRequest,
        *,
        text_field: Optional[str] = None,
    ) -> CipherResult:
        """Run one :class:`CipherRequest` through :func:`compute`."""
        mode = request.mode.value
        with self.logger.operation(mode), self.logger.timed(f"vigenere {mode}"):
            self.logger.debug(
                "Calculating: modulus=%d text_length=%d key_length=%d",
                request.modulus,
                len(request.text),
                len(request.key),
            )
            result = compute(
                request.text,
                request.key,
                request.mode,
                request.modulus,
                text_field=text_field,
            )
            if result.error is not None:
                self.logger.info(
                    "Rejected %s request: %s on '%s'",
                    mode,
                    result.error.kind.value,
                    result.error.field,
                    modulus=request.modulus,
                )
        return result

    def encode(self, text: str, key: str, modulus: int) -> CipherResult:
        """Encode *text*; shorthand for :meth:`run` with :attr:`Mode.ENCODE`."""
        return self.run(CipherRequest(text=text, key=key, mode=Mode.ENCODE, modulus=modulus))

    def decode(self, text: str, key: str, modulus: int) -> CipherResult:
        """Decode *text*; shorthand for :meth:`run` with :attr:`Mode.DECODE`."""
        return self.run(CipherRequest(text=text, key=key, mode=Mode.DECODE, modulus=modulus))
