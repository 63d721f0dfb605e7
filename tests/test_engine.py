"""Tests for the Vigenère calculation engine."""

import logging

import pytest
from pydantic import ValidationError

from vigenere.core.alphabets import ALPHABETS
from vigenere.core.engine import VigenereEngine, compute
from vigenere.core.models import (
    CipherRequest,
    CipherResult,
    ErrorKind,
    Mode,
    ValidationFailure,
)


# ── Worked examples ──────────────────────────────────────────────────────────

def test_encode_hello_with_key():
    result = compute("HELLO", "KEY", Mode.ENCODE, 26)
    assert result.ok
    assert result.error is None
    assert result.output == "RIJVS"


def test_encode_trace_values():
    result = compute("HELLO", "KEY", Mode.ENCODE, 26)
    assert [s.input_value for s in result.trace] == [7, 4, 11, 11, 14]
    assert [s.key_char for s in result.trace] == ["K", "E", "Y", "K", "E"]
    assert [s.key_value for s in result.trace] == [10, 4, 24, 10, 4]
    assert [s.output_char for s in result.trace] == list("RIJVS")

    first = result.trace[0]
    assert first.input_char == "H"
    assert first.formula == "(7 + 10) mod 26 = 17"
    assert result.trace[2].formula == "(11 + 24) mod 26 = 9"


def test_decode_recovers_plaintext():
    result = compute("RIJVS", "KEY", Mode.DECODE, 26)
    assert result.ok
    assert result.output == "HELLO"
    assert result.trace[0].formula == "(17 - 10 + 26) mod 26 = 7"


def test_mode_accepts_string_value():
    assert compute("RIJVS", "KEY", "decode", 26).output == "HELLO"


def test_space_is_valid_for_modulus_27():
    result = compute("HELLO WORLD", "KEY", Mode.ENCODE, 27)
    assert result.ok
    assert len(result.output) == len("HELLO WORLD")
    assert compute(result.output, "KEY", Mode.DECODE, 27).output == "HELLO WORLD"


def test_space_is_rejected_for_modulus_26():
    result = compute("HELLO WORLD", "KEY", Mode.ENCODE, 26)
    assert not result.ok
    assert result.error.kind is ErrorKind.INVALID_TEXT_CHARACTER
    assert result.error.field == "plaintext"
    assert result.error.character == " "
    assert result.error.alphabet_label == "A–Z only"
    assert result.error.message == "Invalid character ' ' in input text. Allowed: A–Z only."
    assert result.output == ""
    assert result.trace == []


def test_digits_only_valid_for_modulus_37():
    assert compute("R2D2", "C3PO", Mode.ENCODE, 37).ok
    failed = compute("R2D2", "KEY", Mode.ENCODE, 27)
    assert failed.error.kind is ErrorKind.INVALID_TEXT_CHARACTER
    assert failed.error.character == "2"


def test_lowercase_key_is_rejected():
    result = compute("HELLO", "Key", Mode.ENCODE, 26)
    assert result.error.kind is ErrorKind.INVALID_KEY_CHARACTER
    assert result.error.field == "key"
    assert result.error.character == "e"
    assert result.error.message == "Invalid character 'e' in key. Allowed: A–Z only."


def test_empty_key_is_rejected():
    result = compute("HELLO", "", Mode.ENCODE, 26)
    assert result.error.kind is ErrorKind.EMPTY_KEY
    assert result.error.field == "key"
    assert result.error.message == "key must not be empty"


def test_empty_key_rejected_even_with_empty_text():
    assert compute("", "", Mode.ENCODE, 26).error.kind is ErrorKind.EMPTY_KEY


def test_empty_text_succeeds_with_no_trace():
    result = compute("", "KEY", Mode.ENCODE, 26)
    assert result.ok
    assert result.output == ""
    assert result.trace == []


# ── Validation order and fields ──────────────────────────────────────────────

def test_key_is_validated_before_text():
    result = compute("hello", "k", Mode.ENCODE, 26)
    assert result.error.field == "key"


def test_first_invalid_text_character_is_reported():
    result = compute("AB!C?", "KEY", Mode.ENCODE, 26)
    assert result.error.character == "!"


def test_decode_reports_ciphertext_field():
    result = compute("RIJ S", "KEY", Mode.DECODE, 26)
    assert result.error.field == "ciphertext"


def test_text_field_override():
    result = compute("RIJ S", "KEY", Mode.DECODE, 26, text_field="plaintext")
    assert result.error.field == "plaintext"


def test_label_follows_selected_alphabet():
    result = compute("A#", "KEY", Mode.ENCODE, 37)
    assert result.error.alphabet_label == "A–Z, 0–9, and space only"
    assert result.error.message.endswith("Allowed: A–Z, 0–9, and space only.")


# ── Modulus boundaries ───────────────────────────────────────────────────────

@pytest.mark.parametrize("modulus", [0, -1, -26])
def test_non_positive_modulus(modulus):
    result = compute("HELLO", "KEY", Mode.ENCODE, modulus)
    assert result.error.kind is ErrorKind.INVALID_MODULUS
    assert result.error.field == "mod"
    assert result.error.message == "modulus must be greater than 0"


@pytest.mark.parametrize("modulus", [1, 25, 28, 36, 38, 200])
def test_unsupported_modulus(modulus):
    result = compute("HELLO", "KEY", Mode.ENCODE, modulus)
    assert result.error.kind is ErrorKind.UNSUPPORTED_MODULUS
    assert result.error.field == "mod"
    assert str(modulus) in result.error.message
    assert "26, 27, 37" in result.error.message


def test_modulus_checked_before_key():
    result = compute("HELLO", "", Mode.ENCODE, 25)
    assert result.error.kind is ErrorKind.UNSUPPORTED_MODULUS


@pytest.mark.parametrize("modulus", [26, 27, 37])
def test_supported_modulus_accepted(modulus):
    assert compute("HELLO", "KEY", Mode.ENCODE, modulus).ok


# ── Properties ───────────────────────────────────────────────────────────────

_ROUND_TRIP_CASES = [
    (26, "ATTACKATDAWN", "LEMON"),
    (26, "ZZZZ", "Z"),
    (27, "MEET ME AT NOON", "SECRET KEY"),
    (27, "   ", "A B"),
    (37, "AGENT 007 REPORTS", "M16"),
    (37, "0123456789", "9 Z"),
]


@pytest.mark.parametrize("modulus,text,key", _ROUND_TRIP_CASES)
def test_round_trip(modulus, text, key):
    encoded = compute(text, key, Mode.ENCODE, modulus)
    decoded = compute(encoded.output, key, Mode.DECODE, modulus)
    assert decoded.output == text


@pytest.mark.parametrize("modulus", [26, 27, 37])
def test_round_trip_whole_alphabet(modulus):
    alphabet = ALPHABETS[modulus].characters
    text = alphabet[::-1] * 2
    key = alphabet[3:11]
    encoded = compute(text, key, Mode.ENCODE, modulus).output
    assert compute(encoded, key, Mode.DECODE, modulus).output == text


@pytest.mark.parametrize("modulus,text,key", _ROUND_TRIP_CASES)
def test_output_stays_in_alphabet(modulus, text, key):
    alphabet = ALPHABETS[modulus]
    for mode in Mode:
        result = compute(text, key, mode, modulus)
        assert all(ch in alphabet for ch in result.output)


@pytest.mark.parametrize("modulus,text,key", _ROUND_TRIP_CASES)
def test_trace_length_matches_text(modulus, text, key):
    result = compute(text, key, Mode.ENCODE, modulus)
    assert len(result.trace) == len(text)
    assert "".join(s.input_char for s in result.trace) == text
    assert "".join(s.output_char for s in result.trace) == result.output


def test_key_wraps_around_text():
    key = "ABC"
    result = compute("Z" * 10, key, Mode.ENCODE, 26)
    assert [s.key_char for s in result.trace] == [key[i % 3] for i in range(10)]


def test_key_longer_than_text_uses_prefix():
    result = compute("AB", "XYZ", Mode.ENCODE, 26)
    assert [s.key_char for s in result.trace] == ["X", "Y"]
    assert result.output == "XZ"


def test_deterministic():
    first = compute("MEET ME AT NOON", "KEY", Mode.ENCODE, 27)
    second = compute("MEET ME AT NOON", "KEY", Mode.ENCODE, 27)
    assert first == second
    assert first.model_dump() == second.model_dump()


def test_decode_never_goes_negative():
    result = compute("A", "Z", Mode.DECODE, 26)
    assert result.output == "B"
    assert result.trace[0].formula == "(0 - 25 + 26) mod 26 = 1"


# ── Models ───────────────────────────────────────────────────────────────────

def test_failed_result_cannot_carry_output():
    failure = ValidationFailure(kind=ErrorKind.EMPTY_KEY, field="key", message="x")
    with pytest.raises(ValidationError):
        CipherResult(output="ABC", error=failure)


def test_failure_as_field_error():
    result = compute("HELLO", "", Mode.ENCODE, 26)
    assert result.error.as_field_error() == {"key": "key must not be empty"}


def test_trace_step_dumps_with_wire_names():
    step = compute("H", "K", Mode.ENCODE, 26).trace[0]
    assert step.model_dump(by_alias=True) == {
        "P": "H",
        "Pval": 7,
        "K": "K",
        "Kval": 10,
        "Formula": "(7 + 10) mod 26 = 17",
        "Result": "R",
    }


# ── Facade ───────────────────────────────────────────────────────────────────

def test_facade_matches_compute(engine):
    assert engine.encode("HELLO", "KEY", 26) == compute("HELLO", "KEY", Mode.ENCODE, 26)
    assert engine.decode("RIJVS", "KEY", 26) == compute("RIJVS", "KEY", Mode.DECODE, 26)


def test_facade_run_with_request(engine):
    request = CipherRequest(text="HELLO WORLD", key="KEY", mode=Mode.ENCODE, modulus=26)
    result = engine.run(request, text_field="plaintext")
    assert result.error.kind is ErrorKind.INVALID_TEXT_CHARACTER


def test_facade_logs_rejections(engine):
    records: list[logging.LogRecord] = []

    class _Collect(logging.Handler):
        def emit(self, record):
            records.append(record)

    engine.logger.underlying.addHandler(_Collect())
    engine.decode("RIJVS", "", 26)

    rejected = [r for r in records if r.levelno == logging.INFO]
    assert len(rejected) == 1
    assert "EmptyKey" in rejected[0].getMessage()
    assert rejected[0].operation == "decode"


def test_second_engine_keeps_first_engine_handlers(engine):
    records: list[logging.LogRecord] = []

    class _Collect(logging.Handler):
        def emit(self, record):
            records.append(record)

    engine.logger.underlying.addHandler(_Collect())
    VigenereEngine(console_logging=False)
    engine.encode("HELLO", "", 26)

    assert len(records) == 1
