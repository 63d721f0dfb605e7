"""Tests for the modulus -> alphabet table."""

import pytest
from pydantic import ValidationError

from vigenere.core.alphabets import ALPHABETS, SUPPORTED_MODULI, Alphabet, get_alphabet


def test_supported_moduli_are_closed_set():
    assert SUPPORTED_MODULI == (26, 27, 37)


@pytest.mark.parametrize("modulus", [26, 27, 37])
def test_alphabet_length_matches_modulus(modulus):
    alphabet = ALPHABETS[modulus]
    assert len(alphabet) == modulus
    assert len(alphabet.characters) == modulus
    assert len(set(alphabet.characters)) == modulus


def test_alphabet_contents():
    assert ALPHABETS[26].characters == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert ALPHABETS[27].characters == "ABCDEFGHIJKLMNOPQRSTUVWXYZ "
    assert ALPHABETS[37].characters == "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 "


def test_alphabet_labels():
    assert ALPHABETS[26].label == "A–Z only"
    assert ALPHABETS[27].label == "A–Z and space only"
    assert ALPHABETS[37].label == "A–Z, 0–9, and space only"


@pytest.mark.parametrize("modulus", [0, 1, 25, 28, 36, 38, 200])
def test_unsupported_modulus_has_no_alphabet(modulus):
    assert get_alphabet(modulus) is None


def test_membership_and_indexing():
    alphabet = ALPHABETS[37]
    assert "Z" in alphabet
    assert "9" in alphabet
    assert " " in alphabet
    assert "a" not in alphabet
    assert "AB" not in alphabet
    assert alphabet.index("0") == 26
    assert alphabet.index(" ") == 36
    assert alphabet.char_at(36) == " "


def test_alphabet_is_immutable():
    with pytest.raises(ValidationError):
        ALPHABETS[26].label = "changed"


def test_alphabet_rejects_length_mismatch():
    with pytest.raises(ValidationError):
        Alphabet(modulus=3, characters="AB", label="bad")


def test_alphabet_rejects_duplicates():
    with pytest.raises(ValidationError):
        Alphabet(modulus=3, characters="ABA", label="bad")
