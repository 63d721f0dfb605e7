"""
Vigenère Core Module
=====================

Contains the calculation engine, the alphabet table and the data models
for the Vigenère calculator.
"""

from vigenere.core.alphabets import ALPHABETS, SUPPORTED_MODULI, Alphabet, get_alphabet
from vigenere.core.engine import VigenereEngine, compute
from vigenere.core.models import (
    CipherRequest,
    CipherResult,
    ErrorKind,
    Mode,
    TraceStep,
    ValidationFailure,
)

__all__ = [
    "ALPHABETS",
    "Alphabet",
    "CipherRequest",
    "CipherResult",
    "ErrorKind",
    "Mode",
    "SUPPORTED_MODULI",
    "TraceStep",
    "ValidationFailure",
    "VigenereEngine",
    "compute",
    "get_alphabet",
]
