"""
Tabula Vigenère -- Polyalphabetic Cipher Calculator
====================================================

Encodes and decodes text with a repeating key over one of three fixed
alphabets (modulus 26, 27 or 37) and records the arithmetic performed
for every character.

Modules:
    - vigenere.core.engine: The pure ``compute`` function and its facade
    - vigenere.core.alphabets: The closed modulus -> alphabet table
    - vigenere.core.models: Pydantic data models
    - vigenere.parsers: Untrusted payload parsing
    - vigenere.api: JSON API and form adapters
    - vigenere.output: Console and report output
    - vigenere.cli: Click-based command-line interface

This is a classical teaching cipher. It provides no cryptographic
security.
"""

__version__ = "1.0.0"
__tool_name__ = "vigenere"
