"""
Vigenère Alphabets
===================

The closed table of working alphabets. Each supported modulus maps to
exactly one immutable :class:`Alphabet`; the alphabet length always
equals its modulus.

    ==========  =======================================  ============================
    Modulus     Characters                               Label
    ==========  =======================================  ============================
    26          ``A-Z``                                  A–Z only
    27          ``A-Z`` + space                          A–Z and space only
    37          ``A-Z`` + ``0-9`` + space                A–Z, 0–9, and space only
    ==========  =======================================  ============================
"""

from __future__ import annotations

import string
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class Alphabet(BaseModel):
    """An ordered, duplicate-free character set mapped to ``0..modulus-1``.

    Attributes:
        modulus: Size of the alphabet and the arithmetic modulus.
        characters: The characters in index order.
        label: Human-readable description used in validation messages.
    """

    model_config = ConfigDict(frozen=True)

    modulus: int
    characters: str
    label: str

    @model_validator(mode="after")
    def _check_shape(self) -> Alphabet:
        if len(self.characters) != self.modulus:
            raise ValueError(
                f"alphabet has {len(self.characters)} characters, "
                f"expected {self.modulus}"
            )
        if len(set(self.characters)) != len(self.characters):
            raise ValueError("alphabet characters must be unique")
        return self

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.characters

    def __len__(self) -> int:
        return self.modulus

    def index(self, char: str) -> int:
        """Return the 0-based index of *char*.

        Raises:
            ValueError: If *char* is not part of the alphabet.
        """
        return self.characters.index(char)

    def char_at(self, value: int) -> str:
        """Return the character at index *value*."""
        return self.characters[value]


ALPHABETS: dict[int, Alphabet] = {
    26: Alphabet(
        modulus=26,
        characters=string.ascii_uppercase,
        label="A–Z only",
    ),
    27: Alphabet(
        modulus=27,
        characters=string.ascii_uppercase + " ",
        label="A–Z and space only",
    ),
    37: Alphabet(
        modulus=37,
        characters=string.ascii_uppercase + string.digits + " ",
        label="A–Z, 0–9, and space only",
    ),
}

SUPPORTED_MODULI: tuple[int, ...] = tuple(sorted(ALPHABETS))


def get_alphabet(modulus: int) -> Optional[Alphabet]:
    """Look up the alphabet for *modulus*, or ``None`` if unsupported."""
    return ALPHABETS.get(modulus)
