"""
Vigenère Console Output
========================

Rich-based console formatters for calculation results: a summary panel,
the per-character trace table, validation errors and the alphabet table.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import TabulaConsole
from vigenere.core.alphabets import ALPHABETS, get_alphabet
from vigenere.core.models import CipherRequest, CipherResult, TraceStep, ValidationFailure

_MODE_COLOURS: dict[str, str] = {
    "encode": "bright_green",
    "decode": "bright_cyan",
}


def _visible(text: str) -> str:
    # Spaces are alphabet members for mod 27/37; show them
    return text.replace(" ", "␣")


class VigenereConsoleOutput:
    """Console output formatters for Vigenère results.

    Usage::

        console = TabulaConsole()
        output = VigenereConsoleOutput(console)
        output.display_result(request, result, show_trace=True)
    """

    def __init__(self, console: Optional[TabulaConsole] = None) -> None:
        self.console = console or TabulaConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Result Display
    # ------------------------------------------------------------------ #

    def display_result(
        self,
        request: CipherRequest,
        result: CipherResult,
        *,
        show_trace: bool = True,
    ) -> None:
        """Display a calculation, or its validation failure."""
        if result.error is not None:
            self.display_error(result.error)
            return

        self.console.section(f"Vigenère {request.mode.value.title()}")

        alphabet = get_alphabet(request.modulus)
        label = alphabet.label if alphabet is not None else "?"
        colour = _MODE_COLOURS.get(request.mode.value, "white")

        summary = Text()
        summary.append("Mode: ", style="bold")
        summary.append(request.mode.value, style=colour)
        summary.append("\nModulus: ", style="bold")
        summary.append(f"{request.modulus} ({label})")
        summary.append("\nKey: ", style="bold")
        summary.append(_visible(request.key))
        summary.append("\nInput: ", style="bold")
        summary.append(_visible(request.text))
        summary.append("\nOutput: ", style="bold")
        summary.append(_visible(result.output), style=f"bold {colour}")

        self._rich.print(Panel(summary, title="Result", border_style="cyan"))

        if show_trace and result.trace:
            self.display_trace(result.trace)

    def display_trace(self, trace: list[TraceStep]) -> None:
        """Display the per-character arithmetic as a table."""
        tbl = Table(
            title="Trace",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("P", justify="center")
        tbl.add_column("P val", justify="right")
        tbl.add_column("K", justify="center")
        tbl.add_column("K val", justify="right")
        tbl.add_column("Formula")
        tbl.add_column("Result", justify="center", style="bold")

        for idx, step in enumerate(trace, start=1):
            tbl.add_row(
                str(idx),
                escape(_visible(step.input_char)),
                str(step.input_value),
                escape(_visible(step.key_char)),
                str(step.key_value),
                step.formula,
                escape(_visible(step.output_char)),
            )

        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Error Display
    # ------------------------------------------------------------------ #

    def display_error(self, error: ValidationFailure) -> None:
        """Display a validation failure with its field and kind."""
        body = Text()
        body.append("Field: ", style="bold")
        body.append(error.field)
        body.append("\nKind: ", style="bold")
        body.append(error.kind.value)
        body.append("\n")
        body.append(error.message, style="bold red")

        self._rich.print(Panel(body, title="Validation Failed", border_style="red"))

    # ------------------------------------------------------------------ #
    #  Alphabet Display
    # ------------------------------------------------------------------ #

    def display_alphabets(self) -> None:
        """Display the supported moduli and their alphabets."""
        self.console.table(
            "Supported Alphabets",
            ["Modulus", "Characters", "Allowed"],
            [
                (mod, _visible(alphabet.characters), alphabet.label)
                for mod, alphabet in sorted(ALPHABETS.items())
            ],
            styles=["bold", "", "dim"],
        )
