"""
Tabula Console Interface
=========================

Rich-powered console abstraction providing a unified presentation layer
for every Tabula module.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, success messages and tables, all
with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all Tabula output
# ---------------------------------------------------------------------------
_TABULA_THEME = Theme(
    {
        "tabula.section": "bold bright_magenta",
        "tabula.success": "bold green",
        "tabula.dim": "dim white",
        "tabula.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ╔╦╗╔═╗╔╗ ╦ ╦╦  ╔═╗
   ║ ╠═╣╠╩╗║ ║║  ╠═╣
   ╩ ╩ ╩╚═╝╚═╝╩═╝╩ ╩
[/bright_cyan]"""

_TAGLINE = "Tabula Recta Cipher Calculator"


class TabulaConsole:
    """Unified console interface for all Tabula modules.

    Usage::

        con = TabulaConsole()
        con.banner()
        con.section("Trace")
        con.success("Encoded 5 characters")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_TABULA_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Tabula ASCII-art banner.

        Args:
            version: Version string shown beneath the logo.
        """
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[tabula.highlight]{_TAGLINE}[/tabula.highlight]\n"
            f"[tabula.dim]Version: {version}  |  {now}[/tabula.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="tabula.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[tabula.success][✔] SUCCESS:[/tabula.success] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)
