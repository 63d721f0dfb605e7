"""
Vigenère CLI
=============

Click-based command-line interface for the Vigenère calculator.

Usage::

    python -m vigenere encode "HELLO" --key KEY
    python -m vigenere decode "RIJVS" --key KEY --mod 26
    python -m vigenere -o json encode "HELLO WORLD" -k key -m 27
    python -m vigenere alphabets

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from shared.config import TabulaConfig
from shared.console import TabulaConsole

from vigenere import __version__
from vigenere.core.engine import VigenereEngine
from vigenere.core.models import CipherRequest, CipherResult, Mode
from vigenere.output.console import VigenereConsoleOutput
from vigenere.output.report import VigenereReportGenerator
from vigenere.parsers.request_parser import MOD_MAX, MOD_MIN


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to Tabula configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default=None,
    help="Output format (default from config, else console).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner, console messages and log output.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.version_option(__version__, prog_name="tabula")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
    log_level: Optional[str],
) -> None:
    """Tabula -- Vigenère cipher calculator.

    Encode and decode text with a repeating key over the 26, 27 or 37
    character alphabets, with a step-by-step trace of the arithmetic.
    """
    ctx.ensure_object(dict)

    tabula_config = TabulaConfig.load(config)
    if log_level:
        tabula_config.global_settings.log_level = log_level.upper()

    output_format = output or tabula_config.vigenere.output_format
    ctx.obj["config"] = tabula_config
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = TabulaConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = VigenereEngine(tabula_config, console_logging=not quiet)
    ctx.obj["display"] = VigenereConsoleOutput(console)
    ctx.obj["reporter"] = VigenereReportGenerator()

    if not quiet and output_format == "console":
        console.banner(version=__version__)


def _handle_output(
    ctx: click.Context,
    request: CipherRequest,
    result: CipherResult,
) -> None:
    """Write or print the result in the selected non-console format."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: VigenereReportGenerator = ctx.obj["reporter"]
    console: TabulaConsole = ctx.obj["console"]
    config: TabulaConfig = ctx.obj["config"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(request, result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(json.dumps(
                reporter.build_json(request, result),
                indent=2,
                ensure_ascii=False,
            ))
    elif output_format == "html":
        if output_file:
            path = Path(output_file)
        else:
            default_name = f"vigenere_{request.mode.value}_report.html"
            path = Path(config.global_settings.output_dir) / default_name
        path = reporter.generate_html(request, result, path)
        console.success(f"HTML report saved to: {path}")


def _calculate(
    ctx: click.Context,
    mode: Mode,
    text: str,
    key: str,
    mod: Optional[int],
    trace: Optional[bool],
) -> None:
    """Shared body of the ``encode`` and ``decode`` commands."""
    settings = ctx.obj["config"].vigenere
    engine: VigenereEngine = ctx.obj["engine"]
    display: VigenereConsoleOutput = ctx.obj["display"]

    if settings.uppercase_input:
        text, key = text.upper(), key.upper()

    request = CipherRequest(
        text=text,
        key=key,
        mode=mode,
        modulus=mod if mod is not None else settings.default_modulus,
    )
    result = engine.run(request)

    if ctx.obj["output_format"] == "console":
        display.display_result(
            request,
            result,
            show_trace=settings.show_trace if trace is None else trace,
        )
    else:
        _handle_output(ctx, request, result)

    if not result.ok:
        ctx.exit(1)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

_key_option = click.option(
    "--key", "-k",
    required=True,
    help="Cipher key (uppercased unless disabled in config).",
)
_mod_option = click.option(
    "--mod", "-m",
    type=click.IntRange(MOD_MIN, MOD_MAX),
    default=None,
    help="Modulus / alphabet size: 26, 27 or 37 (default from config).",
)
_trace_option = click.option(
    "--trace/--no-trace",
    default=None,
    help="Show the per-character trace table.",
)


@cli.command()
@click.argument("text", default="")
@_key_option
@_mod_option
@_trace_option
@click.pass_context
def encode(
    ctx: click.Context,
    text: str,
    key: str,
    mod: Optional[int],
    trace: Optional[bool],
) -> None:
    """Encode TEXT: each output index is (p + k) mod m."""
    _calculate(ctx, Mode.ENCODE, text, key, mod, trace)


@cli.command()
@click.argument("text", default="")
@_key_option
@_mod_option
@_trace_option
@click.pass_context
def decode(
    ctx: click.Context,
    text: str,
    key: str,
    mod: Optional[int],
    trace: Optional[bool],
) -> None:
    """Decode TEXT: each output index is (p - k + m) mod m."""
    _calculate(ctx, Mode.DECODE, text, key, mod, trace)


@cli.command()
@click.pass_context
def alphabets(ctx: click.Context) -> None:
    """List the supported moduli and their alphabets."""
    display: VigenereConsoleOutput = ctx.obj["display"]
    display.display_alphabets()


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Vigenère CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
