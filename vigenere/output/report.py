"""
Vigenère Report Generator
==========================

Generates HTML and JSON reports for a single calculation. The HTML report
uses inline CSS for portability and renders the trace as a table; the JSON
report is machine-readable and carries the request, the result and report
metadata.
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from vigenere import __version__
from vigenere.core.alphabets import get_alphabet
from vigenere.core.models import CipherRequest, CipherResult


# ===================================================================== #
#  HTML Template
# ===================================================================== #

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Tabula Vigenère Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-green: #3fb950;
            --accent-red: #f85149;
            --accent-purple: #bc8cff;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 1000px; margin: 0 auto; }}
        .header {{
            text-align: center;
            padding: 2rem;
            border: 1px solid var(--accent-cyan);
            border-radius: 8px;
            margin-bottom: 2rem;
            background: var(--bg-secondary);
        }}
        .header h1 {{ color: var(--accent-cyan); font-size: 2rem; }}
        .header .subtitle {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .section h2 {{
            color: var(--accent-purple);
            font-size: 1.4rem;
            margin-bottom: 1rem;
            padding-bottom: 0.5rem;
            border-bottom: 1px solid var(--border);
        }}
        table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
        th, td {{
            padding: 0.5rem 1rem;
            text-align: left;
            border: 1px solid var(--border);
            font-family: monospace;
        }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); }}
        .output {{ color: var(--accent-green); font-weight: 700; }}
        .error {{ color: var(--accent-red); font-weight: 700; }}
        .footer {{
            text-align: center;
            padding: 1.5rem;
            color: var(--text-secondary);
            font-size: 0.8rem;
            border-top: 1px solid var(--border);
            margin-top: 2rem;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Tabula :: Vigenère</h1>
            <div class="subtitle">
                {mode} over modulus {modulus} ({label})<br>
                Generated: {timestamp}
            </div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <table>
                <tr><th>Mode</th><td>{mode}</td></tr>
                <tr><th>Modulus</th><td>{modulus}</td></tr>
                <tr><th>Key</th><td>{key}</td></tr>
                <tr><th>Input</th><td>{text}</td></tr>
                {outcome_row}
            </table>
        </div>

        {trace_section}

        <div class="footer">
            Tabula Vigenère v{version} | Classical cipher calculator<br>
            Report generated {timestamp}
        </div>
    </div>
</body>
</html>
"""


class VigenereReportGenerator:
    """Generates HTML and JSON reports for Vigenère calculations.

    Usage::

        generator = VigenereReportGenerator()
        generator.generate_html(request, result, Path("report.html"))
        generator.generate_json(request, result, Path("report.json"))
    """

    def build_json(
        self,
        request: CipherRequest,
        result: CipherResult,
    ) -> dict[str, Any]:
        """Assemble the JSON report document without writing it."""
        alphabet = get_alphabet(request.modulus)
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "vigenere",
                "version": __version__,
            },
            "request": {
                **request.model_dump(mode="json"),
                "alphabet": alphabet.label if alphabet is not None else None,
            },
            "result": {
                "status": "success" if result.ok else "error",
                **result.model_dump(mode="json"),
            },
        }

    def generate_json(
        self,
        request: CipherRequest,
        result: CipherResult,
        output_path: Path,
    ) -> Path:
        """Write the JSON report to *output_path* and return the path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build_json(request, result), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        return output_path

    def generate_html(
        self,
        request: CipherRequest,
        result: CipherResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write the HTML report to *output_path* and return the path.

        Args:
            request: The calculation request.
            result: Its result, successful or not.
            output_path: Where to write the file.
            title: Optional report title override.
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        alphabet = get_alphabet(request.modulus)
        report_title = title or f"{request.mode.value} mod {request.modulus}"

        html_content = _HTML_TEMPLATE.format(
            title=html.escape(report_title),
            mode=request.mode.value,
            modulus=request.modulus,
            label=html.escape(alphabet.label if alphabet is not None else "unsupported"),
            key=html.escape(request.key),
            text=html.escape(request.text),
            outcome_row=self._build_outcome_row(result),
            trace_section=self._build_trace_section(result),
            timestamp=timestamp,
            version=__version__,
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_outcome_row(result: CipherResult) -> str:
        if result.error is not None:
            return (
                f'<tr><th>Error ({html.escape(result.error.field)})</th>'
                f'<td class="error">{html.escape(result.error.message)}</td></tr>'
            )
        return (
            f'<tr><th>Output</th>'
            f'<td class="output">{html.escape(result.output)}</td></tr>'
        )

    @staticmethod
    def _build_trace_section(result: CipherResult) -> str:
        if not result.trace:
            return ""

        rows = "\n".join(
            "<tr>"
            f"<td>{idx}</td>"
            f"<td>{html.escape(step.input_char)}</td>"
            f"<td>{step.input_value}</td>"
            f"<td>{html.escape(step.key_char)}</td>"
            f"<td>{step.key_value}</td>"
            f"<td>{html.escape(step.formula)}</td>"
            f'<td class="output">{html.escape(step.output_char)}</td>'
            "</tr>"
            for idx, step in enumerate(result.trace, start=1)
        )
        return (
            '<div class="section">'
            "<h2>Trace</h2>"
            "<table>"
            "<tr><th>#</th><th>P</th><th>P val</th><th>K</th>"
            "<th>K val</th><th>Formula</th><th>Result</th></tr>"
            f"{rows}"
            "</table>"
            "</div>"
        )
