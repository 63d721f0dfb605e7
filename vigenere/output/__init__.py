"""
Vigenère Output
================

Console display and report generation for Vigenère results.
"""

from vigenere.output.console import VigenereConsoleOutput
from vigenere.output.report import VigenereReportGenerator

__all__ = ["VigenereConsoleOutput", "VigenereReportGenerator"]
