"""
Scanner Configuration
=====================

Options controlling how a Scanner labels and reports what it scans.
Options can come from:
- Default values (defined here)
- Explicit construction
- Environment variables (ScannerOptions.from_env)
"""

from dataclasses import dataclass
import os


_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ScannerOptions:
    """
    Configuration for a Scanner.

    Attributes:
        filename: Name used in token and error locations (default: "<input>")
        trace: Log every emitted token at DEBUG level (default: False)
    """

    filename: str = "<input>"
    trace: bool = False

    @classmethod
    def from_env(cls) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Environment variables (all optional):
            TEENY_FILENAME: Name used in locations
            TEENY_TRACE: "1", "true", "yes" or "on" enables token tracing
        """
        options = cls()

        if filename := os.environ.get("TEENY_FILENAME"):
            options.filename = filename

        if trace := os.environ.get("TEENY_TRACE"):
            options.trace = trace.strip().lower() in _TRUE_VALUES

        return options
