"""
Teeny SDK Command-Line Interface
================================

This package provides command-line tools for the Teeny SDK:

- **ttlex**: token dump, for inspecting what the scanner produces

Each tool is implemented as a Click-based CLI application with
help text and consistent error reporting.
"""

__all__ = ["ttlex"]
