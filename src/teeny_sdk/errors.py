"""
Teeny SDK Error Hierarchy
=========================

This module defines the root of the exception hierarchy for the Teeny SDK.
All exceptions inherit from TeenyError, allowing callers to catch every
SDK-related error with a single except clause if desired.

Exception Hierarchy
-------------------
TeenyError (base)
└── LexError (scanner-related, see teeny_sdk.scanner.errors)
    ├── UnexpectedCharacterError - character that starts no token
    ├── MalformedOperatorError - '!' not followed by '='
    └── UnterminatedStringError - string literal never closed

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class TeenyError(Exception):
    """
    Base exception for all Teeny SDK errors.

    Callers that drive a whole pipeline can catch everything the SDK
    raises with a single clause:

        try:
            tokens = tokenize(source)
        except TeenyError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
