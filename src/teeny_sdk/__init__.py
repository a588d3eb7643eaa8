"""
Teeny SDK - Front-End Toolchain for the Teeny Language
======================================================

Teeny is a small BASIC-like language: line oriented, with LET, PRINT,
INPUT, IF/THEN/ENDIF, WHILE/REPEAT/ENDWHILE and LABEL/GOTO.

Main Components
---------------
- **scanner**: the lexer, turning source text into tokens
- **cli**: command-line tools (ttlex, a token dump for diagnostics)

Quick Start
-----------
Tokenize a program:
    >>> from teeny_sdk import tokenize
    >>> for token in tokenize('LET x = 5'):
    ...     print(token.kind.name, repr(token.lexeme))
    LET 'LET'
    IDENTIFIER 'x'
    ASSIGN '='
    NUMBER '5'
    NEWLINE '\\n'
    END_OF_INPUT '\\x00'

Or from the command line:
    $ ttlex hello.teeny
"""

__version__ = "1.0.0"
__author__ = "Teeny SDK Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from teeny_sdk.errors import TeenyError, SourceLocation
from teeny_sdk.scanner import (
    Scanner,
    ScannerOptions,
    Token,
    TokenKind,
    KEYWORDS,
    tokenize,
    LexError,
    UnexpectedCharacterError,
    MalformedOperatorError,
    UnterminatedStringError,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "tokenize",
    # Exception hierarchy
    "TeenyError",
    "SourceLocation",
    "LexError",
    "UnexpectedCharacterError",
    "MalformedOperatorError",
    "UnterminatedStringError",
]
