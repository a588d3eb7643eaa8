"""
Teeny Scanner
=============

The lexical analysis stage of the Teeny front end. It turns source text
into tokens for a parser, pulling one token at a time.

Pipeline
--------
    Source text → Scanner → Tokens → (parser, outside this package)

Usage
-----
>>> from teeny_sdk.scanner import tokenize
>>> [t.kind.name for t in tokenize('PRINT "hi"')]
['PRINT', 'STRING', 'NEWLINE', 'END_OF_INPUT']

Errors are raised as LexError subclasses and end the scan.
"""

from teeny_sdk.scanner.scanner import Scanner, tokenize, NUL
from teeny_sdk.scanner.tokens import (
    Token,
    TokenKind,
    KEYWORDS,
    OPERATORS,
    COMPARISON_OPERATORS,
)
from teeny_sdk.scanner.options import ScannerOptions
from teeny_sdk.scanner.errors import (
    LexError,
    UnexpectedCharacterError,
    MalformedOperatorError,
    UnterminatedStringError,
)

__all__ = [
    # Scanner
    "Scanner",
    "tokenize",
    "NUL",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    "OPERATORS",
    "COMPARISON_OPERATORS",
    # Configuration
    "ScannerOptions",
    # Errors
    "LexError",
    "UnexpectedCharacterError",
    "MalformedOperatorError",
    "UnterminatedStringError",
]
