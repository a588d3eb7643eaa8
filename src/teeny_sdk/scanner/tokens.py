"""
Teeny Tokens
============

Token kinds, the token value class and the fixed lookup tables used by
the scanner and by parsers consuming its output.

Token Categories
----------------
- Structural: end of input, newline (newlines terminate statements)
- Literals: numbers (integer or decimal, one kind), strings
- Identifiers and keywords: LABEL GOTO PRINT INPUT LET IF THEN ENDIF
  WHILE REPEAT ENDWHILE
- Operators: = + - * / == != < <= > >=
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

from teeny_sdk.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the Teeny language.

    Keywords are distinguished from identifiers so the parser can match
    on the kind alone.
    """

    # === Structural Tokens ===
    END_OF_INPUT = auto()   # Sentinel past the last character
    NEWLINE = auto()        # Statement terminator

    # === Identifiers and Literals ===
    NUMBER = auto()         # 42, 3.14, .5
    STRING = auto()         # "..."
    IDENTIFIER = auto()     # Variable names

    # === Keywords ===
    LABEL = auto()          # LABEL
    GOTO = auto()           # GOTO
    PRINT = auto()          # PRINT
    INPUT = auto()          # INPUT
    LET = auto()            # LET
    IF = auto()             # IF
    THEN = auto()           # THEN
    ENDIF = auto()          # ENDIF
    WHILE = auto()          # WHILE
    REPEAT = auto()         # REPEAT
    ENDWHILE = auto()       # ENDWHILE

    # === Operators ===
    ASSIGN = auto()         # =
    PLUS = auto()           # +
    MINUS = auto()          # -
    ASTERISK = auto()       # *
    SLASH = auto()          # /
    EQUALS = auto()         # ==
    NOT_EQUALS = auto()     # !=
    LESS = auto()           # <
    LESS_EQUALS = auto()    # <=
    GREATER = auto()        # >
    GREATER_EQUALS = auto() # >=


# =============================================================================
# Lookup Tables
# =============================================================================

# Keyword text to kind. Matched exactly, so only the uppercase spelling
# is a keyword.
KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    "LABEL": TokenKind.LABEL,
    "GOTO": TokenKind.GOTO,
    "PRINT": TokenKind.PRINT,
    "INPUT": TokenKind.INPUT,
    "LET": TokenKind.LET,
    "IF": TokenKind.IF,
    "THEN": TokenKind.THEN,
    "ENDIF": TokenKind.ENDIF,
    "WHILE": TokenKind.WHILE,
    "REPEAT": TokenKind.REPEAT,
    "ENDWHILE": TokenKind.ENDWHILE,
})

OPERATORS: Mapping[str, TokenKind] = MappingProxyType({
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "==": TokenKind.EQUALS,
    "!=": TokenKind.NOT_EQUALS,
    "<": TokenKind.LESS,
    "<=": TokenKind.LESS_EQUALS,
    ">": TokenKind.GREATER,
    ">=": TokenKind.GREATER_EQUALS,
})

COMPARISON_OPERATORS = frozenset({
    TokenKind.EQUALS,
    TokenKind.NOT_EQUALS,
    TokenKind.LESS,
    TokenKind.LESS_EQUALS,
    TokenKind.GREATER,
    TokenKind.GREATER_EQUALS,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from Teeny source code.

    Two tokens are equal when their lexeme and kind are equal; the
    location fields are carried for diagnostics only.

    Attributes:
        lexeme: The token text. String literals hold the escaped body
            without quotes; NEWLINE holds "\\n"; END_OF_INPUT holds "\\0".
        kind: The TokenKind classification
        line: Line number of the first character (1-indexed)
        column: Column number of the first character (1-indexed)
        filename: Name of the source file
    """
    lexeme: str
    kind: TokenKind
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)
    filename: str = field(default="<input>", compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.line:
            return f"Token({self.kind.name}, {self.lexeme!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.lexeme!r})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_keyword(self) -> bool:
        """Return True if this token is a keyword."""
        return self.kind in KEYWORDS.values()

    def is_operator(self) -> bool:
        """Return True if this token is an operator."""
        return self.kind in OPERATORS.values()

    def is_comparison(self) -> bool:
        """Return True if this token is a comparison operator."""
        return self.kind in COMPARISON_OPERATORS
