"""
Scanner Error Hierarchy
=======================

Lexical errors raised by the Teeny scanner. Every lexical error is fatal
to the scan: the scanner never produces error tokens or tries to
resynchronise, it raises and leaves the decision to the caller.

Exception Hierarchy
-------------------
LexError (base for all lexical errors)
├── UnexpectedCharacterError - current character begins no valid token
├── MalformedOperatorError - a '!' that is not part of '!='
└── UnterminatedStringError - end of input before the closing quote

Example:
    hello.teeny:3:7: error: expected '!=', got '!x'
        IF a !x b THEN
              ^
    hint: Teeny has no '!' operator; use '!=' for inequality
"""

from typing import Optional

from teeny_sdk.errors import TeenyError, SourceLocation


def describe_char(char: str) -> str:
    """Render a character for an error message, spelling out invisible ones."""
    if char == "\n":
        return "newline"
    if char.isprintable():
        return f"'{char}'"
    return f"U+{ord(char):04X}"


# =============================================================================
# Base Lexical Error
# =============================================================================

class LexError(TeenyError):
    """
    Base exception for all lexical errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
        kind: Short taxonomy name ("unexpected-character", ...)
    """

    kind = "lex-error"

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            prog.teeny:1:5: error: unexpected character '@'
                LET @ = 1
                    ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Specific Lexical Errors
# =============================================================================

class UnexpectedCharacterError(LexError):
    """
    Character that does not begin any token.

    Example:
        LET a = 3 @ 4
    """

    kind = "unexpected-character"

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unexpected character {describe_char(char)}",
            location=location,
            hint="only letters, digits, '\"', '#' and the operators + - * / = < > ! start a token",
            source_line=source_line,
        )


class MalformedOperatorError(LexError):
    """
    A '!' that is not followed by '='.

    The offending character is the one after the '!', which is what the
    message reports.
    """

    kind = "malformed-operator"

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        if char.isprintable():
            message = f"expected '!=', got '!{char}'"
        else:
            message = f"expected '!=', got '!' followed by {describe_char(char)}"
        super().__init__(
            message,
            location=location,
            hint="Teeny has no '!' operator; use '!=' for inequality",
            source_line=source_line,
        )


class UnterminatedStringError(LexError):
    """
    String literal with no closing quote before the end of input.

    Newlines inside a string are allowed, so this is only raised once the
    whole remaining source has been consumed.
    """

    kind = "unterminated-string"

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )
