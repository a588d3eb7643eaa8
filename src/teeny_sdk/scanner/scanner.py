"""
Teeny Scanner (Lexer)
=====================

This module implements the scanner for the Teeny language. It converts
source text into a stream of tokens for the parser, one token per call.

The scanner is a single deterministic walk over the source with exactly
one character of lookahead. It never backtracks.

Lexical Rules
-------------
- Spaces, tabs and carriage returns separate tokens and are skipped.
- Newlines are tokens: they terminate statements.
- '#' starts a comment running to the end of the line. The newline
  that ends it is still returned as a token.
- Numbers: digits with at most one '.', e.g. 42, 3.14, .5
  A second '.' ends the number: "3.14.5" scans as 3.14 then .5
- Strings: "double quoted", no escape sequences. The body is copied
  verbatim except that '%' becomes '\\%' and '\\' becomes '\\\\', so
  the text can be dropped into a printf-style format string.
- Identifiers start with an ASCII letter or '_' and continue with
  letters and digits. Uppercase keywords (LET, PRINT, ...) are matched
  exactly after the identifier has been read.

Example Usage
-------------
>>> from teeny_sdk.scanner import Scanner
>>> for token in Scanner('LET x = 5'):
...     print(token)
Token(LET, 'LET', 1:1)
Token(IDENTIFIER, 'x', 1:5)
Token(ASSIGN, '=', 1:7)
Token(NUMBER, '5', 1:9)
Token(NEWLINE, '\\n', 1:10)
Token(END_OF_INPUT, '\\x00', 2:1)
"""

import logging
import string
from typing import Iterator, Optional

from teeny_sdk.errors import SourceLocation
from teeny_sdk.scanner.errors import (
    LexError,
    UnexpectedCharacterError,
    MalformedOperatorError,
    UnterminatedStringError,
)
from teeny_sdk.scanner.options import ScannerOptions
from teeny_sdk.scanner.tokens import Token, TokenKind, KEYWORDS


logger = logging.getLogger(__name__)

# Returned for the current character and peek() once past the buffer
NUL = "\0"


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Teeny source code.

    The scanner owns the whole source text. A newline is appended on
    construction so the last statement is always terminated and
    lookahead past the logical end is well defined.

    Usage:
        scanner = Scanner(source_text, filename)
        tokens = list(scanner.tokenize())

    Or pull tokens one at a time, as a parser does:
        token = scanner.next_token()

    Attributes:
        source: The source text including the appended newline
        filename: Name of the source file (for error reporting)
        options: The ScannerOptions in effect
    """

    # Whitespace that separates tokens. Newline is not included.
    WHITESPACE = " \t\r"

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can start a number
    NUMBER_START = string.digits + "."

    # Single character tokens that need no lookahead
    SINGLE_CHAR_TOKENS = {
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.ASTERISK,
        "/": TokenKind.SLASH,
        "\n": TokenKind.NEWLINE,
    }

    # Operators that become a two character operator when followed by '='
    # Maps char -> (kind alone, kind with '=')
    EQUALS_SUFFIX_OPERATORS = {
        "=": (TokenKind.ASSIGN, TokenKind.EQUALS),
        "<": (TokenKind.LESS, TokenKind.LESS_EQUALS),
        ">": (TokenKind.GREATER, TokenKind.GREATER_EQUALS),
    }

    # Characters re-emitted as two character escapes inside string bodies
    STRING_ESCAPES = {
        "%": "\\%",
        "\\": "\\\\",
    }

    def __init__(
        self,
        source: str,
        filename: Optional[str] = None,
        options: Optional[ScannerOptions] = None,
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: The Teeny source code to tokenize
            filename: Name of the source file (overrides options.filename)
            options: Scanner configuration (default: ScannerOptions())
        """
        self.options = options or ScannerOptions()
        self.filename = filename or self.options.filename
        self.source = source + "\n"

        # Cursor state. _char always mirrors source[_pos] or NUL.
        self._pos = 0
        self._char = self.source[0]
        self._line = 1
        self._column = 1
        self._line_start_pos = 0

        logger.debug(f"Scanning {self.filename} ({len(source)} characters)")

    # =========================================================================
    # Cursor
    # =========================================================================

    @property
    def current(self) -> str:
        """The character under the cursor, or NUL past the end."""
        return self._char

    @property
    def position(self) -> int:
        """Index of the cursor into source."""
        return self._pos

    @property
    def line(self) -> int:
        """Line of the current character (1-indexed)."""
        return self._line

    @property
    def column(self) -> int:
        """Column of the current character (1-indexed)."""
        return self._column

    def advance(self) -> None:
        """
        Move the cursor one character forward.

        Past the end of the buffer the current character becomes NUL and
        stays there. Line and column follow the cursor.
        """
        if self._char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos + 1
        elif not self._at_end():
            self._column += 1

        self._pos += 1
        if self._pos >= len(self.source):
            self._char = NUL
        else:
            self._char = self.source[self._pos]

    def _at_end(self) -> bool:
        """Check if the cursor is past the end of source."""
        return self._pos >= len(self.source)

    def peek(self) -> str:
        """Return the character after the cursor without moving, or NUL."""
        pos = self._pos + 1
        if pos >= len(self.source):
            return NUL
        return self.source[pos]

    # =========================================================================
    # Token Production
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once the source is exhausted this returns END_OF_INPUT, and keeps
        returning it if called again.

        Returns:
            The next Token

        Raises:
            LexError: If the source is not lexically well formed
        """
        self._skip_whitespace()
        self._skip_comment()

        start_line = self._line
        start_column = self._column
        char = self._char

        if self._at_end():
            token = self._make_token(TokenKind.END_OF_INPUT, NUL, start_line, start_column)
        elif char in self.SINGLE_CHAR_TOKENS:
            token = self._make_token(self.SINGLE_CHAR_TOKENS[char], char, start_line, start_column)
        elif char in self.EQUALS_SUFFIX_OPERATORS:
            token = self._scan_comparison(start_line, start_column)
        elif char == "!":
            token = self._scan_not_equals(start_line, start_column)
        elif char == '"':
            token = self._scan_string(start_line, start_column)
        elif char in self.NUMBER_START:
            token = self._scan_number(start_line, start_column)
        elif char in self.IDENT_START:
            token = self._scan_identifier(start_line, start_column)
        else:
            raise self._fail(UnexpectedCharacterError(
                char,
                SourceLocation(self.filename, start_line, start_column),
                self._get_current_line(),
            ))

        # Leave the cursor on the first character after the token
        self.advance()

        if self.options.trace:
            logger.debug(f"{self.filename}: {token!r}")
        return token

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until the end of the source.

        Yields:
            Token objects, ending with exactly one END_OF_INPUT token

        Raises:
            LexError: If invalid input is encountered
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END_OF_INPUT:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Skip spaces, tabs and carriage returns."""
        while self._char in self.WHITESPACE:
            self.advance()

    def _skip_comment(self) -> None:
        """Skip a '#' comment up to, but not including, the newline."""
        if self._char == "#":
            while self._char != "\n" and not self._at_end():
                self.advance()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_comparison(self, start_line: int, start_column: int) -> Token:
        """Scan '=', '<' or '>', possibly followed by '='."""
        single_kind, double_kind = self.EQUALS_SUFFIX_OPERATORS[self._char]

        if self.peek() == "=":
            first = self._char
            self.advance()
            return self._make_token(double_kind, first + "=", start_line, start_column)

        return self._make_token(single_kind, self._char, start_line, start_column)

    def _scan_not_equals(self, start_line: int, start_column: int) -> Token:
        """Scan '!=', the only operator starting with '!'."""
        following = self.peek()
        if following != "=":
            raise self._fail(MalformedOperatorError(
                following,
                SourceLocation(self.filename, start_line, start_column),
                self._get_current_line(),
            ))

        self.advance()
        return self._make_token(TokenKind.NOT_EQUALS, "!=", start_line, start_column)

    def _scan_string(self, start_line: int, start_column: int) -> Token:
        """
        Scan a double-quoted string literal.

        The body is copied as-is apart from '%' and '\\', which are
        escaped. The cursor is left on the closing quote.
        """
        source_line = self._get_current_line()
        self.advance()  # consume opening "

        chars = []
        while self._char != '"':
            if self._at_end():
                raise self._fail(UnterminatedStringError(
                    SourceLocation(self.filename, start_line, start_column),
                    source_line,
                ))
            chars.append(self.STRING_ESCAPES.get(self._char, self._char))
            self.advance()

        return self._make_token(TokenKind.STRING, "".join(chars), start_line, start_column)

    def _scan_number(self, start_line: int, start_column: int) -> Token:
        """
        Scan a numeric literal.

        At most one '.' is taken. The cursor is left on the last
        character of the number.
        """
        chars = [self._char]
        seen_point = self._char == "."

        while True:
            following = self.peek()
            if following == "." and not seen_point:
                seen_point = True
            elif following not in string.digits:
                break
            self.advance()
            chars.append(self._char)

        return self._make_token(TokenKind.NUMBER, "".join(chars), start_line, start_column)

    def _scan_identifier(self, start_line: int, start_column: int) -> Token:
        """
        Scan an identifier or keyword.

        Continuation characters are letters and digits only.
        """
        chars = [self._char]
        while self.peek().isalnum():
            self.advance()
            chars.append(self._char)

        name = "".join(chars)

        if name in KEYWORDS:
            return self._make_token(KEYWORDS[name], name, start_line, start_column)

        return self._make_token(TokenKind.IDENTIFIER, name, start_line, start_column)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _make_token(
        self,
        kind: TokenKind,
        lexeme: str,
        start_line: int,
        start_column: int,
    ) -> Token:
        return Token(
            lexeme=lexeme,
            kind=kind,
            line=start_line,
            column=start_column,
            filename=self.filename,
        )

    def _fail(self, error: LexError) -> LexError:
        """Log a lexical error before it is raised."""
        logger.debug(f"Lexical error ({error.kind}) at {error.location}: {error.message}")
        return error

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]


def tokenize(
    source: str,
    filename: Optional[str] = None,
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """
    Tokenize a complete source text.

    Args:
        source: The Teeny source code
        filename: Name used in locations
        options: Scanner configuration

    Returns:
        All tokens, ending with END_OF_INPUT

    Raises:
        LexError: On the first lexical error
    """
    return list(Scanner(source, filename, options).tokenize())
