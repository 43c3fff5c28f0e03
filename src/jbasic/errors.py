"""
JBasic Error Hierarchy
======================

This module defines the exception hierarchy for the JBasic front end.
All exceptions inherit from JBasicError, allowing callers to catch all
JBasic-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
JBasicError (base)
├── LexError - malformed source text (recoverable, scanning may continue)
│   ├── UnterminatedStringError - missing closing quote
│   ├── IllegalEscapeSequenceError - unsupported character after a backslash
│   └── UnrecognizedCharacterError - character outside the language alphabet
├── AggregateLexError - several lexical errors reported together
└── IllegalStateError - the lexer was used without source code

Error Message Format
--------------------
Lexical errors carry the name of the source unit and the position where
the problem was detected:

    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing (when available)

IllegalStateError is not a LexError: it signals misuse of the lexer by
the caller rather than a problem in the source text, and scanning cannot
continue after it.
"""

from dataclasses import dataclass
from typing import List, Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class JBasicError(Exception):
    """
    Base exception for all JBasic errors.

        try:
            report = scan_source(text, "main.bas")
            report.raise_if_errors()
        except JBasicError as e:
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
        filename: Name of the source unit (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexError(JBasicError):
    """
    Lexical error in JBasic source code.

    Raised by Lexer.next() when the characters at the current position
    cannot form a token. The lexer has already moved past the offending
    input when this is raised, so the caller may call next() again to
    keep scanning and collect further errors.

    Attributes:
        message: The error description
        location: Where in the source the error was detected
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the line containing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def source_name(self) -> str:
        return self.location.filename

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.bas:3:12: error: unexpected character '{'
                LET x = {
                         ^
        """
        parts = [f"{self.location}: error: {self.message}"]

        # Source context with caret pointer
        if self.source_line is not None and self.location.column > 0:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.location.column - 1)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedStringError(LexError):
    """
    Unterminated string literal.

    Raised when a string literal is not closed before the end of the
    line or the end of the input.

    Example:
        LET s = "hello    ' Missing closing quote
    """

    def __init__(
        self,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class IllegalEscapeSequenceError(LexError):
    """
    Unsupported escape sequence inside a string literal.

    Only \\n, \\r, \\t, \\\\ and \\" are recognized. A backslash followed
    by a raw line break is also rejected.
    """

    def __init__(
        self,
        char: str,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unexpected escape character {char!r}",
            location,
            hint='supported escapes are \\n, \\r, \\t, \\\\ and \\"',
            source_line=source_line,
        )


class UnrecognizedCharacterError(LexError):
    """
    Character that cannot start any token.

    The character has been consumed when this is raised, so the next
    call to Lexer.next() resumes right after it.
    """

    def __init__(
        self,
        char: str,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unexpected character {char!r}",
            location,
            source_line=source_line,
        )


class AggregateLexError(JBasicError):
    """
    Several lexical errors reported together.

    The message is a formatted report from LexErrorCollector and is
    passed through unchanged.
    """

    def __init__(self, report: str, errors: List[LexError]):
        self.errors = list(errors)
        super().__init__(report)


# =============================================================================
# Misuse
# =============================================================================

class IllegalStateError(JBasicError):
    """
    The lexer was asked for a token while it has no source code.

    This happens when next() is called before initialize() or after the
    END_OF_INPUT token has been returned. It indicates a bug in the
    caller, not malformed source, and is never collected as a diagnostic.
    """
    pass


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class LexErrorCollector:
    """
    Collects multiple lexical errors for batch reporting.

    The lexer recovers after every LexError, so a whole source unit can
    be scanned once and all of its problems reported together.

    Example:
        collector = LexErrorCollector(max_errors=100)

        for result in lexer.results():
            if not result.ok:
                collector.add(result.error)
                if collector.should_stop():
                    break

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before stopping
        """
        self.errors: List[LexError] = []
        self.max_errors = max_errors

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def add(self, error: LexError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")  # Blank line between errors

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise an AggregateLexError if any errors were collected."""
        if self.has_errors():
            raise AggregateLexError(self.report(), self.errors)
