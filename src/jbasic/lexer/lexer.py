"""
JBasic Lexer (Tokenizer)
========================

This module implements the lexer for JBasic, a small BASIC-like
scripting language. It converts source text into tokens for the parser,
one token per call to Lexer.next().

Token Categories
----------------
- Keywords: IF, THEN, WHILE, FUNCTION, CLASS, AND, ... (any casing)
- Constants: TRUE, FALSE, NULL (any casing)
- Identifiers: letters, digits and underscores, starting with a letter
- Numbers: 123 (integer), 1.5 (real)
- Strings: "double quoted" with escapes \\n \\r \\t \\\\ \\"
- Punctuation: . + - * / = < > , ( )
- NEW_LINE: one per newline character
- END_OF_INPUT: after the last character

Comments
--------
A single quote starts a comment that runs to the end of the line. The
newline itself is not part of the comment.

Error Recovery
--------------
When the lexer finds something it cannot tokenize it raises a LexError,
but only after consuming the offending input. Calling next() again
continues with the rest of the source, so every problem in a unit can
be reported in one pass. scan() and results() return the same outcomes
as ScanResult values instead of raising.

Example Usage
-------------
>>> from jbasic.lexer import Lexer
>>> lexer = Lexer()
>>> lexer.initialize("hello.bas", 'LET x = "hi"')
>>> for token in lexer.tokenize():
...     print(token)
Token(LET, 'LET', 1:1)
Token(IDENTIFIER, 'x', 1:5)
Token(EQUALS, '=', 1:7)
Token(STRING_LITERAL, 'hi', 1:9)
Token(END_OF_INPUT, 1:13)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional
import logging

from jbasic.config import DEFAULT_SOURCE_NAME, LexerOptions
from jbasic.errors import (
    IllegalEscapeSequenceError,
    IllegalStateError,
    LexError,
    LexErrorCollector,
    SourceLocation,
    UnrecognizedCharacterError,
    UnterminatedStringError,
)
from jbasic.lexer.tokens import KEYWORDS, PUNCTUATION, Token, TokenKind


logger = logging.getLogger(__name__)


# =============================================================================
# Lexer State and Outcomes
# =============================================================================

class LexerState(Enum):
    """
    Lifecycle of a Lexer.

    ACTIVE accepts next() calls. EXHAUSTED (the state of a new lexer and
    of one that has returned END_OF_INPUT) only accepts initialize().
    """
    ACTIVE = auto()
    EXHAUSTED = auto()


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of one scanning step: either a token or a lexical error.

    Attributes:
        token: The token produced, or None if the step failed
        error: The LexError raised, or None if the step succeeded
    """
    token: Optional[Token] = None
    error: Optional[LexError] = None

    def __post_init__(self):
        if (self.token is None) == (self.error is None):
            raise ValueError("ScanResult needs exactly one of token or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Token:
        """Return the token, or raise the error this step failed with."""
        if self.error is not None:
            raise self.error
        return self.token


@dataclass
class ScanReport:
    """
    Everything scan_source() found in one source unit.

    Attributes:
        tokens: Successfully scanned tokens, in source order
        errors: Lexical errors, in source order
        truncated: True if scanning stopped at the error limit before
                   reaching the end of the input
    """
    tokens: list[Token]
    errors: LexErrorCollector
    truncated: bool = False

    @property
    def ok(self) -> bool:
        return not self.errors.has_errors()

    def raise_if_errors(self) -> None:
        self.errors.raise_if_errors()


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes JBasic source code.

    A single Lexer can be reused for many source units: initialize()
    discards whatever was being scanned and starts over on new text.

    Usage:
        lexer = Lexer()
        lexer.initialize("main.bas", source_text)
        while True:
            token = lexer.next()
            if token.kind is TokenKind.END_OF_INPUT:
                break

    Not safe for concurrent use; all scanning state belongs to the
    instance and is changed only by initialize() and next().
    """

    COMMENT_MARKER = "'"

    QUOTE = '"'

    # No-break spaces and NEL are not separators, though str.isspace() accepts them
    NOT_WHITESPACE = frozenset("\u00a0\u2007\u202f\u0085")

    # Escape sequences in strings
    ESCAPE_SEQUENCES = {
        "n": "\n",      # Newline
        "r": "\r",      # Carriage return
        "t": "\t",      # Tab
        "\\": "\\",     # Backslash
        '"': '"',       # Double quote
    }

    def __init__(
        self,
        source_name: Optional[str] = None,
        text: Optional[str] = None,
    ):
        """
        Create a lexer, optionally initialized with source code.

        Args:
            source_name: Name of the source unit (for tokens and errors)
            text: The JBasic source code; if omitted, call initialize()
                  before next(). The source_name is kept either way.
        """
        if source_name is None:
            source_name = DEFAULT_SOURCE_NAME

        self._source_name = source_name
        self._text = ""
        self._pos = 0
        self._line = 1
        self._column = 1
        self._line_start_pos = 0
        self._state = LexerState.EXHAUSTED

        if text is not None:
            self.initialize(source_name, text)

    # =========================================================================
    # Public Interface
    # =========================================================================

    @property
    def state(self) -> LexerState:
        return self._state

    @property
    def is_lexing(self) -> bool:
        """True while there is source code left to tokenize."""
        return self._state is LexerState.ACTIVE

    @property
    def source_name(self) -> str:
        return self._source_name

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    def initialize(self, source_name: str, text: str) -> None:
        """
        Start scanning a new source unit.

        Any source left over from a previous unit is discarded.

        Args:
            source_name: Name of the source unit, copied into every
                         token and error
            text: The source code to tokenize
        """
        self._source_name = source_name
        self._text = text
        self._pos = 0
        self._line = 1
        self._column = 1
        self._line_start_pos = 0
        self._state = LexerState.ACTIVE
        logger.debug(f"Lexing '{source_name}' ({len(text)} characters)")

    def next(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; END_OF_INPUT once the source is used up

        Raises:
            LexError: If the input at the current position is malformed.
                The bad input has been consumed, so next() may be called
                again to keep scanning.
            IllegalStateError: If the lexer has no source code, either
                because initialize() was never called or because
                END_OF_INPUT was already returned
        """
        if self._state is not LexerState.ACTIVE:
            raise IllegalStateError("lexer has no source code to tokenize")

        # Whitespace and comments, in any order, until something else shows up
        while True:
            token = self._skip_whitespace()
            if token is not None:
                return token

            if self._at_end():
                return self._finish()

            if self._peek() != self.COMMENT_MARKER:
                break

            self._skip_comment()

        char = self._peek()

        if char.isdecimal():
            return self._scan_number()

        if char == self.QUOTE:
            return self._scan_string()

        if char.isalpha():
            return self._scan_word()

        return self._scan_punctuation()

    def scan(self) -> ScanResult:
        """
        Scan the next token, reporting lexical errors as a value.

        Raises:
            IllegalStateError: If the lexer has no source code
        """
        try:
            return ScanResult(token=self.next())
        except LexError as e:
            return ScanResult(error=e)

    def results(self) -> Iterator[ScanResult]:
        """
        Generate scan outcomes up to and including END_OF_INPUT.

        Errors do not end the iteration; scanning resumes after each one.
        """
        while True:
            result = self.scan()
            yield result
            if result.ok and result.token.kind is TokenKind.END_OF_INPUT:
                return

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including END_OF_INPUT.

        Raises:
            LexError: On the first malformed input encountered
        """
        while True:
            token = self.next()
            yield token
            if token.kind is TokenKind.END_OF_INPUT:
                return

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self._text)

    def _peek(self) -> str:
        """Look at the current character without consuming it."""
        if self._at_end():
            return ""
        return self._text[self._pos]

    def _advance(self) -> str:
        """Consume and return the current character, moving one column right."""
        char = self._text[self._pos]
        self._pos += 1
        self._column += 1
        return char

    def _new_line(self) -> None:
        """Record that a newline character was just consumed."""
        self._line += 1
        self._column = 1
        self._line_start_pos = self._pos

    # =========================================================================
    # Token and Error Creation
    # =========================================================================

    def _make_token(
        self,
        kind: TokenKind,
        text: str,
        line: int,
        column: int,
    ) -> Token:
        return Token(
            kind=kind,
            source_name=self._source_name,
            line=line,
            column=column,
            text=text,
        )

    def _location(self) -> SourceLocation:
        return SourceLocation(self._source_name, self._line, self._column)

    def _current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self._text.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self._text)
        return self._text[self._line_start_pos:line_end]

    def _finish(self) -> Token:
        """Mark the lexer exhausted and return END_OF_INPUT."""
        self._state = LexerState.EXHAUSTED
        logger.debug(
            f"Finished lexing '{self._source_name}' at {self._line}:{self._column}"
        )
        return self._make_token(TokenKind.END_OF_INPUT, "", self._line, self._column)

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self) -> Optional[Token]:
        """
        Skip whitespace up to and including the first newline.

        Returns:
            A NEW_LINE token if a newline was consumed, otherwise None
        """
        while not self._at_end() and self._is_whitespace(self._peek()):
            char = self._advance()
            if char == "\n":
                self._new_line()
                # Reported on the line the newline ends, at column 1
                return self._make_token(TokenKind.NEW_LINE, "\n", self._line - 1, 1)
        return None

    def _skip_comment(self) -> None:
        """Skip a comment, leaving the terminating newline in place."""
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_number(self) -> Token:
        """
        Scan a numeric literal.

        A run of digits with at most one decimal point. A second point
        ends the number and is scanned as the next token.
        """
        start_pos = self._pos
        start_column = self._column
        is_integer = True

        while not self._at_end():
            char = self._peek()
            if char.isdecimal():
                self._advance()
            elif char == "." and is_integer:
                is_integer = False
                self._advance()
            else:
                break

        kind = TokenKind.INTEGER_LITERAL if is_integer else TokenKind.REAL_LITERAL
        return self._make_token(
            kind,
            self._text[start_pos:self._pos],
            self._line,
            start_column,
        )

    def _scan_string(self) -> Token:
        """
        Scan a double-quoted string literal.

        The token text is the decoded content without the quotes.
        Strings cannot span lines.
        """
        start_line = self._line
        start_column = self._column
        self._advance()  # consume opening "

        chars = []
        while True:
            if self._at_end():
                raise UnterminatedStringError(self._location(), self._current_line())

            char = self._advance()

            if char == "\n":
                self._new_line()
                raise UnterminatedStringError(self._location(), self._current_line())

            if char == self.QUOTE:
                return self._make_token(
                    TokenKind.STRING_LITERAL,
                    "".join(chars),
                    start_line,
                    start_column,
                )

            if char == "\\":
                chars.append(self._scan_escape_sequence())
            else:
                chars.append(char)

    def _scan_escape_sequence(self) -> str:
        """
        Scan the character after a backslash.

        Returns:
            The character represented by the escape sequence
        """
        if self._at_end():
            raise UnterminatedStringError(self._location(), self._current_line())

        char = self._advance()

        if char in self.ESCAPE_SEQUENCES:
            return self.ESCAPE_SEQUENCES[char]

        if char == "\n":
            self._new_line()

        raise IllegalEscapeSequenceError(char, self._location(), self._current_line())

    def _scan_word(self) -> Token:
        """
        Scan an identifier, keyword or constant.

        Words start with a letter and continue with letters, digits and
        underscores. Keywords and constants match in any casing.
        """
        start_pos = self._pos
        start_column = self._column

        while not self._at_end() and self._is_word_char(self._peek()):
            self._advance()

        word = self._text[start_pos:self._pos]
        canonical = word.upper()

        # Uppercasing can change the length ("ß" -> "SS"); such words are never keywords
        if len(canonical) == len(word) and canonical in KEYWORDS:
            return self._make_token(KEYWORDS[canonical], canonical, self._line, start_column)

        return self._make_token(TokenKind.IDENTIFIER, word, self._line, start_column)

    @staticmethod
    def _is_whitespace(char: str) -> bool:
        return char.isspace() and char not in Lexer.NOT_WHITESPACE

    @staticmethod
    def _is_word_char(char: str) -> bool:
        return char.isalpha() or char.isdecimal() or char == "_"

    def _scan_punctuation(self) -> Token:
        """
        Scan a single-character operator or delimiter.

        The character is consumed even if it is not recognized.
        """
        start_column = self._column
        char = self._advance()

        kind = PUNCTUATION.get(char)
        if kind is not None:
            return self._make_token(kind, char, self._line, start_column)

        raise UnrecognizedCharacterError(char, self._location(), self._current_line())


# =============================================================================
# Convenience Functions
# =============================================================================

def scan_source(
    text: str,
    source_name: Optional[str] = None,
    options: Optional[LexerOptions] = None,
) -> ScanReport:
    """
    Scan a whole source unit, collecting tokens and errors.

    Args:
        text: The JBasic source code
        source_name: Name of the source unit (defaults to options.source_name)
        options: Lexer options (defaults to LexerOptions())

    Returns:
        ScanReport with every token and every lexical error found
    """
    if options is None:
        options = LexerOptions()

    if source_name is None:
        source_name = options.source_name

    lexer = Lexer(source_name, text)
    tokens: list[Token] = []
    errors = LexErrorCollector(max_errors=options.max_errors)

    for result in lexer.results():
        if result.ok:
            tokens.append(result.token)
            continue

        errors.add(result.error)
        logger.debug(f"Collected lexical error: {result.error.location}: {result.error.message}")

        if errors.should_stop():
            logger.warning(
                f"Stopped lexing '{lexer.source_name}' after {errors.error_count()} errors"
            )
            return ScanReport(tokens, errors, truncated=True)

    return ScanReport(tokens, errors)
