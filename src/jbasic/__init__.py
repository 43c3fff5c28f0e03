"""
JBasic - Front End for a Small BASIC-like Scripting Language
============================================================

This package provides the lexical front end for JBasic: it turns source
text into a stream of typed, position-annotated tokens for a parser.

Main Components
---------------
- **lexer**: Token kinds, the Token record and the Lexer engine
- **errors**: Exception hierarchy and multi-error collection
- **config**: LexerOptions for whole-unit scanning

Quick Start
-----------
Pull tokens one at a time:
    >>> from jbasic import Lexer, TokenKind
    >>> lexer = Lexer()
    >>> lexer.initialize("main.bas", "LET x = 5")
    >>> lexer.next()
    Token(LET, 'LET', 1:1)

Scan a whole unit and collect every error:
    from pathlib import Path
    from jbasic import scan_source

    source_text = Path("main.bas").read_text()
    report = scan_source(source_text, "main.bas")
    if not report.ok:
        print(report.errors.report())

Version History
---------------
1.0.0 - Initial release with the lexer
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from jbasic.config import LexerOptions
from jbasic.errors import (
    JBasicError,
    SourceLocation,
    LexError,
    UnterminatedStringError,
    IllegalEscapeSequenceError,
    UnrecognizedCharacterError,
    AggregateLexError,
    IllegalStateError,
    LexErrorCollector,
)
from jbasic.lexer import (
    KEYWORDS,
    PUNCTUATION,
    Lexer,
    LexerState,
    ScanReport,
    ScanResult,
    Token,
    TokenKind,
    scan_source,
)

__all__ = [
    # Version info
    "__version__",
    # Lexer
    "Lexer",
    "LexerState",
    "LexerOptions",
    "ScanResult",
    "ScanReport",
    "scan_source",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    "PUNCTUATION",
    # Exception hierarchy
    "JBasicError",
    "SourceLocation",
    "LexError",
    "UnterminatedStringError",
    "IllegalEscapeSequenceError",
    "UnrecognizedCharacterError",
    "AggregateLexError",
    "IllegalStateError",
    "LexErrorCollector",
]
