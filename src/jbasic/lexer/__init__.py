"""
JBasic Lexer Package
====================

Lexical analysis for JBasic source code: the token vocabulary and the
pull-based Lexer that produces it.

Usage
-----
>>> from jbasic.lexer import scan_source
>>> report = scan_source("PRINT 1.5 {", "demo.bas")
>>> [t.kind.name for t in report.tokens]
['IDENTIFIER', 'REAL_LITERAL', 'END_OF_INPUT']
>>> report.errors.error_count()
1
"""

from jbasic.lexer.tokens import KEYWORDS, PUNCTUATION, Token, TokenKind
from jbasic.lexer.lexer import (
    Lexer,
    LexerState,
    ScanReport,
    ScanResult,
    scan_source,
)

__all__ = [
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    "PUNCTUATION",
    # Lexer
    "Lexer",
    "LexerState",
    "ScanResult",
    "ScanReport",
    "scan_source",
]
