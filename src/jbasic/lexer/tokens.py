"""
JBasic Tokens
=============

Token kinds, the token record, and the fixed lookup tables the lexer
uses to classify words and punctuation.

Keywords and the constants TRUE, FALSE and NULL are case-insensitive in
source text; their tokens always carry the canonical uppercase spelling.
Identifiers keep the casing they were written with.
"""

from dataclasses import dataclass
from enum import Enum, auto

from jbasic.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the JBasic language.

    Keywords are distinguished from identifiers to simplify parsing.
    """

    # === Structural Tokens ===
    END_OF_INPUT = auto()   # No more source text
    NEW_LINE = auto()       # One per newline character

    # === Literals and Identifiers ===
    INTEGER_LITERAL = auto()  # 42
    REAL_LITERAL = auto()     # 4.2
    STRING_LITERAL = auto()   # "..."
    TRUE_LITERAL = auto()     # TRUE
    FALSE_LITERAL = auto()    # FALSE
    NULL_LITERAL = auto()     # NULL
    IDENTIFIER = auto()       # Variable/function names

    # === Keywords - Control Flow ===
    IF = auto()
    THEN = auto()
    ELSE = auto()
    ELSEIF = auto()
    END = auto()
    WHILE = auto()
    DO = auto()
    FOR = auto()
    IN = auto()
    CONTINUE = auto()
    BREAK = auto()
    RETURN = auto()

    # === Keywords - Declarations ===
    FUNCTION = auto()
    IMPORT = auto()
    LET = auto()
    CALL = auto()
    NEW = auto()
    CLASS = auto()
    PRIVATE = auto()
    PROTECTED = auto()
    PUBLIC = auto()
    EXTENDS = auto()
    SUPER = auto()
    SELF = auto()

    # === Keywords - Logical Operators ===
    AND = auto()
    OR = auto()
    NOT = auto()

    # === Punctuation and Operators ===
    DOT = auto()            # .
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    SLASH = auto()          # /
    EQUALS = auto()         # =
    LESS_THAN = auto()      # <
    GREATER_THAN = auto()   # >
    COMMA = auto()          # ,
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )

    @property
    def is_literal(self) -> bool:
        return self in _LITERAL_KINDS

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_KINDS

    @property
    def is_operator(self) -> bool:
        return self in _OPERATOR_KINDS


# =============================================================================
# Lookup Tables
# =============================================================================

# Uppercase spelling -> kind. Looked up with the upper-cased word.
KEYWORDS: dict[str, TokenKind] = {
    # Constants
    "TRUE": TokenKind.TRUE_LITERAL,
    "FALSE": TokenKind.FALSE_LITERAL,
    "NULL": TokenKind.NULL_LITERAL,

    # Control flow
    "IF": TokenKind.IF,
    "THEN": TokenKind.THEN,
    "ELSE": TokenKind.ELSE,
    "ELSEIF": TokenKind.ELSEIF,
    "END": TokenKind.END,
    "WHILE": TokenKind.WHILE,
    "DO": TokenKind.DO,
    "FOR": TokenKind.FOR,
    "IN": TokenKind.IN,
    "CONTINUE": TokenKind.CONTINUE,
    "BREAK": TokenKind.BREAK,
    "RETURN": TokenKind.RETURN,

    # Declarations
    "FUNCTION": TokenKind.FUNCTION,
    "IMPORT": TokenKind.IMPORT,
    "LET": TokenKind.LET,
    "CALL": TokenKind.CALL,
    "NEW": TokenKind.NEW,
    "CLASS": TokenKind.CLASS,
    "PRIVATE": TokenKind.PRIVATE,
    "PROTECTED": TokenKind.PROTECTED,
    "PUBLIC": TokenKind.PUBLIC,
    "EXTENDS": TokenKind.EXTENDS,
    "SUPER": TokenKind.SUPER,
    "SELF": TokenKind.SELF,

    # Logical operators
    "AND": TokenKind.AND,
    "OR": TokenKind.OR,
    "NOT": TokenKind.NOT,
}

PUNCTUATION: dict[str, TokenKind] = {
    ".": TokenKind.DOT,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "=": TokenKind.EQUALS,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    ",": TokenKind.COMMA,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

_LITERAL_KINDS = frozenset({
    TokenKind.INTEGER_LITERAL,
    TokenKind.REAL_LITERAL,
    TokenKind.STRING_LITERAL,
    TokenKind.TRUE_LITERAL,
    TokenKind.FALSE_LITERAL,
    TokenKind.NULL_LITERAL,
})

_KEYWORD_KINDS = frozenset(KEYWORDS.values()) - _LITERAL_KINDS

_OPERATOR_KINDS = frozenset(PUNCTUATION.values())


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    Represents a single token from JBasic source code.

    Attributes:
        kind: The TokenKind classification
        source_name: Name of the source unit, copied from the lexer
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        text: Canonical text of the token. Decoded content for strings,
              uppercase spelling for keywords and constants, the exact
              characters for numbers, identifiers and punctuation.

    NEW_LINE tokens report the line they terminate and column 1.
    END_OF_INPUT tokens have empty text.
    """
    kind: TokenKind
    source_name: str
    line: int
    column: int
    text: str

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.text:
            return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.source_name, self.line, self.column)

    def is_keyword(self) -> bool:
        """Return True if this token is a keyword."""
        return self.kind.is_keyword

    def is_literal(self) -> bool:
        """Return True if this token is a literal value."""
        return self.kind.is_literal
