"""
JBasic Lexer Configuration
==========================

Options for scanning whole source units. Configuration can come from:
- Default values (defined here)
- Environment variables
"""

from dataclasses import dataclass
import logging
import os


logger = logging.getLogger(__name__)


DEFAULT_SOURCE_NAME = "<input>"


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        source_name: Label used for tokens and errors when the caller
                     does not name the source unit (default: "<input>")
        max_errors: Number of diagnostics scan_source() collects before
                    it gives up on the rest of the unit (default: 100)
    """
    source_name: str = DEFAULT_SOURCE_NAME
    max_errors: int = 100

    def __post_init__(self):
        if self.max_errors < 1:
            raise ValueError(f"max_errors must be at least 1, got {self.max_errors}")

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            JBASIC_SOURCE_NAME: Default source unit label
            JBASIC_MAX_ERRORS: Error limit (positive integer)

        Returns:
            LexerOptions with values from environment variables
        """
        options = cls()

        if source_name := os.environ.get("JBASIC_SOURCE_NAME"):
            options.source_name = source_name

        if max_errors := os.environ.get("JBASIC_MAX_ERRORS"):
            try:
                value = int(max_errors)
            except ValueError:
                logger.warning(f"Ignoring invalid JBASIC_MAX_ERRORS value {max_errors!r}")
            else:
                if value >= 1:
                    options.max_errors = value
                else:
                    logger.warning(f"Ignoring non-positive JBASIC_MAX_ERRORS value {value}")

        return options
