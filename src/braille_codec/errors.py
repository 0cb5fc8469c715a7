"""
Braille Codec Error Hierarchy
=============================

This module defines the exception hierarchy for the Braille codec.
All exceptions inherit from BrailleError, allowing callers to catch all
codec-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
BrailleError (base)
├── ConfigurationError - invalid font/printer/config arguments
├── UnsupportedCharacterError - character outside a-z and space
└── ScanFormatError - scan input that cannot be split into cell bands

What Is NOT an Error
--------------------
The transcoding paths themselves never raise. Malformed geometry while
reading is reported through sentinel values (None, INVALID_SYMBOL, ""),
characters written past the end of a line buffer are dropped, and bit
patterns that do not resolve to a letter decode to a space. The exceptions
below cover programmer mistakes (bad constructor arguments) and unusable
input at the command-line boundary.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class BrailleError(Exception):
    """
    Base exception for all Braille codec errors.

    All exceptions in the package inherit from this class, allowing callers
    to catch all codec-related errors with a single except clause:

        try:
            printer = LinePrinter(font, line_length=0, spacing=1)
        except BrailleError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Construction and Configuration Errors
# =============================================================================

class ConfigurationError(BrailleError, ValueError):
    """
    Invalid construction argument or configuration value.

    Raised when:
    - A font is built without an encoder or with non-positive dimensions
    - A printer gets a non-positive line length or spacing
    - A dot/space symbol is not exactly one character

    Attributes:
        setting: Name of the offending setting (optional)
        value: The rejected value (optional)
    """

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None,
        value: object = None,
    ):
        self.setting = setting
        self.value = value
        super().__init__(message)


class UnsupportedCharacterError(BrailleError, ValueError):
    """
    Character has no Braille cell in the supported alphabet.

    Only the 26 lowercase letters (either case is accepted on input) and
    the space have a dot pattern. Digits, punctuation and capital signs
    are not encoded.
    """

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"no Braille pattern for character {character!r}")


# =============================================================================
# Input Format Errors
# =============================================================================

class ScanFormatError(BrailleError):
    """
    Scan input cannot be split into three-row cell bands.

    Raised by the command-line reader when the number of scan rows is not
    a multiple of the cell height. The library-level reader reports the
    same condition as an empty translation instead.
    """

    def __init__(self, row_count: int, cell_height: int = 3):
        self.row_count = row_count
        self.cell_height = cell_height
        super().__init__(
            f"scan has {row_count} rows, expected a multiple of {cell_height}"
        )
