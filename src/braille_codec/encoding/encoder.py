"""
Braille Letter Encoder
======================

Maps ASCII letters to their six-dot Braille patterns.

The alphabet follows the standard (Grade 1) Braille letters. Each letter
is listed by its raised dot numbers; the 6-bit pattern is derived from
those by setting bit (dot - 1). See braille_codec.cell for the layout.

Example:
    >>> encoder = BrailleEncoder()
    >>> encoder.to_pattern("h")    # dots 1-2-5
    19
    >>> bin(encoder.to_pattern("Z"))  # dots 1-3-5-6
    '0b110101'
"""

from typing import Dict, Tuple

from braille_codec.cell import SPACE, SPACE_PATTERN
from braille_codec.errors import UnsupportedCharacterError


# =============================================================================
# Alphabet Table
# =============================================================================

# Raised dots per letter.
LETTER_DOTS: Dict[str, Tuple[int, ...]] = {
    "a": (1,),
    "b": (1, 2),
    "c": (1, 4),
    "d": (1, 4, 5),
    "e": (1, 5),
    "f": (1, 2, 4),
    "g": (1, 2, 4, 5),
    "h": (1, 2, 5),
    "i": (2, 4),
    "j": (2, 4, 5),
    "k": (1, 3),
    "l": (1, 2, 3),
    "m": (1, 3, 4),
    "n": (1, 3, 4, 5),
    "o": (1, 3, 5),
    "p": (1, 2, 3, 4),
    "q": (1, 2, 3, 4, 5),
    "r": (1, 2, 3, 5),
    "s": (2, 3, 4),
    "t": (2, 3, 4, 5),
    "u": (1, 3, 6),
    "v": (1, 2, 3, 6),
    "w": (2, 4, 5, 6),
    "x": (1, 3, 4, 6),
    "y": (1, 3, 4, 5, 6),
    "z": (1, 3, 5, 6),
}


def dots_to_pattern(dots: Tuple[int, ...]) -> int:
    """Convert Braille dot numbers (1-6) to a 6-bit pattern."""
    pattern = 0
    for dot in dots:
        pattern |= 1 << (dot - 1)
    return pattern


LETTER_PATTERNS: Dict[str, int] = {
    letter: dots_to_pattern(dots) for letter, dots in LETTER_DOTS.items()
}


# =============================================================================
# Encoder
# =============================================================================

class BrailleEncoder:
    """
    Converts single characters into six-dot Braille patterns.

    Letters are accepted in either case and normalized to lowercase. The
    space maps to the empty pattern (0). The encoder is stateless; one
    instance can be shared by fonts and symbol trees alike.
    """

    def to_pattern(self, character: str) -> int:
        """
        Return the 6-bit dot pattern for a letter or the space.

        Args:
            character: A single character, a-z (any case) or ' '

        Returns:
            Pattern with bit (dot - 1) set for every raised dot

        Raises:
            UnsupportedCharacterError: For any other character
        """
        if character == SPACE:
            return SPACE_PATTERN
        pattern = None
        if len(character) == 1 and character.isascii():
            pattern = LETTER_PATTERNS.get(character.lower())
        if pattern is None:
            raise UnsupportedCharacterError(character)
        return pattern

    def supported_characters(self) -> str:
        """The space followed by the letters a-z, in insertion order."""
        return SPACE + "".join(LETTER_PATTERNS)
