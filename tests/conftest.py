"""
Shared Test Fixtures
====================

Fixtures for the encoder, the standard 3x2 font and the read path.
Every fixture builds fresh objects; fonts and trees are cheap to build.
"""

import pytest

from braille_codec.decoding import BrailleDecoder, BrailleReader
from braille_codec.encoding import BrailleEncoder, BrailleFont


@pytest.fixture
def encoder() -> BrailleEncoder:
    """The standard letter encoder."""
    return BrailleEncoder()


@pytest.fixture
def font(encoder) -> BrailleFont:
    """3x2 font drawing dots as 'o' and flat positions as '.'."""
    return BrailleFont(3, 2, "o", ".", encoder)


@pytest.fixture
def decoder(encoder) -> BrailleDecoder:
    """Decoder built on the standard encoder."""
    return BrailleDecoder(encoder)


@pytest.fixture
def reader(decoder) -> BrailleReader:
    """Reader built on the standard decoder."""
    return BrailleReader(decoder)


@pytest.fixture
def hi_scan() -> list[str]:
    """Scan of the letters 'hi' with one column of spacing."""
    return ["o. .o", "oo o.", ".. .."]
