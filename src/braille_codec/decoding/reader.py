"""
Braille Line Reader
===================

Translates scanned Braille text back into ASCII.

A scanned line is three strings (scan rows) of equal length, as written
by LinePrinter.flush(). Cells are 2 columns wide and separated by
spacing columns, so cell n starts at column n * (2 + spacing). The
number of cells in a row of length L is (L + spacing) // (2 + spacing).

Example:
    >>> reader = BrailleReader(BrailleDecoder(BrailleEncoder()))
    >>> reader.translate_line(["o. .o", "oo o.", ".. .."], "o", 1)
    'hi'

Malformed input is not an error: a wrong row count translates to "",
and a cell slot that cannot be sliced decodes to INVALID_SYMBOL.
"""

import logging
from typing import List, Optional, Sequence

from braille_codec.cell import CELL_HEIGHT, CELL_WIDTH, Bitmap
from braille_codec.decoding.decoder import BrailleDecoder

logger = logging.getLogger(__name__)


class BrailleReader:
    """
    Slices scan rows into cell bitmaps and decodes each cell.

    Args:
        decoder: Decodes the individual 3x2 bitmaps
    """

    def __init__(self, decoder: BrailleDecoder):
        self._decoder = decoder

    @property
    def decoder(self) -> BrailleDecoder:
        return self._decoder

    def extract_character(
        self,
        position: int,
        spacing: int,
        scan_lines: Optional[Sequence[str]],
    ) -> Optional[Bitmap]:
        """
        Cut the bitmap of one cell out of a scanned line.

        Args:
            position: Zero-based cell number within the line
            spacing: Columns between adjacent cells
            scan_lines: The three scan rows

        Returns:
            A 3x2 bitmap, or None if scan_lines is not three rows, spacing
            is -2 or less, or the cell does not lie fully inside every row
        """
        if scan_lines is None or len(scan_lines) != CELL_HEIGHT:
            return None

        if CELL_WIDTH + spacing <= 0:
            return None

        index = position * (CELL_WIDTH + spacing)
        if index < 0 or any(index + CELL_WIDTH > len(row) for row in scan_lines):
            return None

        return tuple(
            tuple(row[index:index + CELL_WIDTH]) for row in scan_lines
        )

    def translate_line(
        self,
        scan_lines: Optional[Sequence[str]],
        dot_symbol: str,
        spacing: int,
    ) -> str:
        """
        Translate one scanned line (three rows) into text.

        Every cell slot contributes exactly one character. Slots that cannot
        be extracted (rows of unequal length) yield INVALID_SYMBOL, which
        the caller has to filter.

        Returns:
            The decoded text, or "" if scan_lines is not exactly three rows
            or spacing leaves no room for a cell
        """
        if scan_lines is None or len(scan_lines) != CELL_HEIGHT:
            count = 0 if scan_lines is None else len(scan_lines)
            logger.debug(f"Cannot translate scan with {count} rows")
            return ""

        if CELL_WIDTH + spacing <= 0:
            logger.debug(f"Cannot translate scan with spacing {spacing}")
            return ""

        count = (len(scan_lines[0]) + spacing) // (CELL_WIDTH + spacing)
        return "".join(
            self._decoder.decode_bitmap(
                self.extract_character(position, spacing, scan_lines),
                dot_symbol,
            )
            for position in range(count)
        )

    def translate_lines(
        self,
        scan_lines: Sequence[str],
        dot_symbol: str,
        spacing: int,
    ) -> List[str]:
        """
        Translate a scan of several stacked lines.

        The rows are taken three at a time, e.g. the output of several
        flush() calls concatenated. A trailing band with fewer than three
        rows translates to "".
        """
        return [
            self.translate_line(list(scan_lines[start:start + CELL_HEIGHT]), dot_symbol, spacing)
            for start in range(0, len(scan_lines), CELL_HEIGHT)
        ]
