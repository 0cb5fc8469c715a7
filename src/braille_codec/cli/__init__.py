"""
Braille Codec Command-Line Interface
====================================

This package provides the command-line tool for the Braille codec:

- **brlcodec encode**: print text as Braille
- **brlcodec decode**: read scanned Braille back into text
- **brlcodec demo**: print the built-in example strings
- **brlcodec table**: list the alphabet with dot numbers and patterns

The tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["brlcodec"]
