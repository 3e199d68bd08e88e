"""
lfs-text: string codec for Live for Speed network packets

LFS strings are bytes in one of ten legacy code pages. A ``^`` followed
by a selector letter (``^L``, ``^G``, ``^J``...) switches pages mid-string.

Quick Start:
    >>> import lfs_text
    >>> field = bytearray(24)
    >>> lfs_text.encode("Player Ω", field)
    10
    >>> lfs_text.decode(field)
    'Player ^GΩ'

Features:
    - Decode NUL-terminated string fields into Unicode
    - Encode Unicode into bounded fields, switching code pages as needed
    - Fixed-width packet field helpers
    - Command line tool (``lfs-text``) for inspecting raw fields
"""

__version__ = "0.1.0"

# Code pages
from lfs_text.core.codepage import CodePage, CodePageKind, CodePageRegistry
from lfs_text.codec.codepages import CODE_PAGES

# Codec
from lfs_text.codec.lfs_encoding import (
    LfsDefaultEncoding,
    LfsEncoding,
    decode,
    encode,
)

# Packet fields
from lfs_text.io.field import TextField, read_string, write_string

__all__ = [
    # Version
    "__version__",
    # Code pages
    "CodePage",
    "CodePageKind",
    "CodePageRegistry",
    "CODE_PAGES",
    # Codec
    "LfsEncoding",
    "LfsDefaultEncoding",
    "decode",
    "encode",
    # Packet fields
    "TextField",
    "read_string",
    "write_string",
]
