"""Encoding/decoding for LFS string fields."""

from lfs_text.codec.codepages import CODE_PAGES
from lfs_text.codec.lfs_encoding import (
    DEFAULT_ENCODING,
    LfsDefaultEncoding,
    LfsEncoding,
    conversion_failed,
    decode,
    encode,
)

__all__ = [
    "CODE_PAGES",
    "DEFAULT_ENCODING",
    "LfsDefaultEncoding",
    "LfsEncoding",
    "conversion_failed",
    "decode",
    "encode",
]
