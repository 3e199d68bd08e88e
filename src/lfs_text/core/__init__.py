"""Core types for LFS string encoding."""

from lfs_text.core.codepage import CodePage, CodePageKind, CodePageRegistry

__all__ = ["CodePage", "CodePageKind", "CodePageRegistry"]
