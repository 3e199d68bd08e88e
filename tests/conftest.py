"""Pytest configuration and shared fixtures."""

from typing import Callable

import pytest

from lfs_text.codec.lfs_encoding import LfsDefaultEncoding


@pytest.fixture
def encoding() -> LfsDefaultEncoding:
    """Codec using the standard code pages."""
    return LfsDefaultEncoding()


@pytest.fixture
def encode_bytes(encoding: LfsDefaultEncoding) -> Callable[..., bytes]:
    """Encode a string into a fresh field and return only the written bytes."""
    def _encode(value: str, length: int = 64) -> bytes:
        field = bytearray(length)
        written = encoding.encode(value, field, 0, length)
        return bytes(field[:written])
    return _encode
