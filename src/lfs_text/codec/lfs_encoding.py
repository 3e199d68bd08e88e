"""
Conversion between Unicode strings and LFS-encoded string fields.

LFS strings are byte sequences in one of several legacy code pages.
A ``^`` followed by a registered selector letter switches the code
page for everything after it. The escape bytes are kept and decoded
under the new page, so the decoded string shows them literally and
encoding that string again reproduces the same switch.
"""

import logging
from abc import ABC, abstractmethod

from lfs_text.codec.codepages import CODE_PAGES
from lfs_text.core.codepage import CodePage, CodePageRegistry
from lfs_text.core.constants import CONTROL_BYTE, CONTROL_CHAR, FALLBACK_MARKER, NUL

_LOGGER = logging.getLogger(__name__)

Buffer = bytes | bytearray | memoryview


def conversion_failed(data: bytes) -> bool:
    """
    Check whether a converter fell back to the ``??`` marker.

    Four bytes ending in the marker is a switch prefix followed by a
    character the candidate page could not hold either.
    """
    return (
        (len(data) == 2 and data == FALLBACK_MARKER)
        or (len(data) == 4 and data[2:] == FALLBACK_MARKER)
    )


def _check_window(buffer: Buffer, index: int, length: int | None) -> int:
    """Validate a (buffer, index, length) window and return its length."""
    if length is None:
        length = len(buffer) - index
    if index < 0 or length < 0 or index + length > len(buffer):
        raise IndexError(
            f"Window index={index} length={length} outside buffer of {len(buffer)} bytes"
        )
    return length


class LfsEncoding(ABC):
    """Interface for converting between strings and packet string fields."""

    @abstractmethod
    def decode(self, buffer: Buffer, index: int = 0, length: int | None = None) -> str:
        """Convert the bytes of a string field to a Unicode string."""

    @abstractmethod
    def encode(
        self,
        value: str,
        buffer: bytearray | memoryview,
        index: int = 0,
        length: int | None = None,
    ) -> int:
        """Write ``value`` into a string field and return the bytes written."""


class LfsDefaultEncoding(LfsEncoding):
    """
    Code-page switching encoding used by LFS strings.

    Holds no per-call state; one instance can be shared freely,
    including between threads.
    """

    def __init__(self, code_pages: CodePageRegistry = CODE_PAGES):
        self.code_pages = code_pages

    def decode(self, buffer: Buffer, index: int = 0, length: int | None = None) -> str:
        """
        Convert an LFS string field to Unicode.

        Stops at the first NUL byte inside the window. The byte after a
        ``^`` is looked up against the whole buffer, not the window, so
        a selector just past the field still switches the page.
        """
        length = _check_window(buffer, index, length)
        pages = self.code_pages
        page = pages.default
        output: list[str] = []
        run_start = index
        stop = index + length

        for i in range(index, index + length):
            byte = buffer[i]

            if byte == NUL:
                stop = i
                break

            if byte == CONTROL_BYTE and i + 1 < len(buffer):
                selected = pages.get(chr(buffer[i + 1]))
                if selected is not None:
                    output.append(page.decode(buffer[run_start:i]))
                    run_start = i
                    page = selected

        output.append(page.decode(buffer[run_start:stop]))
        return "".join(output)

    def encode(
        self,
        value: str,
        buffer: bytearray | memoryview,
        index: int = 0,
        length: int | None = None,
    ) -> int:
        """
        Convert a Unicode string into an LFS string field.

        Characters missing from the active page trigger a switch to the
        first other page that has them. The last byte of the window is
        never written; it is left for the terminator. Encoding stops at
        the first character that does not fit.
        """
        if isinstance(buffer, bytes):
            raise TypeError("Cannot encode into an immutable bytes object")
        length = _check_window(buffer, index, length)
        pages = self.code_pages
        current = pages.default
        limit = index + length
        pos = index
        last = len(value) - 1

        for i, ch in enumerate(value):
            # An explicit escape switches before the ^ itself is encoded
            if ch == CONTROL_CHAR and i < last:
                current = pages.get(value[i + 1], current)

            data = current.encode(ch)
            if conversion_failed(data):
                current, data = self._find_code_page(ch, current, data)

            if pos + len(data) >= limit:
                _LOGGER.debug(
                    "Truncated string at character %d of %d (%d bytes written)",
                    i, len(value), pos - index,
                )
                break

            buffer[pos:pos + len(data)] = data
            pos += len(data)

        return pos - index

    def _find_code_page(self, ch: str, current: CodePage, data: bytes) -> tuple[CodePage, bytes]:
        """Search the other pages for one that can hold ``ch``."""
        for page in self.code_pages.values():
            if page is current:
                continue
            attempt = page.encode(CONTROL_CHAR + page.selector + ch)
            if not conversion_failed(attempt):
                _LOGGER.debug("Switching to code page %s for %r", page.selector, ch)
                return page, attempt

        _LOGGER.debug("No code page can encode %r", ch)
        return current, data


DEFAULT_ENCODING = LfsDefaultEncoding()


def decode(buffer: Buffer, index: int = 0, length: int | None = None) -> str:
    """Decode an LFS string field with the standard code pages."""
    return DEFAULT_ENCODING.decode(buffer, index, length)


def encode(
    value: str,
    buffer: bytearray | memoryview,
    index: int = 0,
    length: int | None = None,
) -> int:
    """Encode into an LFS string field with the standard code pages."""
    return DEFAULT_ENCODING.encode(value, buffer, index, length)
