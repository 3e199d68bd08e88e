"""Code-page converters and the registry that maps selectors to them."""

import codecs
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from lfs_text.core.constants import ERROR_HANDLER, FALLBACK_CHARS


def _fallback_handler(exc: UnicodeError) -> tuple[str, int]:
    """Replace each unencodable character with the two-byte marker."""
    if not isinstance(exc, UnicodeEncodeError):
        raise exc
    return FALLBACK_CHARS, exc.start + 1


codecs.register_error(ERROR_HANDLER, _fallback_handler)


class CodePageKind(Enum):
    """Byte width family of a legacy code page."""
    SINGLE_BYTE = "sbcs"
    DOUBLE_BYTE = "dbcs"


@dataclass(frozen=True)
class CodePage:
    """
    A legacy code page reachable through a selector letter.

    Conversion never raises: undecodable bytes come back as U+FFFD and
    unmappable characters are written as ``??``, which the encoder uses
    to detect that a character does not fit this page.
    """
    selector: str
    codec: str
    name: str
    kind: CodePageKind = CodePageKind.SINGLE_BYTE

    def __post_init__(self) -> None:
        if len(self.selector) != 1 or not self.selector.isascii() or not self.selector.isalpha():
            raise ValueError(f"Selector must be a single ASCII letter, got {self.selector!r}")
        try:
            codecs.lookup(self.codec)
        except LookupError:
            raise ValueError(f"Unknown codec for code page {self.selector}: {self.codec!r}") from None

    @property
    def is_double_byte(self) -> bool:
        return self.kind is CodePageKind.DOUBLE_BYTE

    def decode(self, data: bytes) -> str:
        """Convert raw bytes in this page to text."""
        return bytes(data).decode(self.codec, errors="replace")

    def encode(self, text: str) -> bytes:
        """Convert text to bytes in this page, marking misses with ``??``."""
        return text.encode(self.codec, errors=ERROR_HANDLER)


class CodePageRegistry(Mapping[str, CodePage]):
    """
    Read-only, ordered mapping of selector letters to code pages.

    Iteration follows definition order, which is also the order the
    encoder tries pages in when a character needs a different page.
    """

    __slots__ = ("_pages", "_default")

    def __init__(self, pages: Iterable[CodePage], default: str):
        table: dict[str, CodePage] = {}
        for page in pages:
            if page.selector in table:
                raise ValueError(f"Duplicate code page selector: {page.selector!r}")
            table[page.selector] = page

        if default not in table:
            raise ValueError(f"Default selector {default!r} is not registered")

        self._pages = MappingProxyType(table)
        self._default = table[default]

    @property
    def default(self) -> CodePage:
        """The page every decode and encode starts in."""
        return self._default

    @property
    def selectors(self) -> str:
        return "".join(self._pages)

    def __getitem__(self, selector: str) -> CodePage:
        return self._pages[selector]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __repr__(self) -> str:
        return f"CodePageRegistry({self.selectors!r}, default={self._default.selector!r})"
