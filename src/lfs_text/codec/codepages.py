"""The fixed set of code pages LFS strings can switch between."""

from lfs_text.core.codepage import CodePage, CodePageKind, CodePageRegistry
from lfs_text.core.constants import DEFAULT_SELECTOR

SBCS = CodePageKind.SINGLE_BYTE
DBCS = CodePageKind.DOUBLE_BYTE

# Order matters: the encoder searches pages in this order when a
# character cannot be written in the active page.
CODE_PAGES = CodePageRegistry(
    (
        CodePage("L", "cp1252", "Latin-1 (Western European)", SBCS),
        CodePage("G", "cp1253", "Greek", SBCS),
        CodePage("C", "cp1251", "Cyrillic", SBCS),
        CodePage("J", "cp932", "Japanese (Shift-JIS)", DBCS),
        CodePage("E", "cp1250", "Central European", SBCS),
        CodePage("T", "cp1254", "Turkish", SBCS),
        CodePage("B", "cp1257", "Baltic", SBCS),
        CodePage("H", "cp950", "Traditional Chinese (Big5)", DBCS),
        CodePage("S", "cp936", "Simplified Chinese (GBK)", DBCS),
        CodePage("K", "cp949", "Korean", DBCS),
    ),
    default=DEFAULT_SELECTOR,
)
