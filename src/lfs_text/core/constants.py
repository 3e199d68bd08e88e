"""Shared constants for LFS string encoding."""

# Escape convention: CONTROL_CHAR followed by a registered selector
# switches the active code page.
CONTROL_CHAR = "^"
CONTROL_BYTE = ord(CONTROL_CHAR)

# Every converter replaces an unmappable character with this marker.
# None of the registered double-byte pages can produce it as real output.
FALLBACK_CHARS = "??"
FALLBACK_MARKER = FALLBACK_CHARS.encode("ascii")

DEFAULT_SELECTOR = "L"

# Name under which the marker-producing error handler is registered
# with the codecs module.
ERROR_HANDLER = "lfs_text.fallback"

NUL = 0x00
