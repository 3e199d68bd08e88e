"""Fixed-width string fields inside LFS packets."""

from dataclasses import dataclass

from lfs_text.codec.lfs_encoding import DEFAULT_ENCODING, Buffer, LfsEncoding


def read_string(
    data: Buffer,
    index: int = 0,
    length: int | None = None,
    encoding: LfsEncoding | None = None,
) -> str:
    """Read a NUL-terminated string field from packet data."""
    return (encoding or DEFAULT_ENCODING).decode(data, index, length)


def write_string(value: str, length: int, encoding: LfsEncoding | None = None) -> bytes:
    """
    Build a string field of exactly ``length`` bytes.

    The field is zero-filled, so whatever the encoder leaves unused,
    including the reserved last byte, reads back as the terminator.
    """
    if length < 1:
        raise ValueError(f"Field length must be at least 1, got {length}")
    field = bytearray(length)
    (encoding or DEFAULT_ENCODING).encode(value, field, 0, length)
    return bytes(field)


@dataclass(frozen=True)
class TextField:
    """A string field at a fixed offset in a packet layout."""
    name: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def read(self, packet: Buffer, encoding: LfsEncoding | None = None) -> str:
        """Read this field from a packet."""
        return read_string(packet, self.offset, self.length, encoding)

    def write(self, packet: bytearray, value: str, encoding: LfsEncoding | None = None) -> int:
        """Overwrite this field in a packet and return the bytes written."""
        if self.end > len(packet):
            raise IndexError(
                f"Field {self.name!r} ({self.offset}:{self.end}) exceeds packet of {len(packet)} bytes"
            )
        packet[self.offset:self.end] = bytes(self.length)
        return (encoding or DEFAULT_ENCODING).encode(value, packet, self.offset, self.length)
