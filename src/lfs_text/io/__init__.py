"""Reading and writing string fields of fixed-width packets."""

from lfs_text.io.field import TextField, read_string, write_string

__all__ = ["TextField", "read_string", "write_string"]
