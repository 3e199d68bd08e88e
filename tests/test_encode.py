"""Tests for encoding Unicode strings into LFS string fields."""

from typing import Callable

import pytest

from lfs_text.codec.lfs_encoding import LfsDefaultEncoding, conversion_failed
from lfs_text.core.codepage import CodePage, CodePageRegistry


class TestConversionFailed:
    """Tests for the '??' marker check."""

    @pytest.mark.parametrize("data", [b"??", b"^G??", b"^K??"])
    def test_failed(self, data: bytes) -> None:
        assert conversion_failed(data) is True

    @pytest.mark.parametrize("data", [b"", b"?", b"???", b"a?", b"^G\xd9", b"^G?a", b"??ab", b"^J\x82\xa0"])
    def test_not_failed(self, data: bytes) -> None:
        assert conversion_failed(data) is False


class TestEncode:
    """Encoding within the default page and explicit switches."""

    def test_ascii(self, encoding: LfsDefaultEncoding) -> None:
        field = bytearray(16)
        assert encoding.encode("Hello", field) == 5
        assert field == b"Hello" + bytes(11)

    def test_western(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("Café") == b"Caf\xe9"

    def test_empty(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("") == b""

    def test_explicit_switch(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("^GΩ") == b"^G\xd9"

    def test_explicit_switch_changes_meaning(self, encode_bytes: Callable[..., bytes]) -> None:
        """After ^C, a character Cyrillic lacks is searched for again."""
        assert encode_bytes("^Cé") == b"^C^L\xe9"

    def test_unregistered_selector_is_data(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("^Xé") == b"^X\xe9"

    def test_trailing_control_character(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("ab^") == b"ab^"

    def test_question_marks_are_not_failures(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("??") == b"??"

    def test_immutable_buffer(self, encoding: LfsDefaultEncoding) -> None:
        with pytest.raises(TypeError):
            encoding.encode("abc", b"\x00" * 8)  # type: ignore[arg-type]

    @pytest.mark.parametrize("index,length", [(-1, 4), (0, 9), (6, 4)])
    def test_window_outside_buffer(self, encoding: LfsDefaultEncoding, index: int, length: int) -> None:
        with pytest.raises(IndexError):
            encoding.encode("abc", bytearray(8), index, length)


class TestFallback:
    """Switching pages for characters the active page lacks."""

    def test_greek(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("Ω") == b"^G\xd9"

    def test_cyrillic(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("Игрок") == b"^C\xc8\xe3\xf0\xee\xea"

    def test_japanese(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("あ") == b"^J\x82\xa0"

    def test_turkish(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("ğ").startswith(b"^T")

    def test_never_emits_marker_when_a_page_fits(self, encode_bytes: Callable[..., bytes]) -> None:
        for ch in "ΩЖあğ한中":
            data = encode_bytes(ch)
            assert data.startswith(b"^")
            assert b"??" not in data

    def test_stays_in_switched_page(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("ΩΨ") == b"^G\xd9\xd8"

    def test_switches_back(self, encode_bytes: Callable[..., bytes]) -> None:
        """Search order starts at the default page for the way back."""
        assert encode_bytes("Ωé") == b"^G\xd9^L\xe9"

    def test_ascii_does_not_switch_back(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("Ωab") == b"^G\xd9ab"

    def test_exhausted(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("😀") == b"??"
        assert encode_bytes("a😀b") == b"a??b"

    def test_exhausted_keeps_current_page(self, encode_bytes: Callable[..., bytes]) -> None:
        assert encode_bytes("Ω😀Ψ") == b"^G\xd9??\xd8"

    def test_custom_registry(self) -> None:
        registry = CodePageRegistry(
            [CodePage("L", "cp1252", "Western"), CodePage("C", "cp1251", "Cyrillic")],
            default="L",
        )
        encoding = LfsDefaultEncoding(registry)
        field = bytearray(8)
        written = encoding.encode("ΩЖ", field)
        assert field[:written] == b"??^C\xc6"


class TestTruncation:
    """The encoder stays inside its window and reserves the last byte."""

    def test_last_byte_reserved(self, encoding: LfsDefaultEncoding) -> None:
        field = bytearray(b"\xff" * 8)
        written = encoding.encode("abcdefghij", field, 0, 8)
        assert written == 7
        assert field == b"abcdefg\xff"

    @pytest.mark.parametrize("length", range(0, 12))
    def test_written_below_length(self, encoding: LfsDefaultEncoding, length: int) -> None:
        field = bytearray(length)
        written = encoding.encode("aΩbあcЖ", field)
        assert written < max(length, 1)

    def test_stops_at_first_character_that_does_not_fit(self, encoding: LfsDefaultEncoding) -> None:
        field = bytearray(8)
        written = encoding.encode("abcdeΩf", field)
        assert written == 5
        assert field == b"abcde\x00\x00\x00"

    def test_double_byte_not_split(self, encoding: LfsDefaultEncoding) -> None:
        field = bytearray(6)
        written = encoding.encode("aあい", field)
        # "a" + "^J" + 2 bytes fills 5 of 6; the next character needs 2 more
        assert written == 5
        assert field[:written] == b"a^J\x82\xa0"

    def test_window_in_larger_buffer(self, encoding: LfsDefaultEncoding) -> None:
        packet = bytearray(b"\xaa" * 12)
        written = encoding.encode("Hello world", packet, 2, 6)
        assert written == 5
        assert packet == b"\xaa\xaaHello\xaa\xaa\xaa\xaa\xaa"

    def test_tiny_windows(self, encoding: LfsDefaultEncoding) -> None:
        assert encoding.encode("abc", bytearray(4), 0, 0) == 0
        assert encoding.encode("abc", bytearray(4), 0, 1) == 0


class TestRoundTrip:
    """Decoding what was encoded."""

    @pytest.mark.parametrize("text", [
        "Hello, world!",
        "Café naïve",
        "^GΚαλημέρα",
        "^CПривет",
        "^Jこんにちは",
        "^EŁódź",
        "plain^Xtext",
    ])
    def test_single_page_text(self, encoding: LfsDefaultEncoding, text: str) -> None:
        field = bytearray(64)
        encoding.encode(text, field)
        assert encoding.decode(field) == text

    def test_fallback_adds_escape(self, encoding: LfsDefaultEncoding) -> None:
        field = bytearray(32)
        encoding.encode("Player Ω", field)
        assert encoding.decode(field) == "Player ^GΩ"

    def test_bytes_survive_decode_encode(self, encoding: LfsDefaultEncoding) -> None:
        data = b"A^G\xd9^L\xe9^J\x82\xa0"
        field = bytearray(32)
        written = encoding.encode(encoding.decode(data), field)
        assert bytes(field[:written]) == data
