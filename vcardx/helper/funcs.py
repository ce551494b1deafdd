from __future__ import annotations

import codecs

from .constants import DEFAULT_CHARSET


def byte_decoder(text: str | bytes, encoding="base64") -> str | bytes:
    if type(text) is str:
        text = text.encode()
    return codecs.decode(text, encoding)


def byte_encoder(text: str | bytes, encoding="base64") -> bytes:
    if type(text) is str:
        text = text.encode()
    return codecs.encode(text, encoding)


def is_charset(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


def _qp_printable(byte: int) -> bool:
    # space and tab are kept literal, "=" and everything outside 33..126 is encoded
    return byte in (9, 32) or (33 <= byte <= 126 and byte != 61)


def qp_encode(text: str, charset: str = DEFAULT_CHARSET) -> str:
    """
    Quoted-printable encode text without inserting soft line breaks.

    Line breaks in text are encoded too (=0D, =0A), the folding writer adds
    the soft breaks.
    """
    return "".join(chr(b) if _qp_printable(b) else f"={b:02X}" for b in text.encode(charset))


def qp_decode(text: str, charset: str = DEFAULT_CHARSET, errors="strict") -> str:
    """
    Decode a quoted-printable value into a string using charset.

    Malformed "=" sequences are passed through unchanged.
    """
    raw = byte_decoder(text.encode(charset, errors="replace"), "quoted-printable")
    return raw.decode(charset, errors=errors)


def byte_width(char: str) -> int:
    return len(char.encode("utf-8"))
