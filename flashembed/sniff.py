"""Content type detection for response bodies sent without a content-type."""

from __future__ import annotations

SNIFF_LENGTH = 512

HTML = "text/html; charset=utf-8"
XML = "text/xml; charset=utf-8"
TEXT = "text/plain; charset=utf-8"
BINARY = "application/octet-stream"

_WHITESPACE = b"\t\n\x0c\r "

# Matched case-insensitively and must be followed by a space or ">".
_HTML_SIGNATURES = (
    b"<!DOCTYPE HTML",
    b"<HTML",
    b"<HEAD",
    b"<SCRIPT",
    b"<IFRAME",
    b"<H1",
    b"<DIV",
    b"<FONT",
    b"<TABLE",
    b"<A",
    b"<STYLE",
    b"<TITLE",
    b"<B",
    b"<BODY",
    b"<BR",
    b"<P",
    b"<!--",
)

_EXACT_SIGNATURES = (
    (b"%PDF-", "application/pdf"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
)

# Bytes that never appear in plain text (WHATWG "binary data byte").
_BINARY_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0B] + list(range(0x0E, 0x1B)) + list(range(0x1C, 0x20))
)


def _is_html(data: bytes) -> bool:
    for signature in _HTML_SIGNATURES:
        head = data[: len(signature)]
        if head.upper() != signature:
            continue
        terminator = data[len(signature) : len(signature) + 1]
        if terminator in (b" ", b">"):
            return True
    return False


def detect_content_type(data: bytes) -> str:
    """
    Guess the media type of a body from its first bytes.

    Only the first 512 bytes are examined. Unknown text falls back to
    text/plain, anything with binary control bytes to application/octet-stream.
    """
    sample = data[:SNIFF_LENGTH]

    for signature, media_type in _EXACT_SIGNATURES:
        if sample.startswith(signature):
            return media_type

    markup = sample.lstrip(_WHITESPACE)
    if _is_html(markup):
        return HTML
    if markup.startswith(b"<?xml"):
        return XML

    if any(byte in _BINARY_BYTES for byte in sample):
        return BINARY
    return TEXT


def is_html(content_type: str) -> bool:
    """Tell whether a content-type value names an HTML document."""
    return content_type.strip().lower().startswith("text/html")
