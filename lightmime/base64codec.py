"""Base64 encoding and decoding of blocks, strings and binary files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import BinaryIO

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DECODE = {ord(ch): value for value, ch in enumerate(_ALPHABET)}
_PAD = ord("=")
_LINEBREAK = b"\r\n"


def _as_bytes(source: str | bytes | bytearray) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    return bytes(source)


def _codes(source: str | bytes | bytearray) -> Iterator[int]:
    if isinstance(source, str):
        return (ord(ch) for ch in source)
    return iter(source)


def _padded(group: Sequence[int]) -> list[int]:
    return [*group, *[0] * (4 - len(group))]


def encode_block(data: bytes | Sequence[int], length: int) -> str:
    """Encode up to three bytes as four base64 characters.

    ``length`` is the number of meaningful bytes in ``data``; positions
    beyond it are written as ``=`` padding.
    """
    block = bytes(data)
    if len(block) > 3:
        raise ValueError("a base64 block holds at most three bytes")
    b0, b1, b2 = block + bytes(3 - len(block))
    return "".join(
        (
            _ALPHABET[b0 >> 2],
            _ALPHABET[((b0 & 0x03) << 4) | ((b1 & 0xF0) >> 4)],
            _ALPHABET[((b1 & 0x0F) << 2) | ((b2 & 0xC0) >> 6)] if length > 1 else "=",
            _ALPHABET[b2 & 0x3F] if length > 2 else "=",
        )
    )


def decode_block(data: Sequence[int]) -> bytes:
    """Decode four 6-bit values into three bytes."""
    if len(data) != 4:
        raise ValueError("a base64 block holds exactly four values")
    s0, s1, s2, s3 = data
    return bytes(
        (
            ((s0 << 2) | (s1 >> 4)) & 0xFF,
            ((s1 << 4) | (s2 >> 2)) & 0xFF,
            (((s2 << 6) & 0xC0) | s3) & 0xFF,
        )
    )


def _encode_blocks(data: bytes) -> Iterator[str]:
    for start in range(0, len(data), 3):
        chunk = data[start : start + 3]
        yield encode_block(chunk, len(chunk))


def _groups(values: Iterable[int]) -> Iterator[list[int]]:
    group: list[int] = []
    for value in values:
        group.append(value)
        if len(group) == 4:
            yield group
            group = []
    if group:
        yield group


def encode_file(infile: BinaryIO, outfile: BinaryIO, linelen: int = 0) -> None:
    """Base64-encode everything read from ``infile`` into ``outfile``.

    With a non-zero ``linelen`` the output is broken into CRLF-terminated
    lines of ``linelen // 4`` blocks (at least one block per line); with
    ``linelen`` zero it is written as a single unbroken run.
    """
    blocks = list(_encode_blocks(infile.read()))
    if linelen == 0:
        outfile.write("".join(blocks).encode("ascii"))
        return
    per_line = max(1, int(linelen / 4))
    for start in range(0, len(blocks), per_line):
        outfile.write("".join(blocks[start : start + per_line]).encode("ascii"))
        outfile.write(_LINEBREAK)


def decode_file(infile: BinaryIO, outfile: BinaryIO) -> None:
    """Decode base64 read from ``infile`` and write the bytes to ``outfile``.

    Characters outside the base64 alphabet, padding included, are skipped.
    """
    values = (_DECODE[code] for code in infile.read() if code in _DECODE)
    for group in _groups(values):
        if len(group) > 1:
            outfile.write(decode_block(_padded(group))[: len(group) - 1])


def encode_string(source: str | bytes | bytearray) -> str:
    """Return ``source`` base64-encoded without line breaks.

    Text is encoded as UTF-8 first.
    """
    return "".join(_encode_blocks(_as_bytes(source)))


def decode_buffer(source: str | bytes | bytearray) -> bytes:
    """Decode base64 ``source`` into bytes.

    Characters outside the alphabet are skipped; decoding stops at the
    first ``=``.
    """
    out = bytearray()
    group: list[int] = []
    for code in _codes(source):
        if code == _PAD:
            eod = len(group) + 1
            out += decode_block(_padded(group))
            if eod == 4:
                del out[-1:]
            elif eod == 3:
                del out[-2:]
            return bytes(out)
        value = _DECODE.get(code)
        if value is None:
            continue
        group.append(value)
        if len(group) == 4:
            out += decode_block(group)
            group = []
    if group:
        out += decode_block(_padded(group))[: len(group) - 1]
    return bytes(out)


def decode_string(source: str | bytes | bytearray) -> str:
    """Decode base64 ``source`` into text, ending at the first NUL byte."""
    decoded = decode_buffer(source).split(b"\0", 1)[0]
    return decoded.decode("utf-8", errors="replace")