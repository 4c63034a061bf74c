"""
Gen 4 in-game text codec.

Strings are stored as little-endian 16-bit units, one per character,
terminated by 0xFFFF and zero-padded to the field width. Only the
alphanumeric subset of the character table is supported:

    '0'-'9' -> 0x0121-0x012A
    'A'-'Z' -> 0x012B-0x0144
    'a'-'z' -> 0x0145-0x015E

The low byte is the game code (33-94), the high byte is always 0x01.
"""

import string
import struct
from typing import Optional

from .errors import InvalidCharacter, NameTooLong
from .offsets import NICKNAME_CHARS, NICKNAME_WIDTH, TRAINER_NAME_CHARS, TRAINER_NAME_WIDTH

# ── Constants ──────────────────────────────────────────────────────────────────

ALPHABET        = string.digits + string.ascii_uppercase + string.ascii_lowercase
FIRST_CODE      = 33
LAST_CODE       = FIRST_CODE + len(ALPHABET) - 1   # 94
CHAR_PAGE       = 0x01
TERMINATOR      = 0xFFFF
REPLACEMENT     = "?"

_ENCODE = {c: FIRST_CODE + i for i, c in enumerate(ALPHABET)}
_DECODE = {v: k for k, v in _ENCODE.items()}


def encode_char(c: str) -> int:
    """Map one ASCII letter or digit onto its game code."""
    try:
        return _ENCODE[c]
    except (KeyError, TypeError):
        raise InvalidCharacter(c) from None


def decode_char(code: int) -> str:
    """Inverse of :func:`encode_char`."""
    try:
        return _DECODE[code]
    except (KeyError, TypeError):
        raise InvalidCharacter(code) from None


def encode_string(s: str, max_chars: int, width: Optional[int] = None) -> bytes:
    """
    Encode ``s`` into a fixed-width string field.

    Args:
        s:         Text to encode, letters and digits only
        max_chars: Longest accepted text
        width:     Field size in bytes; defaults to room for ``max_chars``
                   plus the terminator

    Raises:
        NameTooLong, InvalidCharacter
    """
    if width is None:
        width = (max_chars + 1) * 2
    if len(s) > max_chars:
        raise NameTooLong(s, max_chars)

    out = bytearray(width)
    for i, c in enumerate(s):
        out[i * 2] = encode_char(c)
        out[i * 2 + 1] = CHAR_PAGE
    struct.pack_into('<H', out, len(s) * 2, TERMINATOR)
    return bytes(out)


def encode_trainer_name(name: str) -> bytes:
    """Trainer names keep their case."""
    return encode_string(name, TRAINER_NAME_CHARS, TRAINER_NAME_WIDTH)


def encode_nickname(name: str) -> bytes:
    """Nicknames are shown in capitals in-game."""
    return encode_string(name.upper(), NICKNAME_CHARS, NICKNAME_WIDTH)


def decode_string(data: bytes, max_chars: Optional[int] = None, errors: str = "strict") -> str:
    """
    Decode a string field, stopping at the 0xFFFF terminator.

    With ``errors="replace"`` units outside the supported range decode
    as ``'?'`` instead of raising :class:`InvalidCharacter`.
    """
    chars = []
    limit = len(data) // 2
    if max_chars is not None:
        limit = min(limit, max_chars)

    for i in range(limit):
        unit = struct.unpack_from('<H', data, i * 2)[0]
        if unit == TERMINATOR:
            break
        if unit >> 8 == CHAR_PAGE and FIRST_CODE <= unit & 0xFF <= LAST_CODE:
            chars.append(_DECODE[unit & 0xFF])
        elif errors == "replace":
            chars.append(REPLACEMENT)
        else:
            raise InvalidCharacter(unit)
    return ''.join(chars)
