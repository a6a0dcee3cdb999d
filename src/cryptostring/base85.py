"""Base85 binary-to-text codec

Four bytes are packed big-endian into a 32-bit number and written as five
base-85 digits, most significant first. The alphabet is the one from RFC 1924,
so output is interchangeable with `base64.b85encode` (which is never asked
to pad). A trailing group of n bytes (n < 4) is written as n+1 digits; decode
restores the missing digits as the highest digit value and keeps n bytes.

Whitespace in encoded text is ignored, so wrapped or otherwise hand-formatted
encodings decode to the same bytes.
"""

from typing import List, Union

from loguru import logger

from .errors import (
    Base85Error,
    EmptyInputError,
    GroupOverflowError,
    InvalidCharacterError,
    MalformedLengthError,
)


ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz!#$%&()*+-;<=>?@^_`{|}~"

# 85**4 .. 85**0
_PLACES = (52200625, 614125, 7225, 85, 1)

_MAX_DIGIT = len(ALPHABET) - 1
_MAX_GROUP = 0xFFFFFFFF

# Skipped by decode
_WHITESPACE = frozenset(" \t\n\v\f\r")

# Marks table slots for characters outside the alphabet
_INVALID = 255

_DECODE_TABLE = [_INVALID] * 128
for _digit, _char in enumerate(ALPHABET):
    _DECODE_TABLE[ord(_char)] = _digit
del _digit, _char


def encode(data: Union[bytes, bytearray, memoryview]) -> str:
    """Encode bytes as Base85 text

    Empty input encodes to an empty string.
    """
    # Raises TypeError for str, int and other non-buffer objects
    data = memoryview(data).tobytes()
    if not data:
        return ""

    extra = len(data) % 4
    full = len(data) - extra
    out = []

    for i in range(0, full, 4):
        out.append(_encode_group(int.from_bytes(data[i:i + 4], "big"), 5))

    if extra:
        # Missing low-order bytes are zero and are never written out
        last = data[full:] + b"\x00" * (4 - extra)
        out.append(_encode_group(int.from_bytes(last, "big"), extra + 1))

    return "".join(out)


def _encode_group(value: int, count: int) -> str:
    """Write the leading `count` base-85 digits of a 32-bit value"""
    chars = []
    for place in _PLACES[:count]:
        digit, value = divmod(value, place)
        chars.append(ALPHABET[digit])
    return "".join(chars)


def decode(s: Union[str, bytes, bytearray]) -> bytes:
    """Decode Base85 text into bytes

    ASCII whitespace is skipped. Raises a `Base85Error` subclass for empty input,
    characters outside the alphabet, a dangling single symbol, or a group
    too large for 32 bits; nothing is returned in that case.
    """
    try:
        return _decode(s)
    except Base85Error as e:
        logger.debug(f"Base85 decode failed: {e}")
        raise


def _decode(s: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(s, (bytes, bytearray, memoryview)):
        # Latin-1 maps every byte to one character; anything above 0x7f is rejected below,
        # since neither the whitespace set nor the alphabet holds such characters
        s = bytes(s).decode("latin-1")

    if not s:
        raise EmptyInputError("cannot decode empty input")

    digits = _to_digits(s)
    if not digits:
        raise EmptyInputError("input contains only whitespace")

    remainder = len(digits) % 5
    if remainder == 1:
        raise MalformedLengthError(
            f"{len(digits)} symbols leave a final group of one, which no byte count encodes to")

    full = len(digits) - remainder
    out = bytearray()

    for i in range(0, full, 5):
        out += _fold(digits[i:i + 5], i).to_bytes(4, "big")

    if remainder:
        padded = digits[full:] + [_MAX_DIGIT] * (5 - remainder)
        out += _fold(padded, full).to_bytes(4, "big")[:remainder - 1]

    return bytes(out)


def _to_digits(s: str) -> List[int]:
    """Map each non-whitespace character to its digit value"""
    digits = []
    for pos, c in enumerate(s):
        if c in _WHITESPACE:
            continue
        code = ord(c)
        digit = _DECODE_TABLE[code] if code < len(_DECODE_TABLE) else _INVALID
        if digit == _INVALID:
            raise InvalidCharacterError(c, pos)
        digits.append(digit)
    return digits


def _fold(group: List[int], offset: int) -> int:
    """Fold five digits into one number, most significant first"""
    value = 0
    for digit in group:
        value = value * 85 + digit
    if value > _MAX_GROUP:
        raise GroupOverflowError(
            f"group starting at symbol {offset} does not fit in 32 bits")
    return value
