"""Algorithm-tagged Base85 strings

A CryptoString carries key material, a hash or a signature as printable text
together with the name of the algorithm that produced it:

    CURVE25519:(B2XX5|<+lOSR>_0mQ=KX4o<aOvXe6M`Z5ldINd`

The prefix is 1-24 characters of uppercase letters, digits and hyphens. The
data after the colon is the Base85 encoding of the payload.
"""

import string
from typing import Optional, Tuple, Union

from loguru import logger

from .base85 import ALPHABET, decode, encode
from .errors import CryptoStringError, InvalidFormatError, InvalidPartsError


MAX_PREFIX_LENGTH = 24

SEPARATOR = ":"

_PREFIX_CHARS = frozenset(string.ascii_uppercase + string.digits + "-")
_DATA_CHARS = frozenset(ALPHABET)


class CryptoString:
    """A validated, immutable `PREFIX:DATA` string

    `CryptoString(s)` parses a complete string; `CryptoString(prefix, payload)`
    encodes raw bytes under the given prefix. Neither form raises on bad input.
    The object is marked invalid instead, so check `is_valid()` before trusting
    the accessors. Use `from_string()` or `from_parts()` to get an exception.
    """

    __slots__ = ("_string", "_split_point", "_valid")

    def __init__(self, value: str, payload: Optional[bytes] = None):
        try:
            if payload is None:
                state = (value, self._parse(value))
            else:
                state = self._compose(value, payload)
        except CryptoStringError as e:
            logger.debug(f"Rejected CryptoString: {e}")
            state = None
        self._set_state(state)

    @classmethod
    def from_string(cls, s: str) -> 'CryptoString':
        """Parse `s`, raising InvalidFormatError if it is not a valid CryptoString"""
        obj = cls.__new__(cls)
        obj._set_state((s, cls._parse(s)))
        return obj

    @classmethod
    def from_parts(cls, prefix: str, payload: Union[bytes, bytearray, memoryview]) -> 'CryptoString':
        """Encode `payload` under `prefix`, raising InvalidPartsError on bad input"""
        obj = cls.__new__(cls)
        obj._set_state(cls._compose(prefix, payload))
        return obj

    def _set_state(self, state: Optional[Tuple[str, int]]) -> None:
        # Validity, string and split point are fixed together, exactly once
        if state is None:
            state = ("", 0)
        object.__setattr__(self, "_string", state[0])
        object.__setattr__(self, "_split_point", state[1])
        object.__setattr__(self, "_valid", bool(state[0]))

    @staticmethod
    def _parse(s: str) -> int:
        """Validate a full CryptoString and return the index of its separator"""
        if not isinstance(s, str):
            raise InvalidFormatError(s, f"expected str, got {type(s).__name__}")

        split_point = s.find(SEPARATOR)
        if split_point == -1:
            raise InvalidFormatError(s, f"missing '{SEPARATOR}' separator")

        reason = CryptoString._check_prefix(s[:split_point])
        if reason:
            raise InvalidFormatError(s, reason)

        if split_point == len(s) - 1:
            raise InvalidFormatError(s, "no data after separator")

        for pos in range(split_point + 1, len(s)):
            if s[pos] not in _DATA_CHARS:
                raise InvalidFormatError(s, f"invalid character '{s[pos]}' in data at position {pos}")

        return split_point

    @staticmethod
    def _compose(prefix: str, payload: Union[bytes, bytearray, memoryview]) -> Tuple[str, int]:
        """Build the string form from a prefix and raw bytes"""
        if not isinstance(prefix, str) or not prefix:
            raise InvalidPartsError("prefix cannot be empty")
        try:
            payload = memoryview(payload).tobytes()
        except TypeError:
            raise InvalidPartsError(
                f"payload must be bytes-like, not {type(payload).__name__}") from None
        if not payload:
            raise InvalidPartsError(f"payload for prefix '{prefix}' cannot be empty")

        reason = CryptoString._check_prefix(prefix)
        if reason:
            raise InvalidPartsError(reason)

        return f"{prefix}{SEPARATOR}{encode(payload)}", len(prefix)

    @staticmethod
    def _check_prefix(prefix: str) -> Optional[str]:
        """Return why `prefix` is unacceptable, or None if it is fine"""
        if not prefix:
            return "empty prefix"
        if len(prefix) > MAX_PREFIX_LENGTH:
            return f"prefix longer than {MAX_PREFIX_LENGTH} characters"
        for pos, c in enumerate(prefix):
            if c not in _PREFIX_CHARS:
                return f"invalid character '{c}' in prefix at position {pos}"
        return None

    def is_valid(self) -> bool:
        return self._valid

    def as_string(self) -> str:
        """Get the full `PREFIX:DATA` form, or an empty string if invalid"""
        return self._string

    def as_bytes(self) -> bytes:
        """Get the full string form as ASCII bytes"""
        return self._string.encode("ascii")

    def prefix(self) -> str:
        """Get the algorithm prefix"""
        return self._string[:self._split_point]

    def data(self) -> str:
        """Get the still-encoded data portion"""
        return self._string[self._split_point + 1:]

    def as_raw(self) -> bytes:
        """Decode the data portion

        Raises the codec's error if the data cannot be decoded. An invalid
        CryptoString has no data and raises EmptyInputError.
        """
        return decode(self.data())

    decode_raw = as_raw

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __bool__(self) -> bool:
        return self._valid

    def __str__(self) -> str:
        return self._string

    def __repr__(self) -> str:
        return f"CryptoString('{self._string}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CryptoString):
            return False
        return self._valid == other._valid and self._string == other._string

    def __hash__(self) -> int:
        return hash((self._valid, self._string))


TaggedValue = CryptoString
