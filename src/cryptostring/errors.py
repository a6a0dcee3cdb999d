"""Exceptions raised by the Base85 codec and CryptoString constructors"""

from typing import Optional


class CryptoStringError(Exception):
    """Base exception for cryptostring errors"""
    pass


class Base85Error(CryptoStringError):
    """Base85 text could not be decoded"""
    pass


class EmptyInputError(Base85Error):
    """Nothing to decode (empty or whitespace-only input)"""
    pass


class InvalidCharacterError(Base85Error):
    """Character outside the Base85 alphabet"""
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"invalid Base85 character {char!r} at position {position}")


class MalformedLengthError(Base85Error):
    """Final group holds a single symbol, which no byte count encodes to"""
    pass


class GroupOverflowError(Base85Error):
    """Five-symbol group whose value does not fit in 32 bits"""
    pass


class InvalidFormatError(CryptoStringError):
    """String does not match the PREFIX:DATA grammar"""
    def __init__(self, value: object, reason: Optional[str] = None):
        self.value = value
        message = f"invalid CryptoString: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidPartsError(CryptoStringError):
    """Empty or malformed prefix, or empty payload"""
    pass
