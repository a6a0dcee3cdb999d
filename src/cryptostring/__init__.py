"""CryptoString - Base85 text encoding for tagged binary data

This package provides a Base85 codec and the CryptoString type, which carries
key material, hashes and signatures as `ALGORITHM:DATA` strings.
"""

from loguru import logger

from .base85 import ALPHABET, encode, decode
from .cryptostring import CryptoString, TaggedValue, MAX_PREFIX_LENGTH
from .errors import (
    CryptoStringError,
    Base85Error,
    EmptyInputError,
    InvalidCharacterError,
    MalformedLengthError,
    GroupOverflowError,
    InvalidFormatError,
    InvalidPartsError,
)

# Silent unless the application calls logger.enable("cryptostring")
logger.disable(__name__)

__version__ = "0.3.0"

__all__ = [
    "ALPHABET",
    "encode",
    "decode",
    "CryptoString",
    "TaggedValue",
    "MAX_PREFIX_LENGTH",
    "CryptoStringError",
    "Base85Error",
    "EmptyInputError",
    "InvalidCharacterError",
    "MalformedLengthError",
    "GroupOverflowError",
    "InvalidFormatError",
    "InvalidPartsError",
]
