from .alphabet import ALPHABET
from .codec import encode, decode, encode_int, decode_int

from .errors import (
    B58CodecError,
    InvalidCharacterError,
    UsageError,
    InputError,
)

__version__ = "1.0.0"
