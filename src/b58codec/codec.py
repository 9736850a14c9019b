from typing import Iterable, Optional, Tuple, Union

from . import errors
from .alphabet import ALPHABET, BASE, INVALID, ZERO_SYMBOL, index_of


def encode(data: Union[bytes, bytearray, memoryview, Iterable[int]]) -> str:
    """Encode a byte sequence as a Base58 string.

    Each leading zero byte becomes one ``"1"``; the remaining bytes are
    read as a big-endian unsigned integer and written in base 58. Never
    fails, and ``encode(b"") == ""``.

    :param data: The bytes to encode
    """
    src = bytes(data)

    stripped = src.lstrip(b"\0")
    zeroes = len(src) - len(stripped)

    # Worst case expansion is log(256) / log(58), rounded up.
    size = len(stripped) * 137 // 100 + zeroes + 1
    output = bytearray(size)
    output[:zeroes] = ZERO_SYMBOL.encode("ascii") * zeroes

    num = int.from_bytes(stripped, "big")

    # The digits come out least significant first, so fill from the back.
    idx = size - 1
    while num > 0:
        num, rem = divmod(num, BASE)
        output[idx] = ord(ALPHABET[rem])
        idx -= 1

    return (output[:zeroes] + output[idx + 1 :]).decode("ascii")


def decode(
    text: Union[str, bytes, bytearray, memoryview],
) -> Tuple[Optional[bytes], bool]:
    """Decode a Base58 string.

    :param text: The encoded string, or its ASCII bytes
    :return: ``(data, True)`` on success. ``(None, False)`` if any
             character is outside the alphabet; no partial result is
             given and the offending character is not reported.
    """
    if isinstance(text, str):
        codes = [ord(char) for char in text]
    else:
        codes = bytes(text)

    zero = ord(ZERO_SYMBOL)
    zeroes = 0
    for code in codes:
        if code != zero:
            break
        zeroes += 1

    num = 0
    for code in codes:
        digit = index_of(code)
        if digit == INVALID:
            return None, False
        num = num * BASE + digit

    return bytes(zeroes) + _int_to_bytes(num), True


def encode_int(num: int) -> str:
    """Return the Base58 digits of a non-negative integer.

    >>> encode_int(4194304)
    'NVpb'
    """
    if num < 0:
        raise ValueError(f"cannot encode negative number {num}")
    if num == 0:
        return ZERO_SYMBOL
    chars = []
    while num > 0:
        num, rem = divmod(num, BASE)
        chars.append(ALPHABET[rem])
    return "".join(reversed(chars))


def decode_int(text: str) -> int:
    """Return the integer value of a string of Base58 digits.

    :raises errors.InvalidCharacterError: If ``text`` holds a character
                                          outside the alphabet.
    """
    num = 0
    for char in text:
        digit = index_of(ord(char))
        if digit == INVALID:
            raise errors.InvalidCharacterError(text)
        num = num * BASE + digit
    return num


def _int_to_bytes(num: int) -> bytes:
    # Minimal big-endian form, zero has no bytes.
    return num.to_bytes((num.bit_length() + 7) // 8, "big")
