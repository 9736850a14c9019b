# All alphanumeric characters except for "0", "I", "O", and "l"
ALPHABET: str = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

BASE: int = len(ALPHABET)

# Encodes a zero digit, and thereby each leading zero byte.
ZERO_SYMBOL: str = ALPHABET[0]

INVALID: int = -1


def _build_decode_map() -> tuple:
    table = [INVALID] * 256
    for index, char in enumerate(ALPHABET):
        table[ord(char)] = index
    return tuple(table)


DECODE_MAP: tuple = _build_decode_map()


def index_of(code: int) -> int:
    """Return the digit value of the character with code point ``code``.

    :param code: A code point, e.g. a byte value or ``ord(char)``.
    :return: The digit in the range [0, 58) or ``INVALID``.
    """
    if 0 <= code < len(DECODE_MAP):
        return DECODE_MAP[code]
    return INVALID
