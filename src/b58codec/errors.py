class B58CodecError(Exception):
    """Base class for all b58codec exceptions"""

    def __init__(self, message):
        super().__init__(message)


class InvalidCharacterError(B58CodecError):
    """Exception for input containing characters outside the alphabet"""

    def __init__(self, text):
        """New InvalidCharacterError object

        :param text: The text which could not be decoded. Which character
                     caused the failure is not reported.
        """
        if len(text) > 32:
            text = text[:32] + "..."

        super().__init__(f"invalid base58 given, failed to decode {text!r}")
        self.text = text


class UsageError(B58CodecError):
    """Exception for wrong command line usage"""

    def __init__(self, nargs):
        super().__init__(
            f"unexpected number of args {nargs}. usage: b58codec [OPTION]... [FILE]"
        )


class InputError(B58CodecError):
    """Exception for when the input could not be read"""

    def __init__(self, source, reason):
        super().__init__(f"failed to read {source}: {reason}")
        self.source = source
