"""
# Charsub: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class MissingMapToValueException(Exception):
    _line: str

    def __init__(self, line: str):
        super().__init__(f'Missing map-to value in line: {line}')
        self._line = line

    @property
    def line(self) -> str:
        return self._line


class UnescapeException(Exception):
    """
    Base class for errors raised while decoding escapes.

    Carries the portion of the input preceding the point of failure,
    and the character at which decoding failed.
    """
    DESCRIPTION = 'Bad escape'

    _decoded_prefix: str
    _character: str

    def __init__(self, decoded_prefix: str, character: str):
        super().__init__(f'{self.DESCRIPTION}. Failed at: {decoded_prefix}{character}')
        self._decoded_prefix = decoded_prefix
        self._character = character

    @property
    def decoded_prefix(self) -> str:
        return self._decoded_prefix

    @property
    def character(self) -> str:
        return self._character


class BadEscapeException(UnescapeException):
    DESCRIPTION = 'Bad escape found'


class MissingOpenBraceException(UnescapeException):
    DESCRIPTION = r'Missing open brace after \u'


class NonHexDigitException(UnescapeException):
    DESCRIPTION = r'Non-hex digit in \u'


class HexValueTooLargeException(UnescapeException):
    DESCRIPTION = r'Hex value too large in \u'


class InvalidUnicodeValueException(UnescapeException):
    DESCRIPTION = r'Invalid value in \u'


class UnterminatedEscapeException(UnescapeException):
    DESCRIPTION = 'Unterminated escape at end of string'
