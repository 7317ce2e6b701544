r"""
# Charsub: unescaping.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Decoding (and encoding) of escapes in rule tokens.

Rule tokens cannot contain whitespace, so characters such as tab or no-break space
are written as escapes:
````
\t  \n  \r  \'  \"  \\  \u{«hex»}
````
where «hex» is 1-or-more hexadecimal digits giving a code point no greater than `10FFFF`
and outside the surrogate range `D800` to `DFFF`.
For example, `This isn\'t\nna\u{ef}ve` decodes to `This isn't` and `naïve` on separate lines.
"""

from typing import Optional

from charsub.exceptions import (
    BadEscapeException,
    HexValueTooLargeException,
    InvalidUnicodeValueException,
    MissingOpenBraceException,
    NonHexDigitException,
    UnterminatedEscapeException,
)

ESCAPE_INTRODUCER = '\\'
UNICODE_ESCAPE_LETTER = 'u'
CHARACTER_FROM_SHORT_ESCAPE_LETTER = {
    't': '\t',
    'n': '\n',
    'r': '\r',
    "'": "'",
    '"': '"',
    '\\': '\\',
}
SHORT_ESCAPE_FROM_CHARACTER = {
    character: f'{ESCAPE_INTRODUCER}{letter}'
    for letter, character in CHARACTER_FROM_SHORT_ESCAPE_LETTER.items()
}
HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
MAX_CODE_POINT = 0x10FFFF
SURROGATE_CODE_POINT_MIN = 0xD800
SURROGATE_CODE_POINT_MAX = 0xDFFF

_NORMAL_STATE = 'NORMAL'
_ESCAPE_STATE = 'ESCAPE'
_UNICODE_OPENING_STATE = 'UNICODE_OPENING'
_UNICODE_DIGITS_STATE = 'UNICODE_DIGITS'


def is_surrogate(code_point: int) -> bool:
    return SURROGATE_CODE_POINT_MIN <= code_point <= SURROGATE_CODE_POINT_MAX


def unescape(string: str) -> str:
    """
    Replace escapes with the characters they represent.

    A string free of escapes is returned as is.
    On failure, raises a subclass of `UnescapeException`
    carrying the input up to (but excluding) the offending character, and that character.
    """
    if ESCAPE_INTRODUCER not in string:
        return string

    characters: list[str] = []
    state = _NORMAL_STATE
    code_point: Optional[int] = None

    for index, character in enumerate(string):
        if state == _NORMAL_STATE:
            if character == ESCAPE_INTRODUCER:
                state = _ESCAPE_STATE
            else:
                characters.append(character)

        elif state == _ESCAPE_STATE:
            if character == UNICODE_ESCAPE_LETTER:
                state = _UNICODE_OPENING_STATE
                continue

            try:
                characters.append(CHARACTER_FROM_SHORT_ESCAPE_LETTER[character])
            except KeyError:
                raise BadEscapeException(string[:index], character)
            state = _NORMAL_STATE

        elif state == _UNICODE_OPENING_STATE:
            if character != '{':
                raise MissingOpenBraceException(string[:index], character)
            code_point = None
            state = _UNICODE_DIGITS_STATE

        else:  # _UNICODE_DIGITS_STATE
            if character == '}':
                if code_point is None:
                    raise NonHexDigitException(string[:index], character)
                if is_surrogate(code_point):
                    raise InvalidUnicodeValueException(string[:index], character)
                characters.append(chr(code_point))
                state = _NORMAL_STATE
                continue

            if character not in HEX_DIGITS:
                raise NonHexDigitException(string[:index], character)

            code_point = (code_point or 0) * 0x10 + int(character, 0x10)
            if code_point > MAX_CODE_POINT:
                raise HexValueTooLargeException(string[:index], character)

    if state != _NORMAL_STATE:
        raise UnterminatedEscapeException(string, '')

    return ''.join(characters)


def escape_character(character: str) -> str:
    try:
        return SHORT_ESCAPE_FROM_CHARACTER[character]
    except KeyError:
        pass

    if character.isspace() or not character.isprintable():
        return f'{ESCAPE_INTRODUCER}{UNICODE_ESCAPE_LETTER}{{{ord(character):x}}}'

    return character


def escape(string: str) -> str:
    """
    Replace characters that cannot appear literally in a rule token with escapes.

    The inverse of `unescape`, that is, `unescape(escape(string)) == string`
    for any string free of surrogates.
    """
    return ''.join(escape_character(character) for character in string)
