"""
# Charsub: rules.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Parsing of charsub rule files.

A rule file is a series of lines, each one of
````
«pattern»«whitespace»«substitute»[«whitespace»«commentary»]
````
for instance
````
'     \\u{2019}     apostrophe
````
maps a straight quote to a typographic apostrophe.
Empty lines are ignored, as are lines beginning with whitespace (comments).
Tokens are returned as written; decoding their escapes is left to the caller.
"""

from typing import NamedTuple, Optional

from charsub.exceptions import MissingMapToValueException


class RuleDeclaration(NamedTuple):
    pattern: str
    substitute: str


def is_comment_or_blank(line: str) -> bool:
    return line == '' or line[0].isspace()


def parse_rule_line(line: str) -> Optional['RuleDeclaration']:
    """
    Parse a line of a rule file.

    Returns None for an empty line or a comment.
    Raises `MissingMapToValueException` for a pattern without a substitute.
    """
    if is_comment_or_blank(line):
        return None

    tokens = line.split(maxsplit=2)
    if len(tokens) < 2:
        raise MissingMapToValueException(line)

    pattern, substitute = tokens[:2]

    return RuleDeclaration(pattern, substitute)

