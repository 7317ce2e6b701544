"""
# Charsub: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

A conversion takes
- rules, in charsub rule syntax (by default the built-in `TEX_RULES`), and
- text, as a whole string or as a stream of lines,
and applies the rules to the text, preferring the longest pattern wherever several match.
"""

from typing import Iterable, Iterator

from charsub.authorities import SubstitutionAuthority
from charsub.constants import TEX_RULES, TEX_RULES_FILE_NAME


def build_authority(charsub_rules: str = TEX_RULES, rules_file_name: str = TEX_RULES_FILE_NAME,
                    verbose_mode_enabled: bool = False, unescaping_enabled: bool = True) -> 'SubstitutionAuthority':
    substitution_authority = SubstitutionAuthority(verbose_mode_enabled, unescaping_enabled)
    substitution_authority.legislate(charsub_rules, rules_file_name=rules_file_name)

    return substitution_authority


def charsub_text(text: str, charsub_rules: str = TEX_RULES, rules_file_name: str = TEX_RULES_FILE_NAME,
                 verbose_mode_enabled: bool = False, unescaping_enabled: bool = True) -> str:
    """
    Apply substitution rules to text.
    """
    substitution_authority = build_authority(charsub_rules, rules_file_name, verbose_mode_enabled, unescaping_enabled)

    return substitution_authority.execute(text)


def charsub_lines(lines: Iterable[str], charsub_rules: str = TEX_RULES, rules_file_name: str = TEX_RULES_FILE_NAME,
                  verbose_mode_enabled: bool = False, unescaping_enabled: bool = True) -> Iterator[str]:
    """
    Apply substitution rules to a stream of lines, yielding output as it is resolved.
    """
    substitution_authority = build_authority(charsub_rules, rules_file_name, verbose_mode_enabled, unescaping_enabled)

    yield from substitution_authority.execute_lines(lines)
