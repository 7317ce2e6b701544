"""
# Charsub: authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The higher power that governs the loading and application of rules.
"""

import sys
from typing import Iterable, Iterator

from charsub.constants import CHARSUB_RULE_SYNTAX_HELP, GENERIC_ERROR_EXIT_CODE
from charsub.exceptions import MissingMapToValueException, UnescapeException
from charsub.machines import CharSubMachine
from charsub.rules import parse_rule_line
from charsub.unescaping import unescape


class SubstitutionAuthority:
    """
    Object governing the parsing and application of substitution rules.

    ## `legislate`

    Parses charsub rule syntax (see the constant `CHARSUB_RULE_SYNTAX_HELP` in `constants.py`),
    decoding escapes in both tokens unless `unescaping_enabled` is False,
    and registers the rules on the machine.
    A malformed line aborts with an error message naming the file and line.

    ## `execute`

    Applies the legislated rules to a whole string, or (`execute_lines`) to a stream of lines.
    """
    _machine: 'CharSubMachine'
    _unescaping_enabled: bool
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool = False, unescaping_enabled: bool = True):
        self._machine = CharSubMachine(verbose_mode_enabled=verbose_mode_enabled)
        self._unescaping_enabled = unescaping_enabled
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def machine(self) -> 'CharSubMachine':
        return self._machine

    @staticmethod
    def print_error(message: str, rules_file_name: str, line_number: int):
        print(f'error: `{rules_file_name}`, line {line_number}: {message}', file=sys.stderr)

    def legislate(self, charsub_rules: str, rules_file_name: str):
        for line_number, line in enumerate(charsub_rules.split('\n'), start=1):
            line = line.removesuffix('\r')
            try:
                rule_declaration = parse_rule_line(line)
            except MissingMapToValueException as exception:
                SubstitutionAuthority.print_error(f'{exception}\n\n' + CHARSUB_RULE_SYNTAX_HELP,
                                                  rules_file_name, line_number)
                sys.exit(GENERIC_ERROR_EXIT_CODE)

            if rule_declaration is None:
                continue

            pattern, substitute = rule_declaration
            if self._unescaping_enabled:
                try:
                    pattern = unescape(pattern)
                    substitute = unescape(substitute)
                except UnescapeException as exception:
                    SubstitutionAuthority.print_error(str(exception), rules_file_name, line_number)
                    sys.exit(GENERIC_ERROR_EXIT_CODE)

            self._machine.add_substitution(pattern, substitute)

        if self._verbose_mode_enabled:
            rule_count = self._machine.tree.count_rules()
            print(f'Rules legislated from `{rules_file_name}`: {rule_count} in total', file=sys.stderr)

    def execute(self, string: str) -> str:
        return self._machine.process(string) + self._machine.flush()

    def execute_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Apply the rules to successive lines, as read from a file, yielding output as it is resolved.

        A candidate split across lines is carried over, and flushed after the last line.
        """
        for line in lines:
            output = self._machine.process(line)
            if output != '':
                yield output

        output = self._machine.flush()
        if output != '':
            yield output
