"""
# Charsub: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from typing import Optional, TextIO

from charsub._version import __version__
from charsub.authorities import SubstitutionAuthority
from charsub.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE, TEX_RULES, TEX_RULES_FILE_NAME
from charsub.core import build_authority

DESCRIPTION = '''
    Apply character-sequence substitution rules to text,
    preferring the longest pattern wherever several match.
'''
INPUT_FILE_NAME_HELP = '''
    name of file to be converted (reads standard input if none given)
'''
RULES_FILE_NAME_HELP = '''
    name of charsub rules file (defaults to built-in TeX-style ligatures)
'''
OUTPUT_FILE_NAME_HELP = '''
    name of file to write to (defaults to standard output)
'''
LITERAL_MODE_HELP = '''
    take rule tokens literally (do not decode escapes such as `\\u{2019}`)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every substitution applied, to standard error)
'''


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-r', '--rules',
        dest='rules_file_name',
        default=None,
        help=RULES_FILE_NAME_HELP,
        metavar='rules.charsub',
    )
    argument_parser.add_argument(
        '-o', '--output',
        dest='output_file_name',
        default=None,
        help=OUTPUT_FILE_NAME_HELP,
        metavar='output.txt',
    )
    argument_parser.add_argument(
        '-l', '--literal',
        dest='literal_mode_enabled',
        action='store_true',
        help=LITERAL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'input_file_names',
        default=[],
        help=INPUT_FILE_NAME_HELP,
        metavar='file.txt',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def read_rules_file(rules_file_name: str) -> str:
    try:
        with open(rules_file_name, 'r', encoding='utf-8') as rules_file:
            return rules_file.read()
    except FileNotFoundError:
        print(f'error: argument `-r`: file `{rules_file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def write_substituted_lines(substitution_authority: 'SubstitutionAuthority', input_file: TextIO, output_file: TextIO):
    for output in substitution_authority.execute_lines(input_file):
        output_file.write(output)


def convert_file(substitution_authority: 'SubstitutionAuthority', input_file_name: str, output_file: TextIO):
    try:
        with open(input_file_name, 'r', encoding='utf-8', newline='') as input_file:
            write_substituted_lines(substitution_authority, input_file, output_file)
    except FileNotFoundError:
        print(f'error: argument `{input_file_name}`: file `{input_file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def convert_all(substitution_authority: 'SubstitutionAuthority', input_file_names: list[str], output_file: TextIO):
    if len(input_file_names) == 0:
        write_substituted_lines(substitution_authority, sys.stdin, output_file)
        return

    for input_file_name in input_file_names:
        convert_file(substitution_authority, input_file_name, output_file)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    rules_file_name = parsed_arguments.rules_file_name
    output_file_name = parsed_arguments.output_file_name
    input_file_names = parsed_arguments.input_file_names
    unescaping_enabled = not parsed_arguments.literal_mode_enabled
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    if rules_file_name is None:
        charsub_rules = TEX_RULES
        rules_file_name = TEX_RULES_FILE_NAME
    else:
        charsub_rules = read_rules_file(rules_file_name)

    substitution_authority = build_authority(charsub_rules, rules_file_name, verbose_mode_enabled, unescaping_enabled)

    if output_file_name is None:
        convert_all(substitution_authority, input_file_names, sys.stdout)
        return

    try:
        with open(output_file_name, 'w', encoding='utf-8', newline='') as output_file:
            convert_all(substitution_authority, input_file_names, output_file)
    except IOError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    print(f'success: wrote to `{output_file_name}`')


if __name__ == '__main__':
    main()
