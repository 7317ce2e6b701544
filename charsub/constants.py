"""
# Charsub: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2

CHARSUB_RULE_SYNTAX_HELP = '''\
In charsub rule syntax, a line must be one of the following:
(1) empty;
(2) a comment (beginning with whitespace, including no-break space);
(3) a mapping (`«pattern»«whitespace»«substitute»[«whitespace»«commentary»]`).
- Note for (3): «pattern» and «substitute» may not contain whitespace;
  use the escapes `\\t`, `\\n`, `\\r` or `\\u{«hex»}` instead.
  The other recognised escapes are `\\'`, `\\"` and `\\\\`.
'''

TEX_RULES_FILE_NAME = 'TEX_RULES'
TEX_RULES = \
r'''    TeX-style typographic ligatures.
    Longer patterns win over their prefixes, so `---` beats `--`, and `''` beats `'`.

``      \u{201C}    left double quotation mark
''      \u{201D}    right double quotation mark
`       \u{2018}    left single quotation mark
'       \u{2019}    right single quotation mark (apostrophe)
--      \u{2013}    en dash
---     \u{2014}    em dash
~       \u{A0}      no-break space
?`      \u{BF}      inverted question mark
!`      \u{A1}      inverted exclamation mark
<<      \u{AB}      left-pointing double angle quotation mark
>>      \u{BB}      right-pointing double angle quotation mark
'''
