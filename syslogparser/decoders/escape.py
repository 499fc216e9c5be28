r"""Escaping for structured-data parameter values.

Inside PARAM-VALUE only three characters are escaped with a backslash:

  \"  ->  "
  \\  ->  \
  \]  ->  ]

Any other backslash is kept as-is, e.g. the raw value ``C:\temp`` decodes
to ``C:\temp``.
"""

import re

ESCAPE_SEQUENCE_PATTERN = re.compile(r'\\(["\\\]])')

ESCAPABLE_CHAR_PATTERN = re.compile(r'(["\\\]])')


def unescape_param_value(raw: str) -> str:
    r"""Decode a PARAM-VALUE as it appeared between the quotes.

    Sequences are consumed left to right, so ``\\]`` is an escaped
    backslash followed by a literal ``]`` and never reads as ``\]``.
    """
    return ESCAPE_SEQUENCE_PATTERN.sub(r"\1", raw)


def escape_param_value(value: str) -> str:
    """Escape a value so it can be written back between the quotes."""
    return ESCAPABLE_CHAR_PATTERN.sub(r"\\\1", value)
