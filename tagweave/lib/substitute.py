"""Placeholder substitution for resolved child documents.

Scalar options replace `%name%` tokens directly. List options expand
foreach blocks::

    <!-- foreach %rows% --><li>%rows%</li><!-- endforeach %rows% -->
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .options import ListValue, OptionSet

# Body of a single HTML comment (never runs past its closing -->)
_COMMENT_BODY = r"(?:(?!-->).)*?"


def placeholder(name: str) -> str:
    """The literal token an option named `name` substitutes."""
    return f"%{name}%"


def loop_patterns(token: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    """Build (block, delimiter) patterns for the foreach blocks of `token`.

    The block pattern spans from a `foreach` comment to the nearest
    `endforeach` comment naming the same token. The delimiter pattern
    matches either comment on its own.
    """
    tok = re.escape(token)
    start = rf"<!--{_COMMENT_BODY}foreach{_COMMENT_BODY}{tok}{_COMMENT_BODY}-->"
    end = rf"<!--{_COMMENT_BODY}endforeach{_COMMENT_BODY}{tok}{_COMMENT_BODY}-->"
    block = re.compile(rf"{start}.*?{end}", re.DOTALL)
    delimiter = re.compile(rf"{start}|{end}", re.DOTALL)
    return block, delimiter


def expand_loop(
    text: str, token: str, items: Sequence[str], separator: str = "\n"
) -> str:
    """Expand every foreach block for `token` once per item.

    Text without a matching block is returned unchanged.
    """
    block_pattern, delimiter_pattern = loop_patterns(token)
    blocks = block_pattern.findall(text)
    if not blocks:
        return text

    for block in blocks:
        inner = delimiter_pattern.sub("", block)
        copies = [inner.replace(token, item) for item in items]
        text = text.replace(block, separator.join(copies))
    return text


def substitute(text: str, options: OptionSet, separator: str = "\n") -> str:
    """Apply every option to `text`, in option order."""
    for name, value in options.items():
        token = placeholder(name)
        if isinstance(value, ListValue):
            text = expand_loop(text, token, value.items, separator)
        else:
            text = text.replace(token, str(value))
    return text
