"""Component markers and their option parsing.

A marker is a self-closing tag such as::

    <Component file={"card.html"} title={'Hi'} rows={['a', 'b', 3]} />

Every `key={value}` (or `key="value"` / `key='value'`) attribute becomes an
option. Values are scalars, or lists when written as `[...]`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_TAG = "Component"

# Surrounding characters stripped from every value; quoting is cosmetic
QUOTE_CHARS = " \"'“”‘’"

# `key = {value}` with the shortest possible value. A `}` inside a braced
# value ends it early, e.g. id={'123456}'} parses as "123456".
FRAGMENT_PATTERN = re.compile(r"""[^\s=]+\s*=\s*(?:\{.*?\}|"[^"]*"|'[^']*')""")

LIST_ITEM_PATTERN = re.compile(r"""".*?"|'.*?'|[0-9]+""", re.DOTALL)

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")

FALSY_VALUES = ("", "0")


@dataclass(frozen=True)
class Scalar:
    """A single string option value."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ListValue:
    """An ordered list option value, expanded by foreach blocks."""

    items: tuple[str, ...] = ()

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


OptionValue = Scalar | ListValue
OptionSet = dict[str, OptionValue]


@dataclass(frozen=True)
class ComponentMarker:
    """One occurrence of a component tag inside a document."""

    raw_text: str
    options: OptionSet = field(default_factory=dict)

    @property
    def file(self) -> str | None:
        """The referenced document path, if a usable one is given."""
        value = self.options.get("file")
        if isinstance(value, Scalar):
            return value.value
        return None


@lru_cache(maxsize=32)
def marker_pattern(tag: str = DEFAULT_TAG) -> re.Pattern[str]:
    """Shortest match from `<tag` to the next `/>`, across lines."""
    return re.compile(rf"<{re.escape(tag)}.*?/>", re.DOTALL)


def find_markers(text: str, tag: str = DEFAULT_TAG) -> list[ComponentMarker]:
    """Find every marker in `text`, in document order, with parsed options."""
    return [
        ComponentMarker(raw_text=raw, options=parse_options(raw, tag=tag))
        for raw in marker_pattern(tag).findall(text)
    ]


def parse_options(raw_text: str, tag: str = DEFAULT_TAG) -> OptionSet:
    """Parse the raw text of one marker into an ordered option mapping.

    Keys keep their first-seen position; a repeated key takes the last
    value. Options whose value is empty or "0" are dropped.
    """
    body = LINE_BREAK_PATTERN.sub(" ", raw_text)

    opening = f"<{tag}"
    if body.startswith(opening):
        body = body[len(opening):]
    if body.endswith("/>"):
        body = body[:-2]

    raw_values: dict[str, str] = {}
    for fragment in FRAGMENT_PATTERN.findall(body):
        key, value = _split_fragment(fragment)
        if key:
            raw_values[key] = value

    options: OptionSet = {}
    for key, value in raw_values.items():
        value = value.strip(QUOTE_CHARS)
        if value in FALSY_VALUES:
            continue
        options[key] = parse_value(value)
    return options


def parse_value(value: str) -> OptionValue:
    """Classify an already-trimmed value as a list or a scalar."""
    if value.startswith("[") and value.endswith("]"):
        items = [
            match.group(0).strip(QUOTE_CHARS)
            for match in LIST_ITEM_PATTERN.finditer(value)
        ]
        return ListValue(tuple(items))
    return Scalar(value)


def _split_fragment(fragment: str) -> tuple[str, str]:
    """Split `key = {value}` at the first `=` and drop the value delimiters."""
    fragment = fragment.strip()
    key, _, value = fragment.partition("=")
    # Remove the enclosing {...} or quotes
    value = value.strip()[1:-1]
    return key.strip(), value
