"""Text notation for declaring a whole catalog at once.

    Staff attack="5",
    @Weapons
        Knife attack="1" desc="A simple knife",
        @Bows
            ShortBow accuracy="10",
            .
        .

- `@Name` opens a branch under the current one
- `.` closes the current branch
- `Name key="value" ...,` declares an item; the trailing comma is required
- `#` starts a comment that runs to the end of the line
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from catalog import Catalog
from errors import BagSyntaxError
from models import Item, Props

logger = logging.getLogger(__name__)

_TOKEN = re.compile(
    r"""
      (?P<comment>\#[^\n]*)
    | (?P<newline>\n)
    | (?P<space>[ \t\r]+)
    | (?P<branch>@[^\s,#]+)
    | (?P<close>\.(?=\s|\#|$))
    | (?P<prop>(?P<key>[A-Za-z_][\w-]*)="(?P<value>(?:[^"\\\n]|\\.)*)")
    | (?P<unterminated>[A-Za-z_][\w-]*="[^\n]*)
    | (?P<comma>,)
    | (?P<word>[^\s,="@\#]+)
    """,
    re.VERBOSE,
)

_ESCAPE = re.compile(r"\\(.)")


class _PendingItem:
    def __init__(self, name: str, line: int) -> None:
        self.name = name
        self.line = line
        self.props: Props = {}

    def build(self) -> Item:
        return Item(self.name, self.props or None)


def tokenize(text: str) -> List[Tuple[str, str, int]]:
    """Split notation into (kind, text, line) tokens, dropping blanks and comments."""
    tokens: List[Tuple[str, str, int]] = []
    line = 1
    position = 0
    while position < len(text):
        match = _TOKEN.match(text, position)
        if match is None:
            raise BagSyntaxError(f"unexpected character {text[position]!r}", line)
        kind = match.lastgroup
        # named sub-groups of `prop` would otherwise shadow it
        if match.group("prop") is not None:
            kind = "prop"
        if kind == "unterminated":
            raise BagSyntaxError("unterminated property value", line)
        if kind == "newline":
            line += 1
        elif kind not in ("space", "comment"):
            tokens.append((kind, match.group(0), line))
        position = match.end()
    return tokens


def parse_bag(text: str) -> Catalog:
    """Build a catalog tree from its text notation.

    Args:
        text: Catalog notation (see module docstring)

    Returns:
        The root Catalog

    Raises:
        BagSyntaxError: The notation is malformed
    """
    root = Catalog()
    stack: List[Catalog] = [root]
    pending: Optional[_PendingItem] = None

    for kind, value, line in tokenize(text):
        if kind == "word":
            if pending is not None:
                raise BagSyntaxError(f"expected ',' after item {pending.name!r}", line)
            pending = _PendingItem(value, line)
        elif kind == "prop":
            if pending is None:
                raise BagSyntaxError(f"property {value!r} does not follow an item name", line)
            key, raw = value.split("=", 1)
            pending.props[key] = _ESCAPE.sub(r"\1", raw[1:-1])
        elif kind == "comma":
            if pending is None:
                raise BagSyntaxError("stray ','", line)
            stack[-1].add(pending.build())
            pending = None
        elif kind == "branch":
            if pending is not None:
                raise BagSyntaxError(f"expected ',' after item {pending.name!r}", line)
            branch = Catalog()
            stack[-1].attach(value[1:], branch)
            stack.append(branch)
        elif kind == "close":
            if pending is not None:
                raise BagSyntaxError(f"expected ',' after item {pending.name!r}", line)
            if len(stack) == 1:
                raise BagSyntaxError("'.' without an open branch", line)
            stack.pop()

    if pending is not None:
        raise BagSyntaxError(f"expected ',' after item {pending.name!r}", pending.line)
    if len(stack) > 1:
        raise BagSyntaxError(f"{len(stack) - 1} branch(es) left open", text.count("\n") + 1)

    logger.debug("Parsed catalog with %d items", root.all_count())
    return root
