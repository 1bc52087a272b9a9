"""
Lightweight renderer for assistant replies.

Replies are plain text with a few markdown-like conventions. They are turned
into display markup by a fixed, ordered list of rules; each rule works on the
output of the previous one. This is not a markdown parser: nested emphasis,
escaped asterisks and lists mixed with emphasis render on a best-effort basis.
"""

import re
from dataclasses import dataclass
from typing import Callable, Union

NUMBERED_ITEM_HTML = (
    '<div style="margin-bottom: 0.5rem;">'
    '<span style="font-weight: 600; margin-right: 0.5rem;">{num}.</span>{content}</div>'
)
BULLET_ITEM_HTML = r'<div style="margin-left: 1rem; margin-bottom: 0.5rem;">• \1</div>'


@dataclass(frozen=True)
class FormatRule:
    name: str
    pattern: re.Pattern
    replacement: Union[str, Callable[[re.Match], str]]

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _numbered_item(match: re.Match) -> str:
    return NUMBERED_ITEM_HTML.format(num=match.group(1), content=match.group(2).strip())


RULES: tuple[FormatRule, ...] = (
    FormatRule("double_star", re.compile(r"\*\*([^\r\n]+?)\*\*"), r"<strong>\1</strong>"),
    FormatRule("single_star", re.compile(r"\*([^\r\n]+?)\*"), r"<strong>\1</strong>"),
    # An item runs until the next "N." marker, a blank line, or the end of the text.
    FormatRule("numbered", re.compile(r"([0-9]+)\.\s+(.+?)(?=[0-9]+\.|\n\n|\Z)", re.S), _numbered_item),
    # "\r" ends a line as well as "\n".
    FormatRule("bullet", re.compile(r"(?:^|(?<=\r))[•-]\s+([^\r\n]+)(?=\r|$)", re.M), BULLET_ITEM_HTML),
    FormatRule("line_break", re.compile(r"\n"), "<br/>"),
)

_RULES_BY_NAME = {rule.name: rule for rule in RULES}


def apply_rule(name: str, text: str) -> str:
    return _RULES_BY_NAME[name].apply(text)


def format_message(text: str) -> str:
    formatted = text or ""
    for rule in RULES:
        formatted = rule.apply(formatted)
    return formatted
