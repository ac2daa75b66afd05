"""
Macro tables and the macro call grammar.

A macro call is a single token of the form ``name()``, where ``name`` starts
with a letter and continues with letters, digits, ``_`` or ``-``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

MACRO_CALL_RE = re.compile(r"([a-z][a-z0-9_-]*)\(\)", re.IGNORECASE)


def macro_call_name(token: str) -> Optional[str]:
    """Return the macro name if `token` is a call candidate, else None."""
    m = MACRO_CALL_RE.fullmatch(token)
    return m.group(1) if m else None


@dataclass
class PendingLine:
    """A command line awaiting expansion.

    `dirty` means the line may still contain a macro call.
    """
    tokens: List[str]
    dirty: bool = True


@dataclass
class ParseContext:
    """State shared by one top-level parse and all of its includes."""
    short_macros: Dict[str, List[str]] = field(default_factory=dict)
    long_macros: Dict[str, List[List[str]]] = field(default_factory=dict)
    lines: List[PendingLine] = field(default_factory=list)

    def define_short(self, name: str, tokens: List[str]) -> None:
        self.short_macros[name] = list(tokens)

    def define_long(self, name: str, body: List[List[str]]) -> None:
        self.long_macros[name] = [list(t) for t in body]

    def add_line(self, tokens: List[str]) -> None:
        self.lines.append(PendingLine(list(tokens)))

    def dirty_count(self) -> int:
        return sum(1 for line in self.lines if line.dirty)
