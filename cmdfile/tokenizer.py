"""
Quotation-aware tokenizer for command file lines.

Follows the command file quoting convention: a line is split on whitespace,
except inside double quotes (single quotes are ordinary characters). The
quote characters themselves are dropped; a backslash is only special right
before a double quote, where it yields a literal ``"``.
"""

from __future__ import annotations

from typing import List, Sequence


class TokenizerError(ValueError):
    """Malformed quoting in a line"""
    def __init__(self, message: str, line: str):
        self.message = message
        self.line = line
        super().__init__(f"{message}: {line}")


_WHITESPACE = " \t"


def tokenize_line(line: str) -> List[str]:
    tokens: List[str] = []
    cur: List[str] = []
    quoted = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == "\\" and i + 1 < n and line[i + 1] == '"':
            cur.append('"')
            i += 2
            continue
        if ch == '"':
            quoted = not quoted
            i += 1
            continue
        if ch in _WHITESPACE and not quoted:
            if cur:
                tokens.append("".join(cur))
                cur = []
            i += 1
            continue
        cur.append(ch)
        i += 1

    if quoted:
        raise TokenizerError("Unmatched quotes", line)
    if cur:
        tokens.append("".join(cur))
    return tokens


def quote_line(tokens: Sequence[str]) -> str:
    """Join tokens so that tokenize_line() gives them back."""
    out: List[str] = []
    for tok in tokens:
        escaped = tok.replace('"', '\\"')
        if any(c in _WHITESPACE for c in tok):
            # a trailing backslash would escape the closing quote
            body = escaped.rstrip("\\")
            escaped = f'"{body}"{escaped[len(body):]}'
        out.append(escaped)
    return " ".join(out)
