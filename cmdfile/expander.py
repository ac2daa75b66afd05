"""
Macro expansion over the pending command lines.

Expansion runs in passes. In each pass every dirty line gets one round of
short-macro substitution and at most one long-macro fan-out. A line that
needed neither becomes clean. Passes repeat until every line is clean or the
pass cap is reached; lines still dirty at the cap are kept as they are.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from cmdfile.errors import UnresolvedMacroError
from cmdfile.macros import PendingLine, ParseContext, macro_call_name

logger = logging.getLogger("cmdfile.expander")

DEFAULT_MAX_PASSES = 10


def expand_short_macros(tokens: List[str], macros: Dict[str, List[str]]) -> bool:
    """Replace every known short macro call in `tokens`, in place.

    The scan skips over inserted tokens, so calls that a replacement brings in
    are left for the next pass.

    Returns True if anything was substituted.
    """
    saw_macro = False
    idx = 0
    while idx < len(tokens):
        name = macro_call_name(tokens[idx])
        if name is not None and name in macros:
            repl = macros[name]
            logger.debug("Expanding macro '%s' to %s", name, repl)
            tokens[idx : idx + 1] = repl
            idx += len(repl)
            saw_macro = True
        else:
            idx += 1
    return saw_macro


def expand_long_macro(
    tokens: List[str],
    macros: Dict[str, List[List[str]]],
    *,
    check_missing: bool,
) -> Optional[List[List[str]]]:
    """Fan out the first macro call in `tokens` if it names a long macro.

    Each body line becomes ``prefix + body_line + suffix``. Returns None when
    the line has no call, or when the first call is unknown and
    `check_missing` is False. With `check_missing` set an unknown call raises
    UnresolvedMacroError.
    """
    for idx, tok in enumerate(tokens):
        name = macro_call_name(tok)
        if name is None:
            continue
        body = macros.get(name)
        if body is None:
            if check_missing:
                raise UnresolvedMacroError(name)
            return None
        prefix = tokens[:idx]
        suffix = tokens[idx + 1 :]
        # only the first call is expanded per pass
        return [prefix + body_line + suffix for body_line in body]
    return None


def expand(context: ParseContext, max_passes: int = DEFAULT_MAX_PASSES) -> int:
    """Expand macros in `context.lines` in place.

    Returns the number of passes run (0 when nothing was dirty).
    """
    lines = context.lines
    dirty = context.dirty_count()
    passes = 0
    while passes < max_passes and dirty > 0:
        logger.debug("### Expansion iteration %d", passes)
        passes += 1

        idx = 0
        while idx < len(lines):
            entry = lines[idx]
            if not entry.dirty:
                idx += 1
                continue

            saw_short = expand_short_macros(entry.tokens, context.short_macros)
            fanout = expand_long_macro(entry.tokens, context.long_macros, check_missing=not saw_short)

            if fanout is None:
                if not saw_short:
                    entry.dirty = False
                    dirty -= 1
                idx += 1
                continue

            lines[idx : idx + 1] = [PendingLine(tokens) for tokens in fanout]
            dirty += len(fanout) - 1
            idx += len(fanout)

    if dirty > 0:
        logger.debug("Stopped after %d passes with %d line(s) still unexpanded", passes, dirty)
    return passes
