"""
Command file parser

Orchestrates scanning, macro expansion and hand-off to the scheduler.
"""

from __future__ import annotations

import logging
import os
from typing import ContextManager, Optional, TextIO

from cmdfile.errors import ConfigurationError
from cmdfile.expander import DEFAULT_MAX_PASSES, expand
from cmdfile.macros import ParseContext
from cmdfile.scanner import scan_file
from cmdfile.scheduler import Scheduler

logger = logging.getLogger("cmdfile.parser")


def _max_passes_from_env() -> int:
    raw = os.environ.get("CMDFILE_MAX_PASSES")
    if raw is None or raw.strip() == "":
        return DEFAULT_MAX_PASSES
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"CMDFILE_MAX_PASSES must be an integer, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"CMDFILE_MAX_PASSES must be positive, got {value}")
    return value


def emit(context: ParseContext, scheduler: Scheduler) -> None:
    """Hand every pending line to `scheduler`, in order."""
    for line in context.lines:
        logger.debug("Adding line: %s", line.tokens)
        scheduler.add_config(list(line.tokens))


class CommandFileParser:
    """Parser for a file containing a set of command lines.

    Each retained line is one configuration plus its options, delimited by
    whitespace::

        [options] config-name
        [options] config-name2

    Lines may use short macros (``MACRO name = tok...``), long macros
    (``LONG MACRO name`` ... ``END MACRO``) and ``INCLUDE path``.
    """

    def __init__(self, *, max_passes: Optional[int] = None):
        if max_passes is None:
            max_passes = _max_passes_from_env()
        elif max_passes <= 0:
            raise ValueError("max_passes must be positive")
        self.max_passes = max_passes

    def open_command_file(self, path: str) -> ContextManager[TextIO]:
        """Open a command file for reading. Tests override this."""
        return open(path, "r", encoding="utf-8")

    def scan(self, path: str, context: Optional[ParseContext] = None) -> ParseContext:
        context = context if context is not None else ParseContext()
        scan_file(path, context, opener=self.open_command_file)
        return context

    def parse_file(self, path: str, scheduler: Scheduler) -> None:
        """Parse `path`, expand macros and add each command line to `scheduler`.

        Raises ConfigurationError if the content can't be parsed and OSError if
        a file can't be read. Nothing reaches the scheduler on failure.
        """
        context = self.scan(path)
        expand(context, self.max_passes)
        emit(context, scheduler)
