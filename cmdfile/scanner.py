"""
Line scanner for command files.

Reads a file line by line, stores macro definitions in the shared
ParseContext and queues every other line as a pending command line.
INCLUDE directives recurse into the named file with the same context.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, ContextManager, Iterator, List, TextIO, Tuple, Union

from cmdfile.errors import CommandFileSyntaxError, ConfigurationError
from cmdfile.macros import ParseContext
from cmdfile.tokenizer import TokenizerError, tokenize_line

logger = logging.getLogger("cmdfile.scanner")

END_MACRO = "END MACRO"

Opener = Callable[[str], ContextManager[TextIO]]


@dataclass
class ShortMacroDef:
    name: str
    tokens: List[str]


@dataclass
class LongMacroDef:
    name: str


@dataclass
class Include:
    path: str


@dataclass
class PlainLine:
    tokens: List[str]


LineKind = Union[ShortMacroDef, LongMacroDef, Include, PlainLine]


def classify(tokens: List[str]) -> LineKind:
    """Classify a tokenized line by its shape.

    - ``MACRO <name> = <tok>...`` (at least four tokens)
    - ``LONG MACRO <name>`` (exactly three tokens)
    - ``INCLUDE <path>`` (exactly two tokens)

    Anything else, including a malformed definition, is a plain line.
    """
    if len(tokens) >= 4 and tokens[0] == "MACRO" and tokens[2] == "=":
        return ShortMacroDef(tokens[1], tokens[3:])
    if len(tokens) == 3 and tokens[0] == "LONG" and tokens[1] == "MACRO":
        return LongMacroDef(tokens[2])
    if len(tokens) == 2 and tokens[0] == "INCLUDE":
        return Include(tokens[1])
    return PlainLine(tokens)


def should_parse_line(line: str) -> bool:
    line = line.strip()
    return not (line == "" or line.startswith("#"))


def _tokenize(line: str, path: str, lineno: int) -> List[str]:
    try:
        return tokenize_line(line)
    except TokenizerError as e:
        raise ConfigurationError(f"{path}:{lineno}: {e}") from e


def scan_file(path: str, context: ParseContext, *, opener: Opener) -> None:
    """Scan `path` into `context`, recursing into INCLUDE directives.

    There is no rollback: an error in an included file leaves behind whatever
    the scan had already stored in `context`. Every file, included ones too,
    is opened through `opener`.
    """
    with opener(path) as f:
        numbered: Iterator[Tuple[int, str]] = enumerate(f, 1)
        for lineno, raw in numbered:
            line = raw.strip()
            if not should_parse_line(line):
                continue

            kind = classify(_tokenize(line, path, lineno))
            if isinstance(kind, ShortMacroDef):
                context.define_short(kind.name, kind.tokens)
            elif isinstance(kind, LongMacroDef):
                body = _read_long_macro_body(numbered, kind.name, path)
                logger.debug("Parsed %d-line definition for long macro %s", len(body), kind.name)
                context.define_long(kind.name, body)
            elif isinstance(kind, Include):
                logger.debug("Got an include directive for file %s", kind.path)
                scan_file(kind.path, context, opener=opener)
            else:
                context.add_line(kind.tokens)


def _read_long_macro_body(numbered: Iterator[Tuple[int, str]], name: str, path: str) -> List[List[str]]:
    body: List[List[str]] = []
    for lineno, raw in numbered:
        line = raw.strip()
        if line == END_MACRO:
            return body
        if should_parse_line(line):
            body.append(_tokenize(line, path, lineno))
    raise CommandFileSyntaxError(
        f"Syntax error: Unexpected EOF while reading definition for LONG MACRO {name}."
    )
