"""
cmdfile - command file preprocessor

Reads a text file of test-invocation command lines, expands its small macro
language (short macros, long macros, INCLUDE) and hands each expanded command
line to a scheduler.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .errors import CommandFileSyntaxError, ConfigurationError, UnresolvedMacroError
from .tokenizer import TokenizerError, tokenize_line
from .macros import ParseContext, PendingLine
from .scanner import scan_file
from .expander import expand
from .scheduler import CommandCollector, Scheduler
from .parser import CommandFileParser, emit

__all__ = [
    'CommandCollector',
    'CommandFileParser',
    'CommandFileSyntaxError',
    'ConfigurationError',
    'ParseContext',
    'PendingLine',
    'Scheduler',
    'TokenizerError',
    'UnresolvedMacroError',
    'emit',
    'expand',
    'scan_file',
    'tokenize_line',
]
