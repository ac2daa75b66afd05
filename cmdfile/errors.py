"""
Errors raised while reading a command file.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """The content of a command file could not be parsed"""


class CommandFileSyntaxError(ConfigurationError):
    """Structural error in a command file (e.g. an unterminated LONG MACRO)"""


class UnresolvedMacroError(ConfigurationError):
    """A macro call matched neither the short nor the long macro table"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Macro call '{name}' does not match any macro definitions.")
