"""
Scheduler interface consumed by the command file parser.
"""

from __future__ import annotations

from typing import List, Protocol, Sequence


class Scheduler(Protocol):
    def add_config(self, args: Sequence[str]) -> None:
        """Register one fully expanded command line."""
        ...


class CommandCollector:
    """Scheduler that just records command lines in registration order."""

    def __init__(self) -> None:
        self.commands: List[List[str]] = []

    def add_config(self, args: Sequence[str]) -> None:
        self.commands.append(list(args))

    def __len__(self) -> int:
        return len(self.commands)
