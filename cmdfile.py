#!/usr/bin/env python3
"""cmdfile - top-level CLI wrapper

Compatible with Python 3.8+.

Usage examples:
  ./cmdfile.py commands.txt
  ./cmdfile.py commands.txt -o expanded.txt --max-passes 20
"""
from __future__ import annotations

from cmdfile.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
