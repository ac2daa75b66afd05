"""cmdfile - expand a command file and print the resulting command lines"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from cmdfile.errors import ConfigurationError
from cmdfile.parser import CommandFileParser
from cmdfile.scheduler import CommandCollector
from cmdfile.tokenizer import quote_line


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    ap = argparse.ArgumentParser(prog="cmdfile", description="Command file macro expander")
    ap.add_argument("source", help="Input command file")
    ap.add_argument("-o", dest="output", required=False, help="Write expanded command lines here")
    ap.add_argument("--max-passes", type=int, default=None, help="Expansion pass cap (default 10)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    collector = CommandCollector()
    try:
        parser = CommandFileParser(max_passes=args.max_passes)
        parser.parse_file(args.source, collector)
    except (ConfigurationError, ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1

    text = "".join(quote_line(cmd) + "\n" for cmd in collector.commands)
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            print(f"Error: cannot write {args.output}: {e}")
            return 1
    else:
        sys.stdout.write(text)
    return 0
