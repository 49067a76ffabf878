"""Input collection for HashCrawler commands"""

import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from ..error_handling.exceptions import InputError


def read_lines(stream: Iterable[str]) -> List[str]:
    """Split a stream into one hash per line

    Blank lines inside the stream are kept (they classify as Unknown);
    trailing blank lines are dropped.
    """
    lines = [line.rstrip('\r\n') for line in stream]
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def read_hash_file(path: Path) -> List[str]:
    """Read hashes from a file, one per line"""
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return read_lines(f)
    except OSError as e:
        raise InputError(str(path), f"Cannot read {path}: {e.strerror or e}") from e


def collect_hashes(args: Optional[List[str]] = None, file: Optional[Path] = None,
                   stdin: Optional[TextIO] = None) -> List[str]:
    """Gather hashes from arguments, then a file, then stdin

    stdin is only consulted when nothing else was supplied and it is not
    attached to a terminal.
    """
    hashes = list(args or [])

    if file is not None:
        hashes.extend(read_hash_file(file))

    if not hashes:
        stdin = stdin if stdin is not None else sys.stdin
        if stdin is not None and not stdin.isatty():
            hashes.extend(read_lines(stdin))

    return hashes
