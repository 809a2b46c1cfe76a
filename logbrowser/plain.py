"""Non-interactive output: one log group name per line."""

import sys
from typing import Iterable, Optional, TextIO


def print_plain(names: Iterable[str], file: Optional[TextIO] = None) -> int:
    """Print names in order, unstyled, one per line.

    Returns:
        Number of names printed.
    """
    out = file or sys.stdout
    count = 0
    for name in names:
        print(name, file=out)
        count += 1
    return count
