"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import InputError, build_stack, process_and_validate_args
from .sorting import handle_sorting, is_sorted
from .stacks import Stacks


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on ``argv`` (the process arguments when None)."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    if not argv:
        return 0
    try:
        args = process_and_validate_args(argv)
        nodes = build_stack(args)
    except InputError as exc:
        if exc.report:
            sys.stderr.write("Error\n")
        return 1
    if len(args) == 1:
        return 0
    stacks = Stacks(nodes)
    if is_sorted(stacks.a):
        return 0
    handle_sorting(stacks, len(args))
    return 0


if __name__ == "__main__":
    sys.exit(main())