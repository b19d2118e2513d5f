"""Command-line argument validation and conversion into stack nodes."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .libft.chars import isdigit
from .libft.transform import split, strtrim
from .stacks import MAX_INT, MIN_INT, Node, assign_indices, build_nodes

_SIGNS = ("-", "+")


class InputError(ValueError):
    """Raised for arguments that cannot form a stack.

    ``report`` tells whether the command line should print ``Error``.
    """

    def __init__(self, message: str = "Error", report: bool = True) -> None:
        super().__init__(message)
        self.report = report


def is_valid_number(text: str) -> bool:
    """True for an optional sign followed by one or more decimal digits."""
    digits = text[1:] if text[:1] in _SIGNS else text
    return bool(digits) and all(isdigit(ch) for ch in digits)


def parse_int(text: str) -> int:
    """Convert ``text`` to a 32-bit signed integer.

    One leading sign is accepted; every other character must be a digit.
    Text with no digits converts to 0.
    """
    sign = 1
    digits = text
    if digits[:1] in _SIGNS:
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
    result = 0
    for ch in digits:
        if not isdigit(ch):
            raise InputError(f"not a number: {text!r}")
        result = result * 10 + (ord(ch) - ord("0"))
        if (sign == 1 and result > MAX_INT) or (sign == -1 and -result < MIN_INT):
            raise InputError(f"out of range: {text!r}")
    return sign * result


def _try_parse(text: str) -> Optional[int]:
    try:
        return parse_int(text)
    except InputError:
        return None


def has_duplicates(args: Sequence[str]) -> bool:
    """True if two arguments have the same value or one cannot be parsed."""
    args = list(args)
    for position, arg in enumerate(args):
        value = _try_parse(arg)
        if value is None:
            return True
        if any(_try_parse(other) == value for other in args[position + 1:]):
            return True
    return False


def validate_args(args: Sequence[str]) -> bool:
    """True for at least two distinct, well-formed, in-range integers."""
    args = list(args)
    if len(args) < 2:
        return False
    for arg in args:
        if not is_valid_number(arg) or _try_parse(arg) is None:
            return False
    return not has_duplicates(args)


def clean_argument(arg: str) -> str:
    """Remove every single and double quote from ``arg``."""
    return "".join(ch for ch in arg if ch not in "\"'")


def allocate_and_split(arg: str) -> Optional[List[str]]:
    """Split a cleaned argument on spaces; None if nothing remains after cleaning."""
    cleaned = clean_argument(arg)
    if not cleaned:
        return None
    return split(cleaned, " ")


def split_arguments(argv: Sequence[str]) -> List[str]:
    """A single argument is split on spaces; several are taken as they are."""
    if len(argv) == 1:
        return split(clean_argument(argv[0]), " ")
    return list(argv)


def all_nonblank(args: Sequence[str]) -> bool:
    """True if no argument is empty or made only of spaces."""
    return all(strtrim(arg, " ") for arg in args)


def validate_input(arg: str) -> bool:
    """True for optional leading spaces, one optional sign, then only digits."""
    if not arg:
        return False
    rest = arg.lstrip(" ")
    if rest[:1] in _SIGNS:
        if rest[1:2] in _SIGNS:
            return False
        rest = rest[1:]
    return bool(rest) and all(isdigit(ch) for ch in rest)


def parse_and_store(args: Sequence[str]) -> List[Node]:
    """Trim and check each argument, returning unranked nodes in order."""
    nodes = []
    for arg in args:
        trimmed = strtrim(arg, " ")
        if not trimmed or not validate_input(trimmed):
            raise InputError(f"invalid argument: {arg!r}")
        nodes.append(Node(parse_int(trimmed)))
    return nodes


def build_stack(args: Sequence[str]) -> List[Node]:
    """Parse each argument and return nodes carrying their ranks."""
    nodes = build_nodes(parse_int(arg) for arg in args)
    assign_indices(nodes)
    return nodes


def process_and_validate_args(argv: Sequence[str]) -> List[str]:
    """Split and validate the command-line arguments.

    Raises :class:`InputError` when they are unusable; it is marked for
    reporting only when the first argument holds an 'a' or is not a number.
    """
    args = split_arguments(argv)
    if not all_nonblank(args) or not validate_args(args):
        first = argv[0] if argv else ""
        report = "a" in first or not is_valid_number(first)
        raise InputError("invalid arguments", report=report)
    return args