import pytest

from pushswap.parsing import (
    InputError,
    all_nonblank,
    allocate_and_split,
    build_stack,
    clean_argument,
    has_duplicates,
    is_valid_number,
    parse_and_store,
    parse_int,
    process_and_validate_args,
    split_arguments,
    validate_args,
    validate_input,
)


@pytest.mark.parametrize("text", ["42", "-7", "+3", "0"])
def test_is_valid_number_accepts(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize("text", ["", "+", "-", "4a", "--1", " 1", "1 "])
def test_is_valid_number_rejects(text):
    assert is_valid_number(text) is False


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "12x", "--1", "99999999999"])
def test_parse_int_errors(text):
    with pytest.raises(InputError):
        parse_int(text)


def test_parse_int_signs_and_empty():
    assert parse_int("+15") == 15
    assert parse_int("-15") == -15
    assert parse_int("-") == 0
    assert parse_int("") == 0


def test_has_duplicates():
    assert has_duplicates(["1", "2", "1"]) is True
    assert has_duplicates(["1", "+1"]) is True
    assert has_duplicates(["1", "2", "3"]) is False
    assert has_duplicates(["x", "1"]) is True


def test_validate_args():
    assert validate_args(["1"]) is False
    assert validate_args(["1", "2"]) is True
    assert validate_args(["1", "1"]) is False
    assert validate_args(["1", "a"]) is False
    assert validate_args(["99999999999", "1"]) is False
    assert validate_args(["-2147483648", "2147483647"]) is True


def test_clean_argument_strips_quotes():
    assert clean_argument("\"1\" '2'") == "1 2"
    assert clean_argument("no quotes") == "no quotes"


def test_allocate_and_split():
    assert allocate_and_split("\"\"") is None
    assert allocate_and_split("1  2 ") == ["1", "2"]


def test_split_arguments():
    assert split_arguments(["3 2  1"]) == ["3", "2", "1"]
    assert split_arguments(["3", "2"]) == ["3", "2"]
    assert split_arguments([]) == []


def test_all_nonblank():
    assert all_nonblank(["1", "  "]) is False
    assert all_nonblank(["1", " 2 "]) is True
    assert all_nonblank(["", "1"]) is False


def test_validate_input():
    assert validate_input("  -5") is True
    assert validate_input("+-5") is False
    assert validate_input("-") is False
    assert validate_input("") is False
    assert validate_input("5 ") is False


def test_parse_and_store():
    nodes = parse_and_store([" 3 ", "1", "+2"])
    assert [node.value for node in nodes] == [3, 1, 2]
    assert all(node.index == -1 for node in nodes)


@pytest.mark.parametrize("args", [["x"], [""], ["1", "   "], ["2147483648"]])
def test_parse_and_store_errors(args):
    with pytest.raises(InputError):
        parse_and_store(args)


def test_build_stack_ranks_follow_values():
    args = ["30", "-5", "12", "7"]
    nodes = build_stack(args)
    assert [node.value for node in nodes] == [int(arg) for arg in args]
    assert sorted(node.index for node in nodes) == list(range(len(args)))
    by_rank = sorted(nodes, key=lambda node: node.index)
    assert [node.value for node in by_rank] == sorted(int(arg) for arg in args)


def test_build_stack_error():
    with pytest.raises(InputError):
        build_stack(["1", "nope"])


def test_process_and_validate_args_ok():
    assert process_and_validate_args(["3 2 1"]) == ["3", "2", "1"]
    assert process_and_validate_args(["3", "2", "1"]) == ["3", "2", "1"]


@pytest.mark.parametrize(
    "argv, report",
    [
        (["42"], False),
        (["1", "a"], False),
        (["2147483648", "1"], False),
        (["a"], True),
        (["1 1"], True),
        ([""], True),
    ],
)
def test_process_and_validate_args_errors(argv, report):
    with pytest.raises(InputError) as info:
        process_and_validate_args(argv)
    assert info.value.report is report