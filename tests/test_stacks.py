import io
from contextlib import redirect_stdout

import pytest

from pushswap.stacks import Node, Stacks, assign_indices, build_nodes


def make(values):
    log = []
    return Stacks(values, log.append), log


def test_build_nodes_unranked():
    nodes = build_nodes([5, -1])
    assert [n.value for n in nodes] == [5, -1]
    assert all(n.index == -1 for n in nodes)


def test_assign_indices_example():
    nodes = build_nodes([30, 10, 20])
    assign_indices(nodes)
    assert [n.index for n in nodes] == [2, 0, 1]


def test_assign_indices_is_rank_permutation():
    values = [7, -3, 100, 0, 42, -50]
    nodes = build_nodes(values)
    assign_indices(nodes)
    assert sorted(n.index for n in nodes) == list(range(len(values)))
    by_index = [n.value for n in sorted(nodes, key=lambda n: n.index)]
    assert by_index == sorted(values)


def test_init_assigns_indices_and_b_empty():
    stacks, _ = make([3, 1, 2])
    assert [n.index for n in stacks.a] == [2, 0, 1]
    assert stacks.values_b == []


def test_init_accepts_nodes():
    stacks, _ = make([Node(4), Node(9)])
    assert stacks.values_a == [4, 9]
    assert [n.index for n in stacks.a] == [0, 1]


def test_sa_swaps_top_two():
    stacks, log = make([1, 2, 3])
    stacks.sa()
    assert stacks.values_a == [2, 1, 3]
    assert log == ["sa"]


def test_swap_twice_is_identity():
    stacks, log = make([4, 8, 15, 16])
    stacks.sa()
    stacks.sa()
    assert stacks.values_a == [4, 8, 15, 16]
    assert log == ["sa", "sa"]


def test_swap_on_short_stack_only_emits():
    stacks, log = make([1])
    stacks.sa()
    stacks.sb()
    assert stacks.values_a == [1]
    assert log == ["sa", "sb"]


def test_push_moves_top_between_stacks():
    stacks, log = make([1, 2, 3])
    stacks.pb()
    stacks.pb()
    assert stacks.values_a == [3]
    assert stacks.values_b == [2, 1]
    stacks.pa()
    stacks.pa()
    assert stacks.values_a == [1, 2, 3]
    assert stacks.values_b == []
    assert log == ["pb", "pb", "pa", "pa"]


def test_push_from_empty_is_noop():
    stacks, log = make([1, 2])
    stacks.pa()
    assert stacks.values_a == [1, 2]
    assert log == ["pa"]


def test_rotate_moves_top_to_bottom():
    stacks, _ = make([1, 2, 3])
    stacks.ra()
    assert stacks.values_a == [2, 3, 1]
    stacks.rra()
    assert stacks.values_a == [1, 2, 3]


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [9], []])
def test_full_rotation_is_identity(values):
    stacks, _ = make(values)
    for _ in values:
        stacks.ra()
    assert stacks.values_a == values


def test_combined_operations_act_on_both():
    stacks, log = make([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    before_a, before_b = stacks.values_a, stacks.values_b
    stacks.ss()
    assert stacks.values_a == before_a[::-1]
    assert stacks.values_b == before_b[::-1]
    stacks.rr()
    stacks.rrr()
    assert stacks.values_a == before_a[::-1]
    assert stacks.values_b == before_b[::-1]
    stacks.rb()
    stacks.rrb()
    assert stacks.values_b == before_b[::-1]
    assert log[2:] == ["ss", "rr", "rrr", "rb", "rrb"]


def test_operations_keep_elements():
    stacks, _ = make([5, 3, 8, 1, 9])
    for op in (stacks.pb, stacks.ra, stacks.pb, stacks.rr, stacks.ss, stacks.rrr, stacks.pa):
        op()
    assert sorted(stacks.values_a + stacks.values_b) == [1, 3, 5, 8, 9]


def test_default_emit_prints_line():
    buf = io.StringIO()
    with redirect_stdout(buf):
        Stacks([2, 1]).sa()
    assert buf.getvalue() == "sa\n"