import pytest

from algoset.linkedlist import (
    ListNode,
    from_values,
    get_intersection_node,
    has_cycle,
    is_palindrome,
    merge_k_lists,
    reverse_list,
    reverse_list_iterative,
    to_values,
)


def _last(head):
    node = head
    while node.next is not None:
        node = node.next
    return node


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [5, 5, -1], list(range(50))])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_empty_round_trip():
    assert from_values([]) is None
    assert to_values(None) == []


def test_from_values_links_nodes_in_order():
    head = from_values([7, 8])
    assert head.val == 7
    assert head.next.val == 8
    assert head.next.next is None


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_acyclic_lists_have_no_cycle(values):
    assert has_cycle(from_values(values)) is False


@pytest.mark.parametrize("values", [[1, 2], [3, 2, 0, -4], list(range(10))])
def test_cycle_back_to_head_is_detected(values):
    head = from_values(values)
    _last(head).next = head
    assert has_cycle(head) is True


def test_cycle_into_middle_is_detected():
    head = from_values([3, 2, 0, -4])
    _last(head).next = head.next
    assert has_cycle(head) is True


def test_self_loop_is_a_cycle():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True


def test_intersection_is_shared_node():
    shared = from_values([8, 4, 5])
    head_a = from_values([4, 1])
    _last(head_a).next = shared
    head_b = from_values([5, 6, 1])
    _last(head_b).next = shared
    assert get_intersection_node(head_a, head_b) is shared
    assert get_intersection_node(head_b, head_a) is shared


def test_intersection_at_head():
    head = from_values([1, 2, 3])
    assert get_intersection_node(head, head) is head


def test_no_intersection():
    assert get_intersection_node(from_values([2, 6, 4]), from_values([1, 5])) is None


def test_intersection_with_empty_list():
    assert get_intersection_node(None, from_values([1])) is None
    assert get_intersection_node(from_values([1]), None) is None


@pytest.mark.parametrize("reverse", [reverse_list, reverse_list_iterative])
@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse(reverse, values):
    assert to_values(reverse(from_values(values))) == values[::-1]


@pytest.mark.parametrize("reverse", [reverse_list, reverse_list_iterative])
def test_reverse_reuses_nodes(reverse):
    head = from_values([1, 2, 3])
    tail = _last(head)
    new_head = reverse(head)
    assert new_head is tail
    assert head.next is None


@pytest.mark.parametrize("reverse", [reverse_list, reverse_list_iterative])
def test_double_reverse_is_identity(reverse):
    values = [4, -2, 9, 9, 0]
    assert to_values(reverse(reverse(from_values(values)))) == values


@pytest.mark.parametrize("half", [[1], [1, 2], [3, 1, 4, 1]])
def test_palindromes(half):
    assert is_palindrome(from_values(half + half[::-1])) is True
    assert is_palindrome(from_values(half + [99] + half[::-1])) is True


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 1, 2, 1]])
def test_non_palindromes(values):
    assert is_palindrome(from_values(values)) is False


def test_empty_list_is_palindrome():
    assert is_palindrome(None) is True


def test_merge_k_lists_sorts_everything():
    inputs = [[1, 4, 5], [1, 3, 4], [2, 6]]
    merged = merge_k_lists([from_values(v) for v in inputs])
    assert to_values(merged) == sorted(v for lst in inputs for v in lst)


def test_merge_k_lists_leaves_inputs_untouched():
    heads = [from_values([1, 3]), None, from_values([2, 10000, 20000])]
    merged = merge_k_lists(heads)
    assert to_values(merged) == [1, 2, 3, 10000, 20000]
    assert to_values(heads[0]) == [1, 3]
    assert heads[1] is None
    assert merged is not heads[0]


def test_merge_k_lists_empty():
    assert merge_k_lists([]) is None
    assert merge_k_lists([None, None]) is None