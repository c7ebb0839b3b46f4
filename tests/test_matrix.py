import copy

import pytest

from algoset.matrix import (
    exist,
    queens_attack_the_king,
    rotate_matrix,
    set_zeroes,
    spiral_order,
)


def _square(n):
    return [[r * n + c for c in range(n)] for r in range(n)]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_rotate_four_times_is_identity(n):
    matrix = _square(n)
    original = copy.deepcopy(matrix)
    for _ in range(4):
        rotate_matrix(matrix)
    assert matrix == original


@pytest.mark.parametrize("n", [2, 3, 4])
def test_rotate_first_row_is_reversed_first_column(n):
    matrix = _square(n)
    original = copy.deepcopy(matrix)
    rotate_matrix(matrix)
    assert matrix[0] == [row[0] for row in reversed(original)]
    assert [row[-1] for row in matrix] == original[0]


def test_rotate_keeps_row_objects():
    matrix = _square(3)
    rows = list(matrix)
    rotate_matrix(matrix)
    assert all(a is b for a, b in zip(matrix, rows))


def test_spiral_worked_example():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@pytest.mark.parametrize("shape", [(1, 1), (2, 3), (3, 4), (4, 2), (5, 5)])
def test_spiral_visits_every_element_once(shape):
    rows, columns = shape
    matrix = [[r * columns + c for c in range(columns)] for r in range(rows)]
    order = spiral_order(matrix)
    assert sorted(order) == sorted(v for row in matrix for v in row)
    assert order[:columns] == matrix[0]


def test_spiral_single_column():
    matrix = [[4], [8], [15]]
    assert spiral_order(matrix) == [4, 8, 15]


def test_spiral_does_not_modify_input():
    matrix = _square(3)
    original = copy.deepcopy(matrix)
    spiral_order(matrix)
    assert matrix == original


def test_set_zeroes_without_zero_is_unchanged():
    matrix = [[1, 2], [3, 4]]
    set_zeroes(matrix)
    assert matrix == [[1, 2], [3, 4]]


def test_set_zeroes_clears_row_and_column():
    matrix = [[1, 2, 3, 4], [5, 0, 7, 8], [9, 10, 11, 12]]
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if r == 1 or c == 1:
                assert value == 0
            else:
                assert value == original[r][c]


def test_set_zeroes_multiple_zeros():
    matrix = [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]]
    set_zeroes(matrix)
    assert matrix[0] == [0] * 4
    assert all(row[0] == 0 and row[3] == 0 for row in matrix)
    assert [row[1:3] for row in matrix[1:]] == [[4, 5], [3, 1]]


BOARD = [["A", "B", "C", "E"], ["S", "F", "C", "S"], ["A", "D", "E", "E"]]


@pytest.mark.parametrize("word", ["ABCCED", "SEE", "ABCE", "ESCE", "A"])
def test_exist_finds_traceable_words(word):
    assert exist(BOARD, word)


@pytest.mark.parametrize("word", ["ABCB", "AZ", "ABCESEEEFSADA"])
def test_exist_rejects_untraceable_words(word):
    assert not exist(BOARD, word)


def test_exist_cells_are_not_reused():
    assert not exist([["a"]], "aa")
    assert exist([["a", "a"]], "aa")


def test_exist_empty_word_is_not_found():
    assert not exist(BOARD, "")


def test_exist_row_read_backwards():
    row = ["x", "y", "z", "w"]
    assert exist([row], "".join(reversed(row)))


def test_queens_worked_example():
    queens = [[0, 1], [1, 0], [4, 0], [0, 4], [3, 3], [2, 4]]
    assert queens_attack_the_king(queens, [0, 0]) == [[0, 1], [1, 0], [3, 3]]


def test_queens_blocked_queen_is_not_reported():
    queens = [[3, 5], [3, 6], [3, 2]]
    attackers = queens_attack_the_king(queens, [3, 4])
    assert [3, 5] in attackers
    assert [3, 2] in attackers
    assert [3, 6] not in attackers


def test_queens_attackers_are_queens():
    queens = [[5, 6], [7, 7], [2, 1], [0, 7], [1, 6], [5, 1], [3, 7], [0, 3], [4, 0], [1, 2]]
    attackers = queens_attack_the_king(queens, [3, 4])
    assert attackers
    assert all(a in queens for a in attackers)
    assert len(attackers) == len({tuple(a) for a in attackers})


def test_queens_king_off_board_is_not_attacked():
    assert queens_attack_the_king([[7, 0]], [8, 0]) == []