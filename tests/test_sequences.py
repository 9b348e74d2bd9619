from collections import Counter

import pytest

from ojkit.sequences import (
    Node,
    PeaksResult,
    delete_nth,
    josephus_survivor,
    matrix_addition,
    move_zeroes,
    pick_peaks,
    queue_time,
    real_numbers,
    snail,
    solve,
    sum_tree_values,
    tidy_number,
    two_sum,
)


def test_two_sum_equal_values():
    assert two_sum([3, 3], 6) == [0, 1]


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([-1, 5, 8, 10], 9), ([0, 4, 3, 0], 0)],
)
def test_two_sum_finds_valid_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) == []


def test_matrix_addition_commutes():
    a = [[1, 2, 3], [3, 2, 1], [1, 1, 1]]
    b = [[2, 2, 1], [3, 2, 3], [1, 1, 3]]
    assert matrix_addition(a, b) == matrix_addition(b, a)


def test_matrix_addition_zero_identity():
    a = [[1, -2], [7, 4]]
    zero = [[0, 0], [0, 0]]
    assert matrix_addition(a, zero) == a


def test_matrix_addition_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_addition([[1, 2]], [[1]])


@pytest.mark.parametrize("n", [0, 1, 7, 30, 31, 100, 1234])
def test_real_numbers_matches_count(n):
    expected = sum(1 for k in range(1, n + 1) if k % 2 and k % 3 and k % 5)
    assert real_numbers(n) == expected


def test_solve_lone_value():
    assert solve([1, -1, 2, -2, 3]) == 3


def test_solve_all_paired():
    assert solve([1, -1, 4, -4]) == 0


@pytest.mark.parametrize("arr", [[-3, 1, 2, 3, -1, -4, -2], [1, -1, 2, -2, 3, 3]])
def test_solve_result_has_no_partner(arr):
    result = solve(arr)
    assert result in arr
    assert -result not in arr


@pytest.mark.parametrize(
    "n, expected", [(12, True), (1024, False), (13579, True), (2335, True), (21, False)]
)
def test_tidy_number(n, expected):
    assert tidy_number(n) is expected


@pytest.mark.parametrize("arr", [[1, 2, 0, 1, 0, 1, 0, 3, 0, 1], [0, 0], [], [5, -2]])
def test_move_zeroes_invariants(arr):
    result = move_zeroes(arr)
    assert len(result) == len(arr)
    non_zero = [v for v in arr if v != 0]
    assert result[: len(non_zero)] == non_zero
    assert all(v == 0 for v in result[len(non_zero):])


def test_snail_three_by_three():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert snail(matrix) == [1, 2, 3, 6, 9, 8, 7, 4, 5]
    assert matrix == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_snail_empty():
    assert snail([[]]) == []


def test_snail_is_permutation_with_first_row_prefix():
    matrix = [[r * 4 + c for c in range(4)] for r in range(4)]
    result = snail(matrix)
    assert sorted(result) == sorted(v for row in matrix for v in row)
    assert result[:4] == matrix[0]


def test_pick_peaks_values_match_positions():
    arr = [3, 2, 3, 6, 4, 1, 2, 3, 2, 1, 2, 3]
    result = pick_peaks(arr)
    assert result.peaks == [arr[p] for p in result.pos]
    assert all(arr[p] > arr[p - 1] for p in result.pos)


def test_pick_peaks_plateau_uses_start():
    assert pick_peaks([1, 2, 2, 2, 1]) == PeaksResult(pos=[1], peaks=[2])


def test_pick_peaks_monotone_has_none():
    assert pick_peaks([1, 2, 3, 4]) == PeaksResult()


@pytest.mark.parametrize("n", [1, 2, 7, 11])
def test_josephus_step_one_keeps_last(n):
    assert josephus_survivor(n, 1) == n


@pytest.mark.parametrize("n, k", [(7, 3), (11, 19), (40, 3), (5, 300)])
def test_josephus_result_in_range(n, k):
    assert 0 <= josephus_survivor(n, k) <= n


@pytest.mark.parametrize("n, k", [(0, 3), (5, 0)])
def test_josephus_invalid(n, k):
    with pytest.raises(ValueError):
        josephus_survivor(n, k)


def test_queue_time_empty():
    assert queue_time([], 1) == 0


def test_queue_time_single_till_is_sum():
    customers = [5, 3, 4]
    assert queue_time(customers, 1) == sum(customers)


def test_queue_time_many_tills_is_max():
    customers = [2, 2, 3, 3, 4, 4]
    assert queue_time(customers, 100) == max(customers)


def test_queue_time_bounds():
    customers = [1, 2, 3, 4, 5]
    result = queue_time(customers, 2)
    assert max(customers) <= result <= sum(customers)


def test_queue_time_no_tills():
    with pytest.raises(ValueError):
        queue_time([1], 0)


def test_delete_nth_example():
    assert delete_nth([1, 1, 3, 3, 7, 2, 2, 2, 2], 3) == [1, 1, 3, 3, 7, 2, 2, 2]


def test_delete_nth_caps_counts():
    arr = [20, 37, 20, 21, 20, 37, 37]
    result = delete_nth(arr, 1)
    assert all(count <= 1 for count in Counter(result).values())
    assert set(result) == set(arr)


def test_sum_tree_easy():
    root = Node(10, Node(1), Node(2))
    assert sum_tree_values(root) == 13


def test_sum_tree_unbalanced():
    root = Node(11, Node(0), Node(0, None, Node(1)))
    assert sum_tree_values(root) == 12


def test_sum_tree_empty():
    assert sum_tree_values(None) == 0