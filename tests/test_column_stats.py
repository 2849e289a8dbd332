from __future__ import annotations

import numpy as np
import pytest

from loopbench.core.matrix import generate_matrix, make_rng
from loopbench.core.stats import (
    Method,
    Statistic,
    column_means_apply,
    column_means_loop,
    column_smallest_means_apply,
    column_smallest_means_loop,
    get_statistic,
    smallest_mean,
)

TOLERANCE = 1e-9


@pytest.mark.parametrize("seed", range(10))
@pytest.mark.parametrize("rows, columns", [(1, 1), (2, 7), (6, 3), (13, 40), (100, 9)])
def test_loop_and_apply_means_agree(seed: int, rows: int, columns: int) -> None:
    matrix = generate_matrix(rows, columns, rng=make_rng(seed))

    loop = column_means_loop(matrix)
    apply = column_means_apply(matrix)

    assert loop.shape == apply.shape == (columns,)
    np.testing.assert_allclose(loop, apply, rtol=0, atol=TOLERANCE)
    np.testing.assert_allclose(loop, matrix.mean(axis=0), rtol=0, atol=TOLERANCE)


@pytest.mark.parametrize("seed", range(10))
@pytest.mark.parametrize("rows, columns", [(1, 4), (5, 5), (6, 2), (7, 11), (250, 8)])
def test_loop_and_apply_smallest_means_agree(seed: int, rows: int, columns: int) -> None:
    matrix = generate_matrix(rows, columns, rng=make_rng(seed))

    loop = column_smallest_means_loop(matrix)
    apply = column_smallest_means_apply(matrix)

    assert loop.shape == apply.shape == (columns,)
    np.testing.assert_allclose(loop, apply, rtol=0, atol=TOLERANCE)


def test_simple_scenario_two_rows_thousand_columns() -> None:
    matrix = generate_matrix(2, 1000, rng=make_rng(1))

    loop = column_means_loop(matrix)
    apply = column_means_apply(matrix)

    assert loop.shape == (1000,)
    assert apply.shape == (1000,)
    np.testing.assert_allclose(loop, (matrix[0] + matrix[1]) / 2, atol=TOLERANCE)
    assert matrix.size == 2000


def test_complex_scenario_thousand_by_thousand() -> None:
    matrix = generate_matrix(1000, 1000, rng=make_rng(2))
    expected = np.sort(matrix, axis=0)[:6].mean(axis=0)

    loop = column_smallest_means_loop(matrix)
    apply = column_smallest_means_apply(matrix)

    assert loop.shape == apply.shape == (1000,)
    np.testing.assert_allclose(loop, expected, atol=TOLERANCE)
    np.testing.assert_allclose(apply, expected, atol=TOLERANCE)


def test_smallest_mean_uses_six_lowest_values() -> None:
    column = np.array([9.0, 1.0, 8.0, 2.0, 7.0, 3.0, 6.0, 4.0, 5.0])
    assert smallest_mean(column) == pytest.approx((1 + 2 + 3 + 4 + 5 + 6) / 6)


def test_smallest_mean_short_column_uses_all_values() -> None:
    assert smallest_mean(np.array([4.0, 2.0])) == pytest.approx(3.0)


def test_registry_covers_every_combination() -> None:
    assert get_statistic(Method.LOOP, Statistic.SIMPLE) is column_means_loop
    assert get_statistic("apply", "simple") is column_means_apply
    assert get_statistic("loop", Statistic.COMPLEX) is column_smallest_means_loop
    assert get_statistic(Method.APPLY, "complex") is column_smallest_means_apply


def test_unknown_statistic_lists_registered_names() -> None:
    with pytest.raises(KeyError, match="loop/simple"):
        get_statistic("vectorised", "simple")


def test_one_dimensional_input_rejected() -> None:
    with pytest.raises(ValueError, match="2-D"):
        column_means_loop(np.arange(5.0))
