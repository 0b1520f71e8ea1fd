import numpy as np
import pytest

from pycircfit import (
    iscolinear, generate_circle_points, generate_line_points, CircfitLogger,
    LogLevel, set_logger, InvalidArityError, ShapeMismatchError,
    LengthMismatchError, NonFiniteInputError
)
from pycircfit.colinear import closed_loop_differences, numerical_rank


def test_two_points_always_colinear():
    assert iscolinear([0.0, 5.0], [3.0, -1.0])
    assert iscolinear([7.0], [2.0])
    assert iscolinear([], [])


def test_three_points():
    assert iscolinear([1, 2, 3], [1, 2, 3])
    assert not iscolinear([0.0, 1.0, 0.0], [0.0, 0.0, 1.0])


def test_perturbation_beyond_tolerance():
    assert not iscolinear([1, 2, 3], [1, 2.001, 3])
    assert not iscolinear([1.0, 2.0, 3.0], [1.0, 2.0 + 1e-6, 3.0])


def test_nearly_colinear_counts_as_colinear():
    assert iscolinear([0.0, 1.0, 2.0], [0.0, 1e-20, 0.0])


def test_three_dimensional_line():
    v = generate_line_points([0, 1, 2], [1, 2, 3], n_points=10)
    assert iscolinear(v)
    assert iscolinear(v[:, 0], v[:, 1], v[:, 2])
    v[4, 2] += 0.5
    assert not iscolinear(v)
    assert not iscolinear(v[:, 0], v[:, 1], v[:, 2])


def test_matrix_with_many_dimensions():
    v = generate_line_points(np.zeros(5), np.arange(1, 6), n_points=8, spacing=0.5)
    assert iscolinear(v)
    v[-1, 0] = 100.0
    assert not iscolinear(v)


def test_complex_coordinates():
    assert iscolinear(np.array([0, 1 + 1j, 2 + 2j, -3 - 3j]))
    assert not iscolinear(np.array([1, 1j, -1]))


def test_real_vector_lies_on_real_axis():
    assert iscolinear(np.array([3.0, -1.0, 8.0, 2.0]))


def test_integer_and_boolean_data():
    assert not iscolinear(np.array([[0, 0], [1, 0], [0, 1]], dtype=np.int32))
    assert not iscolinear(np.array([[True, False], [False, True], [True, True]]))
    assert iscolinear(np.array([0, 1, 2], dtype=np.uint8), np.array([True, True, True]))


def test_equal_shaped_arrays():
    x = np.array([[0.0, 1.0], [2.0, 3.0]])
    assert iscolinear(x, 2 * x)
    assert not iscolinear(x, x ** 2)


def test_single_dimension_matrix():
    assert iscolinear(np.arange(12.0).reshape(4, 3)[:, :1])


def test_prefix_failure_returns_without_full_pass(tmp_path):
    log_file = tmp_path / 'colinear.log'
    set_logger(CircfitLogger(mode='file', log_file=str(log_file), file_level=LogLevel.DEBUG))
    x, y = generate_circle_points((0.0, 0.0), 1.0, n_points=200)
    assert not iscolinear(x, y)
    text = log_file.read_text()
    assert 'prefix of 64/200 points' in text
    assert 'full pass' not in text


def test_colinear_prefix_triggers_full_pass():
    v = generate_line_points([0.0, 0.0], [1.0, 0.5], n_points=100)
    assert iscolinear(v)
    v[80, 1] += 5.0
    assert not iscolinear(v)


def test_exactly_prefix_sized_set():
    v = generate_line_points([0.0, 0.0], [1.0, -2.0], n_points=64)
    assert iscolinear(v)


def test_rotation_of_index_does_not_change_verdict():
    x, y = generate_circle_points((1.0, 2.0), 3.0, n_points=90)
    v = np.column_stack([x, y])
    line = generate_line_points([0.0, 0.0], [3.0, 1.0], n_points=90)
    for shift in (1, 17, 64, 89):
        assert not iscolinear(np.roll(v, shift, axis=0))
        assert iscolinear(np.roll(line, shift, axis=0))


def test_repeated_calls_are_identical():
    rng = np.random.default_rng(3)
    v = rng.normal(size=(30, 2))
    assert iscolinear(v) == iscolinear(v) is False


def test_closed_loop_differences():
    v = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
    d = closed_loop_differences(v)
    np.testing.assert_array_equal(d, [[1, 0], [0, 1], [-1, 0], [0, -1]])
    np.testing.assert_array_equal(closed_loop_differences(v, 2), [[1, 0], [-1, 0]])


def test_numerical_rank():
    assert numerical_rank(np.zeros((3, 2))) == 0
    assert numerical_rank(np.array([[1.0, 2.0], [2.0, 4.0]])) == 1
    assert numerical_rank(np.eye(3)) == 3
    assert numerical_rank(np.array([[1.0, 0.0], [0.0, 1e-3]]), tol=1e-2) == 1


def test_arity_errors():
    with pytest.raises(InvalidArityError) as excinfo:
        iscolinear()
    assert excinfo.value.code == 'TooFewArguments'
    with pytest.raises(InvalidArityError) as excinfo:
        iscolinear([1], [2], [3], [4])
    assert excinfo.value.code == 'TooManyArguments'


def test_shape_errors():
    with pytest.raises(LengthMismatchError):
        iscolinear([1, 2], [1, 2, 3])
    with pytest.raises(ShapeMismatchError) as excinfo:
        iscolinear([1, 2, 3, 4], np.ones((2, 2)))
    assert excinfo.value.code == 'VectorArrayMismatch'
    with pytest.raises(ShapeMismatchError):
        iscolinear(np.ones((2, 3)), np.ones((3, 2)))
    with pytest.raises(ShapeMismatchError):
        iscolinear(np.ones((2, 2, 2)))


def test_non_finite_errors():
    with pytest.raises(NonFiniteInputError):
        iscolinear([1.0, np.nan, 3.0], [1.0, 2.0, 3.0])
    with pytest.raises(NonFiniteInputError):
        iscolinear([1.0, 2.0, 3.0], [1.0, np.inf, 3.0], [0.0, 0.0, 0.0])
    with pytest.raises(NonFiniteInputError):
        iscolinear([1.0, 2.0, 3.0], [1j, 2.0, 3.0])
    with pytest.raises(NonFiniteInputError):
        iscolinear(np.array([1 + 1j, complex(np.nan, 0), 2j]))
    with pytest.raises(NonFiniteInputError) as excinfo:
        iscolinear(['a', 'b', 'c'], [1, 2, 3])
    assert excinfo.value.code == 'InvalidDatatype'
