import pytest

from dsakit.matrix import dot_product, matrix_multiply_matrix, matrix_multiply_vector, norm

A = [[1.0, 2.0, 0.0], [-1.0, 3.0, 4.0], [2.0, 0.5, 1.0]]
B = [[0.0, 1.0, 2.0], [3.0, -2.0, 1.0], [1.0, 1.0, 1.0]]
V = [1.5, -2.0, 3.0]
IDENTITY = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]


def test_norm_of_pythagorean_vector():
    assert norm([3.0, 4.0]) == pytest.approx(5.0)


def test_norm_of_empty_is_zero():
    assert norm([]) == 0.0


@pytest.mark.parametrize("v", [V, [1.0], [-2.0, 7.0, 0.5, 3.0]])
def test_norm_squared_is_self_dot(v):
    assert norm(v) ** 2 == pytest.approx(dot_product(v, v))


def test_dot_product_is_symmetric():
    assert dot_product(V, A[0]) == pytest.approx(dot_product(A[0], V))


def test_dot_product_with_unit_vector_selects_component():
    assert dot_product(V, [0.0, 1.0, 0.0]) == V[1]


def test_dot_product_length_mismatch():
    with pytest.raises(ValueError):
        dot_product([1.0, 2.0], [1.0])


def test_identity_times_vector():
    assert matrix_multiply_vector(IDENTITY, V) == V


def test_identity_times_matrix():
    assert matrix_multiply_matrix(IDENTITY, A) == A
    assert matrix_multiply_matrix(A, IDENTITY) == A


def test_product_rows_are_row_times_columns():
    product = matrix_multiply_matrix(A, B)
    columns = [list(c) for c in zip(*B)]
    for i, row in enumerate(A):
        assert product[i] == [pytest.approx(dot_product(row, c)) for c in columns]


def test_associativity_with_vector():
    left = matrix_multiply_vector(matrix_multiply_matrix(A, B), V)
    right = matrix_multiply_vector(A, matrix_multiply_vector(B, V))
    assert left == pytest.approx(right)


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        matrix_multiply_vector([[1.0, 2.0]], [1.0, 2.0])
    with pytest.raises(ValueError):
        matrix_multiply_matrix(A, [[1.0, 2.0], [3.0, 4.0]])