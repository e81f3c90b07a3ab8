import io

import pytest

from densematrix.matrix import Matrix, MatrixShapeError


def sample():
    return Matrix.from_rows([[1.0, -2.0, 3.0], [4.0, 5.0, -6.0]])


def test_new_matrix_is_zero_with_shape():
    m = Matrix(3, 2)
    assert (m.width, m.height) == (3, 2)
    assert m.rows() == [[0.0] * 3, [0.0] * 3]
    assert Matrix.zeros(3, 2) == m


def test_identity_non_square():
    m = Matrix.identity(3, 2)
    assert m.rows() == [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]


def test_from_rows_ragged_raises():
    with pytest.raises(MatrixShapeError):
        Matrix.from_rows([[1.0, 2.0], [3.0]])


def test_getitem_setitem():
    m = Matrix(2, 2)
    m[1, 0] = 7
    assert m[1, 0] == 7.0
    with pytest.raises(IndexError):
        m[2, 0]


def test_copy_is_independent():
    m = sample()
    c = m.copy()
    c[0, 0] = 99.0
    assert m[0, 0] == 1.0
    assert c != m


def test_read_from_stream():
    m = Matrix.read(3, 2, io.StringIO("1 -2 3\n4 5 -6\n"))
    assert m == sample()


def test_read_too_few_numbers():
    with pytest.raises(ValueError):
        Matrix.read(2, 2, io.StringIO("1 2 3"))


def test_str_uses_fixed_format():
    m = Matrix.from_rows([[1.0, -0.5]])
    assert str(m) == "  1.0000  -0.5000 "


def test_set_zero_and_identity():
    m = sample()
    m.set_zero()
    assert m == Matrix(3, 2)
    m.set_identity()
    assert m == Matrix.identity(3, 2)


def test_assign_shape_mismatch():
    m = Matrix(2, 2)
    with pytest.raises(MatrixShapeError):
        m.assign(Matrix(3, 2))
    m.assign(Matrix.identity(2, 2))
    assert m == Matrix.identity(2, 2)


def test_transpose_round_trip_non_square():
    m = sample()
    t = m.copy()
    t.transpose()
    assert (t.width, t.height) == (m.height, m.width)
    assert all(t[j, i] == m[i, j] for i in range(m.height) for j in range(m.width))
    t.transpose()
    assert t == m


def test_transpose_square():
    m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    m.transpose()
    assert m.rows() == [[1.0, 3.0], [2.0, 4.0]]


def test_swap_rows_and_cols():
    m = sample()
    m.swap_rows(0, 1)
    assert m.rows() == [sample().rows()[1], sample().rows()[0]]
    m.swap_cols(0, 2)
    assert m[0, 0] == sample()[1, 2]
    with pytest.raises(IndexError):
        m.swap_rows(0, 5)
    with pytest.raises(IndexError):
        m.swap_cols(0, 5)


def test_mul_row_and_add_rows():
    m = sample()
    m.mul_row(0, 2.0)
    assert m.rows()[0] == [2.0 * v for v in sample().rows()[0]]
    m.add_rows(1, 0)
    assert m.rows()[1] == [a + b for a, b in zip(sample().rows()[1], m.rows()[0])]


def test_norm():
    assert sample().norm() == 15.0
    assert Matrix(0, 0).norm() == 0.0


def test_add_sub_round_trip():
    a = sample()
    b = sample() * 3
    assert (a + b) - b == a
    a += b
    a -= b
    assert a == sample()
    with pytest.raises(MatrixShapeError):
        sample() + Matrix(2, 2)


def test_scalar_mul_div():
    a = sample()
    assert 2 * a == a * 2
    assert (a * 4) / 4 == a
    c = a.copy()
    c *= 2
    c /= 2
    assert c == a
    with pytest.raises(ZeroDivisionError):
        a / 0


def test_matmul_identity_and_shapes():
    a = sample()
    assert Matrix.identity(2, 2) @ a == a
    assert a @ Matrix.identity(3, 3) == a
    p = a @ Matrix(4, 3)
    assert (p.width, p.height) == (4, 2)
    with pytest.raises(MatrixShapeError):
        a @ a


def test_imatmul_requires_matching_result_shape():
    a = sample()
    a @= Matrix.identity(3, 3)
    assert a == sample()
    with pytest.raises(MatrixShapeError):
        a @= Matrix(4, 3)