import pytest

from qcomputations.config import QConfig
from qcomputations.matrix import Matrix, MatrixStyle


@pytest.fixture(autouse=True)
def _fresh_config():
    QConfig.instance().reset()
    yield
    QConfig.instance().reset()


ROWS = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


def sample(style=MatrixStyle.C_STYLE):
    return Matrix.from_rows(ROWS, style)


def identity(n):
    return Matrix.from_function(n, n, lambda i, j: 1 if i == j else 0)


def test_constructor_fills_and_sizes():
    a = Matrix(2, 3, 1.5)
    assert (a.n, a.m) == (2, 3)
    assert a.to_rows() == [[1.5] * 3, [1.5] * 3]
    assert a.style is MatrixStyle.C_STYLE


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_from_rows_round_trip_and_errors():
    assert sample().to_rows() == ROWS
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])
    with pytest.raises(ValueError):
        Matrix.from_rows([])


def test_from_function_values():
    a = Matrix.from_function(3, 2, lambda i, j: complex(i, j))
    for i in range(3):
        for j in range(2):
            assert a[i, j] == complex(i, j)


@pytest.mark.parametrize("style", list(MatrixStyle))
def test_flat_data_matches_index(style):
    a = sample(style)
    data = a.data()
    for i in range(a.n):
        for j in range(a.m):
            assert data[a.index(i, j)] == a[i, j]


def test_storage_orders():
    assert sample().data().tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert sample(MatrixStyle.FORTRAN_STYLE).data().tolist() == [1.0, 4.0, 2.0, 5.0, 3.0, 6.0]
    assert sample().leading_dimension == 3
    assert sample(MatrixStyle.FORTRAN_STYLE).leading_dimension == 2


def test_index_out_of_range():
    with pytest.raises(IndexError):
        sample().index(2, 0)


def test_style_conversion_round_trip():
    a = sample()
    a.to_fortran_style()
    assert not a.is_c_style
    assert a.to_rows() == ROWS
    with pytest.raises(ValueError):
        a.to_fortran_style()
    a.to_c_style()
    assert a == sample()
    with pytest.raises(ValueError):
        a.to_c_style()


def test_item_access_and_promotion():
    a = sample()
    assert a[1] == ROWS[1]
    a[0, 1] = 9.0
    assert a[0, 1] == 9.0
    a[1, 2] = 2j
    assert a[1, 2] == 2j
    assert a[0, 0] == 1.0


def test_rows_and_columns():
    a = sample()
    assert a.row(1) == ROWS[1]
    assert a.col(2) == [ROWS[0][2], ROWS[1][2]]
    a.modify_row(0, [7, 8, 9, 10])
    assert a.row(0) == [7.0, 8.0, 9.0]
    a.modify_col(1, [-1, -2])
    assert a.col(1) == [-1.0, -2.0]
    with pytest.raises(ValueError):
        a.modify_row(0, [1])
    with pytest.raises(ValueError):
        a.modify_col(0, [1])


def test_grow_and_shrink():
    a = sample()
    a.add_rows(2)
    a.add_cols(1)
    assert (a.n, a.m) == (4, 4)
    assert a.row(3) == [0.0] * 4
    assert a.col(3) == [0.0] * 4
    a.remove_rows(2)
    a.remove_cols(1)
    assert a == sample()
    a.expand(3)
    a.reduce(3)
    assert a == sample()
    with pytest.raises(ValueError):
        a.remove_rows(5)


def test_submatrix():
    sub = sample().submatrix(2, 2, 0, 1)
    assert sub.to_rows() == [[2.0, 3.0], [5.0, 6.0]]
    with pytest.raises(IndexError):
        sample().submatrix(2, 2, 1, 1)


def test_transpose_and_hermit():
    a = sample()
    t = a.transpose()
    assert (t.n, t.m) == (a.m, a.n)
    assert t.transpose() == a
    c = Matrix.from_function(2, 3, lambda i, j: complex(i + 1, j - 1))
    h = c.hermit()
    for i in range(2):
        for j in range(3):
            assert h[j, i] == c[i, j].conjugate()
    with pytest.raises(TypeError):
        a.hermit()


def test_addition_and_subtraction():
    a = sample()
    b = Matrix.from_rows([[0.5, -1.0, 2.0], [3.0, 0.0, -4.0]])
    assert (a + b) - b == a
    shifted = a + 3
    assert shifted[1, 2] == a[1, 2] + 3
    assert shifted - 3 == a
    with pytest.raises(ValueError):
        a + Matrix(3, 2)
    with pytest.raises(ValueError):
        a + sample(MatrixStyle.FORTRAN_STYLE)


def test_scalar_multiplication_and_division():
    a = sample()
    assert (a * 2) / 2 == a
    assert 2 * a == a * 2
    with pytest.raises(ZeroDivisionError):
        a / 0


def test_matrix_product_invariants():
    a = sample()
    b = Matrix.from_rows([[1.0, -1.0], [0.5, 2.0], [3.0, 0.0]])
    assert identity(2) * a == a
    assert a @ identity(3) == a
    assert (a @ b).transpose() == b.transpose() @ a.transpose()
    with pytest.raises(ValueError):
        a @ a


def test_vector_products():
    a = sample()
    assert a * [1, 0, 0] == a.col(0)
    assert a @ [0, 0, 1] == a.col(2)
    assert [0, 1] * a == a.row(1)
    assert [1, 0] @ a == a.row(0)
    with pytest.raises(ValueError):
        a * [1, 2]


def test_equality_depends_on_style():
    assert sample() == sample()
    assert not (sample() == sample(MatrixStyle.FORTRAN_STYLE))


def test_show_uses_width(capsys):
    Matrix.from_rows([[1, 2]]).show(4)
    assert capsys.readouterr().out == "   1    2 \n\n"
    QConfig.instance().width = 2
    Matrix.from_rows([[3]]).show()
    assert capsys.readouterr().out == " 3 \n\n"


def test_csv_round_trip_real(tmp_path):
    a = Matrix.from_rows([[0.1, -2.5], [1e3, 3.0]])
    path = tmp_path / "real.csv"
    a.write_to_csv_file(str(path))
    lines = path.read_text().splitlines()
    assert len(lines) == 2
    parsed = [[float(x) for x in line.split(",")] for line in lines]
    for got, want in zip(parsed, a.to_rows()):
        assert got == pytest.approx(want)


def test_csv_round_trip_complex(tmp_path):
    a = Matrix.from_function(2, 2, lambda i, j: complex(i - 0.5, 1.25 - j))
    path = tmp_path / "complex.csv"
    a.write_to_csv_file(str(path))
    parsed = [[complex(x) for x in line.split(",")] for line in path.read_text().splitlines()]
    for got, want in zip(parsed, a.to_rows()):
        assert got == pytest.approx(want)


def test_csv_respects_accuracy(tmp_path):
    QConfig.instance().csv_num_accuracy = 2
    path = tmp_path / "short.csv"
    Matrix.from_rows([[1.23456, 7.0]]).write_to_csv_file(str(path))
    fields = path.read_text().strip().split(",")
    assert all(len(field.split(".")[1]) == 2 for field in fields)
    assert float(fields[0]) == pytest.approx(1.23456, abs=0.01)