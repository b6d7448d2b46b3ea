import pytest

from cframe.matrix import Matrix3, Matrix4
from cframe.vector import Vec3, Vec4


def sample4():
    return Matrix4(range(1, 17))


def other4():
    return Matrix4([2, -1, 0, 3, 1, 4, -2, 0, 0, 1, 5, -3, 2, 0, 1, 1])


def test_identity_diagonal():
    m = Matrix4.identity()
    assert [m[i] for i in (0, 5, 10, 15)] == [1.0] * 4
    assert sum(m) == 4.0


def test_default_constructor_is_identity():
    assert Matrix4() == Matrix4.identity()
    assert Matrix3() == Matrix3.identity()


def test_filled_one_is_identity():
    assert Matrix4.filled(1.0) == Matrix4.identity()
    assert list(Matrix3.filled(1.0)) == list(Matrix3.identity())


def test_filled_other_value_everywhere():
    assert list(Matrix4.filled(2.5)) == [2.5] * 16
    assert list(Matrix3.filled(-3.0)) == [-3.0] * 9


def test_explicit_values_storage_order():
    m = sample4()
    assert list(m) == [float(v) for v in range(1, 17)]


def test_wrong_value_count_raises():
    with pytest.raises(TypeError):
        Matrix4(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        Matrix3(range(16))


def test_setitem_and_getitem():
    m = Matrix4()
    m[13] = 7
    assert m[13] == 7.0
    assert m.column(3).y == 7.0


def test_identity_is_neutral():
    a = sample4()
    assert Matrix4.identity() * a == a
    assert a * Matrix4.identity() == a


def test_product_is_associative():
    a, b, c = sample4(), other4(), Matrix4([1, 0, 2, 0, 0, 1, 0, 3, 1, 1, 1, 0, 0, 2, 0, 1])
    assert list((a * b) * c) == pytest.approx(list(a * (b * c)))


def test_product_elements_are_row_dot_column():
    a, b = sample4(), other4()
    p = a * b
    for row in range(4):
        for col in range(4):
            r, c = a.row(row), b.column(col)
            expected = r.x * c.x + r.y * c.y + r.z * c.z + r.w * c.w
            assert p[col * 4 + row] == pytest.approx(expected)


def test_vec3_treated_as_point():
    m = Matrix4()
    m[12], m[13], m[14] = 1.0, 2.0, 3.0
    result = m * Vec3(0.0)
    assert type(result) is Vec3
    assert list(result) == [1.0, 2.0, 3.0]


def test_vec4_with_zero_w_ignores_translation():
    m = Matrix4()
    m[12], m[13], m[14] = 5.0, 6.0, 7.0
    result = m * Vec4(1.0, 2.0, 3.0, 0.0)
    assert isinstance(result, Vec4)
    assert list(result) == [1.0, 2.0, 3.0, 0.0]


def test_vec4_product_matches_rows():
    a = sample4()
    v = Vec4(1.0, -2.0, 0.5, 3.0)
    result = a * v
    for i, component in enumerate(result):
        r = a.row(i)
        assert component == pytest.approx(r.x * v.x + r.y * v.y + r.z * v.z + r.w * v.w)


def test_row_and_column():
    m = sample4()
    assert list(m.column(1)) == [5.0, 6.0, 7.0, 8.0]
    assert list(m.row(1)) == [2.0, 6.0, 10.0, 14.0]
    with pytest.raises(IndexError):
        m.row(4)
    with pytest.raises(IndexError):
        m.column(-1)


def test_str_layout():
    lines = str(Matrix4.identity()).splitlines()
    assert len(lines) == 4
    assert lines[0] == "1.00000000 0.00000000 0.00000000 0.00000000"
    assert str(sample4()).splitlines()[0].split()[1] == "5.00000000"


def test_equality_with_other_types():
    assert (Matrix4() == "matrix") is False
    assert (Matrix4() == Matrix4.filled(0.0)) is False


def test_matrix3_from_matrix4_takes_upper_left_block():
    m3 = Matrix3.from_matrix4(Matrix4(range(16)))
    assert list(m3) == [0.0, 1.0, 2.0, 4.0, 5.0, 6.0, 8.0, 9.0, 10.0]


def test_matrix3_identity_neutral_and_product_consistent():
    a = Matrix3(range(1, 10))
    assert list(Matrix3.identity() * a) == list(a)
    a4 = Matrix4(range(1, 17))
    b4 = other4()
    product3 = Matrix3.from_matrix4(a4) * Matrix3.from_matrix4(b4)
    # Top-left block of a 4x4 product differs only by the 4th-row/column terms.
    full = a4 * b4
    for col in range(3):
        for row in range(3):
            extra = a4[3 * 4 + row] * b4[col * 4 + 3]
            assert product3[col * 3 + row] == pytest.approx(full[col * 4 + row] - extra)


def test_matrix3_str_layout():
    lines = str(Matrix3.identity()).splitlines()
    assert lines == [
        "1.00000000 0.00000000 0.00000000",
        "0.00000000 1.00000000 0.00000000",
        "0.00000000 0.00000000 1.00000000",
    ]