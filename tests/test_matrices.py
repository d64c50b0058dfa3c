import pytest

from a4engine.matrices import Matrix3, Matrix4
from a4engine.vectors import Vector3, Vector4


def _entries(m, n):
    return [m[i, j] for i in range(n) for j in range(n)]


def _assert_close(a, b, n):
    assert _entries(a, n) == pytest.approx(_entries(b, n), abs=1e-9)


M3 = Matrix3([2.0, 1.0, 0.5, -1.0, 3.0, 2.0, 0.0, 4.0, 1.0])
M4 = Matrix4(
    [
        2.0, 1.0, 0.5, 3.0,
        -1.0, 3.0, 2.0, 0.0,
        0.0, 4.0, 1.0, -2.0,
        1.0, 0.0, 2.0, 5.0,
    ]
)


def test_matrix3_indexing_is_row_major():
    assert M3[0, 1] == 1.0
    assert M3[1, 0] == -1.0
    assert M3[2, 1] == 4.0


def test_matrix3_setitem_updates_entry():
    m = Matrix3.identity()
    m[1, 2] = 7.0
    assert m[1, 2] == 7.0


def test_matrix3_index_out_of_range():
    m = Matrix3.identity()
    with pytest.raises(IndexError):
        m[3, 0] = 5.0
    assert m == Matrix3.identity()
    with pytest.raises(IndexError):
        _ = m[3, 0]


def test_matrix3_wrong_value_count():
    with pytest.raises(ValueError):
        Matrix3([1.0, 2.0])


def test_matrix3_identity_determinant():
    assert Matrix3.identity().determinant() == 1.0


def test_matrix3_inverse_round_trip():
    _assert_close(M3 * M3.inverse(), Matrix3.identity(), 3)
    _assert_close(M3.inverse().inverse(), M3, 3)


def test_matrix3_singular_inverse_raises():
    with pytest.raises(ValueError):
        Matrix3([1.0, 2.0, 3.0, 2.0, 4.0, 6.0, 0.0, 0.0, 1.0]).inverse()


def test_matrix3_transpose_swaps_indices():
    t = M3.transpose()
    assert all(t[i, j] == M3[j, i] for i in range(3) for j in range(3))
    assert t.transpose() == M3


def test_matrix3_identity_is_neutral():
    assert M3 * Matrix3.identity() == M3
    assert Matrix3.identity() * M3 == M3


def test_matrix3_translate_moves_point():
    point = (1.5, -2.0)
    offset = (3.0, 4.0)
    assert Matrix3.translate(offset) * point == (point[0] + offset[0], point[1] + offset[1])


def test_matrix3_scale_and_translate_inverse():
    m = Matrix3.translate((3.0, 4.0)) * Matrix3.scale((2.0, 0.5))
    x, y = m.inverse().transform_point(m.transform_point((1.0, 2.0)))
    assert (x, y) == pytest.approx((1.0, 2.0))


def test_matrix3_rotate_quarter_turn():
    x, y = Matrix3.rotate(90).transform_point((1.0, 0.0))
    assert (x, y) == pytest.approx((0.0, 1.0), abs=1e-12)


def test_matrix3_rotation_is_orthonormal():
    r = Matrix3.rotate(37.0)
    assert r.determinant() == pytest.approx(1.0)
    _assert_close(r * r.transpose(), Matrix3.identity(), 3)


def test_matrix3_str():
    assert str(Matrix3.identity()) == (
        "Matrix3(1, 0, 0,\n        0, 1, 0,\n        0, 0, 1)"
    )


def test_matrix4_inverse_round_trip():
    _assert_close(M4 * M4.inverse(), Matrix4.identity(), 4)
    _assert_close(M4.inverse() * M4, Matrix4.identity(), 4)


def test_matrix4_singular_inverse_raises():
    with pytest.raises(ValueError):
        Matrix4([0.0] * 16).inverse()


def test_matrix4_transpose_round_trip():
    t = M4.transpose()
    assert t[0, 3] == M4[3, 0]
    assert t.transpose() == M4


def test_matrix4_identity_is_neutral():
    assert M4 * Matrix4.identity() == M4


@pytest.mark.parametrize(
    "factory", [Matrix4.rotate_around_x, Matrix4.rotate_around_y, Matrix4.rotate_around_z]
)
def test_matrix4_rotations_are_orthonormal(factory):
    r = factory(23.0)
    _assert_close(r * r.transpose(), Matrix4.identity(), 4)
    _assert_close(r * factory(-23.0), Matrix4.identity(), 4)


def test_matrix4_translate_vector3():
    v = Vector3(1.0, 2.0, 3.0)
    t = Vector3(10.0, 20.0, 30.0)
    assert Matrix4.translate(t) * v == v + t


def test_matrix4_scale_vector4():
    v = Vector4(1.0, 2.0, 3.0, 1.0)
    s = Vector3(2.0, 3.0, 4.0)
    assert Matrix4.scale(s) * v == Vector4(v.x * s.x, v.y * s.y, v.z * s.z, v.w)


def test_matrix4_transform_2d_point_ignores_z_column():
    m = Matrix4.translate(Vector3(5.0, 6.0, 7.0))
    assert m * (1.0, 2.0) == (1.0 + 5.0, 2.0 + 6.0)


def test_matrix4_identity_keeps_vectors():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    assert Matrix4.identity() * v == v


def test_matrix4_str_starts_with_name():
    text = str(Matrix4.identity())
    assert text.splitlines()[0] == "Matrix4(1, 0, 0, 0"
    assert text.endswith("0, 0, 0, 1)")


def test_matrices_of_different_sizes_are_not_equal():
    assert (Matrix3.identity() == Matrix4.identity()) is False