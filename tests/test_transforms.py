import math

import pytest

from cframe import transforms
from cframe.matrix import Matrix4
from cframe.vector import Vec3, Vec4, mag


def approx_matrix(m):
    return pytest.approx(list(m), abs=1e-9)


def assert_vec_close(a, b):
    assert list(a) == pytest.approx(list(b), abs=1e-9)


def sample_matrix():
    return transforms.translate(1.0, -2.0, 3.0) * transforms.rotate(30.0, Vec3(1.0, 2.0, 3.0)) * transforms.scale(2.0, 3.0, 0.5)


def test_translate_moves_origin():
    assert transforms.translate(1.0, 2.0, 3.0) * Vec3(0.0) == Vec3(1.0, 2.0, 3.0)


def test_translate_accepts_vector_or_numbers():
    assert transforms.translate(Vec3(4.0, 5.0, 6.0)) == transforms.translate(4.0, 5.0, 6.0)


def test_translate_wrong_arity():
    with pytest.raises(TypeError):
        transforms.translate(1.0, 2.0)


def test_scale_scales_point():
    assert transforms.scale(2.0, 3.0, 4.0) * Vec3(1.0) == Vec3(2.0, 3.0, 4.0)


def test_scale_vector_form_matches():
    assert transforms.scale(Vec3(2.0, 3.0, 4.0)) == transforms.scale(2.0, 3.0, 4.0)


def test_rotate_zero_is_identity():
    assert list(transforms.rotate(0.0, Vec3(1.0, 0.0, 0.0))) == approx_matrix(Matrix4())


def test_rotate_quarter_turn_about_z():
    assert_vec_close(transforms.rotate(90.0, Vec3(0.0, 0.0, 1.0)) * Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))


def test_rotate_preserves_length_and_axis():
    axis = Vec3(1.0, 2.0, 3.0)
    r = transforms.rotate(47.0, axis)
    v = Vec3(3.0, -1.0, 2.0)
    assert mag(r * v) == pytest.approx(mag(v))
    assert_vec_close(r * axis, axis)


def test_rotate_axis_need_not_be_unit():
    assert list(transforms.rotate(33.0, Vec3(0.0, 5.0, 0.0))) == approx_matrix(
        transforms.rotate(33.0, Vec3(0.0, 1.0, 0.0))
    )


def test_rotate_zero_axis_raises():
    with pytest.raises(ZeroDivisionError):
        transforms.rotate(10.0, Vec3(0.0))


def test_rotate_inverse_is_transpose():
    r = transforms.rotate(71.0, Vec3(-1.0, 0.5, 2.0))
    assert list(transforms.inverse(r)) == approx_matrix(transforms.transpose(r))


def test_transpose_twice_is_original():
    m = sample_matrix()
    assert transforms.transpose(transforms.transpose(m)) == m


def test_transpose_swaps_row_and_column():
    m = sample_matrix()
    t = transforms.transpose(m)
    for i in range(4):
        assert list(t.row(i)) == list(m.column(i))


def test_inverse_times_matrix_is_identity():
    m = sample_matrix()
    assert list(transforms.inverse(m) * m) == approx_matrix(Matrix4())
    assert list(m * transforms.inverse(m)) == approx_matrix(Matrix4())


def test_inverse_of_translation():
    assert list(transforms.inverse(transforms.translate(1.0, 2.0, 3.0))) == approx_matrix(
        transforms.translate(-1.0, -2.0, -3.0)
    )


def test_inverse_singular_raises():
    with pytest.raises(ZeroDivisionError):
        transforms.inverse(Matrix4.filled(0.0))


def test_perspective_maps_near_and_far_planes():
    near, far = 0.5, 100.0
    p = transforms.perspective(45.0, 16.0 / 9.0, near, far)
    n = p * Vec4(0.0, 0.0, -near, 1.0)
    f = p * Vec4(0.0, 0.0, -far, 1.0)
    assert n.z / n.w == pytest.approx(-1.0)
    assert f.z / f.w == pytest.approx(1.0)


def test_perspective_aspect_divides_x():
    p = transforms.perspective(60.0, 2.0, 1.0, 10.0)
    assert p[0] * 2.0 == pytest.approx(p[5])
    assert p[5] == pytest.approx(1.0 / math.tan(math.radians(30.0)))


def test_viewport_ndc_corners():
    width, height = 800, 600
    vp = transforms.viewport_ndc(width, height)
    assert_vec_close(vp * Vec3(-1.0, -1.0, 0.0), Vec3(0.0, height, 0.0))
    assert_vec_close(vp * Vec3(1.0, 1.0, 0.0), Vec3(width, 0.0, 0.0))


def test_orthographic_maps_box_corner():
    o = transforms.orthographic(-2.0, 2.0, -4.0, 4.0, -1.0, 1.0)
    assert_vec_close(o * Vec3(2.0, 4.0, -1.0), Vec3(1.0, 1.0, 1.0))


def test_un_ortho_undoes_orthographic():
    o = transforms.orthographic(-3.0, 5.0, 0.0, 10.0, 1.0, 7.0)
    assert list(transforms.un_ortho(o) * o) == approx_matrix(Matrix4())


def test_remove_translation_zeroes_last_row_and_column():
    m = sample_matrix()
    r = transforms.remove_translation(m)
    for i in range(16):
        if i in (3, 7, 11, 12, 13, 14, 15):
            assert r[i] == 0.0
        else:
            assert r[i] == m[i]
    assert m[15] == 1.0