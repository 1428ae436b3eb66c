import pytest

from enginecore.matrix import Matrix
from enginecore.vector import Vector, Vector4

SAMPLE = Matrix(
    [
        [2.0, 1.0, 0.0, 3.0],
        [0.5, 4.0, -1.0, 0.0],
        [1.0, 0.0, 3.0, 2.0],
        [0.0, 2.0, 1.0, 1.0],
    ]
)
OTHER = Matrix(
    [
        [1.0, 0.0, 2.0, -1.0],
        [3.0, 1.0, 0.0, 0.5],
        [0.0, -2.0, 1.0, 1.0],
        [4.0, 0.0, 0.0, 2.0],
    ]
)


def flat(m):
    return [v for row in m for v in row]


def approx_matrix(m):
    return pytest.approx(flat(m), abs=1e-6)


def test_identity_is_multiplicative_neutral():
    assert Matrix.identity() * SAMPLE == SAMPLE
    assert SAMPLE * Matrix.identity() == SAMPLE


def test_default_matrix_is_zero():
    assert Matrix() == SAMPLE - SAMPLE


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Matrix([[1, 2, 3]])


def test_scalar_operations():
    assert SAMPLE * 2 == SAMPLE + SAMPLE
    assert flat((SAMPLE * 3) / 3) == approx_matrix(SAMPLE)


def test_transpose_twice_is_identity_operation():
    assert SAMPLE.transpose().transpose() == SAMPLE
    assert SAMPLE.transpose()[0][3] == SAMPLE[3][0]


def test_transpose_of_product():
    assert flat((SAMPLE * OTHER).transpose()) == approx_matrix(
        OTHER.transpose() * SAMPLE.transpose()
    )


def test_identity_determinant():
    assert Matrix.identity().determinant() == pytest.approx(1.0)


def test_determinant_is_multiplicative():
    assert (SAMPLE * OTHER).determinant() == pytest.approx(
        SAMPLE.determinant() * OTHER.determinant()
    )


def test_determinant_of_transpose_equal():
    assert SAMPLE.transpose().determinant() == pytest.approx(SAMPLE.determinant())


def test_inverse_times_matrix_is_identity():
    assert flat(SAMPLE * SAMPLE.inverse()) == approx_matrix(Matrix.identity())
    assert flat(OTHER.inverse() * OTHER) == approx_matrix(Matrix.identity())


def test_singular_inverse_returns_identity():
    singular = Matrix([[1, 2, 3, 4], [2, 4, 6, 8], [0, 1, 0, 1], [1, 0, 1, 0]])
    assert singular.inverse() == Matrix.identity()


def test_scale_matrix_scales_positions():
    scale = Matrix.create_scale(2.0, 3.0, 4.0)
    p = scale.transform_position(Vector(1.0, 1.0, 1.0))
    assert p == Vector(2.0, 3.0, 4.0)


def test_translation_moves_points_not_directions():
    offset = Vector(5.0, -2.0, 7.0)
    t = Matrix.create_translation(offset)
    point = Vector(1.0, 2.0, 3.0)
    assert t.transform_position(point) == point + offset
    assert t.transform_vector(point) == point
    assert t[3][0] == offset.x


def test_translation_inverse_undoes_translation():
    offset = Vector(1.0, 2.0, 3.0)
    t = Matrix.create_translation(offset)
    point = Vector(4.0, -1.0, 0.5)
    back = t.inverse().transform_position(t.transform_position(point))
    assert list(back) == pytest.approx(list(point))


def test_rotation_zero_is_identity():
    assert flat(Matrix.create_rotation(0.0, 0.0, 0.0)) == approx_matrix(Matrix.identity())


@pytest.mark.parametrize("angles", [(30.0, 0.0, 0.0), (10.0, 45.0, -70.0), (90.0, 90.0, 90.0)])
def test_rotation_is_orthonormal(angles):
    r = Matrix.create_rotation(*angles)
    assert r.determinant() == pytest.approx(1.0, abs=1e-6)
    assert flat(r * r.transpose()) == approx_matrix(Matrix.identity())
    v = Vector(1.0, -2.0, 3.0)
    assert r.transform_vector(v).magnitude() == pytest.approx(v.magnitude())


def test_transform_vector4_matches_position_for_affine():
    m = Matrix.create_rotation(20.0, 30.0, 40.0) * Matrix.create_translation(Vector(1.0, 2.0, 3.0))
    p = Vector(0.5, -1.5, 2.0)
    v4 = m.transform_vector4(Vector4(p.x, p.y, p.z, 1.0))
    pos = m.transform_position(p)
    assert [v4.x, v4.y, v4.z] == pytest.approx(list(pos))
    assert v4.a == pytest.approx(1.0)


def test_transform_vector4_with_zero_w_matches_transform_vector():
    v = Vector(2.0, 1.0, -1.0)
    v4 = SAMPLE.transform_vector4(Vector4(v.x, v.y, v.z, 0.0))
    assert [v4.x, v4.y, v4.z] == pytest.approx(list(SAMPLE.transform_vector(v)))


def test_transform_position_skips_divide_when_w_zero():
    m = Matrix([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 0]])
    p = Vector(3.0, 4.0, 5.0)
    assert m.transform_position(p) == p