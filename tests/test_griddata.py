import numpy
import pytest

from volslice import GridData, ArrayGridData


def test_default_grid():
    g = GridData((2, 3, 4))
    assert g.size == (2, 3, 4)
    assert g.value_type == numpy.float32
    assert g.ijk_to_xyz((1, 2, 3)) == pytest.approx((1, 2, 3))


def test_origin_and_step():
    g = GridData((10, 10, 10), origin=(5, -1, 2), step=(0.5, 2, 1))
    assert g.ijk_to_xyz((2, 1, 0)) == pytest.approx((6, 1, 2))


def test_index_array():
    g = GridData((4, 4, 4), step=(2, 2, 2))
    ijk = numpy.array(((0, 0, 0), (1, 2, 3)), numpy.float64)
    assert g.ijk_to_xyz(ijk) == pytest.approx(numpy.array(((0, 0, 0), (2, 4, 6))))


def test_rotation():
    g = GridData((4, 4, 4), step=(2, 1, 1), rotation=((0, -1, 0), (1, 0, 0), (0, 0, 1)))
    assert g.ijk_to_xyz((1, 0, 0)) == pytest.approx((0, 2, 0))
    assert g.ijk_to_xyz((0, 1, 0)) == pytest.approx((-1, 0, 0))


def test_skewed_cell():
    g = GridData((4, 4, 4), step=(1, 2, 1), cell_angles=(90, 90, 60))
    assert g.ijk_to_xyz((0, 1, 0)) == pytest.approx((1, 3**0.5, 0))
    assert g.ijk_to_xyz((0, 0, 1)) == pytest.approx((0, 0, 1))


def test_bounds():
    g = GridData((4, 2, 8), origin=(-1, 0, 1), step=(0.5, 1, 0.25))
    b = g.bounds()
    assert b.xyz_min == pytest.approx((-1, 0, 1))
    assert b.xyz_max == pytest.approx((1, 2, 3))


@pytest.mark.parametrize('size', [(1, 2), (-1, 2, 3), (1, 2, 3, 4)])
def test_bad_size(size):
    with pytest.raises(ValueError):
        GridData(size)


def test_array_grid():
    a = numpy.zeros((5, 4, 3), numpy.int16)
    g = ArrayGridData(a, step=(1, 1, 2), name='zeros')
    assert g.size == (3, 4, 5)
    assert g.value_type == numpy.int16
    assert g.array is a
    assert g.ijk_to_xyz((3, 4, 5)) == pytest.approx((3, 4, 10))
    assert repr(g) == "<ArrayGridData 'zeros' size 3,4,5>"


def test_array_grid_needs_3d():
    with pytest.raises(ValueError):
        ArrayGridData(numpy.zeros((4, 4)))
