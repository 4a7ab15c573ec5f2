# vim: set expandtab shiftwidth=4 softtabstop=4:

# === UCSF ChimeraX Copyright ===
# Copyright 2022 Regents of the University of California. All rights reserved.
# This software is provided pursuant to the ChimeraX license agreement, which
# covers academic and commercial uses. For more information, see
# <http://www.rbvi.ucsf.edu/chimerax/docs/licensing.html>
#
# This file is part of the ChimeraX library. You can also redistribute and/or
# modify it under the GNU Lesser General Public License version 2.1 as
# published by the Free Software Foundation. For more details, see
# <https://www.gnu.org/licenses/old-licenses/lgpl-2.1.html>
#
# This file is distributed WITHOUT ANY WARRANTY; without even the implied
# warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. This notice
# must be embedded in or attached to all copies, including partial copies, of
# the software or any revisions or derivations thereof.
# === UCSF ChimeraX Copyright ===

'''
place: Coordinate frames
========================

A Place is a 3 by 4 matrix of 64-bit floats.  The first 3 columns are the
axes of a coordinate frame and the last column is its origin, so the Place
maps coordinates in that frame to the enclosing frame.  Volume grids use a
Place to map grid indices to world points, and a camera uses one for its
position and orientation.

Points and vectors are numpy arrays of 3 values, or N by 3 arrays.
'''

from . import matrix as m34


class Place:
    '''
    Coordinate frame given by a 3 by 4 matrix, or by axes (three axis
    vectors) and an origin point.  Axes need not be orthonormal, a grid
    with skewed cell angles has non-orthogonal axes.
    '''
    def __init__(self, matrix=None, axes=None, origin=None):
        from numpy import array, float64, identity
        if matrix is None:
            m = array(identity(4)[:3], float64)
            if axes is not None:
                m[:, :3] = array(axes, float64).transpose()
            if origin is not None:
                m[:, 3] = origin
        else:
            m = array(matrix, float64)
            if m.shape != (3, 4):
                raise ValueError('Place matrix must be 3 by 4, got shape %s' % (m.shape,))
        self._matrix = m
        self._is_identity = None    # Cached result of is_identity()

    @property
    def matrix(self):
        '''Copy of the 3 by 4 matrix.'''
        return self._matrix.copy()

    def __mul__(self, p):
        '''Place times points gives the points mapped to the enclosing frame.'''
        from numpy import ndarray
        if isinstance(p, (ndarray, tuple, list)):
            return m34.apply_matrix(self._matrix, p)
        raise TypeError('Cannot multiply Place times "%s"' % str(p))

    def transform_points(self, xyz):
        '''
        Return the mapped N by 3 array of points.  The identity returns
        the same array without copying.
        '''
        if self.is_identity():
            return xyz
        return m34.apply_matrix(self._matrix, xyz)

    def transform_vector(self, v):
        '''Apply only the linear part, no shift.'''
        return m34.apply_matrix_without_translation(self._matrix, v)

    def origin(self):
        return self._matrix[:, 3].copy()

    def axes(self):
        '''The 3 axis vectors as rows of a 3 by 3 array.'''
        return self._matrix[:, :3].transpose().copy()

    def z_axis(self):
        return self._matrix[:, 2].copy()

    def is_identity(self, tolerance=0):
        if tolerance == 0:
            if self._is_identity is None:
                self._is_identity = m34.is_identity_matrix(self._matrix, 0)
            return self._is_identity
        return m34.is_identity_matrix(self._matrix, tolerance)

    def is_rotation(self, tolerance=1e-6):
        '''Orthonormal right handed axes and zero origin.'''
        from numpy import dot, identity, abs as nabs
        from numpy.linalg import det
        r = self._matrix[:, :3]
        return bool(nabs(dot(r, r.transpose()) - identity(3)).max() <= tolerance and
                    abs(det(r) - 1) <= tolerance and
                    nabs(self._matrix[:, 3]).max() <= tolerance)

    def __repr__(self):
        return 'Place(%s)' % repr(self._matrix.tolist())


def translation(v):
    '''Shift by vector v.'''
    return Place(origin=v)


def vector_rotation(u, v):
    '''
    Return the rotation taking the direction of u to the direction of v.
    The vectors need not be unit length.  The rotation is about u x v,
    except for nearly opposite vectors, see
    :py:func:`~volslice.geometry.matrix.vector_rotation_transform`.
    Zero length vectors raise ValueError.
    '''
    if m34.length(u) == 0 or m34.length(v) == 0:
        raise ValueError('vector_rotation() requires non-zero vectors, got %s and %s'
                         % (tuple(u), tuple(v)))
    return Place(m34.vector_rotation_transform(m34.normalize_vector(u),
                                               m34.normalize_vector(v)))


def skew_axes(cell_angles):
    '''Unit axes for crystallographic cell angles (degrees) as a Place.'''
    return Place(axes=m34.skew_axes(cell_angles))


_identity_place = None
def identity():
    '''Shared identity Place.'''
    global _identity_place
    if _identity_place is None:
        _identity_place = Place()
    return _identity_place
