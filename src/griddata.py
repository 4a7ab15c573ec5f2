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

# -----------------------------------------------------------------------------
# Volume grids positioned in xyz space.  Grid index (0,0,0) sits at origin,
# step gives the spacing along the 3 grid axes, cell_angles skew the axes
# as for a crystallographic unit cell and rotation turns the skewed axes.
#
from numpy import float32
class GridData:
  '''
  Placement of a 3-dimensional grid in space, the volume interface used
  by :py:func:`~volslice.slicerange.compute_slice_range`.

  Attributes
  ----------
  size : 3 integers
    Number of grid points along the i, j, k axes.
  value_type : numpy.dtype
    Type of the grid values.  Default numpy.float32
  origin : 3 floats
    xyz position of grid index (0,0,0).
  step : 3 floats
    Spacing between grid planes along each axis.
  cell_angles : 3 floats
    Angles in degrees between the jk, ik and ij axes.  Default (90,90,90).
  rotation : 3x3 matrix
    Rotation applied to the skewed axes.
  name : string
  ijk_to_xyz_transform : :py:class:`~volslice.geometry.Place`
    Index to xyz mapping computed from the above at construction.
  '''
  def __init__(self, size,
               value_type = float32,
               origin = (0,0,0),
               step = (1,1,1),
               cell_angles = (90,90,90),
               rotation = ((1,0,0),(0,1,0),(0,0,1)),
               name = ''):

    size = tuple(int(s) for s in size)
    if len(size) != 3 or min(size) < 0:
      raise ValueError('Grid size must be 3 non-negative integers, got %s' % (size,))
    self.size = size

    from numpy import dtype
    self.value_type = dtype(value_type)
    self.origin = tuple(origin)
    self.step = tuple(step)
    self.cell_angles = tuple(cell_angles)
    self.rotation = tuple(tuple(row) for row in rotation)
    self.name = str(name)

    self.ijk_to_xyz_transform = grid_transform(self.origin, self.step,
                                               self.cell_angles, self.rotation)

  # ---------------------------------------------------------------------------
  #
  def ijk_to_xyz(self, ijk):
    '''
    Map a grid index, or an N by 3 array of indices, to xyz.  Indices
    need not be integers.
    '''
    return self.ijk_to_xyz_transform * ijk

  # ---------------------------------------------------------------------------
  # xyz bounds of the box with index corners (0,0,0) and size.
  #
  def bounds(self):

    from .geometry import point_bounds, box_corners
    return point_bounds(self.ijk_to_xyz(box_corners((0,0,0), self.size)))

  # ---------------------------------------------------------------------------
  #
  def __repr__(self):

    return '<%s %s size %d,%d,%d>' % ((self.__class__.__name__, repr(self.name)) + self.size)

# -----------------------------------------------------------------------------
# Place whose columns are the rotated skew axes scaled by step, with origin
# as the shift.
#
def grid_transform(origin, step, cell_angles, rotation):

  from numpy import array, dot, zeros, float64
  from .geometry import Place
  from .geometry.matrix import skew_axes
  axes = dot(array(rotation, float64), array(skew_axes(cell_angles), float64).transpose())
  m = zeros((3,4), float64)
  m[:,:3] = axes * array(step, float64)
  m[:,3] = origin
  return Place(m)

# -----------------------------------------------------------------------------
# Grid over a numpy array indexed z, y, x.
#
class ArrayGridData(GridData):
  '''
  GridData holding its values in a 3-dimensional numpy array indexed
  k, j, i.  Other arguments are as for :py:class:`GridData`.
  '''
  def __init__(self, array,
               origin = (0,0,0),
               step = (1,1,1),
               cell_angles = (90,90,90),
               rotation = ((1,0,0),(0,1,0),(0,0,1)),
               name = ''):

    if array.ndim != 3:
      raise ValueError('ArrayGridData requires a 3 dimensional array, got %d dimensions'
                       % array.ndim)
    self.array = array
    GridData.__init__(self, array.shape[::-1], array.dtype, origin, step,
                      cell_angles = cell_angles, rotation = rotation, name = name)
