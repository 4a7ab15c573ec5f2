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
bounds: Axis aligned boxes
==========================

Boxes of point sets.  An empty point set has bounds None.
'''

class Bounds:
    '''Box given by minimum and maximum x,y,z as numpy arrays.'''
    def __init__(self, xyz_min, xyz_max):
        from numpy import array, float64
        self.xyz_min = array(xyz_min, float64)
        self.xyz_max = array(xyz_max, float64)

    def corners(self):
        "The 8 box corners, ordered as by :py:func:`box_corners`."
        return box_corners(self.xyz_min, self.xyz_max)


def box_corners(xyz_min, xyz_max):
    '''
    Return an 8 by 3 float64 array of box corners with x varying fastest,
    then y, then z.
    '''
    (x0, y0, z0), (x1, y1, z1) = xyz_min, xyz_max
    from numpy import array, float64
    return array([(x, y, z) for z in (z0, z1) for y in (y0, y1) for x in (x0, x1)], float64)


def point_bounds(xyz):
    '''Bounds of an N by 3 array of points, None if there are no points.'''
    if len(xyz) == 0:
        return None
    from numpy import asarray
    a = asarray(xyz)
    return Bounds(a.min(axis=0), a.max(axis=0))
