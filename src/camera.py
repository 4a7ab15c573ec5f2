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
Camera
======
'''

class Camera:
    '''
    A camera position is a :py:class:`~volslice.geometry.Place` whose -z
    axis is the view direction.  The focal point is the scene point the
    camera is centered on, by default one unit in front of the camera.
    '''
    def __init__(self, position=None, focal_point=None):
        from .geometry import Place
        self.position = Place() if position is None else position
        if focal_point is None:
            focal_point = self.position.origin() + self.view_direction()
        self.focal_point = focal_point

    def get_focal_point(self):
        return self._focal_point.copy()

    def set_focal_point(self, xyz):
        from numpy import array, float64
        fp = array(xyz, float64)
        if fp.shape != (3,):
            raise ValueError('Focal point must have 3 components, got %s' % repr(xyz))
        self._focal_point = fp
    focal_point = property(get_focal_point, set_focal_point)
    '''Scene point the camera is centered on, numpy array of 3 floats.'''

    def view_direction(self):
        return -self.position.z_axis()

    def view_plane_normal(self):
        '''Camera z axis, pointing from the scene toward the camera.'''
        return self.position.z_axis()


def camera_slice_range(volume, camera, log=None, settings=None):
    '''
    Return the :py:class:`~volslice.slicerange.SliceRange` of a volume along
    the camera view plane normal, with the current slice at the focal point.
    '''
    from .slicerange import compute_slice_range
    return compute_slice_range(volume, camera.view_plane_normal(), camera.focal_point,
                               log=log, settings=settings)
