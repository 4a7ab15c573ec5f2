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
slicerange: Slice positions through a volume along a view direction
===================================================================

Compute the range of slice positions along a view direction that pass
through the bounding box of a volume, and where the focal point lies along
that direction.  The eight corners of the volume box are mapped to world
coordinates, then rotated so the view direction becomes the x axis.  The
extent of the rotated corners along x is the slice range and the rotated
focal point x value is the current slice position.

The volume is any object with a ``size`` attribute giving 3 grid dimensions
and an ``ijk_to_xyz(ijk)`` method mapping a grid index to a world point, for
example :py:class:`~volslice.griddata.GridData`.

The focal point is never clamped to the range.
'''

import logging

log = logging.getLogger('volslice')


class SliceRange:
    '''
    Extent of a volume along a view direction and the focal point position
    along the same direction.

    Attributes
    ----------
    min, max : float
        Smallest and largest slice position that touches the volume.
    current : float
        Slice position of the focal point, may lie outside [min, max].
    volume, view_plane_normal, focal_point
        The arguments used to compute the range, unchanged.
    '''
    def __init__(self, min, max, current, volume, view_plane_normal, focal_point):
        self.min = min
        self.max = max
        self.current = current
        self.volume = volume
        self.view_plane_normal = view_plane_normal
        self.focal_point = focal_point

    def extent(self):
        '''Distance between the first and last slice.'''
        return self.max - self.min

    def contains_current(self):
        '''Is the focal point slice within the volume range.'''
        return self.min <= self.current <= self.max

    def as_tuple(self):
        return (self.min, self.max, self.current)

    def __repr__(self):
        return 'SliceRange(min=%.6g, max=%.6g, current=%.6g)' % self.as_tuple()


def volume_corners(volume):
    '''
    Return the 8 world coordinate corners of a volume as an 8 by 3 float64
    array.  Grid indices (0,0,0) through (nx,ny,nz) are mapped with the
    volume's ijk_to_xyz() method, x index varying fastest.
    '''
    try:
        size = volume.size
        ijk_to_xyz = volume.ijk_to_xyz
    except AttributeError:
        raise TypeError('Volume must have a size attribute and an ijk_to_xyz() method, got %s'
                        % type(volume).__name__)
    dx, dy, dz = size
    corners_ijk = ((0, 0, 0), (dx, 0, 0), (0, dy, 0), (dx, dy, 0),
                   (0, 0, dz), (dx, 0, dz), (0, dy, dz), (dx, dy, dz))
    from numpy import array, float64
    corners = array([ijk_to_xyz(ijk) for ijk in corners_ijk], float64)
    return corners


def align_to_axis(direction, axis=(1, 0, 0), zero_direction=None):
    '''
    Return a rotation (:py:class:`~volslice.geometry.Place` with zero shift)
    taking direction onto axis.  The rotation convention is that of
    :py:func:`~volslice.geometry.vector_rotation`.

    A zero length direction raises ZeroDirectionError unless zero_direction
    is 'identity' in which case the identity rotation is returned.  When
    zero_direction is None the settings default is used.
    '''
    from .settings import default_value, ZERO_DIRECTION_POLICIES
    if zero_direction is None:
        zero_direction = default_value('zero_direction')
    elif zero_direction not in ZERO_DIRECTION_POLICIES:
        from .errors import ConfigurationError
        raise ConfigurationError('zero_direction must be one of %s, got "%s"'
                                 % (', '.join(ZERO_DIRECTION_POLICIES), zero_direction))

    from .geometry import length, identity, vector_rotation
    if length(direction) == 0:
        if zero_direction == 'identity':
            return identity()
        from .errors import ZeroDirectionError
        raise ZeroDirectionError('Cannot align a zero length view direction %s to axis %s'
                                 % (tuple(direction), tuple(axis)))
    return vector_rotation(direction, axis)


def corners_slice_range(corners, view_plane_normal, focal_point, volume=None,
                        log=None, settings=None):
    '''
    Return a :py:class:`SliceRange` for an arbitrary set of box corners,
    for instance the corners of world bounds from
    :py:func:`~volslice.geometry.box_corners`.

    The log argument is an optional object with an info() method that
    receives a one line report of the range.  Settings is a
    :py:class:`~volslice.settings.SliceRangeSettings` or None for defaults.
    '''
    from numpy import array, float64
    normal = _vector3(view_plane_normal, 'view plane normal')
    fp = _vector3(focal_point, 'focal point')
    xyz = array(corners, float64)
    if xyz.ndim != 2 or xyz.shape[1] != 3 or len(xyz) == 0:
        raise ValueError('Corners must be an N by 3 array with N > 0, got shape %s'
                         % (xyz.shape,))

    zero_direction, report = _settings_values(settings)
    tf = align_to_axis(normal, zero_direction=zero_direction)

    xyz = tf.transform_points(xyz)
    fp = tf * fp

    x = xyz[:,0]
    r = SliceRange(float(x.min()), float(x.max()), float(fp[0]),
                   volume, view_plane_normal, focal_point)
    _report_range(r, log, report)
    return r


def compute_slice_range(volume, view_plane_normal, focal_point, log=None, settings=None):
    '''
    Compute the range of slice positions through a volume along the view
    plane normal, and the slice position of the focal point.

    The 8 corners of the volume grid are mapped to world coordinates with
    the volume ijk_to_xyz() method, then rotated along with a copy of the
    focal point so the view plane normal lies along the x axis.  The min
    and max rotated x values of the corners give the slice range, and the
    rotated focal point x value gives the current slice.

    Parameters
    ----------
    volume : object with size and ijk_to_xyz()
        For example a :py:class:`~volslice.griddata.GridData`.
    view_plane_normal : 3 floats
        Slicing direction, any non-zero length.
    focal_point : 3 floats
        Point in world coordinates.
    log : object with info() method, optional
        Receives a report of the computed range.
    settings : :py:class:`~volslice.settings.SliceRangeSettings`, optional
        Zero direction policy and reporting.  Defaults are used if None.

    Returns
    -------
    :py:class:`SliceRange`
    '''
    corners = volume_corners(volume)
    return corners_slice_range(corners, view_plane_normal, focal_point, volume=volume,
                               log=log, settings=settings)


def _vector3(v, name):
    from numpy import array, float64
    a = array(v, float64)
    if a.shape != (3,):
        raise ValueError('The %s must have 3 components, got %s' % (name, repr(v)))
    return a


def _settings_values(settings):
    if settings is None:
        from .settings import default_value
        return default_value('zero_direction'), default_value('report_range')
    return settings.zero_direction, settings.report_range


def _report_range(r, logger, report):
    msg = 'Slice range %.6g %.6g %.6g' % r.as_tuple()
    if logger is not None:
        logger.info(msg)
    elif report:
        log.info(msg)
    else:
        log.debug(msg)
