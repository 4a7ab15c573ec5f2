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
volslice: slice ranges through volume data
==========================================

Find the range of slice positions through a volume along a view direction
and the slice position of a camera focal point.
'''

__version__ = '1.0.0'

from .slicerange import SliceRange, compute_slice_range, corners_slice_range
from .slicerange import volume_corners, align_to_axis
from .griddata import GridData, ArrayGridData
from .camera import Camera, camera_slice_range
from .settings import SliceRangeSettings, get_settings
from .errors import NotABug, UserError, ZeroDirectionError, ConfigurationError
