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
# 3 by 4 matrix routines.  The left 3 columns hold the linear part and the
# right column holds the shift.  Matrices are numpy arrays or nested tuples.
#

# -----------------------------------------------------------------------------
# Points can be a single xyz point or an N by 3 array.
#
def apply_matrix(tf, points):

  from numpy import array, dot
  m = array(tf)
  xyz = dot(points, m[:,:3].transpose())
  xyz += m[:,3]
  return xyz

# -----------------------------------------------------------------------------
#
def apply_matrix_without_translation(tf, v):

  from numpy import array, dot
  m = array(tf)
  return dot(v, m[:,:3].transpose())

# -----------------------------------------------------------------------------
# NaN elements never compare equal to the identity.
#
def is_identity_matrix(tf, tolerance = 1e-6):

  ident = ((1,0,0,0), (0,1,0,0), (0,0,1,0))
  for r in range(3):
    for c in range(4):
      if not abs(tf[r][c] - ident[r][c]) <= tolerance:
        return False
  return True

# -----------------------------------------------------------------------------
# Unit axes for cell angles (alpha, beta, gamma) in degrees, the angles
# between the yz, xz and xy axes.
#
def skew_axes(cell_angles):

  if tuple(cell_angles) == (90,90,90):
    return ((1,0,0), (0,1,0), (0,0,1))

  from math import radians, sin, cos, sqrt
  alpha, beta, gamma = [radians(a) for a in cell_angles]
  cg, sg = cos(gamma), sin(gamma)
  cb = cos(beta)
  cy = (cos(alpha) - cb*cg)/sg
  cz = sqrt(1 - cb*cb - cy*cy)
  return ((1, 0, 0), (cg, sg, 0), (cb, cy, cz))

# -----------------------------------------------------------------------------
# Rotation (3x4, zero shift) taking unit vector n0 to unit vector n1 about the
# axis n0 x n1.  When n0 and n1 are nearly opposite that axis is poorly
# determined, so n0 is first turned 180 degrees about an axis perpendicular
# to it, the x axis if n0 is along z or else (-n0y, n0x, 0), and the small
# remaining rotation from -n0 to n1 is applied after.
#
def vector_rotation_transform(n0, n1):

  c = inner_product(n0,n1)
  if c > -1 + 1e-12:
    return _axis_rotation(n0, n1, c)

  if n0[0] == 0 and n0[1] == 0:
    ax,ay,az = (1,0,0)
  else:
    ax,ay,az = normalize_vector((-n0[1], n0[0], 0))
  half_turn = ((2*ax*ax-1, 2*ax*ay, 2*ax*az),
               (2*ax*ay, 2*ay*ay-1, 2*ay*az),
               (2*ax*az, 2*ay*az, 2*az*az-1))
  m0 = tuple(-x for x in n0)
  from numpy import array, dot, zeros, float64
  r = array(_axis_rotation(m0, n1, inner_product(m0,n1)), float64)
  tf = zeros((3,4), float64)
  tf[:,:3] = dot(r[:,:3], half_turn)
  return tf

# -----------------------------------------------------------------------------
# Rodrigues form R = cI + [w]x + w w^T/(1+c) with w = n0 x n1, c = n0.n1.
#
def _axis_rotation(n0, n1, c):

  wx,wy,wz = cross_product(n0,n1)
  f = 1.0/(1+c)
  return ((f*wx*wx + c, f*wx*wy - wz, f*wx*wz + wy, 0),
          (f*wy*wx + wz, f*wy*wy + c, f*wy*wz - wx, 0),
          (f*wz*wx - wy, f*wz*wy + wx, f*wz*wz + c, 0))

# -----------------------------------------------------------------------------
#
def inner_product(u,v):

  from numpy import dot
  return dot(u,v)

# -----------------------------------------------------------------------------
#
def cross_product(u,v):
  '''Cross product of two 3-vectors.'''
  from numpy import array
  return array((u[1]*v[2]-u[2]*v[1], u[2]*v[0]-u[0]*v[2], u[0]*v[1]-u[1]*v[0]))

# -----------------------------------------------------------------------------
# A zero vector is returned unchanged.
#
def normalize_vector(v):

  d = length(v)
  if d == 0:
    return tuple(v)
  return tuple(e/d for e in v)

# -----------------------------------------------------------------------------
#
def length(v):

  from math import sqrt
  return sqrt(sum(e*e for e in v))
