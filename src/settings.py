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

"""
settings: slice range preferences
=================================

Defaults used by :py:func:`~volslice.slicerange.compute_slice_range`.

zero_direction
    A zero length view direction raises
    :py:class:`~volslice.errors.ZeroDirectionError` for 'error', or is
    measured along the world x axis for 'identity'.
report_range
    Log every computed range to the volslice logger at INFO level when
    no log is passed in.
"""

from .configfile import ConfigFile, Value
from .errors import ConfigurationError

ZERO_DIRECTION_POLICIES = ('error', 'identity')

def _zero_direction_from_str(text):
    policy = text.strip().lower()
    if policy not in ZERO_DIRECTION_POLICIES:
        raise ValueError('zero_direction must be one of %s, got "%s"'
                         % (', '.join(ZERO_DIRECTION_POLICIES), text))
    return policy


class SliceRangeSettings(ConfigFile):

    PROPERTY_INFO = {
        'zero_direction': Value('error', _zero_direction_from_str, str),
        'report_range': Value(False),
    }

    def __init__(self, config_dir=None, logger=None):
        ConfigFile.__init__(self, 'Slice Range', '1', config_dir=config_dir, logger=logger)


def default_value(name):
    '''Default of a slice range setting, no file is read.'''
    return SliceRangeSettings.PROPERTY_INFO[name].default


_settings = None
_settings_dir = None
def get_settings(config_dir=None):
    '''
    Return the shared settings, reading the file on first use.  Asking
    again for a different config_dir raises ConfigurationError since the
    shared settings are already bound to a file.
    '''
    global _settings, _settings_dir
    if _settings is None:
        _settings = SliceRangeSettings(config_dir)
        _settings_dir = config_dir
    elif config_dir is not None and config_dir != _settings_dir:
        raise ConfigurationError('Settings already read from %s, cannot switch to %s'
                                 % (_settings.filename, config_dir))
    return _settings
