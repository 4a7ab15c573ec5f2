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
configfile: settings kept in an ini file
========================================

Each tool declares its settings in a ``PROPERTY_INFO`` dictionary on a
:py:class:`ConfigFile` subclass and reads and assigns them as attributes.
Values are stored in the ``[DEFAULT]`` section of an ini file in the user
config directory, one file per tool and settings *MAJOR* version::

    class _MySettings(configfile.ConfigFile):

        PROPERTY_INFO = {
            'mode': 'fast',
            'scale': configfile.Value(1.0, float, repr),
        }

        def __init__(self, config_dir=None):
            ConfigFile.__init__(self, "My Tool", config_dir=config_dir)

A property is a Python literal default, or a :py:class:`Value` with a
default and functions converting to and from the stored text.  Properties
equal to their default are left out of the file.
"""

import logging

from .errors import ConfigurationError

only_use_defaults = False   # True to neither read nor write settings files

log = logging.getLogger('volslice')


class ConfigFile:
    """Settings of one tool backed by an ini file.

    Parameters
    ----------
    tool_name : the name of the tool, used in the file name
    version : settings version, optional
        Only the major part goes in the file name.
    config_dir : directory of the file, optional
        Defaults to the appdirs user config directory.
    logger : object with warning() and error() methods, optional
        Told about unreadable files and values.  Defaults to the
        volslice logger.

    Attributes
    ----------
    PROPERTY_INFO : dict of property name to a literal or :py:class:`Value`
    filename : path of the settings file, None if only defaults are used
    """

    PROPERTY_INFO = {}

    def __init__(self, tool_name, version="1", config_dir=None, logger=None):
        self._on_disk = False
        self._tool_name = tool_name
        self._logger = log if logger is None else logger
        self._filename = None
        for name in self.PROPERTY_INFO:
            assert not hasattr(type(self), name), 'property %s hides a method' % name
        for name, value in self.PROPERTY_INFO.items():
            if not isinstance(value, Value):
                self.PROPERTY_INFO[name] = Value(value)

        if only_use_defaults:
            return

        import configparser
        import os
        from packaging.version import Version
        major = Version(str(version)).major
        if config_dir is None:
            from appdirs import AppDirs
            config_dir = AppDirs('volslice', appauthor=False).user_config_dir
        self._filename = os.path.join(config_dir, '%s-%s' % (tool_name, major))
        self._config = configparser.ConfigParser(comment_prefixes=(), interpolation=None)
        if os.path.exists(self._filename):
            self._on_disk = True
            try:
                self._config.read(self._filename, encoding='utf-8')
            except configparser.Error as e:
                self._logger.error('Could not read %s settings file "%s" (%s), using defaults'
                                   % (tool_name, self._filename, e))
            # warn now about values that cannot be used
            for name in self.PROPERTY_INFO:
                getattr(self, name)

    def on_disk(self):
        """Was an existing settings file read."""
        return self._on_disk

    @property
    def filename(self):
        return self._filename

    def save(self):
        """Write the settings file, replacing the old one in one step."""
        if only_use_defaults:
            raise ConfigurationError("Custom configuration is disabled")
        import os
        os.makedirs(os.path.dirname(self._filename), exist_ok=True)
        tmp = self._filename + '.tmp'
        with open(tmp, 'w', encoding='utf-8') as f:
            self._config.write(f)
        os.replace(tmp, self._filename)

    def __getattr__(self, name):
        if name not in self.PROPERTY_INFO:
            raise AttributeError(name)
        info = self.PROPERTY_INFO[name]
        if only_use_defaults or name not in self._config['DEFAULT']:
            return info.default
        try:
            return info.convert_from_string(self._config['DEFAULT'][name])
        except ValueError as e:
            self._logger.warning("Invalid %s '%s' value, using default: %s"
                                 % (self._tool_name, name, e))
            return info.default

    def __setattr__(self, name, value):
        if name.startswith('_'):
            return object.__setattr__(self, name, value)
        if name not in self.PROPERTY_INFO:
            raise AttributeError("Unknown property name: %s" % name)
        if only_use_defaults:
            raise ConfigurationError("Custom configuration is disabled")
        info = self.PROPERTY_INFO[name]
        section = self._config['DEFAULT']
        if value == info.default:
            if name not in section:
                return
            del section[name]
        else:
            try:
                section[name] = info.convert_to_string(value)
            except ValueError:
                raise ConfigurationError("Illegal %s '%s' value %s, leaving it unchanged"
                                         % (self._tool_name, name, repr(value)))
        self.save()


class Value:
    """Default value of a property and its text conversions.

    Parameters
    ----------
    default : value used when the property is not in the file
    from_str : function, optional
        Parses the stored text, raising ValueError for text it cannot use.
        Defaults to :py:func:`ast.literal_eval`.
    to_str : function, optional
        Makes the stored text.  Defaults to :py:func:`repr`.
    """

    def __init__(self, default, from_str=None, to_str=None):
        self.default = default
        if from_str is None:
            import ast
            from_str = ast.literal_eval
        self.from_str = from_str
        self.to_str = repr if to_str is None else to_str

    def convert_from_string(self, str_value):
        try:
            return self.from_str(str_value)
        except SyntaxError as e:
            raise ValueError(str(e))

    def convert_to_string(self, value):
        str_value = self.to_str(value)
        # the stored text must read back as the same value
        if self.convert_from_string(str_value) != value:
            raise ValueError('value changed while saving it')
        return str_value
