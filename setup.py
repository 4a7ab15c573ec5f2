#
# This setup.py file builds the volslice package for installation in a
# standard Python distribution.
#
#   pip install .
#   pip install -e .[test]
#
# The package sources live in src/ and are installed as the volslice package,
# the same way bundle sources are laid out.
#
from setuptools import setup

# Use README.md as long_description
import os.path
dir = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(dir, 'README.md')) as f:
    long_description = f.read()

setup(
    name = 'volslice',

    packages = ['volslice', 'volslice.geometry'],
    package_dir = {'volslice': 'src', 'volslice.geometry': 'src/geometry'},

    # Brief description
    description = "Range of slice positions through volume data along a view direction",

    # Long description
    long_description = long_description,
    long_description_content_type = "text/markdown",

    version = '1.0.0',
    license = 'LGPL-2.1',

    python_requires = '>=3.9',
    install_requires = [
        'numpy',                # Coordinate arrays and transform matrices
        'appdirs',              # Location of the settings file
        'packaging',            # Settings file version numbers
    ],
    extras_require = {
        'test': ['pytest'],
    },

    classifiers = [
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Science/Research',
        'Programming Language :: Python :: 3',
    ],
)
