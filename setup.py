#!/usr/bin/env python3
#
# DecoLabel - dive stop schedule validation library.
#
# Copyright (C) 2026 by DecoLabel Team
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

from setuptools import setup, find_packages

import decolabel

setup(
    name='decolabel',
    version=decolabel.__version__,
    description='DecoLabel - dive stop schedule validation library',
    author='DecoLabel Team',
    packages=find_packages('.'),
    scripts=('bin/dl-import', 'bin/dl-label'),
    include_package_data=True,
    long_description=\
"""\
DecoLabel is Python library to validate dive stop schedules against gas
physics limits, calculate oxygen exposure and gas usage, print schedule
labels and derive stop schedules from Subsurface dive logs.
""",
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
    ],
    keywords='diving dive decompression oxygen exposure subsurface',
    license='GPL',
    python_requires='>=3.5',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'sphinx_rtd_theme'],
    },
)

# vim: sw=4:et:ai
