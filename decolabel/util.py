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

"""
DecoLabel various utilities.
"""

import csv


def write_csv(f, schedule):
    """
    Write schedule stops into a CSV file.

    :Parameters:
     f
        File object.
     schedule
        Collection of schedule stops.
    """
    fcsv = csv.writer(f)
    fcsv.writerow(['depth', 'stop', 'trt', 'gas'])
    for s in schedule:
        fcsv.writerow([s.depth, s.time, s.trt, s.gas])


# vim: sw=4:et:ai
