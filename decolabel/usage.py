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
Gas consumption estimation.
"""

from .physics import ata_at_depth


def litres_used(sac, depth, time):
    """
    Calculate volume of gas consumed at depth [l].

    :param sac: Surface air consumption rate [l/min].
    :param depth: Depth [m].
    :param time: Time at depth [min].
    """
    return sac * ata_at_depth(depth) * time


# vim: sw=4:et:ai
