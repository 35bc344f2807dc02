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
Gas physics functions.

Sea water approximation is used - every 10m of depth increases ambient
pressure by 1 atmosphere.
"""


def ata_at_depth(depth):
    """
    Calculate absolute ambient pressure at depth [ata].

    :param depth: Depth [m].
    """
    return depth / 10 + 1


def ppo2_at_depth(fo2, depth):
    """
    Calculate partial pressure of oxygen at depth [ata].

    :param fo2: Fraction of oxygen in gas mix.
    :param depth: Depth [m].
    """
    return fo2 * ata_at_depth(depth)


def mod_for_fo2(fo2, ppo2_limit):
    """
    Calculate maximum operating depth of a gas mix [m].

    :param fo2: Fraction of oxygen in gas mix.
    :param ppo2_limit: Partial pressure of oxygen limit [ata].
    """
    return (ppo2_limit / fo2 - 1) * 10


# vim: sw=4:et:ai
