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
Catalog of gas mixes carried during a dive.

Gas mixes are collected from dive log cylinder declarations and gas mix
switch events. Cylinders declare helium content, while gas mix switch
events usually do not, therefore trimix label is preferred over oxygen
percentage label, i.e. ``Tx18/45`` is used instead of ``18``.
"""

import logging
import math

from .ft import round_half
from .parse import parse_percent, parse_o2, is_trimix
from .scan import first_of
from .timeline import is_gas_change, event_o2

logger = logging.getLogger(__name__)


def cylinder_gas(cylinder):
    """
    Get gas mix label of a cylinder.

    Trimix label is returned for a cylinder with helium, oxygen
    percentage label otherwise. `None` is returned if cylinder has no
    valid oxygen percentage.

    :param cylinder: Dive log cylinder node.
    """
    o2 = parse_percent(first_of(cylinder, 'o2'))
    if math.isnan(o2):
        return None

    he = parse_percent(first_of(cylinder, 'he', 'He', 'helium'))
    if he > 0:
        return 'Tx{}/{}'.format(round_half(o2), round_half(he))
    return str(round_half(o2))


def _o2(gas):
    """
    Get rounded oxygen percentage of oxygen percentage label or `None` for
    other labels.
    """
    try:
        v = float(gas)
    except ValueError:
        return None
    return round_half(v) if math.isfinite(v) else None


def _sort_key(gas):
    # trimix first, then oxygen percentage ascending
    if is_trimix(gas):
        return (0, 0)
    try:
        return (1, float(gas))
    except ValueError:
        return (1, math.inf)


class GasCatalog(object):
    """
    Catalog of gas mixes carried during a dive.

    :var gases: List of gas mix labels.
    :var trimix: Oxygen percentage to trimix label mapping.
    """
    def __init__(self, gases):
        """
        Create gas mix catalog.

        The gas mix labels are deduplicated and sorted. Oxygen percentage
        label is removed if there is a trimix label with the same oxygen
        percentage.

        :param gases: Collection of gas mix labels.
        """
        gases = (g.strip() for g in gases)
        gases = list(dict.fromkeys(g for g in gases if g))
        gases.sort(key=_sort_key)

        self.trimix = {}
        for g in gases:
            if is_trimix(g):
                self.trimix.setdefault(round_half(parse_o2(g)), g)

        self.gases = [g for g in gases if _o2(g) not in self.trimix]

        if __debug__:
            logger.debug('gas catalog: {}'.format(self.gases))


    def prefer(self, gas):
        """
        Replace oxygen percentage label with trimix label of the same
        oxygen percentage, if such trimix exists in the catalog.

        :param gas: Gas mix label.
        """
        return self.trimix.get(_o2(gas), gas)


def build_catalog(cylinders, events, default_gas):
    """
    Build catalog of gas mixes carried during a dive.

    :param cylinders: Collection of dive log cylinder nodes.
    :param events: Collection of dive log event nodes.
    :param default_gas: Gas mix used at the beginning of a dive.
    """
    gases = [default_gas]
    gases.extend(g for g in map(cylinder_gas, cylinders) if g)
    o2 = (event_o2(e) for e in events if is_gas_change(e))
    gases.extend(str(round_half(v)) for v in o2 if not math.isnan(v))
    return GasCatalog(gases)


# vim: sw=4:et:ai
