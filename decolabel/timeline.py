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
Gas mix timeline reconstruction.

Dive computers record gas switches as events, i.e. Subsurface stores them
as::

    <event time='23:42 min' type='25' value='50' name='gaschange' o2='50.0%' />

The timeline maps dive time to gas mix in use, starting with default gas
mix at the beginning of a dive.
"""

import bisect
import logging
import math
from collections import namedtuple

from .const import EPSILON
from .ft import round_half
from .parse import parse_duration, parse_percent, parse_fo2
from .physics import ppo2_at_depth
from .scan import first_of

logger = logging.getLogger(__name__)

GasChange = namedtuple('GasChange', 'time o2')
GasChange.__doc__ = """
Gas mix switch event.

:var time: Time of gas mix switch [s].
:var o2: Oxygen percentage of gas mix.
"""


def is_gas_change(event):
    """
    Check if dive log event is gas mix switch event.

    :param event: Dive log event node.
    """
    name = first_of(event, 'name')
    return str(name if name is not None else '').lower() == 'gaschange'


def event_o2(event):
    """
    Get oxygen percentage of gas mix switch event.

    Return `nan` if oxygen percentage is missing or invalid.

    :param event: Dive log event node.
    """
    o2 = parse_percent(first_of(event, 'o2', 'O2', 'oxygen'))
    return o2 if 0 < o2 <= 100 else math.nan


def gas_changes(events):
    """
    Extract gas mix switch events from dive log events.

    Events without valid oxygen percentage or with negative time are
    skipped. The gas mix switches are sorted by time.

    :param events: Collection of dive log event nodes.
    """
    changes = (
        GasChange(parse_duration(first_of(e, 'time')), event_o2(e))
        for e in events if is_gas_change(e)
    )
    changes = [c for c in changes if c.time >= 0 and not math.isnan(c.o2)]
    changes.sort(key=lambda c: c.time)
    return changes


class GasTimeline(object):
    """
    Gas mix timeline.

    The timeline is ordered list of `(time, gas)` entries. The first entry
    is default gas mix at time 0s.

    :var entries: List of timeline entries.
    """
    def __init__(self, default_gas, changes=()):
        """
        Create gas mix timeline.

        :param default_gas: Gas mix used at the beginning of a dive.
        :param changes: Gas mix switches sorted by time.
        """
        self.entries = [(0, default_gas)]
        self.entries.extend((c.time, str(round_half(c.o2))) for c in changes)
        self._times = [t for t, _ in self.entries]

        if __debug__:
            logger.debug('gas timeline: {}'.format(self.entries))


    @classmethod
    def from_events(cls, events, default_gas):
        """
        Create gas mix timeline from dive log events.

        :param events: Collection of dive log event nodes.
        :param default_gas: Gas mix used at the beginning of a dive.
        """
        return cls(default_gas, gas_changes(events))


    @property
    def default_gas(self):
        """
        Gas mix used at the beginning of a dive.
        """
        return self.entries[0][1]


    def _index(self, time):
        """
        Find index of the latest timeline entry at or before specified
        time.

        :param time: Dive time [s].
        """
        return max(0, bisect.bisect_right(self._times, time) - 1)


    def gas_at(self, time):
        """
        Find gas mix in use at specified time of a dive.

        :param time: Dive time [s].
        """
        return self.entries[self._index(time)][1]


    def breathable_gas_at(self, time, depth, ppo2_limit):
        """
        Find breathable gas mix in use at specified time and depth of
        a dive.

        Starting with gas mix in use at specified time, search for
        previous gas mixes until one does not exceed PPO2 limit at
        specified depth. Gas mixes of unknown format are skipped.

        The first gas mix of the timeline is returned if no gas mix
        satisfies the PPO2 limit.

        :param time: Dive time [s].
        :param depth: Depth [m].
        :param ppo2_limit: Partial pressure of oxygen limit.
        """
        for _, gas in reversed(self.entries[:self._index(time) + 1]):
            fo2 = parse_fo2(gas)
            if math.isnan(fo2):
                continue
            if ppo2_at_depth(fo2, depth) <= ppo2_limit + EPSILON:
                return gas

        logger.warning(
            'no breathable gas at {}s, {}m, using {}'
            .format(time, depth, self.default_gas)
        )
        return self.default_gas


# vim: sw=4:et:ai
