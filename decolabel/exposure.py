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
Oxygen exposure calculations.

Two oxygen toxicity metrics are calculated

- pulmonary oxygen toxicity units (OTU)
- central nervous system oxygen toxicity (CNS) percentage using NOAA
  oxygen exposure limits
"""

import bisect
import math

from .const import OTU_PPO2_MIN, OTU_EXPONENT, CNS_LIMITS

_CNS_PPO2 = tuple(p for p, _ in CNS_LIMITS)


def otu(ppo2, time):
    """
    Calculate oxygen toxicity units for exposure at constant PPO2.

    :param ppo2: Partial pressure of oxygen [ata].
    :param time: Time of exposure [min].
    """
    if time <= 0 or ppo2 <= OTU_PPO2_MIN:
        return 0
    return time * ((ppo2 - OTU_PPO2_MIN) / OTU_PPO2_MIN) ** OTU_EXPONENT


def cns_limit(ppo2):
    """
    Calculate NOAA oxygen exposure time limit for PPO2 [min].

    The limit is interpolated linearly between NOAA table values. There is
    no limit (`inf`) for PPO2 at or below 0.5, and the limit is 45 minutes
    at or above 1.6. Between 0.5 and 0.6 the 0.6 limit is used.

    :param ppo2: Partial pressure of oxygen [ata].
    """
    lo_p = CNS_LIMITS[0][0]
    hi_p, hi_t = CNS_LIMITS[-1]
    if ppo2 <= lo_p:
        return math.inf
    if ppo2 >= hi_p:
        return hi_t

    k = bisect.bisect_left(_CNS_PPO2, ppo2)
    (p1, t1), (p2, t2) = CNS_LIMITS[k - 1], CNS_LIMITS[k]
    if math.isinf(t1):
        return t2
    f = (ppo2 - p1) / (p2 - p1)
    return t1 + (t2 - t1) * f


def cns(ppo2, time):
    """
    Calculate CNS oxygen toxicity percentage for exposure at constant
    PPO2.

    :param ppo2: Partial pressure of oxygen [ata].
    :param time: Time of exposure [min].
    """
    if time <= 0:
        return 0
    limit = cns_limit(ppo2)
    if math.isinf(limit):
        return 0
    return time / limit * 100


# vim: sw=4:et:ai
