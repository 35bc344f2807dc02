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
DecoLabel numeric and ordering helpers.

Python's ``round`` implements banker's rounding, while dive log and label
values are rounded half away from zero, i.e. 2.5 -> 3 and -2.5 -> -3.
"""

from collections import OrderedDict
import math
import re

RE_INTEGER_KEY = re.compile(r'^(?:0|[1-9]\d*)$')


def round_half(v):
    """
    Round a number to nearest integer, half away from zero.

    :param v: Number to round.
    """
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


def round_to(v, step):
    """
    Round a number to nearest multiple of `step`.

    Integer is returned for integer step, i.e. rounding depth to 1m.

    :param v: Number to round.
    :param step: Rounding step.
    """
    return round_half(v / step) * step


def num_str(v):
    """
    Convert number to string the way it is displayed by a JavaScript
    client, i.e. integral float is displayed without decimal part.

    :param v: Number to convert.
    """
    if isinstance(v, float) and v.is_integer():
        v = int(v)
    return str(v)


def key_order(mapping):
    """
    Order mapping keys the way a JSON client orders object keys.

    Integer keys, i.e. ``21`` or ``100``, come first in ascending order.
    Other keys, i.e. ``TX18/45``, follow in insertion order.

    >>> list(key_order({'100': 6, 'TX18/45': 66, '21': 66}))
    ['21', '100', 'TX18/45']

    :param mapping: Mapping with string keys.
    """
    keys = [k for k in mapping if RE_INTEGER_KEY.match(k)]
    keys.sort(key=int)
    keys.extend(k for k in mapping if not RE_INTEGER_KEY.match(k))
    return OrderedDict((k, mapping[k]) for k in keys)


# vim: sw=4:et:ai
