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
Parsers of dive log tokens and gas mix labels.

Dive log values are noisy, so duration and depth parsers never fail - zero
is returned for an unparseable value. The gas mix parser returns `nan` for
unknown gas mix, which has to be handled by a caller.

Gas mix label formats

- oxygen percentage, i.e. ``21``, ``50``, ``100`` (or ``O2``)
- binary mix, oxygen percentage first, i.e. ``21/35``
- trimix, i.e. ``Tx18/45``
"""

import math
import re

from .ft import round_half
from .error import ConfigError

RE_MMSS = re.compile(r'(\d+):(\d+)')
RE_MIN = re.compile(r'(\d+(?:\.\d+)?)\s*min', re.I)
RE_DEPTH = re.compile(r'(-?\d+(?:\.\d+)?)\s*m', re.I)

RE_PERCENT = re.compile(r'^\d+(?:\.\d+)?$')
RE_BINARY = re.compile(r'^(\d+(?:\.\d+)?)/(\d+(?:\.\d+)?)$')
RE_TRIMIX = re.compile(r'^TX(\d+(?:\.\d+)?)/(\d+(?:\.\d+)?)$', re.I)


def _number(s):
    """
    Convert string to finite number or return `nan`.
    """
    try:
        v = float(s)
    except ValueError:
        return math.nan
    return v if math.isfinite(v) else math.nan


def parse_duration(raw):
    """
    Parse duration of dive log into seconds.

    Supported formats, in order of precedence

    - ``MM:SS``, optionally followed by ``min``, i.e. ``54:13 min``
    - minutes, i.e. ``12 min`` or ``2.5 min``
    - seconds, i.e. ``120``

    Zero is returned if a value cannot be parsed.

    :param raw: Duration value, usually a string.
    """
    if raw is None:
        return 0
    s = str(raw).strip()

    m = RE_MMSS.search(s)
    if m:
        return int(m.group(1)) * 60 + int(m.group(2))

    m = RE_MIN.search(s)
    if m:
        return round_half(float(m.group(1)) * 60)

    v = _number(s) if s else 0
    return 0 if math.isnan(v) else v


def parse_depth(raw):
    """
    Parse depth of dive log into meters, i.e. ``55.0 m``.

    Zero is returned if a value cannot be parsed.

    :param raw: Depth value, usually a string.
    """
    if raw is None:
        return 0
    s = str(raw).strip()

    m = RE_DEPTH.search(s)
    if m:
        return float(m.group(1))

    v = _number(s) if s else 0
    return 0 if math.isnan(v) else v


def parse_percent(raw):
    """
    Parse percentage value like ``50.0%`` or ``32``.

    Return `nan` for empty or unparseable value.

    :param raw: Percentage value.
    """
    if raw is None:
        return math.nan
    s = str(raw).replace('%', '').strip()
    return _number(s) if s else math.nan


def normalize_gas(gas):
    """
    Normalize gas mix label.

    The label is stripped and converted to uppercase. Pure oxygen ``O2``
    label is converted into ``100``.

    :param gas: Gas mix label.
    """
    s = gas.strip().upper()
    return '100' if s == 'O2' else s


def parse_o2(gas):
    """
    Extract oxygen percentage from gas mix label.

    Return `nan` if gas mix label format is unknown.

    :param gas: Gas mix label.
    """
    s = normalize_gas(gas)
    if RE_PERCENT.match(s):
        return float(s)

    m = RE_BINARY.match(s) or RE_TRIMIX.match(s)
    if m:
        return float(m.group(1))

    return math.nan


def parse_fo2(gas):
    """
    Calculate fraction of oxygen of a gas mix.

    Return `nan` if gas mix label format is unknown.

    >>> parse_fo2('Tx18/45')
    0.18

    :param gas: Gas mix label.
    """
    return parse_o2(gas) / 100


def gas_fo2(gas):
    """
    Calculate fraction of oxygen of a gas mix.

    Unlike :func:`parse_fo2`, the `ConfigError` exception is raised for
    unknown gas mix label or invalid oxygen percentage.

    :param gas: Gas mix label.
    """
    o2 = parse_o2(gas)
    if math.isnan(o2):
        raise ConfigError('Unrecognized gas format: {}'.format(gas))
    if not 0 < o2 <= 100:
        raise ConfigError('Invalid gas oxygen percentage: {}'.format(gas))
    return o2 / 100


def is_trimix(gas):
    """
    Check if gas mix label is trimix label, i.e. ``Tx18/45``.

    :param gas: Gas mix label.
    """
    return RE_TRIMIX.match(gas.strip()) is not None


# vim: sw=4:et:ai
