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
Basic Usage
-----------

The DecoLabel library exports its main API via ``decolabel`` module.

A stop schedule, i.e. taken from a dive planner, is validated by
schedule validation engine created with :func:`~decolabel.create`
function. Having the engine, we need to configure maximum depth of
a dive and carried gas mixes::

    >>> import decolabel
    >>> engine = decolabel.create()
    >>> engine.max_depth = 39
    >>> engine.add_gas('21')
    >>> engine.add_gas('50')
    >>> engine.add_gas('O2')

The engine calculation method returns an iterator of engine steps - one
step for every schedule stop::

    >>> stops = [
    ...     decolabel.Stop(21, 1, 26, '50'),
    ...     decolabel.Stop(6, 5, 40, 'O2'),
    ... ]
    >>> for step in engine.calculate(stops):
    ...     print(step.no, step.stop, round(step.ppo2, 2))
    1 Stop(depth=21, time=1, trt=26, gas='50') 1.55
    2 Stop(depth=6, time=5, trt=40, gas='100') 1.6

After the iterator is exhausted, schedule validation findings, oxygen
exposure and gas usage are available::

    >>> engine.checks.errors
    []
    >>> engine.schedule.runtime
    40
    >>> round(engine.exposure.cns)
    12

JSON-like Interface
-------------------
The :func:`~decolabel.dive_label` function accepts validation request
dictionary and returns validation findings, computed values and printable
label text. The :func:`~decolabel.import_log` function derives stop
schedule from Subsurface dive log.
"""

from .engine import Engine, Stop, create
from .plan import dive_label, parse_plan
from .subsurface import import_log
from .error import DecoLabelError, ConfigError, LogError

__version__ = '0.1.0'

__all__ = [
    'create', 'dive_label', 'import_log', 'parse_plan', 'Engine', 'Stop',
    'DecoLabelError', 'ConfigError', 'LogError',
]

# vim: sw=4:et:ai
