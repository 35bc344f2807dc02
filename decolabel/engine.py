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
DecoLabel schedule validation engine.

The engine sorts stops of a schedule and calculates oxygen partial
pressure and maximum operating depth for every stop. The results are sent
as engine steps to the engine mods

- schedule validator to check schedule integrity
- oxygen exposure counter
- gas usage counter
"""

from collections import namedtuple, OrderedDict
import logging

from .error import ConfigError
from .flow import sender
from .ft import key_order
from .mod import ScheduleValidator, Exposure, GasUsage
from .parse import normalize_gas, gas_fo2
from .physics import ppo2_at_depth, mod_for_fo2
from . import const

logger = logging.getLogger(__name__)

Stop = namedtuple('Stop', 'depth time trt gas')
Stop.__doc__ = """
Schedule stop.

:var depth: Depth of the stop [m].
:var time: Length of the stop [min].
:var trt: Total running time at the end of the stop [min].
:var gas: Gas mix label.
"""

Step = namedtuple('Step', 'no stop fo2 ppo2 mod')
Step.__doc__ = """
Engine step - schedule stop with gas physics information.

:var no: Row number of the stop in sorted schedule, starting with 1.
:var stop: Schedule stop.
:var fo2: Fraction of oxygen in gas mix.
:var ppo2: Partial pressure of oxygen at depth of the stop.
:var mod: Maximum operating depth of the gas mix for decompression PPO2
    limit.
"""


class Checks(object):
    """
    Findings of schedule validation.

    :var errors: Schedule integrity violations.
    :var warnings: Suspicious, but non-fatal findings.
    :var info: Assumptions made during calculations.
    """
    def __init__(self):
        self.errors = []
        self.warnings = []
        self.info = []


    @property
    def banner(self):
        """
        Label banner text or `None` if there are no errors nor warnings.
        """
        if self.errors:
            return 'ERRORS PRESENT'
        elif self.warnings:
            return 'WARNINGS PRESENT'
        return None


    def as_dict(self):
        return {
            'errors': list(self.errors),
            'warnings': list(self.warnings),
            'info': list(self.info),
        }



class Schedule(list):
    """
    Sorted list of schedule stops.

    The stops are sorted by depth (descending) and total running time.
    """
    @property
    def runtime(self):
        """
        Total running time of a dive [min].
        """
        return self[-1].trt if self else 0



class Engine(object):
    """
    DecoLabel schedule validation engine.

    :var max_depth: Maximum depth of a dive [m].
    :var ppo2_working: PPO2 limit of working phase of a dive.
    :var ppo2_deco: PPO2 limit of decompression phase of a dive.
    :var sac_working: Surface air consumption rate of working phase of
        a dive [l/min].
    :var sac_deco: Surface air consumption rate of decompression phase of
        a dive [l/min].
    :var gf_low: Gradient factor low [%], optional.
    :var gf_high: Gradient factor high [%], optional.
    :var schedule: Sorted schedule, available after calculation.
    :var checks: Schedule validation findings.
    :var exposure: Oxygen exposure counter.
    :var gas_usage: Gas usage counter.
    :var _gas_list: List of carried gas mixes.
    """
    def __init__(self):
        super().__init__()
        self.max_depth = None
        self.ppo2_working = const.PPO2_WORKING
        self.ppo2_deco = const.PPO2_DECO
        self.sac_working = const.SAC_WORKING
        self.sac_deco = const.SAC_DECO
        self.gf_low = None
        self.gf_high = None

        self.schedule = Schedule()
        self.checks = Checks()
        self.exposure = Exposure()
        self.gas_usage = GasUsage(self)

        self._gas_list = []


    @property
    def gas_list(self):
        """
        List of carried gas mixes (normalized labels).
        """
        return list(self._gas_list)


    def add_gas(self, gas):
        """
        Add carried gas mix.

        The gas mix label is normalized. The `ConfigError` exception is
        raised for unknown gas mix label.

        :param gas: Gas mix label, i.e. ``21``, ``O2``, ``Tx18/45``.
        """
        gas = normalize_gas(gas)
        gas_fo2(gas)
        self._gas_list.append(gas)


    def mod_table(self):
        """
        Calculate maximum operating depth for decompression PPO2 limit of
        every carried gas mix.

        The gas mixes are ordered with :func:`~decolabel.ft.key_order`.
        """
        mods = OrderedDict(
            (g, mod_for_fo2(gas_fo2(g), self.ppo2_deco))
            for g in self._gas_list
        )
        return key_order(mods)


    def _sort_schedule(self, stops):
        """
        Normalize gas mix labels of schedule stops and sort the stops by
        depth (descending) and total running time.

        :param stops: Collection of schedule stops.
        """
        stops = (s._replace(gas=normalize_gas(s.gas)) for s in stops)
        return Schedule(sorted(stops, key=lambda s: (-s.depth, s.trt)))


    def _validate_config(self):
        """
        Validate engine configuration.

        `ConfigError` is raised if configuration is invalid.
        """
        if not self._gas_list:
            raise ConfigError('No gas mix configured')
        if self.max_depth is None or self.max_depth <= 0:
            raise ConfigError('Maximum depth has to be greater than 0m')


    def calculate(self, stops):
        """
        Calculate gas physics information for schedule stops.

        Iterator of engine steps is returned. The sorted schedule is
        available via `schedule` attribute once the calculation starts.
        Validation findings are reset when the calculation starts.

        :param stops: Collection of schedule stops.
        """
        self._validate_config()
        self.checks = Checks()

        schedule = self.schedule = self._sort_schedule(stops)
        if not schedule:
            raise ConfigError('Schedule has no stops')

        fo2 = [gas_fo2(s.gas) for s in schedule]

        if __debug__:
            logger.debug(
                'calculate {} stop(s), ppo2 deco limit {}'
                .format(len(schedule), self.ppo2_deco)
            )

        for k, (stop, f) in enumerate(zip(schedule, fo2), 1):
            ppo2 = ppo2_at_depth(f, stop.depth)
            mod = mod_for_fo2(f, self.ppo2_deco)
            yield Step(k, stop, f, ppo2, mod)



def create(validate=True):
    """
    Create schedule validation engine.

    The engine mods (oxygen exposure and gas usage counters) receive
    engine steps during calculation. The schedule validator is enabled
    by default.

    :param validate: Validate schedule with schedule validator.
    """
    engine = Engine()

    pipeline = [engine.exposure, engine.gas_usage]
    if validate:
        pipeline.insert(0, ScheduleValidator(engine))
    engine.calculate = sender(engine.calculate, *pipeline)

    return engine


# vim: sw=4:et:ai
