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
DecoLabel engine mods.

The mods are coroutine classes receiving engine steps during engine
calculation. Implemented mods

- schedule validator
- oxygen exposure counter (OTU and CNS)
- gas usage counter

Create mod object, then call it to start the coroutine.
"""

from collections import OrderedDict
import logging

from .const import EPSILON
from .exposure import otu, cns
from .flow import coroutine
from .ft import num_str, key_order
from .usage import litres_used

logger = logging.getLogger(__name__)


class ScheduleValidator(object):
    """
    Schedule integrity validator (coroutine class).

    The validator verifies that

    #. Total running time is strictly increasing. Only first violation is
       reported.
    #. Gas mix of a stop is carried.
    #. PPO2 of a stop does not exceed decompression PPO2 limit.
    #. Depth of a stop is not deeper than maximum operating depth of its
       gas mix.

    The violations are added to engine's validation errors when the
    validator is closed. The errors are grouped by the check - total
    running time violation first, then gas mixes not carried, then PPO2
    and maximum operating depth violations of every row.

    :var engine: DecoLabel schedule validation engine.
    """
    def __init__(self, engine):
        """
        Create coroutine object.

        :param engine: DecoLabel schedule validation engine.
        """
        self.engine = engine


    @coroutine
    def __call__(self):
        """
        Start the coroutine.
        """
        logger.debug('started schedule validator')

        engine = self.engine
        limit = engine.ppo2_deco
        carried = set(engine.gas_list)
        trt_errors = []
        gas_errors = []
        limit_errors = []
        prev = None

        try:
            while True:
                step = yield
                stop = step.stop

                if not trt_errors and prev is not None and stop.trt <= prev.trt:
                    trt_errors.append(
                        'TRT must be strictly increasing (row {}).'
                        .format(step.no)
                    )
                prev = stop

                if stop.gas not in carried:
                    gas_errors.append(
                        'Row {}: gas "{}" not in gasesCarried.'
                        .format(step.no, stop.gas)
                    )

                if step.ppo2 > limit + EPSILON:
                    limit_errors.append(
                        'Row {}: PPO2 {:.2f} exceeds deco limit {}.'
                        .format(step.no, step.ppo2, num_str(limit))
                    )

                if stop.depth > step.mod + EPSILON:
                    limit_errors.append(
                        'Row {}: depth {}m deeper than MOD {:.1f}m for gas {}'
                        ' at PPO2 {}.'.format(
                            step.no, num_str(stop.depth), step.mod, stop.gas,
                            num_str(limit)
                        )
                    )
        except GeneratorExit:
            engine.checks.errors.extend(trt_errors + gas_errors + limit_errors)



class Exposure(object):
    """
    Oxygen exposure counter (coroutine class).

    :var otu: Total oxygen toxicity units.
    :var cns: Total CNS oxygen toxicity percentage.
    """
    def __init__(self):
        self.otu = 0
        self.cns = 0


    @coroutine
    def __call__(self):
        """
        Start the coroutine.
        """
        self.otu = self.cns = 0
        while True:
            step = yield
            time = step.stop.time
            self.otu += otu(step.ppo2, time)
            self.cns += cns(step.ppo2, time)



class GasUsage(object):
    """
    Gas usage counter (coroutine class).

    The gas used before the first stop (working phase) is estimated as if
    the whole time before the first stop was spent at maximum depth of
    a dive, breathing gas mix of the first stop. Working phase gas usage
    uses working SAC rate, all stops use decompression SAC rate.

    :var engine: DecoLabel schedule validation engine.
    Once the counter is closed, the gas mixes are ordered with
    :func:`~decolabel.ft.key_order`.

    :var litres: Gas usage per gas mix [l].
    """
    def __init__(self, engine):
        """
        Create coroutine object.

        :param engine: DecoLabel schedule validation engine.
        """
        self.engine = engine
        self.litres = OrderedDict()


    def _add(self, gas, litres):
        self.litres[gas] = self.litres.get(gas, 0) + litres


    @coroutine
    def __call__(self):
        """
        Start the coroutine.
        """
        engine = self.engine
        self.litres = OrderedDict()

        step = yield
        checks = engine.checks
        first = step.stop
        time = first.trt - first.time
        if time <= 0:
            checks.warnings.append(
                'Pre-first-stop working time computed as {} min (check'
                ' TRT/Stop values).'.format(num_str(time))
            )

        v = litres_used(engine.sac_working, engine.max_depth, max(0, time))
        self._add(first.gas, v)
        checks.info.append(
            'Working gas assumes conservative: {} min at max depth ({}m).'
            .format(num_str(time), num_str(engine.max_depth))
        )

        if __debug__:
            logger.debug('working phase: {}min, {:.1f}l of {}'.format(
                time, v, first.gas
            ))

        try:
            while True:
                stop = step.stop
                self._add(
                    stop.gas, litres_used(engine.sac_deco, stop.depth, stop.time)
                )
                step = yield
        except GeneratorExit:
            self.litres = key_order(self.litres)


# vim: sw=4:et:ai
