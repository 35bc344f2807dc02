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
Validation of a dive schedule provided by a user.

The validation request is a JSON-like dictionary, i.e.::

    {
        "maxDepthM": 39,
        "gasesCarried": ["21", "50", "O2"],
        "ppo2": {"working": 1.4, "deco": 1.6},
        "sac": {"workingLMin": 18, "decoLMin": 14},
        "gradientFactors": {"low": 30, "high": 85},
        "schedule": [
            {"depthM": 21, "stopMin": 1, "trtMin": 26, "gas": "50"},
            {"depthM": 6, "stopMin": 5, "trtMin": 40, "gas": "O2"}
        ],
        "notes": "Demo schedule"
    }

The request is parsed into :class:`Plan` object. Invalid request results
in `ConfigError` exception. Schedule integrity problems do not stop the
calculations - they are reported as validation findings.
"""

from collections import namedtuple
import logging
import math
import numbers

from .engine import Stop, create
from .error import ConfigError
from .label import label_text

logger = logging.getLogger(__name__)

Plan = namedtuple(
    'Plan',
    'max_depth gases ppo2_working ppo2_deco sac_working sac_deco gf'
    ' schedule notes'
)
Plan.__doc__ = """
Dive plan to validate.

:var max_depth: Maximum depth of a dive [m].
:var gases: Carried gas mixes.
:var ppo2_working: PPO2 limit of working phase of a dive.
:var ppo2_deco: PPO2 limit of decompression phase of a dive.
:var sac_working: Working phase SAC rate [l/min].
:var sac_deco: Decompression phase SAC rate [l/min].
:var gf: Gradient factors `(low, high)` or `None`.
:var schedule: List of schedule stops.
:var notes: Notes or `None`.
"""


def _is_number(v):
    return isinstance(v, numbers.Real) and not isinstance(v, bool) \
        and math.isfinite(v)


def _is_int(v):
    return _is_number(v) and float(v).is_integer()


def _get(data, key, path):
    if not isinstance(data, dict) or key not in data:
        raise ConfigError('{}{}: required'.format(path, key))
    return data[key]


def _number(data, key, path='', positive=True, lo=None, hi=None):
    v = _get(data, key, path)
    if not _is_number(v):
        raise ConfigError('{}{}: expected number'.format(path, key))
    if positive and v <= 0:
        raise ConfigError('{}{}: has to be greater than 0'.format(path, key))
    if lo is not None and v < lo:
        raise ConfigError('{}{}: has to be at least {}'.format(path, key, lo))
    if hi is not None and v > hi:
        raise ConfigError('{}{}: has to be at most {}'.format(path, key, hi))
    return v


def _string(v, path):
    if not isinstance(v, str) or not v:
        raise ConfigError('{}: expected non-empty string'.format(path))
    return v


def _list(data, key):
    v = _get(data, key, '')
    if not isinstance(v, list) or not v:
        raise ConfigError('{}: expected non-empty list'.format(key))
    return v


def parse_stop(data, path):
    """
    Parse schedule stop of validation request.

    :param data: Schedule stop data.
    :param path: Location of the stop in the request (for error messages).
    """
    depth = _number(data, 'depthM', path, positive=False, lo=0)
    time = _number(data, 'stopMin', path)
    trt = _number(data, 'trtMin', path)
    for k, v in (('stopMin', time), ('trtMin', trt)):
        if not _is_int(v):
            raise ConfigError('{}{}: expected integer'.format(path, k))
    gas = _string(data.get('gas'), path + 'gas')
    return Stop(depth, int(time), int(trt), gas)


def parse_plan(data):
    """
    Parse validation request.

    `ConfigError` is raised for invalid request.

    :param data: Validation request, JSON-like dictionary.
    """
    if not isinstance(data, dict):
        raise ConfigError('Request has to be an object')

    max_depth = _number(data, 'maxDepthM')
    gases = [
        _string(g, 'gasesCarried.{}'.format(k))
        for k, g in enumerate(_list(data, 'gasesCarried'))
    ]
    ppo2 = _get(data, 'ppo2', '')
    sac = _get(data, 'sac', '')

    gf = data.get('gradientFactors')
    if gf is not None:
        gf = tuple(
            _number(gf, k, 'gradientFactors.', positive=False, lo=0, hi=100)
            for k in ('low', 'high')
        )

    schedule = [
        parse_stop(s, 'schedule.{}.'.format(k))
        for k, s in enumerate(_list(data, 'schedule'))
    ]

    notes = data.get('notes')
    if notes is not None and not isinstance(notes, str):
        raise ConfigError('notes: expected string')

    return Plan(
        max_depth,
        gases,
        _number(ppo2, 'working', 'ppo2.'),
        _number(ppo2, 'deco', 'ppo2.'),
        _number(sac, 'workingLMin', 'sac.'),
        _number(sac, 'decoLMin', 'sac.'),
        gf,
        schedule,
        notes,
    )


def configure(engine, plan):
    """
    Configure schedule validation engine with dive plan parameters.

    :param engine: DecoLabel schedule validation engine.
    :param plan: Dive plan.
    """
    engine.max_depth = plan.max_depth
    engine.ppo2_working = plan.ppo2_working
    engine.ppo2_deco = plan.ppo2_deco
    engine.sac_working = plan.sac_working
    engine.sac_deco = plan.sac_deco
    if plan.gf is not None:
        engine.gf_low, engine.gf_high = plan.gf
    for gas in plan.gases:
        engine.add_gas(gas)


def dive_label(data):
    """
    Validate dive schedule and calculate schedule label.

    The result is JSON-like dictionary with validation findings, computed
    values and label text.

    :param data: Validation request, JSON-like dictionary.
    """
    plan = parse_plan(data)

    engine = create()
    configure(engine, plan)
    steps = list(engine.calculate(plan.schedule))

    checks = engine.checks
    schedule = engine.schedule
    mods = engine.mod_table()
    gf = None if engine.gf_low is None else (engine.gf_low, engine.gf_high)

    if __debug__:
        logger.debug('validation: {} error(s), {} warning(s)'.format(
            len(checks.errors), len(checks.warnings)
        ))

    text = label_text(
        engine.max_depth,
        schedule.runtime,
        engine.gas_list,
        mods,
        schedule,
        engine.exposure.otu,
        engine.exposure.cns,
        engine.gas_usage.litres,
        gf=gf,
        notes=plan.notes,
        banner=checks.banner,
    )

    return {
        'checks': checks.as_dict(),
        'computed': {
            'totalRuntimeMin': schedule.runtime,
            'otuTotal': engine.exposure.otu,
            'cnsPercentTotal': engine.exposure.cns,
            'gasUsedLitresByGas': dict(engine.gas_usage.litres),
            'modByGasM': dict(mods),
            'ppo2ByStop': [
                {'depthM': s.stop.depth, 'gas': s.stop.gas, 'ppo2': s.ppo2}
                for s in steps
            ],
        },
        'labelText': text,
    }


# vim: sw=4:et:ai
