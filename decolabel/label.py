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
Schedule label formatter.

The label is a plain text summary of a schedule, which can be printed and
attached to a slate, i.e.::

    *** WARNINGS PRESENT ***
    MAX 39m | RT 60m | GF 30/85
    GASES: 21 | 50 | 100
    MOD@deco: 21=66m, 50=22m, 100=6m
    ---- STOPS ----
    21m   1'  TRT26  50
     6m   5'  TRT40  100
    --------------
    OTU 42 | CNS 15%
    GAS(L): 21=1800 | 50=120 | 100=112
    VERIFY AGAINST YOUR TRAINING + PLANNER. NOT A DIVE PLAN GENERATOR.
"""

from .const import SAFETY_NOTE
from .ft import round_half, num_str


def stop_line(stop):
    """
    Format schedule stop line of a label.

    :param stop: Schedule stop.
    """
    return '{:>2}m  {:>2}\'  TRT{:>2}  {}'.format(
        num_str(stop.depth), num_str(stop.time), num_str(stop.trt), stop.gas
    )


def label_text(max_depth, runtime, gases, mods, schedule, otu, cns,
        gas_used, gf=None, notes=None, banner=None):
    """
    Format schedule label.

    :param max_depth: Maximum depth of a dive [m].
    :param runtime: Total running time of a dive [min].
    :param gases: Carried gas mixes.
    :param mods: Gas mix to maximum operating depth mapping.
    :param schedule: Schedule stops.
    :param otu: Total oxygen toxicity units.
    :param cns: Total CNS oxygen toxicity percentage.
    :param gas_used: Gas mix to gas usage [l] mapping.
    :param gf: Optional gradient factors, `(low, high)` tuple.
    :param notes: Optional notes.
    :param banner: Optional banner text, i.e. ``ERRORS PRESENT``.
    """
    header = 'MAX {}m | RT {}m'.format(num_str(max_depth), num_str(runtime))
    if gf is not None:
        header += ' | GF {}/{}'.format(*map(num_str, gf))
    if banner:
        header = '*** {} ***\n{}'.format(banner, header)

    mod_line = ', '.join(
        '{}={}m'.format(g, round_half(m)) for g, m in mods.items()
    )
    gas_line = ' | '.join(
        '{}={}'.format(g, round_half(v)) for g, v in gas_used.items()
    )
    safety = SAFETY_NOTE
    if notes:
        safety = 'NOTES: {}\n{}'.format(notes, safety)

    lines = [
        header,
        'GASES: ' + ' | '.join(gases),
        'MOD@deco: ' + mod_line,
        '---- STOPS ----',
        '\n'.join(stop_line(s) for s in schedule),
        '--------------',
        'OTU {} | CNS {}%'.format(round_half(otu), round_half(cns)),
        'GAS(L): ' + gas_line,
        safety,
    ]
    return '\n'.join(lines)


# vim: sw=4:et:ai
