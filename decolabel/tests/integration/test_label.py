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
Schedule label calculation integration tests.
"""

from decolabel import dive_label
from decolabel.physics import ppo2_at_depth, mod_for_fo2
from decolabel.parse import parse_fo2
from decolabel.usage import litres_used

from ..tools import DEMO_PLAN, _plan

import unittest

DEMO_LABEL = """\
MAX 39m | RT 42m | GF 30/85
GASES: 21 | 100
MOD@deco: 21=66m, 100=6m
---- STOPS ----
29m   1'  TRT26  21
19m   1'  TRT27  21
15m   1'  TRT28  21
12m   1'  TRT29  21
 9m   4'  TRT33  21
 6m   9'  TRT42  100
--------------
OTU 18 | CNS 21%
GAS(L): 21=2472 | 100=202
NOTES: Demo schedule
VERIFY AGAINST YOUR TRAINING + PLANNER. NOT A DIVE PLAN GENERATOR."""


class DiveLabelTestCase(unittest.TestCase):
    """
    Schedule label calculation integration tests.
    """
    def setUp(self):
        self.result = dive_label(DEMO_PLAN)


    def test_checks(self):
        """
        Test demo schedule validation findings
        """
        checks = self.result['checks']
        self.assertEqual([], checks['errors'])
        self.assertEqual([], checks['warnings'])
        self.assertEqual(
            ['Working gas assumes conservative: 25 min at max depth (39m).'],
            checks['info']
        )


    def test_label_text(self):
        """
        Test demo schedule label text
        """
        self.assertEqual(DEMO_LABEL, self.result['labelText'])


    def test_computed(self):
        """
        Test demo schedule computed values
        """
        computed = self.result['computed']
        self.assertEqual(42, computed['totalRuntimeMin'])
        self.assertAlmostEqual(18.371, computed['otuTotal'], 2)
        self.assertAlmostEqual(20.511, computed['cnsPercentTotal'], 2)

        gas = computed['gasUsedLitresByGas']
        self.assertEqual({'21', '100'}, set(gas))
        self.assertAlmostEqual(2472.4, gas['21'])
        self.assertAlmostEqual(201.6, gas['100'])

        mods = computed['modByGasM']
        self.assertAlmostEqual(66.190476, mods['21'], 5)
        self.assertAlmostEqual(6, mods['100'])


    def test_ppo2_by_stop(self):
        """
        Test demo schedule PPO2 of every stop
        """
        stops = self.result['computed']['ppo2ByStop']
        self.assertEqual(6, len(stops))
        for s in stops:
            expected = ppo2_at_depth(parse_fo2(s['gas']), s['depthM'])
            self.assertAlmostEqual(expected, s['ppo2'], delta=1e-9)


    def test_mod_ppo2(self):
        """
        Test PPO2 at MOD of every gas mix equals decompression PPO2 limit
        """
        mods = self.result['computed']['modByGasM']
        for gas, mod in mods.items():
            fo2 = parse_fo2(gas)
            self.assertAlmostEqual(1.6, ppo2_at_depth(fo2, mod), delta=1e-9)
            self.assertAlmostEqual(mod, mod_for_fo2(fo2, 1.6), delta=1e-9)


    def test_gas_usage_total(self):
        """
        Test total gas usage of demo schedule
        """
        gas = self.result['computed']['gasUsedLitresByGas']
        stops = DEMO_PLAN['schedule']
        expected = litres_used(18, 39, 25) + sum(
            litres_used(14, s['depthM'], s['stopMin']) for s in stops
        )
        self.assertAlmostEqual(expected, sum(gas.values()))


    def test_errors_label(self):
        """
        Test schedule label with validation errors
        """
        data = _plan()
        data['schedule'][0]['gas'] = '100'
        result = dive_label(data)

        errors = result['checks']['errors']
        self.assertEqual([
            'Row 1: PPO2 3.90 exceeds deco limit 1.6.',
            'Row 1: depth 29m deeper than MOD 6.0m for gas 100 at PPO2 1.6.',
        ], errors)

        lines = result['labelText'].split('\n')
        self.assertEqual('*** ERRORS PRESENT ***', lines[0])
        self.assertEqual('29m   1\'  TRT26  100', lines[5])


# vim: sw=4:et:ai
