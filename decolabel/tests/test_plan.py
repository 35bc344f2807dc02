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
Tests for validation request parsing and schedule label calculation.
"""

from decolabel.engine import Engine, Stop
from decolabel.error import ConfigError
from decolabel.plan import parse_stop, parse_plan, configure, dive_label

from .tools import DEMO_PLAN, _plan

import unittest


class ParseStopTestCase(unittest.TestCase):
    """
    Schedule stop parsing tests.
    """
    def test_parse_stop(self):
        """
        Test parsing schedule stop
        """
        data = {'depthM': 21, 'stopMin': 1, 'trtMin': 26, 'gas': '50'}
        self.assertEqual(Stop(21, 1, 26, '50'), parse_stop(data, ''))


    def test_parse_stop_integral_float(self):
        """
        Test parsing schedule stop with integral float times
        """
        data = {'depthM': 21.5, 'stopMin': 1.0, 'trtMin': 26.0, 'gas': '50'}
        stop = parse_stop(data, '')
        self.assertEqual(Stop(21.5, 1, 26, '50'), stop)
        self.assertIsInstance(stop.time, int)


    def test_parse_stop_surface(self):
        """
        Test parsing schedule stop at surface
        """
        data = {'depthM': 0, 'stopMin': 1, 'trtMin': 26, 'gas': '21'}
        self.assertEqual(0, parse_stop(data, '').depth)


    def test_parse_stop_negative_depth(self):
        """
        Test parsing schedule stop with negative depth
        """
        data = {'depthM': -3, 'stopMin': 1, 'trtMin': 26, 'gas': '21'}
        self.assertRaisesRegex(
            ConfigError, 'schedule.0.depthM', parse_stop, data, 'schedule.0.'
        )


    def test_parse_stop_fractional_time(self):
        """
        Test parsing schedule stop with fractional stop time
        """
        data = {'depthM': 6, 'stopMin': 1.5, 'trtMin': 26, 'gas': '21'}
        self.assertRaisesRegex(
            ConfigError, 'stopMin: expected integer', parse_stop, data, ''
        )


    def test_parse_stop_zero_time(self):
        """
        Test parsing schedule stop with zero stop time
        """
        data = {'depthM': 6, 'stopMin': 0, 'trtMin': 26, 'gas': '21'}
        self.assertRaises(ConfigError, parse_stop, data, '')


    def test_parse_stop_no_gas(self):
        """
        Test parsing schedule stop without gas mix
        """
        data = {'depthM': 6, 'stopMin': 1, 'trtMin': 26, 'gas': ''}
        self.assertRaises(ConfigError, parse_stop, data, '')
        del data['gas']
        self.assertRaises(ConfigError, parse_stop, data, '')



class ParsePlanTestCase(unittest.TestCase):
    """
    Validation request parsing tests.
    """
    def test_parse_plan(self):
        """
        Test parsing validation request
        """
        plan = parse_plan(DEMO_PLAN)
        self.assertEqual(39, plan.max_depth)
        self.assertEqual(['21', '100'], plan.gases)
        self.assertEqual(1.4, plan.ppo2_working)
        self.assertEqual(1.6, plan.ppo2_deco)
        self.assertEqual(18, plan.sac_working)
        self.assertEqual(14, plan.sac_deco)
        self.assertEqual((30, 85), plan.gf)
        self.assertEqual(6, len(plan.schedule))
        self.assertEqual(Stop(6, 9, 42, '100'), plan.schedule[-1])
        self.assertEqual('Demo schedule', plan.notes)


    def test_parse_plan_optional(self):
        """
        Test parsing validation request without optional values
        """
        data = _plan()
        del data['gradientFactors']
        del data['notes']
        plan = parse_plan(data)
        self.assertIsNone(plan.gf)
        self.assertIsNone(plan.notes)


    def test_not_object(self):
        """
        Test parsing validation request, which is not an object
        """
        self.assertRaises(ConfigError, parse_plan, [])
        self.assertRaises(ConfigError, parse_plan, None)


    def test_missing_keys(self):
        """
        Test parsing validation request with missing keys
        """
        for key in ('maxDepthM', 'gasesCarried', 'ppo2', 'sac', 'schedule'):
            data = _plan()
            del data[key]
            self.assertRaisesRegex(ConfigError, key, parse_plan, data)


    def test_missing_nested_keys(self):
        """
        Test parsing validation request with missing nested keys
        """
        data = _plan(ppo2={'working': 1.4})
        self.assertRaisesRegex(ConfigError, 'ppo2.deco', parse_plan, data)

        data = _plan(sac={'decoLMin': 14})
        self.assertRaisesRegex(ConfigError, 'sac.workingLMin', parse_plan, data)


    def test_bool_number(self):
        """
        Test parsing validation request with boolean instead of number
        """
        data = _plan(maxDepthM=True)
        self.assertRaisesRegex(
            ConfigError, 'maxDepthM: expected number', parse_plan, data
        )


    def test_string_number(self):
        """
        Test parsing validation request with string instead of number
        """
        data = _plan(maxDepthM='39')
        self.assertRaises(ConfigError, parse_plan, data)


    def test_non_finite_number(self):
        """
        Test parsing validation request with infinite number
        """
        data = _plan(maxDepthM=float('inf'))
        self.assertRaises(ConfigError, parse_plan, data)


    def test_negative_values(self):
        """
        Test parsing validation request with non-positive values
        """
        self.assertRaises(ConfigError, parse_plan, _plan(maxDepthM=0))
        self.assertRaises(
            ConfigError, parse_plan, _plan(ppo2={'working': 1.4, 'deco': -1})
        )
        self.assertRaises(
            ConfigError,
            parse_plan,
            _plan(sac={'workingLMin': 0, 'decoLMin': 14})
        )


    def test_gf_range(self):
        """
        Test parsing validation request with gradient factors out of range
        """
        data = _plan(gradientFactors={'low': 30, 'high': 101})
        self.assertRaisesRegex(
            ConfigError, 'gradientFactors.high: has to be at most 100',
            parse_plan, data
        )

        data = _plan(gradientFactors={'low': -1, 'high': 85})
        self.assertRaisesRegex(
            ConfigError, 'gradientFactors.low: has to be at least 0',
            parse_plan, data
        )


    def test_empty_lists(self):
        """
        Test parsing validation request with empty lists
        """
        self.assertRaises(ConfigError, parse_plan, _plan(gasesCarried=[]))
        self.assertRaises(ConfigError, parse_plan, _plan(schedule=[]))


    def test_invalid_stop(self):
        """
        Test parsing validation request with invalid stop
        """
        data = _plan()
        data['schedule'][2]['stopMin'] = 'x'
        self.assertRaisesRegex(
            ConfigError, 'schedule.2.stopMin', parse_plan, data
        )


    def test_invalid_notes(self):
        """
        Test parsing validation request with invalid notes
        """
        self.assertRaises(ConfigError, parse_plan, _plan(notes=42))



class ConfigureTestCase(unittest.TestCase):
    """
    Engine configuration tests.
    """
    def test_configure(self):
        """
        Test configuring engine with dive plan
        """
        data = _plan(gasesCarried=['21', 'O2'])
        engine = Engine()
        configure(engine, parse_plan(data))

        self.assertEqual(39, engine.max_depth)
        self.assertEqual(1.6, engine.ppo2_deco)
        self.assertEqual(14, engine.sac_deco)
        self.assertEqual(30, engine.gf_low)
        self.assertEqual(85, engine.gf_high)
        self.assertEqual(['21', '100'], engine.gas_list)


    def test_configure_unknown_gas(self):
        """
        Test configuring engine with unknown gas mix
        """
        data = _plan(gasesCarried=['21', 'nitrox'])
        engine = Engine()
        self.assertRaises(ConfigError, configure, engine, parse_plan(data))



class DiveLabelTestCase(unittest.TestCase):
    """
    Schedule label calculation tests.
    """
    def test_trt_violation(self):
        """
        Test schedule label calculation with TRT violation
        """
        data = _plan(schedule=[
            {'depthM': 21, 'stopMin': 1, 'trtMin': 26, 'gas': '21'},
            {'depthM': 15, 'stopMin': 1, 'trtMin': 27, 'gas': '21'},
            {'depthM': 9, 'stopMin': 1, 'trtMin': 26, 'gas': '21'},
        ])
        result = dive_label(data)

        errors = result['checks']['errors']
        self.assertEqual(['TRT must be strictly increasing (row 3).'], errors)
        self.assertTrue(result['labelText'].startswith('*** ERRORS PRESENT ***\n'))


    def test_unsorted_schedule(self):
        """
        Test schedule label calculation with unsorted schedule
        """
        data = _plan()
        data['schedule'].reverse()
        result = dive_label(data)

        self.assertEqual([], result['checks']['errors'])
        stops = result['computed']['ppo2ByStop']
        self.assertEqual([29, 19, 15, 12, 9, 6], [s['depthM'] for s in stops])


    def test_error_order(self):
        """
        Test schedule label calculation with errors of various checks
        """
        data = _plan(gasesCarried=['21', '50'], schedule=[
            {'depthM': 30, 'stopMin': 1, 'trtMin': 26, 'gas': '50'},
            {'depthM': 9, 'stopMin': 1, 'trtMin': 27, 'gas': '32'},
            {'depthM': 6, 'stopMin': 1, 'trtMin': 26, 'gas': '21'},
        ])
        result = dive_label(data)

        self.assertEqual([
            'TRT must be strictly increasing (row 3).',
            'Row 2: gas "32" not in gasesCarried.',
            'Row 1: PPO2 2.00 exceeds deco limit 1.6.',
            'Row 1: depth 30m deeper than MOD 22.0m for gas 50 at PPO2 1.6.',
        ], result['checks']['errors'])


    def test_gas_order(self):
        """
        Test schedule label calculation orders gas mixes of computed values
        """
        data = _plan(gasesCarried=['100', '21'])
        result = dive_label(data)

        computed = result['computed']
        self.assertEqual(['21', '100'], list(computed['modByGasM']))
        self.assertEqual(['21', '100'], list(computed['gasUsedLitresByGas']))

        lines = result['labelText'].split('\n')
        self.assertEqual('GASES: 100 | 21', lines[1])
        self.assertEqual('MOD@deco: 21=66m, 100=6m', lines[2])


    def test_gas_not_carried(self):
        """
        Test schedule label calculation with gas mix not carried
        """
        data = _plan()
        data['schedule'][4]['gas'] = '50'
        result = dive_label(data)

        self.assertEqual(
            ['Row 5: gas "50" not in gasesCarried.'], result['checks']['errors']
        )


    def test_oxygen_label(self):
        """
        Test schedule label calculation with O2 gas mix label
        """
        data = _plan(gasesCarried=['21', 'O2'])
        data['schedule'][5]['gas'] = 'o2'
        result = dive_label(data)

        self.assertEqual([], result['checks']['errors'])
        self.assertIn('GASES: 21 | 100', result['labelText'])
        self.assertEqual('100', result['computed']['ppo2ByStop'][-1]['gas'])


    def test_warning_banner(self):
        """
        Test schedule label calculation with warning
        """
        data = _plan()
        data['schedule'][0]['stopMin'] = 26
        result = dive_label(data)

        self.assertEqual([], result['checks']['errors'])
        self.assertEqual(1, len(result['checks']['warnings']))
        self.assertTrue(
            result['labelText'].startswith('*** WARNINGS PRESENT ***\n')
        )


    def test_unknown_stop_gas(self):
        """
        Test schedule label calculation with unknown stop gas mix
        """
        data = _plan()
        data['schedule'][0]['gas'] = 'air'
        self.assertRaises(ConfigError, dive_label, data)


    def test_no_gf(self):
        """
        Test schedule label calculation without gradient factors
        """
        data = _plan()
        del data['gradientFactors']
        result = dive_label(data)
        self.assertTrue(result['labelText'].startswith('MAX 39m | RT 42m\n'))


# vim: sw=4:et:ai
