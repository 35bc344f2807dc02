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
DecoLabel constants.
"""

import math

# tolerance of PPO2 and MOD limit checks
EPSILON = 1e-9

OTU_PPO2_MIN = 0.5
OTU_EXPONENT = 0.83

# NOAA CNS oxygen exposure limits, (PPO2, allowed time [min])
CNS_LIMITS = (
    (0.5, math.inf),
    (0.6, 720),
    (0.7, 570),
    (0.8, 450),
    (0.9, 360),
    (1.0, 300),
    (1.1, 240),
    (1.2, 210),
    (1.3, 180),
    (1.4, 150),
    (1.5, 120),
    (1.6, 45),
)

PPO2_WORKING = 1.4
PPO2_DECO = 1.6
SAC_WORKING = 18
SAC_DECO = 14

# log import
DEFAULT_GAS = '21'
ROUND_DEPTH = 1
MIN_SEGMENT_TIME = 30
BREATHABLE_PPO2 = 1.6

IMPORT_NOTE = 'Imported from Subsurface samples (not a planner stop table).' \
    ' With sparse samples, segments may be coarse. Gas set via gaschange' \
    ' events + PPO2 sanity.'

SAFETY_NOTE = 'VERIFY AGAINST YOUR TRAINING + PLANNER.' \
    ' NOT A DIVE PLAN GENERATOR.'

# vim: sw=4:et:ai
