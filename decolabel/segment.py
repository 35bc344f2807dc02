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
Derivation of dive segments from dive log samples.

A segment is a part of a dive spent at the same, rounded depth. Adjacent
segments share time of a sample at which depth change is detected, so
there is no gap between them.
"""

import logging
from collections import namedtuple

from .const import ROUND_DEPTH, MIN_SEGMENT_TIME
from .ft import round_to

logger = logging.getLogger(__name__)

Sample = namedtuple('Sample', 'time depth gas')
Sample.__doc__ = """
Dive log sample.

:var time: Time of dive [s].
:var depth: Depth [m].
:var gas: Gas mix in use.
"""

Segment = namedtuple('Segment', 'depth start end gas')
Segment.__doc__ = """
Dive segment at constant depth.

:var depth: Rounded depth [m].
:var start: Start time of the segment [s].
:var end: End time of the segment [s].
:var gas: Gas mix in use at the end of the segment.
"""


def derive_segments(samples, round_depth=ROUND_DEPTH, min_time=MIN_SEGMENT_TIME):
    """
    Derive dive segments from dive log samples.

    Segments shorter than `min_time` are skipped. No segments are derived
    if there are less than two samples.

    :param samples: Collection of dive log samples.
    :param round_depth: Sample depth is rounded to multiple of this value [m].
    :param min_time: Minimum duration of a segment [s].
    """
    samples = sorted(samples, key=lambda s: s.time)
    if len(samples) < 2:
        return []

    segments = []

    def flush():
        if end - start >= min_time:
            segments.append(Segment(depth, start, end, gas))
        elif __debug__:
            logger.debug(
                'segment at {}m skipped, {}s shorter than {}s'
                .format(depth, end - start, min_time)
            )

    first = samples[0]
    depth = round_to(first.depth, round_depth)
    start = end = first.time
    gas = first.gas

    for prev, sample in zip(samples[:-1], samples[1:]):
        d = round_to(sample.depth, round_depth)
        if d != depth:
            flush()
            depth = d
            start = prev.time

        end = sample.time
        gas = sample.gas or gas

    flush()

    if __debug__:
        logger.debug(
            'derived {} segment(s) from {} sample(s)'
            .format(len(segments), len(samples))
        )
    return segments


# vim: sw=4:et:ai
