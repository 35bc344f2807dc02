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
Import of Subsurface dive logs.

A stop schedule is derived from recorded dive log samples - the dive
profile is split into segments of constant depth and every segment becomes
a schedule stop. The gas mix of a stop is determined with gas mix switch
events and sanity checked with PPO2 limit, so the stop is never assigned
a gas mix, which is not breathable at its depth.

Only the first dive of a dive log is imported.
"""

from collections import namedtuple
import logging
import math

from .catalog import build_catalog
from .const import DEFAULT_GAS, ROUND_DEPTH, MIN_SEGMENT_TIME, \
    BREATHABLE_PPO2, IMPORT_NOTE
from .engine import Stop
from .error import LogError
from .ft import round_half
from .parse import parse_duration, parse_depth, parse_percent
from .scan import xml_tree, find_records, as_list, first_of
from .segment import Sample, derive_segments
from .timeline import GasTimeline

logger = logging.getLogger(__name__)

LogImport = namedtuple('LogImport', 'max_depth gases schedule meta')
LogImport.__doc__ = """
Result of dive log import.

:var max_depth: Maximum depth of a dive [m].
:var gases: Carried gas mixes.
:var schedule: List of schedule stops.
:var meta: Import statistics and note.
"""


def dive_computer(dive):
    """
    Get first dive computer node of a dive.

    :param dive: Dive node.
    """
    dcs = as_list(first_of(dive, 'divecomputer'))
    return dcs[0] if dcs else None


def dive_samples(dive, dc):
    """
    Get sample nodes of a dive.

    :param dive: Dive node.
    :param dc: Dive computer node.
    """
    samples = first_of(dc, 'sample')
    if samples is None:
        samples = first_of(dive, 'sample')
    if samples is None:
        samples = first_of(first_of(dive, 'samples'), 'sample')
    return as_list(samples)


def dive_events(dive, dc):
    """
    Get event nodes of a dive.

    :param dive: Dive node.
    :param dc: Dive computer node.
    """
    events = first_of(dc, 'event')
    if events is None:
        events = first_of(dive, 'event')
    return as_list(events)


def default_gas(cylinders):
    """
    Determine gas mix used at the beginning of a dive.

    Oxygen percentage of first cylinder is used, air otherwise.

    :param cylinders: Collection of cylinder nodes.
    """
    if cylinders:
        o2 = parse_percent(first_of(cylinders[0], 'o2'))
        if not math.isnan(o2):
            return str(round_half(o2))
    return DEFAULT_GAS


def max_depth(dive, dc, samples):
    """
    Determine maximum depth of a dive.

    Declared maximum depth is used, if available. Otherwise, the deepest
    sample is used.

    :param dive: Dive node.
    :param dc: Dive computer node.
    :param samples: Collection of samples.
    """
    for node in (dive, dc):
        depth = first_of(first_of(node, 'depth'), 'max')
        if depth is None:
            depth = first_of(node, 'maxdepth', 'maxDepth')
        depth = parse_depth(depth)
        if depth:
            return depth
    return max(0, max((s.depth for s in samples), default=0))


def schedule_stop(segment, timeline, catalog, ppo2_limit=BREATHABLE_PPO2):
    """
    Convert dive segment into schedule stop.

    :param segment: Dive segment.
    :param timeline: Gas mix timeline.
    :param catalog: Catalog of carried gas mixes.
    :param ppo2_limit: PPO2 limit of breathable gas mix.
    """
    mid = round_half((segment.start + segment.end) / 2)
    gas = timeline.breathable_gas_at(mid, segment.depth, ppo2_limit)
    return Stop(
        round_half(segment.depth),
        max(1, round_half((segment.end - segment.start) / 60)),
        max(1, round_half(segment.end / 60)),
        catalog.prefer(gas),
    )


def import_dive(dive, round_depth=ROUND_DEPTH, min_time=MIN_SEGMENT_TIME):
    """
    Derive stop schedule from a dive record.

    `LogError` is raised if there are no samples or no segments can be
    derived from the samples.

    :param dive: Dive node.
    :param round_depth: Sample depth is rounded to multiple of this value [m].
    :param min_time: Minimum duration of a stop [s].
    """
    dc = dive_computer(dive)
    raw_samples = dive_samples(dive, dc)
    if not raw_samples:
        raise LogError('Found dive but no <sample> data.')

    events = dive_events(dive, dc)
    cylinders = as_list(first_of(dive, 'cylinder'))

    gas = default_gas(cylinders)
    catalog = build_catalog(cylinders, events, gas)
    timeline = GasTimeline.from_events(events, gas)

    samples = []
    for s in raw_samples:
        time = parse_duration(first_of(s, 'time'))
        samples.append(Sample(
            time, parse_depth(first_of(s, 'depth')), timeline.gas_at(time)
        ))
    samples.sort(key=lambda s: s.time)

    segments = derive_segments(samples, round_depth, min_time)
    if not segments:
        raise LogError(
            'Could not derive any segments from samples (file may be too'
            ' sparse).'
        )

    schedule = [schedule_stop(s, timeline, catalog) for s in segments]
    meta = {
        'samplesFound': len(samples),
        'segmentsDerived': len(segments),
        'note': IMPORT_NOTE,
    }
    depth = round_half(max_depth(dive, dc, samples))
    return LogImport(depth, catalog.gases, schedule, meta)


def import_log(text, round_depth=ROUND_DEPTH, min_time=MIN_SEGMENT_TIME):
    """
    Import first dive of Subsurface dive log and derive its stop schedule.

    `LogError` is raised if the dive log is invalid, there is no dive or
    stop schedule cannot be derived.

    :param text: Subsurface dive log (XML document, string or bytes).
    :param round_depth: Sample depth is rounded to multiple of this value [m].
    :param min_time: Minimum duration of a stop [s].
    """
    dives = find_records(xml_tree(text), 'dive')
    if not dives:
        raise LogError('Could not find any dives in file.')

    logger.info('found {} dive(s), importing first one'.format(len(dives)))

    result = import_dive(dives[0], round_depth, min_time)
    return result._replace(meta=dict(result.meta, divesFound=len(dives)))


def as_dict(result):
    """
    Convert dive log import result into JSON-like dictionary.

    :param result: Dive log import result.
    """
    meta = result.meta
    return {
        'maxDepthM': result.max_depth,
        'gasesCarried': list(result.gases),
        'schedule': [
            {'depthM': s.depth, 'stopMin': s.time, 'trtMin': s.trt, 'gas': s.gas}
            for s in result.schedule
        ],
        'meta': {
            'divesFound': meta.get('divesFound', 1),
            'samplesFound': meta['samplesFound'],
            'segmentsDerived': meta['segmentsDerived'],
            'note': meta['note'],
        },
    }


# vim: sw=4:et:ai
