"""
Rhythm composition - merges beat and tempo timelines.

Beat signature changes are keyed by integer measure; tempo changes can land
anywhere inside a measure. merge_rhythm() lines both up on the Instant axis and
forward-fills each side, giving the full rhythm in effect from every change
onwards.
"""

from __future__ import annotations

import logging

from chuk_timeline.constants import ErrorMessages
from chuk_timeline.core.errors import AlignmentError
from chuk_timeline.core.instant import Instant, time_zero
from chuk_timeline.core.preintegral import Preintegral
from chuk_timeline.core.timeline import Timeline
from chuk_timeline.rhythm.values import Beat, Rhythm, Tempo

logger = logging.getLogger(__name__)


def merge_rhythm(
    beats: Timeline[int, Beat],
    tempos: Timeline[Instant, Tempo],
) -> Timeline[Instant, Rhythm]:
    """
    Combine beat and tempo changes into one forward-filled rhythm timeline.

    Args:
        beats: Beat signature changes keyed by measure number
        tempos: Tempo changes keyed by instant

    Returns:
        Timeline with one Rhythm per distinct change time

    Raises:
        DuplicateTimesError: If either input has two changes at the same time
        AlignmentError: If the first change is not at the origin with both a
            beat and a tempo
    """
    merged = _lift(beats).merge(tempos)

    origin = time_zero(Instant)
    if not merged:
        raise AlignmentError(ErrorMessages.MISALIGNED_START.format(zero=origin, detail="nothing"))
    start, (first_beat, first_tempo) = next(merged.pairs())
    if start != origin or first_beat is None or first_tempo is None:
        sides = (("beat", first_beat), ("tempo", first_tempo))
        missing = [name for name, side in sides if side is None]
        if missing:
            detail = f"{start} missing {' and '.join(missing)}"
        else:
            detail = f"first change at {start}"
        raise AlignmentError(ErrorMessages.MISALIGNED_START.format(zero=origin, detail=detail))

    rhythm: Timeline[Instant, Rhythm] = Timeline()
    current_beat, current_tempo = first_beat, first_tempo
    for time, (beat, tempo) in merged.pairs():
        current_beat = beat if beat is not None else current_beat
        current_tempo = tempo if tempo is not None else current_tempo
        rhythm.append(time, Rhythm(current_beat, current_tempo))

    logger.debug(
        "Composed rhythm from %d beat and %d tempo changes (%d entries)",
        len(beats),
        len(tempos),
        len(rhythm),
    )
    return rhythm


def rhythm_clock(
    beats: Timeline[int, Beat],
    tempos: Timeline[Instant, Tempo],
) -> Preintegral[Instant, Rhythm]:
    """
    Build a seconds clock over a chart.

    ``rhythm_clock(beats, tempos).fetch(instant)`` is the number of seconds
    from the start of the chart to ``instant``.
    """
    return Preintegral(merge_rhythm(beats, tempos))


def beat_clock(beats: Timeline[int, Beat]) -> Preintegral[Instant, Beat]:
    """Build a beat counter: ``fetch(instant)`` is the number of beats elapsed."""
    return Preintegral(_lift(beats))


def _lift(beats: Timeline[int, Beat]) -> Timeline[Instant, Beat]:
    # insert keeps any duplicate measures so merge() can report them
    return Timeline.from_pairs((Instant(measure), beat) for measure, beat in beats.pairs())
