#!/usr/bin/env python3
"""
Example: Build a tempo map from chart timing and query it.

Loads beat and tempo changes from YAML, composes the rhythm and prints the
seconds and beats elapsed at a few positions.

Usage:
    python examples/tempo_map.py
"""

import logging

from chuk_timeline import ChartTiming, Instant

CHART = """
schema: chart-timing/v1
beats:
  - {measure: 0, per_measure: 4}
  - {measure: 4, per_measure: 7}
  - {measure: 6, per_measure: 4}
  - {measure: 8, per_measure: 7/2}
tempos:
  - {at: "0:0/1", bpm: 120}
  - {at: "5:1/2", bpm: 180}
"""


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    timing = ChartTiming.from_yaml(CHART)
    rhythm = timing.rhythm()
    clock = timing.clock()
    beats = timing.beat_counter()

    print("Rhythm changes:")
    for time, value in rhythm:
        print(f"  {time!s:>8}  {value.beat.per_measure} beats @ {value.tempo.bpm} BPM")

    print("\nPositions:")
    for notation in ["0:0/1", "2:0/1", "5:1/2", "6:0/1", "9:1/4"]:
        position = Instant.parse(notation)
        seconds = clock.fetch(position)
        print(f"  {notation:>8}  beat {beats.fetch(position)!s:>6}  {float(seconds):7.3f}s")


if __name__ == "__main__":
    main()
