"""
Rhythm layer - beat/tempo values and their composition.

- Beat: Beats per measure (integrates to a beat count)
- Tempo: Beats per minute
- Rhythm: Beat + tempo in effect together (integrates to seconds)
- merge_rhythm: Forward-filled merge of beat and tempo timelines
- rhythm_clock / beat_clock: Preintegrals for seconds and beats elapsed
"""

from chuk_timeline.rhythm.compose import beat_clock, merge_rhythm, rhythm_clock
from chuk_timeline.rhythm.values import Beat, Rhythm, Tempo

__all__ = [
    "Beat",
    "Tempo",
    "Rhythm",
    "merge_rhythm",
    "rhythm_clock",
    "beat_clock",
]
