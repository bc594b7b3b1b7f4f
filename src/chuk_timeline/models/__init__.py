"""
Pydantic models for chart timing documents.

This module provides:
- ChartTiming: Beat and tempo changes for a whole chart
- BeatChange: Beat signature change at a measure
- TempoChange: Tempo change at an instant
"""

from chuk_timeline.models.chart import BeatChange, ChartTiming, TempoChange

__all__ = [
    "BeatChange",
    "ChartTiming",
    "TempoChange",
]
