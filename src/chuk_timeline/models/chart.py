"""
Chart timing model - the timing section of a chart/score document.

A chart lists beat signature changes (by measure) and tempo changes (by
instant). This is untrusted input: everything is validated here, and the
result turns into the timelines the core works on.

YAML format:

    schema: chart-timing/v1
    beats:
      - {measure: 0, per_measure: 4}
      - {measure: 8, per_measure: 7/2}
    tempos:
      - {at: "0:0/1", bpm: 120}
      - {at: "4:1/2", bpm: 150}
"""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Annotated, Any

import yaml
from pydantic import BaseModel, Field, PlainSerializer, PlainValidator, field_validator

from chuk_timeline.constants import (
    CHART_TIMING_SCHEMA,
    DEFAULT_BEATS_PER_MEASURE,
    DEFAULT_BPM,
    ErrorMessages,
)
from chuk_timeline.core.instant import Instant
from chuk_timeline.core.preintegral import Preintegral
from chuk_timeline.core.timeline import Timeline
from chuk_timeline.rhythm.compose import beat_clock, merge_rhythm, rhythm_clock
from chuk_timeline.rhythm.values import Beat, Rhythm, Tempo

logger = logging.getLogger(__name__)


def _parse_fraction(value: Any) -> Fraction:
    """Accept 4, '7/2', '3.5' or 3.5 as an exact Fraction."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, (str, float)):
        # str() first so 0.1 means one tenth, not its binary approximation
        try:
            return Fraction(str(value).strip())
        except ZeroDivisionError as e:
            raise ValueError(f"Zero denominator in {value!r}") from e
    raise ValueError(f"Expected a number, got {value!r}")


def _positive_fraction(value: Any) -> Fraction:
    fraction = _parse_fraction(value)
    if fraction <= 0:
        raise ValueError(f"Must be positive, got {fraction}")
    return fraction


def _parse_measure(value: Any) -> int:
    """Accept a whole measure number as an int or a digit string; never truncate."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return int(text)
    raise ValueError(f"Measure must be a whole number, got {value!r}")


def _parse_instant(value: Any) -> Instant:
    """Accept an Instant, '3:1/4', a measure number, [measure, submeasure] or a mapping."""
    if isinstance(value, Instant):
        return value
    if isinstance(value, str):
        return Instant.parse(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Instant(value)
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return Instant(_parse_measure(value[0]), _parse_fraction(value[1]))
    if isinstance(value, dict) and "measure" in value:
        return Instant(
            _parse_measure(value["measure"]), _parse_fraction(value.get("submeasure", 0))
        )
    raise ValueError(ErrorMessages.INVALID_INSTANT.format(notation=value))


PositiveFraction = Annotated[
    Fraction, PlainValidator(_positive_fraction), PlainSerializer(str, return_type=str)
]
ChartInstant = Annotated[
    Instant, PlainValidator(_parse_instant), PlainSerializer(str, return_type=str)
]


class BeatChange(BaseModel):
    """A beat signature change at the start of a measure."""

    measure: int = Field(..., ge=0, description="0-based measure number")
    per_measure: PositiveFraction = Field(..., description="Beats per measure (e.g. 4, '7/2')")

    model_config = {"frozen": True}

    def to_yaml_dict(self) -> dict[str, Any]:
        return {"measure": self.measure, "per_measure": _format_fraction(self.per_measure)}


class TempoChange(BaseModel):
    """A tempo change at any instant."""

    at: ChartInstant = Field(..., description="Instant of the change (e.g. '4:1/2')")
    bpm: PositiveFraction = Field(..., description="Beats per minute")

    model_config = {"frozen": True}

    def to_yaml_dict(self) -> dict[str, Any]:
        return {"at": str(self.at), "bpm": _format_fraction(self.bpm)}


class ChartTiming(BaseModel):
    """
    Timing information for a whole chart.

    Changes may be listed in any order. Two changes of the same kind at the
    same time are allowed here but rejected with DuplicateTimesError once the
    rhythm is composed.
    """

    schema_version: str = Field(CHART_TIMING_SCHEMA, alias="schema", description="Schema version")
    beats: list[BeatChange] = Field(
        default_factory=lambda: [BeatChange(measure=0, per_measure=DEFAULT_BEATS_PER_MEASURE)],
        description="Beat signature changes",
    )
    tempos: list[TempoChange] = Field(
        default_factory=lambda: [TempoChange(at=Instant.ZERO, bpm=DEFAULT_BPM)],
        description="Tempo changes",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("schema_version")
    @classmethod
    def validate_schema(cls, v: str) -> str:
        """Only the v1 schema is understood."""
        if v != CHART_TIMING_SCHEMA:
            raise ValueError(f"Unsupported schema: {v} (expected {CHART_TIMING_SCHEMA})")
        return v

    def beat_timeline(self) -> Timeline[int, Beat]:
        """Beat signature changes keyed by measure."""
        return Timeline.from_pairs(
            (change.measure, Beat(change.per_measure)) for change in self.beats
        )

    def tempo_timeline(self) -> Timeline[Instant, Tempo]:
        """Tempo changes keyed by instant."""
        return Timeline.from_pairs((change.at, Tempo(change.bpm)) for change in self.tempos)

    def rhythm(self) -> Timeline[Instant, Rhythm]:
        """Forward-filled beat + tempo timeline."""
        return merge_rhythm(self.beat_timeline(), self.tempo_timeline())

    def clock(self) -> Preintegral[Instant, Rhythm]:
        """Seconds clock over the chart."""
        return rhythm_clock(self.beat_timeline(), self.tempo_timeline())

    def beat_counter(self) -> Preintegral[Instant, Beat]:
        """Beats-elapsed counter over the chart."""
        return beat_clock(self.beat_timeline())

    def seconds_at(self, position: Instant) -> Fraction:
        """
        Seconds from the start of the chart to ``position``.

        Builds a fresh clock each call; keep clock() around for repeated queries.
        """
        return self.clock().fetch(position)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to the canonical YAML-friendly dict (changes in time order)."""
        return {
            "schema": self.schema_version,
            "beats": [b.to_yaml_dict() for b in sorted(self.beats, key=lambda b: b.measure)],
            "tempos": [t.to_yaml_dict() for t in sorted(self.tempos, key=lambda t: t.at)],
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> ChartTiming:
        """Create from a YAML-parsed dict."""
        fields: dict[str, Any] = {"schema": data.get("schema", CHART_TIMING_SCHEMA)}
        for key in ("beats", "tempos"):
            if key in data:
                fields[key] = data[key] or []
        return cls.model_validate(fields)

    def to_yaml(self) -> str:
        """Serialize to a YAML string."""
        return yaml.safe_dump(self.to_yaml_dict(), default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, text: str) -> ChartTiming:
        """
        Parse chart timing from YAML text.

        Raises:
            yaml.YAMLError: If the text is not valid YAML
            pydantic.ValidationError: If the document is malformed
        """
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Chart timing must be a mapping, got {type(data).__name__}")
        timing = cls.from_yaml_dict(data)
        logger.debug(
            "Loaded chart timing: %d beat changes, %d tempo changes",
            len(timing.beats),
            len(timing.tempos),
        )
        return timing


def _format_fraction(value: Fraction) -> int | str:
    if value.denominator == 1:
        return value.numerator
    return f"{value.numerator}/{value.denominator}"
