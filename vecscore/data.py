"""Data model for parsed scores: pitches, events and their containers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

_UINT8_TEXT = re.compile(r"\+?[0-9]+")
_INT_TEXT = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_MIDI_MAX = 127
_UINT8_MAX = 255


class PitchError(ValueError):
    """Raised when a pitch cannot be parsed or lies outside the MIDI range."""


class NoteLetter(Enum):
    """Natural note letters; each value is the letter's semitone offset from C."""

    A = 9
    B = 11
    C = 0
    D = 2
    E = 4
    F = 5
    G = 7


class Accidental(Enum):
    """Accidentals; each value is the semitone shift it applies."""

    SHARP = 1
    FLAT = -1


class EventType(Enum):
    """Whether an event sounds a note or is a rest."""

    NOTE = "note"
    REST = "rest"


_LETTERS = {letter.name: letter for letter in NoteLetter}
_ACCIDENTALS = {"#": Accidental.SHARP, "b": Accidental.FLAT}


@dataclass(frozen=True)
class Pitch:
    """A pitch given either as a raw MIDI number or as a note name with octave."""

    midi: Optional[int] = None
    letter: Optional[NoteLetter] = None
    accidental: Optional[Accidental] = None
    octave: int = 0

    def __post_init__(self) -> None:
        if (self.midi is None) == (self.letter is None):
            raise ValueError("a pitch needs exactly one of a MIDI number or a note letter")
        if self.midi is not None and not 0 <= self.midi <= _UINT8_MAX:
            raise ValueError(f"MIDI number {self.midi} does not fit in a byte")

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """Parse a MIDI number such as ``60`` or a note name such as ``C#4``."""
        if _UINT8_TEXT.fullmatch(text) and int(text) <= _UINT8_MAX:
            return cls(midi=int(text))

        if not text:
            raise PitchError("Empty input")

        head = text[0]
        letter = _LETTERS.get(head.upper()) if head.isascii() else None
        if letter is None:
            raise PitchError(f"Invalid note letter: {head}")

        remainder = text[1:]
        if not remainder:
            raise PitchError("Missing octave information")

        accidental = _ACCIDENTALS.get(remainder[0])
        octave_text = remainder[1:] if accidental is not None else remainder

        if not _INT_TEXT.fullmatch(octave_text):
            raise PitchError("Invalid octave")
        octave = int(octave_text)
        if not _INT32_MIN <= octave <= _INT32_MAX:
            raise PitchError("Invalid octave")

        return cls(letter=letter, accidental=accidental, octave=octave)

    def midi_number(self) -> int:
        """Return the MIDI note number, raising PitchError outside 0..127."""
        if self.midi is not None:
            return self.midi
        assert self.letter is not None
        shift = self.accidental.value if self.accidental is not None else 0
        number = (self.octave + 1) * 12 + self.letter.value + shift
        if not 0 <= number <= _MIDI_MAX:
            raise PitchError(f"Pitch {self!r} out of MIDI range")
        return number

    def cents(self) -> int:
        """Return the pitch in cents (MIDI number times one hundred)."""
        return self.midi_number() * 100


@dataclass
class Event:
    """A single note or rest."""

    event_type: EventType
    pitch: Optional[Pitch] = None
    pitch_cents: Optional[int] = None
    tie: bool = False
    duration: float = 1.0


@dataclass(frozen=True)
class Tie:
    """Marker that continues the preceding event by one unit."""


@dataclass
class Subdivision:
    """A group of elements sharing one grid slot, such as a tuplet."""

    elements: list[ScoreElement] = field(default_factory=list)
    base_division: int = 0


@dataclass
class Chord:
    """Several events sounding together."""

    events: list[Event] = field(default_factory=list)


@dataclass
class Beat:
    """One beat of a measure."""

    elements: list[ScoreElement] = field(default_factory=list)


@dataclass
class Measure:
    """One measure: its beats and its meter as (numerator, denominator)."""

    beats: list[Beat] = field(default_factory=list)
    meter: tuple[int, int] = (4, 4)


@dataclass
class Score:
    """A whole score made of measures."""

    measures: list[Measure] = field(default_factory=list)


ScoreElement = Union[Event, Subdivision, Chord, Tie]