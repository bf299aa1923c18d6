"""Text parser turning score notation into a :class:`~vecscore.data.Score`."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from vecscore.data import (
    Beat,
    Chord,
    Event,
    EventType,
    Measure,
    Pitch,
    PitchError,
    Score,
    ScoreElement,
    Subdivision,
    Tie,
)

_DELIMITERS = frozenset("[]{},")
_OPENERS = frozenset("[{")
_CLOSERS = frozenset("]}")
_UNSIGNED_TEXT = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1
_COMMENT = re.compile(r"//[^\n]*|/\*.*?(?:\*/|\Z)", re.DOTALL)


class ParseError(ValueError):
    """Raised when score text cannot be parsed."""


def _parse_unsigned(text: str) -> Optional[int]:
    if not _UNSIGNED_TEXT.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _USIZE_MAX else None


def tokenize(text: str) -> list[str]:
    """Split text into tokens; ``[]{},`` stand alone and whitespace is dropped.

    Whitespace does not separate tokens: the characters on either side of it
    join into one token.
    """
    tokens: list[str] = []
    buffer: list[str] = []
    for char in text:
        if char in _DELIMITERS:
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
            tokens.append(char)
        elif not char.isspace():
            buffer.append(char)
    if buffer:
        tokens.append("".join(buffer))
    return tokens


def parse_token(token: str) -> ScoreElement:
    """Interpret a single token: ``r`` is a rest, ``t`` a tie, anything else a note.

    A note may end in ``-`` to mark it tied.
    """
    if token == "r":
        return Event(event_type=EventType.REST)
    if token == "t":
        return Tie()

    tied = token.endswith("-")
    core = token.rstrip("-")
    try:
        pitch = Pitch.parse(core)
    except PitchError as exc:
        raise ParseError(f"Invalid pitch `{core}`: {exc}") from exc
    try:
        pitch_cents: Optional[int] = pitch.cents()
    except PitchError:
        pitch_cents = None
    return Event(
        event_type=EventType.NOTE,
        pitch=pitch,
        pitch_cents=pitch_cents,
        tie=tied,
    )


def _take_group(stream: Iterator[str], opener: str, closer: str) -> list[str]:
    """Consume tokens up to the closer matching an already consumed opener."""
    depth = 1
    inner: list[str] = []
    for token in stream:
        if token == opener:
            depth += 1
        elif token == closer:
            depth -= 1
            if depth == 0:
                return inner
        inner.append(token)
    raise ParseError(f"Unmatched '{opener}'")


def parse_tokens(tokens: Iterable[str]) -> list[ScoreElement]:
    """Parse a token sequence into score elements, recursing into groups.

    ``[...]`` becomes a subdivision and ``{...}`` a chord of simple events.
    """
    elements: list[ScoreElement] = []
    stream = iter(tokens)
    for token in stream:
        if token == ",":
            continue
        if token == "[":
            inner = parse_tokens(_take_group(stream, "[", "]"))
            elements.append(Subdivision(elements=inner, base_division=len(inner)))
        elif token == "{":
            members = parse_tokens(_take_group(stream, "{", "}"))
            if not all(isinstance(member, Event) for member in members):
                raise ParseError("Chord may contain only simple events")
            elements.append(Chord(events=list(members)))
        else:
            elements.append(parse_token(token))
    return elements


def remove_comments(text: str) -> str:
    """Strip ``//`` line comments and ``/* */`` block comments.

    Newlines inside comments are kept so that line numbers stay the same. An
    unterminated block comment runs to the end of the text.
    """
    return _COMMENT.sub(lambda match: "\n" * match.group().count("\n"), text)


def parse_meter(text: str) -> Optional[tuple[int, int]]:
    """Read a meter such as ``4/4``; return None if the text is not one."""
    parts = text.split("/")
    if len(parts) < 2:
        return None
    numerator = _parse_unsigned(parts[0])
    denominator = _parse_unsigned(parts[1])
    if numerator is None or denominator is None:
        return None
    return numerator, denominator


def _split_beats(tokens: Iterable[str]) -> Iterator[list[str]]:
    """Group tokens into beats separated by top-level commas; empty beats vanish."""
    depth = 0
    beat: list[str] = []
    for token in tokens:
        if token in _OPENERS:
            depth += 1
        elif token in _CLOSERS:
            depth -= 1
        elif token == "," and depth == 0:
            if beat:
                yield beat
                beat = []
            continue
        beat.append(token)
    if beat:
        yield beat


def parse_score(text: str) -> Score:
    """Parse a whole score, one measure per non-empty line.

    A line reads ``[number:] [meter ][beat, beat, ...]``. The first measure
    must give a meter; later measures inherit the last one given.
    """
    measures: list[Measure] = []
    current_meter: Optional[tuple[int, int]] = None

    for line_no, raw_line in enumerate(remove_comments(text).split("\n"), start=1):
        line = raw_line.strip()
        if not line:
            continue

        head, colon, tail = line.partition(":")
        if colon:
            number = _parse_unsigned(head.strip())
            measure_no = number if number is not None else line_no
            body = tail.strip()
        else:
            measure_no = line_no
            body = line

        def fail(message: str) -> ParseError:
            return ParseError(f"Line {line_no} (Measure {measure_no}): {message}")

        meter: Optional[tuple[int, int]] = None
        content = body
        meter_part, space, rest = body.partition(" ")
        if space:
            meter = parse_meter(meter_part)
            if meter is not None:
                content = rest.strip()

        if current_meter is None and meter is None:
            raise fail("No meter specified in the first measure")
        if meter is not None:
            current_meter = meter
        assert current_meter is not None

        if not content:
            if meter is not None:
                continue
            raise fail("No content found")

        start = content.find("[")
        if start < 0:
            raise fail(f"missing '[' in content '{content}'")
        end = content.rfind("]")
        if end <= start:
            raise fail("missing ']'")

        beats = []
        for beat_tokens in _split_beats(tokenize(content[start + 1 : end])):
            try:
                beats.append(Beat(elements=parse_tokens(beat_tokens)))
            except ParseError as exc:
                raise fail(str(exc)) from exc

        expected = current_meter[0]
        if len(beats) != expected:
            raise fail(
                "Number of beats does not match meter "
                f"(expected {expected}, got {len(beats)})"
            )
        measures.append(Measure(beats=beats, meter=current_meter))

    return Score(measures=measures)