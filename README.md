# vecscore

`vecscore` reads musical scores written in a compact, line-based text
notation. It turns them into a tree of Python objects. A `Score` is made of
`Measure`s, a `Measure` holds `Beat`s, and a `Beat` holds `Event`s (notes and
rests), `Subdivision`s, `Chord`s and `Tie` markers. All of these are defined in
`vecscore.data`.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## The notation

Each non-empty line is one measure:

```
1: 4/4 [C4, D4, [E4, F4], {C4, E4, G4}]
2: [G4-, t, r, 60]
```

- **Measure number.** An optional `N:` prefix gives the measure number, which
  is used in error messages. If the text before the colon is not a number, the
  line number is used instead.
- **Meter.** A meter such as `4/4` may come next, followed by a space. The
  first measure must have one. Later measures keep the last meter given.
- **Beats.** The content runs from the first `[` to the last `]` of the line.
  Inside it, top-level commas separate beats, and empty beats are skipped. The
  number of beats must equal the meter's numerator. The denominator is stored
  but not checked.
- **Notes.** A note is a letter `A`–`G` (either case), an optional `#` or `b`,
  and an integer octave, as in `C#4` or `Bb3`. A bare number from 0 to 255 is
  taken as a MIDI note number, as in `60`.
- **Rests.** `r` is a rest.
- **Ties.** A trailing `-` marks a note as tied, as in `G4-`. A `t` token is
  kept in the beat as a `Tie` marker.
- **Subdivisions.** `[...]` inside a beat subdivides it. Its `base_division`
  is the number of elements it holds.
- **Chords.** `{...}` is a chord. It may hold only notes and rests.
- **Whitespace.** Whitespace inside the brackets is dropped without splitting
  tokens, so `C4 D4` reads as the single token `C4D4`. Separate elements with
  commas.
- **Comments.** `// line` and `/* block */` comments may appear anywhere. An
  unclosed block comment runs to the end of the text.

Each note `Event` carries its `Pitch` and `pitch_cents`, which is the MIDI
number times 100. `pitch_cents` is `None` when the pitch lies outside MIDI
0–127. Every event has a `duration` of `1.0` as parsed.

## Command line

```
vecscore [INPUT] [-o OUTPUT]
```

The command reads `INPUT` (default `sample.vsc`), prints the parsed score and
writes the same text to `OUTPUT` (default `output.txt`). A read, parse or
write error is reported on standard error, and the command then exits with
status 1.

## Library use

```python
from vecscore.parser import parse_score, ParseError
from vecscore.processor import process_ties
from vecscore.data import Pitch
from vecscore.cli import format_score

score = parse_score("1: 2/4 [C4-, t]")
merged = process_ties(
    [element for beat in score.measures[0].beats for element in beat.elements]
)
# merged[0] is the C4 event, tied, with duration 2.0

pitch = Pitch.parse("A4")
pitch.midi_number()   # 69
pitch.cents()         # 6900

try:
    parse_score("1: [C4]")
except ParseError as exc:
    print(exc)        # Line 1 (Measure 1): No meter specified in the first measure

print(format_score(score))
```

`vecscore.parser` also exposes the steps it is built from:

- `remove_comments` strips comments.
- `tokenize` splits text into tokens.
- `parse_token` and `parse_tokens` turn tokens into elements.
- `parse_meter` reads a meter such as `3/4`.

`Pitch.parse` raises `PitchError` for text it cannot read, and so does
`Pitch.midi_number` for a note name outside 0–127.

`process_ties` folds each `Tie` into the element before it. If that element
is an `Event`, it is marked tied and lengthened by one unit. If it is anything
else, it is dropped. A tie with nothing before it is ignored. `parse_score`
does not call `process_ties`, so call it yourself where you want ties merged.

## What it does not do

`vecscore` only parses and reports. It does not draw notation to PDF, SVG or
any other format. It does not play, write or export MIDI or audio.