import pytest

from vecscore.data import (
    Accidental,
    Beat,
    Chord,
    Event,
    EventType,
    Measure,
    NoteLetter,
    Pitch,
    PitchError,
    Score,
    Subdivision,
    Tie,
)


def test_parse_midi_number():
    pitch = Pitch.parse("60")
    assert pitch == Pitch(midi=60)
    assert pitch.midi_number() == 60


def test_parse_midi_number_with_plus_sign():
    assert Pitch.parse("+72") == Pitch(midi=72)


def test_parse_midi_above_127_is_kept_as_number():
    pitch = Pitch.parse("200")
    assert pitch.midi_number() == 200


def test_number_above_byte_is_not_a_midi_number():
    with pytest.raises(PitchError, match="Invalid note letter"):
        Pitch.parse("256")


def test_parse_note_name_fields():
    pitch = Pitch.parse("C#4")
    assert pitch.letter is NoteLetter.C
    assert pitch.accidental is Accidental.SHARP
    assert pitch.octave == 4
    assert pitch.midi is None


def test_parse_flat():
    pitch = Pitch.parse("Bb3")
    assert pitch.letter is NoteLetter.B
    assert pitch.accidental is Accidental.FLAT
    assert pitch.octave == 3


def test_lowercase_letter_is_accepted():
    assert Pitch.parse("c4") == Pitch.parse("C4")


def test_middle_c_is_sixty():
    assert Pitch.parse("C4").midi_number() == Pitch.parse("60").midi_number()


def test_enharmonic_equivalents_share_midi_number():
    assert Pitch.parse("C#4").midi_number() == Pitch.parse("Db4").midi_number()
    assert Pitch.parse("E#4").midi_number() == Pitch.parse("F4").midi_number()
    assert Pitch.parse("Cb4").midi_number() == Pitch.parse("B3").midi_number()


def test_octave_step_is_twelve_semitones():
    for name in ["C", "D", "E", "F", "G", "A", "B"]:
        low = Pitch.parse(f"{name}3").midi_number()
        high = Pitch.parse(f"{name}4").midi_number()
        assert high - low == 12


def test_letters_ascend_within_octave():
    numbers = [Pitch.parse(f"{n}4").midi_number() for n in "CDEFGAB"]
    assert numbers == sorted(numbers)
    assert len(set(numbers)) == len(numbers)


def test_range_limits():
    assert Pitch.parse("C-1").midi_number() == Pitch.parse("0").midi_number()
    assert Pitch.parse("G9").midi_number() == Pitch.parse("127").midi_number()


def test_out_of_range_high():
    with pytest.raises(PitchError, match="out of MIDI range"):
        Pitch.parse("G#9").midi_number()


def test_out_of_range_low():
    with pytest.raises(PitchError, match="out of MIDI range"):
        Pitch.parse("Cb-1").midi_number()


def test_cents_is_hundred_times_midi():
    for text in ["60", "A4", "Bb2", "0"]:
        pitch = Pitch.parse(text)
        assert pitch.cents() == pitch.midi_number() * 100


def test_cents_out_of_range_raises():
    with pytest.raises(PitchError):
        Pitch.parse("B9").cents()


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "Empty input"),
        ("H4", "Invalid note letter"),
        ("C", "Missing octave information"),
        ("C#", "Invalid octave"),
        ("Cx4", "Invalid octave"),
        ("C4.5", "Invalid octave"),
        ("C 4", "Invalid octave"),
    ],
)
def test_parse_errors(text, message):
    with pytest.raises(PitchError, match=message):
        Pitch.parse(text)


def test_pitch_error_is_value_error():
    with pytest.raises(ValueError):
        Pitch.parse("")


def test_pitch_needs_exactly_one_form():
    with pytest.raises(ValueError):
        Pitch()
    with pytest.raises(ValueError):
        Pitch(midi=60, letter=NoteLetter.C)


def test_event_defaults():
    event = Event(EventType.REST)
    assert event.pitch is None
    assert event.pitch_cents is None
    assert event.tie is False
    assert event.duration == 1.0


def test_containers_hold_elements():
    note = Event(EventType.NOTE, Pitch.parse("C4"), Pitch.parse("C4").cents())
    sub = Subdivision([note, Tie()], 2)
    chord = Chord([note])
    beat = Beat([sub, chord])
    measure = Measure([beat], (1, 4))
    score = Score([measure])
    assert score.measures[0].beats[0].elements == [sub, chord]
    assert score.measures[0].meter == (1, 4)
    assert sub.elements[1] == Tie()