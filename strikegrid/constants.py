"""Timing, scale and generation constants.

The generator works on a beat grid and hands time to the encoder in pulses,
using **24 pulses per quarter note** (PPQN = 24) as its time base:

- `MIDI_QUARTER_NOTE = 24` - one beat (the base unit, and the beat advance)
- `MIDI_SIXTEENTH_NOTE = 6` - one sixteenth note
- `MIDI_WHOLE_NOTE = 96` - four beats

Written files use 480 ticks per beat, so each pulse becomes 20 ticks.
"""

# MIDI Standards - number of pulses in each

MIDI_SIXTEENTH_NOTE = 6
MIDI_EIGHTH_NOTE = 12
MIDI_QUARTER_NOTE = 24
MIDI_HALF_NOTE = 48
MIDI_WHOLE_NOTE = 96

TICKS_PER_PULSE = 20
TICKS_PER_BEAT = MIDI_QUARTER_NOTE * TICKS_PER_PULSE

MIDI_CHANNELS = 16
MIDI_NOTE_COUNT = 128

# Generation defaults

TRACK_COUNT = 8
PITCH_RANGE = 120

# Pentatonic on C#/Db across three octaves (49 = C#3 ... 82 = A#5).
ALLOWED_PITCHES = (
	49, 51, 54, 56, 58,
	61, 63, 66, 68, 70,
	73, 75, 78, 80, 82,
)

BEAT_COUNT_CHOICES = (8, 16, 24, 32, 64, 128)

# A pitch activates when randint(0, ACTIVATION_DRAW_MAX) >= ACTIVATION_THRESHOLD (3 in 101).
ACTIVATION_DRAW_MAX = 100
ACTIVATION_THRESHOLD = 98

NOTE_VELOCITY = 100
NOTE_DURATION = 1
BEAT_ADVANCE = MIDI_QUARTER_NOTE
