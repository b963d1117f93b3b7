"""Per-pitch note state and the beat-by-beat on/off decisions.

One :class:`Note` exists for every pitch in the range. The table is created
once per run and shared by all tracks in order, so a note still ringing when
one track ends is released on the first beat of the next track (on the next
track's channel). Callers wanting isolated tracks can pass a fresh table per track.
"""

import dataclasses
import typing

import strikegrid.config


@dataclasses.dataclass
class Note:

	"""Ringing/strike state of a single pitch."""

	pitch: int
	duration: int = 1
	beats_played: int = 0
	ringing: bool = False
	strike: bool = False


@dataclasses.dataclass
class NoteEvent:

	"""A note-on or note-off decision produced by :func:`process_beat`."""

	message_type: str
	note: int
	velocity: int = 0


def create_note_table (config: strikegrid.config.SequenceConfig) -> typing.List[Note]:

	"""Create one idle note per pitch, each lasting ``config.note_duration`` beats."""

	return [Note(pitch=pitch, duration=config.note_duration) for pitch in range(config.pitch_range)]


def process_beat (
	notes: typing.Sequence[Note],
	velocity: int,
	latch_ringing: bool = False
) -> typing.List[NoteEvent]:

	"""
	Advance every note by one beat and return the resulting events.

	Pitches are visited once, in index order, and each one is decayed and
	then struck before the next pitch is looked at:

	1. Decay - a ringing note counts the beat; once it has played for its
	   duration a ``note_off`` is emitted. The ringing flag is cleared at
	   that point unless ``latch_ringing`` is set, in which case the note
	   keeps ringing in the table and is released again every beat.
	2. Strike - a note flagged to strike emits a ``note_off`` first if it is
	   still ringing, then a ``note_on`` at ``velocity``. Its beat count is
	   reset, the strike flag cleared and the ringing flag set.

	Strike flags must already be set for this beat.
	"""

	events: typing.List[NoteEvent] = []

	for note in notes:

		if note.ringing:
			note.beats_played += 1

			if note.beats_played >= note.duration:
				events.append(NoteEvent("note_off", note.pitch))

				if not latch_ringing:
					note.ringing = False

		if note.strike:

			# Re-struck while ringing: close the old note before opening the new one.
			if note.ringing:
				events.append(NoteEvent("note_off", note.pitch))

			events.append(NoteEvent("note_on", note.pitch, velocity))

			note.beats_played = 0
			note.strike = False
			note.ringing = True

	return events
