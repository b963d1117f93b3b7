"""Turns a track's beats into encoder calls."""

import typing

import strikegrid.config
import strikegrid.encoder
import strikegrid.matrix
import strikegrid.notes


def strike_active_pitches (notes: typing.Sequence[strikegrid.notes.Note], row: typing.Sequence[int]) -> None:

	"""Flag every pitch active in ``row`` to strike on this beat."""

	for pitch, flag in enumerate(row):
		if flag == 1:
			notes[pitch].strike = True


def emit_track (
	track: strikegrid.matrix.Track,
	notes: typing.Sequence[strikegrid.notes.Note],
	encoder: strikegrid.encoder.EncoderLike,
	config: strikegrid.config.SequenceConfig
) -> None:

	"""
	Write one track's note events to ``encoder``.

	For each beat: set strike flags from the beat row, run the note tracker
	over the whole table, forward its events in order, then advance time by
	``config.beat_advance`` pulses. The track is closed after the last beat.

	``notes`` is mutated in place and may be shared between tracks.
	"""

	for row in track.beats:

		strike_active_pitches(notes, row)

		for event in strikegrid.notes.process_beat(notes, config.velocity, config.latch_ringing):

			if event.message_type == "note_on":
				encoder.note_on(event.note, event.velocity)
			else:
				encoder.note_off(event.note)

		encoder.advance_time(config.beat_advance)

	encoder.end_track()
