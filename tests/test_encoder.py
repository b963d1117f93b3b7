import io

import mido
import pytest

import strikegrid.encoder


def _read_back (buffer: io.BytesIO) -> mido.MidiFile:

	return mido.MidiFile(file=io.BytesIO(buffer.getvalue()))


def test_mido_encoder_satisfies_protocol () -> None:

	"""MidoEncoder implements the encoder protocol."""

	assert isinstance(strikegrid.encoder.MidoEncoder(io.BytesIO()), strikegrid.encoder.EncoderLike)


def test_writes_single_track () -> None:

	"""Names, notes and time deltas are written in order on the selected channel."""

	buffer = io.BytesIO()
	encoder = strikegrid.encoder.MidoEncoder(buffer)

	encoder.begin_container(1)
	encoder.set_track_name("Track: 0")
	encoder.set_channel(3)
	encoder.note_on(60, 100)
	encoder.advance_time(24)
	encoder.note_off(60)
	encoder.advance_time(24)
	encoder.end_track()
	encoder.finalize()

	mid = _read_back(buffer)

	assert mid.type == 1
	assert mid.ticks_per_beat == 480
	assert len(mid.tracks) == 1

	messages = list(mid.tracks[0])

	assert messages[0].type == 'track_name'
	assert messages[0].name == "Track: 0"
	assert messages[1].type == 'note_on'
	assert (messages[1].channel, messages[1].note, messages[1].velocity, messages[1].time) == (3, 60, 100, 0)
	assert messages[2].type == 'note_off'
	assert (messages[2].channel, messages[2].note, messages[2].time) == (3, 60, 480)
	assert messages[3].type == 'end_of_track'
	assert messages[3].time == 480


def test_pending_time_accumulates () -> None:

	"""Several advances before a message add up into one delta."""

	buffer = io.BytesIO()
	encoder = strikegrid.encoder.MidoEncoder(buffer)

	encoder.begin_container(1)
	encoder.advance_time(24)
	encoder.advance_time(24)
	encoder.note_on(61, 100)
	encoder.end_track()
	encoder.finalize()

	messages = list(_read_back(buffer).tracks[0])

	assert messages[0].type == 'note_on'
	assert messages[0].time == 960


def test_writes_one_track_per_end_track () -> None:

	"""Each end_track closes a track and the next call opens a new one."""

	buffer = io.BytesIO()
	encoder = strikegrid.encoder.MidoEncoder(buffer)

	encoder.begin_container(2)

	for index in range(2):
		encoder.set_track_name(f"Track: {index}")
		encoder.set_channel(index)
		encoder.note_on(50 + index, 100)
		encoder.advance_time(24)
		encoder.end_track()

	encoder.finalize()

	mid = _read_back(buffer)

	assert [track.name for track in mid.tracks] == ["Track: 0", "Track: 1"]
	assert [track[1].channel for track in mid.tracks] == [0, 1]


def test_invalid_channel () -> None:

	"""Channels outside 0-15 are rejected."""

	encoder = strikegrid.encoder.MidoEncoder(io.BytesIO())
	encoder.begin_container(1)

	with pytest.raises(ValueError, match="channel"):
		encoder.set_channel(16)


def test_events_before_begin () -> None:

	"""Writing before begin_container is an error."""

	encoder = strikegrid.encoder.MidoEncoder(io.BytesIO())

	with pytest.raises(RuntimeError, match="begin_container"):
		encoder.note_on(60, 100)

	with pytest.raises(RuntimeError, match="begin_container"):
		encoder.finalize()


def test_finalize_with_open_track () -> None:

	"""A track must be ended before the file is saved."""

	encoder = strikegrid.encoder.MidoEncoder(io.BytesIO())
	encoder.begin_container(1)
	encoder.note_on(60, 100)

	with pytest.raises(RuntimeError, match="still open"):
		encoder.finalize()


def test_finalize_track_count_mismatch () -> None:

	"""The number of written tracks must match the declared count."""

	buffer = io.BytesIO()
	encoder = strikegrid.encoder.MidoEncoder(buffer)
	encoder.begin_container(2)
	encoder.note_on(60, 100)
	encoder.end_track()

	with pytest.raises(ValueError, match="Expected 2 tracks"):
		encoder.finalize()

	assert buffer.getvalue() == b""
