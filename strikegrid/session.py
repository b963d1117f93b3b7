"""Drives a whole generation run from matrix to finished file."""

import logging
import pathlib
import random
import time
import typing

import strikegrid.config
import strikegrid.emitter
import strikegrid.encoder
import strikegrid.matrix
import strikegrid.notes


logger = logging.getLogger(__name__)


def validate_note_table (notes: typing.Sequence[strikegrid.notes.Note], tracks: typing.Sequence[strikegrid.matrix.Track]) -> None:

	"""
	Check that every beat row is exactly as wide as the note table.

	Raises:
		ValueError: On the first row whose width differs.
	"""

	for track in tracks:
		for row in track.beats:
			if len(row) != len(notes):
				raise ValueError("Number of playable notes and number of possible notes at each beat must be equal.")


def generate_session (
	encoder: strikegrid.encoder.EncoderLike,
	config: typing.Optional[strikegrid.config.SequenceConfig] = None,
	rng: typing.Optional[random.Random] = None,
	tracks: typing.Optional[typing.List[strikegrid.matrix.Track]] = None
) -> typing.List[strikegrid.matrix.Track]:

	"""
	Generate a session and write it through ``encoder``.

	A single note table is created and shared across all tracks, which are
	written in index order, each named after its index and sent on the
	channel of the same number. The encoder is finalized at the end.

	Parameters:
		encoder: Receives the event stream.
		config: Generation settings, the defaults when omitted.
		rng: Random source. When omitted, ``random.Random(config.seed)``.
		tracks: A prebuilt activation matrix to write instead of
		    generating one.

	Returns:
		The tracks that were written.

	Raises:
		ValueError: If a beat row does not match the note table width.
		    Raised before anything is sent to the encoder.
	"""

	if config is None:
		config = strikegrid.config.SequenceConfig()

	if rng is None:
		rng = random.Random(config.seed)

	notes = strikegrid.notes.create_note_table(config)

	if tracks is None:
		tracks = strikegrid.matrix.generate_matrix(config, rng)

	validate_note_table(notes, tracks)

	encoder.begin_container(len(tracks))

	for track in tracks:

		logger.info(f"Writing track/channel: {track.index} ({track.beat_count} beats)")

		encoder.set_track_name(track.name)
		encoder.set_channel(track.channel)

		strikegrid.emitter.emit_track(track, notes, encoder, config)

	encoder.finalize()

	return tracks


def session_filename (timestamp: typing.Optional[float] = None) -> str:

	"""Return ``session-<unix seconds>-test.mid`` for ``timestamp`` (default: now)."""

	if timestamp is None:
		timestamp = time.time()

	return f"session-{int(timestamp)}-test.mid"


def write_session (
	config: typing.Optional[strikegrid.config.SequenceConfig] = None,
	rng: typing.Optional[random.Random] = None,
	directory: typing.Union[str, pathlib.Path] = "."
) -> pathlib.Path:

	"""
	Generate a session into a new timestamped MIDI file in ``directory``.

	The file is closed on every exit path, including a failed precondition.

	Returns:
		The path of the written file.

	Raises:
		OSError: If the file cannot be created or written.
		ValueError: If the matrix does not match the note table.
	"""

	path = pathlib.Path(directory) / session_filename()

	logger.info(f"Writing session to {path}")

	try:
		with open(path, 'wb') as f:
			generate_session(strikegrid.encoder.MidoEncoder(f), config, rng)

	except OSError as e:
		logger.error(f"Could not write MIDI file {path}: {e}")
		raise

	return path
