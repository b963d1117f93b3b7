"""Random activation grids, one per track.

Each track is a list of beats and each beat is a row of 0/1 flags, one per
pitch in the configured range. Only pitches in the allowed set can ever be
1; every other column is dead space kept so a row can be indexed by pitch
directly.
"""

import dataclasses
import logging
import random
import typing

import strikegrid.config


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Track:

	"""
	One track's slice of the activation matrix.

	``beats[b][p]`` is 1 when pitch ``p`` is struck on beat ``b``.
	"""

	index: int
	beats: typing.List[typing.List[int]]

	@property
	def channel (self) -> int:

		"""Output channel, the track index."""

		return self.index

	@property
	def name (self) -> str:

		"""Track name written into the output."""

		return f"Track: {self.index}"

	@property
	def beat_count (self) -> int:

		return len(self.beats)


def generate_matrix (config: strikegrid.config.SequenceConfig, rng: random.Random) -> typing.List[Track]:

	"""
	Build a random activation grid for every track.

	All track lengths are drawn first, one per track from
	``config.beat_count_choices``. Cells are then filled track by track, beat
	by beat, pitch by pitch; each allowed pitch is activated when
	``rng.randint(0, activation_draw_max) >= activation_threshold``.
	Disallowed pitches consume no draws.

	The same seeded ``rng`` state always yields the same matrix.
	"""

	allowed = config.allowed_pitch_set

	lengths = [rng.choice(config.beat_count_choices) for _ in range(config.track_count)]

	logger.debug(f"Track lengths: {lengths}")

	tracks: typing.List[Track] = []

	for index, length in enumerate(lengths):

		beats = [[0] * config.pitch_range for _ in range(length)]

		for row in beats:
			for pitch in range(config.pitch_range):
				if pitch in allowed and rng.randint(0, config.activation_draw_max) >= config.activation_threshold:
					row[pitch] = 1

		tracks.append(Track(index=index, beats=beats))

	return tracks


def active_pitches (row: typing.Sequence[int]) -> typing.List[int]:

	"""Return the pitches set to 1 in a beat row, in ascending order."""

	return [pitch for pitch, flag in enumerate(row) if flag == 1]
