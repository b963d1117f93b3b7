"""Immutable generation settings and their optional YAML overlay."""

import dataclasses
import logging
import os
import typing

import yaml

import strikegrid.constants


logger = logging.getLogger(__name__)


@dataclasses.dataclass (frozen=True)
class SequenceConfig:

	"""
	Settings shared by every stage of a generation run.

	Built once at startup and passed explicitly to the matrix generator, the
	note tracker, the track emitter and the orchestrator. Defaults reproduce
	the standard session: eight tracks over a 120-pitch grid, a 15-note
	pentatonic pitch set, one-beat notes at velocity 100.

	Parameters:
		track_count: Number of tracks (and channels) to generate, 1-16.
		pitch_range: Width of every beat row, also the size of the note table.
		allowed_pitches: The only pitches that can ever be activated.
		beat_count_choices: Candidate track lengths, one picked per track.
		activation_draw_max: Upper bound (inclusive) of the per-cell draw.
		activation_threshold: A draw at or above this activates the cell.
		velocity: Note-on velocity for every strike.
		note_duration: Beats a struck note rings before it is released.
		beat_advance: Time advanced after each beat, in pulses.
		seed: Seed for the default random source, ``None`` for unseeded.
		latch_ringing: Keep the ringing flag set after release, so a
		    released pitch is turned off again on every later beat until it
		    is struck.
	"""

	track_count: int = strikegrid.constants.TRACK_COUNT
	pitch_range: int = strikegrid.constants.PITCH_RANGE
	allowed_pitches: typing.Tuple[int, ...] = strikegrid.constants.ALLOWED_PITCHES
	beat_count_choices: typing.Tuple[int, ...] = strikegrid.constants.BEAT_COUNT_CHOICES
	activation_draw_max: int = strikegrid.constants.ACTIVATION_DRAW_MAX
	activation_threshold: int = strikegrid.constants.ACTIVATION_THRESHOLD
	velocity: int = strikegrid.constants.NOTE_VELOCITY
	note_duration: int = strikegrid.constants.NOTE_DURATION
	beat_advance: int = strikegrid.constants.BEAT_ADVANCE
	seed: typing.Optional[int] = None
	latch_ringing: bool = False

	def __post_init__ (self) -> None:

		"""Normalise sequences to tuples and reject impossible settings."""

		object.__setattr__(self, "allowed_pitches", tuple(self.allowed_pitches))
		object.__setattr__(self, "beat_count_choices", tuple(self.beat_count_choices))

		if not 1 <= self.track_count <= strikegrid.constants.MIDI_CHANNELS:
			raise ValueError(f"track_count must be between 1 and {strikegrid.constants.MIDI_CHANNELS}, got {self.track_count}")

		if not 1 <= self.pitch_range <= strikegrid.constants.MIDI_NOTE_COUNT:
			raise ValueError(f"pitch_range must be between 1 and {strikegrid.constants.MIDI_NOTE_COUNT}, got {self.pitch_range}")

		for pitch in self.allowed_pitches:
			if not 0 <= pitch < self.pitch_range:
				raise ValueError(f"Allowed pitch {pitch} is outside the pitch range 0-{self.pitch_range - 1}")

		if not self.beat_count_choices:
			raise ValueError("beat_count_choices must not be empty")

		if any(count <= 0 for count in self.beat_count_choices):
			raise ValueError(f"Beat counts must be positive, got {self.beat_count_choices}")

		if not 0 <= self.activation_threshold <= self.activation_draw_max:
			raise ValueError("activation_threshold must lie between 0 and activation_draw_max")

		if not 0 <= self.velocity <= 127:
			raise ValueError(f"velocity must be between 0 and 127, got {self.velocity}")

		if self.note_duration <= 0:
			raise ValueError("note_duration must be positive")

		if self.beat_advance <= 0:
			raise ValueError("beat_advance must be positive")

	@property
	def allowed_pitch_set (self) -> typing.FrozenSet[int]:

		"""The allowed pitches as a set, for membership tests."""

		return frozenset(self.allowed_pitches)


def load_config (config_path: str = 'config.yaml') -> SequenceConfig:

	"""
	Load settings from a YAML file, falling back to the defaults.

	Keys are ``SequenceConfig`` field names. A missing file is not an error.

	Raises:
		ValueError: If the document is not a mapping, names an unknown
		    setting, or holds an invalid value.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return SequenceConfig()

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		return SequenceConfig()

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping of settings")

	known = {field.name for field in dataclasses.fields(SequenceConfig)}
	unknown = sorted(set(data) - known)

	if unknown:
		raise ValueError(f"Unknown settings in {config_path}: {', '.join(map(str, unknown))}")

	logger.info(f"Loaded config from {config_path}")

	return SequenceConfig(**data)
