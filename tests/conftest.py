import typing

import pytest

import strikegrid.config


class FakeEncoder:

	"""Encoder stub that records every call for inspection."""

	def __init__ (self) -> None:

		"""Start with an empty call log."""

		self.calls: typing.List[typing.Tuple[typing.Any, ...]] = []

	def begin_container (self, track_count: int) -> None:

		self.calls.append(("begin", track_count))

	def set_track_name (self, name: str) -> None:

		self.calls.append(("name", name))

	def set_channel (self, channel: int) -> None:

		self.calls.append(("channel", channel))

	def note_on (self, pitch: int, velocity: int) -> None:

		self.calls.append(("on", pitch, velocity))

	def note_off (self, pitch: int) -> None:

		self.calls.append(("off", pitch))

	def advance_time (self, pulses: int) -> None:

		self.calls.append(("advance", pulses))

	def end_track (self) -> None:

		self.calls.append(("end",))

	def finalize (self) -> None:

		self.calls.append(("finalize",))


@pytest.fixture
def fake_encoder () -> FakeEncoder:

	"""Return a fresh recording encoder."""

	return FakeEncoder()


@pytest.fixture
def tiny_config () -> strikegrid.config.SequenceConfig:

	"""One track over three pitches, only pitch 1 playable."""

	return strikegrid.config.SequenceConfig(track_count=1, pitch_range=3, allowed_pitches=(1,))
