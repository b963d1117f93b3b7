import logging
import typing

import mido

import strikegrid.constants


logger = logging.getLogger(__name__)


@typing.runtime_checkable
class EncoderLike (typing.Protocol):

	"""
	Protocol for the sequence-container writer driven by the generator.

	Calls arrive in emission order: ``begin_container`` once, then for each
	track a name, a channel, note and time events and ``end_track``, and
	finally ``finalize``. Time deltas are in pulses (24 per quarter note).
	"""

	def begin_container (self, track_count: int) -> None: ...

	def set_track_name (self, name: str) -> None: ...

	def set_channel (self, channel: int) -> None: ...

	def note_on (self, pitch: int, velocity: int) -> None: ...

	def note_off (self, pitch: int) -> None: ...

	def advance_time (self, pulses: int) -> None: ...

	def end_track (self) -> None: ...

	def finalize (self) -> None: ...


class MidoEncoder:

	"""
	Writes the event stream as a type 1 Standard MIDI File using ``mido``.

	Each track is opened on the first call after ``begin_container`` or
	``end_track``. Time advances are held as pending ticks and applied as
	the delta time of the next message written to the track.
	"""

	def __init__ (self, file: typing.BinaryIO, ticks_per_pulse: int = strikegrid.constants.TICKS_PER_PULSE) -> None:

		"""
		Parameters:
			file: Binary stream the finished file is saved to.
			ticks_per_pulse: File resolution per internal pulse. The default
			    of 20 gives the standard 480 ticks per beat.
		"""

		self.file = file
		self.ticks_per_pulse = ticks_per_pulse

		self.midi_file: typing.Optional[mido.MidiFile] = None
		self.track_count = 0
		self.channel = 0

		self._track: typing.Optional[mido.MidiTrack] = None
		self._pending_ticks = 0

	def begin_container (self, track_count: int) -> None:

		self.midi_file = mido.MidiFile(type=1, ticks_per_beat=strikegrid.constants.MIDI_QUARTER_NOTE * self.ticks_per_pulse)
		self.track_count = track_count
		self.channel = 0
		self._track = None
		self._pending_ticks = 0

	def set_track_name (self, name: str) -> None:

		self._append(mido.MetaMessage('track_name', name=name))

	def set_channel (self, channel: int) -> None:

		"""Select the channel for subsequent note messages."""

		if not 0 <= channel < strikegrid.constants.MIDI_CHANNELS:
			raise ValueError(f"MIDI channel must be between 0 and {strikegrid.constants.MIDI_CHANNELS - 1}, got {channel}")

		self.channel = channel

	def note_on (self, pitch: int, velocity: int) -> None:

		self._append(mido.Message('note_on', channel=self.channel, note=pitch, velocity=velocity))

	def note_off (self, pitch: int) -> None:

		self._append(mido.Message('note_off', channel=self.channel, note=pitch, velocity=0))

	def advance_time (self, pulses: int) -> None:

		self._current_track()
		self._pending_ticks += pulses * self.ticks_per_pulse

	def end_track (self) -> None:

		"""Close the current track, carrying any pending time into its end marker."""

		self._append(mido.MetaMessage('end_of_track'))
		self._track = None

	def finalize (self) -> None:

		"""
		Save the container to the output stream.

		Raises:
			RuntimeError: If no container was begun or a track is still open.
			ValueError: If the number of finished tracks differs from the
			    count given to ``begin_container``.
		"""

		if self.midi_file is None:
			raise RuntimeError("finalize() called before begin_container()")

		if self._track is not None:
			raise RuntimeError("Cannot finalize while a track is still open")

		if len(self.midi_file.tracks) != self.track_count:
			raise ValueError(f"Expected {self.track_count} tracks, wrote {len(self.midi_file.tracks)}")

		self.midi_file.save(file=self.file)

		logger.info(f"Saved {self.track_count} tracks ({sum(len(t) for t in self.midi_file.tracks)} messages)")

	def _current_track (self) -> mido.MidiTrack:

		"""Return the open track, starting a new one if needed."""

		if self.midi_file is None:
			raise RuntimeError("begin_container() must be called before writing events")

		if self._track is None:
			self._track = mido.MidiTrack()
			self.midi_file.tracks.append(self._track)
			self._pending_ticks = 0

		return self._track

	def _append (self, message: typing.Union[mido.Message, mido.MetaMessage]) -> None:

		track = self._current_track()
		message.time = self._pending_ticks
		self._pending_ticks = 0
		track.append(message)
