import logging
import random

import strikegrid
import strikegrid.matrix

logging.basicConfig(level=logging.INFO)

# A minor pentatonic over two octaves, longer notes, four short tracks.
A_MINOR_PENTATONIC = (57, 60, 62, 64, 67, 69, 72, 74, 76, 79)

config = strikegrid.SequenceConfig(
	track_count=4,
	allowed_pitches=A_MINOR_PENTATONIC,
	beat_count_choices=(16, 32),
	activation_threshold=95,
	note_duration=2,
)

rng = random.Random(7)

with open("minor_sketch.mid", "wb") as f:
	tracks = strikegrid.generate_session(strikegrid.MidoEncoder(f), config, rng)

for track in tracks:
	hits = sum(len(strikegrid.matrix.active_pitches(row)) for row in track.beats)
	print(f"{track.name}: {track.beat_count} beats, {hits} strikes")
