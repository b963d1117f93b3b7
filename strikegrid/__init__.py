"""
strikegrid - procedural multi-track MIDI session generator.

Each run rolls a random activation grid per track (beats by pitches, with
only a pentatonic pitch set ever switched on), walks the grid beat by beat
through a per-pitch note state tracker, and writes the resulting note-on,
note-off and time events as a type 1 Standard MIDI File with one track per
channel.

- **Activation matrix.** ``generate_matrix()`` picks a length for every
  track from a fixed set (8 to 128 beats) and activates allowed pitches
  with a small fixed probability.
- **Note state.** ``process_beat()`` decays ringing notes and strikes new
  ones in a single ordered pass over the pitches, so events inside a beat
  always come out in pitch order.
- **Deterministic.** Pass a seeded ``random.Random`` (or ``seed=`` in the
  config) and the same file is produced every time.
- **Pluggable output.** Anything implementing ``EncoderLike`` can receive
  the event stream; ``MidoEncoder`` writes it to disk with mido.

Minimal example:

    ```python
    import strikegrid

    config = strikegrid.SequenceConfig(seed=42)
    path = strikegrid.write_session(config)
    ```

Package-level exports: ``SequenceConfig``, ``MidoEncoder``,
``generate_session``, ``write_session``.
"""

import strikegrid.config
import strikegrid.encoder
import strikegrid.session


SequenceConfig = strikegrid.config.SequenceConfig
MidoEncoder = strikegrid.encoder.MidoEncoder
generate_session = strikegrid.session.generate_session
write_session = strikegrid.session.write_session
