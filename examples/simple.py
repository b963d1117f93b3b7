import logging

import strikegrid

logging.basicConfig(level=logging.INFO)

# Same seed, same file.
config = strikegrid.SequenceConfig(seed=2024)

path = strikegrid.write_session(config)

print(f"Wrote {path}")
