import logging
import sys

import strikegrid.config
import strikegrid.session


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main () -> None:

	"""
	Write one generated session into the current directory.

	Settings come from ``config.yaml`` when it exists.
	"""

	logger.info("strikegrid starting...")

	try:
		config = strikegrid.config.load_config()
		path = strikegrid.session.write_session(config)

	except (OSError, ValueError):
		logger.exception("Session generation failed")
		sys.exit(1)

	logger.info(f"Done: {path}")


if __name__ == "__main__":
	main()
